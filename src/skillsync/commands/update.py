"""Update command for moving a project to another upstream version."""

import click

from skillsync.cli.output import report_extraction, success, user_output
from skillsync.context import SkillsyncContext
from skillsync.error_boundary import cli_error_boundary
from skillsync.io.manifest import load_manifest
from skillsync.operations.update import apply_update, check_only, plan_update
from skillsync.versioning import validate_version


@click.command()
@click.option("--check", "check_flag", is_flag=True, help="Only report whether an update exists")
@click.option("--diff", "diff_flag", is_flag=True, help="Show which files would change")
@click.option("--force", is_flag=True, help="Overwrite existing files, discarding local edits")
@click.option("--version", "target_version", default=None, help="Update to this version")
@click.pass_obj
@cli_error_boundary
def update(
    ctx: SkillsyncContext,
    check_flag: bool,
    diff_flag: bool,
    force: bool,
    target_version: str | None,
) -> None:
    """Update installed skills to the latest (or a given) version.

    Without --force only files missing from the project are written, so
    local edits are never overwritten.
    """
    if check_flag and target_version is not None:
        raise click.UsageError("--check compares against the latest version; drop --version")

    if check_flag:
        result = check_only(ctx.downloader, ctx.cwd)
        user_output(f"Current version: {result.current_version}")
        user_output(f"Latest version:  {result.latest_version}")
        if result.update_available:
            user_output(
                f"Update available: {result.current_version} -> {result.latest_version}"
            )
            user_output("Run 'skillsync update' to apply it")
        else:
            success("Up to date")
        return

    manifest = load_manifest(ctx.cwd)
    if target_version is not None:
        target = validate_version(target_version)
    else:
        target = ctx.downloader.latest_version()

    if target == manifest.version and not force:
        success(f"Already up to date (v{manifest.version})")
        return

    if diff_flag:
        plan = plan_update(ctx.downloader, ctx.cwd, target)
        user_output(f"Changes from v{manifest.version} to v{target}:")
        for path in plan.new:
            user_output(click.style(f"  + {path}", fg="green"))
        for path in plan.modified:
            user_output(click.style(f"  ~ {path}", fg="yellow"))
        user_output(
            f"{len(plan.new)} new, {len(plan.modified)} modified, "
            f"{len(plan.unchanged)} unchanged"
        )
        if plan.modified and not force:
            user_output("Modified files are kept unless you pass --force")
        return

    result = apply_update(ctx.downloader, ctx.cwd, target, force_overwrite=force)
    success(f"Updated v{manifest.version} -> v{target}")
    report_extraction(result)
    if result.skipped and not force:
        user_output("Existing files were kept; use --force to overwrite them")
