"""Diff command for comparing upstream versions."""

import click

from skillsync.cli.output import user_output
from skillsync.context import SkillsyncContext
from skillsync.error_boundary import cli_error_boundary
from skillsync.io.manifest import load_manifest
from skillsync.operations.diff import diff_versions
from skillsync.versioning import validate_version


@click.command()
@click.argument("old_version", required=False)
@click.argument("new_version", required=False)
@click.pass_obj
@cli_error_boundary
def diff(ctx: SkillsyncContext, old_version: str | None, new_version: str | None) -> None:
    """Show files added, removed and modified between two versions.

    With no arguments, compares the installed version with the latest.
    """
    if (old_version is None) != (new_version is None):
        raise click.UsageError("Provide both OLD_VERSION and NEW_VERSION, or neither")

    if old_version is None or new_version is None:
        old = load_manifest(ctx.cwd).version
        new = ctx.downloader.latest_version()
    else:
        old = validate_version(old_version)
        new = validate_version(new_version)

    result = diff_versions(ctx.downloader, old, new)
    user_output(f"Comparing v{result.old_version} -> v{result.new_version}")
    if not result.has_changes:
        user_output("No differences")
        return

    for path in result.added:
        user_output(click.style(f"  + {path}", fg="green"))
    for path in result.removed:
        user_output(click.style(f"  - {path}", fg="red"))
    for path in result.modified:
        user_output(click.style(f"  ~ {path}", fg="yellow"))
    user_output(
        f"Added: {len(result.added)}, Removed: {len(result.removed)}, "
        f"Modified: {len(result.modified)}, Unchanged: {result.unchanged}"
    )
