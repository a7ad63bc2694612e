"""Doctor command for checking and repairing a project."""

import click

from skillsync.cli.output import report_extraction, user_output
from skillsync.context import SkillsyncContext
from skillsync.error_boundary import cli_error_boundary
from skillsync.operations.doctor import run_doctor


@click.command()
@click.option("--fix", is_flag=True, help="Restore missing files and directories")
@click.pass_obj
@cli_error_boundary
def doctor(ctx: SkillsyncContext, fix: bool) -> None:
    """Check installed skills for missing files and drift.

    Exits with status 1 when any check fails.
    """
    report = run_doctor(ctx.downloader, ctx.cwd, fix=fix)

    for check in report.checks:
        if check.passed:
            icon = click.style("✓", fg="green")
        else:
            icon = click.style("✗", fg="red")
        user_output(f"{icon} {check.name}: {check.message}")

    if report.created_dirs:
        user_output(f"\nCreated directories: {', '.join(report.created_dirs)}")
    if report.repair is not None:
        user_output("\nRepair:")
        report_extraction(report.repair)

    user_output()
    if report.healthy:
        user_output(click.style("Status: Healthy", fg="green", bold=True))
        return

    user_output(
        click.style(f"Status: Issues Found ({report.fixable_count} fixable)", fg="red", bold=True)
    )
    if report.fixable_count and not fix:
        user_output("Run 'skillsync doctor --fix' to repair fixable issues")
    raise SystemExit(1)
