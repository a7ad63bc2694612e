"""Add command for installing a single component."""

import click

from skillsync.aliases import normalize_type
from skillsync.cli.output import report_extraction, success, user_output
from skillsync.context import SkillsyncContext
from skillsync.error_boundary import cli_error_boundary
from skillsync.operations.install import add_component


@click.command()
@click.argument("component_type", metavar="TYPE")
@click.argument("name")
@click.pass_obj
@cli_error_boundary
def add(ctx: SkillsyncContext, component_type: str, name: str) -> None:
    """Add a component at the project's installed version.

    TYPE is language (lang, l), framework (fw, f) or workflow (wf, w).

    Examples:

        skillsync add framework django
        skillsync add lang ts
    """
    normalized_type = normalize_type(component_type)
    change = add_component(ctx.downloader, ctx.cwd, normalized_type, name)
    component = change.component

    if not change.changed:
        user_output(f"{component.type.capitalize()} '{component.name}' is already installed")
        return

    success(f"Added {component.type} {component.name}")
    if change.result is not None:
        report_extraction(change.result)
