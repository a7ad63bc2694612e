"""Remove command for uninstalling a single component."""

import click

from skillsync.aliases import normalize_type
from skillsync.cli.output import success, user_output, warning
from skillsync.context import SkillsyncContext
from skillsync.error_boundary import cli_error_boundary
from skillsync.operations.install import remove_component


@click.command()
@click.argument("component_type", metavar="TYPE")
@click.argument("name")
@click.pass_obj
@cli_error_boundary
def remove(ctx: SkillsyncContext, component_type: str, name: str) -> None:
    """Remove an installed component and delete its files.

    Examples:

        skillsync remove framework django
    """
    normalized_type = normalize_type(component_type)
    change = remove_component(ctx.cwd, normalized_type, name)
    component = change.component

    if not change.changed:
        user_output(f"{component.type.capitalize()} '{component.name}' is not installed")
        return

    if not change.deleted:
        warning(f"{component.path} was already missing")
    success(f"Removed {component.type} {component.name}")
