"""Config commands for reading and editing the project manifest."""

import click

from skillsync.cli.output import success, user_output
from skillsync.context import SkillsyncContext
from skillsync.error_boundary import cli_error_boundary
from skillsync.io.manifest import VALID_KEYS, get_value, load_manifest, save_manifest, set_value


@click.group(name="config")
def config_group() -> None:
    """View or edit skillsync.yaml."""


@config_group.command(name="list")
@click.pass_obj
@cli_error_boundary
def list_config(ctx: SkillsyncContext) -> None:
    """Show every manifest value."""
    manifest = load_manifest(ctx.cwd)
    for key in VALID_KEYS:
        user_output(f"{key}: {get_value(manifest, key) or '(none)'}")


@config_group.command(name="get")
@click.argument("key")
@click.pass_obj
@cli_error_boundary
def get_config(ctx: SkillsyncContext, key: str) -> None:
    """Print one manifest value."""
    manifest = load_manifest(ctx.cwd)
    click.echo(get_value(manifest, key))


@config_group.command(name="set")
@click.argument("key")
@click.argument("value")
@click.pass_obj
@cli_error_boundary
def set_config(ctx: SkillsyncContext, key: str, value: str) -> None:
    """Set one manifest value; lists take comma-separated names.

    Only the manifest changes; run 'skillsync doctor --fix' to install
    files for newly listed components.
    """
    manifest = load_manifest(ctx.cwd)
    save_manifest(ctx.cwd, set_value(manifest, key, value))
    success(f"Set {key}")
