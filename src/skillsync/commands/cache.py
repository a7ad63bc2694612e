"""Cache commands for inspecting and clearing downloaded versions."""

import click

from skillsync.cli.output import format_size, success, user_output
from skillsync.context import SkillsyncContext
from skillsync.error_boundary import cli_error_boundary


@click.group(name="cache")
def cache_group() -> None:
    """Manage the local cache of downloaded versions."""


@cache_group.command(name="info")
@click.pass_obj
@cli_error_boundary
def cache_info(ctx: SkillsyncContext) -> None:
    """Show cache location, cached versions and size."""
    downloader = ctx.downloader
    versions = downloader.cached_versions()
    user_output(f"Location: {downloader.cache_dir}")
    user_output(f"Versions: {', '.join(versions) if versions else '(none)'}")
    user_output(f"Size:     {format_size(downloader.cache_size())}")


@cache_group.command(name="clear")
@click.pass_obj
@cli_error_boundary
def cache_clear(ctx: SkillsyncContext) -> None:
    """Delete every cached version."""
    removed = ctx.downloader.clear_cache()
    success(f"Removed {removed} cache entr{'y' if removed == 1 else 'ies'}")
