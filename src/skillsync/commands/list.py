"""List command for showing installed or available components."""

import click
from rich.console import Console
from rich.table import Table

from skillsync import registry
from skillsync.aliases import normalize_type
from skillsync.context import SkillsyncContext
from skillsync.error_boundary import cli_error_boundary
from skillsync.errors import ConfigNotFound
from skillsync.io.manifest import has_component, installed_names, load_manifest
from skillsync.io.skill import read_skill_description
from skillsync.models.component import COMPONENT_TYPES, ComponentType


@click.command(name="list")
@click.option("-a", "--available", is_flag=True, help="Show every component in the catalog")
@click.option("-t", "--type", "type_filter", default=None, help="Only show one component type")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: SkillsyncContext, available: bool, type_filter: str | None) -> None:
    """List installed components (or all available ones)."""
    types: tuple[ComponentType, ...] = COMPONENT_TYPES
    if type_filter is not None:
        types = (normalize_type(type_filter),)

    console = Console()
    if available:
        try:
            manifest = load_manifest(ctx.cwd)
        except ConfigNotFound:
            manifest = None
        table = Table(title="Available components")
        table.add_column("Type")
        table.add_column("Name")
        table.add_column("Description")
        table.add_column("Installed")
        for component_type in types:
            for component in registry.all_components(component_type):
                installed = manifest is not None and has_component(
                    manifest, component_type, component.name
                )
                table.add_row(
                    component_type,
                    component.name,
                    component.description,
                    "✓" if installed else "",
                )
        console.print(table)
        return

    manifest = load_manifest(ctx.cwd)
    table = Table(title=f"Installed components (v{manifest.version})")
    table.add_column("Type")
    table.add_column("Name")
    table.add_column("Description")
    for component_type in types:
        for name in installed_names(manifest, component_type):
            component = registry.find_component(component_type, name)
            if component is None:
                table.add_row(component_type, name, "[red]unknown component[/red]")
                continue
            description = read_skill_description(ctx.cwd / component.marker_path)
            table.add_row(component_type, name, description or component.description)
    console.print(table)
