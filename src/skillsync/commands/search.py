"""Search command for finding components by keyword."""

import click
from rich.console import Console
from rich.table import Table

from skillsync.aliases import normalize_type
from skillsync.cli.output import user_output
from skillsync.error_boundary import cli_error_boundary
from skillsync.search import search as search_components


@click.command()
@click.argument("query")
@click.option("-t", "--type", "type_filter", default=None, help="Only search one component type")
@click.option("-n", "--limit", default=20, show_default=True, type=click.IntRange(min=1))
@cli_error_boundary
def search(query: str, type_filter: str | None, limit: int) -> None:
    """Search components by name, description or tag.

    Examples:

        skillsync search react
        skillsync search --type fw django
    """
    component_type = normalize_type(type_filter) if type_filter is not None else None
    hits = search_components(query, component_type)[:limit]
    if not hits:
        user_output(f"No components found matching '{query}'")
        user_output("Try 'skillsync list --available' to see every component")
        return

    table = Table(title=f"Results for '{query}'")
    table.add_column("Type")
    table.add_column("Name")
    table.add_column("Description")
    for hit in hits:
        table.add_row(hit.component.type, hit.component.name, hit.component.description)
    Console().print(table)
