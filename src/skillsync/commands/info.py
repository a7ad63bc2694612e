"""Info command for showing details about one component."""

import click

from skillsync import registry
from skillsync.aliases import normalize_name, normalize_type
from skillsync.cli.output import format_size, user_output
from skillsync.context import SkillsyncContext
from skillsync.error_boundary import cli_error_boundary
from skillsync.errors import ConfigNotFound
from skillsync.io.manifest import has_component, load_manifest
from skillsync.io.skill import read_skill_description
from skillsync.models.manifest import InstalledManifest
from skillsync.operations.install import require_component


def _field(label: str, value: str) -> None:
    user_output(f"  {label + ':':<14} {value}")


@click.command()
@click.argument("component_type", metavar="TYPE")
@click.argument("name")
@click.option("-p", "--preview", default=0, type=click.IntRange(min=0), help="Lines of SKILL.md")
@click.option("--no-related", is_flag=True, help="Skip related components")
@click.pass_obj
@cli_error_boundary
def info(
    ctx: SkillsyncContext, component_type: str, name: str, preview: int, no_related: bool
) -> None:
    """Show description, install status and related components.

    Examples:

        skillsync info framework react
        skillsync info lang typescript --preview 15
    """
    normalized_type = normalize_type(component_type)
    component = require_component(normalized_type, normalize_name(normalized_type, name))

    manifest: InstalledManifest | None
    try:
        manifest = load_manifest(ctx.cwd)
    except ConfigNotFound:
        manifest = None
    installed = manifest is not None and has_component(manifest, component.type, component.name)

    user_output(click.style(f"Component: {component.name}", bold=True))
    _field("Type", component.type)
    _field("Description", component.description)

    skill_dir = ctx.cwd / component.path
    if installed:
        _field("Status", click.style("✓ Installed", fg="green"))
        _field("Path", component.path)
        if skill_dir.is_dir():
            files = [path for path in skill_dir.rglob("*") if path.is_file()]
            size = sum(path.stat().st_size for path in files)
            _field("Files", f"{len(files)} ({format_size(size)})")
        summary = read_skill_description(ctx.cwd / component.marker_path)
        if summary is not None:
            _field("Summary", summary)
    else:
        _field("Status", "Not installed")
        _field("Install path", component.path)

    related = [] if no_related else registry.related_components(component)
    if related:
        user_output("\nRelated components:")
        for other in related:
            suffix = ""
            if manifest is not None and has_component(manifest, other.type, other.name):
                suffix = ", installed"
            user_output(f"  - {other.name} - {other.description} ({other.type}{suffix})")

    marker = ctx.cwd / component.marker_path
    if preview and installed and marker.is_file():
        user_output("\nPreview:")
        lines = marker.read_text(encoding="utf-8", errors="replace").splitlines()[:preview]
        for number, line in enumerate(lines, start=1):
            user_output(f"  {number:>3} | {line}")
