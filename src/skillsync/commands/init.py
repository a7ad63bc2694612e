"""Init command for installing skills into a project."""

from pathlib import Path

import click

from skillsync import registry
from skillsync.aliases import split_names
from skillsync.cli.output import report_extraction, success, user_output
from skillsync.context import SkillsyncContext
from skillsync.error_boundary import cli_error_boundary
from skillsync.operations.install import Selection, resolve_and_install

TEMPLATE_NAMES = [template.name for template in registry.all_templates()]


@click.command()
@click.argument(
    "directory",
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option(
    "-t",
    "--template",
    "template_name",
    type=click.Choice(TEMPLATE_NAMES),
    default="starter",
    show_default=True,
    help="Preset selection to start from",
)
@click.option("-l", "--languages", multiple=True, help="Languages (repeat or comma-separate)")
@click.option("-f", "--frameworks", multiple=True, help="Frameworks (repeat or comma-separate)")
@click.option("-w", "--workflows", multiple=True, help="Workflows, or 'all' (the default)")
@click.option("--force", is_flag=True, help="Reinitialize and overwrite existing files")
@click.pass_obj
@cli_error_boundary
def init(
    ctx: SkillsyncContext,
    directory: Path | None,
    template_name: str,
    languages: tuple[str, ...],
    frameworks: tuple[str, ...],
    workflows: tuple[str, ...],
    force: bool,
) -> None:
    """Install skills into DIRECTORY (default: current directory).

    Options override the template's selection for their component type.

    Examples:

        # Starter template (typescript, python, go and all workflows)
        skillsync init

        # Python with Django, into ./api
        skillsync init api -l python -f django
    """
    project_root = ctx.cwd / directory if directory is not None else ctx.cwd
    template = registry.find_template(template_name)
    if template is None:
        raise ValueError(f"Unknown template: {template_name}")

    base = Selection.from_template(template)
    selection = Selection(
        languages=tuple(split_names("language", languages)) if languages else base.languages,
        frameworks=tuple(split_names("framework", frameworks)) if frameworks else base.frameworks,
        workflows=tuple(split_names("workflow", workflows)) if workflows else base.workflows,
    )

    outcome = resolve_and_install(ctx.downloader, project_root, selection, force_overwrite=force)

    success(f"Initialized skillsync v{outcome.version} in {project_root}")
    user_output(
        f"  Languages: {', '.join(outcome.manifest.languages) or 'none'}; "
        f"frameworks: {', '.join(outcome.manifest.frameworks) or 'none'}; "
        f"workflows: {', '.join(outcome.manifest.workflows) or 'none'}"
    )
    report_extraction(outcome.result)
