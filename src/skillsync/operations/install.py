"""Install, add and remove components in a project."""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from skillsync import registry
from skillsync.aliases import normalize_name
from skillsync.errors import ArchiveError, ProjectAlreadyInitialized, UnknownComponentError
from skillsync.io.archive import ARCHIVE_PREFIX
from skillsync.io.manifest import find_manifest, has_component, load_manifest, save_manifest
from skillsync.models.component import Component, ComponentType, Template
from skillsync.models.extraction import ExtractionResult
from skillsync.models.manifest import ALL_WORKFLOWS, InstalledManifest
from skillsync.operations.download import Downloader
from skillsync.operations.extract import extract

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    """Component names chosen for an install, already alias-normalized."""

    languages: tuple[str, ...] = ()
    frameworks: tuple[str, ...] = ()
    workflows: tuple[str, ...] = (ALL_WORKFLOWS,)

    @staticmethod
    def from_template(template: Template) -> "Selection":
        return Selection(
            languages=template.languages,
            frameworks=template.frameworks,
            workflows=template.workflows,
        )


@dataclass(frozen=True)
class InstallOutcome:
    version: str
    manifest: InstalledManifest
    result: ExtractionResult


@dataclass(frozen=True)
class ComponentChange:
    """Result of add/remove. ``changed`` is False when the manifest was already as requested."""

    component: Component
    changed: bool
    result: ExtractionResult | None = None
    deleted: bool = False


def require_component(component_type: ComponentType, name: str) -> Component:
    """Look up a registry component.

    Raises:
        UnknownComponentError: If the registry has no such component
    """
    component = registry.find_component(component_type, name)
    if component is None:
        raise UnknownComponentError(
            component_type, name, registry.component_names(component_type)
        )
    return component


def validate_selection(selection: Selection) -> None:
    """Reject selections naming components the registry does not know."""
    explicit: list[tuple[ComponentType, tuple[str, ...]]] = [
        ("language", selection.languages),
        ("framework", selection.frameworks),
    ]
    for component_type, names in explicit:
        for name in names:
            require_component(component_type, name)
    if selection.workflows != (ALL_WORKFLOWS,):
        for name in selection.workflows:
            require_component("workflow", name)


def is_upstream_checkout(project_root: Path) -> bool:
    """Whether project_root looks like a checkout of the upstream content repository."""
    return (project_root / ARCHIVE_PREFIX / registry.INSTRUCTION_FILE).is_file()


def resolve_and_install(
    downloader: Downloader,
    project_root: Path,
    selection: Selection,
    force_overwrite: bool,
    version: str | None = None,
) -> InstallOutcome:
    """Install a selection into project_root and record it in a fresh manifest.

    Per-file extraction failures are returned as warnings; the manifest is
    still written. Network and archive failures abort before anything is
    persisted.

    Raises:
        ProjectAlreadyInitialized: If a manifest exists and force_overwrite is off
        UnknownComponentError: If the selection names an unknown component
        NetworkError: If the version cannot be resolved or downloaded
        ArchiveError: If the archive is malformed
    """
    existing = find_manifest(project_root)
    if existing is not None and not force_overwrite:
        raise ProjectAlreadyInitialized(existing)
    if is_upstream_checkout(project_root):
        raise ValueError(
            f"{project_root} is a checkout of the upstream content repository; "
            "run init in your own project instead"
        )
    validate_selection(selection)

    target_version = version or downloader.latest_version()
    archive_dir = downloader.fetch(target_version)

    paths = registry.resolve_paths(selection.languages, selection.frameworks, selection.workflows)
    logger.debug("Installing %d paths from version %s", len(paths), target_version)
    project_root.mkdir(parents=True, exist_ok=True)
    result = extract(archive_dir, project_root, paths, force_overwrite)

    manifest = InstalledManifest(
        version=target_version,
        languages=selection.languages,
        frameworks=selection.frameworks,
        workflows=selection.workflows,
    )
    save_manifest(project_root, manifest)
    return InstallOutcome(version=target_version, manifest=manifest, result=result)


def add_component(
    downloader: Downloader,
    project_root: Path,
    component_type: ComponentType,
    name: str,
) -> ComponentChange:
    """Add one component at the manifest's recorded version.

    Existing files are never overwritten. Adding an installed component is a
    no-op that neither writes files nor touches the manifest.

    Raises:
        ConfigNotFound: If the project has no manifest
        UnknownComponentError: If the name is not in the registry
        ArchiveError: If the recorded version does not contain the component
    """
    manifest = load_manifest(project_root)
    component = require_component(component_type, normalize_name(component_type, name))

    if has_component(manifest, component_type, component.name):
        logger.debug("%s %s already installed", component_type, component.name)
        return ComponentChange(component=component, changed=False)

    archive_dir = downloader.fetch(manifest.version)
    result = extract(archive_dir, project_root, [component.path], force_overwrite=False)
    if not result.written and not result.skipped:
        reason = result.errors[0].message if result.errors else "no files in archive"
        raise ArchiveError(
            f"Could not install {component_type} '{component.name}' from "
            f"version {manifest.version}: {reason}"
        )

    save_manifest(project_root, manifest.with_component(component_type, component.name))
    return ComponentChange(component=component, changed=True, result=result)


def remove_component(
    project_root: Path,
    component_type: ComponentType,
    name: str,
) -> ComponentChange:
    """Remove one component's directory and drop it from the manifest.

    A component directory that is already gone is not an error; the manifest
    is updated either way. Removing a workflow while the manifest stores
    "all" replaces the sentinel with every other known workflow.

    Raises:
        ConfigNotFound: If the project has no manifest
        UnknownComponentError: If the name is not in the registry
        ValueError: If asked to remove the "all" sentinel
    """
    manifest = load_manifest(project_root)
    normalized = normalize_name(component_type, name)
    if component_type == "workflow" and normalized == ALL_WORKFLOWS:
        raise ValueError("Cannot remove 'all' workflows; remove individual workflows instead")
    component = require_component(component_type, normalized)

    if not has_component(manifest, component_type, component.name):
        return ComponentChange(component=component, changed=False)

    if component_type == "workflow" and manifest.has_all_workflows:
        manifest = manifest.with_names("workflow", tuple(registry.component_names("workflow")))

    target = project_root / component.path
    deleted = False
    if target.is_dir() and not target.is_symlink():
        shutil.rmtree(target)
        deleted = True
    elif target.exists() or target.is_symlink():
        target.unlink()
        deleted = True
    else:
        logger.debug("%s was already absent", target)

    save_manifest(project_root, manifest.without_component(component_type, component.name))
    return ComponentChange(component=component, changed=True, deleted=deleted)
