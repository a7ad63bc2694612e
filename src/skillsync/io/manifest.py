"""Manifest (skillsync.yaml) loading, saving and queries."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from skillsync import registry
from skillsync.aliases import split_names
from skillsync.errors import ConfigNotFound, ConfigParseError
from skillsync.models.component import ComponentType
from skillsync.models.manifest import ALL_WORKFLOWS, InstalledManifest
from skillsync.versioning import validate_version

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "skillsync.yaml"
ALT_MANIFEST_FILENAME = ".skillsync.yaml"

VALID_KEYS: tuple[str, ...] = (
    "version",
    "installed.languages",
    "installed.frameworks",
    "installed.workflows",
)

_KEY_TYPES: dict[str, ComponentType] = {
    "installed.languages": "language",
    "installed.frameworks": "framework",
    "installed.workflows": "workflow",
}


class InstalledSection(BaseModel):
    """The ``installed`` mapping of the manifest file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    languages: list[str] = Field(default_factory=list)
    frameworks: list[str] = Field(default_factory=list)
    workflows: list[str] = Field(default_factory=lambda: [ALL_WORKFLOWS])

    @field_validator("languages", "frameworks", "workflows", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        """A bare ``languages:`` key parses as null; treat it as an empty list."""
        return [] if v is None else v


class ManifestDocument(BaseModel):
    """On-disk schema of skillsync.yaml."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: str = Field(..., min_length=1)
    installed: InstalledSection = Field(default_factory=InstalledSection)

    @field_validator("version")
    @classmethod
    def validate_version_string(cls, v: str) -> str:
        return validate_version(v)

    @field_validator("installed", mode="before")
    @classmethod
    def none_as_default(cls, v: Any) -> Any:
        return {} if v is None else v


def find_manifest(project_root: Path) -> Path | None:
    """Return the manifest path in use for project_root, or None if absent."""
    for filename in (MANIFEST_FILENAME, ALT_MANIFEST_FILENAME):
        candidate = project_root / filename
        if candidate.is_file():
            return candidate
    return None


def manifest_exists(project_root: Path) -> bool:
    return find_manifest(project_root) is not None


def load_manifest(project_root: Path) -> InstalledManifest:
    """Load and validate the project manifest.

    Component names the registry does not know are accepted here; reporting
    them is the doctor's job.

    Raises:
        ConfigNotFound: If neither manifest filename exists
        ConfigParseError: If the file is not valid YAML or fails validation
    """
    path = find_manifest(project_root)
    if path is None:
        raise ConfigNotFound(project_root)

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigParseError(path, f"YAML syntax error: {e}") from e

    if not isinstance(data, dict):
        raise ConfigParseError(path, "expected a mapping at the top level")

    try:
        document = ManifestDocument.model_validate(data)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigParseError(path, details) from e

    logger.debug("Loaded manifest %s (version %s)", path, document.version)
    return InstalledManifest(
        version=document.version,
        languages=tuple(document.installed.languages),
        frameworks=tuple(document.installed.frameworks),
        workflows=tuple(document.installed.workflows),
    )


def save_manifest(project_root: Path, manifest: InstalledManifest) -> Path:
    """Rewrite the manifest atomically (temp file in the same directory, then rename)."""
    path = find_manifest(project_root) or project_root / MANIFEST_FILENAME
    document = ManifestDocument(
        version=manifest.version,
        installed=InstalledSection(
            languages=list(manifest.languages),
            frameworks=list(manifest.frameworks),
            workflows=list(manifest.workflows),
        ),
    )
    content = yaml.safe_dump(document.model_dump(), sort_keys=False, default_flow_style=False)

    fd, tmp_name = tempfile.mkstemp(dir=project_root, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except OSError:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.debug("Saved manifest %s", path)
    return path


def has_language(manifest: InstalledManifest, name: str) -> bool:
    return name in manifest.languages


def has_framework(manifest: InstalledManifest, name: str) -> bool:
    return name in manifest.frameworks


def has_workflow(manifest: InstalledManifest, name: str) -> bool:
    """Whether a workflow is installed; the "all" sentinel matches every known workflow."""
    if manifest.has_all_workflows:
        return registry.find_component("workflow", name) is not None
    return name in manifest.workflows


def has_component(manifest: InstalledManifest, component_type: ComponentType, name: str) -> bool:
    if component_type == "language":
        return has_language(manifest, name)
    if component_type == "framework":
        return has_framework(manifest, name)
    return has_workflow(manifest, name)


def installed_names(manifest: InstalledManifest, component_type: ComponentType) -> list[str]:
    """Installed names for a type with the workflow sentinel expanded."""
    if component_type == "workflow":
        return registry.expand_workflows(manifest.workflows)
    return list(manifest.names(component_type))


def resolve_manifest_paths(manifest: InstalledManifest) -> list[str]:
    return registry.resolve_paths(manifest.languages, manifest.frameworks, manifest.workflows)


def _check_key(key: str) -> None:
    if key not in VALID_KEYS:
        raise ValueError(f"Unknown config key: '{key}'. Valid keys: {', '.join(VALID_KEYS)}")


def get_value(manifest: InstalledManifest, key: str) -> str:
    """Render a manifest value for display; lists are comma-separated."""
    _check_key(key)
    if key == "version":
        return manifest.version
    return ", ".join(manifest.names(_KEY_TYPES[key]))


def set_value(manifest: InstalledManifest, key: str, text: str) -> InstalledManifest:
    """Return a manifest with key set from user text.

    Raises:
        ValueError: If the key is unknown or the version is malformed
    """
    _check_key(key)
    if key == "version":
        return manifest.with_version(validate_version(text.strip()))
    component_type = _KEY_TYPES[key]
    names = split_names(component_type, [text])
    return manifest.with_names(component_type, tuple(names))
