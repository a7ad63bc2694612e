"""Component and template models."""

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Literal, cast

ComponentType = Literal["language", "framework", "workflow"]

COMPONENT_TYPES: tuple[ComponentType, ...] = ("language", "framework", "workflow")

# Marker file present in every installed skill directory
SKILL_MARKER = "SKILL.md"


def validate_component_type(value: str) -> ComponentType:
    """Validate and return a component type.

    Raises:
        ValueError: If value is not a known component type
    """
    if value not in COMPONENT_TYPES:
        raise ValueError(f"Invalid component type: {value}")
    return cast(ComponentType, value)


def validate_relative_path(path: str) -> str:
    """Reject destination paths that are absolute or climb out of the project root."""
    pure = PurePosixPath(path)
    if not path or pure.is_absolute() or ".." in pure.parts:
        raise ValueError(f"Destination path must be project-relative: {path!r}")
    return path


@dataclass(frozen=True)
class Component:
    """A named, typed unit of content installed at one project-relative path."""

    name: str
    type: ComponentType
    path: str
    description: str
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        validate_relative_path(self.path)

    @property
    def marker_path(self) -> str:
        """Project-relative path of the file whose presence means 'installed'."""
        return f"{self.path}/{SKILL_MARKER}"


@dataclass(frozen=True)
class Template:
    """Named preset bundling a default component selection."""

    name: str
    description: str
    languages: tuple[str, ...]
    frameworks: tuple[str, ...]
    workflows: tuple[str, ...]
