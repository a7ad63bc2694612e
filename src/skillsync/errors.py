"""Exception taxonomy for skillsync.

Fatal errors (``ConfigParseError``, ``NetworkError`` and archive-level
``ArchiveError``) abort the invoking command. ``ArchiveError`` and
``WriteError`` are also recorded per path inside an ``ExtractionResult``,
where they are warnings rather than failures. A destination that already
exists is not an error at all: it is reported as skipped.
"""

from pathlib import Path


class SkillsyncError(Exception):
    """Base class for every error raised by skillsync."""


class ConfigNotFound(SkillsyncError):
    """No manifest exists in the project root (the project is not installed)."""

    def __init__(self, project_root: Path) -> None:
        self.project_root = project_root
        super().__init__(
            f"No skillsync.yaml found in {project_root}. Run 'skillsync init' first."
        )


class ConfigParseError(SkillsyncError):
    """The manifest exists but cannot be parsed or validated."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid manifest {path}: {reason}")


class NetworkError(SkillsyncError):
    """The upstream release host is unreachable, timed out or refused the request."""


class ArchiveError(SkillsyncError):
    """A release archive is malformed or an entry cannot be mapped safely."""


class WriteError(SkillsyncError):
    """Writing a single destination path failed."""


class ProjectAlreadyInitialized(SkillsyncError):
    """A manifest already exists and reinitialization was not forced."""

    def __init__(self, manifest_path: Path) -> None:
        self.manifest_path = manifest_path
        super().__init__(
            f"Project already initialized ({manifest_path.name} exists). "
            "Use --force to reinitialize."
        )


class UnknownComponentError(SkillsyncError):
    """A component name is not present in the registry."""

    def __init__(self, component_type: str, name: str, available: list[str]) -> None:
        self.component_type = component_type
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown {component_type}: '{name}'. Available: {', '.join(available)}"
        )
