"""Extraction result models."""

from dataclasses import dataclass

from skillsync.errors import SkillsyncError


@dataclass(frozen=True)
class ExtractionFailure:
    """A single destination path that could not be extracted."""

    path: str
    error: SkillsyncError

    @property
    def message(self) -> str:
        return str(self.error)


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of copying destination paths from an archive into a project.

    Paths are project-relative POSIX strings. ``skipped`` holds files left
    untouched because they already existed and overwrite was not requested.
    """

    written: tuple[str, ...] = ()
    skipped: tuple[str, ...] = ()
    errors: tuple[ExtractionFailure, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def warning_count(self) -> int:
        return len(self.errors)
