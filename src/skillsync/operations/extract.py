"""Selective extraction of destination paths from a cached archive."""

import logging
import shutil
from collections.abc import Sequence
from pathlib import Path

from skillsync.errors import ArchiveError, WriteError
from skillsync.io.archive import content_root, to_archive_path
from skillsync.models.component import validate_relative_path
from skillsync.models.extraction import ExtractionFailure, ExtractionResult

logger = logging.getLogger(__name__)


def expand_destination(archive_dir: Path, destination_path: str) -> list[str]:
    """List the destination files a destination path covers inside the archive.

    A directory expands to every regular file beneath it, sorted.

    Raises:
        ArchiveError: If the path is not project-relative, leaves the archive or is missing
    """
    try:
        validate_relative_path(destination_path)
    except ValueError as e:
        raise ArchiveError(str(e)) from e

    archive_root = content_root(archive_dir).resolve()
    source = (archive_dir / to_archive_path(destination_path)).resolve()
    if not source.is_relative_to(archive_root):
        raise ArchiveError(f"Source escapes archive root: {destination_path}")
    if source.is_file():
        return [destination_path]
    if source.is_dir():
        prefix = destination_path.rstrip("/")
        return [
            f"{prefix}/{child.relative_to(source).as_posix()}"
            for child in sorted(source.rglob("*"))
            if child.is_file()
        ]
    raise ArchiveError(f"source not found: {destination_path}")


def extract(
    archive_dir: Path,
    project_root: Path,
    destination_paths: Sequence[str],
    force_overwrite: bool,
) -> ExtractionResult:
    """Copy destination paths from an unpacked archive into a project.

    Each file is handled independently: an existing file is skipped unless
    force_overwrite is set, and a path that escapes project_root or fails to
    write is recorded in ``errors`` while the remaining paths continue.
    Source permission bits are copied onto written files.
    """
    root = project_root.resolve()
    archive_root = content_root(archive_dir).resolve()
    written: list[str] = []
    skipped: list[str] = []
    errors: list[ExtractionFailure] = []
    seen: set[str] = set()

    for destination_path in destination_paths:
        try:
            files = expand_destination(archive_dir, destination_path)
        except ArchiveError as e:
            logger.debug("Cannot extract %s: %s", destination_path, e)
            errors.append(ExtractionFailure(destination_path, e))
            continue

        for relative in files:
            if relative in seen:
                continue
            seen.add(relative)

            source = (archive_dir / to_archive_path(relative)).resolve()
            target = root / relative
            if not source.is_relative_to(archive_root):
                failure = ArchiveError(f"Source escapes archive root: {relative}")
                errors.append(ExtractionFailure(relative, failure))
                continue
            if not target.resolve().is_relative_to(root):
                failure = ArchiveError(f"Path escapes project root: {relative}")
                errors.append(ExtractionFailure(relative, failure))
                continue

            if (target.exists() or target.is_symlink()) and not force_overwrite:
                logger.debug("Skipping existing %s", relative)
                skipped.append(relative)
                continue

            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                if target.is_symlink():
                    target.unlink()
                shutil.copyfile(source, target)
                shutil.copymode(source, target)
            except OSError as e:
                logger.debug("Failed to write %s: %s", relative, e)
                errors.append(ExtractionFailure(relative, WriteError(f"{relative}: {e}")))
                continue

            logger.debug("Wrote %s", relative)
            written.append(relative)

    return ExtractionResult(written=tuple(written), skipped=tuple(skipped), errors=tuple(errors))
