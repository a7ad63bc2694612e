"""Update a project to another upstream version."""

import logging
from dataclasses import dataclass
from pathlib import Path

from skillsync.errors import ArchiveError
from skillsync.io.archive import to_archive_path
from skillsync.io.manifest import load_manifest, resolve_manifest_paths, save_manifest
from skillsync.models.extraction import ExtractionResult
from skillsync.operations.diff import hash_file
from skillsync.operations.download import Downloader
from skillsync.operations.extract import expand_destination, extract
from skillsync.versioning import is_update_available

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateCheck:
    current_version: str
    latest_version: str
    update_available: bool


@dataclass(frozen=True)
class UpdatePlan:
    """Per-file classification of a project against a target version.

    ``modified`` compares content hashes, so it also catches local edits.
    """

    target_version: str
    new: tuple[str, ...]
    modified: tuple[str, ...]
    unchanged: tuple[str, ...]


def check_only(downloader: Downloader, project_root: Path) -> UpdateCheck:
    """Compare the recorded version with upstream's latest. Writes nothing.

    Raises:
        ConfigNotFound: If the project has no manifest
        NetworkError: If the latest version cannot be resolved
    """
    manifest = load_manifest(project_root)
    latest = downloader.latest_version()
    return UpdateCheck(
        current_version=manifest.version,
        latest_version=latest,
        update_available=is_update_available(manifest.version, latest),
    )


def plan_update(downloader: Downloader, project_root: Path, target_version: str) -> UpdatePlan:
    """Classify every installed file against target_version without writing."""
    manifest = load_manifest(project_root)
    archive_dir = downloader.fetch(target_version)
    new: list[str] = []
    modified: list[str] = []
    unchanged: list[str] = []
    for destination_path in resolve_manifest_paths(manifest):
        try:
            files = expand_destination(archive_dir, destination_path)
        except ArchiveError as e:
            logger.debug("Not in version %s: %s", target_version, e)
            continue
        for relative in files:
            local = project_root / relative
            if not local.is_file():
                new.append(relative)
            elif hash_file(local) != hash_file(archive_dir / to_archive_path(relative)):
                modified.append(relative)
            else:
                unchanged.append(relative)
    return UpdatePlan(
        target_version=target_version,
        new=tuple(new),
        modified=tuple(modified),
        unchanged=tuple(unchanged),
    )


def apply_update(
    downloader: Downloader,
    project_root: Path,
    target_version: str,
    force_overwrite: bool,
) -> ExtractionResult:
    """Re-sync every installed path from target_version and record the version.

    Without force this only adds files that do not exist yet. With force every
    resolved file is rewritten from the target version, discarding local edits.

    Raises:
        ConfigNotFound: If the project has no manifest
        NetworkError: If the target version cannot be downloaded
        ArchiveError: If the archive is malformed
    """
    manifest = load_manifest(project_root)
    paths = resolve_manifest_paths(manifest)
    archive_dir = downloader.fetch(target_version)
    logger.debug(
        "Updating %s from %s to %s (force=%s)",
        project_root,
        manifest.version,
        target_version,
        force_overwrite,
    )
    result = extract(archive_dir, project_root, paths, force_overwrite)
    save_manifest(project_root, manifest.with_version(target_version))
    return result
