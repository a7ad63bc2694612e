"""Release archive layout and safe unpacking.

A release tarball holds a single top-level directory (``<repo>-<version>/``)
and every installable destination path ``p`` lives at ``template/p`` inside
it. The cache stores the contents of that top-level directory, so archive
paths below are relative to it.
"""

import logging
import tarfile
import zlib
from pathlib import Path, PurePosixPath

from skillsync.errors import ArchiveError

logger = logging.getLogger(__name__)

ARCHIVE_PREFIX = "template/"

# Largest single member accepted from a release tarball
MAX_MEMBER_SIZE = 100 * 1024 * 1024


def to_archive_path(destination_path: str) -> str:
    """Map a project-relative destination path to its path inside the archive."""
    return ARCHIVE_PREFIX + destination_path.lstrip("/")


def to_destination_path(archive_path: str) -> str | None:
    """Inverse of ``to_archive_path``; None for paths outside the prefix."""
    if not archive_path.startswith(ARCHIVE_PREFIX):
        return None
    return archive_path[len(ARCHIVE_PREFIX) :] or None


def content_root(archive_dir: Path) -> Path:
    """Directory inside an unpacked archive that mirrors a project tree."""
    return archive_dir / ARCHIVE_PREFIX.rstrip("/")


def _top_level_names(members: list[tarfile.TarInfo]) -> set[str]:
    names: set[str] = set()
    for member in members:
        parts = [part for part in PurePosixPath(member.name).parts if part != "."]
        if parts:
            names.add(parts[0])
    return names


def unpack_release(tarball: Path, workdir: Path) -> Path:
    """Unpack a gzip release tarball under workdir and return its top-level directory.

    Members are extracted with tarfile's ``data`` filter, which rejects
    absolute paths, ``..`` components and links pointing outside workdir.

    Raises:
        ArchiveError: If the tarball is unreadable, unsafe or not laid out
            as a release (one top-level directory containing ``template/``)
    """
    try:
        with tarfile.open(tarball, mode="r:gz") as archive:
            members = archive.getmembers()
            for member in members:
                if member.size > MAX_MEMBER_SIZE:
                    raise ArchiveError(
                        f"Archive member {member.name} exceeds {MAX_MEMBER_SIZE} bytes"
                    )

            top_level = _top_level_names(members)
            if len(top_level) != 1:
                raise ArchiveError(
                    f"Expected exactly one top-level directory in archive, "
                    f"found {len(top_level)}"
                )

            archive.extractall(workdir, filter="data")
    except tarfile.FilterError as e:
        raise ArchiveError(f"Unsafe archive entry: {e}") from e
    except (tarfile.TarError, zlib.error, EOFError, OSError) as e:
        raise ArchiveError(f"Failed to read archive {tarball.name}: {e}") from e

    root = workdir / top_level.pop()
    if not root.is_dir():
        raise ArchiveError("Archive top-level entry is not a directory")
    if not content_root(root).is_dir():
        raise ArchiveError(f"Archive is missing the '{ARCHIVE_PREFIX}' directory")

    logger.debug("Unpacked %s into %s", tarball, root)
    return root
