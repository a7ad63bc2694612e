"""Content comparison between release versions."""

import hashlib
from dataclasses import dataclass
from pathlib import Path

from skillsync.io.archive import content_root
from skillsync.operations.download import Downloader


@dataclass(frozen=True)
class VersionDiff:
    old_version: str
    new_version: str
    added: tuple[str, ...]
    removed: tuple[str, ...]
    modified: tuple[str, ...]
    unchanged: int

    @property
    def has_changes(self) -> bool:
        return bool(self.added or self.removed or self.modified)


def hash_file(path: Path) -> str:
    with path.open("rb") as f:
        return hashlib.file_digest(f, "sha256").hexdigest()


def collect_hashes(archive_dir: Path) -> dict[str, str]:
    """Digest of every installable file in an archive, keyed by destination path."""
    root = content_root(archive_dir)
    return {
        path.relative_to(root).as_posix(): hash_file(path)
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


def diff_versions(downloader: Downloader, old_version: str, new_version: str) -> VersionDiff:
    """Compare the installable content of two versions (fetched through the cache)."""
    old = collect_hashes(downloader.fetch(old_version))
    new = collect_hashes(downloader.fetch(new_version))
    common = old.keys() & new.keys()
    modified = sorted(path for path in common if old[path] != new[path])
    return VersionDiff(
        old_version=old_version,
        new_version=new_version,
        added=tuple(sorted(new.keys() - old.keys())),
        removed=tuple(sorted(old.keys() - new.keys())),
        modified=tuple(modified),
        unchanged=len(common) - len(modified),
    )
