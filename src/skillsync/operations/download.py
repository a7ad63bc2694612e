"""Version-keyed cache of unpacked release archives."""

import logging
import os
import shutil
import tempfile
from pathlib import Path

from skillsync.errors import NetworkError, WriteError
from skillsync.integrations.releases.abc import ReleaseSource
from skillsync.io.archive import unpack_release
from skillsync.versioning import DEV_VERSION, is_valid_version, validate_version

logger = logging.getLogger(__name__)

_STAGING_PREFIX = ".tmp-"


class Downloader:
    """Resolve upstream versions and materialize their archives in the cache.

    A cache entry ``<cache_dir>/<version>/`` is only ever created by renaming a
    fully unpacked and validated staging directory into place, so a reader
    either sees a complete entry or none at all. Two processes racing on the
    same version may both download; the first rename wins and the loser
    discards its copy.
    """

    def __init__(self, source: ReleaseSource, cache_dir: Path) -> None:
        self._source = source
        self._cache_dir = cache_dir

    @property
    def cache_dir(self) -> Path:
        return self._cache_dir

    def cache_path(self, version: str) -> Path:
        return self._cache_dir / validate_version(version)

    def is_cached(self, version: str) -> bool:
        return self.cache_path(version).is_dir()

    def latest_version(self) -> str:
        """Ask upstream for the newest version.

        Raises:
            NetworkError: If upstream is unreachable or reports a malformed version
        """
        version = self._source.get_latest_version()
        if not is_valid_version(version):
            raise NetworkError(f"Upstream reported an unrecognised version: '{version}'")
        return version

    def fetch(self, version: str) -> Path:
        """Return the cache directory for version, downloading it on a cache miss.

        ``dev`` tracks a moving branch and is downloaded every time.

        Raises:
            NetworkError: If the download fails
            ArchiveError: If the downloaded archive is malformed or unsafe
        """
        entry = self.cache_path(version)
        if version != DEV_VERSION and entry.is_dir():
            logger.debug("Cache hit for version %s at %s", version, entry)
            return entry

        self._cache_dir.mkdir(parents=True, exist_ok=True)
        staging = Path(
            tempfile.mkdtemp(prefix=f"{_STAGING_PREFIX}{version}-", dir=self._cache_dir)
        )
        try:
            tarball = staging / "release.tar.gz"
            logger.debug("Cache miss for version %s, downloading", version)
            self._source.download_archive(version, tarball)
            unpacked = unpack_release(tarball, staging / "unpacked")
            self._publish(unpacked, entry, staging)
        finally:
            shutil.rmtree(staging, ignore_errors=True)
        return entry

    def _publish(self, unpacked: Path, entry: Path, staging: Path) -> None:
        if entry.name == DEV_VERSION and entry.exists():
            # Move the stale dev snapshot aside so the rename below can land
            os.rename(entry, staging / "stale")
        try:
            os.rename(unpacked, entry)
        except OSError as e:
            if entry.is_dir():
                logger.debug("Version %s was published concurrently, keeping it", entry.name)
                return
            raise WriteError(f"Failed to publish cache entry {entry}: {e}") from e
        logger.debug("Published version %s to %s", entry.name, entry)

    def cached_versions(self) -> list[str]:
        if not self._cache_dir.is_dir():
            return []
        return sorted(
            child.name
            for child in self._cache_dir.iterdir()
            if child.is_dir() and not child.name.startswith(_STAGING_PREFIX)
        )

    def cache_size(self) -> int:
        """Total size in bytes of every file under the cache directory."""
        if not self._cache_dir.is_dir():
            return 0
        return sum(path.stat().st_size for path in self._cache_dir.rglob("*") if path.is_file())

    def clear_cache(self) -> int:
        """Delete every cache entry; returns the number of entries removed."""
        removed = 0
        if not self._cache_dir.is_dir():
            return removed
        for child in self._cache_dir.iterdir():
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()
            removed += 1
        logger.debug("Cleared %d cache entries from %s", removed, self._cache_dir)
        return removed
