"""Release source abstraction.

The downloader talks to upstream only through this interface so tests can
serve archives from memory.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ReleaseSource(ABC):
    """Abstract access to upstream release metadata and archives."""

    @abstractmethod
    def get_latest_version(self) -> str:
        """Return the newest published version without a ``v`` prefix.

        Returns ``dev`` when upstream has published no release.

        Raises:
            NetworkError: If upstream cannot be reached or answers with an error
        """
        ...

    @abstractmethod
    def download_archive(self, version: str, destination: Path) -> None:
        """Write the gzip tarball for version to destination.

        Raises:
            NetworkError: If the archive cannot be downloaded
        """
        ...
