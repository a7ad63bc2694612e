"""In-memory release source for tests."""

from pathlib import Path

from skillsync.errors import NetworkError
from skillsync.integrations.releases.abc import ReleaseSource


class FakeReleaseSource(ReleaseSource):
    """Serves prebuilt archive bytes and records every call.

    All state is provided via the constructor; there are no setup methods.
    """

    def __init__(
        self,
        *,
        latest_version: str = "1.0.0",
        archives: dict[str, bytes] | None = None,
        offline: bool = False,
    ) -> None:
        """Create the fake.

        Args:
            latest_version: Value returned by get_latest_version()
            archives: Tarball bytes keyed by version
            offline: Raise NetworkError from every call, as if upstream were unreachable
        """
        self._latest_version = latest_version
        self._archives = archives or {}
        self._offline = offline
        self._latest_version_calls = 0
        self._download_calls: list[str] = []

    @property
    def latest_version_calls(self) -> int:
        """Number of get_latest_version() calls.

        This property is for test assertions only.
        """
        return self._latest_version_calls

    @property
    def download_calls(self) -> list[str]:
        """Versions passed to download_archive(), in call order.

        This property is for test assertions only.
        """
        return self._download_calls

    def get_latest_version(self) -> str:
        self._latest_version_calls += 1
        if self._offline:
            raise NetworkError("Upstream unreachable (offline)")
        return self._latest_version

    def download_archive(self, version: str, destination: Path) -> None:
        self._download_calls.append(version)
        if self._offline:
            raise NetworkError("Upstream unreachable (offline)")
        if version not in self._archives:
            raise NetworkError(f"Version {version} not found upstream")
        destination.write_bytes(self._archives[version])
