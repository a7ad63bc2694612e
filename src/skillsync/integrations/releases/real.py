"""GitHub release source using httpx."""

import logging
from pathlib import Path

import httpx

from skillsync.errors import NetworkError
from skillsync.integrations.releases.abc import ReleaseSource
from skillsync.version import __version__
from skillsync.versioning import DEV_VERSION, strip_tag_prefix

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
GITHUB_URL = "https://github.com"
DEFAULT_BRANCH = "main"


class GitHubReleaseSource(ReleaseSource):
    """Production implementation reading releases of a GitHub repository.

    Every request is bounded by ``timeout_seconds``. Nothing is retried:
    failures surface as ``NetworkError`` for the caller to act on.
    """

    def __init__(
        self,
        owner: str,
        repo: str,
        timeout_seconds: float,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._owner = owner
        self._repo = repo
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self._timeout_seconds,
            follow_redirects=True,
            headers={"User-Agent": f"skillsync/{__version__}"},
            transport=self._transport,
        )

    def archive_url(self, version: str) -> str:
        base = f"{GITHUB_URL}/{self._owner}/{self._repo}/archive/refs"
        if version == DEV_VERSION:
            return f"{base}/heads/{DEFAULT_BRANCH}.tar.gz"
        return f"{base}/tags/v{version}.tar.gz"

    def get_latest_version(self) -> str:
        url = f"{GITHUB_API_URL}/repos/{self._owner}/{self._repo}/releases/latest"
        try:
            with self._client() as client:
                response = client.get(url, headers={"Accept": "application/vnd.github.v3+json"})
                if response.status_code == 404:
                    logger.debug(
                        "No releases for %s/%s, using %s", self._owner, self._repo, DEV_VERSION
                    )
                    return DEV_VERSION
                response.raise_for_status()
                payload = response.json()
        except httpx.TimeoutException as e:
            raise NetworkError(
                f"Timed out after {self._timeout_seconds}s fetching latest release"
            ) from e
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"GitHub API returned HTTP {e.response.status_code} for {url}"
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Failed to fetch latest release: {e}") from e
        except ValueError as e:
            raise NetworkError(f"Malformed release response from {url}") from e

        tag = payload.get("tag_name") if isinstance(payload, dict) else None
        if not isinstance(tag, str) or not tag:
            raise NetworkError(f"Release response from {url} has no tag_name")
        return strip_tag_prefix(tag)

    def download_archive(self, version: str, destination: Path) -> None:
        url = self.archive_url(version)
        logger.debug("Downloading %s", url)
        try:
            with self._client() as client, client.stream("GET", url) as response:
                if response.status_code == 404:
                    raise NetworkError(f"Version {version} not found upstream ({url})")
                response.raise_for_status()
                with destination.open("wb") as f:
                    for chunk in response.iter_bytes():
                        f.write(chunk)
        except httpx.TimeoutException as e:
            raise NetworkError(
                f"Timed out after {self._timeout_seconds}s downloading version {version}"
            ) from e
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"Download of version {version} failed with HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Failed to download version {version}: {e}") from e
