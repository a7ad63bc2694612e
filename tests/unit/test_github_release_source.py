"""Tests for the GitHub release source against a mocked transport."""

from pathlib import Path

import httpx
import pytest

from skillsync.errors import NetworkError
from skillsync.integrations.releases.real import GitHubReleaseSource


def _source(handler) -> GitHubReleaseSource:
    return GitHubReleaseSource(
        "acme", "skills", timeout_seconds=2.0, transport=httpx.MockTransport(handler)
    )


def test_latest_version_strips_tag_prefix() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"tag_name": "v1.8.0"})

    assert _source(handler).get_latest_version() == "1.8.0"
    assert str(requests[0].url) == "https://api.github.com/repos/acme/skills/releases/latest"
    assert requests[0].headers["Accept"] == "application/vnd.github.v3+json"
    assert requests[0].headers["User-Agent"].startswith("skillsync/")


def test_latest_version_without_releases_is_dev() -> None:
    """A 404 means nothing has been released yet."""
    source = _source(lambda request: httpx.Response(404, json={"message": "Not Found"}))
    assert source.get_latest_version() == "dev"


def test_latest_version_server_error() -> None:
    source = _source(lambda request: httpx.Response(503))
    with pytest.raises(NetworkError, match="HTTP 503"):
        source.get_latest_version()


def test_latest_version_missing_tag() -> None:
    source = _source(lambda request: httpx.Response(200, json={"name": "release"}))
    with pytest.raises(NetworkError, match="no tag_name"):
        source.get_latest_version()


def test_timeout_becomes_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(NetworkError, match="Timed out after 2.0s"):
        _source(handler).get_latest_version()


def test_connection_failure_becomes_network_error(tmp_path: Path) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NetworkError, match="Failed to download version 1.0.0"):
        _source(handler).download_archive("1.0.0", tmp_path / "release.tar.gz")


def test_download_archive_writes_body(tmp_path: Path) -> None:
    urls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        urls.append(str(request.url))
        return httpx.Response(200, content=b"tarball-bytes")

    destination = tmp_path / "release.tar.gz"
    _source(handler).download_archive("1.2.0", destination)

    assert destination.read_bytes() == b"tarball-bytes"
    assert urls == ["https://github.com/acme/skills/archive/refs/tags/v1.2.0.tar.gz"]


def test_download_dev_uses_default_branch() -> None:
    source = _source(lambda request: httpx.Response(200))
    expected = "https://github.com/acme/skills/archive/refs/heads/main.tar.gz"
    assert source.archive_url("dev") == expected


def test_download_missing_version(tmp_path: Path) -> None:
    source = _source(lambda request: httpx.Response(404))
    with pytest.raises(NetworkError, match="not found upstream"):
        source.download_archive("9.9.9", tmp_path / "release.tar.gz")
