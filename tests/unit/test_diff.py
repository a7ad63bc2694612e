"""Tests for version diffs."""

from pathlib import Path

from skillsync.integrations.releases.fake import FakeReleaseSource
from skillsync.operations.diff import diff_versions
from skillsync.operations.download import Downloader
from tests.test_utils.archives import build_release


def test_diff_versions(tmp_path: Path) -> None:
    releases = FakeReleaseSource(
        archives={
            "1.0.0": build_release("1.0.0", {"CLAUDE.md": "v1", "old.md": "x", "same.md": "s"}),
            "1.1.0": build_release("1.1.0", {"CLAUDE.md": "v2", "new.md": "y", "same.md": "s"}),
        }
    )
    downloader = Downloader(releases, tmp_path / "cache")

    result = diff_versions(downloader, "1.0.0", "1.1.0")

    assert result.added == ("new.md",)
    assert result.removed == ("old.md",)
    assert result.modified == ("CLAUDE.md",)
    assert result.unchanged == 1
    assert result.has_changes


def test_diff_same_version_has_no_changes(downloader: Downloader) -> None:
    result = diff_versions(downloader, "1.0.0", "1.0.0")
    assert not result.has_changes
    assert result.unchanged > 0
