from pathlib import Path

import pytest

from skillsync.context import SkillsyncContext
from skillsync.integrations.releases.fake import FakeReleaseSource
from skillsync.operations.download import Downloader
from tests.test_utils.archives import build_release


@pytest.fixture
def releases() -> FakeReleaseSource:
    """Upstream with releases 1.0.0 and 1.1.0, latest 1.1.0."""
    return FakeReleaseSource(
        latest_version="1.1.0",
        archives={"1.0.0": build_release("1.0.0"), "1.1.0": build_release("1.1.0")},
    )


@pytest.fixture
def project(tmp_path: Path) -> Path:
    project_root = tmp_path / "project"
    project_root.mkdir()
    return project_root


@pytest.fixture
def downloader(tmp_path: Path, releases: FakeReleaseSource) -> Downloader:
    return Downloader(releases, tmp_path / "cache")


@pytest.fixture
def ctx(tmp_path: Path, project: Path, releases: FakeReleaseSource) -> SkillsyncContext:
    return SkillsyncContext.for_test(releases=releases, cwd=project, cache_dir=tmp_path / "cache")
