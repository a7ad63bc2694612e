"""Upstream release source integration."""

from skillsync.integrations.releases.abc import ReleaseSource
from skillsync.integrations.releases.fake import FakeReleaseSource
from skillsync.integrations.releases.real import GitHubReleaseSource

__all__ = ["FakeReleaseSource", "GitHubReleaseSource", "ReleaseSource"]
