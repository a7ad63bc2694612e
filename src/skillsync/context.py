"""Application context with dependency injection.

SkillsyncContext holds every dependency a command needs. It is created once
at CLI entry by create_context() and passed to commands through click's
context object; tests build one with SkillsyncContext.for_test().
"""

from dataclasses import dataclass
from pathlib import Path

from skillsync.integrations.releases.abc import ReleaseSource
from skillsync.operations.download import Downloader
from skillsync.settings import Settings, SettingsStore


@dataclass(frozen=True)
class SkillsyncContext:
    """Immutable context holding all dependencies for skillsync commands.

    Attributes:
        releases: Upstream release source
        settings: User settings (cache location, upstream repository, timeout)
        downloader: Version cache backed by ``releases``
        cwd: Directory commands operate on
        debug: Whether debug logging is enabled
    """

    releases: ReleaseSource
    settings: Settings
    downloader: Downloader
    cwd: Path
    debug: bool

    @staticmethod
    def for_test(
        releases: ReleaseSource | None = None,
        settings: Settings | None = None,
        cwd: Path | None = None,
        cache_dir: Path | None = None,
        debug: bool = False,
    ) -> "SkillsyncContext":
        """Create a test context backed by fakes.

        Args:
            releases: Release source. If None, creates an empty FakeReleaseSource.
            settings: Settings. If None, uses defaults with cache_dir.
            cwd: Working directory (defaults to Path("/test/project"))
            cache_dir: Cache directory used when settings is None
                (defaults to Path("/test/cache"))
            debug: Whether debug mode is on

        Example:
            >>> releases = FakeReleaseSource(latest_version="1.0.0", archives={...})
            >>> ctx = SkillsyncContext.for_test(releases=releases, cwd=tmp_path / "project",
            ...                                 cache_dir=tmp_path / "cache")
        """
        from skillsync.integrations.releases.fake import FakeReleaseSource

        if releases is None:
            releases = FakeReleaseSource()
        if settings is None:
            settings = Settings(
                cache_dir=cache_dir if cache_dir is not None else Path("/test/cache"),
                owner="test-owner",
                repo="test-repo",
                timeout_seconds=5.0,
            )
        return SkillsyncContext(
            releases=releases,
            settings=settings,
            downloader=Downloader(releases, settings.cache_dir),
            cwd=cwd if cwd is not None else Path("/test/project"),
            debug=debug,
        )


def create_context(
    *, debug: bool, settings_store: SettingsStore | None = None
) -> SkillsyncContext:
    """Create the production context from user settings.

    Raises:
        ValueError: If the settings file is malformed
    """
    from skillsync.integrations.releases.real import GitHubReleaseSource
    from skillsync.settings import FilesystemSettingsStore

    store = settings_store if settings_store is not None else FilesystemSettingsStore()
    settings = store.load()
    releases = GitHubReleaseSource(settings.owner, settings.repo, settings.timeout_seconds)
    return SkillsyncContext(
        releases=releases,
        settings=settings,
        downloader=Downloader(releases, settings.cache_dir),
        cwd=Path.cwd(),
        debug=debug,
    )
