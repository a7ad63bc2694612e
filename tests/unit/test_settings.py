"""Tests for user settings."""

from pathlib import Path

import pytest

from skillsync.settings import (
    DEFAULT_TIMEOUT_SECONDS,
    FilesystemSettingsStore,
    InMemorySettingsStore,
    Settings,
    build_settings,
)


def test_defaults() -> None:
    settings = build_settings({}, {}, "test")
    assert settings.owner == "ar4mirez"
    assert settings.repo == "samuel"
    assert settings.timeout_seconds == DEFAULT_TIMEOUT_SECONDS
    assert settings.cache_dir.name == "skillsync"


def test_file_values_and_env_overrides(tmp_path: Path) -> None:
    data = {"owner": "acme", "repo": "skills", "timeout_seconds": 10, "cache_dir": "/tmp/a"}
    env = {"SKILLSYNC_REPO": "other", "SKILLSYNC_CACHE_DIR": str(tmp_path)}

    settings = build_settings(data, env, "test")

    assert settings.owner == "acme"
    assert settings.repo == "other"
    assert settings.timeout_seconds == 10.0
    assert settings.cache_dir == tmp_path


@pytest.mark.parametrize("timeout", ["soon", 0, -3])
def test_invalid_timeout(timeout: object) -> None:
    with pytest.raises(ValueError, match="imeout"):
        build_settings({"timeout_seconds": timeout}, {}, "test")


def test_filesystem_store_reads_toml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    config = tmp_path / ".skillsync" / "config.toml"
    config.parent.mkdir()
    config.write_text('owner = "acme"\ntimeout_seconds = 5\n', encoding="utf-8")

    store = FilesystemSettingsStore(env={})

    assert store.exists()
    settings = store.load()
    assert settings.owner == "acme"
    assert settings.timeout_seconds == 5.0


def test_filesystem_store_rejects_bad_toml(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    config = tmp_path / ".skillsync" / "config.toml"
    config.parent.mkdir()
    config.write_text("owner = ", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid TOML"):
        FilesystemSettingsStore(env={}).load()


def test_in_memory_store() -> None:
    settings = Settings(cache_dir=Path("/c"), owner="o", repo="r", timeout_seconds=1.0)
    assert InMemorySettingsStore(settings).load() == settings
    assert not InMemorySettingsStore().exists()
