"""User-level settings loaded from ~/.skillsync/config.toml.

Settings are read once at CLI entry and stored on the context. Environment
variables override file values.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_OWNER = "ar4mirez"
DEFAULT_REPO = "samuel"
DEFAULT_TIMEOUT_SECONDS = 30.0

ENV_CACHE_DIR = "SKILLSYNC_CACHE_DIR"
ENV_OWNER = "SKILLSYNC_OWNER"
ENV_REPO = "SKILLSYNC_REPO"
ENV_TIMEOUT = "SKILLSYNC_TIMEOUT"


def default_cache_dir() -> Path:
    return Path.home() / ".cache" / "skillsync"


@dataclass(frozen=True)
class Settings:
    """Immutable user settings."""

    cache_dir: Path
    owner: str
    repo: str
    timeout_seconds: float


class SettingsStore(ABC):
    """Abstract access to user settings for dependency injection."""

    @abstractmethod
    def exists(self) -> bool:
        """Check if a settings file exists."""
        ...

    @abstractmethod
    def load(self) -> Settings:
        """Load settings, applying defaults for absent values.

        Raises:
            ValueError: If a value is malformed
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Path of the settings file (for messages and debugging)."""
        ...


def _parse_timeout(value: Any, source: str) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid timeout in {source}: {value!r}") from None
    if timeout <= 0:
        raise ValueError(f"Timeout in {source} must be positive, got {timeout}")
    return timeout


def _require_str(data: Mapping[str, Any], key: str, default: str, source: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or not value:
        raise ValueError(f"'{key}' in {source} must be a non-empty string")
    return value


def build_settings(data: Mapping[str, Any], env: Mapping[str, str], source: str) -> Settings:
    """Combine file values and environment overrides into Settings."""
    cache_dir = env.get(ENV_CACHE_DIR) or data.get("cache_dir")
    timeout_raw = env.get(ENV_TIMEOUT) or data.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)
    return Settings(
        cache_dir=Path(cache_dir).expanduser() if cache_dir else default_cache_dir(),
        owner=env.get(ENV_OWNER) or _require_str(data, "owner", DEFAULT_OWNER, source),
        repo=env.get(ENV_REPO) or _require_str(data, "repo", DEFAULT_REPO, source),
        timeout_seconds=_parse_timeout(timeout_raw, source),
    )


class FilesystemSettingsStore(SettingsStore):
    """Production implementation reading ~/.skillsync/config.toml."""

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env = os.environ if env is None else env

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> Settings:
        config_path = self.path()
        data: dict[str, Any] = {}
        if config_path.exists():
            try:
                data = tomllib.loads(config_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {config_path}: {e}") from e
        return build_settings(data, self._env, str(config_path))

    def path(self) -> Path:
        return Path.home() / ".skillsync" / "config.toml"


class InMemorySettingsStore(SettingsStore):
    """Test implementation holding settings in memory."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings

    def exists(self) -> bool:
        return self._settings is not None

    def load(self) -> Settings:
        if self._settings is None:
            return build_settings({}, {}, "defaults")
        return self._settings

    def path(self) -> Path:
        return Path("/test/skillsync/config.toml")
