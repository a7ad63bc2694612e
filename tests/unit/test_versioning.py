"""Tests for version identifiers."""

import pytest

from skillsync.versioning import (
    is_update_available,
    is_valid_version,
    strip_tag_prefix,
    validate_version,
)


def test_valid_versions() -> None:
    assert is_valid_version("1.2.3")
    assert is_valid_version("1.2.3-rc.1")
    assert is_valid_version("dev")
    assert not is_valid_version("1.2")
    assert not is_valid_version("../1.2.3")
    assert not is_valid_version("v1.2.3")


def test_validate_version_rejects_paths() -> None:
    """Version strings that could escape the cache directory are rejected."""
    with pytest.raises(ValueError, match="Invalid version"):
        validate_version("../../etc")


def test_strip_tag_prefix() -> None:
    assert strip_tag_prefix("v1.4.0") == "1.4.0"
    assert strip_tag_prefix("1.4.0") == "1.4.0"


def test_is_update_available() -> None:
    assert not is_update_available("1.2.0", "1.2.0")
    assert is_update_available("1.2.0", "1.10.0")
    assert not is_update_available("1.10.0", "1.2.0")
    assert is_update_available("1.2.0-rc.1", "1.2.0")
    assert is_update_available("dev", "1.0.0")


def test_prerelease_identifiers_compare_numerically() -> None:
    """rc.10 follows rc.2, and numeric identifiers rank below alphanumeric ones."""
    assert is_update_available("1.0.0-rc.2", "1.0.0-rc.10")
    assert not is_update_available("1.0.0-rc.10", "1.0.0-rc.2")
    assert is_update_available("1.0.0-alpha.1", "1.0.0-alpha.beta")
    assert is_update_available("1.0.0-alpha", "1.0.0-alpha.1")
    assert is_update_available("1.0.0-beta.11", "1.0.0-rc.1")
