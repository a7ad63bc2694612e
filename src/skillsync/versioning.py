"""Upstream version identifiers."""

import re

# Tracks the upstream default branch when no release has been published
DEV_VERSION = "dev"

_VERSION_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<pre>[0-9A-Za-z.-]+))?(?:\+[0-9A-Za-z.-]+)?$"
)


def is_valid_version(value: str) -> bool:
    return value == DEV_VERSION or _VERSION_PATTERN.match(value) is not None


def validate_version(value: str) -> str:
    """Return value if it is ``X.Y.Z`` (optionally suffixed) or ``dev``.

    Versions are used to build cache paths and download URLs, so anything
    else is rejected.

    Raises:
        ValueError: If value is not a version identifier
    """
    if not is_valid_version(value):
        raise ValueError(f"Invalid version: '{value}' (expected X.Y.Z)")
    return value


def strip_tag_prefix(tag: str) -> str:
    """Convert a release tag such as ``v1.2.0`` to ``1.2.0``."""
    return tag[1:] if tag.startswith("v") else tag


def _prerelease_key(pre: str) -> tuple[tuple[int, int, str], ...]:
    # Numeric identifiers compare as integers and rank below alphanumeric ones
    return tuple(
        (0, int(part), "") if part.isdigit() else (1, 0, part) for part in pre.split(".")
    )


def _sort_key(version: str) -> tuple[int, int, int, int, tuple[tuple[int, int, str], ...]]:
    match = _VERSION_PATTERN.match(version)
    if match is None:
        raise ValueError(f"Invalid version: '{version}' (expected X.Y.Z)")
    pre = match.group("pre")
    # Pre-releases order before the release they precede
    return (
        int(match.group("major")),
        int(match.group("minor")),
        int(match.group("patch")),
        0 if pre else 1,
        _prerelease_key(pre) if pre else (),
    )


def is_update_available(current: str, latest: str) -> bool:
    """Whether latest should replace current.

    ``dev`` on either side compares as different from any release.
    """
    if current == latest:
        return False
    if DEV_VERSION in (current, latest):
        return True
    return _sort_key(latest) > _sort_key(current)
