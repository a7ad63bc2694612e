"""Tests for alias normalization."""

import pytest

from skillsync.aliases import normalize_name, normalize_type, split_names


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("language", "language"),
        ("lang", "language"),
        ("L", "language"),
        ("fw", "framework"),
        ("f", "framework"),
        ("wf", "workflow"),
        (" Workflow ", "workflow"),
    ],
)
def test_normalize_type(text: str, expected: str) -> None:
    """Type spellings map to canonical types."""
    assert normalize_type(text) == expected


def test_normalize_type_rejects_unknown() -> None:
    """Unknown type spellings raise ValueError naming the accepted forms."""
    with pytest.raises(ValueError, match="framework \\(fw, f\\)"):
        normalize_type("skill")


def test_normalize_name_aliases() -> None:
    """Aliases resolve per type; other names pass through lower-cased."""
    assert normalize_name("language", "ts") == "typescript"
    assert normalize_name("language", "PY") == "python"
    assert normalize_name("language", "c++") == "cpp"
    assert normalize_name("framework", "next") == "nextjs"
    assert normalize_name("framework", "spring") == "spring-boot-java"
    assert normalize_name("framework", "ts") == "ts"
    assert normalize_name("language", "Rust") == "rust"


def test_split_names_handles_commas_and_duplicates() -> None:
    """Repeated and comma-separated values are flattened in first-seen order."""
    names = split_names("language", ["ts,py", "go", "typescript", " , rust"])
    assert names == ["typescript", "python", "go", "rust"]
