"""Tests for selective extraction into a project."""

import os
import stat
from pathlib import Path

import pytest

from skillsync.errors import ArchiveError, WriteError
from skillsync.operations.extract import expand_destination, extract


def _archive(tmp_path: Path, files: dict[str, str]) -> Path:
    """Unpacked archive directory holding files under template/."""
    archive_dir = tmp_path / "archive"
    for relative, text in files.items():
        path = archive_dir / "template" / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    (archive_dir / "template").mkdir(parents=True, exist_ok=True)
    return archive_dir


def test_extract_writes_files(tmp_path: Path, project: Path) -> None:
    """Missing files are written and parent directories created."""
    archive_dir = _archive(tmp_path, {"CLAUDE.md": "core", ".claude/skills/README.md": "readme"})

    result = extract(archive_dir, project, ["CLAUDE.md", ".claude/skills/README.md"], False)

    assert result.written == ("CLAUDE.md", ".claude/skills/README.md")
    assert result.skipped == ()
    assert result.ok
    assert (project / ".claude/skills/README.md").read_text(encoding="utf-8") == "readme"


def test_extract_skips_existing_without_force(tmp_path: Path, project: Path) -> None:
    """Existing files are skipped and keep their content."""
    archive_dir = _archive(tmp_path, {"CLAUDE.md": "upstream"})
    (project / "CLAUDE.md").write_text("local edit", encoding="utf-8")

    result = extract(archive_dir, project, ["CLAUDE.md"], False)

    assert result.skipped == ("CLAUDE.md",)
    assert result.written == ()
    assert (project / "CLAUDE.md").read_text(encoding="utf-8") == "local edit"


def test_extract_overwrites_with_force(tmp_path: Path, project: Path) -> None:
    archive_dir = _archive(tmp_path, {"CLAUDE.md": "upstream"})
    (project / "CLAUDE.md").write_text("local edit", encoding="utf-8")

    result = extract(archive_dir, project, ["CLAUDE.md"], True)

    assert result.written == ("CLAUDE.md",)
    assert (project / "CLAUDE.md").read_text(encoding="utf-8") == "upstream"


def test_extract_expands_directories(tmp_path: Path, project: Path) -> None:
    """A directory path writes only the files that are missing beneath it."""
    archive_dir = _archive(
        tmp_path,
        {
            ".claude/skills/go-guide/SKILL.md": "skill",
            ".claude/skills/go-guide/references/idioms.md": "idioms",
        },
    )
    local = project / ".claude/skills/go-guide/references/idioms.md"
    local.parent.mkdir(parents=True)
    local.write_text("mine", encoding="utf-8")

    result = extract(archive_dir, project, [".claude/skills/go-guide"], False)

    assert result.written == (".claude/skills/go-guide/SKILL.md",)
    assert result.skipped == (".claude/skills/go-guide/references/idioms.md",)
    assert local.read_text(encoding="utf-8") == "mine"


def test_extract_missing_source_is_recorded(tmp_path: Path, project: Path) -> None:
    """A path absent from the archive is an error for that path only."""
    archive_dir = _archive(tmp_path, {"CLAUDE.md": "core"})

    result = extract(archive_dir, project, [".claude/skills/nope", "CLAUDE.md"], False)

    assert result.written == ("CLAUDE.md",)
    assert [failure.path for failure in result.errors] == [".claude/skills/nope"]
    assert isinstance(result.errors[0].error, ArchiveError)
    assert "source not found" in result.errors[0].message


@pytest.mark.parametrize("bad_path", ["../outside.md", "/etc/passwd", "a/../../outside.md"])
def test_extract_rejects_escaping_paths(tmp_path: Path, project: Path, bad_path: str) -> None:
    """Destination paths leaving the project root are refused per path."""
    archive_dir = _archive(tmp_path, {"CLAUDE.md": "core"})
    (tmp_path / "outside.md").write_text("secret", encoding="utf-8")

    result = extract(archive_dir, project, [bad_path, "CLAUDE.md"], True)

    assert result.written == ("CLAUDE.md",)
    assert [failure.path for failure in result.errors] == [bad_path]
    assert isinstance(result.errors[0].error, ArchiveError)
    assert (tmp_path / "outside.md").read_text(encoding="utf-8") == "secret"


def test_extract_refuses_symlinked_destination_outside_root(
    tmp_path: Path, project: Path
) -> None:
    """A project directory symlinked outside the root is not written through."""
    archive_dir = _archive(tmp_path, {".claude/skills/README.md": "readme"})
    outside = tmp_path / "elsewhere"
    outside.mkdir()
    (project / ".claude").symlink_to(outside, target_is_directory=True)

    result = extract(archive_dir, project, [".claude/skills/README.md"], True)

    assert result.written == ()
    assert "escapes project root" in result.errors[0].message
    assert list(outside.iterdir()) == []


def test_extract_continues_after_write_error(tmp_path: Path, project: Path) -> None:
    """A write failure is recorded and the remaining paths still extract."""
    archive_dir = _archive(tmp_path, {"CLAUDE.md": "core", "AGENTS.md": "agents"})
    # A directory where a file should go makes the copy fail
    (project / "CLAUDE.md").mkdir()

    result = extract(archive_dir, project, ["CLAUDE.md", "AGENTS.md"], True)

    assert result.written == ("AGENTS.md",)
    assert [failure.path for failure in result.errors] == ["CLAUDE.md"]
    assert isinstance(result.errors[0].error, WriteError)
    assert result.warning_count == 1


def test_extract_preserves_permission_bits(tmp_path: Path, project: Path) -> None:
    archive_dir = _archive(tmp_path, {"scripts/run.sh": "#!/bin/sh\n"})
    os.chmod(archive_dir / "template/scripts/run.sh", 0o755)

    extract(archive_dir, project, ["scripts/run.sh"], False)

    mode = stat.S_IMODE((project / "scripts/run.sh").stat().st_mode)
    assert mode & stat.S_IXUSR


def test_extract_never_duplicates_paths(tmp_path: Path, project: Path) -> None:
    """Overlapping destination paths are handled once each."""
    archive_dir = _archive(tmp_path, {".claude/skills/README.md": "readme"})

    result = extract(archive_dir, project, [".claude/skills", ".claude/skills/README.md"], False)

    assert result.written == (".claude/skills/README.md",)
    assert result.skipped == ()


def test_expand_destination_rejects_archive_escape(tmp_path: Path) -> None:
    archive_dir = _archive(tmp_path, {})
    with pytest.raises(ArchiveError):
        expand_destination(archive_dir, "../../etc")
