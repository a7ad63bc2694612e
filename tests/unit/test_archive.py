"""Tests for release archive layout and unpacking."""

import io
import tarfile
from pathlib import Path

import pytest

from skillsync.errors import ArchiveError
from skillsync.io.archive import (
    content_root,
    to_archive_path,
    to_destination_path,
    unpack_release,
)
from tests.test_utils.archives import build_release, build_tarball


def _write(tmp_path: Path, data: bytes) -> Path:
    tarball = tmp_path / "release.tar.gz"
    tarball.write_bytes(data)
    return tarball


def test_prefix_mapping() -> None:
    """Destination and archive paths map through the template/ prefix."""
    assert to_archive_path("CLAUDE.md") == "template/CLAUDE.md"
    assert to_destination_path("template/.claude/skills/go-guide") == ".claude/skills/go-guide"
    assert to_destination_path("README.md") is None
    assert to_destination_path(to_archive_path(".claude/skills")) == ".claude/skills"


def test_unpack_release(tmp_path: Path) -> None:
    """A well-formed release unpacks to its single top-level directory."""
    tarball = _write(tmp_path, build_release("1.0.0", {"CLAUDE.md": "hello"}))

    root = unpack_release(tarball, tmp_path / "out")

    assert root == tmp_path / "out" / "samuel-1.0.0"
    assert (content_root(root) / "CLAUDE.md").read_text(encoding="utf-8") == "hello"


def test_unpack_rejects_garbage(tmp_path: Path) -> None:
    """Bytes that are not a gzip tarball raise ArchiveError."""
    tarball = _write(tmp_path, b"<html>not found</html>")
    with pytest.raises(ArchiveError, match="Failed to read archive"):
        unpack_release(tarball, tmp_path / "out")


def test_unpack_rejects_multiple_top_level_dirs(tmp_path: Path) -> None:
    tarball = _write(
        tmp_path,
        build_tarball({"a/template/CLAUDE.md": "x", "b/template/CLAUDE.md": "y"}),
    )
    with pytest.raises(ArchiveError, match="exactly one top-level directory"):
        unpack_release(tarball, tmp_path / "out")


def test_unpack_requires_template_dir(tmp_path: Path) -> None:
    tarball = _write(tmp_path, build_tarball({"samuel-1.0.0/docs/CLAUDE.md": "x"}))
    with pytest.raises(ArchiveError, match="template/"):
        unpack_release(tarball, tmp_path / "out")


def test_unpack_rejects_path_traversal(tmp_path: Path) -> None:
    """Members climbing out of the extraction directory are refused."""
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
        data = b"pwned"
        info = tarfile.TarInfo("samuel-1.0.0/../../escaped.txt")
        info.size = len(data)
        archive.addfile(info, io.BytesIO(data))
    tarball = _write(tmp_path, buffer.getvalue())

    with pytest.raises(ArchiveError):
        unpack_release(tarball, tmp_path / "out")

    assert not (tmp_path / "escaped.txt").exists()


def test_unpack_rejects_symlink_escape(tmp_path: Path) -> None:
    """Symlinks pointing outside the extraction directory are refused."""
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
        directory = tarfile.TarInfo("samuel-1.0.0/template")
        directory.type = tarfile.DIRTYPE
        archive.addfile(directory)
        link = tarfile.TarInfo("samuel-1.0.0/template/CLAUDE.md")
        link.type = tarfile.SYMTYPE
        link.linkname = "/etc/passwd"
        archive.addfile(link)
    tarball = _write(tmp_path, buffer.getvalue())

    with pytest.raises(ArchiveError, match="Unsafe archive entry"):
        unpack_release(tarball, tmp_path / "out")
