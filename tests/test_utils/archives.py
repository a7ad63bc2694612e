"""Build release tarballs in memory for tests."""

import io
import tarfile

from skillsync import registry
from skillsync.models.component import COMPONENT_TYPES


def build_tarball(
    entries: dict[str, str],
    *,
    executable: frozenset[str] = frozenset(),
) -> bytes:
    """Gzip tarball containing entries (archive path -> text) in the given order."""
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
        directories: set[str] = set()
        for name, text in entries.items():
            parts = name.split("/")[:-1]
            for i in range(1, len(parts) + 1):
                directory = "/".join(parts[:i])
                if directory not in directories:
                    directories.add(directory)
                    info = tarfile.TarInfo(directory)
                    info.type = tarfile.DIRTYPE
                    info.mode = 0o755
                    archive.addfile(info)
            data = text.encode("utf-8")
            info = tarfile.TarInfo(name)
            info.size = len(data)
            info.mode = 0o755 if name in executable else 0o644
            archive.addfile(info, io.BytesIO(data))
    return buffer.getvalue()


def release_files(version: str, overrides: dict[str, str] | None = None) -> dict[str, str]:
    """Project-relative files of a complete release: core files plus every component."""
    files = {
        registry.INSTRUCTION_FILE: f"# Instructions\n\n**Current Version**: {version}\n",
        registry.AGENTS_FILE: f"# Agents\n\nCurrent Version: {version}\n",
        f"{registry.SKILLS_DIR}/README.md": "# Skills\n",
    }
    for component_type in COMPONENT_TYPES:
        for component in registry.all_components(component_type):
            files[component.marker_path] = (
                f"---\nname: {component.name}\ndescription: {component.description} "
                f"guide v{version}\n---\n\n# {component.name}\n"
            )
            files[f"{component.path}/references/patterns.md"] = f"{component.name} patterns\n"
    files.update(overrides or {})
    return files


def build_release(
    version: str,
    files: dict[str, str] | None = None,
    *,
    top: str | None = None,
    executable: frozenset[str] = frozenset(),
) -> bytes:
    """Release tarball laid out as upstream publishes it (``<top>/template/<path>``)."""
    top_dir = top or f"samuel-{version}"
    project_files = release_files(version) if files is None else files
    entries = {f"{top_dir}/template/{path}": text for path, text in project_files.items()}
    return build_tarball(
        entries, executable=frozenset(f"{top_dir}/template/{p}" for p in executable)
    )
