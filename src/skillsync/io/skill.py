"""Reading SKILL.md files of installed components."""

from pathlib import Path

import frontmatter
import yaml


def read_skill_description(skill_file: Path) -> str | None:
    """Description from a SKILL.md front matter block, or None if absent or unreadable."""
    if not skill_file.is_file():
        return None
    # Malformed front matter is treated like missing front matter
    try:
        post = frontmatter.loads(skill_file.read_text(encoding="utf-8"))
    except (yaml.YAMLError, UnicodeDecodeError):
        return None
    description = post.metadata.get("description")
    if isinstance(description, str) and description.strip():
        return description.strip()
    return None
