"""Alias normalization for user-typed component names and types.

Every user-supplied name goes through ``normalize_name`` before a registry
lookup. Names missing from the tables pass through unchanged (lower-cased).
"""

from collections.abc import Iterable

from skillsync.models.component import ComponentType

_TYPE_ALIASES: dict[str, ComponentType] = {
    "language": "language",
    "languages": "language",
    "lang": "language",
    "l": "language",
    "framework": "framework",
    "frameworks": "framework",
    "fw": "framework",
    "f": "framework",
    "workflow": "workflow",
    "workflows": "workflow",
    "wf": "workflow",
    "w": "workflow",
}

_NAME_ALIASES: dict[ComponentType, dict[str, str]] = {
    "language": {
        "ts": "typescript",
        "js": "typescript",
        "javascript": "typescript",
        "node": "typescript",
        "py": "python",
        "golang": "go",
        "rs": "rust",
        "kt": "kotlin",
        "cs": "csharp",
        "c#": "csharp",
        "dotnet": "csharp",
        "c": "cpp",
        "c++": "cpp",
        "cplusplus": "cpp",
        "rb": "ruby",
        "sh": "shell",
        "bash": "shell",
        "zsh": "shell",
        "html": "html-css",
        "css": "html-css",
        "asm": "assembly",
        "sol": "solidity",
    },
    "framework": {
        "next": "nextjs",
        "next.js": "nextjs",
        "spring": "spring-boot-java",
        "spring-boot": "spring-boot-java",
        "actix": "actix-web",
        "aspnet": "aspnet-core",
        "asp.net": "aspnet-core",
        "compose": "android-compose",
        "ror": "rails",
        "frog": "dart-frog",
    },
    "workflow": {
        "prd": "create-prd",
        "rfd": "create-rfd",
        "review": "code-review",
        "audit": "security-audit",
    },
}


def normalize_type(text: str) -> ComponentType:
    """Map a type spelling such as ``fw`` or ``lang`` to its component type.

    Raises:
        ValueError: If the spelling is not recognised
    """
    component_type = _TYPE_ALIASES.get(text.strip().lower())
    if component_type is None:
        raise ValueError(
            f"Invalid component type: '{text}'. "
            "Use language (lang, l), framework (fw, f) or workflow (wf, w)"
        )
    return component_type


def normalize_name(component_type: ComponentType, name: str) -> str:
    cleaned = name.strip().lower()
    return _NAME_ALIASES[component_type].get(cleaned, cleaned)


def split_names(component_type: ComponentType, values: Iterable[str]) -> list[str]:
    """Normalize repeated and comma-separated values, keeping first-seen order."""
    names: list[str] = []
    for value in values:
        for part in value.split(","):
            if not part.strip():
                continue
            name = normalize_name(component_type, part)
            if name not in names:
                names.append(name)
    return names
