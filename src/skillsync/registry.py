"""Static catalog of installable components and templates.

The catalog is module-level constant data built once at import. Lookups are
pure: nothing here touches the filesystem or the network.
"""

from skillsync.models.component import Component, ComponentType, Template
from skillsync.models.manifest import ALL_WORKFLOWS

INSTRUCTION_FILE = "CLAUDE.md"
AGENTS_FILE = "AGENTS.md"
CONTENT_DIR = ".claude"
SKILLS_DIR = ".claude/skills"

# Always installed, in this order, ahead of any component path
CORE_PATHS: tuple[str, ...] = (INSTRUCTION_FILE, AGENTS_FILE, f"{SKILLS_DIR}/README.md")

SKELETON_DIRS: tuple[str, ...] = (CONTENT_DIR, SKILLS_DIR)


def _language(name: str, description: str, *tags: str) -> Component:
    return Component(name, "language", f"{SKILLS_DIR}/{name}-guide", description, tags)


def _framework(name: str, description: str, *tags: str) -> Component:
    return Component(name, "framework", f"{SKILLS_DIR}/{name}", description, tags)


def _workflow(name: str, description: str, *tags: str) -> Component:
    return Component(name, "workflow", f"{SKILLS_DIR}/{name}", description, tags)


LANGUAGES: tuple[Component, ...] = (
    _language("typescript", "TypeScript/JavaScript", "ts", "js", "javascript", "node"),
    _language("python", "Python", "py", "pip", "django", "fastapi"),
    _language("go", "Go", "golang", "goroutine"),
    _language("rust", "Rust", "cargo", "crate"),
    _language("kotlin", "Kotlin", "kt", "android", "jvm"),
    _language("java", "Java", "jvm", "maven", "gradle"),
    _language("csharp", "C#/.NET", "dotnet", "net", "cs"),
    _language("php", "PHP", "composer", "laravel"),
    _language("swift", "Swift", "ios", "macos", "xcode"),
    _language("cpp", "C/C++", "c", "cplusplus", "cmake"),
    _language("ruby", "Ruby", "rb", "gem", "rails"),
    _language("sql", "SQL", "postgres", "mysql", "sqlite"),
    _language("shell", "Shell/Bash", "bash", "sh", "zsh", "scripting"),
    _language("r", "R", "rstats", "tidyverse", "cran"),
    _language("dart", "Dart", "flutter", "pub"),
    _language("html-css", "HTML/CSS", "html", "css", "web", "accessibility"),
    _language("lua", "Lua", "luajit", "love2d", "neovim"),
    _language("assembly", "Assembly", "asm", "x86", "arm"),
    _language("cuda", "CUDA", "gpu", "nvidia", "parallel"),
    _language("solidity", "Solidity", "ethereum", "evm", "smart-contract"),
    _language("zig", "Zig", "systems", "comptime"),
)

FRAMEWORKS: tuple[Component, ...] = (
    # TypeScript/JavaScript
    _framework("react", "React", "reactjs", "jsx", "tsx", "frontend"),
    _framework("nextjs", "Next.js", "next", "ssr", "react", "vercel"),
    _framework("express", "Express.js", "node", "rest", "api", "middleware"),
    # Python
    _framework("django", "Django", "python", "orm", "drf", "admin"),
    _framework("fastapi", "FastAPI", "python", "async", "pydantic", "openapi"),
    _framework("flask", "Flask", "python", "wsgi", "jinja", "lightweight"),
    # Go
    _framework("gin", "Gin", "go", "golang", "rest", "api"),
    _framework("echo", "Echo", "go", "golang", "rest", "labstack"),
    _framework("fiber", "Fiber", "go", "golang", "express-like", "fasthttp"),
    # Rust
    _framework("axum", "Axum", "rust", "tower", "async", "tokio"),
    _framework("actix-web", "Actix-web", "rust", "actor", "async", "http"),
    _framework("rocket", "Rocket", "rust", "type-safe", "macros"),
    # Kotlin
    _framework("spring-boot-kotlin", "Spring Boot (Kotlin)", "kotlin", "spring", "jvm"),
    _framework("ktor", "Ktor", "kotlin", "coroutines", "dsl", "jvm"),
    _framework("android-compose", "Android Compose", "kotlin", "android", "jetpack"),
    # Java
    _framework("spring-boot-java", "Spring Boot (Java)", "java", "spring", "jvm", "jpa"),
    _framework("quarkus", "Quarkus", "java", "graalvm", "reactive", "cloud-native"),
    _framework("micronaut", "Micronaut", "java", "compile-time", "di", "cloud-native"),
    # C#
    _framework("aspnet-core", "ASP.NET Core", "csharp", "dotnet", "minimal-api", "efcore"),
    _framework("blazor", "Blazor", "csharp", "dotnet", "wasm", "signalr"),
    _framework("unity", "Unity", "csharp", "game", "3d", "scripting"),
    # PHP
    _framework("laravel", "Laravel", "php", "eloquent", "blade", "artisan"),
    _framework("symfony", "Symfony", "php", "doctrine", "twig", "components"),
    _framework("wordpress", "WordPress", "php", "cms", "themes", "plugins"),
    # Swift
    _framework("swiftui", "SwiftUI", "swift", "ios", "macos", "declarative"),
    _framework("uikit", "UIKit", "swift", "ios", "storyboard", "programmatic"),
    _framework("vapor", "Vapor", "swift", "server", "fluent", "async"),
    # Ruby
    _framework("rails", "Rails", "ruby", "activerecord", "mvc", "hotwire"),
    _framework("sinatra", "Sinatra", "ruby", "lightweight", "dsl", "rack"),
    _framework("hanami", "Hanami", "ruby", "clean-architecture", "dry-rb"),
    # Dart
    _framework("flutter", "Flutter", "dart", "mobile", "material", "riverpod"),
    _framework("shelf", "Shelf", "dart", "http", "server", "middleware"),
    _framework("dart-frog", "Dart Frog", "dart", "server", "file-based", "routing"),
)

WORKFLOWS: tuple[Component, ...] = (
    _workflow("initialize-project", "Project setup", "setup", "bootstrap"),
    _workflow("create-rfd", "Technical decision documents", "rfd", "design"),
    _workflow("create-prd", "Requirements documents", "prd", "requirements"),
    _workflow("generate-tasks", "Task breakdown", "tasks", "planning"),
    _workflow("code-review", "Pre-commit quality review", "review", "quality"),
    _workflow("security-audit", "Security assessment", "security", "audit"),
    _workflow("testing-strategy", "Test planning", "tests", "coverage"),
    _workflow("cleanup-project", "Prune unused guides", "cleanup", "prune"),
    _workflow("refactoring", "Technical debt remediation", "refactor", "debt"),
    _workflow("dependency-update", "Safe dependency updates", "dependencies", "upgrade"),
    _workflow("update-framework", "Skill set version updates", "upgrade", "version"),
    _workflow("troubleshooting", "Debugging workflow", "debug", "bugs"),
    _workflow("generate-agents-md", "Cross-tool compatibility", "agents", "compatibility"),
    _workflow("document-work", "Capture patterns", "docs", "patterns"),
    _workflow("create-skill", "Create Agent Skills", "skill", "authoring"),
)

_CATALOG: dict[ComponentType, tuple[Component, ...]] = {
    "language": LANGUAGES,
    "framework": FRAMEWORKS,
    "workflow": WORKFLOWS,
}

_BY_NAME: dict[ComponentType, dict[str, Component]] = {
    component_type: {c.name: c for c in components}
    for component_type, components in _CATALOG.items()
}

TEMPLATES: tuple[Template, ...] = (
    Template(
        name="full",
        description="All languages and frameworks",
        languages=tuple(c.name for c in LANGUAGES),
        frameworks=tuple(c.name for c in FRAMEWORKS),
        workflows=(ALL_WORKFLOWS,),
    ),
    Template(
        name="starter",
        description="TypeScript, Python and Go",
        languages=("typescript", "python", "go"),
        frameworks=(),
        workflows=(ALL_WORKFLOWS,),
    ),
    Template(
        name="minimal",
        description="Core files and workflows only",
        languages=(),
        frameworks=(),
        workflows=(ALL_WORKFLOWS,),
    ),
)

_TEMPLATES_BY_NAME = {t.name: t for t in TEMPLATES}

# Frameworks whose tags do not name their language
_FRAMEWORK_LANGUAGES = {
    "react": "typescript",
    "nextjs": "typescript",
    "express": "typescript",
}


def all_components(component_type: ComponentType) -> tuple[Component, ...]:
    return _CATALOG[component_type]


def component_names(component_type: ComponentType) -> list[str]:
    return [c.name for c in _CATALOG[component_type]]


def find_component(component_type: ComponentType, name: str) -> Component | None:
    return _BY_NAME[component_type].get(name)


def find_template(name: str) -> Template | None:
    return _TEMPLATES_BY_NAME.get(name)


def framework_language(framework: str) -> str | None:
    """Name of the language a framework is built on, if the catalog says."""
    component = find_component("framework", framework)
    if component is None:
        return None
    for tag in component.tags:
        if tag in _BY_NAME["language"]:
            return tag
    return _FRAMEWORK_LANGUAGES.get(framework)


def related_components(component: Component) -> list[Component]:
    """Frameworks for a language, or the language behind a framework.

    Workflows have no related components.
    """
    if component.type == "language":
        return [fw for fw in FRAMEWORKS if framework_language(fw.name) == component.name]
    if component.type == "framework":
        language = framework_language(component.name)
        if language is not None:
            return [_BY_NAME["language"][language]]
    return []


def all_templates() -> tuple[Template, ...]:
    return TEMPLATES


def expand_workflows(workflows: tuple[str, ...] | list[str]) -> list[str]:
    """Expand the "all" sentinel against the workflows known right now."""
    if tuple(workflows) == (ALL_WORKFLOWS,):
        return component_names("workflow")
    return list(workflows)


def resolve_components(
    languages: tuple[str, ...] | list[str],
    frameworks: tuple[str, ...] | list[str],
    workflows: tuple[str, ...] | list[str],
) -> list[Component]:
    """Known components for a selection in input order; unknown names are omitted."""
    components: list[Component] = []
    seen: set[tuple[ComponentType, str]] = set()
    selection: list[tuple[ComponentType, list[str]]] = [
        ("language", list(languages)),
        ("framework", list(frameworks)),
        ("workflow", expand_workflows(workflows)),
    ]
    for component_type, names in selection:
        for name in names:
            component = find_component(component_type, name)
            if component is None or (component_type, name) in seen:
                continue
            seen.add((component_type, name))
            components.append(component)
    return components


def resolve_paths(
    languages: tuple[str, ...] | list[str],
    frameworks: tuple[str, ...] | list[str],
    workflows: tuple[str, ...] | list[str],
) -> list[str]:
    """Resolve a selection to an ordered list of destination paths.

    Core paths come first, then one path per known language, framework and
    workflow in input order. The result is deterministic and free of
    duplicates, which keeps re-installation and update diffs stable.
    """
    paths = list(CORE_PATHS)
    for component in resolve_components(languages, frameworks, workflows):
        if component.path not in paths:
            paths.append(component.path)
    return paths


def unknown_names(
    languages: tuple[str, ...] | list[str],
    frameworks: tuple[str, ...] | list[str],
    workflows: tuple[str, ...] | list[str],
) -> list[str]:
    """Names in a selection the registry does not know, as ``type:name``."""
    unknown: list[str] = []
    selection: list[tuple[ComponentType, list[str]]] = [
        ("language", list(languages)),
        ("framework", list(frameworks)),
        ("workflow", expand_workflows(workflows)),
    ]
    for component_type, names in selection:
        unknown.extend(
            f"{component_type}:{name}"
            for name in names
            if find_component(component_type, name) is None
        )
    return unknown
