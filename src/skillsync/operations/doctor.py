"""Project health checks and repair.

Checks run in a fixed order and independently of each other. Presence is
judged by file existence only: a locally edited file counts as healthy and
repair never overwrites an existing file.
"""

import logging
import re
from dataclasses import dataclass, replace
from pathlib import Path

from skillsync import registry
from skillsync.errors import ConfigNotFound, ConfigParseError, WriteError
from skillsync.io.manifest import MANIFEST_FILENAME, find_manifest, installed_names, load_manifest
from skillsync.models.component import ComponentType
from skillsync.models.extraction import ExtractionFailure, ExtractionResult
from skillsync.models.manifest import InstalledManifest
from skillsync.operations.download import Downloader
from skillsync.operations.extract import extract

logger = logging.getLogger(__name__)

_VERSION_PATTERNS = (
    re.compile(r"\*\*Current Version\*\*:\s*(\d+\.\d+\.\d+)"),
    re.compile(r"Current Version:\s*(\d+\.\d+\.\d+)"),
)

_COMPONENT_CHECKS: tuple[tuple[ComponentType, str], ...] = (
    ("language", "Language guides"),
    ("framework", "Framework guides"),
    ("workflow", "Workflows"),
)

_MANIFEST_UNAVAILABLE = "skipped: manifest unavailable"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one doctor check.

    ``missing_paths`` are destination paths a repair should extract and
    ``missing_dirs`` are directories a repair should create.
    """

    name: str
    passed: bool
    message: str
    fixable: bool = False
    missing_paths: tuple[str, ...] = ()
    missing_dirs: tuple[str, ...] = ()


@dataclass(frozen=True)
class DoctorReport:
    checks: tuple[CheckResult, ...]
    repair: ExtractionResult | None = None
    created_dirs: tuple[str, ...] = ()

    @property
    def healthy(self) -> bool:
        return all(check.passed for check in self.checks)

    @property
    def failed(self) -> list[CheckResult]:
        return [check for check in self.checks if not check.passed]

    @property
    def fixable_count(self) -> int:
        return sum(1 for check in self.failed if check.fixable)


def extract_instruction_version(text: str) -> str | None:
    """Version string embedded in an instruction file, if any."""
    for pattern in _VERSION_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None


def _check_manifest(project_root: Path) -> tuple[CheckResult, InstalledManifest | None]:
    name = "Manifest"
    try:
        manifest = load_manifest(project_root)
    except ConfigNotFound:
        return CheckResult(name, False, f"{MANIFEST_FILENAME} not found"), None
    except ConfigParseError as e:
        return CheckResult(name, False, f"Config error: {e.reason}"), None
    path = find_manifest(project_root)
    filename = path.name if path is not None else MANIFEST_FILENAME
    return CheckResult(name, True, f"{filename} found (v{manifest.version})"), manifest


def _check_file(project_root: Path, relative: str, repairable: bool) -> CheckResult:
    path = project_root / relative
    if not path.is_file():
        return CheckResult(
            relative, False, f"{relative} not found", fixable=repairable, missing_paths=(relative,)
        )
    message = f"{relative} found"
    if relative == registry.INSTRUCTION_FILE:
        version = extract_instruction_version(path.read_text(encoding="utf-8", errors="replace"))
        if version is not None:
            message = f"{relative} found (v{version})"
    return CheckResult(relative, True, message)


def _check_directories(project_root: Path) -> CheckResult:
    name = "Directory structure"
    missing = tuple(d for d in registry.SKELETON_DIRS if not (project_root / d).is_dir())
    if missing:
        return CheckResult(
            name, False, f"Missing: {', '.join(missing)}", fixable=True, missing_dirs=missing
        )
    return CheckResult(name, True, "All required directories present")


def _check_components(
    project_root: Path,
    manifest: InstalledManifest | None,
    component_type: ComponentType,
    name: str,
) -> CheckResult:
    if manifest is None:
        return CheckResult(name, False, _MANIFEST_UNAVAILABLE)

    components = [
        component
        for component_name in installed_names(manifest, component_type)
        if (component := registry.find_component(component_type, component_name)) is not None
    ]
    if not components:
        return CheckResult(name, True, "None installed")

    missing = [c for c in components if not (project_root / c.marker_path).is_file()]
    if missing:
        return CheckResult(
            name,
            False,
            f"Missing: {', '.join(c.name for c in missing)}",
            fixable=True,
            missing_paths=tuple(c.path for c in missing),
        )
    return CheckResult(name, True, f"All {len(components)} present")


def _check_registry(manifest: InstalledManifest | None) -> CheckResult:
    name = "Registry"
    if manifest is None:
        return CheckResult(name, False, _MANIFEST_UNAVAILABLE)
    unknown = registry.unknown_names(manifest.languages, manifest.frameworks, manifest.workflows)
    if unknown:
        return CheckResult(name, False, f"Unknown components: {', '.join(unknown)}")
    return CheckResult(name, True, "All installed components are known")


def run_checks(project_root: Path) -> tuple[tuple[CheckResult, ...], InstalledManifest | None]:
    """Run every check in order; returns the results and the manifest if it loaded."""
    manifest_check, manifest = _check_manifest(project_root)
    repairable = manifest is not None
    checks = [manifest_check]
    checks.extend(_check_file(project_root, path, repairable) for path in registry.CORE_PATHS)
    checks.append(_check_directories(project_root))
    checks.extend(
        _check_components(project_root, manifest, component_type, name)
        for component_type, name in _COMPONENT_CHECKS
    )
    checks.append(_check_registry(manifest))
    return tuple(checks), manifest


def run_doctor(downloader: Downloader, project_root: Path, fix: bool) -> DoctorReport:
    """Check a project and, when fix is set, repair what is fixable.

    Repair creates missing directories, then fetches the manifest's recorded
    version once and extracts only the missing paths without overwriting.
    The returned report reflects the state after repair.
    """
    checks, manifest = run_checks(project_root)
    failing = [check for check in checks if not check.passed and check.fixable]
    if not fix or not failing:
        return DoctorReport(checks=checks)

    created: list[str] = []
    dir_failures: list[ExtractionFailure] = []
    for check in failing:
        for directory in check.missing_dirs:
            try:
                (project_root / directory).mkdir(parents=True, exist_ok=True)
            except OSError as e:
                logger.debug("Cannot create %s: %s", directory, e)
                dir_failures.append(ExtractionFailure(directory, WriteError(f"{directory}: {e}")))
                continue
            created.append(directory)

    missing_paths = [path for check in failing for path in check.missing_paths]
    repair: ExtractionResult | None = None
    if missing_paths and manifest is not None:
        logger.debug("Repairing %d paths from version %s", len(missing_paths), manifest.version)
        archive_dir = downloader.fetch(manifest.version)
        repair = extract(archive_dir, project_root, missing_paths, force_overwrite=False)
    if dir_failures:
        base = repair or ExtractionResult()
        repair = replace(base, errors=(*dir_failures, *base.errors))

    checks, _ = run_checks(project_root)
    return DoctorReport(checks=checks, repair=repair, created_dirs=tuple(created))
