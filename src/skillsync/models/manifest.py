"""Installed-state manifest model."""

from dataclasses import dataclass, replace

from skillsync.models.component import ComponentType

ALL_WORKFLOWS = "all"


@dataclass(frozen=True)
class InstalledManifest:
    """Per-project record of the installed version and component selection.

    ``workflows == ("all",)`` is the sentinel meaning every workflow the
    registry knows at read time.
    """

    version: str
    languages: tuple[str, ...] = ()
    frameworks: tuple[str, ...] = ()
    workflows: tuple[str, ...] = (ALL_WORKFLOWS,)

    @property
    def has_all_workflows(self) -> bool:
        return self.workflows == (ALL_WORKFLOWS,)

    def names(self, component_type: ComponentType) -> tuple[str, ...]:
        """Stored names for a component type (the sentinel is not expanded)."""
        if component_type == "language":
            return self.languages
        if component_type == "framework":
            return self.frameworks
        return self.workflows

    def with_version(self, version: str) -> "InstalledManifest":
        return replace(self, version=version)

    def with_names(
        self, component_type: ComponentType, names: tuple[str, ...]
    ) -> "InstalledManifest":
        """Return a new manifest with the stored list for a type replaced."""
        if component_type == "language":
            return replace(self, languages=names)
        if component_type == "framework":
            return replace(self, frameworks=names)
        return replace(self, workflows=names)

    def with_component(self, component_type: ComponentType, name: str) -> "InstalledManifest":
        """Return a new manifest with name appended, unless it is already stored."""
        current = self.names(component_type)
        if name in current:
            return self
        return self.with_names(component_type, (*current, name))

    def without_component(
        self, component_type: ComponentType, name: str
    ) -> "InstalledManifest":
        """Return a new manifest with name dropped from the stored list."""
        current = self.names(component_type)
        return self.with_names(component_type, tuple(n for n in current if n != name))
