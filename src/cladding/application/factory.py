"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cladding.application.commands import CalculateRequirementsCommand
    from cladding.application.grid_state import GridEditor
    from cladding.application.presets.manager import PresetManager
    from cladding.contracts.observers import CalculationObserver
    from cladding.domain.entities import Grid
    from cladding.domain.services.engine import CladdingEngine, EngineSettings


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes construction so the CLI, the REST API and tests share one
    wiring, and so a test can swap in an observer.

    Attributes:
        observer: Observer handed to every engine created by the factory.
    """

    observer: "CalculationObserver | None" = None

    _preset_manager: "PresetManager | None" = field(
        default=None, init=False, repr=False
    )

    def create_engine(self, settings: "EngineSettings | None" = None) -> "CladdingEngine":
        """Create a CladdingEngine for the given settings."""
        from cladding.domain.services.engine import CladdingEngine

        return CladdingEngine(settings=settings, observer=self.observer)

    def get_preset_manager(self) -> "PresetManager":
        """Get or create the preset manager."""
        if self._preset_manager is None:
            from cladding.application.presets.manager import PresetManager

            self._preset_manager = PresetManager()
        return self._preset_manager

    def create_calculate_command(self) -> "CalculateRequirementsCommand":
        """Create a CalculateRequirementsCommand."""
        from cladding.application.commands import CalculateRequirementsCommand

        return CalculateRequirementsCommand(observer=self.observer)

    def create_grid_editor(
        self,
        grid: "Grid | None" = None,
        settings: "EngineSettings | None" = None,
    ) -> "GridEditor":
        """Create a GridEditor sharing this factory's presets and observer."""
        from cladding.application.grid_state import GridEditor

        return GridEditor(
            grid=grid,
            settings=settings,
            observer=self.observer,
            preset_manager=self.get_preset_manager(),
        )


_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
