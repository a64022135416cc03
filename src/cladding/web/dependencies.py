"""FastAPI dependency injection for cladding services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from cladding.application.commands import CalculateRequirementsCommand
from cladding.application.factory import ServiceFactory, get_factory
from cladding.application.presets import PresetManager


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


def get_calculate_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> CalculateRequirementsCommand:
    """Dependency for CalculateRequirementsCommand."""
    return factory.create_calculate_command()


def get_preset_manager(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> PresetManager:
    """Dependency for PresetManager."""
    return factory.get_preset_manager()


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
CalculateCommandDep = Annotated[CalculateRequirementsCommand, Depends(get_calculate_command)]
PresetManagerDep = Annotated[PresetManager, Depends(get_preset_manager)]
