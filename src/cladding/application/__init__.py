"""Application layer - use cases, grid documents, presets and editing state."""

from .bill_of_materials import DEFAULT_CATALOG, BillOfMaterials, CatalogEntry, LineItem
from .commands import CalculateRequirementsCommand
from .factory import ServiceFactory, get_factory
from .grid_state import GridEditor
from .presets import PresetManager, PresetNotFoundError

__all__ = [
    "DEFAULT_CATALOG",
    "BillOfMaterials",
    "CalculateRequirementsCommand",
    "CatalogEntry",
    "GridEditor",
    "LineItem",
    "PresetManager",
    "PresetNotFoundError",
    "ServiceFactory",
    "get_factory",
]
