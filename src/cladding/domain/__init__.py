"""Domain layer - grid model and cladding calculation."""

from .entities import DEFAULT_GRID_SIZE, MAX_GRID_SIZE, Cell, Grid
from .errors import (
    BranchingConfigurationError,
    DisconnectedComponentTooShortError,
    FlowContinuityMismatchError,
    GridValidationError,
)
from .services import (
    CalculationError,
    CalculationResult,
    CladdingEngine,
    EngineSettings,
    PackedRequirements,
    RawRequirements,
)
from .value_objects import (
    CellRole,
    CompassDirection,
    Connection,
    ConnectorType,
    GridPosition,
    PanelHeight,
    PanelType,
    ShapeKind,
)

__all__ = [
    "DEFAULT_GRID_SIZE",
    "MAX_GRID_SIZE",
    "BranchingConfigurationError",
    "CalculationError",
    "CalculationResult",
    "Cell",
    "CellRole",
    "CladdingEngine",
    "CompassDirection",
    "Connection",
    "ConnectorType",
    "DisconnectedComponentTooShortError",
    "EngineSettings",
    "FlowContinuityMismatchError",
    "Grid",
    "GridPosition",
    "GridValidationError",
    "PackedRequirements",
    "PanelHeight",
    "PanelType",
    "RawRequirements",
    "ShapeKind",
]
