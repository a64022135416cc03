"""Grid validation errors.

These are raised by the domain services while a grid is being analysed.
``CladdingEngine.validate_and_compute`` converts them into a
``CalculationError`` value so callers never see them escape.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import ClassVar

from .value_objects import GridPosition


class GridValidationError(Exception):
    """Base class for grids that cannot be clad.

    Attributes:
        code: Stable machine-readable tag for the error category.
        message: Human-readable description.
        positions: Cells involved in the problem, in row-major order.
    """

    code: ClassVar[str] = "grid_validation"
    default_message: ClassVar[str] = "Invalid cube placement"

    def __init__(
        self,
        message: str | None = None,
        positions: Iterable[GridPosition] = (),
    ) -> None:
        self.message = message or self.default_message
        self.positions = tuple(sorted(set(positions)))
        super().__init__(self.message)


class BranchingConfigurationError(GridValidationError):
    """A cube touches more than two other cubes (T or plus junction)."""

    code: ClassVar[str] = "branching_configuration"
    default_message: ClassVar[str] = (
        "Invalid cube placement: T-shaped or plus-shaped junctions are not allowed"
    )


class FlowContinuityMismatchError(GridValidationError):
    """Supplied flow does not run continuously from one cube to the next."""

    code: ClassVar[str] = "flow_continuity_mismatch"
    default_message: ClassVar[str] = (
        "Flow direction is inconsistent between neighbouring cubes"
    )


class DisconnectedComponentTooShortError(GridValidationError):
    """A run has no usable pair of endpoints, such as a closed loop."""

    code: ClassVar[str] = "disconnected_component_too_short"
    default_message: ClassVar[str] = (
        "Cube run has no open ends to route flow through"
    )
