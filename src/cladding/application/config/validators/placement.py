"""Placement validation: does the cube layout form cladable runs?"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cladding.application.config.adapter import document_to_grid, document_to_settings
from cladding.domain.services.engine import CladdingEngine

from .base import ValidationResult

if TYPE_CHECKING:
    from cladding.application.config.schema import GridDocument


class PlacementValidator:
    """Runs the engine's validation over the document's cube layout.

    Branching junctions, closed loops and discontinuous supplied flow are
    reported as errors naming the cubes involved.
    """

    @property
    def name(self) -> str:
        return "placement"

    def validate(self, document: GridDocument) -> ValidationResult:
        result = ValidationResult()
        if not document.grid.cubes:
            result.add_warning(
                path="grid.cubes",
                message="Grid has no cubes; nothing will be clad",
                suggestion="Add cubes or start from a preset ('cladding presets list')",
            )
            return result

        engine = CladdingEngine(settings=document_to_settings(document))
        calculation = engine.validate_and_compute(document_to_grid(document))
        if calculation.error is not None:
            result.add_error(
                path="grid.cubes",
                message=calculation.error.message,
                positions=calculation.error.positions,
            )
        return result
