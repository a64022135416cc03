"""Shared Data Transfer Objects for cross-layer communication.

``CalculationOutput`` is produced by the application layer and consumed by
formatters, exporters, the CLI and the REST API.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cladding.application.bill_of_materials import BillOfMaterials
    from cladding.domain.entities import Grid
    from cladding.domain.services.engine import CalculationResult, EngineSettings
    from cladding.domain.services.packer import PackedRequirements


@dataclass
class CalculationOutput:
    """Result of running a calculation for one grid.

    Attributes:
        grid: The grid snapshot that was calculated.
        settings: Engine settings used.
        result: Engine result; carries a grid error when placement is invalid.
        bill_of_materials: Line items for the packed requirements.
        errors: Input errors found before the engine ran.
    """

    grid: Grid | None
    settings: EngineSettings
    result: CalculationResult | None = None
    bill_of_materials: BillOfMaterials | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors and self.result is not None and self.result.is_valid

    @property
    def requirements(self) -> PackedRequirements | None:
        return self.result.requirements if self.result is not None else None

    @property
    def error_messages(self) -> list[str]:
        """Input errors followed by the grid error, if any."""
        messages = list(self.errors)
        if self.result is not None and self.result.error is not None:
            messages.append(self.result.error.message)
        return messages
