"""Application commands (use cases) for cladding calculation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from cladding.application.bill_of_materials import BillOfMaterials, CatalogEntry
from cladding.application.config.adapter import (
    document_to_catalog,
    document_to_grid,
    document_to_settings,
)
from cladding.contracts.dtos import CalculationOutput
from cladding.domain.entities import Grid
from cladding.domain.services.engine import CladdingEngine, EngineSettings

if TYPE_CHECKING:
    from cladding.application.config.schema import GridDocument
    from cladding.contracts.observers import CalculationObserver

logger = logging.getLogger(__name__)


class CalculateRequirementsCommand:
    """Command to calculate cladding requirements and a bill of materials.

    Args:
        observer: Observer handed to every engine the command creates.
        catalog: Default catalog overrides used when a call supplies none.
    """

    def __init__(
        self,
        observer: CalculationObserver | None = None,
        catalog: Mapping[str, CatalogEntry] | None = None,
    ) -> None:
        self.observer = observer
        self.catalog = dict(catalog or {})

    def create_engine(self, settings: EngineSettings) -> CladdingEngine:
        return CladdingEngine(settings=settings, observer=self.observer)

    def execute(
        self,
        grid: Grid,
        settings: EngineSettings | None = None,
        catalog: Mapping[str, CatalogEntry] | None = None,
    ) -> CalculationOutput:
        """Calculate requirements for a grid snapshot.

        Args:
            grid: Grid to calculate.
            settings: Engine settings; defaults apply when omitted.
            catalog: Catalog overrides for the bill of materials.

        Returns:
            CalculationOutput. Invalid placements are reported through
            ``output.result.error`` with all-zero requirements.
        """
        settings = settings or EngineSettings()
        result = self.create_engine(settings).validate_and_compute(grid)
        bill = BillOfMaterials.from_requirements(
            result.requirements, {**self.catalog, **(catalog or {})}
        )
        logger.debug(
            f"Calculated {grid.cube_count} cube(s): valid={result.is_valid}, "
            f"{len(bill.items)} BOM line(s)"
        )
        return CalculationOutput(
            grid=grid,
            settings=settings,
            result=result,
            bill_of_materials=bill,
        )

    def execute_document(
        self,
        document: GridDocument,
        settings: EngineSettings | None = None,
    ) -> CalculationOutput:
        """Calculate requirements for a loaded grid document.

        Args:
            document: Validated grid document.
            settings: Overrides the document's own options when given.
        """
        settings = settings or document_to_settings(document)
        try:
            grid = document_to_grid(document)
        except ValueError as e:
            return CalculationOutput(grid=None, settings=settings, errors=[str(e)])
        return self.execute(grid, settings, document_to_catalog(document))
