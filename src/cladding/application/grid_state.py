"""Editable grid state for interactive front ends.

``GridEditor`` holds the current grid snapshot for one user session and
recomputes the requirements after every edit. Snapshots are immutable;
each edit swaps in a new one.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from cladding.application.config.adapter import grid_to_document
from cladding.application.presets.manager import PresetManager
from cladding.domain.entities import DEFAULT_GRID_SIZE, Cell, Grid
from cladding.domain.errors import BranchingConfigurationError
from cladding.domain.services.engine import (
    CalculationResult,
    CladdingEngine,
    EngineSettings,
)
from cladding.domain.services.topology import GridTopology
from cladding.domain.value_objects import CompassDirection, Connection, GridPosition

if TYPE_CHECKING:
    from cladding.contracts.observers import CalculationObserver
    from cladding.domain.services.packer import PackedRequirements

logger = logging.getLogger(__name__)


class GridEditor:
    """Session state: the current grid plus its latest calculation.

    Not thread-safe; use one editor per session.

    Example:
        editor = GridEditor()
        editor.toggle_cube(1, 0)
        editor.toggle_cube(1, 1)
        print(editor.requirements.two_pack_regular)
    """

    def __init__(
        self,
        grid: Grid | None = None,
        settings: EngineSettings | None = None,
        observer: CalculationObserver | None = None,
        preset_manager: PresetManager | None = None,
    ) -> None:
        self._settings = settings or EngineSettings()
        self._observer = observer
        self._engine = CladdingEngine(settings=self._settings, observer=observer)
        self._presets = preset_manager or PresetManager()
        self._grid = grid or Grid.empty(DEFAULT_GRID_SIZE, DEFAULT_GRID_SIZE)
        self._result = self._engine.validate_and_compute(self._grid)
        self._rejection: str | None = None

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    @property
    def result(self) -> CalculationResult:
        return self._result

    @property
    def requirements(self) -> PackedRequirements:
        return self._result.requirements

    @property
    def error_message(self) -> str | None:
        """Message for the last rejected edit, else the current grid error."""
        if self._rejection is not None:
            return self._rejection
        if self._result.error is not None:
            return self._result.error.message
        return None

    def toggle_cube(self, row: int, col: int) -> bool:
        """Add or remove a cube.

        Adding clads the new cube's exposed faces and un-clads the neighbour
        faces it now covers. Removing clads the neighbour faces it uncovers.
        Neighbour flow is cleared either way so the run is traced afresh.

        Returns:
            False if the edit was rejected because it would create a
            branching junction, otherwise True.

        Raises:
            ValueError: If the position is outside the grid.
        """
        position = GridPosition(row, col)
        cell = self._grid.cell(position)
        if cell.has_cube:
            candidate = self._remove_cube(position)
        else:
            candidate = self._add_cube(position)

        result = self._engine.validate_and_compute(candidate)
        if result.error is not None and result.error.code == BranchingConfigurationError.code:
            logger.warning(f"Rejected cube at {position}: {result.error.message}")
            self._rejection = (
                "Invalid cube placement: T-shaped configurations are not allowed"
            )
            return False

        self._commit(candidate, result)
        return True

    def toggle_cladding(self, row: int, col: int, direction: CompassDirection) -> bool:
        """Flip the clad mark on one exposed face.

        Returns:
            False if there is no cube at the position or the face is covered
            by a neighbouring cube, otherwise True.
        """
        position = GridPosition(row, col)
        cell = self._grid.cell(position)
        if not cell.has_cube or not GridTopology(self._grid).is_exposed(position, direction):
            logger.debug(f"Ignoring cladding toggle on {position} {direction.value}")
            return False

        clad = cell.clad ^ {direction}
        grid = self._grid.with_cell(replace(cell, clad=frozenset(clad)))
        self._commit(grid, self._engine.validate_and_compute(grid))
        return True

    def apply_preset(self, preset: str | Grid) -> None:
        """Replace the grid with a preset, by name or as a grid.

        Raises:
            PresetNotFoundError: If a named preset does not exist.
        """
        grid = self._presets.get_grid(preset) if isinstance(preset, str) else preset
        self._commit(grid, self._engine.validate_and_compute(grid))

    def clear(self) -> None:
        """Remove every cube, keeping the grid size."""
        grid = Grid.empty(self._grid.rows, self._grid.cols)
        self._commit(grid, self._engine.validate_and_compute(grid))

    def update_settings(self, **changes: Any) -> None:
        """Change engine settings (e.g. ``height``) and recompute."""
        self._settings = replace(self._settings, **changes)
        self._engine = CladdingEngine(settings=self._settings, observer=self._observer)
        self._commit(self._grid, self._engine.validate_and_compute(self._grid))

    def to_document(self, name: str | None = None) -> dict[str, Any]:
        """Serialize the current state as a grid document dictionary."""
        return grid_to_document(self._grid, self._settings, name=name)

    def _commit(self, grid: Grid, result: CalculationResult) -> None:
        self._grid = grid
        self._result = result
        self._rejection = None

    def _add_cube(self, position: GridPosition) -> Grid:
        occupied = self._grid.with_cell(
            Cell(row=position.row, col=position.col, has_cube=True)
        )
        topology = GridTopology(occupied)
        updates = [
            Cell(
                row=position.row,
                col=position.col,
                has_cube=True,
                clad=frozenset(topology.exposed_directions(position)),
            )
        ]
        for direction, neighbor in topology.occupied_neighbors(position):
            other = occupied.cell(neighbor)
            updates.append(
                replace(
                    other,
                    connection=Connection(),
                    clad=other.clad - {direction.opposite},
                )
            )
        return occupied.replace_cells(updates)

    def _remove_cube(self, position: GridPosition) -> Grid:
        topology = GridTopology(self._grid)
        updates = [self._grid.cell(position).cleared()]
        for direction, neighbor in topology.occupied_neighbors(position):
            other = self._grid.cell(neighbor)
            updates.append(
                replace(
                    other,
                    connection=Connection(),
                    clad=other.clad | {direction.opposite},
                )
            )
        return self._grid.replace_cells(updates)
