"""Adjacency queries over a grid snapshot."""

from __future__ import annotations

from cladding.domain.entities import Grid
from cladding.domain.value_objects import (
    FACE_ORDER,
    NEIGHBOR_ORDER,
    CompassDirection,
    GridPosition,
)


class GridTopology:
    """Read-only neighbourhood queries for one grid.

    Only orthogonal (N/S/E/W) adjacency counts; diagonal cells are never
    neighbours.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid

    def in_bounds(self, row: int, col: int) -> bool:
        return self.grid.in_bounds(row, col)

    def has_cube_at(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self.grid.cells[row][col].has_cube

    def neighbor(
        self, position: GridPosition, direction: CompassDirection
    ) -> GridPosition | None:
        """Position one step away, or None when it falls off the grid."""
        d_row, d_col = direction.delta
        row, col = position.row + d_row, position.col + d_col
        if not self.in_bounds(row, col):
            return None
        return GridPosition(row, col)

    def occupied_neighbors(
        self, position: GridPosition
    ) -> list[tuple[CompassDirection, GridPosition]]:
        """Occupied neighbours in N, S, E, W order."""
        result = []
        for direction in NEIGHBOR_ORDER:
            other = self.neighbor(position, direction)
            if other is not None and self.has_cube_at(other.row, other.col):
                result.append((direction, other))
        return result

    def degree(self, position: GridPosition) -> int:
        return len(self.occupied_neighbors(position))

    def is_exposed(self, position: GridPosition, direction: CompassDirection) -> bool:
        """True when no cube sits on the other side of the face."""
        other = self.neighbor(position, direction)
        return other is None or not self.has_cube_at(other.row, other.col)

    def exposed_directions(self, position: GridPosition) -> list[CompassDirection]:
        """Exposed faces in clockwise N, E, S, W order."""
        return [d for d in FACE_ORDER if self.is_exposed(position, d)]

    def occupied_positions(self) -> list[GridPosition]:
        """Positions holding a cube, in row-major order."""
        return [cell.position for cell in self.grid.occupied()]

    @staticmethod
    def direction_between(a: GridPosition, b: GridPosition) -> CompassDirection:
        """Direction from ``a`` to its orthogonal neighbour ``b``.

        Raises:
            ValueError: If the positions are not orthogonally adjacent.
        """
        step = (b.row - a.row, b.col - a.col)
        for direction in NEIGHBOR_ORDER:
            if direction.delta == step:
                return direction
        raise ValueError(f"Positions {a} and {b} are not orthogonally adjacent")
