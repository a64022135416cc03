"""Grid building helpers shared by the test modules."""

from __future__ import annotations

from cladding.domain.entities import Cell
from cladding.domain.value_objects import CompassDirection, Connection

N = CompassDirection.NORTH
S = CompassDirection.SOUTH
E = CompassDirection.EAST
W = CompassDirection.WEST


def cube(
    row: int,
    col: int,
    entry: CompassDirection | None = None,
    exit: CompassDirection | None = None,
    clad: tuple[CompassDirection, ...] = (),
) -> Cell:
    """Build an occupied cell with optional supplied flow and cladding."""
    return Cell(
        row=row,
        col=col,
        has_cube=True,
        connection=Connection(entry=entry, exit=exit),
        clad=frozenset(clad),
    )
