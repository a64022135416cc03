"""Value objects for the cladding domain.

Compass directions, flow connections, grid positions and the enums used to
classify panels and connectors. Everything here is immutable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CompassDirection(str, Enum):
    """Orthogonal face of a cube, named by compass point."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @property
    def opposite(self) -> CompassDirection:
        """The face directly across the cube (N<->S, E<->W)."""
        return _OPPOSITES[self]

    @property
    def left(self) -> CompassDirection:
        """Direction on the left hand when facing this direction."""
        return _LEFT_OF[self]

    @property
    def right(self) -> CompassDirection:
        """Direction on the right hand when facing this direction."""
        return _LEFT_OF[self].opposite

    @property
    def delta(self) -> tuple[int, int]:
        """(row, col) step taken when moving one cell in this direction."""
        return _DELTAS[self]

    @classmethod
    def parse(cls, value: str) -> CompassDirection:
        """Parse a direction from a letter ("N") or a name ("north").

        Raises:
            ValueError: If the value is not a recognised direction.
        """
        text = value.strip().upper()
        for member in cls:
            if text in (member.value, member.name):
                return member
        raise ValueError(f"Unknown compass direction: {value!r}")


_OPPOSITES = {
    CompassDirection.NORTH: CompassDirection.SOUTH,
    CompassDirection.SOUTH: CompassDirection.NORTH,
    CompassDirection.EAST: CompassDirection.WEST,
    CompassDirection.WEST: CompassDirection.EAST,
}

_LEFT_OF = {
    CompassDirection.NORTH: CompassDirection.WEST,
    CompassDirection.WEST: CompassDirection.SOUTH,
    CompassDirection.SOUTH: CompassDirection.EAST,
    CompassDirection.EAST: CompassDirection.NORTH,
}

_DELTAS = {
    CompassDirection.NORTH: (-1, 0),
    CompassDirection.SOUTH: (1, 0),
    CompassDirection.EAST: (0, 1),
    CompassDirection.WEST: (0, -1),
}

# Order in which occupied neighbours are reported.
NEIGHBOR_ORDER: tuple[CompassDirection, ...] = (
    CompassDirection.NORTH,
    CompassDirection.SOUTH,
    CompassDirection.EAST,
    CompassDirection.WEST,
)

# Clockwise face order used when listing the faces of a cube.
FACE_ORDER: tuple[CompassDirection, ...] = (
    CompassDirection.NORTH,
    CompassDirection.EAST,
    CompassDirection.SOUTH,
    CompassDirection.WEST,
)


class PanelType(str, Enum):
    """Cladding panel types.

    SIDE panels run along the flow. LEFT and RIGHT are the end panels that
    close the upstream and downstream faces of a run.
    """

    SIDE = "side"
    LEFT = "left"
    RIGHT = "right"


class ConnectorType(str, Enum):
    """Hardware joining two consecutive cubes."""

    STRAIGHT = "straight"
    CORNER_LEFT = "corner-left"
    CORNER_RIGHT = "corner-right"

    @property
    def is_corner(self) -> bool:
        return self is not ConnectorType.STRAIGHT


class PanelHeight(str, Enum):
    """Cube height the panels are cut for."""

    STANDARD = "standard"
    EXTRA_TALL = "extra_tall"


class CellRole(str, Enum):
    """Position of a cube within its run."""

    ISOLATED = "isolated"
    ENDPOINT = "endpoint"
    INTERIOR = "interior"


class ShapeKind(str, Enum):
    """Diagnostic label for the overall shape of a run."""

    SINGLE = "single"
    STRAIGHT = "straight"
    L_SHAPE = "l_shape"
    U_SHAPE = "u_shape"
    IRREGULAR = "irregular"


# Turn type keyed by (entry face, exit face). Clockwise face order is a
# right corner, counter-clockwise a left corner.
TURN_TYPES: dict[tuple[CompassDirection, CompassDirection], ConnectorType] = {
    (CompassDirection.NORTH, CompassDirection.EAST): ConnectorType.CORNER_RIGHT,
    (CompassDirection.EAST, CompassDirection.SOUTH): ConnectorType.CORNER_RIGHT,
    (CompassDirection.SOUTH, CompassDirection.WEST): ConnectorType.CORNER_RIGHT,
    (CompassDirection.WEST, CompassDirection.NORTH): ConnectorType.CORNER_RIGHT,
    (CompassDirection.NORTH, CompassDirection.WEST): ConnectorType.CORNER_LEFT,
    (CompassDirection.WEST, CompassDirection.SOUTH): ConnectorType.CORNER_LEFT,
    (CompassDirection.SOUTH, CompassDirection.EAST): ConnectorType.CORNER_LEFT,
    (CompassDirection.EAST, CompassDirection.NORTH): ConnectorType.CORNER_LEFT,
}

# Face layout of a cube that has no flow through it.
ISOLATED_LAYOUT: dict[CompassDirection, PanelType] = {
    CompassDirection.NORTH: PanelType.SIDE,
    CompassDirection.EAST: PanelType.RIGHT,
    CompassDirection.SOUTH: PanelType.SIDE,
    CompassDirection.WEST: PanelType.LEFT,
}

_ROTATIONS = {
    CompassDirection.NORTH: 0,
    CompassDirection.EAST: 90,
    CompassDirection.SOUTH: 180,
    CompassDirection.WEST: 270,
}


@dataclass(frozen=True)
class Connection:
    """Flow through a single cube.

    ``entry`` is the face water comes in through and ``exit`` the face it
    leaves through; flow running west to east has entry WEST and exit EAST.
    Either side may be unset for a cube with no flow assigned yet.
    """

    entry: CompassDirection | None = None
    exit: CompassDirection | None = None

    def __post_init__(self) -> None:
        if self.entry is not None and self.entry == self.exit:
            raise ValueError("Connection entry and exit must be different faces")

    @property
    def is_set(self) -> bool:
        """True when both entry and exit are known."""
        return self.entry is not None and self.exit is not None

    @property
    def is_empty(self) -> bool:
        return self.entry is None and self.exit is None

    @property
    def is_straight(self) -> bool:
        """True when flow passes straight through the cube."""
        return self.is_set and self.exit == self.entry.opposite  # type: ignore[union-attr]

    @property
    def is_corner(self) -> bool:
        """True when flow turns 90 degrees inside the cube."""
        return self.is_set and not self.is_straight

    @property
    def turn(self) -> ConnectorType | None:
        """Turn type of a corner cube, None for straight or unset flow."""
        if not self.is_corner:
            return None
        return TURN_TYPES[(self.entry, self.exit)]  # type: ignore[index]

    @property
    def rotation(self) -> int:
        """Rendering rotation in degrees derived from the entry face."""
        if self.entry is None:
            return 0
        return _ROTATIONS[self.entry]

    def reversed(self) -> Connection:
        """The same path with flow running the other way."""
        return Connection(entry=self.exit, exit=self.entry)

    def __str__(self) -> str:
        entry = self.entry.value if self.entry else "-"
        exit_ = self.exit.value if self.exit else "-"
        return f"{entry}->{exit_}"


@dataclass(frozen=True, order=True)
class GridPosition:
    """Zero-based (row, col) location on the grid.

    Ordering is row-major, which is the scan order used everywhere a
    deterministic choice between cells is needed.
    """

    row: int
    col: int

    def __post_init__(self) -> None:
        if self.row < 0 or self.col < 0:
            raise ValueError("Grid coordinates must be non-negative")

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"
