"""Domain entities: grid cells and the grid snapshot."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field, replace

from .value_objects import CompassDirection, Connection, GridPosition

DEFAULT_GRID_SIZE = 3
MAX_GRID_SIZE = 8

# Pattern characters accepted by Grid.from_pattern.
CUBE_MARKS = frozenset("X#O")
EMPTY_MARKS = frozenset(".- ")


@dataclass(frozen=True)
class Cell:
    """A single grid cell.

    Attributes:
        row: Zero-based row index.
        col: Zero-based column index.
        has_cube: Whether a cube occupies the cell.
        connection: Externally supplied flow (for example from a preset).
            Empty unless something assigned it.
        clad: Faces the user has marked as clad.
    """

    row: int
    col: int
    has_cube: bool = False
    connection: Connection = field(default_factory=Connection)
    clad: frozenset[CompassDirection] = frozenset()

    def __post_init__(self) -> None:
        if self.row < 0 or self.col < 0:
            raise ValueError("Cell coordinates must be non-negative")
        if not self.has_cube and (not self.connection.is_empty or self.clad):
            raise ValueError("An empty cell cannot carry a connection or cladding")

    @property
    def position(self) -> GridPosition:
        return GridPosition(self.row, self.col)

    @property
    def rotation(self) -> int:
        """Rendering rotation in degrees (0, 90, 180 or 270)."""
        return self.connection.rotation

    def with_cube(
        self,
        connection: Connection | None = None,
        clad: Iterable[CompassDirection] = (),
    ) -> Cell:
        return replace(
            self,
            has_cube=True,
            connection=connection or Connection(),
            clad=frozenset(clad),
        )

    def cleared(self) -> Cell:
        """An empty cell at the same position."""
        return Cell(row=self.row, col=self.col)


@dataclass(frozen=True)
class Grid:
    """Immutable rows x cols snapshot of cells.

    Update helpers return new grids; a Grid instance never changes.
    """

    rows: int
    cols: int
    cells: tuple[tuple[Cell, ...], ...]

    def __post_init__(self) -> None:
        for name, size in (("rows", self.rows), ("cols", self.cols)):
            if not 1 <= size <= MAX_GRID_SIZE:
                raise ValueError(
                    f"Grid {name} must be between 1 and {MAX_GRID_SIZE}, got {size}"
                )
        if len(self.cells) != self.rows or any(
            len(row) != self.cols for row in self.cells
        ):
            raise ValueError("Cell matrix does not match grid dimensions")
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                if (cell.row, cell.col) != (r, c):
                    raise ValueError(
                        f"Cell at ({r}, {c}) reports position ({cell.row}, {cell.col})"
                    )

    @classmethod
    def empty(cls, rows: int = DEFAULT_GRID_SIZE, cols: int = DEFAULT_GRID_SIZE) -> Grid:
        """Create a grid with no cubes."""
        return cls(
            rows=rows,
            cols=cols,
            cells=tuple(
                tuple(Cell(row=r, col=c) for c in range(cols)) for r in range(rows)
            ),
        )

    @classmethod
    def from_cells(
        cls,
        cells: Iterable[Cell],
        rows: int = DEFAULT_GRID_SIZE,
        cols: int = DEFAULT_GRID_SIZE,
    ) -> Grid:
        """Create a grid from the given cells; unspecified cells are empty.

        Raises:
            ValueError: If a cell lies outside the grid or is given twice.
        """
        matrix = [[Cell(row=r, col=c) for c in range(cols)] for r in range(rows)]
        seen: set[tuple[int, int]] = set()
        for cell in cells:
            key = (cell.row, cell.col)
            if key in seen:
                raise ValueError(f"Cell ({cell.row}, {cell.col}) specified twice")
            if cell.row >= rows or cell.col >= cols:
                raise ValueError(
                    f"Cell ({cell.row}, {cell.col}) is outside the {rows}x{cols} grid"
                )
            seen.add(key)
            matrix[cell.row][cell.col] = cell
        return cls(rows=rows, cols=cols, cells=tuple(tuple(row) for row in matrix))

    @classmethod
    def from_pattern(cls, pattern: Sequence[str]) -> Grid:
        """Create a grid from rows of text, ``X`` marking a cube.

        Example:
            >>> Grid.from_pattern(["...", "XXX", "..."]).cube_count
            3
        """
        if not pattern:
            raise ValueError("Pattern must contain at least one row")
        cols = max(len(line) for line in pattern)
        cells = []
        for r, line in enumerate(pattern):
            for c, mark in enumerate(line.upper()):
                if mark in CUBE_MARKS:
                    cells.append(Cell(row=r, col=c, has_cube=True))
                elif mark not in EMPTY_MARKS:
                    raise ValueError(f"Unexpected pattern character {mark!r}")
        return cls.from_cells(cells, rows=len(pattern), cols=cols)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, position: GridPosition) -> Cell:
        """Return the cell at a position.

        Raises:
            ValueError: If the position lies outside the grid.
        """
        if not self.in_bounds(position.row, position.col):
            raise ValueError(
                f"Position {position} is outside the {self.rows}x{self.cols} grid"
            )
        return self.cells[position.row][position.col]

    def __iter__(self) -> Iterator[Cell]:
        """Iterate cells in row-major order."""
        for row in self.cells:
            yield from row

    def occupied(self) -> list[Cell]:
        """Cells holding a cube, in row-major order."""
        return [cell for cell in self if cell.has_cube]

    @property
    def cube_count(self) -> int:
        return sum(1 for cell in self if cell.has_cube)

    @property
    def is_empty(self) -> bool:
        return self.cube_count == 0

    def with_cell(self, cell: Cell) -> Grid:
        """Return a new grid with one cell replaced."""
        return self.replace_cells([cell])

    def replace_cells(self, cells: Iterable[Cell]) -> Grid:
        """Return a new grid with several cells replaced."""
        matrix = [list(row) for row in self.cells]
        for cell in cells:
            if not self.in_bounds(cell.row, cell.col):
                raise ValueError(
                    f"Cell ({cell.row}, {cell.col}) is outside the "
                    f"{self.rows}x{self.cols} grid"
                )
            matrix[cell.row][cell.col] = cell
        return Grid(rows=self.rows, cols=self.cols, cells=tuple(tuple(r) for r in matrix))

    def with_connections(self, connections: Mapping[GridPosition, Connection]) -> Grid:
        """Return a new grid with the given flows assigned to occupied cells."""
        return self.replace_cells(
            replace(self.cell(position), connection=connection)
            for position, connection in connections.items()
        )

    def to_pattern(self) -> list[str]:
        """Render cube occupancy as rows of ``X`` and ``.``."""
        return [
            "".join("X" if cell.has_cube else "." for cell in row) for row in self.cells
        ]
