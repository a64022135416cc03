"""Flow direction assignment for runs of cubes.

The tracer orders the cubes of a run from one endpoint to the other and
gives every cube an entry and exit face. It is the only component that
produces connections used for calculation; the classifiers only read them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from cladding.domain.entities import Grid
from cladding.domain.errors import (
    BranchingConfigurationError,
    DisconnectedComponentTooShortError,
    FlowContinuityMismatchError,
)
from cladding.domain.value_objects import CellRole, Connection, GridPosition

from .connectivity import MAX_NEIGHBORS, Run
from .topology import GridTopology

logger = logging.getLogger(__name__)


class FlowSource(str, Enum):
    """Where the connections of a traced run came from."""

    NONE = "none"
    TRACED = "traced"
    SUPPLIED = "supplied"
    REPAIRED = "repaired"


@dataclass(frozen=True)
class TracedCell:
    """A cube with its position in the run and its assigned flow."""

    position: GridPosition
    connection: Connection
    role: CellRole

    @property
    def is_corner(self) -> bool:
        return self.connection.is_corner


@dataclass(frozen=True)
class TracedRun:
    """A run ordered in flow direction, upstream end first."""

    index: int
    cells: tuple[TracedCell, ...]
    source: FlowSource = FlowSource.TRACED

    def __post_init__(self) -> None:
        if not self.cells:
            raise ValueError("A traced run needs at least one cell")

    @property
    def length(self) -> int:
        return len(self.cells)

    @property
    def positions(self) -> tuple[GridPosition, ...]:
        return tuple(cell.position for cell in self.cells)

    @property
    def is_single(self) -> bool:
        return len(self.cells) == 1

    @property
    def corner_count(self) -> int:
        return sum(1 for cell in self.cells if cell.is_corner)

    def connection_at(self, position: GridPosition) -> Connection:
        for cell in self.cells:
            if cell.position == position:
                return cell.connection
        raise KeyError(f"{position} is not part of run {self.index}")

    def pairs(self) -> list[tuple[TracedCell, TracedCell]]:
        """Consecutive (upstream, downstream) cube pairs."""
        return list(zip(self.cells, self.cells[1:]))


class PathTracer:
    """Orders a run and assigns a consistent flow direction.

    Args:
        repair_flow: When true, supplied flow that breaks continuity is
            rewritten to run from cube to cube instead of being rejected.
    """

    def __init__(self, repair_flow: bool = False) -> None:
        self.repair_flow = repair_flow

    def trace(self, grid: Grid, run: Run, index: int = 0) -> TracedRun:
        """Order ``run`` and assign entry/exit faces to each cube.

        Raises:
            DisconnectedComponentTooShortError: If a multi-cube run does not
                have exactly two endpoints.
            BranchingConfigurationError: If a cube has more than two
                neighbours inside the run.
            FlowContinuityMismatchError: If every cube carries supplied flow
                that is not continuous and repair is disabled.
        """
        if len(run) == 1:
            # A lone cube has nowhere to route flow; ignore any supplied one.
            cell = TracedCell(run[0], Connection(), CellRole.ISOLATED)
            return TracedRun(index=index, cells=(cell,), source=FlowSource.NONE)

        topology = GridTopology(grid)
        members = set(run)
        endpoints = self._endpoints(topology, run, members)
        order = self._walk(topology, endpoints[0], members)

        supplied = [grid.cell(position).connection for position in order]
        if all(connection.is_set for connection in supplied):
            return self._use_supplied(order, supplied, index)

        if any(not connection.is_empty for connection in supplied):
            logger.debug(f"Run {index}: ignoring partial supplied flow, tracing instead")
        traced = self._build(order, index, FlowSource.TRACED)
        logger.debug(
            f"Run {index}: traced {len(order)} cubes from {order[0]} to {order[-1]}"
        )
        return traced

    def _endpoints(
        self, topology: GridTopology, run: Run, members: set[GridPosition]
    ) -> list[GridPosition]:
        degrees = {
            position: sum(
                1 for _, other in topology.occupied_neighbors(position) if other in members
            )
            for position in run
        }
        branching = [p for p, degree in degrees.items() if degree > MAX_NEIGHBORS]
        if branching:
            raise BranchingConfigurationError(positions=branching)
        endpoints = sorted(p for p, degree in degrees.items() if degree == 1)
        if len(endpoints) != 2:
            raise DisconnectedComponentTooShortError(
                f"Run of {len(run)} cubes has {len(endpoints)} open ends; "
                "exactly two are needed",
                positions=run,
            )
        return endpoints

    @staticmethod
    def _walk(
        topology: GridTopology, start: GridPosition, members: set[GridPosition]
    ) -> list[GridPosition]:
        order = [start]
        previous: GridPosition | None = None
        current = start
        while True:
            following = [
                other
                for _, other in topology.occupied_neighbors(current)
                if other in members and other != previous
            ]
            if not following:
                return order
            previous, current = current, following[0]
            order.append(current)

    def _use_supplied(
        self,
        order: list[GridPosition],
        supplied: list[Connection],
        index: int,
    ) -> TracedRun:
        # Supplied flow starts at whichever endpoint points into the run.
        direction = GridTopology.direction_between
        if supplied[-1].exit == direction(order[-1], order[-2]) and (
            supplied[0].exit != direction(order[0], order[1])
        ):
            order = order[::-1]
            supplied = supplied[::-1]

        for i, (a, b) in enumerate(zip(order, order[1:])):
            step = direction(a, b)
            if supplied[i].exit != step or supplied[i + 1].entry != step.opposite:
                return self._handle_mismatch(order, supplied, index, a, b)

        logger.debug(f"Run {index}: using supplied flow from {order[0]} to {order[-1]}")
        return TracedRun(
            index=index,
            cells=tuple(
                TracedCell(position, connection, self._role(i, len(order)))
                for i, (position, connection) in enumerate(zip(order, supplied))
            ),
            source=FlowSource.SUPPLIED,
        )

    def _handle_mismatch(
        self,
        order: list[GridPosition],
        supplied: list[Connection],
        index: int,
        a: GridPosition,
        b: GridPosition,
    ) -> TracedRun:
        message = f"Flow does not continue from {a} into {b}"
        if not self.repair_flow:
            raise FlowContinuityMismatchError(message, positions=(a, b))

        logger.warning(f"Run {index}: {message}; repairing supplied flow")
        repaired = self._build(order, index, FlowSource.REPAIRED)
        cells = list(repaired.cells)
        # Keep the supplied outward faces at both ends where they still fit.
        first, last = cells[0], cells[-1]
        if supplied[0].entry not in (None, first.connection.exit):
            cells[0] = TracedCell(
                first.position,
                Connection(entry=supplied[0].entry, exit=first.connection.exit),
                first.role,
            )
        if supplied[-1].exit not in (None, last.connection.entry):
            cells[-1] = TracedCell(
                last.position,
                Connection(entry=last.connection.entry, exit=supplied[-1].exit),
                last.role,
            )
        return TracedRun(index=index, cells=tuple(cells), source=FlowSource.REPAIRED)

    def _build(
        self, order: list[GridPosition], index: int, source: FlowSource
    ) -> TracedRun:
        direction = GridTopology.direction_between
        last = len(order) - 1
        cells = []
        for i, position in enumerate(order):
            if i == 0:
                exit_ = direction(position, order[1])
                entry = exit_.opposite
            elif i == last:
                entry = direction(position, order[i - 1])
                exit_ = entry.opposite
            else:
                entry = direction(position, order[i - 1])
                exit_ = direction(position, order[i + 1])
            cells.append(
                TracedCell(position, Connection(entry=entry, exit=exit_), self._role(i, len(order)))
            )
        return TracedRun(index=index, cells=tuple(cells), source=source)

    @staticmethod
    def _role(i: int, length: int) -> CellRole:
        if length == 1:
            return CellRole.ISOLATED
        if i in (0, length - 1):
            return CellRole.ENDPOINT
        return CellRole.INTERIOR
