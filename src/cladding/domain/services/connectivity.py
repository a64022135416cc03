"""Connectivity validation and run partitioning.

A run is a maximal set of cubes connected through N/S/E/W adjacency. Cubes
may touch at most two other cubes, so every valid run is a simple path.
"""

from __future__ import annotations

import logging
from collections import deque

from cladding.domain.entities import Grid
from cladding.domain.errors import BranchingConfigurationError
from cladding.domain.value_objects import GridPosition

from .topology import GridTopology

logger = logging.getLogger(__name__)

Run = tuple[GridPosition, ...]

MAX_NEIGHBORS = 2


class RunCache:
    """Per-calculation memo of the run each cube belongs to.

    A fresh cache is created for every calculation and thrown away at the
    end, so stale runs can never leak between grid snapshots.
    """

    def __init__(self) -> None:
        self._by_position: dict[GridPosition, Run] = {}
        self._runs: list[Run] = []
        self.hits = 0
        self.misses = 0

    def lookup(self, position: GridPosition) -> Run | None:
        """Return the cached run containing ``position``, if any."""
        run = self._by_position.get(position)
        if run is None:
            self.misses += 1
        else:
            self.hits += 1
        return run

    def store(self, run: Run) -> None:
        self._runs.append(run)
        for position in run:
            self._by_position[position] = run

    @property
    def runs(self) -> list[Run]:
        """Runs in the order they were discovered."""
        return list(self._runs)

    def __contains__(self, position: object) -> bool:
        return position in self._by_position

    def __len__(self) -> int:
        return len(self._runs)


class ConnectivityValidator:
    """Checks the degree rule and splits occupied cells into runs."""

    def check_degrees(self, grid: Grid) -> None:
        """Reject any cube with more than two occupied neighbours.

        Raises:
            BranchingConfigurationError: Listing every offending cube.
        """
        topology = GridTopology(grid)
        offenders = [
            position
            for position in topology.occupied_positions()
            if topology.degree(position) > MAX_NEIGHBORS
        ]
        if offenders:
            logger.debug(f"Branching cubes at {', '.join(map(str, offenders))}")
            raise BranchingConfigurationError(positions=offenders)

    def partition(self, grid: Grid, cache: RunCache) -> list[Run]:
        """Flood-fill occupied cells into runs, scanning row-major.

        Each run is stored in ``cache``; cells of an already discovered run
        are served from it instead of being filled again.
        """
        topology = GridTopology(grid)
        runs: list[Run] = []
        for position in topology.occupied_positions():
            if cache.lookup(position) is not None:
                continue
            run = self._flood_fill(topology, position)
            cache.store(run)
            runs.append(run)
        logger.debug(f"Partitioned {grid.cube_count} cubes into {len(runs)} run(s)")
        return runs

    def validate(self, grid: Grid, cache: RunCache | None = None) -> list[Run]:
        """Run the degree check, then partition.

        Raises:
            BranchingConfigurationError: If any cube has three or more
                occupied neighbours.
        """
        self.check_degrees(grid)
        return self.partition(grid, cache if cache is not None else RunCache())

    @staticmethod
    def _flood_fill(topology: GridTopology, start: GridPosition) -> Run:
        visited = {start}
        order = [start]
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for _, neighbor in topology.occupied_neighbors(current):
                if neighbor not in visited:
                    visited.add(neighbor)
                    order.append(neighbor)
                    queue.append(neighbor)
        return tuple(order)
