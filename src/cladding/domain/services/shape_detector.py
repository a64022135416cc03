"""Shape labels for traced runs.

Labels are diagnostic only. Requirement numbers never depend on them.
"""

from __future__ import annotations

from cladding.domain.value_objects import ShapeKind

from .path_tracer import TracedRun
from .topology import GridTopology


class ShapeDetector:
    """Labels a run by counting the turns along its path."""

    def detect(self, run: TracedRun) -> ShapeKind:
        if run.is_single:
            return ShapeKind.SINGLE

        positions = run.positions
        turns = self.count_turns(run)
        if turns == 0:
            return ShapeKind.STRAIGHT

        first, last = positions[0], positions[-1]
        if turns == 1 and first.row != last.row and first.col != last.col:
            return ShapeKind.L_SHAPE
        if turns == 2:
            aligned_rows = first.row == last.row and abs(first.col - last.col) >= 2
            aligned_cols = first.col == last.col and abs(first.row - last.row) >= 2
            if aligned_rows or aligned_cols:
                return ShapeKind.U_SHAPE
        return ShapeKind.IRREGULAR

    @staticmethod
    def count_turns(run: TracedRun) -> int:
        """Number of interior cubes where the path changes heading."""
        positions = run.positions
        headings = [
            GridTopology.direction_between(a, b) for a, b in zip(positions, positions[1:])
        ]
        return sum(1 for a, b in zip(headings, headings[1:]) if a != b)
