"""Exposed-face classification."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cladding.domain.entities import Grid
from cladding.domain.value_objects import (
    ISOLATED_LAYOUT,
    CompassDirection,
    Connection,
    ConnectorType,
    GridPosition,
    PanelType,
)

from .path_tracer import TracedRun
from .topology import GridTopology

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FacePanel:
    """Classification of one exposed cube face.

    Attributes:
        position: Cube the face belongs to.
        direction: Which face of the cube.
        panel_type: Panel that covers the face.
        clad: Whether the user has marked the face as clad.
        turn: Turn type of the cube when it is a corner, otherwise None.
    """

    position: GridPosition
    direction: CompassDirection
    panel_type: PanelType
    clad: bool = True
    turn: ConnectorType | None = None


class PanelClassifier:
    """Assigns a panel type to each exposed face of a traced run.

    The face water enters through takes the left end panel and the face it
    leaves through takes the right end panel. Faces along the flow are side
    panels. A cube without flow uses the isolated layout, which is the same
    as flow running west to east.
    """

    @staticmethod
    def classify(connection: Connection, direction: CompassDirection) -> PanelType:
        """Panel type for one face given the cube's flow."""
        if not connection.is_set:
            return ISOLATED_LAYOUT[direction]
        if direction == connection.entry:
            return PanelType.LEFT
        if direction == connection.exit:
            return PanelType.RIGHT
        return PanelType.SIDE

    def classify_run(self, grid: Grid, run: TracedRun) -> tuple[FacePanel, ...]:
        """Classify every exposed face of every cube in ``run``."""
        topology = GridTopology(grid)
        faces: list[FacePanel] = []
        for traced in run.cells:
            cell = grid.cell(traced.position)
            turn = traced.connection.turn
            for direction in topology.exposed_directions(traced.position):
                faces.append(
                    FacePanel(
                        position=traced.position,
                        direction=direction,
                        panel_type=self.classify(traced.connection, direction),
                        clad=direction in cell.clad,
                        turn=turn,
                    )
                )
        logger.debug(f"Run {run.index}: classified {len(faces)} exposed faces")
        return tuple(faces)
