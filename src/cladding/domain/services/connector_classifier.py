"""Joint classification between consecutive cubes."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cladding.domain.errors import FlowContinuityMismatchError
from cladding.domain.value_objects import (
    TURN_TYPES,
    Connection,
    ConnectorType,
    GridPosition,
)

from .path_tracer import TracedRun
from .topology import GridTopology

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Joint:
    """Connector between an upstream cube and the next cube downstream."""

    upstream: GridPosition
    downstream: GridPosition
    connector: ConnectorType


class ConnectorClassifier:
    """Chooses the connector for each joint of a traced run.

    A joint is straight when the path keeps its heading through the upstream
    cube. When the path bends there, the joint takes a corner connector whose
    hand comes from the turn table. The first cube of a run has no upstream
    neighbour, so its open entry face never bends the path.
    """

    @staticmethod
    def classify(
        upstream: GridPosition,
        upstream_connection: Connection,
        downstream: GridPosition,
        downstream_connection: Connection,
        previous: GridPosition | None = None,
    ) -> ConnectorType:
        """Connector for the joint from ``upstream`` into ``downstream``.

        Args:
            previous: The cube feeding ``upstream``, or None when ``upstream``
                starts the run.

        Raises:
            FlowContinuityMismatchError: If the upstream exit does not point at
                the downstream cube or the downstream entry does not face back.
        """
        step = GridTopology.direction_between(upstream, downstream)
        if (
            upstream_connection.exit != step
            or downstream_connection.entry != step.opposite
        ):
            raise FlowContinuityMismatchError(
                f"Flow does not continue from {upstream} into {downstream}",
                positions=(upstream, downstream),
            )
        if previous is None:
            return ConnectorType.STRAIGHT
        heading = GridTopology.direction_between(previous, upstream)
        if heading == step:
            return ConnectorType.STRAIGHT
        return TURN_TYPES[(heading.opposite, step)]

    def classify_run(self, run: TracedRun) -> tuple[Joint, ...]:
        """Classify every joint of ``run`` in flow order."""
        positions = run.positions
        joints = tuple(
            Joint(
                upstream=a.position,
                downstream=b.position,
                connector=self.classify(
                    a.position,
                    a.connection,
                    b.position,
                    b.connection,
                    previous=positions[i - 1] if i else None,
                ),
            )
            for i, (a, b) in enumerate(run.pairs())
        )
        logger.debug(f"Run {run.index}: classified {len(joints)} joints")
        return joints
