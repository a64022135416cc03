"""Cladding engine: grid snapshot in, bill of requirements out.

``CladdingEngine.validate_and_compute`` is the single entry point used by
every outer surface. It runs the full pipeline:

1. degree check and run partitioning (ConnectivityValidator)
2. flow assignment per run (PathTracer)
3. face and joint classification (PanelClassifier, ConnectorClassifier)
4. counting (RequirementAggregator)
5. bundling (PanelPacker)

Grid validation errors never escape; they are returned as a
``CalculationError`` alongside all-zero requirements.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cladding.contracts.observers import NullObserver
from cladding.domain.entities import Grid
from cladding.domain.errors import GridValidationError
from cladding.domain.value_objects import (
    CompassDirection,
    Connection,
    ConnectorType,
    GridPosition,
    PanelHeight,
    PanelType,
)

from .aggregator import RawRequirements, RequirementAggregator, RunRequirements
from .connectivity import ConnectivityValidator, RunCache
from .connector_classifier import ConnectorClassifier, Joint
from .packer import PackedRequirements, PanelPacker
from .panel_classifier import FacePanel, PanelClassifier
from .path_tracer import PathTracer, TracedRun
from .shape_detector import ShapeDetector
from .topology import GridTopology

if TYPE_CHECKING:
    from cladding.contracts.observers import CalculationObserver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineSettings:
    """Runtime options for a calculation.

    Attributes:
        count_clad_only: Count only faces the user marked as clad.
        repair_flow: Rewrite discontinuous supplied flow instead of failing.
        height: Cube height, selecting regular or extra-tall bundles.
    """

    count_clad_only: bool = False
    repair_flow: bool = False
    height: PanelHeight = PanelHeight.STANDARD


@dataclass(frozen=True)
class CalculationError:
    """Why a grid could not be clad."""

    code: str
    message: str
    positions: tuple[GridPosition, ...] = ()

    @classmethod
    def from_exception(cls, exc: GridValidationError) -> CalculationError:
        return cls(code=exc.code, message=exc.message, positions=exc.positions)


@dataclass(frozen=True)
class CalculationResult:
    """Everything computed for one grid snapshot."""

    requirements: PackedRequirements = field(default_factory=PackedRequirements)
    raw: RawRequirements = field(default_factory=RawRequirements)
    runs: tuple[RunRequirements, ...] = ()
    traced_runs: tuple[TracedRun, ...] = ()
    faces: tuple[FacePanel, ...] = ()
    joints: tuple[Joint, ...] = ()
    error: CalculationError | None = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def connections(self) -> dict[GridPosition, Connection]:
        """Assigned flow for every cube, keyed by position."""
        return {
            cell.position: cell.connection
            for run in self.traced_runs
            for cell in run.cells
        }

    @classmethod
    def failed(cls, error: CalculationError) -> CalculationResult:
        return cls(error=error)


class CladdingEngine:
    """Computes cladding requirements for grid snapshots.

    Services default to instances configured from ``settings``; any of them
    can be injected for testing.
    """

    def __init__(
        self,
        settings: EngineSettings | None = None,
        observer: CalculationObserver | None = None,
        validator: ConnectivityValidator | None = None,
        tracer: PathTracer | None = None,
        panel_classifier: PanelClassifier | None = None,
        connector_classifier: ConnectorClassifier | None = None,
        aggregator: RequirementAggregator | None = None,
        packer: PanelPacker | None = None,
        shape_detector: ShapeDetector | None = None,
    ) -> None:
        self.settings = settings or EngineSettings()
        self.observer = observer or NullObserver()
        self.validator = validator or ConnectivityValidator()
        self.tracer = tracer or PathTracer(repair_flow=self.settings.repair_flow)
        self.panel_classifier = panel_classifier or PanelClassifier()
        self.connector_classifier = connector_classifier or ConnectorClassifier()
        self.aggregator = aggregator or RequirementAggregator(
            count_clad_only=self.settings.count_clad_only
        )
        self.packer = packer or PanelPacker(height=self.settings.height)
        self.shape_detector = shape_detector or ShapeDetector()

    def validate_and_compute(self, grid: Grid) -> CalculationResult:
        """Validate ``grid`` and compute its requirements.

        Never raises for invalid cube placements. Check ``result.error``.
        """
        self.observer.on_validation_start(grid)
        try:
            result = self._compute(grid)
        except GridValidationError as exc:
            error = CalculationError.from_exception(exc)
            logger.debug(f"Grid rejected ({error.code}): {error.message}")
            self.observer.on_validation_error(error)
            result = CalculationResult.failed(error)
        self.observer.on_complete(result)
        return result

    def classify_face(
        self, grid: Grid, position: GridPosition, direction: CompassDirection
    ) -> PanelType:
        """Panel type for one exposed face, as used in the calculation.

        Raises:
            ValueError: If there is no cube at ``position`` or the face is
                covered by a neighbouring cube.
            GridValidationError: If the grid itself is invalid.
        """
        if not grid.cell(position).has_cube:
            raise ValueError(f"No cube at {position}")
        if not GridTopology(grid).is_exposed(position, direction):
            raise ValueError(
                f"Face {direction.value} of {position} is covered by a neighbouring cube"
            )
        run = self._trace_containing(grid, position)
        return self.panel_classifier.classify(run.connection_at(position), direction)

    def classify_joint(
        self, grid: Grid, a: GridPosition, b: GridPosition
    ) -> ConnectorType:
        """Connector joining two adjacent cubes, taken in flow order.

        Raises:
            ValueError: If either cell is empty or the cells are not adjacent.
            GridValidationError: If the grid itself is invalid.
        """
        return self.joint_between(grid, a, b).connector

    def joint_between(self, grid: Grid, a: GridPosition, b: GridPosition) -> Joint:
        """The joint between two adjacent cubes, oriented upstream to downstream.

        Raises:
            ValueError: If either cell is empty or the cells are not adjacent.
            GridValidationError: If the grid itself is invalid.
        """
        for position in (a, b):
            if not grid.cell(position).has_cube:
                raise ValueError(f"No cube at {position}")
        GridTopology.direction_between(a, b)

        run = self._trace_containing(grid, a)
        positions = run.positions
        upstream, downstream = (a, b) if positions.index(a) < positions.index(b) else (b, a)
        index = positions.index(upstream)
        connector = self.connector_classifier.classify(
            upstream,
            run.connection_at(upstream),
            downstream,
            run.connection_at(downstream),
            previous=positions[index - 1] if index else None,
        )
        return Joint(upstream=upstream, downstream=downstream, connector=connector)

    def _compute(self, grid: Grid) -> CalculationResult:
        cache = RunCache()
        runs = self.validator.validate(grid, cache)

        traced_runs: list[TracedRun] = []
        faces: list[FacePanel] = []
        joints: list[Joint] = []
        per_run: list[RunRequirements] = []

        for index, run in enumerate(runs):
            traced = self.tracer.trace(grid, run, index)
            self.observer.on_run_traced(index, traced)

            run_faces = self.panel_classifier.classify_run(grid, traced)
            for face in run_faces:
                self.observer.on_face_classified(face)
            run_joints = self.connector_classifier.classify_run(traced)
            for joint in run_joints:
                self.observer.on_joint_classified(joint)

            per_run.append(
                RunRequirements(
                    index=index,
                    length=traced.length,
                    exposed_faces=len(run_faces),
                    shape=self.shape_detector.detect(traced),
                    raw=self.aggregator.aggregate(run_faces, run_joints),
                )
            )
            traced_runs.append(traced)
            faces.extend(run_faces)
            joints.extend(run_joints)

        raw = sum((run.raw for run in per_run), RawRequirements())
        logger.debug(
            f"Computed {len(per_run)} run(s): {raw.total_panels} panels, "
            f"{raw.total_connectors} connectors (cache hits={cache.hits})"
        )
        return CalculationResult(
            requirements=self.packer.pack(raw),
            raw=raw,
            runs=tuple(per_run),
            traced_runs=tuple(traced_runs),
            faces=tuple(faces),
            joints=tuple(joints),
        )

    def _trace_containing(self, grid: Grid, position: GridPosition) -> TracedRun:
        cache = RunCache()
        runs = self.validator.validate(grid, cache)
        run = cache.lookup(position)
        if run is None:
            raise ValueError(f"No cube at {position}")
        return self.tracer.trace(grid, run, runs.index(run))
