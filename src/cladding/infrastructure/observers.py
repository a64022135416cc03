"""Calculation observers backed by logging or in-memory recording."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cladding.domain.entities import Grid
    from cladding.domain.services.connector_classifier import Joint
    from cladding.domain.services.engine import CalculationError, CalculationResult
    from cladding.domain.services.panel_classifier import FacePanel
    from cladding.domain.services.path_tracer import TracedRun


class LoggingObserver:
    """Forwards calculation events to a standard library logger.

    Args:
        logger: Logger to write to. Defaults to this module's logger.
        level: Level used for progress events. Rejections always log at
            WARNING.
    """

    def __init__(
        self, logger: logging.Logger | None = None, level: int = logging.DEBUG
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def on_validation_start(self, grid: Grid) -> None:
        self.logger.log(
            self.level,
            f"Validating {grid.rows}x{grid.cols} grid with {grid.cube_count} cube(s)",
        )

    def on_run_traced(self, index: int, run: TracedRun) -> None:
        flow = " ".join(
            f"{cell.position}:{cell.connection}" for cell in run.cells
        )
        self.logger.log(
            self.level, f"Run {index} ({run.source.value}, {run.length} cube(s)): {flow}"
        )

    def on_face_classified(self, face: FacePanel) -> None:
        self.logger.log(
            self.level,
            f"Face {face.position} {face.direction.value} -> {face.panel_type.value}",
        )

    def on_joint_classified(self, joint: Joint) -> None:
        self.logger.log(
            self.level,
            f"Joint {joint.upstream} -> {joint.downstream}: {joint.connector.value}",
        )

    def on_validation_error(self, error: CalculationError) -> None:
        self.logger.warning(f"Grid rejected ({error.code}): {error.message}")

    def on_complete(self, result: CalculationResult) -> None:
        self.logger.log(
            self.level,
            f"Calculation complete: valid={result.is_valid} "
            f"requirements={result.requirements.to_dict()}",
        )


@dataclass
class RecordingObserver:
    """Keeps every event in memory, in arrival order.

    Handy for debug panels that replay a calculation step by step.
    """

    events: list[tuple[str, Any]] = field(default_factory=list)

    def on_validation_start(self, grid: Grid) -> None:
        self.events.append(("validation_start", grid))

    def on_run_traced(self, index: int, run: TracedRun) -> None:
        self.events.append(("run_traced", run))

    def on_face_classified(self, face: FacePanel) -> None:
        self.events.append(("face_classified", face))

    def on_joint_classified(self, joint: Joint) -> None:
        self.events.append(("joint_classified", joint))

    def on_validation_error(self, error: CalculationError) -> None:
        self.events.append(("validation_error", error))

    def on_complete(self, result: CalculationResult) -> None:
        self.events.append(("complete", result))

    def names(self) -> list[str]:
        """Event names only."""
        return [name for name, _ in self.events]

    def payloads(self, name: str) -> list[Any]:
        """Payloads of every event called ``name``."""
        return [payload for event, payload in self.events if event == name]

    def clear(self) -> None:
        self.events.clear()
