"""Observer protocol for calculation progress.

The engine reports each stage of a calculation to an injected observer
instead of logging from inside the algorithm. Embedding applications can
forward the events to a debug panel, a log, or a test recorder.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cladding.domain.entities import Grid
    from cladding.domain.services.connector_classifier import Joint
    from cladding.domain.services.engine import CalculationError, CalculationResult
    from cladding.domain.services.panel_classifier import FacePanel
    from cladding.domain.services.path_tracer import TracedRun


@runtime_checkable
class CalculationObserver(Protocol):
    """Receives events while the engine processes a grid.

    Example:
        class PrintingObserver(NullObserver):
            def on_validation_error(self, error: CalculationError) -> None:
                print(error.message)

        engine = CladdingEngine(observer=PrintingObserver())
    """

    def on_validation_start(self, grid: Grid) -> None:
        """Called before any validation of ``grid`` happens."""
        ...

    def on_run_traced(self, index: int, run: TracedRun) -> None:
        """Called once flow has been assigned to a run."""
        ...

    def on_face_classified(self, face: FacePanel) -> None:
        """Called for every exposed face."""
        ...

    def on_joint_classified(self, joint: Joint) -> None:
        """Called for every joint between consecutive cubes."""
        ...

    def on_validation_error(self, error: CalculationError) -> None:
        """Called when the grid is rejected."""
        ...

    def on_complete(self, result: CalculationResult) -> None:
        """Called with the final result, valid or not."""
        ...


class NullObserver:
    """Observer that ignores every event."""

    def on_validation_start(self, grid: Grid) -> None:
        pass

    def on_run_traced(self, index: int, run: TracedRun) -> None:
        pass

    def on_face_classified(self, face: FacePanel) -> None:
        pass

    def on_joint_classified(self, joint: Joint) -> None:
        pass

    def on_validation_error(self, error: CalculationError) -> None:
        pass

    def on_complete(self, result: CalculationResult) -> None:
        pass
