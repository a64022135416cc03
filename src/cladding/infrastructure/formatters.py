"""Text formatters for calculation results and grid diagrams."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cladding.domain.value_objects import CompassDirection

if TYPE_CHECKING:
    from cladding.contracts.dtos import CalculationOutput
    from cladding.domain.entities import Grid
    from cladding.domain.services.engine import CalculationResult

# Glyph drawn for a cube, keyed by the face flow leaves through.
FLOW_GLYPHS: dict[CompassDirection, str] = {
    CompassDirection.NORTH: "^",
    CompassDirection.SOUTH: "v",
    CompassDirection.EAST: ">",
    CompassDirection.WEST: "<",
}
NO_FLOW_GLYPH = "o"
EMPTY_GLYPH = "."
REJECTED_GLYPH = "!"


class RequirementsFormatter:
    """Formats a calculation as a requirements report."""

    def __init__(self, show_runs: bool = True) -> None:
        self._show_runs = show_runs

    def format(self, output: CalculationOutput) -> str:
        lines = ["CLADDING REQUIREMENTS", "=" * 70]

        if output.errors:
            lines.append("Input errors:")
            lines.extend(f"  - {message}" for message in output.errors)
            return "\n".join(lines)

        result = output.result
        if result is None:
            lines.append("No calculation was run.")
            return "\n".join(lines)

        if result.error is not None:
            lines.append(f"INVALID GRID ({result.error.code})")
            lines.append(f"  {result.error.message}")
            if result.error.positions:
                cubes = ", ".join(str(p) for p in result.error.positions)
                lines.append(f"  Cubes: {cubes}")
            lines.append("")
            lines.append("All requirements are zero until the grid is fixed.")
            return "\n".join(lines)

        lines.append(f"Height: {output.settings.height.value.replace('_', ' ')}")
        if output.settings.count_clad_only:
            lines.append("Counting clad faces only")
        lines.append("")

        lines.append(f"{'Item':<50} {'Qty':>6}")
        lines.append("-" * 70)
        bill = output.bill_of_materials
        if bill is None or not bill.items:
            lines.append("  (Nothing to order)")
        else:
            for item in bill.items:
                lines.append(f"{item.label:<50} {item.quantity:>6}")
        lines.append("")

        raw = result.raw
        lines.append("Before bundling:")
        lines.append(
            f"  Side panels: {raw.side_panels}  Left: {raw.left_panels}  "
            f"Right: {raw.right_panels}"
        )
        lines.append(
            f"  Straight couplings: {raw.straight_couplings}  "
            f"Corner connectors: {raw.corner_connectors}"
        )

        if self._show_runs and result.runs:
            lines.append("")
            lines.append(self.format_runs(result))

        return "\n".join(lines)

    def format_runs(self, result: CalculationResult) -> str:
        lines = [
            "RUNS",
            "-" * 70,
            f"{'#':<4} {'Cubes':<6} {'Faces':<6} {'Shape':<10} "
            f"{'Side':<5} {'Left':<5} {'Right':<6} {'Straight':<9} {'Corner'}",
        ]
        for run in result.runs:
            lines.append(
                f"{run.index:<4} {run.length:<6} {run.exposed_faces:<6} "
                f"{run.shape.value:<10} {run.raw.side_panels:<5} "
                f"{run.raw.left_panels:<5} {run.raw.right_panels:<6} "
                f"{run.raw.straight_couplings:<9} {run.raw.corner_connectors}"
            )
        return "\n".join(lines)


class GridDiagramFormatter:
    """Draws the grid with a flow arrow on every cube.

    Each cube shows the direction flow leaves it. Cubes named in a grid
    error are marked with ``!``.
    """

    def format(self, grid: Grid, result: CalculationResult | None = None) -> str:
        connections = result.connections if result is not None else {}
        rejected = (
            set(result.error.positions)
            if result is not None and result.error is not None
            else set()
        )

        lines = [f"GRID ({grid.rows}x{grid.cols})", "=" * 70]
        lines.append("    " + "".join(f"{c:^4}" for c in range(grid.cols)))
        for r, row in enumerate(grid.cells):
            glyphs = []
            for cell in row:
                if not cell.has_cube:
                    glyph = EMPTY_GLYPH
                elif cell.position in rejected:
                    glyph = REJECTED_GLYPH
                else:
                    connection = connections.get(cell.position)
                    if connection is None or connection.exit is None:
                        glyph = NO_FLOW_GLYPH
                    else:
                        glyph = FLOW_GLYPHS[connection.exit]
                glyphs.append(f"{glyph:^4}")
            lines.append(f"{r:>3} " + "".join(glyphs))

        lines.append("")
        lines.append(
            "Legend: ^ v < > flow exit, o cube without flow, "
            "! invalid cube, . empty"
        )
        return "\n".join(lines)
