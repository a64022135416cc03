"""JSON export of a full calculation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from cladding.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from cladding.contracts.dtos import CalculationOutput
    from cladding.domain.value_objects import GridPosition


def _position(position: GridPosition) -> dict[str, int]:
    return {"row": position.row, "col": position.col}


def calculation_to_dict(output: CalculationOutput) -> dict[str, Any]:
    """Plain-data view of a calculation, safe to pass to ``json.dumps``."""
    data: dict[str, Any] = {
        "is_valid": output.is_valid,
        "errors": list(output.errors),
        "settings": {
            "count_clad_only": output.settings.count_clad_only,
            "repair_flow": output.settings.repair_flow,
            "height": output.settings.height.value,
        },
    }
    result = output.result
    if result is None:
        return data

    error = result.error
    data["error"] = (
        None
        if error is None
        else {
            "code": error.code,
            "message": error.message,
            "positions": [_position(p) for p in error.positions],
        }
    )
    data["requirements"] = result.requirements.to_dict()
    data["raw"] = {
        "side_panels": result.raw.side_panels,
        "left_panels": result.raw.left_panels,
        "right_panels": result.raw.right_panels,
        "straight_couplings": result.raw.straight_couplings,
        "corner_connectors": result.raw.corner_connectors,
    }
    data["runs"] = [
        {
            "index": run.index,
            "length": run.length,
            "exposed_faces": run.exposed_faces,
            "shape": run.shape.value,
            "side_panels": run.raw.side_panels,
            "left_panels": run.raw.left_panels,
            "right_panels": run.raw.right_panels,
            "straight_couplings": run.raw.straight_couplings,
            "corner_connectors": run.raw.corner_connectors,
        }
        for run in result.runs
    ]
    data["cubes"] = [
        {
            **_position(cell.position),
            "run": run.index,
            "role": cell.role.value,
            "entry": cell.connection.entry.value if cell.connection.entry else None,
            "exit": cell.connection.exit.value if cell.connection.exit else None,
            "rotation": cell.connection.rotation,
        }
        for run in result.traced_runs
        for cell in run.cells
    ]
    data["faces"] = [
        {
            **_position(face.position),
            "direction": face.direction.value,
            "panel": face.panel_type.value,
            "clad": face.clad,
            "turn": face.turn.value if face.turn else None,
        }
        for face in result.faces
    ]
    data["joints"] = [
        {
            "from": _position(joint.upstream),
            "to": _position(joint.downstream),
            "connector": joint.connector.value,
        }
        for joint in result.joints
    ]
    bill = output.bill_of_materials
    if bill is not None:
        data["bill_of_materials"] = [
            {
                "key": item.key,
                "label": item.label,
                "quantity": item.quantity,
                "variant_id": item.variant_id,
                "unit_price": item.unit_price,
            }
            for item in bill.items
        ]
    return data


@ExporterRegistry.register("json")  # type: ignore[arg-type]
class JsonExporter:
    """Exports the full calculation, including per-face detail, as JSON."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, output: CalculationOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")

    def export_string(self, output: CalculationOutput) -> str:
        return json.dumps(calculation_to_dict(output), indent=self.indent)
