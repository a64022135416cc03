"""Bill of Materials (BOM) exporter for cladding calculations.

Renders the bundles, loose panels and connectors of a calculation as text,
CSV or JSON, optionally with storefront variant ids and costs.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from cladding.application.bill_of_materials import BillOfMaterials
from cladding.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from cladding.contracts.dtos import CalculationOutput


logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "csv", "json")


@ExporterRegistry.register("bom")  # type: ignore[arg-type]
class BomExporter:
    """Bill of materials exporter.

    Attributes:
        format_name: "bom"
        file_extension: "txt", "csv" or "json" depending on output_format
    """

    format_name: ClassVar[str] = "bom"

    def __init__(self, output_format: str = "text", include_costs: bool = False) -> None:
        """Initialize the exporter.

        Args:
            output_format: "text", "csv" or "json".
            include_costs: Whether to include unit price and cost columns.

        Raises:
            ValueError: If output_format is not supported.
        """
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported BOM format '{output_format}'. "
                f"Expected one of: {', '.join(OUTPUT_FORMATS)}"
            )
        self.output_format = output_format
        self.include_costs = include_costs
        self._file_extension = {"text": "txt", "csv": "csv", "json": "json"}[output_format]

    @property
    def file_extension(self) -> str:
        return self._file_extension

    def generate(self, output: CalculationOutput) -> BillOfMaterials:
        """Return the output's BOM, building it from requirements if needed."""
        if output.bill_of_materials is not None:
            return output.bill_of_materials
        if output.result is None:
            return BillOfMaterials()
        return BillOfMaterials.from_requirements(output.result.requirements)

    def export(self, output: CalculationOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")

    def export_string(self, output: CalculationOutput) -> str:
        bom = self.generate(output)
        if self.output_format == "csv":
            return self.format_csv(bom)
        if self.output_format == "json":
            return self.format_json(bom)
        return self.format_text(bom)

    def format_text(self, bom: BillOfMaterials) -> str:
        lines: list[str] = []
        lines.append("=" * 60)
        lines.append("BILL OF MATERIALS")
        lines.append("=" * 60)
        lines.append("")

        if not bom.items:
            lines.append("  (Nothing to order)")
            lines.append("")
            return "\n".join(lines)

        width = max(len(item.label) for item in bom.items)
        for item in bom.items:
            cost_str = ""
            if self.include_costs and item.unit_price is not None:
                cost_str = f" @ ${item.unit_price:.2f} = ${item.total_cost:.2f}"
            lines.append(f"  {item.label:<{width}}  {item.quantity:>4}{cost_str}")
        lines.append("")

        if self.include_costs and bom.total_cost is not None:
            lines.append("-" * 40)
            lines.append(f"  TOTAL: ${bom.total_cost:>10.2f}")
            lines.append("")

        return "\n".join(lines)

    def format_csv(self, bom: BillOfMaterials) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer)

        header = ["Key", "Item", "Quantity", "Variant ID"]
        if self.include_costs:
            header.extend(["Unit Price", "Total"])
        writer.writerow(header)

        for item in bom.items:
            row = [item.key, item.label, item.quantity, item.variant_id or ""]
            if self.include_costs:
                row.append(f"{item.unit_price:.2f}" if item.unit_price is not None else "")
                row.append(f"{item.total_cost:.2f}" if item.total_cost is not None else "")
            writer.writerow(row)

        return buffer.getvalue()

    def format_json(self, bom: BillOfMaterials) -> str:
        data: dict[str, Any] = {"items": []}
        for item in bom.items:
            item_dict: dict[str, Any] = {
                "key": item.key,
                "label": item.label,
                "quantity": item.quantity,
            }
            if item.variant_id:
                item_dict["variant_id"] = item.variant_id
            if self.include_costs and item.unit_price is not None:
                item_dict["unit_price"] = item.unit_price
                item_dict["total_cost"] = item.total_cost
            data["items"].append(item_dict)

        data["variants"] = bom.variant_quantities()
        if self.include_costs:
            data["total_cost"] = bom.total_cost

        return json.dumps(data, indent=2)
