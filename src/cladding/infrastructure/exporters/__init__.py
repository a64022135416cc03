"""Exporters for cladding calculations.

Importing this package registers the built-in exporters:

- "json": full calculation detail (JsonExporter)
- "bom": bill of materials as text, CSV or JSON (BomExporter)
"""

from cladding.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)
from cladding.infrastructure.exporters.bom import BomExporter
from cladding.infrastructure.exporters.json_exporter import (
    JsonExporter,
    calculation_to_dict,
)

__all__ = [
    "BomExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonExporter",
    "calculation_to_dict",
]
