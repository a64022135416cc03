"""Infrastructure layer - formatters, exporters and observers."""

from .exporters import (
    BomExporter,
    ExporterRegistry,
    ExportManager,
    JsonExporter,
    calculation_to_dict,
)
from .formatters import GridDiagramFormatter, RequirementsFormatter
from .observers import LoggingObserver, RecordingObserver

__all__ = [
    "BomExporter",
    "ExportManager",
    "ExporterRegistry",
    "GridDiagramFormatter",
    "JsonExporter",
    "LoggingObserver",
    "RecordingObserver",
    "RequirementsFormatter",
    "calculation_to_dict",
]
