"""Exporter protocol, the format registry and the multi-format export manager."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cladding.contracts.dtos import CalculationOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Writes a calculation in one file format.

    Attributes:
        format_name: Name the exporter is registered under ("json", "bom").
        file_extension: Extension of written files, without the dot.
    """

    format_name: ClassVar[str]
    file_extension: str

    def export(self, output: CalculationOutput, path: Path) -> None: ...

    def export_string(self, output: CalculationOutput) -> str: ...


class ExporterRegistry:
    """Exporter classes keyed by format name.

    Classes register themselves at import time:

        @ExporterRegistry.register("json")
        class JsonExporter:
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(f"Replacing exporter for format '{format_name}'")
            cls._exporters[format_name] = exporter_class
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Exporter class for ``format_name``.

        Raises:
            KeyError: If the format is unknown.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            available = ", ".join(cls.available_formats()) or "none"
            raise KeyError(
                f"Unknown export format '{format_name}'. Available formats: {available}"
            ) from None

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)


class ExportManager:
    """Writes one calculation to several formats in a directory.

    Files are named ``{project_name}_{format}.{ext}``. The directory is
    created on first export.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: CalculationOutput,
        project_name: str = "cladding",
    ) -> dict[str, Path]:
        """Export ``output`` to every format in ``formats``.

        Returns:
            Format name to written path.

        Raises:
            KeyError: If a format is not registered. Nothing is written.
            ValueError: If the calculation is invalid. Nothing is written.
            OSError: If a file cannot be written.
        """
        exporters = {name: ExporterRegistry.get(name)() for name in formats}
        if not output.is_valid:
            raise ValueError("Cannot export an invalid calculation")

        self.output_dir.mkdir(parents=True, exist_ok=True)
        written: dict[str, Path] = {}
        for name, exporter in exporters.items():
            path = self.output_dir / f"{project_name}_{name}.{exporter.file_extension}"
            exporter.export(output, path)
            logger.info(f"Wrote {name} export to {path}")
            written[name] = path
        return written
