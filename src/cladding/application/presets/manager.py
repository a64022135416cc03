"""Preset manager for bundled grid documents.

Presets are grid documents shipped as package data. They can be listed,
loaded as grids, or copied to a file as a starting point.
"""

import json
import logging
from importlib import resources
from pathlib import Path

from cladding.application.config.adapter import document_to_grid
from cladding.application.config.loader import load_document_from_dict
from cladding.application.config.schema import GridDocument
from cladding.domain.entities import Grid

logger = logging.getLogger(__name__)


class PresetNotFoundError(Exception):
    """Raised when a requested preset does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Preset not found: {name}")


# Preset metadata: name -> description
PRESET_METADATA: dict[str, str] = {
    "single": "One isolated cube",
    "straight": "Three cubes in a straight line",
    "l-shape": "Three cubes with one 90 degree turn",
    "u-shape": "Five cubes with two turns, partially clad",
}


class PresetManager:
    """Manager for bundled preset grid documents.

    Example:
        manager = PresetManager()
        for name, description in manager.list_presets():
            print(f"{name}: {description}")

        grid = manager.get_grid("u-shape")
    """

    def __init__(self) -> None:
        self._data_package = "cladding.application.presets.data"

    def list_presets(self) -> list[tuple[str, str]]:
        """List all presets as (name, description) tuples."""
        return list(PRESET_METADATA.items())

    def preset_exists(self, name: str) -> bool:
        return name in PRESET_METADATA

    def get_preset(self, name: str) -> str:
        """Get the JSON content of a preset.

        Raises:
            PresetNotFoundError: If the preset does not exist.
        """
        if name not in PRESET_METADATA:
            raise PresetNotFoundError(name)

        try:
            data_files = resources.files(self._data_package)
            return data_files.joinpath(f"{name}.json").read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise PresetNotFoundError(name) from e

    def load_preset(self, name: str) -> GridDocument:
        """Parse and validate a preset as a GridDocument.

        Raises:
            PresetNotFoundError: If the preset does not exist.
        """
        document = load_document_from_dict(json.loads(self.get_preset(name)))
        logger.debug(f"Loaded preset '{name}' with {len(document.grid.cubes)} cube(s)")
        return document

    def get_grid(self, name: str) -> Grid:
        """Build the grid snapshot for a preset.

        Raises:
            PresetNotFoundError: If the preset does not exist.
        """
        return document_to_grid(self.load_preset(name))

    def init_preset(self, name: str, output_path: Path) -> None:
        """Copy a preset to ``output_path``.

        Raises:
            PresetNotFoundError: If the preset does not exist.
        """
        content = self.get_preset(name)
        output_path.write_text(content, encoding="utf-8")
