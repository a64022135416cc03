"""Bundled preset grids and the PresetManager used to access them."""

from cladding.application.presets.manager import (
    PRESET_METADATA,
    PresetManager,
    PresetNotFoundError,
)

__all__ = [
    "PRESET_METADATA",
    "PresetManager",
    "PresetNotFoundError",
]
