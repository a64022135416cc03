"""Preset browsing endpoints."""

import json

from fastapi import APIRouter

from cladding.application.presets.manager import PRESET_METADATA
from cladding.web.dependencies import PresetManagerDep
from cladding.web.schemas.responses import (
    PresetContentSchema,
    PresetListItemSchema,
    PresetListSchema,
)

router = APIRouter(prefix="/presets", tags=["presets"])


@router.get("", response_model=PresetListSchema)
async def list_presets(
    manager: PresetManagerDep,
) -> PresetListSchema:
    """List all bundled presets.

    Args:
        manager: Injected PresetManager.

    Returns:
        Available presets with names and descriptions.
    """
    presets = [
        PresetListItemSchema(name=name, description=desc)
        for name, desc in manager.list_presets()
    ]
    return PresetListSchema(presets=presets)


@router.get("/{name}", response_model=PresetContentSchema)
async def get_preset(
    name: str,
    manager: PresetManagerDep,
) -> PresetContentSchema:
    """Get the grid document of a specific preset.

    Raises:
        PresetNotFoundError: If the preset does not exist (handled by exception handler).
    """
    content = json.loads(manager.get_preset(name))

    return PresetContentSchema(
        name=name,
        description=PRESET_METADATA.get(name, ""),
        content=content,
    )
