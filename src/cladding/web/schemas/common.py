"""Common Pydantic schemas shared across requests and responses."""

from enum import Enum

from pydantic import BaseModel, Field


class DirectionEnum(str, Enum):
    """Compass direction of a cube face."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"


class HeightEnum(str, Enum):
    """Cube height options."""

    STANDARD = "standard"
    EXTRA_TALL = "extra_tall"


class PositionSchema(BaseModel):
    """Grid cell position."""

    row: int = Field(..., ge=0, description="Zero-based row index")
    col: int = Field(..., ge=0, description="Zero-based column index")
