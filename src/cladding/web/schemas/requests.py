"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from cladding.web.schemas.common import DirectionEnum, HeightEnum, PositionSchema


class CalculateRequest(BaseModel):
    """Request for calculating the requirements of a grid document.

    Option fields override the document's own options when set.
    """

    document: dict[str, Any] = Field(..., description="Grid document JSON")
    count_clad_only: bool | None = Field(
        default=None, description="Count only faces marked as clad"
    )
    repair_flow: bool | None = Field(
        default=None, description="Rewrite discontinuous flow instead of failing"
    )
    height: HeightEnum | None = Field(default=None, description="Cube height")


class ClassifyFaceRequest(BaseModel):
    """Request for the panel type of one exposed face."""

    document: dict[str, Any] = Field(..., description="Grid document JSON")
    position: PositionSchema = Field(..., description="Cube position")
    direction: DirectionEnum = Field(..., description="Face direction")


class ClassifyJointRequest(BaseModel):
    """Request for the connector between two adjacent cubes."""

    document: dict[str, Any] = Field(..., description="Grid document JSON")
    a: PositionSchema = Field(..., description="First cube")
    b: PositionSchema = Field(..., description="Second cube, adjacent to the first")


class DocumentValidateRequest(BaseModel):
    """Request for validating a grid document."""

    document: dict[str, Any] = Field(..., description="Grid document JSON")
