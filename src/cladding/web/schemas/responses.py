"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from cladding.web.schemas.common import PositionSchema


class GridErrorSchema(BaseModel):
    """Why a grid could not be clad."""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable message")
    positions: list[PositionSchema] = Field(
        default_factory=list, description="Cubes involved"
    )


class RawRequirementsSchema(BaseModel):
    """Panel and connector counts before bundling."""

    side_panels: int = Field(..., description="Side panels")
    left_panels: int = Field(..., description="Left end panels")
    right_panels: int = Field(..., description="Right end panels")
    straight_couplings: int = Field(..., description="Straight couplings")
    corner_connectors: int = Field(..., description="Corner connectors")


class RunSchema(BaseModel):
    """Per-run breakdown."""

    index: int = Field(..., description="Run index in row-major discovery order")
    length: int = Field(..., description="Number of cubes")
    exposed_faces: int = Field(..., description="Faces not covered by a neighbour")
    shape: str = Field(..., description="Shape label")
    requirements: RawRequirementsSchema = Field(..., description="Counts for this run")


class CubeSchema(BaseModel):
    """Flow assigned to one cube."""

    position: PositionSchema = Field(..., description="Cube position")
    run: int = Field(..., description="Run index")
    role: str = Field(..., description="isolated, endpoint or interior")
    entry: str | None = Field(default=None, description="Entry face")
    exit: str | None = Field(default=None, description="Exit face")
    rotation: int = Field(..., description="Rotation in degrees implied by the entry face")


class FaceSchema(BaseModel):
    """Classified exposed face."""

    position: PositionSchema = Field(..., description="Cube position")
    direction: str = Field(..., description="Face direction")
    panel_type: str = Field(..., description="side, left or right")
    clad: bool = Field(..., description="Whether the face is marked as clad")


class JointSchema(BaseModel):
    """Connector between adjacent cubes, in flow order."""

    upstream: PositionSchema = Field(..., description="Upstream cube")
    downstream: PositionSchema = Field(..., description="Downstream cube")
    connector: str = Field(..., description="straight, corner-left or corner-right")


class LineItemSchema(BaseModel):
    """Bill of materials line."""

    key: str = Field(..., description="Storefront key")
    label: str = Field(..., description="Display label")
    quantity: int = Field(..., description="Quantity to order")
    variant_id: str | None = Field(default=None, description="Storefront variant id")
    unit_price: float | None = Field(default=None, description="Unit price")


class CalculationResponseSchema(BaseModel):
    """Response for a calculation."""

    is_valid: bool = Field(..., description="Whether the grid could be clad")
    errors: list[str] = Field(default_factory=list, description="Input errors")
    error: GridErrorSchema | None = Field(default=None, description="Grid error")
    requirements: dict[str, int] = Field(
        default_factory=dict, description="Packed requirements keyed by storefront name"
    )
    raw: RawRequirementsSchema | None = Field(default=None, description="Unbundled counts")
    runs: list[RunSchema] = Field(default_factory=list, description="Per-run breakdown")
    cubes: list[CubeSchema] = Field(default_factory=list, description="Assigned flow")
    faces: list[FaceSchema] = Field(default_factory=list, description="Classified faces")
    joints: list[JointSchema] = Field(default_factory=list, description="Classified joints")
    bill_of_materials: list[LineItemSchema] = Field(
        default_factory=list, description="Bill of materials"
    )


class FaceClassificationSchema(BaseModel):
    """Response for a single face classification."""

    position: PositionSchema = Field(..., description="Cube position")
    direction: str = Field(..., description="Face direction")
    panel_type: str = Field(..., description="side, left or right")


class JointClassificationSchema(BaseModel):
    """Response for a single joint classification."""

    upstream: PositionSchema = Field(..., description="Upstream cube")
    downstream: PositionSchema = Field(..., description="Downstream cube")
    connector: str = Field(..., description="straight, corner-left or corner-right")


class ValidationResultSchema(BaseModel):
    """Response for document validation."""

    is_valid: bool = Field(..., description="Whether the document is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class PresetListItemSchema(BaseModel):
    """Single preset in the list."""

    name: str = Field(..., description="Preset name")
    description: str = Field(..., description="Preset description")


class PresetListSchema(BaseModel):
    """Response for preset listing."""

    presets: list[PresetListItemSchema] = Field(..., description="Available presets")


class PresetContentSchema(BaseModel):
    """Response for preset content."""

    name: str = Field(..., description="Preset name")
    description: str = Field(..., description="Preset description")
    content: dict[str, Any] = Field(..., description="Preset grid document")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
