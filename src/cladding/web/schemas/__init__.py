"""Pydantic schemas for the REST API."""

from cladding.web.schemas.common import DirectionEnum, HeightEnum, PositionSchema
from cladding.web.schemas.requests import (
    CalculateRequest,
    ClassifyFaceRequest,
    ClassifyJointRequest,
    DocumentValidateRequest,
)
from cladding.web.schemas.responses import (
    CalculationResponseSchema,
    CubeSchema,
    ErrorResponseSchema,
    FaceClassificationSchema,
    FaceSchema,
    GridErrorSchema,
    JointClassificationSchema,
    JointSchema,
    LineItemSchema,
    PresetContentSchema,
    PresetListItemSchema,
    PresetListSchema,
    RawRequirementsSchema,
    RunSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "DirectionEnum",
    "HeightEnum",
    "PositionSchema",
    # Requests
    "CalculateRequest",
    "ClassifyFaceRequest",
    "ClassifyJointRequest",
    "DocumentValidateRequest",
    # Responses
    "CalculationResponseSchema",
    "CubeSchema",
    "ErrorResponseSchema",
    "FaceClassificationSchema",
    "FaceSchema",
    "GridErrorSchema",
    "JointClassificationSchema",
    "JointSchema",
    "LineItemSchema",
    "PresetContentSchema",
    "PresetListItemSchema",
    "PresetListSchema",
    "RawRequirementsSchema",
    "RunSchema",
    "ValidationResultSchema",
]
