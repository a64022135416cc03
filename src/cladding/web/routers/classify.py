"""Single face and joint classification endpoints."""

from fastapi import APIRouter, HTTPException

from cladding.application.config import (
    document_to_grid,
    document_to_settings,
    load_document_from_dict,
)
from cladding.domain.value_objects import CompassDirection, GridPosition
from cladding.web.dependencies import ServiceFactoryDep
from cladding.web.schemas.common import PositionSchema
from cladding.web.schemas.requests import ClassifyFaceRequest, ClassifyJointRequest
from cladding.web.schemas.responses import (
    FaceClassificationSchema,
    JointClassificationSchema,
)

router = APIRouter(prefix="/classify", tags=["classify"])


@router.post("/face", response_model=FaceClassificationSchema)
async def classify_face(
    request: ClassifyFaceRequest,
    factory: ServiceFactoryDep,
) -> FaceClassificationSchema:
    """Classify one exposed face of a cube as a side, left or right panel.

    Raises:
        HTTPException: If there is no cube at the position or the face is covered.
        GridValidationError: If the grid cannot be clad (handled by exception handler).
    """
    document = load_document_from_dict(request.document)
    grid = document_to_grid(document)
    engine = factory.create_engine(document_to_settings(document))
    position = GridPosition(request.position.row, request.position.col)

    try:
        panel_type = engine.classify_face(
            grid, position, CompassDirection(request.direction.value)
        )
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": str(e), "error_type": "invalid_face"},
        ) from e

    return FaceClassificationSchema(
        position=request.position,
        direction=request.direction.value,
        panel_type=panel_type.value,
    )


@router.post("/joint", response_model=JointClassificationSchema)
async def classify_joint(
    request: ClassifyJointRequest,
    factory: ServiceFactoryDep,
) -> JointClassificationSchema:
    """Classify the connector between two adjacent cubes.

    The response lists the pair in flow order, whichever order was requested.

    Raises:
        HTTPException: If either cell is empty or the cells are not adjacent.
        GridValidationError: If the grid cannot be clad (handled by exception handler).
    """
    document = load_document_from_dict(request.document)
    grid = document_to_grid(document)
    engine = factory.create_engine(document_to_settings(document))
    a = GridPosition(request.a.row, request.a.col)
    b = GridPosition(request.b.row, request.b.col)

    try:
        joint = engine.joint_between(grid, a, b)
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": str(e), "error_type": "invalid_joint"},
        ) from e

    return JointClassificationSchema(
        upstream=PositionSchema(row=joint.upstream.row, col=joint.upstream.col),
        downstream=PositionSchema(row=joint.downstream.row, col=joint.downstream.col),
        connector=joint.connector.value,
    )
