"""Requirement calculation endpoints."""

from dataclasses import replace

from fastapi import APIRouter

from cladding.application.config import document_to_settings, load_document_from_dict
from cladding.contracts.dtos import CalculationOutput
from cladding.domain import PanelHeight
from cladding.domain.value_objects import GridPosition
from cladding.web.dependencies import CalculateCommandDep
from cladding.web.schemas.common import PositionSchema
from cladding.web.schemas.requests import CalculateRequest
from cladding.web.schemas.responses import (
    CalculationResponseSchema,
    CubeSchema,
    FaceSchema,
    GridErrorSchema,
    JointSchema,
    LineItemSchema,
    RawRequirementsSchema,
    RunSchema,
)

router = APIRouter(prefix="/calculate", tags=["calculate"])


def _position(position: GridPosition) -> PositionSchema:
    return PositionSchema(row=position.row, col=position.col)


def _raw_schema(raw) -> RawRequirementsSchema:
    return RawRequirementsSchema(
        side_panels=raw.side_panels,
        left_panels=raw.left_panels,
        right_panels=raw.right_panels,
        straight_couplings=raw.straight_couplings,
        corner_connectors=raw.corner_connectors,
    )


def _output_to_schema(output: CalculationOutput) -> CalculationResponseSchema:
    """Convert CalculationOutput to response schema."""
    result = output.result
    if result is None:
        return CalculationResponseSchema(is_valid=False, errors=list(output.errors))

    error = None
    if result.error is not None:
        error = GridErrorSchema(
            code=result.error.code,
            message=result.error.message,
            positions=[_position(p) for p in result.error.positions],
        )

    runs = [
        RunSchema(
            index=run.index,
            length=run.length,
            exposed_faces=run.exposed_faces,
            shape=run.shape.value,
            requirements=_raw_schema(run.raw),
        )
        for run in result.runs
    ]
    cubes = [
        CubeSchema(
            position=_position(cell.position),
            run=run.index,
            role=cell.role.value,
            entry=cell.connection.entry.value if cell.connection.entry else None,
            exit=cell.connection.exit.value if cell.connection.exit else None,
            rotation=cell.connection.rotation,
        )
        for run in result.traced_runs
        for cell in run.cells
    ]
    faces = [
        FaceSchema(
            position=_position(face.position),
            direction=face.direction.value,
            panel_type=face.panel_type.value,
            clad=face.clad,
        )
        for face in result.faces
    ]
    joints = [
        JointSchema(
            upstream=_position(joint.upstream),
            downstream=_position(joint.downstream),
            connector=joint.connector.value,
        )
        for joint in result.joints
    ]
    bill = output.bill_of_materials
    items = [
        LineItemSchema(
            key=item.key,
            label=item.label,
            quantity=item.quantity,
            variant_id=item.variant_id,
            unit_price=item.unit_price,
        )
        for item in (bill.items if bill is not None else ())
    ]

    return CalculationResponseSchema(
        is_valid=output.is_valid,
        errors=list(output.errors),
        error=error,
        requirements=result.requirements.to_dict(),
        raw=_raw_schema(result.raw),
        runs=runs,
        cubes=cubes,
        faces=faces,
        joints=joints,
        bill_of_materials=items,
    )


@router.post("", response_model=CalculationResponseSchema)
async def calculate_requirements(
    request: CalculateRequest,
    command: CalculateCommandDep,
) -> CalculationResponseSchema:
    """Calculate packed requirements for a grid document.

    Invalid cube placements are not HTTP errors: the response carries
    ``is_valid=false``, the grid error and all-zero requirements.

    Raises:
        ConfigError: If the document is malformed (handled by exception handler).
    """
    document = load_document_from_dict(request.document)

    settings = document_to_settings(document)
    overrides = {}
    if request.count_clad_only is not None:
        overrides["count_clad_only"] = request.count_clad_only
    if request.repair_flow is not None:
        overrides["repair_flow"] = request.repair_flow
    if request.height is not None:
        overrides["height"] = PanelHeight(request.height.value)
    if overrides:
        settings = replace(settings, **overrides)

    output = command.execute_document(document, settings)
    return _output_to_schema(output)
