"""Grid document validation endpoints."""

from fastapi import APIRouter

from cladding.application.config import (
    ConfigError,
    load_document_from_dict,
    validate_document,
)
from cladding.web.schemas.requests import DocumentValidateRequest
from cladding.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_grid_document(
    request: DocumentValidateRequest,
) -> ValidationResultSchema:
    """Validate a grid document without calculating it.

    Schema failures are returned as validation errors rather than a 422 so
    an editor can show every problem in one place.
    """
    try:
        document = load_document_from_dict(request.document)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                {"message": d.get("message", e.message), "path": d.get("path", "")}
                for d in e.details
            ]
            or [{"message": e.message, "path": ""}],
        )

    result = validate_document(document)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
