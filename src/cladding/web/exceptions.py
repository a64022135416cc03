"""Exception handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cladding.application.config import ConfigError
from cladding.application.presets import PresetNotFoundError
from cladding.domain.errors import GridValidationError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(GridValidationError)
    async def grid_error_handler(
        request: Request, exc: GridValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.code,
                "details": [{"row": p.row, "col": p.col} for p in exc.positions] or None,
            },
        )

    @app.exception_handler(PresetNotFoundError)
    async def preset_not_found_handler(
        request: Request, exc: PresetNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": f"Preset not found: {exc.name}",
                "error_type": "not_found",
                "details": None,
            },
        )
