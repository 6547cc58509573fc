"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wardrobes.application.config import ConfigError
from wardrobes.domain import (
    InvalidDimensionError,
    UnknownUnitError,
    UnknownWardrobeTypeError,
)


def register_exception_handlers(app: FastAPI) -> None:
    """Register domain exception handlers with the FastAPI app."""

    @app.exception_handler(InvalidDimensionError)
    async def invalid_dimension_handler(
        request: Request, exc: InvalidDimensionError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "invalid_dimension",
                "details": {"dimension": exc.dimension},
            },
        )

    @app.exception_handler(UnknownWardrobeTypeError)
    async def unknown_type_handler(
        request: Request, exc: UnknownWardrobeTypeError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "unknown_wardrobe_type",
                "details": {"value": str(exc.value)},
            },
        )

    @app.exception_handler(UnknownUnitError)
    async def unknown_unit_handler(
        request: Request, exc: UnknownUnitError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "unknown_unit",
                "details": {"value": str(exc.value)},
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Configuration validation failed",
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")}
                    for d in exc.details
                ],
            },
        )
