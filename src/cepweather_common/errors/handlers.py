"""FastAPI exception handlers for application errors."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cepweather_common.errors.exceptions import CepWeatherError

logger = structlog.get_logger()


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on a FastAPI application.

    ``CepWeatherError`` subclasses are rendered with their own status code.
    Request bodies FastAPI cannot parse are answered with 400 rather than
    FastAPI's default 422, which is reserved for a malformed postal code.

    Args:
        app: The FastAPI application instance to register handlers on.
    """

    @app.exception_handler(CepWeatherError)
    async def handle_application_error(request: Request, exc: CepWeatherError) -> JSONResponse:
        log_method = logger.error if exc.status_code >= 500 else logger.warning
        log_method(
            "application_error",
            error_code=exc.error_code,
            message=str(exc),
            path=request.url.path,
            **exc.context,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error_code": exc.error_code,
                "message": str(exc),
                **exc.context,
            },
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning("invalid_request", path=request.url.path, errors=len(exc.errors()))
        return JSONResponse(
            status_code=400,
            content={"error_code": "INVALID_REQUEST", "message": "malformed request body"},
        )
