"""API error handling — map domain exceptions onto HTTP responses.

Status code mapping:
- ``InvalidArgument`` → 400 Bad Request
- ``ValidationError`` / ``DuplicateName`` → 400 with per-field messages
- ``RequestValidationError`` (body/path parsing) → 400 with per-field messages
- ``VillaNotFound`` → 404 Not Found
- Any other ``Exception`` → 500 Internal Server Error
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from villa_api.exceptions import (
    InvalidArgument,
    ValidationError,
    VillaNotFound,
    collect_field_errors,
)

logger = logging.getLogger(__name__)

VALIDATION_TITLE = "One or more validation errors occurred."


def _validation_response(errors: dict[str, list[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "title": VALIDATION_TITLE,
            "status": status.HTTP_400_BAD_REQUEST,
            "errors": errors,
        },
    )


async def _handle_invalid_argument(request: Request, exc: InvalidArgument) -> JSONResponse:
    logger.info("Bad request on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


async def _handle_not_found(request: Request, exc: VillaNotFound) -> JSONResponse:
    logger.info("Villa not found: %s", exc.villa_id)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def _handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("Validation failed on %s %s: %s", request.method, request.url.path, exc)
    return _validation_response(exc.errors)


async def _handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = collect_field_errors(exc.errors(), skip_prefix="body")
    logger.info("Request validation failed on %s %s: %s", request.method, request.url.path, errors)
    return _validation_response(errors)


class CatchAllErrorMiddleware(BaseHTTPMiddleware):
    """Log any unhandled exception and answer with a generic 500."""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.error(
                "Unhandled exception on %s %s",
                request.method,
                request.url.path,
                exc_info=True,
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": "Internal server error"},
            )


def register_error_handlers(app: FastAPI) -> None:
    """Attach all exception handlers to the FastAPI application."""
    app.add_exception_handler(InvalidArgument, _handle_invalid_argument)  # type: ignore[arg-type]
    app.add_exception_handler(VillaNotFound, _handle_not_found)  # type: ignore[arg-type]
    app.add_exception_handler(ValidationError, _handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _handle_request_validation)  # type: ignore[arg-type]
    app.add_middleware(CatchAllErrorMiddleware)
