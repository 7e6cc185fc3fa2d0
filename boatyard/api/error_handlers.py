"""Error Handlers — global exception handlers for the Boatyard API.

Invariants:
    - BoatyardError → structured JSON with error code, message, severity
    - RequestValidationError → 400 with field-level details and a readable message
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (BoatyardError), validation (Pydantic), catch-all (Exception)
    - Validation failures are 400, not FastAPI's default 422
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from boatyard.core.errors import BoatyardError, ErrorSeverity

logger = logging.getLogger(__name__)

# pydantic prefixes messages of ValueErrors raised in validators
_VALUE_ERROR_PREFIX = "Value error, "


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_boatyard_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_boatyard_error_handler(app: FastAPI) -> None:
    """Register Boatyard domain/infrastructure error handler."""

    @app.exception_handler(BoatyardError)
    async def boatyard_error_handler(request: Request, exc: BoatyardError):
        """Handle all Boatyard domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"BoatyardError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    details = [
        {
            "field": _field_path(e["loc"]),
            "message": _clean_message(e["msg"]),
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": ", ".join(
                f"{d['field']}: {d['message']}" if d["field"] else d["message"]
                for d in details
            ) or "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": details,
        },
    }


def _field_path(loc: tuple) -> str:
    """`("body", "name")` → `name`; `("path", "boat_id")` → `boat_id`."""
    parts = [str(p) for p in loc]
    if parts and parts[0] in ("body", "path", "query"):
        parts = parts[1:]
    return ".".join(parts)


def _clean_message(msg: str) -> str:
    if msg.startswith(_VALUE_ERROR_PREFIX):
        return msg[len(_VALUE_ERROR_PREFIX):]
    return msg
