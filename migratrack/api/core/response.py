"""Unified JSON responses and exception handlers.

Every error leaves the API as ``{"success": false, "error": "<message>"}``
with the matching status code.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .exceptions import MigraTrackError

logger = logging.getLogger(__name__)


def error_response(message: str, status_code: int = 400, details: Any = None) -> JSONResponse:
    body = {"success": False, "error": message}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


def _describe_validation_error(exc: RequestValidationError) -> str:
    """First validation problem as ``field: message``."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers that produce the error envelope."""

    @app.exception_handler(MigraTrackError)
    async def handle_domain_error(request: Request, exc: MigraTrackError):
        return error_response(exc.message, exc.status_code, exc.details)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        return error_response(str(exc.detail), exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return error_response(_describe_validation_error(exc), 400)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.error(
            f"Unhandled error on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
        )
        return error_response("Internal server error", 500)
