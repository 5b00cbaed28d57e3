"""API Core - Shared utilities for API routes.

This package provides:
- Unified error response builder (error_response)
- Domain exceptions mapped to HTTP status codes
- Exception handlers producing the error envelope

Usage:
    from migratrack.api.core import error_response, NotFoundError
"""

from .response import (
    error_response,
    register_error_handlers,
)

from .exceptions import (
    MigraTrackError,
    ValidationError,
    NotFoundError,
)

__all__ = [
    # Response utilities
    "error_response",
    "register_error_handlers",
    # Exceptions
    "MigraTrackError",
    "ValidationError",
    "NotFoundError",
]
