"""Domain exceptions for the MigraTrack API.

Raised from route handlers and turned into the standard error envelope by
the handlers in ``response.register_error_handlers``.
"""

from typing import Any, Optional


class MigraTrackError(Exception):
    """Base class for errors that map to an HTTP status."""

    status_code = 500

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(MigraTrackError):
    """Invalid input: bad field values, id mismatch, missing owner."""

    status_code = 400


class NotFoundError(MigraTrackError):
    """The addressed row does not exist (or is deleted/inactive)."""

    status_code = 404

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id
