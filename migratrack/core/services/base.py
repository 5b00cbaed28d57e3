"""Base service class providing common functionality.

Every data-access service inherits from this class. It holds the
database manager, a class-named logger, and the logging helpers used to
record mutating operations and failures with context.
"""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, Optional

from sqlalchemy import inspect

if TYPE_CHECKING:
    from ..db import DatabaseManager


class BaseService:
    """Base class for all service implementations.

    Provides common functionality including:
    - Database manager access for persistence
    - Standardized logging configuration
    - ORM row to dict conversion
    """

    def __init__(self, db_manager: Optional["DatabaseManager"]):
        """Initialize base service.

        Args:
            db_manager: DatabaseManager used for every session this service opens
        """
        self._db_manager = db_manager

        # Configure logger with class name
        self._logger = logging.getLogger(self.__class__.__name__)
        self._logger.setLevel(logging.INFO)

    @property
    def db(self) -> "DatabaseManager":
        """Access to the database manager."""
        self._validate_database_available()
        return self._db_manager

    @property
    def logger(self) -> logging.Logger:
        """Access to the service logger."""
        return self._logger

    def _validate_database_available(self) -> None:
        """Validate that database features are available.

        Raises:
            RuntimeError: If database manager is not configured
        """
        if self._db_manager is None:
            raise RuntimeError(
                "Database features are not available. "
                "Service requires DATABASE_URL to be configured."
            )

    def _log_operation(
        self,
        operation: str,
        **kwargs
    ) -> None:
        """Log a service operation with context.

        Args:
            operation: Operation name
            **kwargs: Additional context to log
        """
        context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        self._logger.info(f"{operation}: {context}")

    def _log_error(
        self,
        operation: str,
        error: Exception,
        **kwargs
    ) -> None:
        """Log an error with context.

        Args:
            operation: Operation that failed
            error: Exception that occurred
            **kwargs: Additional context to log
        """
        context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        self._logger.error(
            f"{operation} failed: {error.__class__.__name__}: {error}",
            extra={"context": context},
            exc_info=True
        )

    @staticmethod
    def _row_to_dict(row: Any) -> Dict[str, Any]:
        """Convert an ORM row into a JSON-friendly dict keyed by attribute name."""
        result = {}
        for attr in inspect(type(row)).column_attrs:
            value = getattr(row, attr.key)
            if isinstance(value, (datetime, date)):
                value = value.isoformat()
            elif isinstance(value, Decimal):
                value = float(value)
            result[attr.key] = value
        return result
