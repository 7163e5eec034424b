"""
Exception hierarchy for the Alumni Connect backend.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class AlumniConnectException(Exception):
    """Base exception for all Alumni Connect application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(AlumniConnectException):
    """Raised when request input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message (safe to return to the caller)
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class RecordStoreError(AlumniConnectException):
    """Raised when the record store cannot be reached or queried."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        collection: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize record store error.

        Args:
            message: Error message
            operation: Operation that failed (initialize, fetch, create_tables)
            collection: Collection involved, if any
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        if collection:
            details["collection"] = collection
        super().__init__(message, details)


class AssistantError(AlumniConnectException):
    """Raised when the chat model is misconfigured or its call fails."""

    def __init__(
        self,
        message: str,
        model_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize assistant error.

        Args:
            message: Error message
            model_id: Model identifier that was being called
            details: Additional context
        """
        details = details or {}
        if model_id:
            details["model_id"] = model_id
        super().__init__(message, details)
