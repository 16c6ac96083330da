"""
Base exception classes for the Kommyut backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class KommyutError(Exception):
    """
    Base exception for all Kommyut errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(KommyutError):
    """Resource not found."""

    pass


class ValidationError(KommyutError):
    """Input validation failed."""

    pass


class ConflictError(KommyutError):
    """
    A state-transition precondition was violated.

    Not retryable as-is: the caller must re-fetch state first.
    """

    pass


class AuthenticationError(KommyutError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(KommyutError):
    """Authorization failed (insufficient permissions)."""

    pass


class StorageUnavailableError(KommyutError):
    """
    The storage backend timed out or could not be reached.

    Safe to retry: no partial state is visible before a write commits.
    """

    retryable = True

    def __init__(
        self,
        operation: str,
        reason: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            f"Storage unavailable during {operation}: {reason}",
            code or "STORAGE_UNAVAILABLE",
            details,
        )
        self.operation = operation
        self.details["operation"] = operation


class InternalError(KommyutError):
    """Unexpected inconsistency that needs operator attention."""

    pass
