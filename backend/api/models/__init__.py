"""API models package."""

from .user import TokenPayload
from .errors import ErrorResponse, ValidationErrorResponse

__all__ = [
    "TokenPayload",
    "ErrorResponse",
    "ValidationErrorResponse",
]
