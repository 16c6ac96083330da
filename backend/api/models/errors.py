"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel
from typing import Any, Optional


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    detail: Optional[str] = None
    code: Optional[str] = None
    details: dict[str, Any] = {}


class ValidationErrorResponse(BaseModel):
    """Validation error response format."""

    error: str = "Validation Error"
    detail: list[dict]
