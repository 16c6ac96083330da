"""
Token models for authentication.

The authenticated caller itself is shared.models.AuthenticatedUser.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional


class TokenPayload(BaseModel):
    """JWT token payload structure."""
    model_config = ConfigDict(extra="ignore")

    sub: str  # User ID
    email: Optional[str] = None
    email_confirmed_at: Optional[str] = None
    aud: str  # Audience
    exp: int  # Expiration timestamp
    iat: int  # Issued at timestamp
    app_metadata: dict[str, Any] = Field(default_factory=dict)  # Holds the dashboard role
