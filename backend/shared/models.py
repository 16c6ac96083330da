"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class UserRole(str, Enum):
    """Dashboard roles, lowest privilege first."""

    USER = "user"
    MANAGER = "manager"
    CEO = "ceo"
    DEVELOPER = "developer"

    @property
    def rank(self) -> int:
        return ROLE_HIERARCHY[self]

    def satisfies(self, required: "UserRole") -> bool:
        """True when this role is at least as privileged as `required`."""
        return self.rank >= required.rank


ROLE_HIERARCHY: dict[UserRole, int] = {
    UserRole.USER: 0,
    UserRole.MANAGER: 1,
    UserRole.CEO: 2,
    UserRole.DEVELOPER: 3,
}


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated caller.

    This model is populated from JWT claims and made available
    to route handlers via dependency injection.
    """

    id: str = Field(..., description="User ID (uid from the identity provider)")
    email: Optional[str] = Field(None, description="User's email address")
    email_verified: bool = Field(default=False, description="Whether email is verified")

    last_sign_in: Optional[datetime] = Field(None, description="Token issue time")

    role: UserRole = Field(default=UserRole.USER, description="Dashboard role")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }
