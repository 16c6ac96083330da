"""
Caller identity endpoint.

Account storage endpoints live in modules.accounts.routes.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.models import AuthenticatedUser, UserRole
from ..middleware.auth import get_current_user

router = APIRouter()


class CallerProfileResponse(BaseModel):
    """Identity of the authenticated caller, as read from the token."""

    id: str
    email: Optional[str]
    email_verified: bool
    role: UserRole


@router.get("/me", response_model=CallerProfileResponse)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
) -> CallerProfileResponse:
    """
    Get the current caller's identity and dashboard role.

    The dashboards use the role to decide which views to show.
    """
    return CallerProfileResponse(
        id=user.id,
        email=user.email,
        email_verified=user.email_verified,
        role=user.role,
    )
