"""
Account API endpoints.

Sign-in upsert and lookup of user accounts.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.middleware.auth import get_current_user, ensure_self_or_role, ForbiddenError
from api.dependencies import get_account_service
from shared.models import AuthenticatedUser, UserRole

from .interfaces import IAccountService
from .models import UserAccount, UpsertAccountRequest
from .exceptions import AccountNotFoundError

router = APIRouter()


@router.post("", response_model=UserAccount)
async def upsert_account(
    request: UpsertAccountRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAccountService = Depends(get_account_service),
) -> UserAccount:
    """
    Create or update an account.

    Called by the app on every sign-in. Callers may only upsert their own
    account unless they are developers, and only developers may set a role.
    """
    ensure_self_or_role(user, request.uid, UserRole.DEVELOPER)
    if request.role is not None and not user.role.satisfies(UserRole.DEVELOPER):
        raise ForbiddenError(UserRole.DEVELOPER, user.role)
    return await service.upsert_account(request)


@router.get("/{uid}", response_model=UserAccount)
async def get_account(
    uid: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAccountService = Depends(get_account_service),
) -> UserAccount:
    """
    Get an account by uid.

    Users can read their own account; managers and above can read any.
    """
    ensure_self_or_role(user, uid, UserRole.MANAGER)
    try:
        return await service.get_account(uid)
    except AccountNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
