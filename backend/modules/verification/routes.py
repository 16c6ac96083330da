"""
Verification API endpoints.

ID review queue, decision endpoint and decision history. All routes
require the manager role or above.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from api.middleware.auth import require_role
from api.dependencies import get_verification_service
from modules.accounts.models import UserAccount
from modules.accounts.exceptions import AccountNotFoundError
from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser, UserRole

from .interfaces import IVerificationService
from .models import (
    RESULT_MESSAGES,
    VerificationDecisionRequest,
    VerificationDecisionResponse,
    VerificationHistoryResponse,
)
from .exceptions import ReapproveNotAllowedError

router = APIRouter()


@router.get("/pending-verification", response_model=list[UserAccount])
async def list_pending_verification(
    user: AuthenticatedUser = Depends(require_role(UserRole.MANAGER)),
    service: IVerificationService = Depends(get_verification_service),
) -> list[UserAccount]:
    """
    List accounts with an uploaded ID that still needs review.
    """
    return await service.list_pending()


@router.get("/verification-history", response_model=VerificationHistoryResponse)
async def list_verification_history(
    limit: int = Query(default=100, ge=1, le=500, description="Max entries"),
    offset: int = Query(default=0, ge=0, description="Entries to skip"),
    user: AuthenticatedUser = Depends(require_role(UserRole.MANAGER)),
    service: IVerificationService = Depends(get_verification_service),
) -> VerificationHistoryResponse:
    """
    List past verification decisions, newest first.
    """
    return await service.list_history(limit=limit, offset=offset)


@router.put("/{uid}/verify", response_model=VerificationDecisionResponse)
async def verify_user(
    uid: str,
    request: VerificationDecisionRequest,
    user: AuthenticatedUser = Depends(require_role(UserRole.MANAGER)),
    service: IVerificationService = Depends(get_verification_service),
) -> VerificationDecisionResponse:
    """
    Approve, reject or re-approve a user's ID.

    Rejecting resets the account to the regular fare type. A note is
    required for reject and re-approve.
    """
    try:
        account = await service.decide(uid, request.action, request.note)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except AccountNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    except ReapproveNotAllowedError as e:
        raise HTTPException(status_code=409, detail=e.message)

    return VerificationDecisionResponse(
        message=RESULT_MESSAGES[request.action],
        user=account,
    )
