"""
Trip API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from api.middleware.auth import get_current_user, ensure_self_or_role
from api.dependencies import get_trip_service
from shared.models import AuthenticatedUser, UserRole

from .interfaces import ITripService
from .models import Trip, StartTripRequest
from .exceptions import TripNotActiveError

router = APIRouter()


@router.post("", response_model=Trip, status_code=201)
async def start_trip(
    request: StartTripRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITripService = Depends(get_trip_service),
) -> Trip:
    """
    Start a trip for the caller.
    """
    ensure_self_or_role(user, request.user_uid, UserRole.DEVELOPER)
    return await service.start_trip(request)


@router.get("/active/{user_uid}", response_model=list[Trip])
async def list_active_trips(
    user_uid: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITripService = Depends(get_trip_service),
) -> list[Trip]:
    ensure_self_or_role(user, user_uid, UserRole.MANAGER)
    return await service.list_active_trips(user_uid)


@router.get("/completed/{user_uid}", response_model=list[Trip])
async def list_completed_trips(
    user_uid: str,
    limit: int = Query(default=50, ge=1, le=200, description="Max trips"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITripService = Depends(get_trip_service),
) -> list[Trip]:
    ensure_self_or_role(user, user_uid, UserRole.MANAGER)
    return await service.list_completed_trips(user_uid, limit=limit)


@router.put("/{trip_id}/complete", response_model=Trip)
async def complete_trip(
    trip_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITripService = Depends(get_trip_service),
) -> Trip:
    """
    Mark an active trip as completed and award the completion reward.

    Riders may only complete their own trips; managers and above may
    complete any. Returns 409 when the trip does not exist, was already
    completed, or was completed by a concurrent request.
    """
    try:
        trip = await service.get_active_trip(trip_id)
        ensure_self_or_role(user, trip.user_uid, UserRole.MANAGER)
        return await service.complete_trip(trip_id)
    except TripNotActiveError as e:
        raise HTTPException(status_code=409, detail=e.message)
