"""
Trip lifecycle service implementation.

Completing a trip is a two-phase operation:
- primary: compare-and-set the trip from active to completed
- auxiliary: credit the owner with the completion reward

The completed trip is the fact of record. A failed or skipped reward is
logged and never turns a completed trip into an error.
"""

import logging
from datetime import datetime, timezone

from modules.accounts.interfaces import IAccountStore
from shared.effects import run_with_auxiliary

from .interfaces import ITripService, ITripStore
from .models import Trip, TripStatus, StartTripRequest
from .exceptions import TripNotActiveError

logger = logging.getLogger(__name__)

# Points credited for each completed trip
TRIP_COMPLETION_REWARD = 10


def _as_utc(value: datetime) -> datetime:
    """Treat naive timestamps from storage as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class TripService(ITripService):
    """
    Trip service over a trip store and the account store.

    Implements ITripService protocol.
    """

    def __init__(
        self,
        trips: ITripStore,
        accounts: IAccountStore,
        reward_points: int = TRIP_COMPLETION_REWARD,
    ):
        self._trips = trips
        self._accounts = accounts
        self._reward_points = reward_points

    async def start_trip(self, request: StartTripRequest) -> Trip:
        """Start a new trip in active status."""
        trip = self._trips.create_trip(request, started_at=datetime.now(timezone.utc))
        logger.info(f"Started trip {trip.id} for user {trip.user_uid}")
        return trip

    async def get_active_trip(self, trip_id: int) -> Trip:
        """Get an active trip by ID."""
        trip = self._trips.get_active_trip(trip_id)
        if trip is None:
            raise TripNotActiveError(trip_id)
        return trip

    async def complete_trip(self, trip_id: int) -> Trip:
        """Complete an active trip and award points."""
        outcome = await run_with_auxiliary(
            primary=lambda: self._close_trip(trip_id),
            auxiliary=self._award_completion_points,
            name="trip_completion_reward",
        )
        if not outcome.auxiliary_succeeded:
            logger.warning(
                f"Trip {trip_id} completed without reward for user {outcome.result.user_uid}: "
                f"{outcome.auxiliary_error}"
            )
        return outcome.result

    async def list_active_trips(self, user_uid: str) -> list[Trip]:
        """List a user's active trips."""
        return self._trips.list_trips(user_uid, TripStatus.ACTIVE)

    async def list_completed_trips(self, user_uid: str, limit: int = 50) -> list[Trip]:
        """List a user's completed trips."""
        return self._trips.list_trips(user_uid, TripStatus.COMPLETED, limit=limit)

    # -------------------------------------------------------------------------
    # Completion phases
    # -------------------------------------------------------------------------

    async def _close_trip(self, trip_id: int) -> Trip:
        """Primary effect: active -> completed, at most once."""
        trip = await self.get_active_trip(trip_id)

        # completed_at never precedes started_at, even with clock skew
        completed_at = max(datetime.now(timezone.utc), _as_utc(trip.started_at))

        completed = self._trips.set_trip_completed_if_active(trip_id, completed_at)
        if completed is None:
            logger.info(f"Trip {trip_id} was completed by a concurrent request")
            raise TripNotActiveError(trip_id)

        logger.info(f"Completed trip {trip_id} for user {completed.user_uid}")
        return completed

    async def _award_completion_points(self, trip: Trip) -> None:
        """Auxiliary effect: credit the trip owner."""
        logger.info(f"Awarding {self._reward_points} points to user: {trip.user_uid}")
        balance = self._accounts.increment_points(trip.user_uid, self._reward_points)

        if balance is None:
            logger.warning(f"User {trip.user_uid} not found, no points awarded for trip {trip.id}")
        else:
            logger.info(f"User {trip.user_uid} now has {balance} points")
