"""
Trips module interface.

ITripStore is the storage contract; ITripService is what the API calls.
"""

from datetime import datetime
from typing import Protocol, Optional, runtime_checkable

from .models import Trip, TripStatus, StartTripRequest


@runtime_checkable
class ITripStore(Protocol):
    """Storage contract for trips."""

    def create_trip(self, request: StartTripRequest, started_at: datetime) -> Trip:
        """Insert a trip in active status."""
        ...

    def get_active_trip(self, trip_id: int) -> Optional[Trip]:
        """Return the trip if it exists and is active, else None."""
        ...

    def set_trip_completed_if_active(self, trip_id: int, completed_at: datetime) -> Optional[Trip]:
        """
        Compare-and-set the trip from active to completed.

        The write only applies while the stored status is still active,
        so of several concurrent callers exactly one gets the trip back.

        Returns:
            The completed trip, or None if no active trip matched.
        """
        ...

    def list_trips(self, user_uid: str, status: TripStatus, limit: int = 50) -> list[Trip]:
        """List a user's trips with the given status, newest first."""
        ...


@runtime_checkable
class ITripService(Protocol):
    """Interface for trip lifecycle operations."""

    async def start_trip(self, request: StartTripRequest) -> Trip:
        """Start a trip in active status."""
        ...

    async def get_active_trip(self, trip_id: int) -> Trip:
        """
        Get an active trip.

        Raises:
            TripNotActiveError: If no active trip has this id
        """
        ...

    async def complete_trip(self, trip_id: int) -> Trip:
        """
        Complete an active trip and award the completion reward.

        The reward is best-effort: its failure is logged and never
        changes the result.

        Returns:
            The completed trip

        Raises:
            TripNotActiveError: If no active trip matched (unknown id,
                already completed, or lost a concurrent completion)
        """
        ...

    async def list_active_trips(self, user_uid: str) -> list[Trip]:
        """A user's active trips, most recently started first."""
        ...

    async def list_completed_trips(self, user_uid: str, limit: int = 50) -> list[Trip]:
        """A user's completed trips, most recently completed first."""
        ...
