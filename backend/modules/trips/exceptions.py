"""
Trips module exceptions.
"""

from shared.exceptions import KommyutError, ConflictError


class TripError(KommyutError):
    """Base exception for trip-related errors."""

    pass


class TripNotActiveError(TripError, ConflictError):
    """
    Raised when no active trip matches the id.

    Covers unknown ids, trips that were already completed, and the losers
    of concurrent completion requests.
    """

    def __init__(self, trip_id: int):
        super().__init__(
            "Trip not found or already completed",
            code="TRIP_NOT_ACTIVE",
            details={"trip_id": trip_id},
        )
