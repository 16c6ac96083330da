"""
Trips module.

Handles the trip lifecycle (active -> completed) and the completion reward.

Public API:
- ITripService: Interface for trip operations
- ITripStore: Storage contract for trips
- Trip: Stored trip
- StartTripRequest: Request to start a trip
"""

from .interfaces import ITripService, ITripStore
from .models import Trip, TripStatus, StartTripRequest
from .exceptions import TripError, TripNotActiveError

__all__ = [
    # Interfaces
    "ITripService",
    "ITripStore",
    # Models
    "Trip",
    "TripStatus",
    "StartTripRequest",
    # Exceptions
    "TripError",
    "TripNotActiveError",
]
