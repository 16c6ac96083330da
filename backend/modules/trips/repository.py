"""
Trip repository for database access.

Encapsulates Supabase queries and data mapping for the user_trips table.
Completion is a conditional UPDATE filtered on status, so the database
decides the winner when two requests complete the same trip.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, Any

from supabase import Client

from shared.memory import MemoryStore
from shared.repository import BaseRepository
from .models import Trip, TripStatus, StartTripRequest


TRIPS_TABLE = "user_trips"


class TripRepository(BaseRepository[Trip]):
    """Repository for trip data access."""

    def create_trip(self, request: StartTripRequest, started_at: datetime) -> Trip:
        """
        Insert a new trip in active status.

        Args:
            request: Trip details.
            started_at: Start timestamp.

        Returns:
            Created Trip with generated ID.
        """
        data = {
            **request.model_dump(mode="json"),
            "status": TripStatus.ACTIVE.value,
            "started_at": started_at.isoformat(),
        }
        result = self._execute(
            self._db.table(TRIPS_TABLE).insert(data),
            "create_trip",
        )
        return self._map_to_trip(result.data[0])

    def get_active_trip(self, trip_id: int) -> Optional[Trip]:
        """Get a trip by ID if it is still active."""
        result = self._execute(
            self._db.table(TRIPS_TABLE)
            .select("*")
            .eq("id", trip_id)
            .eq("status", TripStatus.ACTIVE.value),
            "get_active_trip",
        )
        if not result.data:
            return None
        return self._map_to_trip(result.data[0])

    def set_trip_completed_if_active(self, trip_id: int, completed_at: datetime) -> Optional[Trip]:
        """
        Mark a trip completed only if it is still active.

        Returns:
            The completed trip, or None if no active row matched.
        """
        data = {
            "status": TripStatus.COMPLETED.value,
            "completed_at": completed_at.isoformat(),
        }
        result = self._execute(
            self._db.table(TRIPS_TABLE)
            .update(data)
            .eq("id", trip_id)
            .eq("status", TripStatus.ACTIVE.value),
            "set_trip_completed_if_active",
        )
        if not result.data:
            return None
        return self._map_to_trip(result.data[0])

    def list_trips(self, user_uid: str, status: TripStatus, limit: int = 50) -> list[Trip]:
        """
        List a user's trips with the given status.

        Active trips are ordered by start time, completed ones by
        completion time, newest first.
        """
        order_column = "completed_at" if status == TripStatus.COMPLETED else "started_at"
        result = self._execute(
            self._db.table(TRIPS_TABLE)
            .select("*")
            .eq("user_uid", user_uid)
            .eq("status", status.value)
            .order(order_column, desc=True)
            .limit(limit),
            "list_trips",
        )
        return [self._map_to_trip(row) for row in result.data]

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_trip(self, data: dict[str, Any]) -> Trip:
        """Map database row to Trip model."""
        fare = data.get("fare_paid")
        distance = data.get("distance_km")

        return Trip(
            id=int(data["id"]),
            user_uid=str(data["user_uid"]),
            from_location=data["from_location"],
            to_location=data["to_location"],
            route_name=data.get("route_name"),
            transit_type=data.get("transit_type"),
            distance_km=float(distance) if distance is not None else None,
            fare_paid=Decimal(str(fare)) if fare is not None else None,
            status=TripStatus(data["status"]),
            started_at=data["started_at"],
            completed_at=data.get("completed_at"),
        )


class InMemoryTripRepository(TripRepository):
    """
    Trip repository backed by a MemoryStore.

    For testing and development. Use TripRepository for production.
    """

    def __init__(self, store: Optional[MemoryStore] = None) -> None:
        super().__init__(db=None)  # type: ignore[arg-type]
        self._store = store or MemoryStore()

    def create_trip(self, request: StartTripRequest, started_at: datetime) -> Trip:
        with self._store.lock:
            trip_id = self._store.next_id(TRIPS_TABLE)
            row = {
                **request.model_dump(),
                "id": trip_id,
                "status": TripStatus.ACTIVE.value,
                "started_at": started_at,
                "completed_at": None,
            }
            self._store.user_trips[trip_id] = row
        return self._map_to_trip(row)

    def get_active_trip(self, trip_id: int) -> Optional[Trip]:
        row = self._store.user_trips.get(trip_id)
        if row is None or row["status"] != TripStatus.ACTIVE.value:
            return None
        return self._map_to_trip(row)

    def set_trip_completed_if_active(self, trip_id: int, completed_at: datetime) -> Optional[Trip]:
        with self._store.lock:
            row = self._store.user_trips.get(trip_id)
            if row is None or row["status"] != TripStatus.ACTIVE.value:
                return None
            row["status"] = TripStatus.COMPLETED.value
            row["completed_at"] = completed_at
            return self._map_to_trip(row)

    def list_trips(self, user_uid: str, status: TripStatus, limit: int = 50) -> list[Trip]:
        order_column = "completed_at" if status == TripStatus.COMPLETED else "started_at"
        rows = [
            row for row in self._store.user_trips.values()
            if row["user_uid"] == user_uid and row["status"] == status.value
        ]
        rows.sort(key=lambda r: (r[order_column] or datetime.min.replace(tzinfo=timezone.utc), r["id"]), reverse=True)
        return [self._map_to_trip(row) for row in rows[:limit]]
