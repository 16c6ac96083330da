"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

from typing import TypeVar, Generic, Any

import httpx
from supabase import Client

from .exceptions import StorageUnavailableError


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - Transport error mapping via self._execute()

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class TripRepository(BaseRepository[Trip]):
            def get_active_trip(self, trip_id: int) -> Optional[Trip]:
                result = self._execute(
                    self._db.table("user_trips").select("*").eq("id", trip_id),
                    "get_active_trip",
                )
                if not result.data:
                    return None
                return self._map_to_trip(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, query: Any, operation: str) -> Any:
        """
        Execute a PostgREST query, mapping transport failures.

        Args:
            query: A built query (table or rpc request builder).
            operation: Name of the repository operation, for error details.

        Returns:
            The API response with `.data` populated.

        Raises:
            StorageUnavailableError: If the request timed out or the
                storage backend could not be reached.
        """
        try:
            return query.execute()
        except httpx.TimeoutException as e:
            raise StorageUnavailableError(operation, "request timed out") from e
        except httpx.TransportError as e:
            raise StorageUnavailableError(operation, str(e) or "connection failed") from e
