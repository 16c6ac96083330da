"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

The storage backend is chosen by `Settings.storage_backend`: "supabase"
for deployments, "memory" for local development.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from shared.memory import MemoryStore
    from modules.accounts.interfaces import IAccountService, IAccountStore
    from modules.verification.interfaces import IVerificationService, IVerificationLedger
    from modules.trips.interfaces import ITripService, ITripStore


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._memory_store: "MemoryStore | None" = None
        self._account_repository: "IAccountStore | None" = None
        self._verification_repository: "IVerificationLedger | None" = None
        self._trip_repository: "ITripStore | None" = None
        self._account_service: "IAccountService | None" = None
        self._verification_service: "IVerificationService | None" = None
        self._trip_service: "ITripService | None" = None

    @property
    def uses_memory(self) -> bool:
        return self._settings.storage_backend == "memory"

    @property
    def memory_store(self) -> "MemoryStore":
        """Get the shared in-memory store."""
        if self._memory_store is None:
            from shared.memory import MemoryStore
            self._memory_store = MemoryStore()
        return self._memory_store

    @property
    def account_repository(self) -> "IAccountStore":
        """Get the account repository instance."""
        if self._account_repository is None:
            if self.uses_memory:
                from modules.accounts.repository import InMemoryAccountRepository
                self._account_repository = InMemoryAccountRepository(self.memory_store)
            else:
                from modules.accounts.repository import AccountRepository
                from shared.database import get_supabase_client
                self._account_repository = AccountRepository(get_supabase_client())
        return self._account_repository

    @property
    def verification_repository(self) -> "IVerificationLedger":
        """Get the verification ledger repository instance."""
        if self._verification_repository is None:
            if self.uses_memory:
                from modules.verification.repository import InMemoryVerificationRepository
                self._verification_repository = InMemoryVerificationRepository(self.memory_store)
            else:
                from modules.verification.repository import VerificationRepository
                from shared.database import get_supabase_client
                self._verification_repository = VerificationRepository(get_supabase_client())
        return self._verification_repository

    @property
    def trip_repository(self) -> "ITripStore":
        """Get the trip repository instance."""
        if self._trip_repository is None:
            if self.uses_memory:
                from modules.trips.repository import InMemoryTripRepository
                self._trip_repository = InMemoryTripRepository(self.memory_store)
            else:
                from modules.trips.repository import TripRepository
                from shared.database import get_supabase_client
                self._trip_repository = TripRepository(get_supabase_client())
        return self._trip_repository

    @property
    def accounts(self) -> "IAccountService":
        """Get the account service instance."""
        if self._account_service is None:
            from modules.accounts.service import AccountService
            self._account_service = AccountService(accounts=self.account_repository)
        return self._account_service

    @property
    def verification(self) -> "IVerificationService":
        """Get the verification service instance."""
        if self._verification_service is None:
            from modules.verification.service import VerificationService
            self._verification_service = VerificationService(
                accounts=self.account_repository,
                ledger=self.verification_repository,
                strict_reapprove=self._settings.strict_reapprove,
            )
        return self._verification_service

    @property
    def trips(self) -> "ITripService":
        """Get the trip service instance."""
        if self._trip_service is None:
            from modules.trips.service import TripService
            self._trip_service = TripService(
                trips=self.trip_repository,
                accounts=self.account_repository,
                reward_points=self._settings.trip_reward_points,
            )
        return self._trip_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._memory_store = None
        self._account_repository = None
        self._verification_repository = None
        self._trip_repository = None
        self._account_service = None
        self._verification_service = None
        self._trip_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_account_service() -> "IAccountService":
    """FastAPI dependency for account service."""
    return get_container().accounts


def get_verification_service() -> "IVerificationService":
    """FastAPI dependency for verification service."""
    return get_container().verification


def get_trip_service() -> "ITripService":
    """FastAPI dependency for trip service."""
    return get_container().trips
