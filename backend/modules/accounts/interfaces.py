"""
Accounts module interface.

IAccountStore is the identity store contract the verification and trip
workflows depend on. IAccountService is what the API layer calls.
"""

from typing import Any, Protocol, Optional, runtime_checkable

from .models import UserAccount, UpsertAccountRequest


@runtime_checkable
class IAccountStore(Protocol):
    """
    Storage contract for user accounts.

    Implementations map storage failures to StorageUnavailableError.
    """

    def get_user_account(self, uid: str) -> Optional[UserAccount]:
        """Return the account for `uid`, or None if it does not exist."""
        ...

    def upsert_user_account(self, fields: dict[str, Any]) -> UserAccount:
        """
        Insert the account or update the provided columns of an existing one.

        Args:
            fields: Column values; must include "uid". Columns absent from
                the dict keep their stored (or default) value.
        """
        ...

    def update_user_account(self, uid: str, fields: dict[str, Any]) -> Optional[UserAccount]:
        """Update columns of an existing account; None if it does not exist."""
        ...

    def increment_points(self, uid: str, delta: int) -> Optional[int]:
        """
        Atomically add `delta` to the account's points.

        Returns:
            The new balance, or None if the account does not exist.
        """
        ...

    def list_pending_verification(self) -> list[UserAccount]:
        """
        Accounts with a submitted document awaiting review.

        Pending means: a document is on file, the ID is not verified and
        the account claims a discount user type. Most recently updated first.
        """
        ...


@runtime_checkable
class IAccountService(Protocol):
    """Interface for account operations exposed to the API layer."""

    async def upsert_account(self, request: UpsertAccountRequest) -> UserAccount:
        """
        Create the account on first sign-in, or refresh its profile.

        Returns:
            The stored account after the upsert.
        """
        ...

    async def get_account(self, uid: str) -> UserAccount:
        """
        Get an account by uid.

        Raises:
            AccountNotFoundError: If no account exists for `uid`.
        """
        ...
