"""
Verification module interface.

The API layer depends on IVerificationService for all ID review
operations. IVerificationLedger is the storage contract for the
append-only verification history.
"""

from typing import Protocol, Optional, runtime_checkable

from modules.accounts.models import UserAccount
from .models import (
    NewVerificationRecord,
    VerificationAction,
    VerificationHistoryResponse,
    VerificationRecord,
)


@runtime_checkable
class IVerificationLedger(Protocol):
    """
    Append-only storage for verification decisions.

    The contract has no update or delete operations.
    """

    def append_verification_record(self, record: NewVerificationRecord) -> VerificationRecord:
        """Append a ledger entry and return it with its id and timestamp."""
        ...

    def get_latest_verification_record(self, uid: str) -> Optional[VerificationRecord]:
        """Most recent ledger entry for an account, or None."""
        ...

    def list_verification_records(self, limit: int = 100, offset: int = 0) -> list[VerificationRecord]:
        """Ledger entries for all accounts, newest first."""
        ...


@runtime_checkable
class IVerificationService(Protocol):
    """Interface for ID verification operations."""

    async def decide(
        self,
        uid: str,
        action: VerificationAction | str,
        note: Optional[str] = None,
    ) -> UserAccount:
        """
        Apply a verification decision to an account.

        Updates the account and appends exactly one ledger entry whose
        snapshot fields hold the account's pre-decision values.

        Args:
            uid: Account to decide on
            action: approve, reject or re-approve
            note: Reviewer note; required for reject and re-approve

        Returns:
            The account after the update

        Raises:
            InvalidVerificationActionError: If action is unknown
            VerificationNoteRequiredError: If a required note is missing
            AccountNotFoundError: If uid does not exist
            ReapproveNotAllowedError: Under strict re-approval only
            LedgerAppendError: If the account was updated but the
                ledger entry could not be written
        """
        ...

    async def list_pending(self) -> list[UserAccount]:
        """Accounts with a submitted ID awaiting review."""
        ...

    async def list_history(self, limit: int = 100, offset: int = 0) -> VerificationHistoryResponse:
        """Page through the verification ledger, newest first."""
        ...
