"""
Verification service implementation.

Applies ID review decisions to accounts and records each one in the
append-only verification ledger.

Decision transitions:
    approve     -> id_verified=True,  user_type unchanged
    re-approve  -> id_verified=True,  user_type unchanged
    reject      -> id_verified=False, user_type="regular"

The storage backend has no client-side transaction, so the account
update runs first and the ledger append second. A failed append after
a successful update raises LedgerAppendError instead of being dropped.
"""

import logging
from typing import Any, Optional

from modules.accounts.interfaces import IAccountStore
from modules.accounts.models import UserAccount, UserType
from modules.accounts.exceptions import AccountNotFoundError

from .interfaces import IVerificationLedger, IVerificationService
from .models import (
    DEFAULT_NOTES,
    NewVerificationRecord,
    VerificationAction,
    VerificationHistoryResponse,
)
from .exceptions import (
    InvalidVerificationActionError,
    LedgerAppendError,
    ReapproveNotAllowedError,
    VerificationNoteRequiredError,
)

logger = logging.getLogger(__name__)


class VerificationService(IVerificationService):
    """
    Verification workflow over an account store and a ledger.

    Implements IVerificationService protocol. Concurrent decisions on the
    same uid are last-write-wins; each still appends its own ledger entry.
    """

    def __init__(
        self,
        accounts: IAccountStore,
        ledger: IVerificationLedger,
        strict_reapprove: bool = False,
    ):
        """
        Initialize the verification service.

        Args:
            accounts: Identity store holding the accounts
            ledger: Verification history ledger
            strict_reapprove: Only allow re-approve when the account's most
                recent decision was a rejection.
        """
        self._accounts = accounts
        self._ledger = ledger
        self._strict_reapprove = strict_reapprove

    async def decide(
        self,
        uid: str,
        action: VerificationAction | str,
        note: Optional[str] = None,
    ) -> UserAccount:
        """Apply a verification decision to an account."""
        action = self._parse_action(action)
        note = self._resolve_note(action, note)

        account = self._accounts.get_user_account(uid)
        if account is None:
            raise AccountNotFoundError(uid)

        if action == VerificationAction.REAPPROVE and self._strict_reapprove:
            self._check_reapprove_allowed(uid)

        # Snapshot before the update so history shows what was reviewed
        record = NewVerificationRecord(
            uid=uid,
            email=account.email,
            display_name=account.display_name,
            user_type=account.user_type,
            id_document_url=account.id_document_url,
            action=action,
            verified=action.verified,
            note=note,
        )

        updated = self._accounts.update_user_account(uid, self._transition(action, note))
        if updated is None:
            raise AccountNotFoundError(uid)

        try:
            self._ledger.append_verification_record(record)
        except Exception as e:
            logger.error(
                f"Account {uid} updated by '{action.value}' but ledger append failed: {e}"
            )
            raise LedgerAppendError(
                uid=uid,
                action=action.value,
                record=record.model_dump(mode="json"),
                reason=str(e),
            ) from e

        logger.info(
            f"Verification decision '{action.value}' applied to {uid} "
            f"(id_verified={updated.id_verified}, user_type={updated.user_type.value})"
        )
        return updated

    async def list_pending(self) -> list[UserAccount]:
        """List accounts awaiting ID review."""
        return self._accounts.list_pending_verification()

    async def list_history(self, limit: int = 100, offset: int = 0) -> VerificationHistoryResponse:
        """Page through the ledger, newest first."""
        records = self._ledger.list_verification_records(limit=limit, offset=offset)
        return VerificationHistoryResponse(records=records, limit=limit, offset=offset)

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _parse_action(action: VerificationAction | str) -> VerificationAction:
        try:
            return VerificationAction(action)
        except ValueError:
            raise InvalidVerificationActionError(action)

    @staticmethod
    def _resolve_note(action: VerificationAction, note: Optional[str]) -> str:
        """Return the note to store, enforcing it where required."""
        note = (note or "").strip()
        if note:
            return note
        if action.requires_note:
            raise VerificationNoteRequiredError(action.value)
        return DEFAULT_NOTES[action]

    @staticmethod
    def _transition(action: VerificationAction, note: str) -> dict[str, Any]:
        """Account fields written by a decision."""
        if action == VerificationAction.REJECT:
            return {
                "id_verified": False,
                "user_type": UserType.REGULAR.value,
                "verification_note": note,
            }
        return {
            "id_verified": True,
            "verification_note": note,
        }

    def _check_reapprove_allowed(self, uid: str) -> None:
        latest = self._ledger.get_latest_verification_record(uid)
        if latest is None or latest.action != VerificationAction.REJECT:
            raise ReapproveNotAllowedError(uid, latest.action.value if latest else None)
