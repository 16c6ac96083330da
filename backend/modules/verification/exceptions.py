"""
Verification module exceptions.
"""

from typing import Any

from shared.exceptions import (
    KommyutError,
    ValidationError,
    ConflictError,
    InternalError,
)


class VerificationError(KommyutError):
    """Base exception for verification-related errors."""

    pass


class InvalidVerificationActionError(VerificationError, ValidationError):
    """Raised when the action is not approve, reject or re-approve."""

    def __init__(self, action: Any):
        super().__init__(
            'Invalid action. Must be "approve", "reject", or "re-approve"',
            code="INVALID_VERIFICATION_ACTION",
            details={"action": str(action)},
        )


class VerificationNoteRequiredError(VerificationError, ValidationError):
    """Raised when reject or re-approve is sent without a note."""

    def __init__(self, action: str):
        super().__init__(
            f"A note is required to {action} an ID",
            code="VERIFICATION_NOTE_REQUIRED",
            details={"action": action},
        )


class ReapproveNotAllowedError(VerificationError, ConflictError):
    """Raised under strict re-approval when the last decision was not a rejection."""

    def __init__(self, uid: str, last_action: str | None):
        super().__init__(
            f"Cannot re-approve {uid}: the latest decision is not a rejection",
            code="REAPPROVE_NOT_ALLOWED",
            details={"uid": uid, "last_action": last_action},
        )


class LedgerAppendError(VerificationError, InternalError):
    """
    Raised when the account was updated but its ledger entry was not written.

    The details carry everything needed to append the entry by hand.
    """

    def __init__(self, uid: str, action: str, record: dict[str, Any], reason: str):
        super().__init__(
            f"Verification history not recorded for {uid} ({action}): {reason}",
            code="LEDGER_APPEND_FAILED",
            details={"uid": uid, "action": action, "record": record},
        )
