"""
Verification module.

Handles ID review decisions and the append-only verification history.

Public API:
- IVerificationService: Interface for verification operations
- IVerificationLedger: Storage contract for the history ledger
- VerificationAction: approve / reject / re-approve
- VerificationRecord: Ledger entry
"""

from .interfaces import IVerificationService, IVerificationLedger
from .models import (
    VerificationAction,
    VerificationDecisionRequest,
    VerificationDecisionResponse,
    VerificationHistoryResponse,
    NewVerificationRecord,
    VerificationRecord,
    DEFAULT_NOTES,
)
from .exceptions import (
    VerificationError,
    InvalidVerificationActionError,
    VerificationNoteRequiredError,
    ReapproveNotAllowedError,
    LedgerAppendError,
)

__all__ = [
    # Interfaces
    "IVerificationService",
    "IVerificationLedger",
    # Models
    "VerificationAction",
    "VerificationDecisionRequest",
    "VerificationDecisionResponse",
    "VerificationHistoryResponse",
    "NewVerificationRecord",
    "VerificationRecord",
    "DEFAULT_NOTES",
    # Exceptions
    "VerificationError",
    "InvalidVerificationActionError",
    "VerificationNoteRequiredError",
    "ReapproveNotAllowedError",
    "LedgerAppendError",
]
