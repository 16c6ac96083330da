"""
Verification module data models.

A decision changes the account's verification status and appends one
VerificationRecord to the ledger.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from modules.accounts.models import UserAccount, UserType


class VerificationAction(str, Enum):
    """Decision an administrator can take on a submitted ID."""

    APPROVE = "approve"
    REJECT = "reject"
    REAPPROVE = "re-approve"  # Corrects an earlier rejection

    @property
    def verified(self) -> bool:
        """Outcome recorded in the ledger for this action."""
        return self is not VerificationAction.REJECT

    @property
    def requires_note(self) -> bool:
        return self is not VerificationAction.APPROVE


# Stored when the caller gives no note
DEFAULT_NOTES: dict[VerificationAction, str] = {
    VerificationAction.APPROVE: "ID verified",
    VerificationAction.REJECT: "ID rejected",
    VerificationAction.REAPPROVE: "ID re-approved",
}

RESULT_MESSAGES: dict[VerificationAction, str] = {
    VerificationAction.APPROVE: "ID verified successfully",
    VerificationAction.REJECT: "ID rejected, user reset to regular",
    VerificationAction.REAPPROVE: "ID re-approved successfully",
}


class VerificationDecisionRequest(BaseModel):
    """Body of PUT /users/{uid}/verify."""

    action: VerificationAction = Field(..., description="approve, reject or re-approve")
    note: Optional[str] = Field(None, max_length=2000, description="Reviewer note")

    model_config = {"extra": "forbid"}

    @field_validator("note")
    @classmethod
    def strip_note(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None

    @model_validator(mode="after")
    def check_note_required(self) -> "VerificationDecisionRequest":
        if self.action.requires_note and not self.note:
            raise ValueError(f"A note is required to {self.action.value} an ID")
        return self


class VerificationDecisionResponse(BaseModel):
    """Result of a verification decision."""

    message: str
    user: UserAccount


class NewVerificationRecord(BaseModel):
    """
    Ledger entry about to be appended.

    Snapshot fields hold the account's values from before the decision.
    """

    uid: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    user_type: UserType
    id_document_url: Optional[str] = None
    action: VerificationAction
    verified: bool
    note: str


class VerificationRecord(NewVerificationRecord):
    """An appended ledger entry."""

    id: int = Field(..., description="Monotonic ledger sequence id")
    verified_at: datetime


class VerificationHistoryResponse(BaseModel):
    """Page of ledger entries, newest first."""

    records: list[VerificationRecord]
    limit: int
    offset: int
