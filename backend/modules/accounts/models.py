"""
Accounts module data models.

A UserAccount is the root entity: verification decisions and trips
reference it by uid.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import UserRole


class UserType(str, Enum):
    """Fare category. Every type except REGULAR needs a verified ID."""

    REGULAR = "regular"
    STUDENT = "student"
    SENIOR = "senior"
    PWD = "pwd"


class UserAccount(BaseModel):
    """A user account as stored in the users table."""

    uid: str = Field(..., description="Identity provider uid")
    email: Optional[str] = None
    display_name: Optional[str] = None
    photo_url: Optional[str] = None
    role: UserRole = Field(default=UserRole.USER, description="Dashboard role")
    birthday: Optional[date] = None
    user_type: UserType = Field(default=UserType.REGULAR, description="Fare category")
    id_verified: bool = Field(default=False, description="Whether the ID document was approved")
    id_document_url: Optional[str] = Field(None, description="Uploaded ID document")
    verification_note: Optional[str] = Field(None, description="Note from the last decision")
    points: int = Field(default=0, ge=0, description="Reward points balance")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UpsertAccountRequest(BaseModel):
    """
    Request to create or refresh an account on sign-in.

    Profile fields always overwrite. The remaining fields only overwrite
    the stored value when provided. Verification status is not accepted
    here; it only changes through a verification decision.
    """

    uid: str = Field(..., min_length=1, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    display_name: Optional[str] = Field(None, max_length=255)
    photo_url: Optional[str] = None
    role: Optional[UserRole] = None
    birthday: Optional[date] = None
    user_type: Optional[UserType] = None
    id_document_url: Optional[str] = None

    model_config = {"extra": "forbid"}
