"""
Accounts service implementation.

Creates accounts on first sign-in and serves account lookups.
"""

import logging
from typing import Any

from .interfaces import IAccountService, IAccountStore
from .models import UserAccount, UpsertAccountRequest
from .exceptions import AccountNotFoundError

logger = logging.getLogger(__name__)

# Always written on sign-in, even when null
PROFILE_FIELDS = ("email", "display_name", "photo_url")

# Only written when the caller provides a value
OPTIONAL_FIELDS = ("role", "birthday", "user_type", "id_document_url")

# Changing any of these sends the account back to ID review
REVIEWED_FIELDS = ("user_type", "id_document_url")


class AccountService(IAccountService):
    """
    Account service over an IAccountStore.

    Implements IAccountService protocol.
    """

    def __init__(self, accounts: IAccountStore):
        self._accounts = accounts

    async def upsert_account(self, request: UpsertAccountRequest) -> UserAccount:
        """Create or refresh an account."""
        data = request.model_dump(mode="json")
        fields: dict[str, Any] = {"uid": request.uid}

        for name in PROFILE_FIELDS:
            fields[name] = data[name]

        for name in OPTIONAL_FIELDS:
            if data[name] is not None:
                fields[name] = data[name]

        existing = self._accounts.get_user_account(request.uid)
        if existing is not None and existing.id_verified and self._resubmitted(existing, fields):
            fields["id_verified"] = False
            logger.info(f"Account {request.uid} resubmitted for ID review")

        account = self._accounts.upsert_user_account(fields)
        logger.info(f"Upserted account {account.uid}")
        return account

    async def get_account(self, uid: str) -> UserAccount:
        """Get an account by uid."""
        account = self._accounts.get_user_account(uid)
        if account is None:
            raise AccountNotFoundError(uid)
        return account

    @staticmethod
    def _resubmitted(existing: UserAccount, fields: dict[str, Any]) -> bool:
        stored = existing.model_dump(mode="json")
        return any(
            name in fields and fields[name] != stored[name]
            for name in REVIEWED_FIELDS
        )
