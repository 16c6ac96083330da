"""
Accounts module.

Owns the users table: sign-in upsert, lookups and point balances.

Public API:
- IAccountService: Interface for account operations
- IAccountStore: Storage contract used by other modules
- UserAccount: Stored account
- UpsertAccountRequest: Sign-in upsert payload
"""

from .interfaces import IAccountService, IAccountStore
from .models import UserAccount, UserType, UpsertAccountRequest
from .exceptions import AccountError, AccountNotFoundError

__all__ = [
    # Interfaces
    "IAccountService",
    "IAccountStore",
    # Models
    "UserAccount",
    "UserType",
    "UpsertAccountRequest",
    # Exceptions
    "AccountError",
    "AccountNotFoundError",
]
