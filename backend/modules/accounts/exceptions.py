"""
Accounts module exceptions.
"""

from shared.exceptions import KommyutError, NotFoundError


class AccountError(KommyutError):
    """Base exception for account-related errors."""

    pass


class AccountNotFoundError(AccountError, NotFoundError):
    """Raised when no account exists for a uid."""

    def __init__(self, uid: str):
        super().__init__(
            f"User not found: {uid}",
            code="USER_NOT_FOUND",
            details={"uid": uid},
        )
