"""
Account repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
Point increments go through the `increment_user_points` SQL function so
the read-modify-write happens inside Postgres.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from supabase import Client

from shared.memory import MemoryStore
from shared.repository import BaseRepository
from .models import UserAccount, UserType


USERS_TABLE = "users"

# Columns filled by the database when a row is first inserted
ACCOUNT_DEFAULTS: dict[str, Any] = {
    "role": "user",
    "user_type": UserType.REGULAR.value,
    "id_verified": False,
    "id_document_url": None,
    "verification_note": None,
    "birthday": None,
    "points": 0,
}


class AccountRepository(BaseRepository[UserAccount]):
    """
    Repository for user account data access.

    Note: This repository does NOT perform authorization checks.
    The API layer is responsible for role gating.
    """

    def get_user_account(self, uid: str) -> Optional[UserAccount]:
        """
        Get an account by uid.

        Args:
            uid: The identity provider uid.

        Returns:
            UserAccount, or None if not found.
        """
        result = self._execute(
            self._db.table(USERS_TABLE).select("*").eq("uid", uid),
            "get_user_account",
        )
        if not result.data:
            return None
        return self._map_to_account(result.data[0])

    def upsert_user_account(self, fields: dict[str, Any]) -> UserAccount:
        """
        Insert or update an account keyed by uid.

        Only the columns present in `fields` are written on conflict,
        so omitted columns keep their stored values.
        """
        data = {**fields, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = self._execute(
            self._db.table(USERS_TABLE).upsert(data, on_conflict="uid"),
            "upsert_user_account",
        )
        return self._map_to_account(result.data[0])

    def update_user_account(self, uid: str, fields: dict[str, Any]) -> Optional[UserAccount]:
        """
        Update columns of an existing account.

        Returns:
            The updated account, or None if no row matched.
        """
        data = {**fields, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = self._execute(
            self._db.table(USERS_TABLE).update(data).eq("uid", uid),
            "update_user_account",
        )
        if not result.data:
            return None
        return self._map_to_account(result.data[0])

    def increment_points(self, uid: str, delta: int) -> Optional[int]:
        """
        Add `delta` points to an account.

        Returns:
            The new balance, or None if the account does not exist.
        """
        result = self._execute(
            self._db.rpc("increment_user_points", {"p_uid": uid, "p_delta": delta}),
            "increment_points",
        )
        if result.data is None:
            return None
        return int(result.data)

    def list_pending_verification(self) -> list[UserAccount]:
        """List accounts with a submitted document awaiting review."""
        result = self._execute(
            self._db.table(USERS_TABLE)
            .select("*")
            .not_.is_("id_document_url", "null")
            .eq("id_verified", False)
            .neq("user_type", UserType.REGULAR.value)
            .order("updated_at", desc=True),
            "list_pending_verification",
        )
        return [self._map_to_account(row) for row in result.data]

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_account(self, data: dict[str, Any]) -> UserAccount:
        """Map database row to UserAccount model."""
        return UserAccount(
            uid=str(data["uid"]),
            email=data.get("email"),
            display_name=data.get("display_name"),
            photo_url=data.get("photo_url"),
            role=data.get("role") or "user",
            birthday=data.get("birthday"),
            user_type=data.get("user_type") or UserType.REGULAR.value,
            id_verified=bool(data.get("id_verified")),
            id_document_url=data.get("id_document_url"),
            verification_note=data.get("verification_note"),
            points=data.get("points") or 0,
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )


class InMemoryAccountRepository(AccountRepository):
    """
    Account repository backed by a MemoryStore.

    For testing and development. Use AccountRepository for production.
    """

    def __init__(self, store: Optional[MemoryStore] = None) -> None:
        super().__init__(db=None)  # type: ignore[arg-type]
        self._store = store or MemoryStore()

    def get_user_account(self, uid: str) -> Optional[UserAccount]:
        row = self._store.users.get(uid)
        return self._map_to_account(row) if row else None

    def upsert_user_account(self, fields: dict[str, Any]) -> UserAccount:
        now = datetime.now(timezone.utc)
        uid = fields["uid"]
        with self._store.lock:
            row = self._store.users.get(uid)
            if row is None:
                row = {**ACCOUNT_DEFAULTS, "created_at": now}
                self._store.users[uid] = row
            row.update(fields)
            row["updated_at"] = now
            return self._map_to_account(row)

    def update_user_account(self, uid: str, fields: dict[str, Any]) -> Optional[UserAccount]:
        with self._store.lock:
            row = self._store.users.get(uid)
            if row is None:
                return None
            row.update(fields)
            row["updated_at"] = datetime.now(timezone.utc)
            return self._map_to_account(row)

    def increment_points(self, uid: str, delta: int) -> Optional[int]:
        with self._store.lock:
            row = self._store.users.get(uid)
            if row is None:
                return None
            row["points"] = (row.get("points") or 0) + delta
            return row["points"]

    def list_pending_verification(self) -> list[UserAccount]:
        rows = [
            row for row in self._store.users.values()
            if row.get("id_document_url") is not None
            and not row.get("id_verified")
            and row.get("user_type") != UserType.REGULAR.value
        ]
        rows.sort(key=lambda r: r["updated_at"], reverse=True)
        return [self._map_to_account(row) for row in rows]
