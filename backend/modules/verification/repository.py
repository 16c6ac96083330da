"""
Verification ledger repository.

Encapsulates Supabase queries for the verification_history table. The
table is append-only: this repository exposes inserts and reads only.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from supabase import Client

from shared.memory import MemoryStore
from shared.repository import BaseRepository
from .models import NewVerificationRecord, VerificationRecord


HISTORY_TABLE = "verification_history"


class VerificationRepository(BaseRepository[VerificationRecord]):
    """Repository for the verification history ledger."""

    def append_verification_record(self, record: NewVerificationRecord) -> VerificationRecord:
        """
        Append a ledger entry.

        Args:
            record: The entry to write. `id` and `verified_at` are
                assigned by the database.

        Returns:
            The stored VerificationRecord.
        """
        data = record.model_dump(mode="json")
        result = self._execute(
            self._db.table(HISTORY_TABLE).insert(data),
            "append_verification_record",
        )
        return self._map_to_record(result.data[0])

    def get_latest_verification_record(self, uid: str) -> Optional[VerificationRecord]:
        """Get the most recent ledger entry for an account."""
        result = self._execute(
            self._db.table(HISTORY_TABLE)
            .select("*")
            .eq("uid", uid)
            .order("id", desc=True)
            .limit(1),
            "get_latest_verification_record",
        )
        if not result.data:
            return None
        return self._map_to_record(result.data[0])

    def list_verification_records(self, limit: int = 100, offset: int = 0) -> list[VerificationRecord]:
        """
        List ledger entries, newest first.

        Ordered by id rather than verified_at so entries written in the
        same instant keep their append order.
        """
        result = self._execute(
            self._db.table(HISTORY_TABLE)
            .select("*")
            .order("id", desc=True)
            .range(offset, offset + limit - 1),
            "list_verification_records",
        )
        return [self._map_to_record(row) for row in result.data]

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_record(self, data: dict[str, Any]) -> VerificationRecord:
        """Map database row to VerificationRecord model."""
        return VerificationRecord(
            id=int(data["id"]),
            uid=str(data["uid"]),
            email=data.get("email"),
            display_name=data.get("display_name"),
            user_type=data["user_type"],
            id_document_url=data.get("id_document_url"),
            action=data["action"],
            verified=bool(data["verified"]),
            note=data.get("note") or "",
            verified_at=data["verified_at"],
        )


class InMemoryVerificationRepository(VerificationRepository):
    """
    Ledger backed by a MemoryStore.

    For testing and development. Use VerificationRepository for production.
    """

    def __init__(self, store: Optional[MemoryStore] = None) -> None:
        super().__init__(db=None)  # type: ignore[arg-type]
        self._store = store or MemoryStore()

    def append_verification_record(self, record: NewVerificationRecord) -> VerificationRecord:
        with self._store.lock:
            row = {
                **record.model_dump(mode="json"),
                "id": self._store.next_id(HISTORY_TABLE),
                "verified_at": datetime.now(timezone.utc),
            }
            self._store.verification_history.append(row)
        return self._map_to_record(row)

    def get_latest_verification_record(self, uid: str) -> Optional[VerificationRecord]:
        rows = [r for r in self._store.verification_history if r["uid"] == uid]
        if not rows:
            return None
        return self._map_to_record(max(rows, key=lambda r: r["id"]))

    def list_verification_records(self, limit: int = 100, offset: int = 0) -> list[VerificationRecord]:
        rows = sorted(self._store.verification_history, key=lambda r: r["id"], reverse=True)
        return [self._map_to_record(row) for row in rows[offset:offset + limit]]
