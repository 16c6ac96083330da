"""Tests for the account repositories."""

import pytest
from unittest.mock import MagicMock
from datetime import datetime, timezone, timedelta

from modules.accounts.repository import AccountRepository, USERS_TABLE
from modules.accounts.models import UserType
from shared.models import UserRole

from tests.conftest import seed_account


def create_account_row(uid: str = "rider-1", **overrides) -> dict:
    now = datetime.now(timezone.utc).isoformat()
    row = {
        "uid": uid,
        "email": f"{uid}@example.com",
        "display_name": "Rider",
        "photo_url": None,
        "role": "user",
        "birthday": "2001-02-03",
        "user_type": "student",
        "id_verified": False,
        "id_document_url": "https://storage.example.com/ids/rider-1.jpg",
        "verification_note": None,
        "points": 30,
        "created_at": now,
        "updated_at": now,
    }
    row.update(overrides)
    return row


class TestAccountRepository:

    def test_get_user_account_maps_row(self):
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = [
            create_account_row()
        ]
        repo = AccountRepository(mock_db)

        account = repo.get_user_account("rider-1")

        mock_db.table.assert_called_with(USERS_TABLE)
        mock_db.table.return_value.select.return_value.eq.assert_called_with("uid", "rider-1")
        assert account.user_type == UserType.STUDENT
        assert account.points == 30
        assert account.birthday.year == 2001

    def test_get_user_account_missing(self):
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = []

        assert AccountRepository(mock_db).get_user_account("ghost") is None

    def test_upsert_conflicts_on_uid(self):
        mock_db = MagicMock()
        mock_db.table.return_value.upsert.return_value.execute.return_value.data = [
            create_account_row(role=None, points=None)
        ]
        repo = AccountRepository(mock_db)

        account = repo.upsert_user_account({"uid": "rider-1", "email": "rider-1@example.com"})

        data = mock_db.table.return_value.upsert.call_args.args[0]
        assert data["uid"] == "rider-1"
        assert "updated_at" in data
        assert mock_db.table.return_value.upsert.call_args.kwargs == {"on_conflict": "uid"}
        assert account.role == UserRole.USER
        assert account.points == 0

    def test_update_returns_none_when_no_row_matched(self):
        mock_db = MagicMock()
        mock_db.table.return_value.update.return_value.eq.return_value.execute.return_value.data = []

        result = AccountRepository(mock_db).update_user_account("ghost", {"id_verified": True})

        assert result is None

    def test_increment_points_uses_rpc(self):
        mock_db = MagicMock()
        mock_db.rpc.return_value.execute.return_value.data = 40

        balance = AccountRepository(mock_db).increment_points("rider-1", 10)

        mock_db.rpc.assert_called_once_with("increment_user_points", {"p_uid": "rider-1", "p_delta": 10})
        assert balance == 40

    def test_increment_points_missing_account(self):
        mock_db = MagicMock()
        mock_db.rpc.return_value.execute.return_value.data = None

        assert AccountRepository(mock_db).increment_points("ghost", 10) is None

    def test_list_pending_verification_filters(self):
        mock_db = MagicMock()
        query = mock_db.table.return_value.select.return_value
        chain = query.not_.is_.return_value.eq.return_value.neq.return_value.order.return_value
        chain.execute.return_value.data = [create_account_row()]

        accounts = AccountRepository(mock_db).list_pending_verification()

        query.not_.is_.assert_called_once_with("id_document_url", "null")
        query.not_.is_.return_value.eq.assert_called_once_with("id_verified", False)
        query.not_.is_.return_value.eq.return_value.neq.assert_called_once_with("user_type", "regular")
        assert [a.uid for a in accounts] == ["rider-1"]


class TestInMemoryAccountRepository:

    def test_update_and_get(self, account_store, memory_store):
        seed_account(memory_store, "rider-1")

        updated = account_store.update_user_account("rider-1", {"id_verified": True})

        assert updated.id_verified is True
        assert account_store.get_user_account("rider-1").id_verified is True

    def test_update_missing(self, account_store):
        assert account_store.update_user_account("ghost", {"id_verified": True}) is None

    def test_increment_points(self, account_store, memory_store):
        seed_account(memory_store, "rider-1", points=5)

        assert account_store.increment_points("rider-1", 10) == 15
        assert account_store.increment_points("ghost", 10) is None

    def test_list_pending_verification(self, account_store, memory_store):
        now = datetime.now(timezone.utc)
        seed_account(memory_store, "older", updated_at=now - timedelta(hours=1))
        seed_account(memory_store, "newer", updated_at=now)
        seed_account(memory_store, "verified", id_verified=True)
        seed_account(memory_store, "regular", user_type="regular")
        seed_account(memory_store, "no-document", id_document_url=None)

        pending = account_store.list_pending_verification()

        assert [a.uid for a in pending] == ["newer", "older"]
