"""Tests for shared/repository.py."""

import httpx
import pytest
from unittest.mock import MagicMock

from shared.exceptions import StorageUnavailableError
from shared.repository import BaseRepository


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_init_stores_db_client(self):
        """Should store the database client in _db attribute."""
        mock_db = MagicMock()
        repo = BaseRepository(mock_db)
        assert repo._db is mock_db

    def test_execute_returns_response(self):
        query = MagicMock()
        query.execute.return_value.data = [{"uid": "rider-1"}]

        result = BaseRepository(MagicMock())._execute(query, "get_user_account")

        assert result.data == [{"uid": "rider-1"}]
        query.execute.assert_called_once()

    def test_execute_maps_timeout(self):
        query = MagicMock()
        query.execute.side_effect = httpx.ReadTimeout("timed out")

        with pytest.raises(StorageUnavailableError) as exc_info:
            BaseRepository(MagicMock())._execute(query, "get_active_trip")

        assert exc_info.value.operation == "get_active_trip"
        assert "timed out" in exc_info.value.message

    def test_execute_maps_connection_error(self):
        query = MagicMock()
        query.execute.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(StorageUnavailableError) as exc_info:
            BaseRepository(MagicMock())._execute(query, "list_trips")

        assert "connection refused" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_execute_propagates_other_errors(self):
        """Errors reported by the database itself are not transport failures."""
        query = MagicMock()
        query.execute.side_effect = ValueError("bad row")

        with pytest.raises(ValueError):
            BaseRepository(MagicMock())._execute(query, "create_trip")
