"""
Tests for account API endpoints.
"""

import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_account_service
from modules.accounts.service import AccountService

from tests.conftest import TEST_JWT_SECRET, create_test_token, seed_account


@pytest.fixture
def app(account_store):
    app = create_app()
    service = AccountService(accounts=account_store)
    app.dependency_overrides[get_account_service] = lambda: service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with patch("api.middleware.auth.get_settings") as mock_settings:
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        yield TestClient(app)


class TestUpsertAccount:
    """Tests for POST /api/users"""

    def test_upsert_own_account(self, client, auth_headers, test_user_id):
        response = client.post(
            "/api/users",
            json={"uid": test_user_id, "email": "test@example.com", "display_name": "Test"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["uid"] == test_user_id
        assert data["user_type"] == "regular"
        assert data["points"] == 0

    def test_cannot_upsert_other_account(self, client, auth_headers):
        response = client.post("/api/users", json={"uid": "someone-else"}, headers=auth_headers)
        assert response.status_code == 403

    def test_developer_can_upsert_any_account(self, client):
        token = create_test_token(user_id="dev-1", role="developer")
        response = client.post(
            "/api/users",
            json={"uid": "rider-9", "user_type": "student"},
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 200
        assert response.json()["user_type"] == "student"

    def test_unknown_field_is_400(self, client, auth_headers, test_user_id):
        response = client.post(
            "/api/users",
            json={"uid": test_user_id, "points": 1000},
            headers=auth_headers,
        )
        assert response.status_code == 400


class TestGetAccount:
    """Tests for GET /api/users/{uid}"""

    def test_get_own_account(self, client, auth_headers, memory_store, test_user_id):
        seed_account(memory_store, test_user_id)

        response = client.get(f"/api/users/{test_user_id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["uid"] == test_user_id

    def test_manager_gets_any_account(self, client, manager_headers, memory_store):
        seed_account(memory_store, "rider-1")
        response = client.get("/api/users/rider-1", headers=manager_headers)
        assert response.status_code == 200

    def test_missing_is_404(self, client, manager_headers):
        response = client.get("/api/users/ghost", headers=manager_headers)
        assert response.status_code == 404

    def test_other_user_forbidden(self, client, auth_headers, memory_store):
        seed_account(memory_store, "rider-1")
        response = client.get("/api/users/rider-1", headers=auth_headers)
        assert response.status_code == 403


class TestUpsertCannotBypassReview:
    """Verification status and roles are not writable through POST /api/users"""

    def test_self_verification_is_refused(self, client, auth_headers, memory_store, ledger, test_user_id):
        response = client.post(
            "/api/users",
            json={"uid": test_user_id, "user_type": "student", "id_verified": True},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert test_user_id not in memory_store.users
        assert ledger.list_verification_records() == []

    def test_resubmission_resets_verification(self, client, auth_headers, memory_store, ledger, test_user_id):
        seed_account(memory_store, test_user_id, user_type="student", id_verified=True)

        response = client.post(
            "/api/users",
            json={"uid": test_user_id, "user_type": "senior"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["user_type"] == "senior"
        assert response.json()["id_verified"] is False
        assert ledger.list_verification_records() == []

    def test_user_cannot_grant_self_role(self, client, auth_headers, memory_store, test_user_id):
        response = client.post(
            "/api/users",
            json={"uid": test_user_id, "role": "manager"},
            headers=auth_headers,
        )

        assert response.status_code == 403
        assert test_user_id not in memory_store.users

    def test_developer_can_set_role(self, client):
        token = create_test_token(user_id="dev-1", role="developer")
        response = client.post(
            "/api/users",
            json={"uid": "staff-1", "role": "manager"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 200
        assert response.json()["role"] == "manager"
