"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
import jwt  # PyJWT

from api.dependencies import reset_container
from shared.memory import MemoryStore
from modules.accounts.repository import InMemoryAccountRepository
from modules.verification.repository import InMemoryVerificationRepository
from modules.trips.repository import InMemoryTripRepository


# Test JWT secret (only for testing - matches test_auth.py)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    role: Optional[str] = "user",
    expired: bool = False,
    email_verified: bool = True,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        role: Dashboard role stored in app_metadata (None omits it)
        expired: If True, creates an expired token
        email_verified: Whether the email should be marked as verified

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "email_confirmed_at": now.isoformat() if email_verified else None,
        "aud": "authenticated",
        "role": "authenticated",
        "app_metadata": {"role": role} if role else {},
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


def seed_account(store: MemoryStore, uid: str = "rider-1", **fields) -> dict:
    """Insert a user row directly into a memory store."""
    now = datetime.now(timezone.utc)
    row = {
        "uid": uid,
        "email": f"{uid}@example.com",
        "display_name": uid.title(),
        "photo_url": None,
        "role": "user",
        "birthday": None,
        "user_type": "student",
        "id_verified": False,
        "id_document_url": f"https://storage.example.com/ids/{uid}.jpg",
        "verification_note": None,
        "points": 0,
        "created_at": now,
        "updated_at": now,
    }
    row.update(fields)
    store.users[uid] = row
    return row


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def account_store(memory_store: MemoryStore) -> InMemoryAccountRepository:
    return InMemoryAccountRepository(memory_store)


@pytest.fixture
def ledger(memory_store: MemoryStore) -> InMemoryVerificationRepository:
    return InMemoryVerificationRepository(memory_store)


@pytest.fixture
def trip_store(memory_store: MemoryStore) -> InMemoryTripRepository:
    return InMemoryTripRepository(memory_store)


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def manager_headers() -> dict[str, str]:
    """Authorization headers for a manager."""
    token = create_test_token(user_id="manager-1", email="manager@example.com", role="manager")
    return {"Authorization": f"Bearer {token}"}
