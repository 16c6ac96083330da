"""
Tests for shared models.
"""

import pytest
from datetime import datetime, timezone
from pydantic import ValidationError

from shared.models import AuthenticatedUser, UserRole, ROLE_HIERARCHY


class TestUserRole:

    def test_hierarchy_order(self):
        ranks = [role.rank for role in (UserRole.USER, UserRole.MANAGER, UserRole.CEO, UserRole.DEVELOPER)]
        assert ranks == sorted(ranks)
        assert len(ROLE_HIERARCHY) == len(UserRole)

    @pytest.mark.parametrize(
        "role,required,expected",
        [
            (UserRole.USER, UserRole.USER, True),
            (UserRole.USER, UserRole.MANAGER, False),
            (UserRole.MANAGER, UserRole.MANAGER, True),
            (UserRole.CEO, UserRole.MANAGER, True),
            (UserRole.DEVELOPER, UserRole.CEO, True),
            (UserRole.CEO, UserRole.DEVELOPER, False),
        ],
    )
    def test_satisfies(self, role, required, expected):
        assert role.satisfies(required) is expected


class TestAuthenticatedUser:
    """Tests for the AuthenticatedUser model in shared."""

    def test_default_values(self):
        user = AuthenticatedUser(id="user-123", email="test@example.com")
        assert user.email_verified is False
        assert user.role == UserRole.USER
        assert user.last_sign_in is None

    def test_all_fields(self):
        now = datetime.now(timezone.utc)
        user = AuthenticatedUser(
            id="user-123",
            email="test@example.com",
            email_verified=True,
            last_sign_in=now,
            role="manager",
        )
        assert user.role == UserRole.MANAGER
        assert user.last_sign_in == now

    def test_requires_id(self):
        with pytest.raises(ValidationError):
            AuthenticatedUser(email="test@example.com")

    def test_rejects_unknown_role(self):
        with pytest.raises(ValidationError):
            AuthenticatedUser(id="user-123", role="admin")

    def test_is_frozen(self):
        user = AuthenticatedUser(id="user-123")
        with pytest.raises(ValidationError):
            user.role = UserRole.CEO

    def test_ignores_extra_fields(self):
        user = AuthenticatedUser(id="user-123", tier="pro")
        assert not hasattr(user, "tier")
