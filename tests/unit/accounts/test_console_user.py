"""
Unit tests for ConsoleUser domain entity.
"""

import pytest

from accounts.domain.user import ConsoleUser, Role


class TestConsoleUser:
    """Tests for ConsoleUser domain entity."""

    def test_create_user(self):
        """Test creating a console user."""
        user = ConsoleUser.create(user_id=7, username="alice", org_id=3, roles=[Role.ORG_ADMIN])

        assert user.id == 7
        assert user.username == "alice"
        assert user.org_id == 3
        assert user.roles == frozenset({Role.ORG_ADMIN})

    def test_organization_required(self):
        """Test users must belong to an organization."""
        with pytest.raises(ValueError, match="Organization is required"):
            ConsoleUser.create(user_id=7, username="alice", org_id=0)

    def test_org_admin_manages_activation_keys(self):
        user = ConsoleUser.create(user_id=1, username="a", org_id=1, roles=[Role.ORG_ADMIN])

        assert user.is_org_admin
        assert user.can_manage_activation_keys()

    def test_activation_key_admin_manages_activation_keys(self):
        user = ConsoleUser.create(
            user_id=1, username="a", org_id=1, roles=[Role.ACTIVATION_KEY_ADMIN]
        )

        assert not user.is_org_admin
        assert user.has_role(Role.ACTIVATION_KEY_ADMIN)
        assert user.can_manage_activation_keys()

    def test_user_without_roles_cannot_manage_activation_keys(self):
        user = ConsoleUser.create(user_id=1, username="a", org_id=1)

        assert not user.can_manage_activation_keys()

    def test_role_string(self):
        assert str(Role.ORG_ADMIN) == "org_admin"
