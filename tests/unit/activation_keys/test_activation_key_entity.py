"""
Unit tests for ActivationKey domain entity.
"""

import pytest

from activation_keys.domain.activation_key import ActivationKey
from core.domain.exceptions import OrganizationMismatchError


class TestActivationKeyEntity:
    """Tests for ActivationKey domain entity."""

    def test_create_generates_key(self):
        """Test a generated key is prefixed with the organization id."""
        key = ActivationKey.create(org_id=5, description="Build farm")

        assert key.id is None
        assert key.key.startswith("5-")
        assert len(key.key) == len("5-") + 32
        assert key.server_group_ids == frozenset()
        assert key.disabled is False
        assert key.created_at is not None

    def test_create_with_key_and_groups(self):
        key = ActivationKey.create(org_id=5, key="5-custom", server_group_ids=[1, 2, 2])

        assert key.key == "5-custom"
        assert key.server_group_ids == frozenset({1, 2})

    def test_empty_key_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            ActivationKey(id=1, key="  ", org_id=1)

    def test_negative_usage_limit_rejected(self):
        with pytest.raises(ValueError, match="Usage limit"):
            ActivationKey(id=1, key="1-a", org_id=1, usage_limit=-1)

    def test_remove_server_group(self, key, groups):
        """Test removing returns a new key without the group."""
        updated = key.remove_server_group(groups["web"])

        assert not updated.has_server_group(groups["web"].id)
        assert updated.has_server_group(groups["db"].id)
        assert key.has_server_group(groups["web"].id)

    def test_remove_absent_server_group_is_noop(self, key, groups):
        """Test removing a group the key does not hold returns the same key."""
        assert key.remove_server_group(groups["spare"]) is key

    def test_add_server_group(self, key, groups):
        updated = key.add_server_group(groups["spare"])

        assert updated.has_server_group(groups["spare"].id)
        assert not key.has_server_group(groups["spare"].id)

    def test_add_present_server_group_is_noop(self, key, groups):
        assert key.add_server_group(groups["web"]) is key

    def test_add_foreign_server_group_rejected(self, key, groups):
        with pytest.raises(OrganizationMismatchError):
            key.add_server_group(groups["foreign"])
