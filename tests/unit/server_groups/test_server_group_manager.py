"""
Unit tests for ServerGroupManager.
"""

import pytest

from core.domain.exceptions import ServerGroupAccessDeniedError, ServerGroupNotFoundError
from server_groups.domain.server_group import ServerGroup
from server_groups.domain.services import ServerGroupManager


class TestServerGroupEntity:
    """Tests for ServerGroup domain entity."""

    def test_create_strips_name(self):
        group = ServerGroup.create(1, 1, "  Web Servers ", admin_ids=[4])

        assert group.name == "Web Servers"
        assert group.is_administered_by(4)
        assert not group.is_administered_by(5)

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            ServerGroup.create(1, 1, "   ")


class TestCanAccess:
    """Tests for ServerGroupManager.can_access."""

    def test_org_admin_accesses_every_group(self, org_admin_user, groups):
        assert ServerGroupManager.can_access(org_admin_user, groups["build"])

    def test_associated_admin_accesses_group(self, key_admin_user, groups):
        assert ServerGroupManager.can_access(key_admin_user, groups["web"])

    def test_unassociated_user_denied(self, key_admin_user, groups):
        assert not ServerGroupManager.can_access(key_admin_user, groups["build"])

    def test_other_organization_denied(self, org_admin_user, groups):
        assert not ServerGroupManager.can_access(org_admin_user, groups["foreign"])

    def test_access_map(self, key_admin_user, groups):
        access = ServerGroupManager.access_map(
            key_admin_user, [groups["web"], groups["build"]]
        )

        assert access == {groups["web"].id: True, groups["build"].id: False}


@pytest.mark.asyncio
class TestServerGroupLookup:
    """Tests for ServerGroupManager.lookup."""

    async def test_lookup_success(self, group_repo, key_admin_user, groups):
        group = await ServerGroupManager(group_repo).lookup(groups["db"].id, key_admin_user)

        assert group == groups["db"]

    async def test_lookup_unknown_group(self, group_repo, org_admin_user):
        with pytest.raises(ServerGroupNotFoundError):
            await ServerGroupManager(group_repo).lookup(999, org_admin_user)

    async def test_lookup_group_of_other_organization(self, group_repo, org_admin_user, groups):
        """Test groups of other organizations are reported as missing."""
        with pytest.raises(ServerGroupNotFoundError):
            await ServerGroupManager(group_repo).lookup(groups["foreign"].id, org_admin_user)

    async def test_lookup_access_denied(self, group_repo, key_admin_user, groups):
        with pytest.raises(ServerGroupAccessDeniedError):
            await ServerGroupManager(group_repo).lookup(groups["build"].id, key_admin_user)
