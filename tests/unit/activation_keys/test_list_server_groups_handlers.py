"""
Unit tests for the server group list handlers.
"""

import pytest

from activation_keys.application.handlers.list_server_groups_handlers import (
    ListAvailableServerGroupsHandler,
    ListKeyServerGroupsHandler,
)
from activation_keys.application.queries.list_server_groups import (
    ListAvailableServerGroupsQuery,
    ListKeyServerGroupsQuery,
)
from core.domain.exceptions import ActivationKeyNotFoundError, PermissionDeniedError


@pytest.fixture
def repositories(user_repo, key_repo, group_repo):
    return {
        "user_repository": user_repo,
        "activation_key_repository": key_repo,
        "server_group_repository": group_repo,
    }


@pytest.mark.asyncio
class TestListKeyServerGroupsHandler:
    """Tests for ListKeyServerGroupsHandler."""

    async def test_lists_groups_sorted_with_access(self, repositories, key, key_admin_user):
        handler = ListKeyServerGroupsHandler(**repositories)

        result = await handler.handle(
            ListKeyServerGroupsQuery(activation_key_id=key.id, user_id=key_admin_user.id)
        )

        assert result.activation_key.id == key.id
        assert result.activation_key.key == key.key
        assert [row.name for row in result.server_groups] == [
            "Build Hosts",
            "Databases",
            "Web Servers",
        ]
        assert [row.can_access for row in result.server_groups] == [False, True, True]
        assert result.selectable_ids == ["11", "10"]

    async def test_org_admin_can_select_every_group(self, repositories, key, org_admin_user):
        handler = ListKeyServerGroupsHandler(**repositories)

        result = await handler.handle(
            ListKeyServerGroupsQuery(activation_key_id=key.id, user_id=org_admin_user.id)
        )

        assert all(row.can_access for row in result.server_groups)

    async def test_requires_role(self, repositories, key, viewer_user):
        handler = ListKeyServerGroupsHandler(**repositories)

        with pytest.raises(PermissionDeniedError):
            await handler.handle(
                ListKeyServerGroupsQuery(activation_key_id=key.id, user_id=viewer_user.id)
            )

    async def test_unknown_key(self, repositories, org_admin_user):
        handler = ListKeyServerGroupsHandler(**repositories)

        with pytest.raises(ActivationKeyNotFoundError):
            await handler.handle(
                ListKeyServerGroupsQuery(activation_key_id=5, user_id=org_admin_user.id)
            )


@pytest.mark.asyncio
class TestListAvailableServerGroupsHandler:
    """Tests for ListAvailableServerGroupsHandler."""

    async def test_lists_organization_groups_not_on_key(self, repositories, key, org_admin_user):
        handler = ListAvailableServerGroupsHandler(**repositories)

        result = await handler.handle(
            ListAvailableServerGroupsQuery(activation_key_id=key.id, user_id=org_admin_user.id)
        )

        assert [row.name for row in result.server_groups] == ["Spare Hosts"]
        assert result.server_groups[0].can_access is True
