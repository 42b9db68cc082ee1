"""
Handlers for the activation key server group lists.
"""

from typing import Iterable

from accounts.domain.user import ConsoleUser
from accounts.ports.user_repository import UserRepository
from activation_keys.application.dto.activation_key_dto import (
    ActivationKeyDTO,
    ServerGroupListDTO,
    ServerGroupRowDTO,
)
from activation_keys.application.handlers.server_group_change_handlers import load_console_user
from activation_keys.application.queries.list_server_groups import (
    ListAvailableServerGroupsQuery,
    ListKeyServerGroupsQuery,
)
from activation_keys.domain.activation_key import ActivationKey
from activation_keys.domain.services import ActivationKeyLookup
from activation_keys.ports.activation_key_repository import ActivationKeyRepository
from server_groups.domain.server_group import ServerGroup
from server_groups.domain.services import ServerGroupManager
from server_groups.ports.server_group_repository import ServerGroupRepository


def to_activation_key_dto(activation_key: ActivationKey) -> ActivationKeyDTO:
    return ActivationKeyDTO(
        id=activation_key.id,
        key=activation_key.key,
        description=activation_key.description,
        usage_limit=activation_key.usage_limit,
        disabled=activation_key.disabled,
    )


def build_group_list(
    activation_key: ActivationKey, user: ConsoleUser, groups: Iterable[ServerGroup]
) -> ServerGroupListDTO:
    """Build list rows sorted by name, each flagged with the user's access."""
    groups = sorted(groups, key=lambda group: (group.name.lower(), group.id))
    access = ServerGroupManager.access_map(user, groups)
    return ServerGroupListDTO(
        activation_key=to_activation_key_dto(activation_key),
        server_groups=[
            ServerGroupRowDTO(
                id=group.id,
                name=group.name,
                description=group.description,
                can_access=access[group.id],
            )
            for group in groups
        ],
    )


class _ServerGroupListHandler:
    def __init__(
        self,
        user_repository: UserRepository,
        activation_key_repository: ActivationKeyRepository,
        server_group_repository: ServerGroupRepository,
    ):
        """Initialize handler with repositories."""
        self.user_repository = user_repository
        self.activation_key_repository = activation_key_repository
        self.server_group_repository = server_group_repository

    async def _lookup(self, query):
        user = await load_console_user(self.user_repository, query.user_id)
        activation_key = await ActivationKeyLookup(self.activation_key_repository).lookup(
            query.activation_key_id, user
        )
        return user, activation_key


class ListKeyServerGroupsHandler(_ServerGroupListHandler):
    """Handler for ListKeyServerGroupsQuery."""

    async def handle(self, query: ListKeyServerGroupsQuery) -> ServerGroupListDTO:
        """
        List the server groups attached to an activation key.

        Groups the user may not administer are listed with can_access False.

        Args:
            query: ListKeyServerGroupsQuery

        Returns:
            ServerGroupListDTO
        """
        user, activation_key = await self._lookup(query)
        groups = await self.server_group_repository.find_by_ids(activation_key.server_group_ids)
        return build_group_list(
            activation_key, user, [group for group in groups if group.org_id == user.org_id]
        )


class ListAvailableServerGroupsHandler(_ServerGroupListHandler):
    """Handler for ListAvailableServerGroupsQuery."""

    async def handle(self, query: ListAvailableServerGroupsQuery) -> ServerGroupListDTO:
        """
        List the organization's server groups not attached to the key.

        Args:
            query: ListAvailableServerGroupsQuery

        Returns:
            ServerGroupListDTO
        """
        user, activation_key = await self._lookup(query)
        groups = await self.server_group_repository.find_by_org(user.org_id)
        return build_group_list(
            activation_key,
            user,
            [group for group in groups if not activation_key.has_server_group(group.id)],
        )
