"""
Server group change handlers.

Handlers for removing server groups from and adding server groups to
an activation key.
"""

import logging
from typing import List, Type

from accounts.domain.user import ConsoleUser
from accounts.ports.user_repository import UserRepository
from activation_keys.application.commands.add_server_groups import AddServerGroupsCommand
from activation_keys.application.commands.remove_server_groups import RemoveServerGroupsCommand
from activation_keys.application.dto.activation_key_dto import GroupChangeResultDTO
from activation_keys.domain.activation_key import ActivationKey
from activation_keys.domain.events import (
    ServerGroupsAddedToKey,
    ServerGroupsChanged,
    ServerGroupsRemovedFromKey,
)
from activation_keys.domain.services import ActivationKeyLookup, parse_server_group_ids
from activation_keys.ports.activation_key_repository import ActivationKeyRepository
from core.domain.exceptions import DomainException, EmptySelectionError, PermissionDeniedError
from core.infrastructure.events import event_bus
from core.instrumentation import Status, StatusCode, get_tracer
from server_groups.domain.server_group import ServerGroup
from server_groups.domain.services import ServerGroupManager
from server_groups.ports.server_group_repository import ServerGroupRepository

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


async def load_console_user(user_repository: UserRepository, user_id: int) -> ConsoleUser:
    """
    Load the console user a command or query runs for.

    Raises:
        PermissionDeniedError: If the user has no console profile
    """
    user = await user_repository.find_by_id(user_id)
    if user is None:
        raise PermissionDeniedError(f"User {user_id} has no console profile")
    return user


class ServerGroupChangeHandler:
    """
    Shared flow for changing an activation key's server groups.

    Every selected group is resolved before the key is touched, so a
    failed lookup leaves the key unchanged. The change is then applied
    to the key as stored, and only the groups it adds or removes are
    written.
    """

    operation: str = ""
    event_class: Type[ServerGroupsChanged] = ServerGroupsChanged

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

    def apply(self, activation_key: ActivationKey, group: ServerGroup) -> ActivationKey:
        raise NotImplementedError

    async def handle(self, command) -> GroupChangeResultDTO:
        """
        Handle a server group change command.

        Args:
            command: RemoveServerGroupsCommand or AddServerGroupsCommand

        Returns:
            GroupChangeResultDTO; count is the number of selected groups

        Raises:
            PermissionDeniedError: If the user may not manage activation keys
            ActivationKeyNotFoundError: If the key is not in the user's organization
            InvalidSelectionError: If a selected id is not an integer
            EmptySelectionError: If nothing is selected
            ServerGroupNotFoundError: If a group is not in the user's organization
            ServerGroupAccessDeniedError: If the user may not administer a group
        """
        with tracer.start_as_current_span(self.operation) as span:
            span.set_attribute("operation", self.operation)
            span.set_attribute("activation_key.id", command.activation_key_id)
            span.set_attribute("user.id", command.user_id)

            try:
                result = await self._handle(command)
            except DomainException as e:
                span.set_attribute("error", e.code)
                span.set_status(Status(StatusCode.ERROR, e.message))
                raise

            span.set_attribute("server_groups.count", result.count)
            span.set_status(Status(StatusCode.OK))
            return result

    async def _handle(self, command) -> GroupChangeResultDTO:
        user = await load_console_user(self.user_repository, command.user_id)
        activation_key = await ActivationKeyLookup(self.activation_key_repository).lookup(
            command.activation_key_id, user
        )

        group_ids = parse_server_group_ids(command.server_group_ids)
        if not group_ids:
            raise EmptySelectionError("No server groups selected")

        manager = ServerGroupManager(self.server_group_repository)
        groups: List[ServerGroup] = []
        for group_id in group_ids:
            groups.append(await manager.lookup(group_id, user))

        def change(current: ActivationKey) -> ActivationKey:
            for group in groups:
                current = self.apply(current, group)
            return current

        before, after = await self.activation_key_repository.update_server_groups(
            activation_key.id, change
        )
        changed_ids = sorted(before.server_group_ids ^ after.server_group_ids)

        logger.info(
            "%s on activation key %s",
            self.operation,
            activation_key.id,
            extra={
                "activation_key_id": activation_key.id,
                "user_id": user.id,
                "server_group_ids": group_ids,
                "changed_server_group_ids": changed_ids,
            },
        )

        await event_bus.publish(
            self.event_class(
                activation_key_id=activation_key.id,
                org_id=activation_key.org_id,
                user_id=user.id,
                server_group_ids=group_ids,
                changed_server_group_ids=changed_ids,
            )
        )

        return GroupChangeResultDTO(
            activation_key_id=activation_key.id,
            count=len(group_ids),
            server_group_ids=group_ids,
        )


class RemoveServerGroupsHandler(ServerGroupChangeHandler):
    """Handler for RemoveServerGroupsCommand."""

    operation = "remove_server_groups"
    event_class = ServerGroupsRemovedFromKey

    def apply(self, activation_key: ActivationKey, group: ServerGroup) -> ActivationKey:
        return activation_key.remove_server_group(group)

    async def handle(self, command: RemoveServerGroupsCommand) -> GroupChangeResultDTO:
        """Remove the selected server groups from the activation key."""
        return await super().handle(command)


class AddServerGroupsHandler(ServerGroupChangeHandler):
    """Handler for AddServerGroupsCommand."""

    operation = "add_server_groups"
    event_class = ServerGroupsAddedToKey

    def apply(self, activation_key: ActivationKey, group: ServerGroup) -> ActivationKey:
        return activation_key.add_server_group(group)

    async def handle(self, command: AddServerGroupsCommand) -> GroupChangeResultDTO:
        """Add the selected server groups to the activation key."""
        return await super().handle(command)
