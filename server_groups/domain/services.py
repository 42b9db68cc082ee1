"""
Server group domain services.
"""

import logging
from typing import Dict, Iterable

from accounts.domain.user import ConsoleUser
from core.domain.exceptions import ServerGroupAccessDeniedError, ServerGroupNotFoundError
from server_groups.domain.server_group import ServerGroup
from server_groups.ports.server_group_repository import ServerGroupRepository

logger = logging.getLogger(__name__)


class ServerGroupManager:
    """
    Domain service for looking up server groups on behalf of a user.

    Lookups never cross organizations: a group owned by another
    organization is reported as missing.
    """

    def __init__(self, repository: ServerGroupRepository):
        """Initialize manager with the server group repository."""
        self.repository = repository

    @staticmethod
    def can_access(user: ConsoleUser, group: ServerGroup) -> bool:
        """
        Check if a user may administer a server group.

        Org admins administer every group of their organization,
        other users only the groups they are associated with.

        Args:
            user: Console user
            group: Server group

        Returns:
            True if the user may administer the group
        """
        if group.org_id != user.org_id:
            return False
        return user.is_org_admin or group.is_administered_by(user.id)

    async def lookup(self, group_id: int, user: ConsoleUser) -> ServerGroup:
        """
        Look up a server group the user may administer.

        Args:
            group_id: Server group id
            user: Console user

        Returns:
            ServerGroup entity

        Raises:
            ServerGroupNotFoundError: If the group is not in the user's organization
            ServerGroupAccessDeniedError: If the user may not administer the group
        """
        group = await self.repository.find_by_id_and_org(group_id, user.org_id)
        if group is None:
            raise ServerGroupNotFoundError(f"Server group {group_id} not found")

        if not self.can_access(user, group):
            logger.warning(
                "Server group access denied",
                extra={"server_group_id": group_id, "user_id": user.id},
            )
            raise ServerGroupAccessDeniedError(
                f"User {user.username} may not administer server group {group.name}"
            )
        return group

    @classmethod
    def access_map(cls, user: ConsoleUser, groups: Iterable[ServerGroup]) -> Dict[int, bool]:
        """
        Build a map of group id to whether the user may administer it.

        Args:
            user: Console user
            groups: Server groups to check

        Returns:
            Dictionary of group id to access flag
        """
        return {group.id: cls.can_access(user, group) for group in groups}
