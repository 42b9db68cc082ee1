"""
Server group repository port (interface).

This defines the contract for server group persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from server_groups.domain.server_group import ServerGroup


class ServerGroupRepository(ABC):
    """Abstract repository for ServerGroup entities."""

    @abstractmethod
    async def find_by_id(self, group_id: int) -> Optional[ServerGroup]:
        """
        Find a server group by ID.

        Args:
            group_id: Server group id

        Returns:
            ServerGroup entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_id_and_org(self, group_id: int, org_id: int) -> Optional[ServerGroup]:
        """
        Find a server group by ID within one organization.

        Args:
            group_id: Server group id
            org_id: Organization id

        Returns:
            ServerGroup entity or None if not found in the organization
        """
        pass

    @abstractmethod
    async def find_by_org(self, org_id: int) -> List[ServerGroup]:
        """
        Find all server groups of an organization, ordered by name.

        Args:
            org_id: Organization id

        Returns:
            List of ServerGroup entities
        """
        pass

    @abstractmethod
    async def find_by_ids(self, group_ids: Iterable[int]) -> List[ServerGroup]:
        """
        Find server groups by ID, ordered by name.

        Unknown ids are skipped.

        Args:
            group_ids: Server group ids

        Returns:
            List of ServerGroup entities
        """
        pass
