"""
Django implementation of ServerGroupRepository port.

This adapter converts Django ORM models into domain entities.
"""

from typing import Iterable, List, Optional

from asgiref.sync import sync_to_async

from server_groups.domain.server_group import ServerGroup
from server_groups.infrastructure.models import ServerGroup as ServerGroupModel
from server_groups.ports.server_group_repository import ServerGroupRepository


class DjangoServerGroupRepository(ServerGroupRepository):
    """Django ORM implementation of ServerGroupRepository."""

    def _queryset(self):
        # pylint: disable=no-member
        return ServerGroupModel.objects.prefetch_related("admins")

    def _to_domain(self, model: ServerGroupModel) -> ServerGroup:
        """
        Convert Django model to domain entity.

        Args:
            model: Django ServerGroup model with admins prefetched

        Returns:
            ServerGroup domain entity
        """
        return ServerGroup(
            id=model.id,
            org_id=model.organization_id,
            name=model.name,
            description=model.description,
            admin_ids=frozenset(admin.id for admin in model.admins.all()),
            created_at=model.created_at,
        )

    async def find_by_id(self, group_id: int) -> Optional[ServerGroup]:
        """
        Find a server group by ID.

        Args:
            group_id: Server group id

        Returns:
            ServerGroup entity or None if not found
        """
        return await sync_to_async(self._find_one)(id=group_id)

    async def find_by_id_and_org(self, group_id: int, org_id: int) -> Optional[ServerGroup]:
        """
        Find a server group by ID within one organization.

        Args:
            group_id: Server group id
            org_id: Organization id

        Returns:
            ServerGroup entity or None if not found in the organization
        """
        return await sync_to_async(self._find_one)(id=group_id, organization_id=org_id)

    async def find_by_org(self, org_id: int) -> List[ServerGroup]:
        """
        Find all server groups of an organization, ordered by name.

        Args:
            org_id: Organization id

        Returns:
            List of ServerGroup entities
        """
        return await sync_to_async(self._find_many)(organization_id=org_id)

    async def find_by_ids(self, group_ids: Iterable[int]) -> List[ServerGroup]:
        """
        Find server groups by ID, ordered by name.

        Args:
            group_ids: Server group ids

        Returns:
            List of ServerGroup entities
        """
        return await sync_to_async(self._find_many)(id__in=list(group_ids))

    def _find_one(self, **filters) -> Optional[ServerGroup]:
        model = self._queryset().filter(**filters).first()
        return self._to_domain(model) if model else None

    def _find_many(self, **filters) -> List[ServerGroup]:
        return [
            self._to_domain(model)
            for model in self._queryset().filter(**filters).order_by("name", "id")
        ]
