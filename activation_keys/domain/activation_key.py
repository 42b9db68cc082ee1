"""
ActivationKey domain entity.

This is the core domain entity representing an activation key.
It contains business logic and is independent of infrastructure.
"""

import secrets
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import FrozenSet, Iterable, Optional

from core.domain.exceptions import OrganizationMismatchError
from server_groups.domain.server_group import ServerGroup


@dataclass(frozen=True)
class ActivationKey:
    """
    Activation key domain entity.

    Systems registered with the key join every server group in
    server_group_ids. The id is the key's token id.
    """

    id: Optional[int]
    key: str
    org_id: int
    description: str = ""
    server_group_ids: FrozenSet[int] = field(default_factory=frozenset)
    usage_limit: Optional[int] = None
    disabled: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate activation key entity."""
        if not self.org_id:
            raise ValueError("Organization is required")
        if not self.key or len(self.key.strip()) == 0:
            raise ValueError("Activation key cannot be empty")
        if len(self.key) > 64:
            raise ValueError("Activation key too long")
        if self.usage_limit is not None and self.usage_limit < 0:
            raise ValueError("Usage limit cannot be negative")

    @classmethod
    def create(
        cls,
        org_id: int,
        description: str = "",
        key: Optional[str] = None,
        server_group_ids: Iterable[int] = (),
        usage_limit: Optional[int] = None,
    ) -> "ActivationKey":
        """
        Create a new, unsaved ActivationKey entity.

        Args:
            org_id: Owning organization id
            description: Human readable description
            key: Key string (generated as "<org_id>-<hex>" if not provided)
            server_group_ids: Initial server groups
            usage_limit: Optional maximum number of registrations

        Returns:
            ActivationKey entity instance
        """
        now = datetime.utcnow()
        return cls(
            id=None,
            key=key or f"{org_id}-{secrets.token_hex(16)}",
            org_id=org_id,
            description=description,
            server_group_ids=frozenset(server_group_ids),
            usage_limit=usage_limit,
            disabled=False,
            created_at=now,
            updated_at=now,
        )

    def has_server_group(self, group_id: int) -> bool:
        """Check whether a server group is attached to the key."""
        return group_id in self.server_group_ids

    def remove_server_group(self, group: ServerGroup) -> "ActivationKey":
        """
        Create a new ActivationKey instance without the server group.

        Removing a group that is not attached returns the key unchanged.

        Args:
            group: Server group to detach

        Returns:
            ActivationKey instance without the group
        """
        if not self.has_server_group(group.id):
            return self

        return replace(
            self,
            server_group_ids=self.server_group_ids - {group.id},
            updated_at=datetime.utcnow(),
        )

    def add_server_group(self, group: ServerGroup) -> "ActivationKey":
        """
        Create a new ActivationKey instance with the server group attached.

        Args:
            group: Server group to attach

        Returns:
            ActivationKey instance with the group

        Raises:
            OrganizationMismatchError: If the group belongs to another organization
        """
        if group.org_id != self.org_id:
            raise OrganizationMismatchError(
                f"Server group {group.name} belongs to another organization"
            )
        if self.has_server_group(group.id):
            return self

        return replace(
            self,
            server_group_ids=self.server_group_ids | {group.id},
            updated_at=datetime.utcnow(),
        )
