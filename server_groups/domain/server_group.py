"""
ServerGroup domain entity.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import FrozenSet, Iterable, Optional


@dataclass(frozen=True)
class ServerGroup:
    """
    Server group domain entity.

    A named group of managed systems inside one organization.
    admin_ids holds the users explicitly allowed to administer the group.
    """

    id: int
    org_id: int
    name: str
    description: str = ""
    admin_ids: FrozenSet[int] = field(default_factory=frozenset)
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate server group entity."""
        if not self.org_id:
            raise ValueError("Organization is required")
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Server group name cannot be empty")
        if len(self.name) > 64:
            raise ValueError("Server group name too long")

    @classmethod
    def create(
        cls,
        group_id: int,
        org_id: int,
        name: str,
        description: str = "",
        admin_ids: Iterable[int] = (),
    ) -> "ServerGroup":
        """
        Create a new ServerGroup entity.

        Args:
            group_id: Server group id
            org_id: Owning organization id
            name: Group display name
            description: Optional description
            admin_ids: Users allowed to administer the group

        Returns:
            ServerGroup entity instance
        """
        return cls(
            id=group_id,
            org_id=org_id,
            name=name.strip(),
            description=description,
            admin_ids=frozenset(admin_ids),
            created_at=datetime.utcnow(),
        )

    def is_administered_by(self, user_id: int) -> bool:
        """Check whether a user is one of the group's associated admins."""
        return user_id in self.admin_ids
