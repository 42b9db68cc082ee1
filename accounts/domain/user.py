"""
ConsoleUser domain entity.

A console user is a Django user that belongs to an organization.
Roles decide which console operations the user may perform.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable


class Role(Enum):
    """Console role value object."""

    ORG_ADMIN = "org_admin"
    ACTIVATION_KEY_ADMIN = "activation_key_admin"

    def __str__(self) -> str:
        """Return role as string."""
        return self.value


@dataclass(frozen=True)
class ConsoleUser:
    """
    Console user domain entity.

    Immutable snapshot of the logged-in user taken at the start
    of a request.
    """

    id: int
    username: str
    org_id: int
    roles: FrozenSet[Role] = field(default_factory=frozenset)

    def __post_init__(self):
        """Validate user entity."""
        if not self.org_id:
            raise ValueError("Organization is required")

    @classmethod
    def create(
        cls,
        user_id: int,
        username: str,
        org_id: int,
        roles: Iterable[Role] = (),
    ) -> "ConsoleUser":
        """
        Create a new ConsoleUser entity.

        Args:
            user_id: Django user primary key
            username: Login name
            org_id: Organization id
            roles: Roles granted to the user

        Returns:
            ConsoleUser entity instance
        """
        return cls(id=user_id, username=username, org_id=org_id, roles=frozenset(roles))

    def has_role(self, role: Role) -> bool:
        """Check whether the user holds a role."""
        return role in self.roles

    @property
    def is_org_admin(self) -> bool:
        return self.has_role(Role.ORG_ADMIN)

    def can_manage_activation_keys(self) -> bool:
        """Org admins and activation key admins manage keys."""
        return self.is_org_admin or self.has_role(Role.ACTIVATION_KEY_ADMIN)
