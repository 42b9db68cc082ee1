"""
Activation key domain services.
"""

from typing import Iterable, List

from accounts.domain.user import ConsoleUser
from activation_keys.domain.activation_key import ActivationKey
from activation_keys.ports.activation_key_repository import ActivationKeyRepository
from core.domain.exceptions import (
    ActivationKeyNotFoundError,
    InvalidSelectionError,
    PermissionDeniedError,
)


class ActivationKeyLookup:
    """Domain service for looking up activation keys on behalf of a user."""

    def __init__(self, repository: ActivationKeyRepository):
        """Initialize lookup with the activation key repository."""
        self.repository = repository

    async def lookup(self, activation_key_id: int, user: ConsoleUser) -> ActivationKey:
        """
        Look up an activation key the user may manage.

        Args:
            activation_key_id: Activation key token id
            user: Console user

        Returns:
            ActivationKey entity

        Raises:
            PermissionDeniedError: If the user may not manage activation keys
            ActivationKeyNotFoundError: If the key is not in the user's organization
        """
        if not user.can_manage_activation_keys():
            raise PermissionDeniedError(
                f"User {user.username} may not manage activation keys"
            )

        key = await self.repository.find_by_id_and_org(activation_key_id, user.org_id)
        if key is None:
            raise ActivationKeyNotFoundError(f"Activation key {activation_key_id} not found")
        return key


def parse_server_group_ids(raw_ids: Iterable) -> List[int]:
    """
    Parse selected server group ids.

    Selections arrive as strings from forms and sessions. Duplicates are
    dropped, the first occurrence keeps its position.

    Args:
        raw_ids: Selected ids as strings or integers

    Returns:
        List of unique integer ids

    Raises:
        InvalidSelectionError: If an id is not an integer
    """
    group_ids: List[int] = []
    for raw_id in raw_ids:
        if isinstance(raw_id, bool):
            raise InvalidSelectionError(f"Invalid server group id: {raw_id!r}")
        try:
            group_id = int(str(raw_id).strip())
        except ValueError:
            raise InvalidSelectionError(f"Invalid server group id: {raw_id!r}") from None
        if group_id not in group_ids:
            group_ids.append(group_id)
    return group_ids
