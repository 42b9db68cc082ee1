"""
Activation key repository port (interface).

This defines the contract for activation key persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple

from activation_keys.domain.activation_key import ActivationKey


class ActivationKeyRepository(ABC):
    """
    Abstract repository for ActivationKey entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, activation_key: ActivationKey) -> ActivationKey:
        """
        Save an activation key entity, including its server groups.

        Args:
            activation_key: ActivationKey entity to save

        Returns:
            Saved activation key entity (with its id assigned)
        """
        pass

    @abstractmethod
    async def find_by_id(self, activation_key_id: int) -> Optional[ActivationKey]:
        """
        Find an activation key by token id.

        Args:
            activation_key_id: Activation key token id

        Returns:
            ActivationKey entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_id_and_org(
        self, activation_key_id: int, org_id: int
    ) -> Optional[ActivationKey]:
        """
        Find an activation key by token id within one organization.

        Args:
            activation_key_id: Activation key token id
            org_id: Organization id

        Returns:
            ActivationKey entity or None if not found in the organization
        """
        pass

    @abstractmethod
    async def update_server_groups(
        self,
        activation_key_id: int,
        change: Callable[[ActivationKey], ActivationKey],
    ) -> Tuple[ActivationKey, ActivationKey]:
        """
        Apply a change to the key's current server groups and persist the difference.

        The key is re-read and locked before the change runs, so groups
        changed by other requests in the meantime are kept.

        Args:
            activation_key_id: Activation key token id
            change: Returns the key with its new server groups

        Returns:
            The key before and after the change

        Raises:
            ActivationKeyNotFoundError: If the key no longer exists
        """
        pass
