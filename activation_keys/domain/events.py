"""
Activation key domain events.

Domain events represent something that happened to an activation key.
"""
from datetime import datetime
from typing import Any, Dict, Iterable, Optional

from core.domain.events import DomainEvent


class ServerGroupsChanged(DomainEvent):
    """Base event for changes of an activation key's server groups."""

    def __init__(
        self,
        activation_key_id: int,
        org_id: int,
        user_id: int,
        server_group_ids: Iterable[int],
        changed_server_group_ids: Iterable[int],
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize the event.

        Args:
            activation_key_id: Activation key token id
            org_id: Organization id
            user_id: User who made the change
            server_group_ids: Server groups that were selected
            changed_server_group_ids: Selected groups the key actually gained or lost
            occurred_at: When the event occurred
        """
        metadata = {"occurred_at": occurred_at} if occurred_at else {}
        super().__init__(aggregate_id=str(activation_key_id), **metadata)
        self.activation_key_id = activation_key_id
        self.org_id = org_id
        self.user_id = user_id
        self.server_group_ids = tuple(sorted(server_group_ids))
        self.changed_server_group_ids = tuple(sorted(changed_server_group_ids))

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        data = super().to_dict()
        data.update(
            {
                "activation_key_id": self.activation_key_id,
                "org_id": self.org_id,
                "user_id": self.user_id,
                "server_group_ids": list(self.server_group_ids),
                "changed_server_group_ids": list(self.changed_server_group_ids),
            }
        )
        return data


class ServerGroupsRemovedFromKey(ServerGroupsChanged):
    """Event raised when server groups are detached from an activation key."""


class ServerGroupsAddedToKey(ServerGroupsChanged):
    """Event raised when server groups are attached to an activation key."""
