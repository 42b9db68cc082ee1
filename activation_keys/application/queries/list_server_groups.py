"""
Server group list queries for an activation key.
"""

from dataclasses import dataclass


@dataclass
class ListKeyServerGroupsQuery:
    """Query the server groups attached to an activation key."""

    activation_key_id: int
    user_id: int


@dataclass
class ListAvailableServerGroupsQuery:
    """Query the organization's server groups not yet attached to a key."""

    activation_key_id: int
    user_id: int
