"""
RemoveServerGroupsCommand.

Command to detach selected server groups from an activation key.
"""

from dataclasses import dataclass
from typing import Collection, Union


@dataclass
class RemoveServerGroupsCommand:
    """Command to remove server groups from an activation key."""

    activation_key_id: int
    user_id: int
    server_group_ids: Collection[Union[str, int]]
