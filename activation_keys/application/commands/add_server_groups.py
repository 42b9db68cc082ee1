"""
AddServerGroupsCommand.

Command to attach selected server groups to an activation key.
"""

from dataclasses import dataclass
from typing import Collection, Union


@dataclass
class AddServerGroupsCommand:
    """Command to add server groups to an activation key."""

    activation_key_id: int
    user_id: int
    server_group_ids: Collection[Union[str, int]]
