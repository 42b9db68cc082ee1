"""
Activation key DTOs for console pages and API responses.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ActivationKeyDTO:
    """DTO for activation key information."""

    id: int
    key: str
    description: str
    usage_limit: Optional[int]
    disabled: bool


@dataclass
class ServerGroupRowDTO:
    """DTO for one server group row; can_access marks groups the user may select."""

    id: int
    name: str
    description: str
    can_access: bool


@dataclass
class ServerGroupListDTO:
    """DTO for a list of server groups shown for an activation key."""

    activation_key: ActivationKeyDTO
    server_groups: List[ServerGroupRowDTO] = field(default_factory=list)

    @property
    def selectable_ids(self) -> List[str]:
        """Ids of rows the user may select, as selection strings."""
        return [str(row.id) for row in self.server_groups if row.can_access]


@dataclass
class GroupChangeResultDTO:
    """DTO for the result of adding or removing server groups."""

    activation_key_id: int
    count: int
    server_group_ids: List[int]
