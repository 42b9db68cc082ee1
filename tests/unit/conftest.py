"""
In-memory repositories and domain fixtures for unit tests.

Unit tests run the domain services and handlers against these fakes,
so they need no database.
"""

from dataclasses import replace
from typing import Callable, Iterable, List, Optional, Tuple

import pytest

from accounts.domain.user import ConsoleUser, Role
from accounts.ports.user_repository import UserRepository
from activation_keys.domain.activation_key import ActivationKey
from activation_keys.ports.activation_key_repository import ActivationKeyRepository
from core.infrastructure.events import event_bus
from server_groups.domain.server_group import ServerGroup
from server_groups.ports.server_group_repository import ServerGroupRepository

ORG_ID = 1
OTHER_ORG_ID = 2


class FakeUserRepository(UserRepository):
    def __init__(self, users: Iterable[ConsoleUser] = ()):
        self.users = {user.id: user for user in users}

    async def find_by_id(self, user_id: int) -> Optional[ConsoleUser]:
        return self.users.get(user_id)


class FakeServerGroupRepository(ServerGroupRepository):
    def __init__(self, groups: Iterable[ServerGroup] = ()):
        self.groups = {group.id: group for group in groups}

    def _sorted(self, groups) -> List[ServerGroup]:
        return sorted(groups, key=lambda group: (group.name, group.id))

    async def find_by_id(self, group_id: int) -> Optional[ServerGroup]:
        return self.groups.get(group_id)

    async def find_by_id_and_org(self, group_id: int, org_id: int) -> Optional[ServerGroup]:
        group = self.groups.get(group_id)
        return group if group and group.org_id == org_id else None

    async def find_by_org(self, org_id: int) -> List[ServerGroup]:
        return self._sorted(g for g in self.groups.values() if g.org_id == org_id)

    async def find_by_ids(self, group_ids: Iterable[int]) -> List[ServerGroup]:
        return self._sorted(self.groups[i] for i in set(group_ids) if i in self.groups)


class FakeActivationKeyRepository(ActivationKeyRepository):
    def __init__(self, keys: Iterable[ActivationKey] = ()):
        self.keys = {key.id: key for key in keys}
        self.saved: List[ActivationKey] = []

    async def save(self, activation_key: ActivationKey) -> ActivationKey:
        if activation_key.id is None:
            activation_key = replace(activation_key, id=max(self.keys, default=0) + 1)
        self.keys[activation_key.id] = activation_key
        self.saved.append(activation_key)
        return activation_key

    async def find_by_id(self, activation_key_id: int) -> Optional[ActivationKey]:
        return self.keys.get(activation_key_id)

    async def find_by_id_and_org(
        self, activation_key_id: int, org_id: int
    ) -> Optional[ActivationKey]:
        key = self.keys.get(activation_key_id)
        return key if key and key.org_id == org_id else None

    async def update_server_groups(
        self, activation_key_id: int, change: Callable[[ActivationKey], ActivationKey]
    ) -> Tuple[ActivationKey, ActivationKey]:
        current = self.keys[activation_key_id]
        updated = change(current)
        if updated is not current:
            self.keys[activation_key_id] = updated
            self.saved.append(updated)
        return current, updated


@pytest.fixture
def org_admin_user():
    return ConsoleUser.create(user_id=1, username="orgadmin", org_id=ORG_ID, roles=[Role.ORG_ADMIN])


@pytest.fixture
def key_admin_user():
    return ConsoleUser.create(
        user_id=2, username="keyadmin", org_id=ORG_ID, roles=[Role.ACTIVATION_KEY_ADMIN]
    )


@pytest.fixture
def viewer_user():
    return ConsoleUser.create(user_id=3, username="viewer", org_id=ORG_ID)


@pytest.fixture
def outsider_user():
    return ConsoleUser.create(
        user_id=4, username="outsider", org_id=OTHER_ORG_ID, roles=[Role.ORG_ADMIN]
    )


@pytest.fixture
def groups():
    """
    Groups keyed by short name.

    keyadmin (user 2) administers web, db and spare but not build.
    """
    return {
        "web": ServerGroup.create(10, ORG_ID, "Web Servers", admin_ids=[2]),
        "db": ServerGroup.create(11, ORG_ID, "Databases", admin_ids=[2]),
        "build": ServerGroup.create(12, ORG_ID, "Build Hosts"),
        "spare": ServerGroup.create(13, ORG_ID, "Spare Hosts", admin_ids=[2]),
        "foreign": ServerGroup.create(20, OTHER_ORG_ID, "Foreign"),
    }


@pytest.fixture
def key(groups):
    """Activation key 100 holding web, db and build."""
    return ActivationKey(
        id=100,
        key="1-abcdef",
        org_id=ORG_ID,
        description="Web provisioning",
        server_group_ids=frozenset(
            {groups["web"].id, groups["db"].id, groups["build"].id}
        ),
    )


@pytest.fixture
def user_repo(org_admin_user, key_admin_user, viewer_user, outsider_user):
    return FakeUserRepository([org_admin_user, key_admin_user, viewer_user, outsider_user])


@pytest.fixture
def group_repo(groups):
    return FakeServerGroupRepository(groups.values())


@pytest.fixture
def key_repo(key):
    return FakeActivationKeyRepository([key])


@pytest.fixture
def recorded_events():
    """Collect events published on the global event bus during a test."""
    from activation_keys.domain.events import ServerGroupsAddedToKey, ServerGroupsRemovedFromKey
    from core.domain.events import EventHandler

    events = []

    class Recorder(EventHandler):
        async def handle(self, event):
            events.append(event)

    recorder = Recorder()
    event_types = (ServerGroupsRemovedFromKey, ServerGroupsAddedToKey)
    for event_type in event_types:
        event_bus.subscribe(event_type, recorder)
    yield events
    for event_type in event_types:
        event_bus.unsubscribe(event_type, recorder)
