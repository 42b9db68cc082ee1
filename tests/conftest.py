"""
Pytest configuration and shared fixtures.
"""

import pytest
from django.contrib.auth import get_user_model

from accounts.infrastructure.models import ApiKey, Organization, UserProfile
from accounts.infrastructure.repositories.django_user_repository import DjangoUserRepository
from activation_keys.infrastructure.models import ActivationKey as ActivationKeyModel
from activation_keys.infrastructure.repositories.django_activation_key_repository import (
    DjangoActivationKeyRepository,
)
from server_groups.infrastructure.models import ServerGroup as ServerGroupModel
from server_groups.infrastructure.repositories.django_server_group_repository import (
    DjangoServerGroupRepository,
)

User = get_user_model()


@pytest.fixture
def user_repository():
    """Fixture for UserRepository."""
    return DjangoUserRepository()


@pytest.fixture
def activation_key_repository():
    """Fixture for ActivationKeyRepository."""
    return DjangoActivationKeyRepository()


@pytest.fixture
def server_group_repository():
    """Fixture for ServerGroupRepository."""
    return DjangoServerGroupRepository()


@pytest.fixture
def organization(db):
    """Fixture for the organization most tests run in."""
    return Organization.objects.create(name="Example Org")


@pytest.fixture
def other_organization(db):
    """Fixture for an unrelated organization."""
    return Organization.objects.create(name="Other Org")


@pytest.fixture
def make_console_user(db):
    """Factory for Django users with a console profile."""

    def make(username, organization, is_org_admin=False, is_activation_key_admin=False):
        user = User.objects.create_user(username=username, password="secret")
        UserProfile.objects.create(
            user=user,
            organization=organization,
            is_org_admin=is_org_admin,
            is_activation_key_admin=is_activation_key_admin,
        )
        return user

    return make


@pytest.fixture
def org_admin(make_console_user, organization):
    """Org admin: administers every group of the organization."""
    return make_console_user("orgadmin", organization, is_org_admin=True)


@pytest.fixture
def key_admin(make_console_user, organization):
    """Activation key admin: administers only the groups they are associated with."""
    return make_console_user("keyadmin", organization, is_activation_key_admin=True)


@pytest.fixture
def viewer(make_console_user, organization):
    """Console user without any role."""
    return make_console_user("viewer", organization)


@pytest.fixture
def outsider(make_console_user, other_organization):
    """Org admin of the other organization."""
    return make_console_user("outsider", other_organization, is_org_admin=True)


@pytest.fixture
def server_groups(organization, key_admin):
    """
    Three groups of the organization, keyed by short name.

    key_admin administers web and db but not build.
    """
    web = ServerGroupModel.objects.create(organization=organization, name="Web Servers")
    db_group = ServerGroupModel.objects.create(organization=organization, name="Databases")
    build = ServerGroupModel.objects.create(organization=organization, name="Build Hosts")
    web.admins.add(key_admin)
    db_group.admins.add(key_admin)
    return {"web": web, "db": db_group, "build": build}


@pytest.fixture
def spare_group(organization, key_admin):
    """A group of the organization that is not attached to the key."""
    group = ServerGroupModel.objects.create(organization=organization, name="Spare Hosts")
    group.admins.add(key_admin)
    return group


@pytest.fixture
def foreign_group(other_organization):
    """A group owned by the other organization."""
    return ServerGroupModel.objects.create(organization=other_organization, name="Foreign")


@pytest.fixture
def activation_key(organization, server_groups):
    """Activation key holding all three organization groups."""
    key = ActivationKeyModel.objects.create(
        organization=organization, key=f"{organization.id}-testkey", description="Web provisioning"
    )
    key.server_groups.set(server_groups.values())
    return key


def key_group_names(activation_key):
    """Names of the groups currently attached to an activation key model."""
    return sorted(activation_key.server_groups.values_list("name", flat=True))


@pytest.fixture
def group_names():
    """Fixture returning a helper that reads a key's group names from the database."""
    return key_group_names


@pytest.fixture
def make_api_key(db):
    """Factory returning the raw API key of a new ApiKey for a user."""

    def make(user, **kwargs):
        api_key = ApiKey.objects.create(user=user, **kwargs)
        return api_key._raw_key  # pylint: disable=protected-access

    return make


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
