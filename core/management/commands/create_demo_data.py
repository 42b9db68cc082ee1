"""
Django management command to create demo data for development.

Creates:
- A superuser (admin/admin)
- An organization with an org admin and an activation key admin
- Server groups, some administered by the activation key admin
- An activation key holding every server group
- An API key for the org admin
"""

import logging

from asgiref.sync import async_to_sync
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from accounts.infrastructure.models import ApiKey, Organization, UserProfile
from activation_keys.domain.activation_key import ActivationKey
from activation_keys.infrastructure.models import ActivationKey as ActivationKeyModel
from activation_keys.infrastructure.repositories.django_activation_key_repository import (
    DjangoActivationKeyRepository,
)
from server_groups.infrastructure.models import ServerGroup as ServerGroupModel

logger = logging.getLogger(__name__)
User = get_user_model()

DEMO_GROUPS = [
    ("Web Servers", "Front end web hosts", True),
    ("Databases", "PostgreSQL primaries and replicas", True),
    ("Build Hosts", "CI build machines", False),
]


class Command(BaseCommand):
    """Command to create demo data."""

    help = "Create demo data (superuser, organization, users, server groups, activation key)"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--skip-superuser",
            action="store_true",
            help="Skip creating superuser",
        )
        parser.add_argument(
            "--org-name",
            type=str,
            default="Example Org",
            help="Organization name (default: Example Org)",
        )
        parser.add_argument(
            "--password",
            type=str,
            default="console",
            help="Password of the demo console users (default: console)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        with transaction.atomic():
            if not options["skip_superuser"]:
                self.create_superuser()

            organization = self.create_organization(options["org_name"])
            org_admin = self.create_console_user(
                "orgadmin", organization, options["password"], is_org_admin=True
            )
            key_admin = self.create_console_user(
                "keyadmin", organization, options["password"], is_activation_key_admin=True
            )
            groups = self.create_server_groups(organization, key_admin)
            activation_key = async_to_sync(self.create_activation_key)(organization, groups)
            api_key = self.create_api_key(org_admin)

        self.print_summary(organization, activation_key, api_key)

    def create_superuser(self):
        """Create a superuser if it doesn't exist."""
        username = "admin"
        password = "admin"

        if User.objects.filter(username=username).exists():
            # pylint: disable=no-member
            self.stdout.write(self.style.WARNING(f"Superuser '{username}' already exists"))
            return

        User.objects.create_superuser(
            username=username, email="admin@example.com", password=password
        )
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"Created superuser: {username} / {password}"))

    def create_organization(self, name: str) -> Organization:
        # pylint: disable=no-member
        organization, created = Organization.objects.get_or_create(name=name)
        if not created:
            self.stdout.write(self.style.WARNING(f"Organization '{name}' already exists"))
        return organization

    def create_console_user(
        self,
        username: str,
        organization: Organization,
        password: str,
        is_org_admin: bool = False,
        is_activation_key_admin: bool = False,
    ):
        """Create a Django user with a console profile."""
        user = User.objects.filter(username=username).first()
        if user:
            # pylint: disable=no-member
            self.stdout.write(self.style.WARNING(f"User '{username}' already exists"))
        else:
            user = User.objects.create_user(username=username, password=password)
            # pylint: disable=no-member
            self.stdout.write(self.style.SUCCESS(f"Created user: {username} / {password}"))

        # pylint: disable=no-member
        UserProfile.objects.update_or_create(
            user=user,
            defaults={
                "organization": organization,
                "is_org_admin": is_org_admin,
                "is_activation_key_admin": is_activation_key_admin,
            },
        )
        return user

    def create_server_groups(self, organization: Organization, key_admin):
        """Create the demo server groups; key_admin administers some of them."""
        groups = []
        for name, description, administered in DEMO_GROUPS:
            # pylint: disable=no-member
            group, created = ServerGroupModel.objects.get_or_create(
                organization=organization, name=name, defaults={"description": description}
            )
            if administered:
                group.admins.add(key_admin)
            if created:
                self.stdout.write(self.style.SUCCESS(f"Created server group: {name}"))
            groups.append(group)
        return groups

    async def create_activation_key(self, organization: Organization, groups) -> ActivationKey:
        """Create an activation key holding every demo server group."""
        repository = DjangoActivationKeyRepository()
        key = f"{organization.id}-demo"

        # pylint: disable=no-member
        existing = await ActivationKeyModel.objects.filter(key=key).afirst()
        if existing:
            self.stdout.write(self.style.WARNING(f"Activation key '{key}' already exists"))
            return await repository.find_by_id(existing.id)

        activation_key = ActivationKey.create(
            org_id=organization.id,
            description="Demo provisioning key",
            key=key,
            server_group_ids=[group.id for group in groups],
        )
        activation_key = await repository.save(activation_key)
        self.stdout.write(self.style.SUCCESS(f"Created activation key: {activation_key.key}"))
        return activation_key

    def create_api_key(self, user) -> ApiKey:
        """Create an API key for the user."""
        # pylint: disable=no-member
        api_key = ApiKey.objects.create(user=user)
        self.stdout.write(
            self.style.WARNING("Save this API key - it cannot be retrieved later!")
        )
        return api_key

    def print_summary(self, organization, activation_key: ActivationKey, api_key: ApiKey):
        """Print summary of created demo data."""
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS("\n" + "=" * 60))
        self.stdout.write(self.style.SUCCESS("Demo Data Summary"))
        self.stdout.write(self.style.SUCCESS("=" * 60))

        self.stdout.write(f"\nOrganization: {organization.name} (id {organization.id})")
        self.stdout.write("Users: orgadmin (org admin), keyadmin (activation key admin)")

        self.stdout.write("\nActivation Key:")
        self.stdout.write(f"   Key: {activation_key.key}")
        self.stdout.write(f"   Token id: {activation_key.id}")
        self.stdout.write(
            f"   Console: http://localhost:8000/activation-keys/groups/?tid={activation_key.id}"
        )

        raw_key = getattr(api_key, "_raw_key", None)
        self.stdout.write("\nAPI Key (orgadmin):")
        self.stdout.write(f"   {raw_key}")

        self.stdout.write("\nExample API Request:")
        self.stdout.write(
            "   curl -X POST "
            f"http://localhost:8000/api/v1/activation-keys/{activation_key.id}/server-groups/remove \\"
        )
        self.stdout.write(f'     -H "X-API-Key: {raw_key}" \\')
        self.stdout.write('     -H "Content-Type: application/json" \\')
        self.stdout.write('     -d \'{"server_group_ids": [1]}\'')

        self.stdout.write(self.style.SUCCESS("\n" + "=" * 60 + "\n"))
