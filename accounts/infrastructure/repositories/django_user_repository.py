"""
Django implementation of UserRepository port.
"""

from typing import Optional

from asgiref.sync import sync_to_async

from accounts.domain.user import ConsoleUser, Role
from accounts.infrastructure.models import UserProfile
from accounts.ports.user_repository import UserRepository


class DjangoUserRepository(UserRepository):
    """Django ORM implementation of UserRepository."""

    def _to_domain(self, profile: UserProfile) -> ConsoleUser:
        """
        Convert a user profile to a domain entity.

        Args:
            profile: UserProfile model with its user loaded

        Returns:
            ConsoleUser domain entity
        """
        roles = []
        if profile.is_org_admin:
            roles.append(Role.ORG_ADMIN)
        if profile.is_activation_key_admin:
            roles.append(Role.ACTIVATION_KEY_ADMIN)

        return ConsoleUser.create(
            user_id=profile.user_id,
            username=profile.user.username,
            org_id=profile.organization_id,
            roles=roles,
        )

    async def find_by_id(self, user_id: int) -> Optional[ConsoleUser]:
        """
        Find a console user by Django user id.

        Args:
            user_id: User primary key

        Returns:
            ConsoleUser entity or None if the user has no console profile
        """
        try:
            # pylint: disable=no-member
            profile = await sync_to_async(
                UserProfile.objects.select_related("user").get
            )(user_id=user_id)
            return self._to_domain(profile)
        except UserProfile.DoesNotExist:  # pylint: disable=no-member
            return None
