"""
Django implementation of ActivationKeyRepository port.

This adapter converts between domain entities and Django ORM models.
"""

from typing import Callable, Optional, Tuple

from asgiref.sync import sync_to_async
from django.db import transaction

from activation_keys.domain.activation_key import ActivationKey
from activation_keys.infrastructure.models import ActivationKey as ActivationKeyModel
from activation_keys.ports.activation_key_repository import ActivationKeyRepository
from core.domain.exceptions import ActivationKeyNotFoundError


class DjangoActivationKeyRepository(ActivationKeyRepository):
    """
    Django ORM implementation of ActivationKeyRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Writes server group changes as row additions and removals
    """

    def _to_domain(self, model: ActivationKeyModel) -> ActivationKey:
        """
        Convert Django model to domain entity.

        Args:
            model: Django ActivationKey model

        Returns:
            ActivationKey domain entity
        """
        group_ids = model.server_groups.values_list("id", flat=True)
        return ActivationKey(
            id=model.id,
            key=model.key,
            org_id=model.organization_id,
            description=model.description,
            server_group_ids=frozenset(group_ids),
            usage_limit=model.usage_limit,
            disabled=model.disabled,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _save(self, activation_key: ActivationKey) -> ActivationKey:
        with transaction.atomic():
            if activation_key.id is None:
                # pylint: disable=no-member
                model = ActivationKeyModel(organization_id=activation_key.org_id)
            else:
                # pylint: disable=no-member
                model = ActivationKeyModel.objects.select_for_update().get(id=activation_key.id)

            model.key = activation_key.key
            model.description = activation_key.description
            model.usage_limit = activation_key.usage_limit
            model.disabled = activation_key.disabled
            model.full_clean(exclude=["server_groups"], validate_unique=False)
            model.save()
            model.server_groups.set(sorted(activation_key.server_group_ids))
        return self._to_domain(model)

    async def save(self, activation_key: ActivationKey) -> ActivationKey:
        """
        Save an activation key entity, including its server groups.

        Args:
            activation_key: ActivationKey entity to save

        Returns:
            Saved activation key entity
        """
        return await sync_to_async(self._save)(activation_key)

    def _update_server_groups(
        self,
        activation_key_id: int,
        change: Callable[[ActivationKey], ActivationKey],
    ) -> Tuple[ActivationKey, ActivationKey]:
        with transaction.atomic():
            # pylint: disable=no-member
            model = (
                ActivationKeyModel.objects.select_for_update()
                .filter(id=activation_key_id)
                .first()
            )
            if model is None:
                raise ActivationKeyNotFoundError(f"Activation key {activation_key_id} not found")

            current = self._to_domain(model)
            updated = change(current)
            removed = current.server_group_ids - updated.server_group_ids
            added = updated.server_group_ids - current.server_group_ids
            if removed:
                model.server_groups.remove(*sorted(removed))
            if added:
                model.server_groups.add(*sorted(added))
            if removed or added:
                model.save(update_fields=["updated_at"])
            return current, self._to_domain(model)

    async def update_server_groups(
        self,
        activation_key_id: int,
        change: Callable[[ActivationKey], ActivationKey],
    ) -> Tuple[ActivationKey, ActivationKey]:
        """
        Apply a change to the key's current server groups under a row lock.

        Only the groups the change added or removed are written; groups
        changed by other requests since the key was last read are kept.

        Args:
            activation_key_id: Activation key token id
            change: Returns the key with its new server groups

        Returns:
            The key before and after the change
        """
        return await sync_to_async(self._update_server_groups)(activation_key_id, change)

    async def find_by_id(self, activation_key_id: int) -> Optional[ActivationKey]:
        """
        Find an activation key by token id.

        Args:
            activation_key_id: Activation key token id

        Returns:
            ActivationKey entity or None if not found
        """
        return await sync_to_async(self._find_one)(id=activation_key_id)

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
        return await sync_to_async(self._find_one)(
            id=activation_key_id, organization_id=org_id
        )

    def _find_one(self, **filters) -> Optional[ActivationKey]:
        # pylint: disable=no-member
        model = ActivationKeyModel.objects.filter(**filters).first()
        return self._to_domain(model) if model else None
