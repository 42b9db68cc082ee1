"""
Organization, user profile and API key models.
"""

import hashlib
import secrets
import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone


class Organization(models.Model):
    """
    An organization owns activation keys and server groups.
    Users only ever see objects of their own organization.
    """

    name = models.CharField(max_length=128, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "organizations"
        ordering = ["name"]

    def __str__(self):
        return self.name


class UserProfile(models.Model):
    """
    Console profile of a Django user: organization membership and roles.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="console_profile",
    )
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name="members",
    )
    is_org_admin = models.BooleanField(default=False)
    is_activation_key_admin = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "user_profiles"
        ordering = ["user__username"]

    def __str__(self):
        return f"{self.user.username} ({self.organization.name})"


class ApiKey(models.Model):
    """
    API keys for authenticating a console user against the JSON API.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="api_keys",
    )
    key_prefix = models.CharField(max_length=8, editable=False)
    key_hash = models.CharField(max_length=64, editable=False, db_index=True)
    expires_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    last_used_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "api_keys"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.user.username} - {self.key_prefix}..."

    @staticmethod
    def hash_key(raw_key: str) -> str:
        """Return the SHA-256 hex digest stored for a raw key."""
        return hashlib.sha256(raw_key.encode()).hexdigest()

    def save(self, *args, **kwargs):
        """Generate API key on first save."""
        if not self.key_hash:
            raw_key = secrets.token_urlsafe(32)
            self.key_prefix = raw_key[:8]
            self.key_hash = self.hash_key(raw_key)
            # Only available on the instance that created the key
            self._raw_key = raw_key
        super().save(*args, **kwargs)

    def verify_key(self, raw_key: str) -> bool:
        """
        Verify a raw API key against the stored hash.

        Args:
            raw_key: The raw API key to verify

        Returns:
            True if key matches, False otherwise
        """
        return secrets.compare_digest(self.key_hash, self.hash_key(raw_key))

    def is_valid(self) -> bool:
        """
        Check if the API key is still valid.

        Returns:
            True if key is valid, False if expired
        """
        if self.expires_at and self.expires_at < timezone.now():
            return False
        return True

    def mark_used(self) -> None:
        """Record the time of the latest authenticated request."""
        self.last_used_at = timezone.now()
        # pylint: disable=no-member
        ApiKey.objects.filter(id=self.id).update(last_used_at=self.last_used_at)
