"""
Server group Django ORM model.

Domain entities are in server_groups.domain.server_group.
"""

from django.conf import settings
from django.db import models


class ServerGroup(models.Model):
    """
    A group of managed systems owned by an organization.
    """

    organization = models.ForeignKey(
        "accounts.Organization",
        on_delete=models.CASCADE,
        related_name="server_groups",
    )
    name = models.CharField(max_length=64)
    description = models.TextField(blank=True, default="")
    admins = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name="administered_server_groups",
        help_text="Users allowed to administer this group",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "server_groups"
        ordering = ["name"]
        constraints = [
            models.UniqueConstraint(
                fields=["organization", "name"],
                name="unique_server_group_name_per_org",
            ),
        ]

    def clean(self):
        """Validate server group fields."""
        from django.core.exceptions import ValidationError

        if not self.name or len(self.name.strip()) == 0:
            raise ValidationError("Server group name cannot be empty")

    def __str__(self):
        return self.name
