"""
Activation key Django ORM model.

This is the infrastructure layer model for activation keys.
Domain entities are in activation_keys.domain.activation_key.
"""

from django.db import models


class ActivationKey(models.Model):
    """
    A registration token. Systems registered with the key join
    the key's server groups.
    """

    organization = models.ForeignKey(
        "accounts.Organization",
        on_delete=models.CASCADE,
        related_name="activation_keys",
    )
    key = models.CharField(max_length=64, unique=True)
    description = models.CharField(max_length=255, blank=True, default="")
    server_groups = models.ManyToManyField(
        "server_groups.ServerGroup",
        blank=True,
        related_name="activation_keys",
    )
    usage_limit = models.PositiveIntegerField(
        null=True, blank=True, help_text="Maximum number of registrations"
    )
    disabled = models.BooleanField(default=False, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "activation_keys"
        ordering = ["key"]
        indexes = [
            models.Index(fields=["organization", "disabled"], name="actkey_org_disabled_idx"),
        ]

    def clean(self):
        """Validate activation key fields."""
        from django.core.exceptions import ValidationError

        if not self.key or len(self.key.strip()) == 0:
            raise ValidationError("Activation key cannot be empty")

    def __str__(self):
        return self.key
