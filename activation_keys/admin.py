"""
Django admin configuration for activation_keys app.
"""

from django.contrib import admin
from django.utils.html import format_html

from activation_keys.infrastructure.models import ActivationKey


@admin.register(ActivationKey)
class ActivationKeyAdmin(admin.ModelAdmin):
    """Admin interface for ActivationKey model."""

    list_display = [
        "key",
        "organization",
        "description",
        "server_group_count",
        "disabled_display",
        "created_at",
    ]
    list_filter = ["disabled", "organization", "created_at"]
    search_fields = ["key", "description", "organization__name"]
    filter_horizontal = ["server_groups"]
    readonly_fields = ["id", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "organization", "key", "description", "disabled"),
            },
        ),
        (
            "Registration",
            {
                "fields": ("server_groups", "usage_limit"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    def server_group_count(self, obj):
        """Display number of server groups attached to the key."""
        return obj.server_groups.count()

    server_group_count.short_description = "Server groups"

    def disabled_display(self, obj):
        """Display key status with color."""
        if obj.disabled:
            return format_html('<span style="color: red; font-weight: bold;">Disabled</span>')
        return format_html('<span style="color: green; font-weight: bold;">Enabled</span>')

    disabled_display.short_description = "Status"

    def get_queryset(self, request):
        """Optimize queryset."""
        return (
            super()
            .get_queryset(request)
            .select_related("organization")
            .prefetch_related("server_groups")
        )
