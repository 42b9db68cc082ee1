"""
Django admin configuration for server_groups app.
"""

from django.contrib import admin

from server_groups.infrastructure.models import ServerGroup


@admin.register(ServerGroup)
class ServerGroupAdmin(admin.ModelAdmin):
    """Admin interface for ServerGroup model."""

    list_display = ["name", "organization", "admin_count", "created_at"]
    list_filter = ["organization"]
    search_fields = ["name", "description", "organization__name"]
    filter_horizontal = ["admins"]
    readonly_fields = ["created_at", "updated_at"]

    def admin_count(self, obj):
        """Display number of associated group admins."""
        return obj.admins.count()

    admin_count.short_description = "Admins"

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("organization").prefetch_related("admins")
