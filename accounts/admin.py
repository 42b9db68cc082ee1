"""
Django admin configuration for accounts app.
"""

from django.contrib import admin

from accounts.infrastructure.models import ApiKey, Organization, UserProfile


@admin.register(Organization)
class OrganizationAdmin(admin.ModelAdmin):
    """Admin interface for Organization model."""

    list_display = ["name", "member_count", "created_at"]
    search_fields = ["name"]
    readonly_fields = ["created_at", "updated_at"]

    def member_count(self, obj):
        """Display number of console users in the organization."""
        return obj.members.count()

    member_count.short_description = "Members"


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    """Admin interface for UserProfile model."""

    list_display = ["user", "organization", "is_org_admin", "is_activation_key_admin"]
    list_filter = ["organization", "is_org_admin", "is_activation_key_admin"]
    search_fields = ["user__username", "organization__name"]

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("user", "organization")


@admin.register(ApiKey)
class ApiKeyAdmin(admin.ModelAdmin):
    """Admin interface for ApiKey model."""

    list_display = ["user", "key_prefix", "expires_at", "last_used_at", "created_at"]
    search_fields = ["user__username", "key_prefix"]
    readonly_fields = ["id", "key_prefix", "created_at", "last_used_at"]
