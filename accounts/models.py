from accounts.infrastructure.models import ApiKey, Organization, UserProfile  # noqa: F401
