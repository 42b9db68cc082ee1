from server_groups.infrastructure.models import ServerGroup  # noqa: F401
