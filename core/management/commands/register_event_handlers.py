"""
Django management command to register event handlers.

Registration also happens in the project AppConfig; the command is
for processes that bypass it.
"""
import logging

from django.core.management.base import BaseCommand

from core.infrastructure.event_handlers import register_event_handlers
from core.infrastructure.events import event_bus
from activation_keys.domain.events import ServerGroupsAddedToKey, ServerGroupsRemovedFromKey

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Command to register event handlers."""

    help = "Register event handlers with the event bus"

    def handle(self, *args, **options):
        """Execute the command."""
        register_event_handlers()
        for event_type in (ServerGroupsRemovedFromKey, ServerGroupsAddedToKey):
            handlers = ", ".join(
                handler.__class__.__name__ for handler in event_bus.handlers_for(event_type)
            )
            self.stdout.write(f"{event_type.__name__}: {handlers}")
        self.stdout.write(self.style.SUCCESS("Event handlers registered successfully"))
