"""
App configuration for Provisioning Console.
"""

import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class ProvisioningConsoleConfig(AppConfig):
    """App configuration for ProvisioningConsole."""

    name = "ProvisioningConsole"
    verbose_name = "Provisioning Console"

    def ready(self):
        """Called when Django starts."""
        import os
        import sys

        # Skip for management commands that never serve requests
        if len(sys.argv) > 1 and sys.argv[1] in [
            "migrate",
            "makemigrations",
            "collectstatic",
            "shell",
            "check",
            "createsuperuser",
        ]:
            return

        # Django's autoreloader runs the project twice
        if os.environ.get("RUN_MAIN") == "false":
            return

        if getattr(self, "_initialized", False):
            return

        try:
            self.register_event_handlers()
            if getattr(settings, "OBSERVABILITY_ENABLED", False):
                logger.info("Setting up observability...")
                self.setup_observability()
                logger.info("Observability setup complete")
            self._initialized = True
        except Exception as e:  # pylint: disable=broad-exception-caught
            # The console still serves requests without tracing
            logger.error(f"Error in AppConfig.ready(): {e}", exc_info=True)

    def setup_observability(self):
        """Setup tracing and the metrics endpoint."""
        from core.instrumentation import setup_opentelemetry

        setup_opentelemetry()

    def register_event_handlers(self):
        """Register event handlers after apps are ready."""
        from core.infrastructure.event_handlers import register_event_handlers as register

        register()
