"""
App configuration for Store Admin Service.
"""
import logging
import os
import sys

from django.apps import AppConfig

logger = logging.getLogger(__name__)

# Management commands that never serve traffic
SKIP_SETUP_COMMANDS = {
    "migrate",
    "makemigrations",
    "collectstatic",
    "shell",
    "check",
    "createsuperuser",
}


class StoreAdminServiceConfig(AppConfig):
    """App configuration for StoreAdminService."""

    name = "StoreAdminService"
    verbose_name = "Store Admin Service"

    def ready(self):
        """Wire event handlers and tracing once apps are loaded."""
        from core.infrastructure.event_handlers import register_event_handlers

        # Event handlers are needed everywhere, including tests
        register_event_handlers()

        if len(sys.argv) > 1 and sys.argv[1] in SKIP_SETUP_COMMANDS:
            return

        # Django's reloader runs code twice
        if os.environ.get("RUN_MAIN") == "false":
            return

        from core.instrumentation import setup_opentelemetry

        setup_opentelemetry()
