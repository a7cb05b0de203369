"""
Django management command to register event handlers.

Handlers are registered on app start; this command re-runs the
registration and lists what each catalog event is wired to.
"""
import logging

from django.core.management.base import BaseCommand

from core.infrastructure.event_handlers import EVENT_SECTIONS, register_event_handlers
from core.infrastructure.events import event_bus

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Command to register event handlers."""

    help = "Register event handlers with the event bus"

    def handle(self, *args, **options):
        """Execute the command."""
        register_event_handlers()
        for event_type in EVENT_SECTIONS:
            names = ", ".join(
                handler.__class__.__name__ for handler in event_bus.handlers_for(event_type)
            )
            self.stdout.write(f"{event_type.__name__}: {names}")
        self.stdout.write(self.style.SUCCESS("Event handlers registered successfully"))
