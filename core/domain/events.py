"""
Catalog domain events and the bus contract.

Handlers publish an event after every successful brand, category or
product write; side effects (audit log, listing cache, image cleanup)
subscribe to them instead of being called from the handlers.
"""

import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class DomainEvent(ABC):
    """
    Something that happened to one catalog record.

    Subclasses set their payload attributes and override ``payload``;
    id, timestamp and type name are common to all events.
    """

    def __init__(self, aggregate_id: Any, occurred_at: Optional[datetime] = None):
        """
        Args:
            aggregate_id: Id of the brand, category or product
            occurred_at: Defaults to now (UTC)
        """
        self.event_id = uuid.uuid4()
        self.aggregate_id = str(aggregate_id)
        self.occurred_at = occurred_at or datetime.now(timezone.utc)

    @property
    def event_type(self) -> str:
        return type(self).__name__

    def payload(self) -> Dict[str, Any]:
        """Fields specific to the event type."""
        return {}

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready form used by the audit log."""
        return {
            "event_type": self.event_type,
            "event_id": str(self.event_id),
            "aggregate_id": self.aggregate_id,
            "occurred_at": self.occurred_at.isoformat(),
            **self.payload(),
        }


class EventHandler(ABC):
    """Reacts to published events."""

    @abstractmethod
    async def handle(self, event: DomainEvent) -> None:
        pass


class EventBus(ABC):
    """Routes published events to the handlers subscribed to their type."""

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        pass

    @abstractmethod
    def subscribe(self, event_type: type, handler: EventHandler) -> None:
        pass
