"""
Brand domain events.
"""
import uuid
from typing import Any, Dict

from core.domain.events import DomainEvent


class BrandEvent(DomainEvent):
    """Base for events about one brand."""

    def __init__(self, brand_id: uuid.UUID, name: str, slug: str):
        """
        Args:
            brand_id: Brand UUID
            name: Brand name
            slug: Brand slug
        """
        super().__init__(aggregate_id=brand_id)
        self.brand_id = brand_id
        self.name = name
        self.slug = slug

    def payload(self) -> Dict[str, Any]:
        return {"name": self.name, "slug": self.slug}


class BrandCreated(BrandEvent):
    """Event raised when a brand is created."""


class BrandUpdated(BrandEvent):
    """Event raised when a brand is edited."""


class BrandDeleted(BrandEvent):
    """Event raised when a brand is deleted."""
