"""
Category domain events.
"""
import uuid
from typing import Any, Dict, Optional

from core.domain.events import DomainEvent


class CategoryEvent(DomainEvent):
    """Base for events about one category."""

    def __init__(
        self,
        category_id: uuid.UUID,
        name: str,
        slug: str,
        parent_id: Optional[uuid.UUID] = None,
    ):
        """
        Args:
            category_id: Category UUID
            name: Category name
            slug: Category slug
            parent_id: Parent category UUID, if any
        """
        super().__init__(aggregate_id=category_id)
        self.category_id = category_id
        self.name = name
        self.slug = slug
        self.parent_id = parent_id

    def payload(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "slug": self.slug,
            "parent_id": str(self.parent_id) if self.parent_id else None,
        }


class CategoryCreated(CategoryEvent):
    """Event raised when a category is created."""


class CategoryUpdated(CategoryEvent):
    """Event raised when a category is edited."""


class CategoryDeleted(CategoryEvent):
    """Event raised when a category is deleted."""
