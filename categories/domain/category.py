"""
Product category domain entity.

Categories form a tree through an optional parent.
"""

import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any, Optional, Tuple

from core.domain.exceptions import ParentCategoryNotFoundError
from core.domain.value_objects import Slug

# Select inputs send these when no parent is chosen
NO_PARENT_VALUES = ("", "none")


def clean_parent_id(value: Any) -> Optional[uuid.UUID]:
    """
    Normalize a parent id coming from a form.

    Args:
        value: UUID, UUID string, None, "" or "none"

    Returns:
        Parent UUID or None for a top-level category

    Raises:
        ParentCategoryNotFoundError: If the value is not a UUID
    """
    if value is None:
        return None
    if isinstance(value, uuid.UUID):
        return value
    text = str(value).strip()
    if text.lower() in NO_PARENT_VALUES:
        return None
    try:
        return uuid.UUID(text)
    except ValueError as e:
        raise ParentCategoryNotFoundError() from e


@dataclass(frozen=True)
class CategoryRef:
    """Id and name of a related category."""

    id: uuid.UUID
    name: str


@dataclass(frozen=True)
class Category:
    """
    Product category domain entity.

    ``parent``, ``children`` and ``product_count`` are read-side data
    filled in by the repository.
    """

    id: uuid.UUID
    name: str
    slug: Slug
    description: Optional[str]
    image: Optional[str]
    parent_id: Optional[uuid.UUID]
    created_at: datetime
    updated_at: datetime
    parent: Optional[CategoryRef] = None
    children: Tuple[CategoryRef, ...] = ()
    product_count: int = 0

    def __post_init__(self):
        """Validate category entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Category name cannot be empty")
        if len(self.name) > 255:
            raise ValueError("Category name too long")
        if self.parent_id is not None and self.parent_id == self.id:
            raise ValueError("A category cannot be its own parent")

    @classmethod
    def create(
        cls,
        name: str,
        description: Optional[str] = None,
        image: Optional[str] = None,
        parent_id: Optional[uuid.UUID] = None,
        category_id: Optional[uuid.UUID] = None,
    ) -> "Category":
        """
        Create a new Category with a slug derived from its name.

        Args:
            name: Category display name
            description: Optional description
            image: Optional image URL
            parent_id: Optional parent category
            category_id: Optional UUID (generated if not provided)

        Returns:
            Category entity instance
        """
        now = datetime.now(timezone.utc)
        return cls(
            id=category_id or uuid.uuid4(),
            name=name.strip(),
            slug=Slug.from_name(name),
            description=description or None,
            image=image or None,
            parent_id=parent_id,
            created_at=now,
            updated_at=now,
        )

    def update(
        self,
        name: str,
        slug: str,
        description: Optional[str] = None,
        image: Optional[str] = None,
        parent_id: Optional[uuid.UUID] = None,
    ) -> "Category":
        """
        Return a copy with edited details.

        Returns:
            New Category instance
        """
        return replace(
            self,
            name=name.strip(),
            slug=Slug(slug),
            description=description or None,
            image=image or None,
            parent_id=parent_id,
            updated_at=datetime.now(timezone.utc),
        )
