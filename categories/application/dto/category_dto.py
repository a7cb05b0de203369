"""
Category DTOs for API responses.
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from categories.domain.category import Category


@dataclass
class CategoryRefDTO:
    """Id and name of a related category."""

    id: uuid.UUID
    name: str


@dataclass
class CategoryDTO:
    """DTO for category information."""

    id: uuid.UUID
    name: str
    slug: str
    description: Optional[str]
    image: Optional[str]
    parent_id: Optional[uuid.UUID]
    parent: Optional[CategoryRefDTO]
    product_count: int
    created_at: datetime
    updated_at: datetime
    children: List[CategoryRefDTO] = field(default_factory=list)

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryDTO":
        """Build the DTO from a domain category."""
        return cls(
            id=category.id,
            name=category.name,
            slug=str(category.slug),
            description=category.description,
            image=category.image,
            parent_id=category.parent_id,
            parent=(
                CategoryRefDTO(id=category.parent.id, name=category.parent.name)
                if category.parent
                else None
            ),
            product_count=category.product_count,
            created_at=category.created_at,
            updated_at=category.updated_at,
            children=[CategoryRefDTO(id=child.id, name=child.name) for child in category.children],
        )
