"""
Brand domain entity.

A manufacturer or label products are sold under (e.g. Apple, Samsung).
It contains business logic and is independent of infrastructure.
"""

import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from core.domain.value_objects import Slug


@dataclass(frozen=True)
class Brand:
    """
    Brand domain entity.

    ``product_count`` is a read-side figure filled in by listings.
    """

    id: uuid.UUID
    name: str
    slug: Slug
    description: Optional[str]
    logo: Optional[str]
    website: Optional[str]
    created_at: datetime
    updated_at: datetime
    product_count: int = 0

    def __post_init__(self):
        """Validate brand entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Brand name cannot be empty")
        if len(self.name) > 255:
            raise ValueError("Brand name too long")

    @classmethod
    def create(
        cls,
        name: str,
        description: Optional[str] = None,
        logo: Optional[str] = None,
        website: Optional[str] = None,
        brand_id: Optional[uuid.UUID] = None,
    ) -> "Brand":
        """
        Create a new Brand entity with a slug derived from its name.

        Args:
            name: Brand display name
            description: Optional description
            logo: Optional logo image URL
            website: Optional website URL
            brand_id: Optional UUID (generated if not provided)

        Returns:
            Brand entity instance
        """
        now = datetime.now(timezone.utc)
        return cls(
            id=brand_id or uuid.uuid4(),
            name=name.strip(),
            slug=Slug.from_name(name),
            description=description or None,
            logo=logo or None,
            website=website or None,
            created_at=now,
            updated_at=now,
        )

    def update(
        self,
        name: str,
        slug: str,
        description: Optional[str] = None,
        logo: Optional[str] = None,
        website: Optional[str] = None,
    ) -> "Brand":
        """
        Return a copy with edited details.

        Args:
            name: New display name
            slug: New slug (edited separately from the name)
            description: New description
            logo: New logo URL
            website: New website URL

        Returns:
            New Brand instance
        """
        return replace(
            self,
            name=name.strip(),
            slug=Slug(slug),
            description=description or None,
            logo=logo or None,
            website=website or None,
            updated_at=datetime.now(timezone.utc),
        )
