"""
Brand DTOs for API responses.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from brands.domain.brand import Brand


@dataclass
class BrandDTO:
    """DTO for brand information."""

    id: uuid.UUID
    name: str
    slug: str
    description: Optional[str]
    logo: Optional[str]
    website: Optional[str]
    product_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, brand: Brand) -> "BrandDTO":
        """Build the DTO from a domain brand."""
        return cls(
            id=brand.id,
            name=brand.name,
            slug=str(brand.slug),
            description=brand.description,
            logo=brand.logo,
            website=brand.website,
            product_count=brand.product_count,
            created_at=brand.created_at,
            updated_at=brand.updated_at,
        )


@dataclass
class BrandOptionDTO:
    """Id and name pair for select inputs and lookup maps."""

    id: uuid.UUID
    name: str
