"""
Product DTOs for API responses.
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from products.domain.product import Product, ProductRef


@dataclass
class ProductRefDTO:
    """Category or brand a product points at."""

    id: uuid.UUID
    name: str
    slug: str

    @classmethod
    def from_ref(cls, ref: Optional[ProductRef]) -> Optional["ProductRefDTO"]:
        """Build the DTO from a domain reference."""
        if ref is None:
            return None
        return cls(id=ref.id, name=ref.name, slug=ref.slug)


@dataclass
class ProductDTO:
    """DTO for product information, with computed pricing figures."""

    id: uuid.UUID
    name: str
    slug: str
    type: str
    category_id: uuid.UUID
    brand_id: uuid.UUID
    category: Optional[ProductRefDTO]
    brand: Optional[ProductRefDTO]
    price: Decimal
    original_price: Optional[Decimal]
    cost_price: Optional[Decimal]
    discount: Decimal
    discount_percentage: float
    savings: float
    stock: int
    low_stock_threshold: int
    is_low_stock: bool
    description: Optional[str]
    short_description: Optional[str]
    thumbnail: Optional[str]
    weight: Optional[Decimal]
    dimensions: Optional[str]
    color: Optional[str]
    condition: str
    warranty_months: int
    is_available: bool
    is_featured: bool
    is_pre_owned: bool
    specifications: Optional[Dict[str, Any]]
    meta_title: Optional[str]
    meta_description: Optional[str]
    created_at: datetime
    updated_at: datetime
    images: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)

    @classmethod
    def from_entity(cls, product: Product) -> "ProductDTO":
        """Build the DTO from a domain product."""
        return cls(
            id=product.id,
            name=product.name,
            slug=str(product.slug),
            type=product.type.value,
            category_id=product.category_id,
            brand_id=product.brand_id,
            category=ProductRefDTO.from_ref(product.category),
            brand=ProductRefDTO.from_ref(product.brand),
            price=product.price,
            original_price=product.original_price,
            cost_price=product.cost_price,
            discount=product.discount,
            discount_percentage=product.discount_percentage,
            savings=product.savings,
            stock=product.stock,
            low_stock_threshold=product.low_stock_threshold,
            is_low_stock=product.is_low_stock,
            description=product.description,
            short_description=product.short_description,
            thumbnail=product.thumbnail,
            weight=product.weight,
            dimensions=product.dimensions,
            color=product.color,
            condition=product.condition.value,
            warranty_months=product.warranty_months,
            is_available=product.is_available,
            is_featured=product.is_featured,
            is_pre_owned=product.is_pre_owned,
            specifications=product.specifications,
            meta_title=product.meta_title,
            meta_description=product.meta_description,
            created_at=product.created_at,
            updated_at=product.updated_at,
            images=list(product.images),
            keywords=list(product.keywords),
        )


@dataclass
class OptionDTO:
    """Id and name pair used to label product rows."""

    id: uuid.UUID
    name: str


@dataclass
class ProductOverviewDTO:
    """Products plus the category and brand lookups the dashboard table needs."""

    products: List[ProductDTO] = field(default_factory=list)
    categories: List[OptionDTO] = field(default_factory=list)
    brands: List[OptionDTO] = field(default_factory=list)
    error: Optional[str] = None
