"""
Product domain entity.

A product is filed under one category and sold under one brand.
It contains business logic and is independent of infrastructure.
"""

import uuid
from dataclasses import dataclass, field, fields, replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple

from core.domain.pricing import calculate_discount_percentage, calculate_savings_amount
from core.domain.value_objects import ProductCondition, ProductType, Slug

MIN_PRICE = Decimal("0.01")
DEFAULT_LOW_STOCK_THRESHOLD = 5
DEFAULT_WARRANTY_MONTHS = 12


@dataclass(frozen=True)
class ProductRef:
    """Id, name and slug of the category or brand a product points at."""

    id: uuid.UUID
    name: str
    slug: str


@dataclass(frozen=True)
class ProductDetails:
    """
    Editable product data as submitted by the dashboard form.

    Everything except the identity, slug and timestamps.
    """

    name: str
    type: ProductType
    category_id: uuid.UUID
    brand_id: uuid.UUID
    price: Decimal
    stock: int = 0
    description: Optional[str] = None
    short_description: Optional[str] = None
    original_price: Optional[Decimal] = None
    cost_price: Optional[Decimal] = None
    thumbnail: Optional[str] = None
    images: Tuple[str, ...] = ()
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    discount: Decimal = Decimal("0")
    weight: Optional[Decimal] = None
    dimensions: Optional[str] = None
    color: Optional[str] = None
    condition: ProductCondition = ProductCondition.NEW
    warranty_months: int = DEFAULT_WARRANTY_MONTHS
    is_available: bool = True
    is_featured: bool = False
    is_pre_owned: bool = False
    specifications: Optional[Dict[str, Any]] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    keywords: Tuple[str, ...] = ()

    def as_fields(self) -> Dict[str, Any]:
        """Field values keyed by name, with blank strings turned into None."""
        values = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, str) and item.name != "name" and not value.strip():
                value = None
            values[item.name] = value
        values["name"] = self.name.strip()
        values["images"] = tuple(self.images or ())
        values["keywords"] = tuple(self.keywords or ())
        return values


@dataclass(frozen=True)
class Product:
    """
    Product domain entity.

    ``category`` and ``brand`` are read-side references filled in by the
    repository.
    """

    id: uuid.UUID
    name: str
    slug: Slug
    type: ProductType
    category_id: uuid.UUID
    brand_id: uuid.UUID
    price: Decimal
    stock: int
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    short_description: Optional[str] = None
    original_price: Optional[Decimal] = None
    cost_price: Optional[Decimal] = None
    thumbnail: Optional[str] = None
    images: Tuple[str, ...] = ()
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    discount: Decimal = Decimal("0")
    weight: Optional[Decimal] = None
    dimensions: Optional[str] = None
    color: Optional[str] = None
    condition: ProductCondition = ProductCondition.NEW
    warranty_months: int = DEFAULT_WARRANTY_MONTHS
    is_available: bool = True
    is_featured: bool = False
    is_pre_owned: bool = False
    specifications: Optional[Dict[str, Any]] = field(default=None, hash=False)
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    keywords: Tuple[str, ...] = ()
    category: Optional[ProductRef] = None
    brand: Optional[ProductRef] = None

    def __post_init__(self):
        """Validate product entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Product name cannot be empty")
        if len(self.name) > 255:
            raise ValueError("Product name too long")
        if self.price is None or Decimal(self.price) < MIN_PRICE:
            raise ValueError("Price must be at least 0.01")
        for name in ("original_price", "cost_price"):
            value = getattr(self, name)
            if value is not None and Decimal(value) < 0:
                raise ValueError(f"{name} cannot be negative")
        for name in ("stock", "low_stock_threshold", "warranty_months"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")
        if not Decimal("0") <= Decimal(self.discount) <= Decimal("100"):
            raise ValueError("Discount must be between 0 and 100")

    @classmethod
    def create(cls, details: ProductDetails, product_id: Optional[uuid.UUID] = None) -> "Product":
        """
        Create a new Product with a slug derived from its name.

        Args:
            details: Submitted product data
            product_id: Optional UUID (generated if not provided)

        Returns:
            Product entity instance
        """
        now = datetime.now(timezone.utc)
        return cls(
            id=product_id or uuid.uuid4(),
            slug=Slug.from_name(details.name),
            created_at=now,
            updated_at=now,
            **details.as_fields(),
        )

    def update(self, details: ProductDetails) -> "Product":
        """
        Return a copy with edited details and a slug regenerated from the name.

        Args:
            details: Submitted product data

        Returns:
            New Product instance
        """
        return replace(
            self,
            slug=Slug.from_name(details.name),
            updated_at=datetime.now(timezone.utc),
            category=None,
            brand=None,
            **details.as_fields(),
        )

    @property
    def discount_percentage(self) -> float:
        """Percentage off the original price."""
        return calculate_discount_percentage(self.original_price, self.price)

    @property
    def savings(self) -> float:
        """Amount saved against the original price."""
        return calculate_savings_amount(self.original_price, self.price)

    @property
    def is_low_stock(self) -> bool:
        """Whether stock has fallen to the low-stock threshold."""
        return self.stock <= self.low_stock_threshold

    @property
    def image_urls(self) -> Tuple[str, ...]:
        """Thumbnail and gallery URLs, without duplicates."""
        urls = []
        for url in (self.thumbnail, *self.images):
            if url and url not in urls:
                urls.append(url)
        return tuple(urls)
