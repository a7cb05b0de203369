"""
Pytest configuration and shared fixtures.
"""

import uuid
from dataclasses import replace
from decimal import Decimal
from typing import Dict, List, Optional

import pytest
from asgiref.sync import async_to_sync
from django.core.cache import cache

from accounts.infrastructure.repositories.django_user_repository import DjangoUserRepository
from brands.domain.brand import Brand
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from brands.ports.brand_repository import BrandRepository
from categories.domain.category import Category
from categories.infrastructure.repositories.django_category_repository import (
    DjangoCategoryRepository,
)
from categories.ports.category_repository import CategoryRepository
from core.domain.exceptions import ProductHasOrdersError
from core.domain.value_objects import ProductType
from products.domain.product import Product, ProductDetails
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)
from products.ports.product_repository import ProductRepository


class InMemoryBrandRepository(BrandRepository):
    """BrandRepository kept in a dict, for handler tests."""

    def __init__(self):
        self.brands: Dict[uuid.UUID, Brand] = {}
        self.in_use: set = set()

    async def save(self, brand: Brand) -> Brand:
        self.brands[brand.id] = brand
        return brand

    async def find_by_id(self, brand_id: uuid.UUID) -> Optional[Brand]:
        return self.brands.get(brand_id)

    async def find_by_slug(self, slug: str) -> Optional[Brand]:
        return next((b for b in self.brands.values() if str(b.slug) == slug), None)

    async def slug_taken(self, slug: str, exclude_id: Optional[uuid.UUID] = None) -> bool:
        return any(str(b.slug) == slug and b.id != exclude_id for b in self.brands.values())

    async def exists(self, brand_id: uuid.UUID) -> bool:
        return brand_id in self.brands

    async def has_products(self, brand_id: uuid.UUID) -> bool:
        return brand_id in self.in_use

    async def delete(self, brand_id: uuid.UUID) -> None:
        self.brands.pop(brand_id, None)

    async def list_all(self) -> List[Brand]:
        return sorted(self.brands.values(), key=lambda b: b.created_at, reverse=True)


class InMemoryCategoryRepository(CategoryRepository):
    """CategoryRepository kept in a dict, for handler tests."""

    def __init__(self):
        self.categories: Dict[uuid.UUID, Category] = {}
        self.in_use: set = set()

    async def save(self, category: Category) -> Category:
        self.categories[category.id] = category
        return category

    async def find_by_id(self, category_id: uuid.UUID) -> Optional[Category]:
        return self.categories.get(category_id)

    async def slug_taken(self, slug: str, exclude_id: Optional[uuid.UUID] = None) -> bool:
        return any(
            str(c.slug) == slug and c.id != exclude_id for c in self.categories.values()
        )

    async def exists(self, category_id: uuid.UUID) -> bool:
        return category_id in self.categories

    async def ancestor_ids(self, category_id: uuid.UUID) -> List[uuid.UUID]:
        chain = []
        current = category_id
        while current is not None and current not in chain:
            chain.append(current)
            category = self.categories.get(current)
            current = category.parent_id if category else None
        return chain

    async def has_products(self, category_id: uuid.UUID) -> bool:
        return category_id in self.in_use

    async def delete(self, category_id: uuid.UUID) -> None:
        self.categories.pop(category_id, None)
        for child in list(self.categories.values()):
            if child.parent_id == category_id:
                self.categories[child.id] = replace(child, parent_id=None)

    async def list_all(self) -> List[Category]:
        return sorted(self.categories.values(), key=lambda c: c.created_at, reverse=True)


class InMemoryProductRepository(ProductRepository):
    """ProductRepository kept in a dict, for handler tests."""

    def __init__(self):
        self.products: Dict[uuid.UUID, Product] = {}
        self.ordered: set = set()
        self.cart_items: Dict[uuid.UUID, int] = {}

    async def save(self, product: Product) -> Product:
        self.products[product.id] = product
        return product

    async def find_by_id(self, product_id: uuid.UUID) -> Optional[Product]:
        return self.products.get(product_id)

    async def find_by_slug(self, slug: str) -> Optional[Product]:
        return next((p for p in self.products.values() if str(p.slug) == slug), None)

    async def slug_taken(self, slug: str, exclude_id: Optional[uuid.UUID] = None) -> bool:
        return any(str(p.slug) == slug and p.id != exclude_id for p in self.products.values())

    async def has_order_items(self, product_id: uuid.UUID) -> bool:
        return product_id in self.ordered

    async def delete_with_cart_items(self, product_id: uuid.UUID) -> int:
        if product_id in self.ordered:
            raise ProductHasOrdersError()
        self.products.pop(product_id, None)
        return self.cart_items.pop(product_id, 0)

    async def list_all(self) -> List[Product]:
        return sorted(self.products.values(), key=lambda p: p.created_at, reverse=True)


@pytest.fixture(autouse=True)
def clear_cache():
    """Start every test with empty catalog listings and rate-limit counters."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def brand_repository():
    """Fixture for BrandRepository."""
    return DjangoBrandRepository()


@pytest.fixture
def category_repository():
    """Fixture for CategoryRepository."""
    return DjangoCategoryRepository()


@pytest.fixture
def product_repository():
    """Fixture for ProductRepository."""
    return DjangoProductRepository()


@pytest.fixture
def user_repository():
    """Fixture for UserRepository."""
    return DjangoUserRepository()


@pytest.fixture
def fake_brand_repository():
    """Fixture for an in-memory BrandRepository."""
    return InMemoryBrandRepository()


@pytest.fixture
def fake_category_repository():
    """Fixture for an in-memory CategoryRepository."""
    return InMemoryCategoryRepository()


@pytest.fixture
def fake_product_repository():
    """Fixture for an in-memory ProductRepository."""
    return InMemoryProductRepository()


def product_details(category_id: uuid.UUID, brand_id: uuid.UUID, **overrides) -> ProductDetails:
    """Valid ProductDetails with the given overrides."""
    values = {
        "name": "iPhone 15 Pro",
        "type": ProductType.MOBILE_PHONE,
        "category_id": category_id,
        "brand_id": brand_id,
        "price": Decimal("999.00"),
        "stock": 10,
    }
    values.update(overrides)
    return ProductDetails(**values)


@pytest.fixture
def make_details():
    """Factory fixture for ProductDetails."""
    return product_details


@pytest.fixture
def sample_brand():
    """Fixture for a sample Brand entity."""
    return Brand.create(name="Apple", website="https://apple.com")


@pytest.fixture
def sample_category():
    """Fixture for a sample Category entity."""
    return Category.create(name="Smartphones")


@pytest.fixture
def db_brand(db, brand_repository):
    """Fixture for a Brand saved in database."""
    unique_id = uuid.uuid4().hex[:8]
    return async_to_sync(brand_repository.save)(Brand.create(name=f"Brand {unique_id}"))


@pytest.fixture
def db_category(db, category_repository):
    """Fixture for a Category saved in database."""
    unique_id = uuid.uuid4().hex[:8]
    return async_to_sync(category_repository.save)(Category.create(name=f"Category {unique_id}"))


@pytest.fixture
def make_db_product(db, db_brand, db_category, product_repository):
    """Factory fixture saving products under db_brand and db_category."""

    def make(**overrides) -> Product:
        product = Product.create(product_details(db_category.id, db_brand.id, **overrides))
        return async_to_sync(product_repository.save)(product)

    return make


@pytest.fixture
def db_product(make_db_product):
    """Fixture for a Product saved in database."""
    return make_db_product()


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def admin_user(db):
    """Fixture for an administrator account."""
    from accounts.infrastructure.models import User

    return User.objects.create_superuser(email="admin@example.com", password="Str0ng-Passw0rd!")


@pytest.fixture
def shopper_user(db):
    """Fixture for a shopper account."""
    from accounts.infrastructure.models import User

    return User.objects.create_user(
        email="shopper@example.com",
        password="Str0ng-Passw0rd!",
        first_name="Jane",
        last_name="Doe",
    )


@pytest.fixture
def admin_client(admin_user):
    """API client signed in as an administrator."""
    from rest_framework.test import APIClient

    client = APIClient()
    client.force_login(admin_user)
    return client


@pytest.fixture
def shopper_client(shopper_user):
    """API client signed in as a shopper."""
    from rest_framework.test import APIClient

    client = APIClient()
    client.force_login(shopper_user)
    return client
