"""
Unit tests for storefront product browsing.
"""
import uuid
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
import pytest_asyncio

from core.domain.exceptions import InvalidInputError
from products.application.handlers.storefront_handlers import BrowseProductsHandler
from products.application.queries.browse_products import BrowseProductsQuery
from products.domain.product import Product, ProductRef

APPLE = ProductRef(uuid.uuid4(), "Apple", "apple")
SAMSUNG = ProductRef(uuid.uuid4(), "Samsung", "samsung")
PHONES = ProductRef(uuid.uuid4(), "Smartphones", "smartphones")
TABLETS = ProductRef(uuid.uuid4(), "Tablets", "tablets")


@pytest_asyncio.fixture
async def shelf(fake_product_repository, make_details):
    """Four products across two brands and two categories."""
    now = datetime.now(timezone.utc)
    rows = [
        ("iPhone 15", APPLE, PHONES, "999.00", "1099.00", 4),
        ("iPad Air", APPLE, TABLETS, "599.00", None, 3),
        ("Galaxy S24", SAMSUNG, PHONES, "799.00", "1199.00", 2),
        ("Galaxy Tab", SAMSUNG, TABLETS, "449.00", "499.00", 1),
    ]
    for name, brand, category, price, original, age in rows:
        product = Product.create(
            make_details(
                category.id,
                brand.id,
                name=name,
                price=Decimal(price),
                original_price=Decimal(original) if original else None,
                description=f"{name} by {brand.name}",
            )
        )
        created = now - timedelta(days=age)
        await fake_product_repository.save(
            replace(product, brand=brand, category=category, created_at=created)
        )
    return BrowseProductsHandler(fake_product_repository)


def _names(page):
    return [row.name for row in page.items]


@pytest.mark.asyncio
class TestBrowseProductsHandler:
    """Tests for BrowseProductsHandler."""

    async def test_newest_first_by_default(self, shelf):
        """Test the default sort."""
        page = await shelf.handle(BrowseProductsQuery())
        assert _names(page) == ["Galaxy Tab", "Galaxy S24", "iPad Air", "iPhone 15"]

    async def test_sort_by_price(self, shelf):
        """Test both price sorts."""
        low = await shelf.handle(BrowseProductsQuery(sort="price-low"))
        high = await shelf.handle(BrowseProductsQuery(sort="price-high"))

        assert _names(low) == ["Galaxy Tab", "iPad Air", "Galaxy S24", "iPhone 15"]
        assert _names(high) == list(reversed(_names(low)))

    async def test_sort_by_name(self, shelf):
        """Test alphabetical sort ignores case."""
        page = await shelf.handle(BrowseProductsQuery(sort="name"))
        assert _names(page) == ["Galaxy S24", "Galaxy Tab", "iPad Air", "iPhone 15"]

    async def test_sort_by_discount(self, shelf):
        """Test biggest discount first."""
        page = await shelf.handle(BrowseProductsQuery(sort="discount"))
        assert _names(page)[0] == "Galaxy S24"
        assert _names(page)[-1] == "iPad Air"

    async def test_filter_by_brand_slug_and_category_id(self, shelf):
        """Test brand and category filters accept slugs or ids."""
        page = await shelf.handle(
            BrowseProductsQuery(brand="samsung", category=str(PHONES.id))
        )
        assert _names(page) == ["Galaxy S24"]

    async def test_price_range(self, shelf):
        """Test the price range is inclusive."""
        page = await shelf.handle(
            BrowseProductsQuery(min_price=Decimal("599.00"), max_price=Decimal("799.00"))
        )
        assert sorted(_names(page)) == ["Galaxy S24", "iPad Air"]

    async def test_search_description(self, shelf):
        """Test search covers descriptions and brand names."""
        page = await shelf.handle(BrowseProductsQuery(search="by apple"))
        assert sorted(_names(page)) == ["iPad Air", "iPhone 15"]

    async def test_pagination(self, shelf):
        """Test storefront paging."""
        page = await shelf.handle(BrowseProductsQuery(page=2, page_size=5))
        assert page.page == 1
        assert page.total_items == 4

    async def test_invalid_sort(self, shelf):
        """Test unknown sort options."""
        with pytest.raises(InvalidInputError, match="Sort must be one of"):
            await shelf.handle(BrowseProductsQuery(sort="popular"))

    async def test_inverted_price_range(self, shelf):
        """Test min price above max price."""
        with pytest.raises(InvalidInputError, match="Minimum price"):
            await shelf.handle(
                BrowseProductsQuery(min_price=Decimal("100"), max_price=Decimal("10"))
            )
