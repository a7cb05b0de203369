"""
Unit tests for product handlers.
"""
import uuid
from dataclasses import replace
from decimal import Decimal

import pytest
import pytest_asyncio

from brands.domain.brand import Brand
from categories.domain.category import Category
from core.domain.exceptions import (
    BrandReferenceError,
    CategoryReferenceError,
    PersistenceError,
    ProductAlreadyExistsError,
    ProductHasOrdersError,
    ProductNotFoundError,
)
from core.domain.listing import ListingQuery
from products.application.commands.create_product import CreateProductCommand
from products.application.commands.delete_product import DeleteProductCommand
from products.application.commands.update_product import UpdateProductCommand
from products.application.handlers.product_handlers import (
    CreateProductHandler,
    DeleteProductHandler,
    GetProductHandler,
    GetProductOverviewHandler,
    ListProductsHandler,
    UpdateProductHandler,
)
from products.application.queries.list_products import ListProductsQuery
from products.domain.product import Product, ProductRef


@pytest_asyncio.fixture
async def catalog(fake_product_repository, fake_category_repository, fake_brand_repository):
    """Repositories holding one category and one brand."""
    category = await fake_category_repository.save(Category.create(name="Smartphones"))
    brand = await fake_brand_repository.save(Brand.create(name="Apple"))
    return {
        "products": fake_product_repository,
        "categories": fake_category_repository,
        "brands": fake_brand_repository,
        "category": category,
        "brand": brand,
    }


def _handler(cls, catalog):
    return cls(
        product_repository=catalog["products"],
        category_repository=catalog["categories"],
        brand_repository=catalog["brands"],
    )


def _details(catalog, make_details, **overrides):
    return make_details(catalog["category"].id, catalog["brand"].id, **overrides)


@pytest.mark.asyncio
class TestProductHandlers:
    """Tests for product command and query handlers."""

    async def test_create_product(self, catalog, make_details):
        """Test creating a product."""
        dto = await _handler(CreateProductHandler, catalog).handle(
            CreateProductCommand(details=_details(catalog, make_details))
        )

        assert dto.slug == "iphone-15-pro"
        assert dto.category_id == catalog["category"].id
        assert dto.is_low_stock is False

    async def test_create_duplicate_name(self, catalog, make_details):
        """Test product names map to unique slugs."""
        handler = _handler(CreateProductHandler, catalog)
        await handler.handle(CreateProductCommand(details=_details(catalog, make_details)))

        with pytest.raises(ProductAlreadyExistsError):
            await handler.handle(
                CreateProductCommand(details=_details(catalog, make_details, name="IPHONE 15 pro"))
            )

    async def test_create_unknown_category(self, catalog, make_details):
        """Test the category must exist."""
        details = make_details(uuid.uuid4(), catalog["brand"].id)
        with pytest.raises(CategoryReferenceError, match="Selected category does not exist"):
            await _handler(CreateProductHandler, catalog).handle(CreateProductCommand(details))

    async def test_create_unknown_brand(self, catalog, make_details):
        """Test the brand must exist."""
        details = make_details(catalog["category"].id, uuid.uuid4())
        with pytest.raises(BrandReferenceError, match="Selected brand does not exist"):
            await _handler(CreateProductHandler, catalog).handle(CreateProductCommand(details))

    async def test_update_product(self, catalog, make_details):
        """Test editing a product regenerates its slug."""
        saved = await catalog["products"].save(Product.create(_details(catalog, make_details)))

        dto = await _handler(UpdateProductHandler, catalog).handle(
            UpdateProductCommand(
                product_id=saved.id,
                details=_details(
                    catalog, make_details, name="iPhone 15 Pro Max", price=Decimal("1199.00")
                ),
            )
        )

        assert dto.id == saved.id
        assert dto.slug == "iphone-15-pro-max"
        assert dto.price == Decimal("1199.00")

    async def test_update_keeping_name(self, catalog, make_details):
        """Test saving a product under its own name is not a conflict."""
        saved = await catalog["products"].save(Product.create(_details(catalog, make_details)))

        dto = await _handler(UpdateProductHandler, catalog).handle(
            UpdateProductCommand(saved.id, _details(catalog, make_details, stock=1))
        )

        assert dto.stock == 1
        assert dto.is_low_stock is True

    async def test_update_to_taken_name(self, catalog, make_details):
        """Test renaming onto another product's slug."""
        await catalog["products"].save(Product.create(_details(catalog, make_details)))
        other = await catalog["products"].save(
            Product.create(_details(catalog, make_details, name="Pixel 8"))
        )

        with pytest.raises(ProductAlreadyExistsError):
            await _handler(UpdateProductHandler, catalog).handle(
                UpdateProductCommand(other.id, _details(catalog, make_details))
            )

    async def test_update_missing(self, catalog, make_details):
        """Test editing an unknown product."""
        with pytest.raises(ProductNotFoundError):
            await _handler(UpdateProductHandler, catalog).handle(
                UpdateProductCommand(uuid.uuid4(), _details(catalog, make_details))
            )

    async def test_delete_product(self, catalog, make_details):
        """Test deleting a product."""
        saved = await catalog["products"].save(Product.create(_details(catalog, make_details)))
        catalog["products"].cart_items[saved.id] = 2

        await DeleteProductHandler(catalog["products"]).handle(DeleteProductCommand(saved.id))

        assert await catalog["products"].find_by_id(saved.id) is None
        assert saved.id not in catalog["products"].cart_items

    async def test_delete_ordered_product(self, catalog, make_details):
        """Test products on orders are kept."""
        saved = await catalog["products"].save(Product.create(_details(catalog, make_details)))
        catalog["products"].ordered.add(saved.id)

        with pytest.raises(ProductHasOrdersError, match="existing orders"):
            await DeleteProductHandler(catalog["products"]).handle(DeleteProductCommand(saved.id))

    async def test_get_by_id_or_slug(self, catalog, make_details):
        """Test lookups by UUID and by slug."""
        saved = await catalog["products"].save(Product.create(_details(catalog, make_details)))
        handler = GetProductHandler(catalog["products"])

        assert (await handler.handle(str(saved.id))).id == saved.id
        assert (await handler.handle("iphone-15-pro")).id == saved.id
        assert (await handler.handle_slug("iphone-15-pro")).id == saved.id

        with pytest.raises(ProductNotFoundError):
            await handler.handle("missing")

    async def test_list_searches_brand_name(self, catalog, make_details):
        """Test the product table also matches brand names."""
        brand = catalog["brand"]
        product = Product.create(_details(catalog, make_details))
        await catalog["products"].save(
            replace(product, brand=ProductRef(brand.id, brand.name, str(brand.slug)))
        )
        await catalog["products"].save(
            Product.create(_details(catalog, make_details, name="Galaxy S24"))
        )

        page = await ListProductsHandler(catalog["products"]).handle(
            ListProductsQuery(listing=ListingQuery(search="apple"))
        )

        assert [row.name for row in page.items] == ["iPhone 15 Pro"]

    async def test_overview(self, catalog, make_details):
        """Test the overview bundles products with select options."""
        await catalog["products"].save(Product.create(_details(catalog, make_details)))

        overview = await _handler(GetProductOverviewHandler, catalog).handle()

        assert overview.error is None
        assert len(overview.products) == 1
        assert [option.name for option in overview.categories] == ["Smartphones"]
        assert [option.name for option in overview.brands] == ["Apple"]

    async def test_overview_failure_is_empty(self, catalog):
        """Test a failed read returns empty lists with an error."""

        async def broken():
            raise PersistenceError("Failed to fetch products")

        catalog["brands"].list_all = broken

        overview = await _handler(GetProductOverviewHandler, catalog).handle()

        assert overview.error == "Failed to fetch products"
        assert overview.products == []
        assert overview.categories == []
        assert overview.brands == []
