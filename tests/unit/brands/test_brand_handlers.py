"""
Unit tests for brand handlers.
"""
import uuid

import pytest

from brands.application.commands.create_brand import CreateBrandCommand
from brands.application.commands.delete_brand import DeleteBrandCommand
from brands.application.commands.update_brand import UpdateBrandCommand
from brands.application.handlers.brand_handlers import (
    CreateBrandHandler,
    DeleteBrandHandler,
    GetBrandHandler,
    ListBrandsHandler,
    UpdateBrandHandler,
)
from brands.application.queries.list_brands import ListBrandsQuery
from brands.domain.brand import Brand
from core.domain.exceptions import (
    BrandAlreadyExistsError,
    BrandInUseError,
    BrandNotFoundError,
    InvalidInputError,
)
from core.domain.listing import ListingQuery


@pytest.mark.asyncio
class TestBrandHandlers:
    """Tests for brand command and query handlers."""

    async def test_create_brand(self, fake_brand_repository):
        """Test creating a brand derives its slug."""
        handler = CreateBrandHandler(brand_repository=fake_brand_repository)

        brand = await handler.handle(CreateBrandCommand(name="Samsung Electronics"))

        assert brand.slug == "samsung-electronics"
        assert brand.product_count == 0
        assert await fake_brand_repository.exists(brand.id)

    async def test_create_duplicate_name(self, fake_brand_repository):
        """Test two brands cannot share a slug."""
        handler = CreateBrandHandler(brand_repository=fake_brand_repository)
        await handler.handle(CreateBrandCommand(name="Apple"))

        with pytest.raises(BrandAlreadyExistsError, match="already exists"):
            await handler.handle(CreateBrandCommand(name="apple"))

    async def test_create_blank_name(self, fake_brand_repository):
        """Test domain validation surfaces as invalid input."""
        handler = CreateBrandHandler(brand_repository=fake_brand_repository)
        with pytest.raises(InvalidInputError):
            await handler.handle(CreateBrandCommand(name="   "))

    async def test_update_brand(self, fake_brand_repository):
        """Test editing name and slug."""
        saved = await fake_brand_repository.save(Brand.create(name="Apple"))

        dto = await UpdateBrandHandler(fake_brand_repository).handle(
            UpdateBrandCommand(brand_id=saved.id, name="Apple Inc", slug="apple-inc")
        )

        assert dto.name == "Apple Inc"
        assert dto.slug == "apple-inc"

    async def test_update_to_taken_slug(self, fake_brand_repository):
        """Test slugs stay unique on edit."""
        await fake_brand_repository.save(Brand.create(name="Apple"))
        other = await fake_brand_repository.save(Brand.create(name="Google"))

        with pytest.raises(BrandAlreadyExistsError, match="slug"):
            await UpdateBrandHandler(fake_brand_repository).handle(
                UpdateBrandCommand(brand_id=other.id, name="Google", slug="apple")
            )

    async def test_update_missing(self, fake_brand_repository):
        """Test editing an unknown brand."""
        with pytest.raises(BrandNotFoundError):
            await UpdateBrandHandler(fake_brand_repository).handle(
                UpdateBrandCommand(brand_id=uuid.uuid4(), name="X", slug="x")
            )

    async def test_delete_brand(self, fake_brand_repository):
        """Test deleting an unused brand."""
        saved = await fake_brand_repository.save(Brand.create(name="Apple"))

        await DeleteBrandHandler(fake_brand_repository).handle(DeleteBrandCommand(saved.id))

        assert not await fake_brand_repository.exists(saved.id)

    async def test_delete_brand_with_products(self, fake_brand_repository):
        """Test brands with products are kept."""
        saved = await fake_brand_repository.save(Brand.create(name="Apple"))
        fake_brand_repository.in_use.add(saved.id)

        with pytest.raises(BrandInUseError, match="Cannot delete brand with products"):
            await DeleteBrandHandler(fake_brand_repository).handle(DeleteBrandCommand(saved.id))

        assert await fake_brand_repository.exists(saved.id)

    async def test_get_missing(self, fake_brand_repository):
        """Test loading an unknown brand."""
        with pytest.raises(BrandNotFoundError):
            await GetBrandHandler(fake_brand_repository).handle(uuid.uuid4())

    async def test_list_searches_and_pages(self, fake_brand_repository):
        """Test the brand table query."""
        for name in ("Apple", "Samsung", "Sony"):
            await fake_brand_repository.save(Brand.create(name=name))

        page = await ListBrandsHandler(fake_brand_repository).handle(
            ListBrandsQuery(listing=ListingQuery(search="s"))
        )

        assert {row.name for row in page.items} == {"Samsung", "Sony"}
        assert page.total_items == 2

    async def test_writes_refresh_cached_listing(self, fake_brand_repository):
        """Test the cached listing is dropped after a write."""
        listing = ListBrandsHandler(fake_brand_repository)
        assert await listing.all() == []

        # Written behind the handler's back: the cached listing stays stale
        await fake_brand_repository.save(Brand.create(name="Hidden"))
        assert await listing.all() == []

        await CreateBrandHandler(fake_brand_repository).handle(CreateBrandCommand(name="Apple"))
        assert {row.name for row in await listing.all()} == {"Hidden", "Apple"}
