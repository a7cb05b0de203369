"""
Unit tests for category handlers.
"""
import uuid
from dataclasses import replace

import pytest

from categories.application.commands.create_category import CreateCategoryCommand
from categories.application.commands.delete_category import DeleteCategoryCommand
from categories.application.commands.update_category import UpdateCategoryCommand
from categories.application.handlers.category_handlers import (
    CreateCategoryHandler,
    DeleteCategoryHandler,
    ListCategoriesHandler,
    UpdateCategoryHandler,
)
from categories.application.queries.list_categories import ListCategoriesQuery
from categories.domain.category import Category, CategoryRef
from core.domain.exceptions import (
    CategoryAlreadyExistsError,
    CategoryHierarchyError,
    CategoryInUseError,
    CategoryNotFoundError,
    ParentCategoryNotFoundError,
)
from core.domain.listing import ListingQuery


@pytest.mark.asyncio
class TestCategoryHandlers:
    """Tests for category command and query handlers."""

    async def test_create_top_level(self, fake_category_repository):
        """Test the "none" select value creates a top-level category."""
        dto = await CreateCategoryHandler(fake_category_repository).handle(
            CreateCategoryCommand(name="Laptops", parent_id="none")
        )

        assert dto.slug == "laptops"
        assert dto.parent_id is None

    async def test_create_with_parent(self, fake_category_repository):
        """Test creating a sub-category."""
        parent = await fake_category_repository.save(Category.create(name="Computers"))

        dto = await CreateCategoryHandler(fake_category_repository).handle(
            CreateCategoryCommand(name="Laptops", parent_id=str(parent.id))
        )

        assert dto.parent_id == parent.id

    async def test_create_with_unknown_parent(self, fake_category_repository):
        """Test the parent must exist."""
        with pytest.raises(ParentCategoryNotFoundError):
            await CreateCategoryHandler(fake_category_repository).handle(
                CreateCategoryCommand(name="Laptops", parent_id=str(uuid.uuid4()))
            )

    async def test_create_duplicate(self, fake_category_repository):
        """Test two categories cannot share a slug."""
        handler = CreateCategoryHandler(fake_category_repository)
        await handler.handle(CreateCategoryCommand(name="Laptops"))

        with pytest.raises(CategoryAlreadyExistsError):
            await handler.handle(CreateCategoryCommand(name="LAPTOPS"))

    async def test_update_rejects_descendant_parent(self, fake_category_repository):
        """Test a category cannot move under its own child."""
        root = await fake_category_repository.save(Category.create(name="Computers"))
        child = await fake_category_repository.save(
            replace(Category.create(name="Laptops"), parent_id=root.id)
        )

        with pytest.raises(CategoryHierarchyError):
            await UpdateCategoryHandler(fake_category_repository).handle(
                UpdateCategoryCommand(
                    category_id=root.id,
                    name="Computers",
                    slug="computers",
                    parent_id=str(child.id),
                )
            )

    async def test_update_rejects_self_parent(self, fake_category_repository):
        """Test a category cannot be its own parent."""
        category = await fake_category_repository.save(Category.create(name="Computers"))

        with pytest.raises(CategoryHierarchyError):
            await UpdateCategoryHandler(fake_category_repository).handle(
                UpdateCategoryCommand(
                    category_id=category.id,
                    name="Computers",
                    slug="computers",
                    parent_id=category.id,
                )
            )

    async def test_update_missing(self, fake_category_repository):
        """Test editing an unknown category."""
        with pytest.raises(CategoryNotFoundError):
            await UpdateCategoryHandler(fake_category_repository).handle(
                UpdateCategoryCommand(category_id=uuid.uuid4(), name="X", slug="x")
            )

    async def test_delete_detaches_children(self, fake_category_repository):
        """Test children become top-level when their parent is deleted."""
        root = await fake_category_repository.save(Category.create(name="Computers"))
        child = await fake_category_repository.save(
            replace(Category.create(name="Laptops"), parent_id=root.id)
        )

        await DeleteCategoryHandler(fake_category_repository).handle(
            DeleteCategoryCommand(category_id=root.id)
        )

        assert (await fake_category_repository.find_by_id(child.id)).parent_id is None

    async def test_delete_with_products(self, fake_category_repository):
        """Test categories with products are kept."""
        category = await fake_category_repository.save(Category.create(name="Phones"))
        fake_category_repository.in_use.add(category.id)

        with pytest.raises(CategoryInUseError, match="Cannot delete category with products"):
            await DeleteCategoryHandler(fake_category_repository).handle(
                DeleteCategoryCommand(category_id=category.id)
            )

    async def test_list_ignores_parent_name(self, fake_category_repository):
        """Test the category table searches names and descriptions, not parents."""
        root = await fake_category_repository.save(Category.create(name="Computers"))
        await fake_category_repository.save(
            replace(
                Category.create(name="Laptops"),
                parent_id=root.id,
                parent=CategoryRef(root.id, root.name),
            )
        )
        await fake_category_repository.save(
            Category.create(name="Monitors", description="Computer displays")
        )

        page = await ListCategoriesHandler(fake_category_repository).handle(
            ListCategoriesQuery(listing=ListingQuery(search="comput"))
        )

        assert {row.name for row in page.items} == {"Computers", "Monitors"}
