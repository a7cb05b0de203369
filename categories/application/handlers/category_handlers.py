"""
Category handlers.

Handles category listing and the create, update and delete commands.
"""

import logging
import uuid
from dataclasses import replace
from typing import Any, Optional

from categories.application.commands.create_category import CreateCategoryCommand
from categories.application.commands.delete_category import DeleteCategoryCommand
from categories.application.commands.update_category import UpdateCategoryCommand
from categories.application.dto.category_dto import CategoryDTO
from categories.application.queries.list_categories import ListCategoriesQuery
from categories.domain.category import Category, clean_parent_id
from categories.domain.events import CategoryCreated, CategoryDeleted, CategoryUpdated
from categories.ports.category_repository import CategoryRepository
from core.application.persistence import database_errors_as
from core.application.services.catalog_cache_service import CATEGORIES, CatalogCacheService
from core.domain.exceptions import (
    CategoryAlreadyExistsError,
    CategoryHierarchyError,
    CategoryInUseError,
    CategoryNotFoundError,
    InvalidInputError,
    ParentCategoryNotFoundError,
)
from core.domain.listing import Page, apply_listing
from core.infrastructure.events import event_bus
from core.metrics import catalog_mutations_total

logger = logging.getLogger(__name__)

CATEGORY_SEARCH_FIELDS = ("name", "description")


async def _resolve_parent(
    repository: CategoryRepository, raw_parent_id: Any
) -> Optional[uuid.UUID]:
    """Clean a form parent id and check that the parent exists."""
    parent_id = clean_parent_id(raw_parent_id)
    if parent_id is not None and not await repository.exists(parent_id):
        raise ParentCategoryNotFoundError()
    return parent_id


class ListCategoriesHandler:
    """Handler for ListCategoriesQuery."""

    def __init__(self, category_repository: CategoryRepository):
        """Initialize handler with repository."""
        self.category_repository = category_repository

    async def all(self) -> list:
        """
        All categories, newest first, served from the catalog cache when warm.

        Returns:
            List of CategoryDTO
        """
        return await CatalogCacheService.load_listing(CATEGORIES, self._load)

    async def _load(self) -> list:
        async with database_errors_as("Failed to fetch categories"):
            categories = await self.category_repository.list_all()
        return [CategoryDTO.from_entity(category) for category in categories]

    async def handle(self, query: ListCategoriesQuery) -> Page:
        """
        Handle list categories query.

        Args:
            query: ListCategoriesQuery

        Returns:
            Page of CategoryDTO
        """
        rows = await self.all()
        return apply_listing(rows, query.listing, CATEGORY_SEARCH_FIELDS)


class GetCategoryHandler:
    """Loads a single category."""

    def __init__(self, category_repository: CategoryRepository):
        """Initialize handler with repository."""
        self.category_repository = category_repository

    async def handle(self, category_id: uuid.UUID) -> CategoryDTO:
        """
        Raises:
            CategoryNotFoundError: If category not found
        """
        async with database_errors_as("Failed to fetch category"):
            category = await self.category_repository.find_by_id(category_id)
        if not category:
            raise CategoryNotFoundError()
        return CategoryDTO.from_entity(category)


class CreateCategoryHandler:
    """Handler for CreateCategoryCommand."""

    def __init__(self, category_repository: CategoryRepository):
        """Initialize handler with repository."""
        self.category_repository = category_repository

    async def handle(self, command: CreateCategoryCommand) -> CategoryDTO:
        """
        Handle create category command.

        Args:
            command: CreateCategoryCommand

        Returns:
            CategoryDTO of the new category

        Raises:
            CategoryAlreadyExistsError: If a category with the same slug exists
            ParentCategoryNotFoundError: If the selected parent does not exist
            PersistenceError: If the database write fails
        """
        async with database_errors_as("Failed to create category"):
            try:
                category = Category.create(
                    name=command.name,
                    description=command.description,
                    image=command.image,
                )
            except ValueError as e:
                raise InvalidInputError(str(e)) from e

            if await self.category_repository.slug_taken(str(category.slug)):
                catalog_mutations_total.labels(
                    entity="category", action="create", outcome="conflict"
                ).inc()
                raise CategoryAlreadyExistsError()

            parent_id = await _resolve_parent(self.category_repository, command.parent_id)
            saved = await self.category_repository.save(replace(category, parent_id=parent_id))

        await event_bus.publish(
            CategoryCreated(saved.id, saved.name, str(saved.slug), saved.parent_id)
        )
        catalog_mutations_total.labels(entity="category", action="create", outcome="success").inc()
        logger.info("Category created", extra={"category_id": str(saved.id)})
        return CategoryDTO.from_entity(saved)


class UpdateCategoryHandler:
    """Handler for UpdateCategoryCommand."""

    def __init__(self, category_repository: CategoryRepository):
        """Initialize handler with repository."""
        self.category_repository = category_repository

    async def handle(self, command: UpdateCategoryCommand) -> CategoryDTO:
        """
        Handle update category command.

        Raises:
            CategoryNotFoundError: If category not found
            ParentCategoryNotFoundError: If the selected parent does not exist
            CategoryHierarchyError: If the parent is the category or one of its descendants
            CategoryAlreadyExistsError: If another category uses the slug
            PersistenceError: If the database write fails
        """
        async with database_errors_as("Failed to update category"):
            category = await self.category_repository.find_by_id(command.category_id)
            if not category:
                raise CategoryNotFoundError()

            parent_id = await _resolve_parent(self.category_repository, command.parent_id)
            if parent_id is not None:
                lineage = await self.category_repository.ancestor_ids(parent_id)
                if category.id in lineage:
                    raise CategoryHierarchyError()

            try:
                updated = category.update(
                    name=command.name,
                    slug=command.slug,
                    description=command.description,
                    image=command.image,
                    parent_id=parent_id,
                )
            except ValueError as e:
                raise InvalidInputError(str(e)) from e

            if await self.category_repository.slug_taken(
                str(updated.slug), exclude_id=category.id
            ):
                raise CategoryAlreadyExistsError("Category with this slug already exists")
            saved = await self.category_repository.save(updated)

        await event_bus.publish(
            CategoryUpdated(saved.id, saved.name, str(saved.slug), saved.parent_id)
        )
        catalog_mutations_total.labels(entity="category", action="update", outcome="success").inc()
        logger.info("Category updated", extra={"category_id": str(saved.id)})
        return CategoryDTO.from_entity(saved)


class DeleteCategoryHandler:
    """Handler for DeleteCategoryCommand."""

    def __init__(self, category_repository: CategoryRepository):
        """Initialize handler with repository."""
        self.category_repository = category_repository

    async def handle(self, command: DeleteCategoryCommand) -> None:
        """
        Handle delete category command.

        Raises:
            CategoryNotFoundError: If category not found
            CategoryInUseError: If products are filed under the category
            PersistenceError: If the database write fails
        """
        async with database_errors_as("Failed to delete category"):
            category = await self.category_repository.find_by_id(command.category_id)
            if not category:
                raise CategoryNotFoundError()
            if await self.category_repository.has_products(category.id):
                catalog_mutations_total.labels(
                    entity="category", action="delete", outcome="blocked"
                ).inc()
                raise CategoryInUseError()
            await self.category_repository.delete(category.id)

        await event_bus.publish(
            CategoryDeleted(category.id, category.name, str(category.slug), category.parent_id)
        )
        catalog_mutations_total.labels(entity="category", action="delete", outcome="success").inc()
        logger.info("Category deleted", extra={"category_id": str(category.id)})
