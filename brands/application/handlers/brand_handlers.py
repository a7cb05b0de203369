"""
Brand handlers.

Handles brand listing and the create, update and delete commands.
"""

import logging
import uuid

from brands.application.commands.create_brand import CreateBrandCommand
from brands.application.commands.delete_brand import DeleteBrandCommand
from brands.application.commands.update_brand import UpdateBrandCommand
from brands.application.dto.brand_dto import BrandDTO
from brands.application.queries.list_brands import ListBrandsQuery
from brands.domain.brand import Brand
from brands.domain.events import BrandCreated, BrandDeleted, BrandUpdated
from brands.ports.brand_repository import BrandRepository
from core.application.persistence import database_errors_as
from core.application.services.catalog_cache_service import BRANDS, CatalogCacheService
from core.domain.exceptions import (
    BrandAlreadyExistsError,
    BrandInUseError,
    BrandNotFoundError,
    InvalidInputError,
)
from core.domain.listing import Page, apply_listing
from core.infrastructure.events import event_bus
from core.metrics import catalog_mutations_total

logger = logging.getLogger(__name__)

BRAND_SEARCH_FIELDS = ("name", "slug", "description", "website")


class ListBrandsHandler:
    """Handler for ListBrandsQuery."""

    def __init__(self, brand_repository: BrandRepository):
        """Initialize handler with repository."""
        self.brand_repository = brand_repository

    async def all(self) -> list:
        """
        All brands, newest first, served from the catalog cache when warm.

        Returns:
            List of BrandDTO
        """
        return await CatalogCacheService.load_listing(BRANDS, self._load)

    async def _load(self) -> list:
        async with database_errors_as("Failed to fetch brands"):
            brands = await self.brand_repository.list_all()
        return [BrandDTO.from_entity(brand) for brand in brands]

    async def handle(self, query: ListBrandsQuery) -> Page:
        """
        Handle list brands query.

        Args:
            query: ListBrandsQuery

        Returns:
            Page of BrandDTO
        """
        rows = await self.all()
        return apply_listing(rows, query.listing, BRAND_SEARCH_FIELDS)


class GetBrandHandler:
    """Loads a single brand."""

    def __init__(self, brand_repository: BrandRepository):
        """Initialize handler with repository."""
        self.brand_repository = brand_repository

    async def handle(self, brand_id: uuid.UUID) -> BrandDTO:
        """
        Raises:
            BrandNotFoundError: If brand not found
        """
        async with database_errors_as("Failed to fetch brand"):
            brand = await self.brand_repository.find_by_id(brand_id)
        if not brand:
            raise BrandNotFoundError()
        return BrandDTO.from_entity(brand)


class CreateBrandHandler:
    """Handler for CreateBrandCommand."""

    def __init__(self, brand_repository: BrandRepository):
        """Initialize handler with repository."""
        self.brand_repository = brand_repository

    async def handle(self, command: CreateBrandCommand) -> BrandDTO:
        """
        Handle create brand command.

        Args:
            command: CreateBrandCommand

        Returns:
            BrandDTO of the new brand

        Raises:
            BrandAlreadyExistsError: If a brand with the same slug exists
            PersistenceError: If the database write fails
        """
        try:
            brand = Brand.create(
                name=command.name,
                description=command.description,
                logo=command.logo,
                website=command.website,
            )
        except ValueError as e:
            raise InvalidInputError(str(e)) from e

        async with database_errors_as("Failed to create brand"):
            if await self.brand_repository.slug_taken(str(brand.slug)):
                catalog_mutations_total.labels(
                    entity="brand", action="create", outcome="conflict"
                ).inc()
                raise BrandAlreadyExistsError()
            saved = await self.brand_repository.save(brand)

        await event_bus.publish(BrandCreated(saved.id, saved.name, str(saved.slug)))
        catalog_mutations_total.labels(entity="brand", action="create", outcome="success").inc()
        logger.info("Brand created", extra={"brand_id": str(saved.id), "slug": str(saved.slug)})
        return BrandDTO.from_entity(saved)


class UpdateBrandHandler:
    """Handler for UpdateBrandCommand."""

    def __init__(self, brand_repository: BrandRepository):
        """Initialize handler with repository."""
        self.brand_repository = brand_repository

    async def handle(self, command: UpdateBrandCommand) -> BrandDTO:
        """
        Handle update brand command.

        Args:
            command: UpdateBrandCommand

        Returns:
            BrandDTO of the edited brand

        Raises:
            BrandNotFoundError: If brand not found
            BrandAlreadyExistsError: If another brand uses the slug
            PersistenceError: If the database write fails
        """
        async with database_errors_as("Failed to update brand"):
            brand = await self.brand_repository.find_by_id(command.brand_id)
            if not brand:
                raise BrandNotFoundError()

            try:
                updated = brand.update(
                    name=command.name,
                    slug=command.slug,
                    description=command.description,
                    logo=command.logo,
                    website=command.website,
                )
            except ValueError as e:
                raise InvalidInputError(str(e)) from e

            if await self.brand_repository.slug_taken(str(updated.slug), exclude_id=brand.id):
                raise BrandAlreadyExistsError("Brand with this slug already exists")
            saved = await self.brand_repository.save(updated)

        await event_bus.publish(BrandUpdated(saved.id, saved.name, str(saved.slug)))
        catalog_mutations_total.labels(entity="brand", action="update", outcome="success").inc()
        logger.info("Brand updated", extra={"brand_id": str(saved.id)})
        return BrandDTO.from_entity(saved)


class DeleteBrandHandler:
    """Handler for DeleteBrandCommand."""

    def __init__(self, brand_repository: BrandRepository):
        """Initialize handler with repository."""
        self.brand_repository = brand_repository

    async def handle(self, command: DeleteBrandCommand) -> None:
        """
        Handle delete brand command.

        Raises:
            BrandNotFoundError: If brand not found
            BrandInUseError: If products still reference the brand
            PersistenceError: If the database write fails
        """
        async with database_errors_as("Failed to delete brand"):
            brand = await self.brand_repository.find_by_id(command.brand_id)
            if not brand:
                raise BrandNotFoundError()
            if await self.brand_repository.has_products(brand.id):
                catalog_mutations_total.labels(
                    entity="brand", action="delete", outcome="blocked"
                ).inc()
                raise BrandInUseError()
            await self.brand_repository.delete(brand.id)

        await event_bus.publish(BrandDeleted(brand.id, brand.name, str(brand.slug)))
        catalog_mutations_total.labels(entity="brand", action="delete", outcome="success").inc()
        logger.info("Brand deleted", extra={"brand_id": str(brand.id)})
