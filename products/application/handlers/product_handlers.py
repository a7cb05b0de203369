"""
Product handlers.

Handles product listing, lookups and the create, update and delete
commands. Category and brand references are checked through their own
repositories before any write.
"""

import logging
import uuid
from typing import Optional

from brands.application.handlers.brand_handlers import ListBrandsHandler
from brands.ports.brand_repository import BrandRepository
from categories.application.handlers.category_handlers import ListCategoriesHandler
from categories.ports.category_repository import CategoryRepository
from core.application.persistence import database_errors_as
from core.application.services.catalog_cache_service import PRODUCTS, CatalogCacheService
from core.domain.exceptions import (
    BrandReferenceError,
    CategoryReferenceError,
    DomainException,
    InvalidInputError,
    ProductAlreadyExistsError,
    ProductHasOrdersError,
    ProductNotFoundError,
)
from core.domain.listing import Page, apply_listing
from core.infrastructure.events import event_bus
from core.metrics import catalog_mutations_total
from products.application.commands.create_product import CreateProductCommand
from products.application.commands.delete_product import DeleteProductCommand
from products.application.commands.update_product import UpdateProductCommand
from products.application.dto.product_dto import OptionDTO, ProductDTO, ProductOverviewDTO
from products.application.queries.list_products import ListProductsQuery
from products.domain.events import ProductCreated, ProductDeleted, ProductUpdated
from products.domain.product import Product, ProductDetails
from products.ports.product_repository import ProductRepository

logger = logging.getLogger(__name__)

PRODUCT_SEARCH_FIELDS = ("name", "brand.name")


async def _check_references(
    details: ProductDetails,
    category_repository: CategoryRepository,
    brand_repository: BrandRepository,
) -> None:
    """
    Raises:
        CategoryReferenceError: If the category does not exist
        BrandReferenceError: If the brand does not exist
    """
    if not await category_repository.exists(details.category_id):
        raise CategoryReferenceError()
    if not await brand_repository.exists(details.brand_id):
        raise BrandReferenceError()


def _parse_uuid(value: str) -> Optional[uuid.UUID]:
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


class ListProductsHandler:
    """Handler for ListProductsQuery."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def all(self) -> list:
        """
        All products with category and brand, newest first.

        Served from the catalog cache when warm.

        Returns:
            List of ProductDTO
        """
        return await CatalogCacheService.load_listing(PRODUCTS, self._load)

    async def _load(self) -> list:
        async with database_errors_as("Failed to fetch products"):
            products = await self.product_repository.list_all()
        return [ProductDTO.from_entity(product) for product in products]

    async def handle(self, query: ListProductsQuery) -> Page:
        """
        Handle list products query.

        Args:
            query: ListProductsQuery

        Returns:
            Page of ProductDTO
        """
        rows = await self.all()
        return apply_listing(rows, query.listing, PRODUCT_SEARCH_FIELDS)


class GetProductOverviewHandler:
    """
    Builds the dashboard product overview.

    A failed read never raises: the overview comes back empty with the
    error message set.
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        category_repository: CategoryRepository,
        brand_repository: BrandRepository,
    ):
        """Initialize handler with repositories."""
        self.product_repository = product_repository
        self.category_repository = category_repository
        self.brand_repository = brand_repository

    async def handle(self) -> ProductOverviewDTO:
        try:
            products = await ListProductsHandler(self.product_repository).all()
            categories = await ListCategoriesHandler(self.category_repository).all()
            brands = await ListBrandsHandler(self.brand_repository).all()
        except DomainException as e:
            logger.warning("Product overview unavailable: %s", e.message)
            return ProductOverviewDTO(error="Failed to fetch products")

        return ProductOverviewDTO(
            products=products,
            categories=[OptionDTO(id=row.id, name=row.name) for row in categories],
            brands=[OptionDTO(id=row.id, name=row.name) for row in brands],
        )


class GetProductHandler:
    """Loads a single product by id or slug."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, identifier: str) -> ProductDTO:
        """
        Look a product up by UUID, falling back to its slug.

        Args:
            identifier: Product UUID or slug

        Returns:
            ProductDTO

        Raises:
            ProductNotFoundError: If no product matches
        """
        product = None
        async with database_errors_as("Failed to fetch product"):
            product_id = _parse_uuid(identifier)
            if product_id is not None:
                product = await self.product_repository.find_by_id(product_id)
            if product is None:
                product = await self.product_repository.find_by_slug(str(identifier))
        if not product:
            raise ProductNotFoundError()
        return ProductDTO.from_entity(product)

    async def handle_slug(self, slug: str) -> ProductDTO:
        """
        Look a product up by slug only.

        Raises:
            ProductNotFoundError: If no product has the slug
        """
        async with database_errors_as("Failed to fetch product"):
            product = await self.product_repository.find_by_slug(slug)
        if not product:
            raise ProductNotFoundError()
        return ProductDTO.from_entity(product)


class CreateProductHandler:
    """Handler for CreateProductCommand."""

    def __init__(
        self,
        product_repository: ProductRepository,
        category_repository: CategoryRepository,
        brand_repository: BrandRepository,
    ):
        """Initialize handler with repositories."""
        self.product_repository = product_repository
        self.category_repository = category_repository
        self.brand_repository = brand_repository

    async def handle(self, command: CreateProductCommand) -> ProductDTO:
        """
        Handle create product command.

        Args:
            command: CreateProductCommand

        Returns:
            ProductDTO of the new product

        Raises:
            ProductAlreadyExistsError: If a product with the same slug exists
            CategoryReferenceError: If the category does not exist
            BrandReferenceError: If the brand does not exist
            PersistenceError: If the database write fails
        """
        try:
            product = Product.create(command.details)
        except ValueError as e:
            raise InvalidInputError(str(e)) from e

        async with database_errors_as("Failed to create product"):
            if await self.product_repository.slug_taken(str(product.slug)):
                catalog_mutations_total.labels(
                    entity="product", action="create", outcome="conflict"
                ).inc()
                raise ProductAlreadyExistsError()
            await _check_references(
                command.details, self.category_repository, self.brand_repository
            )
            saved = await self.product_repository.save(product)

        await event_bus.publish(
            ProductCreated(saved.id, saved.name, str(saved.slug), saved.image_urls)
        )
        catalog_mutations_total.labels(entity="product", action="create", outcome="success").inc()
        logger.info(
            "Product created", extra={"product_id": str(saved.id), "slug": str(saved.slug)}
        )
        return ProductDTO.from_entity(saved)


class UpdateProductHandler:
    """Handler for UpdateProductCommand."""

    def __init__(
        self,
        product_repository: ProductRepository,
        category_repository: CategoryRepository,
        brand_repository: BrandRepository,
    ):
        """Initialize handler with repositories."""
        self.product_repository = product_repository
        self.category_repository = category_repository
        self.brand_repository = brand_repository

    async def handle(self, command: UpdateProductCommand) -> ProductDTO:
        """
        Handle update product command.

        Raises:
            ProductNotFoundError: If product not found
            ProductAlreadyExistsError: If another product uses the new slug
            CategoryReferenceError: If the category does not exist
            BrandReferenceError: If the brand does not exist
            PersistenceError: If the database write fails
        """
        async with database_errors_as("Failed to update product"):
            product = await self.product_repository.find_by_id(command.product_id)
            if not product:
                raise ProductNotFoundError()

            try:
                updated = product.update(command.details)
            except ValueError as e:
                raise InvalidInputError(str(e)) from e

            if await self.product_repository.slug_taken(
                str(updated.slug), exclude_id=product.id
            ):
                catalog_mutations_total.labels(
                    entity="product", action="update", outcome="conflict"
                ).inc()
                raise ProductAlreadyExistsError()
            await _check_references(
                command.details, self.category_repository, self.brand_repository
            )
            saved = await self.product_repository.save(updated)

        removed = [url for url in product.image_urls if url not in saved.image_urls]
        await event_bus.publish(
            ProductUpdated(saved.id, saved.name, str(saved.slug), saved.image_urls, removed)
        )
        catalog_mutations_total.labels(entity="product", action="update", outcome="success").inc()
        logger.info("Product updated", extra={"product_id": str(saved.id)})
        return ProductDTO.from_entity(saved)


class DeleteProductHandler:
    """Handler for DeleteProductCommand."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, command: DeleteProductCommand) -> None:
        """
        Handle delete product command.

        Cart items holding the product are removed along with it.

        Raises:
            ProductNotFoundError: If product not found
            ProductHasOrdersError: If the product appears on an order
            PersistenceError: If the database write fails
        """
        async with database_errors_as("Failed to delete product"):
            product = await self.product_repository.find_by_id(command.product_id)
            if not product:
                raise ProductNotFoundError()
            if await self.product_repository.has_order_items(product.id):
                catalog_mutations_total.labels(
                    entity="product", action="delete", outcome="blocked"
                ).inc()
                raise ProductHasOrdersError()
            removed = await self.product_repository.delete_with_cart_items(product.id)

        await event_bus.publish(
            ProductDeleted(product.id, product.name, str(product.slug), product.image_urls)
        )
        catalog_mutations_total.labels(entity="product", action="delete", outcome="success").inc()
        logger.info(
            "Product deleted",
            extra={"product_id": str(product.id), "cart_items_removed": removed},
        )
