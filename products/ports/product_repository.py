"""
Product repository port (interface).

This defines the contract for product persistence operations.
Implementations are in the infrastructure layer.
"""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from products.domain.product import Product


class ProductRepository(ABC):
    """Abstract repository for Product entities."""

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """
        Insert or update a product.

        Args:
            product: Product entity to save

        Returns:
            Saved product entity with its category and brand references

        Raises:
            ProductAlreadyExistsError: If the slug is taken by another product
        """
        pass

    @abstractmethod
    async def find_by_id(self, product_id: uuid.UUID) -> Optional[Product]:
        """
        Find a product by ID.

        Args:
            product_id: Product UUID

        Returns:
            Product entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Product]:
        """
        Find a product by slug.

        Args:
            slug: Product slug

        Returns:
            Product entity or None if not found
        """
        pass

    @abstractmethod
    async def slug_taken(self, slug: str, exclude_id: Optional[uuid.UUID] = None) -> bool:
        """
        Check whether a slug is used by a product other than ``exclude_id``.

        Args:
            slug: Candidate slug
            exclude_id: Product to ignore (the one being edited)

        Returns:
            True if another product uses the slug
        """
        pass

    @abstractmethod
    async def has_order_items(self, product_id: uuid.UUID) -> bool:
        """
        Check whether any order line references the product.

        Args:
            product_id: Product UUID

        Returns:
            True if the product was ever ordered
        """
        pass

    @abstractmethod
    async def delete_with_cart_items(self, product_id: uuid.UUID) -> int:
        """
        Remove the product from every cart, then delete it, in one transaction.

        Args:
            product_id: Product UUID

        Returns:
            Number of cart items removed

        Raises:
            ProductHasOrdersError: If an order line still references the product
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Product]:
        """
        List all products with their category and brand, newest first.

        Returns:
            List of Product entities
        """
        pass
