"""
Brand repository port (interface).

This defines the contract for brand persistence operations.
Implementations are in the infrastructure layer.
"""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from brands.domain.brand import Brand


class BrandRepository(ABC):
    """
    Abstract repository for Brand entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, brand: Brand) -> Brand:
        """
        Insert or update a brand.

        Args:
            brand: Brand entity to save

        Returns:
            Saved brand entity

        Raises:
            BrandAlreadyExistsError: If the slug is taken by another brand
        """
        pass

    @abstractmethod
    async def find_by_id(self, brand_id: uuid.UUID) -> Optional[Brand]:
        """
        Find a brand by ID.

        Args:
            brand_id: Brand UUID

        Returns:
            Brand entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Brand]:
        """
        Find a brand by slug.

        Args:
            slug: Brand slug

        Returns:
            Brand entity or None if not found
        """
        pass

    @abstractmethod
    async def slug_taken(self, slug: str, exclude_id: Optional[uuid.UUID] = None) -> bool:
        """
        Check whether a slug is used by a brand other than ``exclude_id``.

        Args:
            slug: Candidate slug
            exclude_id: Brand to ignore (the one being edited)

        Returns:
            True if another brand uses the slug
        """
        pass

    @abstractmethod
    async def exists(self, brand_id: uuid.UUID) -> bool:
        """
        Check if a brand exists.

        Args:
            brand_id: Brand UUID

        Returns:
            True if brand exists, False otherwise
        """
        pass

    @abstractmethod
    async def has_products(self, brand_id: uuid.UUID) -> bool:
        """
        Check whether any product belongs to the brand.

        Args:
            brand_id: Brand UUID

        Returns:
            True if at least one product references the brand
        """
        pass

    @abstractmethod
    async def delete(self, brand_id: uuid.UUID) -> None:
        """
        Delete a brand.

        Args:
            brand_id: Brand UUID
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Brand]:
        """
        List all brands with product counts, newest first.

        Returns:
            List of Brand entities
        """
        pass
