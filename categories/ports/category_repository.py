"""
Category repository port (interface).
"""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from categories.domain.category import Category


class CategoryRepository(ABC):
    """Abstract repository for Category entities."""

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """
        Insert or update a category.

        Raises:
            CategoryAlreadyExistsError: If the slug is taken by another category
        """
        pass

    @abstractmethod
    async def find_by_id(self, category_id: uuid.UUID) -> Optional[Category]:
        """
        Find a category by ID, with parent, children and product count.

        Args:
            category_id: Category UUID

        Returns:
            Category entity or None if not found
        """
        pass

    @abstractmethod
    async def slug_taken(self, slug: str, exclude_id: Optional[uuid.UUID] = None) -> bool:
        """Check whether a slug is used by a category other than ``exclude_id``."""
        pass

    @abstractmethod
    async def exists(self, category_id: uuid.UUID) -> bool:
        """Check if a category exists."""
        pass

    @abstractmethod
    async def ancestor_ids(self, category_id: uuid.UUID) -> List[uuid.UUID]:
        """
        Walk up the parent chain.

        Args:
            category_id: Starting category (included in the result)

        Returns:
            Ids from the category up to its root
        """
        pass

    @abstractmethod
    async def has_products(self, category_id: uuid.UUID) -> bool:
        """Check whether any product is filed under the category."""
        pass

    @abstractmethod
    async def delete(self, category_id: uuid.UUID) -> None:
        """Delete a category; its children become top-level."""
        pass

    @abstractmethod
    async def list_all(self) -> List[Category]:
        """
        List all categories with parent, children and product counts, newest first.
        """
        pass
