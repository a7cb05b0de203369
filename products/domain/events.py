"""
Product domain events.
"""
import uuid
from typing import Any, Dict, Iterable

from core.domain.events import DomainEvent


class ProductEvent(DomainEvent):
    """Base for events about one product."""

    def __init__(
        self,
        product_id: uuid.UUID,
        name: str,
        slug: str,
        image_urls: Iterable[str] = (),
    ):
        """
        Args:
            product_id: Product UUID
            name: Product name
            slug: Product slug
            image_urls: Thumbnail and gallery URLs of the product
        """
        super().__init__(aggregate_id=product_id)
        self.product_id = product_id
        self.name = name
        self.slug = slug
        self.image_urls = tuple(image_urls)

    def payload(self) -> Dict[str, Any]:
        return {"name": self.name, "slug": self.slug}


class ProductCreated(ProductEvent):
    """Event raised when a product is created."""


class ProductUpdated(ProductEvent):
    """Event raised when a product is edited."""

    def __init__(
        self,
        product_id: uuid.UUID,
        name: str,
        slug: str,
        image_urls: Iterable[str] = (),
        removed_image_urls: Iterable[str] = (),
    ):
        super().__init__(product_id, name, slug, image_urls)
        self.removed_image_urls = tuple(removed_image_urls)

    def payload(self) -> Dict[str, Any]:
        data = super().payload()
        data["removed_images"] = len(self.removed_image_urls)
        return data


class ProductDeleted(ProductEvent):
    """Event raised when a product is deleted. Its images are no longer referenced."""
