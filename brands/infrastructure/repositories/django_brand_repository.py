"""
Django implementation of BrandRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.db.models import Count, ProtectedError

from brands.domain.brand import Brand
from brands.infrastructure.models import Brand as BrandModel
from brands.ports.brand_repository import BrandRepository
from core.domain.exceptions import BrandAlreadyExistsError, BrandInUseError
from core.domain.value_objects import Slug
from core.infrastructure.model_validation import invalid_input_from


class DjangoBrandRepository(BrandRepository):
    """
    Django ORM implementation of BrandRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: BrandModel) -> Brand:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Brand model (optionally annotated with product_total)

        Returns:
            Brand domain entity
        """
        return Brand(
            id=model.id,
            name=model.name,
            slug=Slug(model.slug),
            description=model.description,
            logo=model.logo,
            website=model.website,
            created_at=model.created_at,
            updated_at=model.updated_at,
            product_count=getattr(model, "product_total", 0),
        )

    def _to_model(self, brand: Brand) -> BrandModel:
        """
        Convert domain entity to Django model.

        Args:
            brand: Brand domain entity

        Returns:
            Django Brand model (existing row updated in memory, or a new one)
        """
        # pylint: disable=no-member
        model = BrandModel.objects.filter(id=brand.id).first() or BrandModel(id=brand.id)
        model.name = brand.name
        model.slug = str(brand.slug)
        model.description = brand.description
        model.logo = brand.logo
        model.website = brand.website
        return model

    @sync_to_async
    def save(self, brand: Brand) -> Brand:
        """
        Insert or update a brand.

        Args:
            brand: Brand entity to save

        Returns:
            Saved brand entity
        """
        model = self._to_model(brand)
        try:
            with transaction.atomic():
                model.save()
        except ValidationError as e:
            raise invalid_input_from(e) from e
        except IntegrityError as e:
            raise BrandAlreadyExistsError() from e
        return self._to_domain(model)

    async def find_by_id(self, brand_id: uuid.UUID) -> Optional[Brand]:
        """
        Find a brand by ID.

        Args:
            brand_id: Brand UUID

        Returns:
            Brand entity or None if not found
        """
        # pylint: disable=no-member
        qs = BrandModel.objects.annotate(product_total=Count("products")).filter(id=brand_id)
        model = await sync_to_async(qs.first)()
        return self._to_domain(model) if model else None

    async def find_by_slug(self, slug: str) -> Optional[Brand]:
        """
        Find a brand by slug.

        Args:
            slug: Brand slug

        Returns:
            Brand entity or None if not found
        """
        # pylint: disable=no-member
        qs = BrandModel.objects.annotate(product_total=Count("products")).filter(slug=slug)
        model = await sync_to_async(qs.first)()
        return self._to_domain(model) if model else None

    async def slug_taken(self, slug: str, exclude_id: Optional[uuid.UUID] = None) -> bool:
        """Check whether another brand uses the slug."""
        # pylint: disable=no-member
        qs = BrandModel.objects.filter(slug=slug)
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        return await sync_to_async(qs.exists)()

    async def exists(self, brand_id: uuid.UUID) -> bool:
        """
        Check if a brand exists.

        Args:
            brand_id: Brand UUID

        Returns:
            True if brand exists, False otherwise
        """
        # pylint: disable=no-member
        qs = BrandModel.objects.filter(id=brand_id)
        return await sync_to_async(qs.exists)()

    async def has_products(self, brand_id: uuid.UUID) -> bool:
        """Check whether any product belongs to the brand."""
        from products.infrastructure.models import Product as ProductModel

        # pylint: disable=no-member
        qs = ProductModel.objects.filter(brand_id=brand_id)
        return await sync_to_async(qs.exists)()

    async def delete(self, brand_id: uuid.UUID) -> None:
        """
        Delete a brand.

        Args:
            brand_id: Brand UUID
        """
        # pylint: disable=no-member
        qs = BrandModel.objects.filter(id=brand_id)
        try:
            await sync_to_async(qs.delete)()
        except ProtectedError as e:
            raise BrandInUseError() from e

    async def list_all(self) -> List[Brand]:
        """
        List all brands with product counts, newest first.

        Returns:
            List of Brand entities
        """
        # pylint: disable=no-member
        qs = BrandModel.objects.annotate(product_total=Count("products")).order_by("-created_at")
        models = await sync_to_async(list)(qs)
        return [self._to_domain(model) for model in models]
