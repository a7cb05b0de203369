"""
Django implementation of CategoryRepository port.
"""

import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.db.models import Count, ProtectedError

from categories.domain.category import Category, CategoryRef
from categories.infrastructure.models import ProductCategory as CategoryModel
from categories.ports.category_repository import CategoryRepository
from core.domain.exceptions import CategoryAlreadyExistsError, CategoryInUseError
from core.domain.value_objects import Slug
from core.infrastructure.model_validation import invalid_input_from


class DjangoCategoryRepository(CategoryRepository):
    """Django ORM implementation of CategoryRepository."""

    def _queryset(self):
        # pylint: disable=no-member
        return (
            CategoryModel.objects.select_related("parent")
            .prefetch_related("children")
            .annotate(product_total=Count("products", distinct=True))
        )

    def _to_domain(self, model: CategoryModel) -> Category:
        """
        Convert Django model to domain entity.

        Args:
            model: Django ProductCategory model from ``_queryset``

        Returns:
            Category domain entity
        """
        parent = None
        if model.parent_id and model.parent is not None:
            parent = CategoryRef(id=model.parent.id, name=model.parent.name)
        children = tuple(
            CategoryRef(id=child.id, name=child.name)
            for child in sorted(model.children.all(), key=lambda child: child.name)
        )
        return Category(
            id=model.id,
            name=model.name,
            slug=Slug(model.slug),
            description=model.description,
            image=model.image,
            parent_id=model.parent_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
            parent=parent,
            children=children,
            product_count=getattr(model, "product_total", 0),
        )

    @sync_to_async
    def save(self, category: Category) -> Category:
        """Insert or update a category."""
        # pylint: disable=no-member
        model = CategoryModel.objects.filter(id=category.id).first() or CategoryModel(
            id=category.id
        )
        model.name = category.name
        model.slug = str(category.slug)
        model.description = category.description
        model.image = category.image
        model.parent_id = category.parent_id
        try:
            with transaction.atomic():
                model.save()
        except ValidationError as e:
            raise invalid_input_from(e) from e
        except IntegrityError as e:
            raise CategoryAlreadyExistsError() from e
        return self._to_domain(self._queryset().get(id=model.id))

    async def find_by_id(self, category_id: uuid.UUID) -> Optional[Category]:
        """Find a category by ID."""
        qs = self._queryset().filter(id=category_id)
        models = await sync_to_async(list)(qs)
        return self._to_domain(models[0]) if models else None

    async def slug_taken(self, slug: str, exclude_id: Optional[uuid.UUID] = None) -> bool:
        """Check whether another category uses the slug."""
        # pylint: disable=no-member
        qs = CategoryModel.objects.filter(slug=slug)
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        return await sync_to_async(qs.exists)()

    async def exists(self, category_id: uuid.UUID) -> bool:
        """Check if a category exists."""
        # pylint: disable=no-member
        qs = CategoryModel.objects.filter(id=category_id)
        return await sync_to_async(qs.exists)()

    @sync_to_async
    def ancestor_ids(self, category_id: uuid.UUID) -> List[uuid.UUID]:
        """Walk up the parent chain, stopping on a repeated id."""
        chain = []
        current = category_id
        while current is not None and current not in chain:
            chain.append(current)
            # pylint: disable=no-member
            current = (
                CategoryModel.objects.filter(id=current)
                .values_list("parent_id", flat=True)
                .first()
            )
        return chain

    async def has_products(self, category_id: uuid.UUID) -> bool:
        """Check whether any product is filed under the category."""
        from products.infrastructure.models import Product as ProductModel

        # pylint: disable=no-member
        qs = ProductModel.objects.filter(category_id=category_id)
        return await sync_to_async(qs.exists)()

    async def delete(self, category_id: uuid.UUID) -> None:
        """Delete a category; children are detached by the SET_NULL foreign key."""
        # pylint: disable=no-member
        qs = CategoryModel.objects.filter(id=category_id)
        try:
            await sync_to_async(qs.delete)()
        except ProtectedError as e:
            raise CategoryInUseError() from e

    async def list_all(self) -> List[Category]:
        """List all categories, newest first."""
        qs = self._queryset().order_by("-created_at")
        models = await sync_to_async(list)(qs)
        return [self._to_domain(model) for model in models]
