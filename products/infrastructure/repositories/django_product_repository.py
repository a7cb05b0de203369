"""
Django implementation of ProductRepository port.
"""

import uuid
from decimal import Decimal
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.db.models import ProtectedError

from core.domain.exceptions import ProductAlreadyExistsError, ProductHasOrdersError
from core.domain.value_objects import ProductCondition, ProductType, Slug
from core.infrastructure.model_validation import invalid_input_from
from products.domain.product import Product, ProductRef
from products.infrastructure.models import CartItem as CartItemModel
from products.infrastructure.models import OrderItem as OrderItemModel
from products.infrastructure.models import Product as ProductModel
from products.ports.product_repository import ProductRepository

# Columns copied one to one between the entity and the model
_PLAIN_FIELDS = (
    "name",
    "description",
    "short_description",
    "category_id",
    "brand_id",
    "price",
    "original_price",
    "cost_price",
    "thumbnail",
    "stock",
    "low_stock_threshold",
    "discount",
    "weight",
    "dimensions",
    "color",
    "warranty_months",
    "is_available",
    "is_featured",
    "is_pre_owned",
    "specifications",
    "meta_title",
    "meta_description",
)


class DjangoProductRepository(ProductRepository):
    """
    Django ORM implementation of ProductRepository.

    Products are always loaded with their category and brand joined.
    """

    def _queryset(self):
        # pylint: disable=no-member
        return ProductModel.objects.select_related("category", "brand")

    def _to_domain(self, model: ProductModel) -> Product:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Product model with category and brand loaded

        Returns:
            Product domain entity
        """
        values = {name: getattr(model, name) for name in _PLAIN_FIELDS}
        return Product(
            id=model.id,
            slug=Slug(model.slug),
            type=ProductType(model.type),
            condition=ProductCondition(model.condition),
            images=tuple(model.images or ()),
            keywords=tuple(model.keywords or ()),
            created_at=model.created_at,
            updated_at=model.updated_at,
            category=ProductRef(
                id=model.category.id, name=model.category.name, slug=model.category.slug
            ),
            brand=ProductRef(id=model.brand.id, name=model.brand.name, slug=model.brand.slug),
            **values,
        )

    def _to_model(self, product: Product) -> ProductModel:
        """
        Convert domain entity to Django model.

        Args:
            product: Product domain entity

        Returns:
            Django Product model (existing row updated in memory, or a new one)
        """
        # pylint: disable=no-member
        model = ProductModel.objects.filter(id=product.id).first() or ProductModel(id=product.id)
        for name in _PLAIN_FIELDS:
            setattr(model, name, getattr(product, name))
        model.slug = str(product.slug)
        model.type = product.type.value
        model.condition = product.condition.value
        model.images = list(product.images)
        model.keywords = list(product.keywords)
        model.price = Decimal(product.price)
        return model

    @sync_to_async
    def save(self, product: Product) -> Product:
        """Insert or update a product."""
        model = self._to_model(product)
        try:
            with transaction.atomic():
                model.save()
        except ValidationError as e:
            raise invalid_input_from(e) from e
        except IntegrityError as e:
            raise ProductAlreadyExistsError() from e
        return self._to_domain(self._queryset().get(id=model.id))

    async def find_by_id(self, product_id: uuid.UUID) -> Optional[Product]:
        """Find a product by ID."""
        model = await sync_to_async(self._queryset().filter(id=product_id).first)()
        return self._to_domain(model) if model else None

    async def find_by_slug(self, slug: str) -> Optional[Product]:
        """Find a product by slug."""
        model = await sync_to_async(self._queryset().filter(slug=slug).first)()
        return self._to_domain(model) if model else None

    async def slug_taken(self, slug: str, exclude_id: Optional[uuid.UUID] = None) -> bool:
        """Check whether another product uses the slug."""
        # pylint: disable=no-member
        qs = ProductModel.objects.filter(slug=slug)
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        return await sync_to_async(qs.exists)()

    async def has_order_items(self, product_id: uuid.UUID) -> bool:
        """Check whether any order line references the product."""
        # pylint: disable=no-member
        qs = OrderItemModel.objects.filter(product_id=product_id)
        return await sync_to_async(qs.exists)()

    @sync_to_async
    def delete_with_cart_items(self, product_id: uuid.UUID) -> int:
        """Remove the product from carts and delete it atomically."""
        try:
            with transaction.atomic():
                # pylint: disable=no-member
                removed, _ = CartItemModel.objects.filter(product_id=product_id).delete()
                ProductModel.objects.filter(id=product_id).delete()
        except ProtectedError as e:
            raise ProductHasOrdersError() from e
        return removed

    async def list_all(self) -> List[Product]:
        """List all products with category and brand, newest first."""
        qs = self._queryset().order_by("-created_at")
        models = await sync_to_async(list)(qs)
        return [self._to_domain(model) for model in models]
