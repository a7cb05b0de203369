"""
Product, cart item and order item models.
"""
import uuid
from decimal import Decimal

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from core.domain.value_objects import ProductCondition, ProductType


def _choices(enum_cls):
    return [(member.value, member.value.replace("_", " ").title()) for member in enum_cls]


class Product(models.Model):
    """
    Item sold in the store (e.g. a phone, a laptop, a charger).
    Products belong to a category and a brand.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    slug = models.SlugField(max_length=255, unique=True, help_text="URL-safe identifier")
    name = models.CharField(max_length=255, help_text="Product display name")
    description = models.TextField(null=True, blank=True)
    short_description = models.CharField(max_length=500, null=True, blank=True)
    type = models.CharField(max_length=32, choices=_choices(ProductType))
    category = models.ForeignKey(
        "categories.ProductCategory", on_delete=models.PROTECT, related_name="products"
    )
    brand = models.ForeignKey("brands.Brand", on_delete=models.PROTECT, related_name="products")
    price = models.DecimalField(
        max_digits=12, decimal_places=2, validators=[MinValueValidator(Decimal("0.01"))]
    )
    original_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0"))],
    )
    cost_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0"))],
    )
    thumbnail = models.CharField(max_length=500, null=True, blank=True, help_text="Image URL")
    images = models.JSONField(default=list, blank=True, help_text="Gallery image URLs")
    stock = models.PositiveIntegerField(default=0)
    low_stock_threshold = models.PositiveIntegerField(default=5)
    discount = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal("0"),
        validators=[MinValueValidator(Decimal("0")), MaxValueValidator(Decimal("100"))],
    )
    weight = models.DecimalField(max_digits=10, decimal_places=3, null=True, blank=True)
    dimensions = models.CharField(max_length=100, null=True, blank=True)
    color = models.CharField(max_length=50, null=True, blank=True)
    condition = models.CharField(
        max_length=16, choices=_choices(ProductCondition), default=ProductCondition.NEW.value
    )
    warranty_months = models.PositiveIntegerField(default=12)
    is_available = models.BooleanField(default=True)
    is_featured = models.BooleanField(default=False)
    is_pre_owned = models.BooleanField(default=False)
    specifications = models.JSONField(null=True, blank=True)
    meta_title = models.CharField(max_length=255, null=True, blank=True)
    meta_description = models.CharField(max_length=500, null=True, blank=True)
    keywords = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "products"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["category"], name="products_category_idx"),
            models.Index(fields=["brand"], name="products_brand_idx"),
            models.Index(fields=["created_at"], name="products_created_idx"),
        ]

    def clean(self):
        """Validate product fields."""
        from django.core.exceptions import ValidationError

        if not self.name or not self.name.strip():
            raise ValidationError("Name is required")
        if not self.slug:
            raise ValidationError("Slug is required")

    def save(self, *args, **kwargs):
        """Save product with validation."""
        self.full_clean(validate_unique=False)
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name


class CartItem(models.Model):
    """A product sitting in a shopper's cart."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="cart_items"
    )
    product = models.ForeignKey(Product, on_delete=models.PROTECT, related_name="cart_items")
    quantity = models.PositiveIntegerField(default=1)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "cart_items"
        indexes = [
            models.Index(fields=["product"], name="cart_items_product_idx"),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.product_id}"


class OrderItem(models.Model):
    """A product line on a placed order."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order_reference = models.CharField(max_length=64, help_text="Order the line belongs to")
    product = models.ForeignKey(Product, on_delete=models.PROTECT, related_name="order_items")
    quantity = models.PositiveIntegerField(default=1)
    unit_price = models.DecimalField(max_digits=12, decimal_places=2)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "order_items"
        indexes = [
            models.Index(fields=["product"], name="order_items_product_idx"),
            models.Index(fields=["order_reference"], name="order_items_order_idx"),
        ]

    def __str__(self):
        return f"{self.order_reference}: {self.quantity} x {self.product_id}"
