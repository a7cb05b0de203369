"""
Serializers for dashboard product endpoints.
"""
from decimal import Decimal

from rest_framework import serializers

from api.serializers import ListingQuerySerializer, RefSerializer
from core.domain.value_objects import ProductCondition, ProductType
from products.domain.product import (
    DEFAULT_LOW_STOCK_THRESHOLD,
    DEFAULT_WARRANTY_MONTHS,
    MIN_PRICE,
    ProductDetails,
)


# Largest value a PositiveIntegerField column holds on PostgreSQL
MAX_COUNT = 2147483647


def _optional_text(**kwargs):
    return serializers.CharField(required=False, allow_blank=True, allow_null=True, **kwargs)


def _optional_money():
    return serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal("0"),
        required=False,
        allow_null=True,
    )


def _count(default):
    return serializers.IntegerField(
        required=False, default=default, min_value=0, max_value=MAX_COUNT
    )


class ProductRequestSerializer(serializers.Serializer):
    """Serializer for create and update product requests."""

    name = serializers.CharField(required=True, max_length=255)
    type = serializers.ChoiceField(choices=[member.value for member in ProductType])
    category_id = serializers.UUIDField(required=True)
    brand_id = serializers.UUIDField(required=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=MIN_PRICE)
    original_price = _optional_money()
    cost_price = _optional_money()
    stock = _count(0)
    low_stock_threshold = _count(DEFAULT_LOW_STOCK_THRESHOLD)
    discount = serializers.DecimalField(
        max_digits=5,
        decimal_places=2,
        min_value=Decimal("0"),
        max_value=Decimal("100"),
        required=False,
        default=Decimal("0"),
    )
    description = _optional_text()
    short_description = _optional_text(max_length=500)
    thumbnail = _optional_text(max_length=500)
    images = serializers.ListField(
        child=serializers.CharField(max_length=500), required=False, default=list
    )
    weight = serializers.DecimalField(
        max_digits=10, decimal_places=3, min_value=Decimal("0"), required=False, allow_null=True
    )
    dimensions = _optional_text(max_length=100)
    color = _optional_text(max_length=50)
    condition = serializers.ChoiceField(
        choices=[member.value for member in ProductCondition],
        required=False,
        default=ProductCondition.NEW.value,
    )
    warranty_months = _count(DEFAULT_WARRANTY_MONTHS)
    is_available = serializers.BooleanField(required=False, default=True)
    is_featured = serializers.BooleanField(required=False, default=False)
    is_pre_owned = serializers.BooleanField(required=False, default=False)
    specifications = serializers.DictField(required=False, allow_null=True)
    meta_title = _optional_text(max_length=255)
    meta_description = _optional_text(max_length=500)
    keywords = serializers.ListField(
        child=serializers.CharField(max_length=100), required=False, default=list
    )

    def to_details(self) -> ProductDetails:
        """Build ProductDetails from validated data."""
        data = dict(self.validated_data)
        data["type"] = ProductType(data["type"])
        data["condition"] = ProductCondition(data["condition"])
        data["images"] = tuple(data.get("images") or ())
        data["keywords"] = tuple(data.get("keywords") or ())
        return ProductDetails(**data)


class ProductListQuerySerializer(ListingQuerySerializer):
    """Query string of the product table."""


class ProductRefSerializer(RefSerializer):
    """Category or brand of a product."""

    slug = serializers.CharField()


class ProductSerializer(serializers.Serializer):
    """Serializer for ProductDTO."""

    id = serializers.UUIDField()
    name = serializers.CharField()
    slug = serializers.CharField()
    type = serializers.CharField()
    category_id = serializers.UUIDField()
    brand_id = serializers.UUIDField()
    category = ProductRefSerializer(allow_null=True)
    brand = ProductRefSerializer(allow_null=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2)
    original_price = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    cost_price = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    discount = serializers.DecimalField(max_digits=5, decimal_places=2)
    discount_percentage = serializers.FloatField()
    savings = serializers.FloatField()
    stock = serializers.IntegerField()
    low_stock_threshold = serializers.IntegerField()
    is_low_stock = serializers.BooleanField()
    description = serializers.CharField(allow_null=True)
    short_description = serializers.CharField(allow_null=True)
    thumbnail = serializers.CharField(allow_null=True)
    images = serializers.ListField(child=serializers.CharField())
    weight = serializers.DecimalField(max_digits=10, decimal_places=3, allow_null=True)
    dimensions = serializers.CharField(allow_null=True)
    color = serializers.CharField(allow_null=True)
    condition = serializers.CharField()
    warranty_months = serializers.IntegerField()
    is_available = serializers.BooleanField()
    is_featured = serializers.BooleanField()
    is_pre_owned = serializers.BooleanField()
    specifications = serializers.DictField(allow_null=True)
    meta_title = serializers.CharField(allow_null=True)
    meta_description = serializers.CharField(allow_null=True)
    keywords = serializers.ListField(child=serializers.CharField())
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class ProductOverviewSerializer(serializers.Serializer):
    """Serializer for ProductOverviewDTO."""

    products = ProductSerializer(many=True)
    categories = RefSerializer(many=True)
    brands = RefSerializer(many=True)
