"""
Serializers for storefront endpoints.
"""
from decimal import Decimal

from rest_framework import serializers

from core.domain.listing import PAGE_SIZE_OPTIONS
from products.application.queries.browse_products import (
    DEFAULT_MAX_PRICE,
    DEFAULT_MIN_PRICE,
    SORT_NEWEST,
    SORT_OPTIONS,
    STOREFRONT_PAGE_SIZE,
    BrowseProductsQuery,
)


class BrowseQuerySerializer(serializers.Serializer):
    """Query string of the storefront product grid."""

    search = serializers.CharField(required=False, allow_blank=True, max_length=255)
    category = serializers.CharField(required=False, allow_blank=True, max_length=255)
    brand = serializers.CharField(required=False, allow_blank=True, max_length=255)
    min_price = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal("0"),
        required=False,
        default=DEFAULT_MIN_PRICE,
    )
    max_price = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal("0"),
        required=False,
        default=DEFAULT_MAX_PRICE,
    )
    sort = serializers.ChoiceField(choices=SORT_OPTIONS, required=False, default=SORT_NEWEST)
    page = serializers.IntegerField(required=False, default=1, min_value=1)
    page_size = serializers.ChoiceField(
        choices=PAGE_SIZE_OPTIONS, required=False, default=STOREFRONT_PAGE_SIZE
    )

    def validate(self, attrs):
        if attrs["min_price"] > attrs["max_price"]:
            raise serializers.ValidationError(
                {"min_price": "Minimum price cannot exceed maximum price"}
            )
        return attrs

    def to_query(self) -> BrowseProductsQuery:
        """Build the browse query from validated data."""
        data = self.validated_data
        return BrowseProductsQuery(
            search=data.get("search") or None,
            category=data.get("category") or None,
            brand=data.get("brand") or None,
            min_price=data["min_price"],
            max_price=data["max_price"],
            sort=data["sort"],
            page=data["page"],
            page_size=int(data["page_size"]),
        )
