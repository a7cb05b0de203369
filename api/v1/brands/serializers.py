"""
Serializers for dashboard brand endpoints.
"""

from rest_framework import serializers

from api.serializers import ListingQuerySerializer


class CreateBrandRequestSerializer(serializers.Serializer):
    """Serializer for create brand request."""

    name = serializers.CharField(required=True, max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    logo = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=500)
    website = serializers.URLField(
        required=False, allow_blank=True, allow_null=True, max_length=500
    )


class UpdateBrandRequestSerializer(CreateBrandRequestSerializer):
    """Serializer for update brand request; the slug is edited by hand."""

    slug = serializers.SlugField(required=True, max_length=255)


class BrandListQuerySerializer(ListingQuerySerializer):
    """Query string of the brand table."""


class BrandSerializer(serializers.Serializer):
    """Serializer for BrandDTO."""

    id = serializers.UUIDField()
    name = serializers.CharField()
    slug = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    logo = serializers.CharField(allow_null=True)
    website = serializers.CharField(allow_null=True)
    product_count = serializers.IntegerField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()
