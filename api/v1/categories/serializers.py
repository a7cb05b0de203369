"""
Serializers for dashboard category endpoints.
"""

from rest_framework import serializers

from api.serializers import ListingQuerySerializer, RefSerializer


class CreateCategoryRequestSerializer(serializers.Serializer):
    """
    Serializer for create category request.

    ``parent_id`` is kept as text: the form sends ``"none"`` or ``""``
    for a top-level category.
    """

    name = serializers.CharField(required=True, max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    image = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=500)
    parent_id = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class UpdateCategoryRequestSerializer(CreateCategoryRequestSerializer):
    """Serializer for update category request; the slug is edited by hand."""

    slug = serializers.SlugField(required=True, max_length=255)


class CategoryListQuerySerializer(ListingQuerySerializer):
    """Query string of the category table."""


class CategorySerializer(serializers.Serializer):
    """Serializer for CategoryDTO."""

    id = serializers.UUIDField()
    name = serializers.CharField()
    slug = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    image = serializers.CharField(allow_null=True)
    parent_id = serializers.UUIDField(allow_null=True)
    parent = RefSerializer(allow_null=True)
    children = RefSerializer(many=True)
    product_count = serializers.IntegerField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()
