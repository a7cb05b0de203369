"""
Django admin configuration for categories app.
"""

from django.contrib import admin

from categories.infrastructure.models import ProductCategory


@admin.register(ProductCategory)
class ProductCategoryAdmin(admin.ModelAdmin):
    """Admin interface for ProductCategory model."""

    list_display = ["name", "slug", "parent", "created_at"]
    list_filter = ["created_at"]
    search_fields = ["name", "slug"]
    prepopulated_fields = {"slug": ("name",)}
    readonly_fields = ["id", "created_at", "updated_at"]
    autocomplete_fields = ["parent"]

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("parent")
