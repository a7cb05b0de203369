"""
Django admin configuration for brands app.
"""

from django.contrib import admin
from django.db.models import Count

from brands.infrastructure.models import Brand


@admin.register(Brand)
class BrandAdmin(admin.ModelAdmin):
    """Admin interface for Brand model."""

    list_display = ["name", "slug", "website", "product_count", "created_at"]
    list_filter = ["created_at", "updated_at"]
    search_fields = ["name", "slug"]
    prepopulated_fields = {"slug": ("name",)}
    readonly_fields = ["id", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "name", "slug", "description"),
            },
        ),
        (
            "Links",
            {
                "fields": ("logo", "website"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    def get_queryset(self, request):
        """Annotate product counts."""
        return super().get_queryset(request).annotate(_product_count=Count("products"))

    @admin.display(description="Products", ordering="_product_count")
    def product_count(self, obj):
        """Number of products under the brand."""
        return obj._product_count
