"""
Django admin configuration for products app.
"""

from django.contrib import admin

from products.infrastructure.models import CartItem, OrderItem, Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product model."""

    list_display = ["name", "type", "brand", "category", "price", "stock", "is_available"]
    list_filter = ["type", "condition", "is_available", "is_featured", "brand", "category"]
    search_fields = ["name", "slug", "brand__name", "category__name"]
    readonly_fields = ["id", "created_at", "updated_at"]
    list_select_related = ["brand", "category"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": (
                    "id",
                    "name",
                    "slug",
                    "type",
                    "category",
                    "brand",
                    "short_description",
                    "description",
                ),
            },
        ),
        (
            "Pricing & Stock",
            {
                "fields": (
                    "price",
                    "original_price",
                    "cost_price",
                    "discount",
                    "stock",
                    "low_stock_threshold",
                ),
            },
        ),
        (
            "Media",
            {
                "fields": ("thumbnail", "images"),
            },
        ),
        (
            "Details",
            {
                "fields": (
                    "condition",
                    "warranty_months",
                    "weight",
                    "dimensions",
                    "color",
                    "specifications",
                    "is_available",
                    "is_featured",
                    "is_pre_owned",
                ),
            },
        ),
        (
            "SEO",
            {
                "fields": ("meta_title", "meta_description", "keywords"),
                "classes": ("collapse",),
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


@admin.register(CartItem)
class CartItemAdmin(admin.ModelAdmin):
    """Admin interface for CartItem model."""

    list_display = ["product", "user", "quantity", "created_at"]
    readonly_fields = ["id", "created_at"]


@admin.register(OrderItem)
class OrderItemAdmin(admin.ModelAdmin):
    """Admin interface for OrderItem model."""

    list_display = ["order_reference", "product", "quantity", "unit_price", "created_at"]
    search_fields = ["order_reference", "product__name"]
    readonly_fields = ["id", "created_at"]
