"""
Django admin configuration for accounts app.
"""

from django.contrib import admin

from accounts.infrastructure.models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """Admin interface for User model."""

    list_display = ["email", "name", "role", "is_active", "date_joined"]
    list_filter = ["role", "is_active", "is_staff"]
    search_fields = ["email", "name", "first_name", "last_name"]
    readonly_fields = ["id", "date_joined", "updated_at", "last_login"]
    exclude = ["password"]
    fieldsets = (
        (
            "Account",
            {
                "fields": ("id", "email", "first_name", "last_name", "name", "role"),
            },
        ),
        (
            "Permissions",
            {
                "fields": ("is_active", "is_staff", "is_superuser", "groups", "user_permissions"),
                "classes": ("collapse",),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("date_joined", "updated_at", "last_login"),
                "classes": ("collapse",),
            },
        ),
    )
