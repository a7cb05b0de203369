"""
Product category model.
"""

import uuid

from django.db import models


class ProductCategory(models.Model):
    """
    Category products are filed under (e.g. Phones > Smartphones).
    Deleting a category turns its children into top-level categories.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, help_text="Category display name")
    slug = models.SlugField(max_length=255, unique=True, help_text="URL-safe identifier")
    description = models.TextField(null=True, blank=True)
    image = models.CharField(max_length=500, null=True, blank=True, help_text="Image URL")
    parent = models.ForeignKey(
        "self",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="children",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "product_categories"
        ordering = ["-created_at"]
        verbose_name_plural = "product categories"
        indexes = [
            models.Index(fields=["parent"], name="categories_parent_idx"),
            models.Index(fields=["created_at"], name="categories_created_idx"),
        ]

    def clean(self):
        """Validate category fields."""
        from django.core.exceptions import ValidationError

        if not self.name or not self.name.strip():
            raise ValidationError("Name is required")
        if self.parent_id and self.parent_id == self.id:
            raise ValidationError("A category cannot be its own parent")

    def save(self, *args, **kwargs):
        """Save category with validation."""
        self.full_clean(validate_unique=False)
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name
