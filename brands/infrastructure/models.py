"""
Brand model.
"""

import uuid

from django.db import models


class Brand(models.Model):
    """
    Manufacturer or label products are sold under (e.g. Apple, Samsung).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, help_text="Brand display name")
    slug = models.SlugField(max_length=255, unique=True, help_text="URL-safe identifier")
    description = models.TextField(null=True, blank=True)
    logo = models.CharField(max_length=500, null=True, blank=True, help_text="Logo image URL")
    website = models.URLField(max_length=500, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "brands"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["created_at"], name="brands_created_idx"),
        ]

    def clean(self):
        """Validate brand fields."""
        from django.core.exceptions import ValidationError

        if not self.name or not self.name.strip():
            raise ValidationError("Name is required")

    def save(self, *args, **kwargs):
        """Save brand with validation."""
        self.full_clean(validate_unique=False)
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name
