import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ProductCategory",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("name", models.CharField(help_text="Category display name", max_length=255)),
                (
                    "slug",
                    models.SlugField(
                        help_text="URL-safe identifier", max_length=255, unique=True
                    ),
                ),
                ("description", models.TextField(blank=True, null=True)),
                (
                    "image",
                    models.CharField(blank=True, help_text="Image URL", max_length=500, null=True),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "parent",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="children",
                        to="categories.productcategory",
                    ),
                ),
            ],
            options={
                "db_table": "product_categories",
                "ordering": ["-created_at"],
                "verbose_name_plural": "product categories",
                "indexes": [
                    models.Index(fields=["parent"], name="categories_parent_idx"),
                    models.Index(fields=["created_at"], name="categories_created_idx"),
                ],
            },
        ),
    ]
