import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Brand",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("name", models.CharField(help_text="Brand display name", max_length=255)),
                (
                    "slug",
                    models.SlugField(
                        help_text="URL-safe identifier", max_length=255, unique=True
                    ),
                ),
                ("description", models.TextField(blank=True, null=True)),
                (
                    "logo",
                    models.CharField(
                        blank=True, help_text="Logo image URL", max_length=500, null=True
                    ),
                ),
                ("website", models.URLField(blank=True, max_length=500, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "brands",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["created_at"], name="brands_created_idx")],
            },
        ),
    ]
