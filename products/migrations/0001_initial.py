import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

TYPE_CHOICES = [
    ("MOBILE_PHONE", "Mobile Phone"),
    ("TABLET", "Tablet"),
    ("LAPTOP", "Laptop"),
    ("DESKTOP", "Desktop"),
    ("MONITOR", "Monitor"),
    ("TV", "Tv"),
    ("TV_BOX", "Tv Box"),
    ("SMARTWATCH", "Smartwatch"),
    ("ROUTER", "Router"),
    ("CHARGER", "Charger"),
    ("MOUSE", "Mouse"),
    ("KEYBOARD", "Keyboard"),
    ("HEADPHONES", "Headphones"),
    ("SPEAKERS", "Speakers"),
    ("CAMERA", "Camera"),
    ("GAMING_CONSOLE", "Gaming Console"),
    ("ACCESSORY", "Accessory"),
    ("OTHER", "Other"),
]

CONDITION_CHOICES = [
    ("NEW", "New"),
    ("EXCELLENT", "Excellent"),
    ("GOOD", "Good"),
    ("FAIR", "Fair"),
    ("POOR", "Poor"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("brands", "0001_initial"),
        ("categories", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                (
                    "slug",
                    models.SlugField(
                        help_text="URL-safe identifier", max_length=255, unique=True
                    ),
                ),
                ("name", models.CharField(help_text="Product display name", max_length=255)),
                ("description", models.TextField(blank=True, null=True)),
                ("short_description", models.CharField(blank=True, max_length=500, null=True)),
                ("type", models.CharField(choices=TYPE_CHOICES, max_length=32)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.01"))],
                    ),
                ),
                (
                    "original_price",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=12,
                        null=True,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                (
                    "cost_price",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=12,
                        null=True,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                (
                    "thumbnail",
                    models.CharField(blank=True, help_text="Image URL", max_length=500, null=True),
                ),
                (
                    "images",
                    models.JSONField(blank=True, default=list, help_text="Gallery image URLs"),
                ),
                ("stock", models.PositiveIntegerField(default=0)),
                ("low_stock_threshold", models.PositiveIntegerField(default=5)),
                (
                    "discount",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0"),
                        max_digits=5,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("0")),
                            django.core.validators.MaxValueValidator(Decimal("100")),
                        ],
                    ),
                ),
                (
                    "weight",
                    models.DecimalField(blank=True, decimal_places=3, max_digits=10, null=True),
                ),
                ("dimensions", models.CharField(blank=True, max_length=100, null=True)),
                ("color", models.CharField(blank=True, max_length=50, null=True)),
                (
                    "condition",
                    models.CharField(choices=CONDITION_CHOICES, default="NEW", max_length=16),
                ),
                ("warranty_months", models.PositiveIntegerField(default=12)),
                ("is_available", models.BooleanField(default=True)),
                ("is_featured", models.BooleanField(default=False)),
                ("is_pre_owned", models.BooleanField(default=False)),
                ("specifications", models.JSONField(blank=True, null=True)),
                ("meta_title", models.CharField(blank=True, max_length=255, null=True)),
                ("meta_description", models.CharField(blank=True, max_length=500, null=True)),
                ("keywords", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "brand",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="products",
                        to="brands.brand",
                    ),
                ),
                (
                    "category",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="products",
                        to="categories.productcategory",
                    ),
                ),
            ],
            options={
                "db_table": "products",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["category"], name="products_category_idx"),
                    models.Index(fields=["brand"], name="products_brand_idx"),
                    models.Index(fields=["created_at"], name="products_created_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="CartItem",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("quantity", models.PositiveIntegerField(default=1)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="cart_items",
                        to="products.product",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="cart_items",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "cart_items",
                "indexes": [models.Index(fields=["product"], name="cart_items_product_idx")],
            },
        ),
        migrations.CreateModel(
            name="OrderItem",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                (
                    "order_reference",
                    models.CharField(help_text="Order the line belongs to", max_length=64),
                ),
                ("quantity", models.PositiveIntegerField(default=1)),
                ("unit_price", models.DecimalField(decimal_places=2, max_digits=12)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="order_items",
                        to="products.product",
                    ),
                ),
            ],
            options={
                "db_table": "order_items",
                "indexes": [
                    models.Index(fields=["product"], name="order_items_product_idx"),
                    models.Index(fields=["order_reference"], name="order_items_order_idx"),
                ],
            },
        ),
    ]
