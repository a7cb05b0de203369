"""
Django management command to seed a development catalog.

Creates:
- An administrator account
- A sample brand
- A sample category
- A sample product under both

Existing rows (matched by email or slug) are reused.
"""

import asyncio
import logging
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from brands.domain.brand import Brand
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from categories.domain.category import Category
from categories.infrastructure.repositories.django_category_repository import (
    DjangoCategoryRepository,
)
from core.application.services.catalog_cache_service import SECTIONS, CatalogCacheService
from core.domain.value_objects import ProductType, Slug
from products.domain.product import Product, ProductDetails
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)

logger = logging.getLogger(__name__)
User = get_user_model()


class Command(BaseCommand):
    """Command to seed the catalog."""

    help = "Create an admin account and a sample brand, category and product"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--skip-admin",
            action="store_true",
            help="Skip creating the administrator account",
        )
        parser.add_argument(
            "--admin-email",
            type=str,
            default="admin@example.com",
            help="Administrator email (default: admin@example.com)",
        )
        parser.add_argument(
            "--admin-password",
            type=str,
            default="admin12345",
            help="Administrator password (default: admin12345)",
        )
        parser.add_argument(
            "--brand-name",
            type=str,
            default="Apple",
            help="Brand name (default: Apple)",
        )
        parser.add_argument(
            "--category-name",
            type=str,
            default="Smartphones",
            help="Category name (default: Smartphones)",
        )
        parser.add_argument(
            "--product-name",
            type=str,
            default="iPhone 15 Pro",
            help="Product name (default: iPhone 15 Pro)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        if not options["skip_admin"]:
            self.create_admin(options["admin_email"], options["admin_password"])

        brand, category, product = asyncio.run(self.create_catalog(options))

        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS("\nCatalog seeded:"))
        self.stdout.write(f"  Brand:    {brand.name} ({brand.slug})")
        self.stdout.write(f"  Category: {category.name} ({category.slug})")
        self.stdout.write(f"  Product:  {product.name} ({product.slug}) at {product.price}")

    def create_admin(self, email: str, password: str):
        """Create an administrator if the email is free."""
        if User.objects.filter(email=email.lower()).exists():
            # pylint: disable=no-member
            self.stdout.write(self.style.WARNING(f"Admin '{email}' already exists"))
            return

        User.objects.create_superuser(
            email=email, password=password, first_name="Store", last_name="Admin"
        )
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"Created admin: {email} / {password}"))

    async def create_catalog(self, options):
        """Create the brand, category and product, then drop cached listings."""
        brand_repo = DjangoBrandRepository()
        category_repo = DjangoCategoryRepository()
        product_repo = DjangoProductRepository()

        brand = await brand_repo.find_by_slug(str(Slug.from_name(options["brand_name"])))
        if brand is None:
            brand = await brand_repo.save(
                Brand.create(name=options["brand_name"], website="https://www.apple.com")
            )

        category = Category.create(
            name=options["category_name"], description="Phones and accessories"
        )
        if not await category_repo.slug_taken(str(category.slug)):
            category = await category_repo.save(category)
        else:
            category = next(
                existing
                for existing in await category_repo.list_all()
                if existing.slug == category.slug
            )

        product = await product_repo.find_by_slug(str(Slug.from_name(options["product_name"])))
        if product is None:
            details = ProductDetails(
                name=options["product_name"],
                type=ProductType.MOBILE_PHONE,
                category_id=category.id,
                brand_id=brand.id,
                price=Decimal("999.00"),
                original_price=Decimal("1199.00"),
                stock=25,
                short_description="Titanium design, A17 Pro chip",
                color="Natural Titanium",
                keywords=("iphone", "apple", "smartphone"),
            )
            product = await product_repo.save(Product.create(details))

        await CatalogCacheService.invalidate(SECTIONS)
        logger.info("Catalog seeded", extra={"brand_id": str(brand.id)})
        return brand, category, product
