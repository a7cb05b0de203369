"""
Integration tests for the public storefront API.
"""
from decimal import Decimal

import pytest
from django.urls import reverse


@pytest.mark.django_db
@pytest.mark.integration
class TestStorefrontAPI:
    """Tests for /api/v1/storefront/."""

    def test_browse_sorted_by_price(self, api_client, make_db_product):
        """Test sorting and the default page size."""
        make_db_product(name="Budget Phone", price=Decimal("199.00"))
        make_db_product(name="Flagship Phone", price=Decimal("1299.00"))
        make_db_product(name="Midrange Phone", price=Decimal("499.00"))

        response = api_client.get(reverse("storefront:products"), {"sort": "price-low"})

        body = response.json()
        assert response.status_code == 200
        assert [row["name"] for row in body["data"]] == [
            "Budget Phone",
            "Midrange Phone",
            "Flagship Phone",
        ]
        assert body["pagination"]["page_size"] == 25

    def test_filter_by_brand_and_price(self, api_client, make_db_product, db_brand):
        """Test brand slug and price range filters."""
        make_db_product(name="Budget Phone", price=Decimal("199.00"))
        make_db_product(name="Flagship Phone", price=Decimal("1299.00"))

        response = api_client.get(
            reverse("storefront:products"),
            {"brand": str(db_brand.slug), "min_price": "100", "max_price": "500"},
        )

        assert [row["name"] for row in response.json()["data"]] == ["Budget Phone"]

    def test_inverted_price_range(self, api_client):
        """Test min price above max price."""
        response = api_client.get(
            reverse("storefront:products"), {"min_price": "500", "max_price": "100"}
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("min_price:")

    def test_unknown_sort(self, api_client):
        """Test sort options are validated."""
        response = api_client.get(reverse("storefront:products"), {"sort": "popular"})

        assert response.status_code == 400

    def test_product_page(self, api_client, db_product):
        """Test a product page by slug and by id."""
        by_slug = api_client.get(reverse("storefront:product-detail", args=["iphone-15-pro"]))
        by_id = api_client.get(reverse("storefront:product-detail", args=[str(db_product.id)]))

        assert by_slug.json()["data"]["id"] == str(db_product.id)
        assert by_id.json()["data"]["slug"] == "iphone-15-pro"

    def test_product_page_missing(self, api_client):
        """Test unknown products."""
        response = api_client.get(reverse("storefront:product-detail", args=["missing"]))

        assert response.status_code == 404
        assert response.json()["success"] is False
