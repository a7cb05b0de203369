"""
Integration tests for the dashboard brand API.
"""
import uuid

import pytest
from django.urls import reverse


@pytest.mark.django_db
@pytest.mark.integration
class TestBrandAPI:
    """Tests for /api/v1/dashboard/brands/."""

    def test_create_brand(self, admin_client):
        """Test creating a brand returns 201 with the stored brand."""
        response = admin_client.post(
            reverse("brands:list"),
            {"name": "Apple", "website": "https://apple.com"},
            format="json",
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["error"] is None
        assert body["message"] == "Brand created successfully"
        assert body["data"]["slug"] == "apple"
        assert body["data"]["product_count"] == 0

    def test_create_duplicate(self, admin_client):
        """Test duplicate names conflict."""
        admin_client.post(reverse("brands:list"), {"name": "Apple"}, format="json")

        response = admin_client.post(reverse("brands:list"), {"name": "apple"}, format="json")

        assert response.status_code == 409
        assert response.json()["code"] == "BRAND_ALREADY_EXISTS"

    def test_create_missing_name(self, admin_client):
        """Test validation errors use the error envelope."""
        response = admin_client.post(reverse("brands:list"), {}, format="json")

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["data"] is None
        assert body["code"] == "VALIDATION_ERROR"
        assert body["error"].startswith("name:")

    def test_list_search_and_paginate(self, admin_client):
        """Test the brand table."""
        for name in ("Apple", "Samsung", "Sony"):
            admin_client.post(reverse("brands:list"), {"name": name}, format="json")

        response = admin_client.get(reverse("brands:list"), {"search": "s", "page_size": 10})

        body = response.json()
        assert response.status_code == 200
        assert sorted(row["name"] for row in body["data"]) == ["Samsung", "Sony"]
        assert body["pagination"]["total_items"] == 2
        assert body["pagination"]["total_pages"] == 1

    def test_update_brand(self, admin_client, db_brand):
        """Test editing name and slug."""
        response = admin_client.put(
            reverse("brands:detail", args=[db_brand.id]),
            {"name": "Apple Inc", "slug": "apple-inc"},
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["data"]["slug"] == "apple-inc"

    def test_get_missing(self, admin_client):
        """Test unknown ids."""
        response = admin_client.get(reverse("brands:detail", args=[uuid.uuid4()]))

        assert response.status_code == 404
        assert response.json()["error"] == "Brand not found"

    def test_delete_brand_in_use(self, admin_client, db_brand, db_product):
        """Test brands with products cannot be deleted."""
        response = admin_client.delete(reverse("brands:detail", args=[db_brand.id]))

        assert response.status_code == 409
        assert response.json()["code"] == "BRAND_IN_USE"

    def test_delete_brand(self, admin_client, db_brand):
        """Test deleting an unused brand."""
        response = admin_client.delete(reverse("brands:detail", args=[db_brand.id]))

        assert response.status_code == 200
        assert response.json()["message"] == "Brand deleted successfully"
        assert admin_client.get(reverse("brands:detail", args=[db_brand.id])).status_code == 404
