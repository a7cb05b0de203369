"""
Unit tests for Brand domain entity.
"""

import uuid

import pytest

from brands.domain.brand import Brand
from core.domain.value_objects import Slug


class TestBrandEntity:
    """Tests for Brand domain entity."""

    def test_create_brand(self):
        """Test creating a brand entity."""
        brand = Brand.create(name="  Apple ", website="https://apple.com")

        assert brand.name == "Apple"
        assert brand.slug == Slug("apple")
        assert brand.website == "https://apple.com"
        assert brand.product_count == 0
        assert isinstance(brand.id, uuid.UUID)
        assert brand.created_at == brand.updated_at

    def test_create_brand_with_id(self):
        """Test creating a brand with specific ID."""
        brand_id = uuid.uuid4()
        assert Brand.create(name="Apple", brand_id=brand_id).id == brand_id

    def test_blank_optionals_become_none(self):
        """Test empty form fields are stored as None."""
        brand = Brand.create(name="Apple", description="", logo="", website="")
        assert brand.description is None
        assert brand.logo is None
        assert brand.website is None

    def test_update_keeps_identity(self):
        """Test updating brand details."""
        brand = Brand.create(name="Apple")
        updated = brand.update(name="Apple Inc", slug="apple-inc", description="Cupertino")

        assert updated.id == brand.id
        assert updated.slug == Slug("apple-inc")
        assert updated.description == "Cupertino"
        assert updated.created_at == brand.created_at
        assert updated.updated_at >= brand.updated_at

    def test_update_rejects_bad_slug(self):
        """Test the edited slug is validated."""
        with pytest.raises(ValueError, match="Invalid slug"):
            Brand.create(name="Apple").update(name="Apple", slug="not a slug")

    def test_invalid_name_empty(self):
        """Test invalid empty name."""
        with pytest.raises(ValueError):
            Brand.create(name="   ")

    def test_invalid_name_too_long(self):
        """Test invalid name too long."""
        with pytest.raises(ValueError, match="too long"):
            Brand.create(name="x" * 256)
