"""
Integration tests for health endpoints.
"""
import pytest
from django.urls import reverse


@pytest.mark.django_db
@pytest.mark.integration
class TestHealthEndpoints:
    """Tests for health and readiness checks."""

    def test_health(self, client):
        """Test the liveness endpoint."""
        response = client.get(reverse("health"))

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "store-admin-service"}

    def test_database_and_cache(self, client):
        """Test the dependency checks."""
        assert client.get(reverse("health-db")).json()["database"] == "connected"
        assert client.get(reverse("health-cache")).json()["cache"] == "connected"

    def test_ready(self, client):
        """Test readiness reports every check."""
        response = client.get(reverse("ready"))

        assert response.status_code == 200
        assert response.json()["checks"] == {"database": True, "cache": True}
