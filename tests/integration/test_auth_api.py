"""
Integration tests for registration, login and sessions.
"""
import pytest
from django.urls import reverse

PASSWORD = "Str0ng-Passw0rd!"


def _register(client, **overrides):
    payload = {
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane@example.com",
        "password": PASSWORD,
    }
    payload.update(overrides)
    return client.post(reverse("auth:register"), payload, format="json")


@pytest.mark.django_db
@pytest.mark.integration
class TestAuthAPI:
    """Tests for /api/v1/auth/."""

    def test_register_signs_in(self, api_client):
        """Test registration creates a shopper and starts a session."""
        response = _register(api_client)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Registration successful! You are now logged in."
        assert body["data"]["name"] == "Jane Doe"
        assert body["data"]["role"] == "USER"

        session = api_client.get(reverse("auth:session")).json()
        assert session["data"]["email"] == "jane@example.com"

    def test_register_existing_email(self, api_client, shopper_user):
        """Test taken emails are rejected with 422."""
        response = _register(api_client, email="Shopper@Example.com")

        assert response.status_code == 422
        assert response.json()["error"] == "User already exists"

    def test_register_weak_password(self, api_client):
        """Test password validators run on registration."""
        response = _register(api_client, password="12345678")

        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_PASSWORD"

    def test_register_missing_fields(self, api_client):
        """Test required fields."""
        response = api_client.post(reverse("auth:register"), {}, format="json")

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_login(self, api_client, shopper_user):
        """Test signing in."""
        response = api_client.post(
            reverse("auth:login"),
            {"email": "shopper@example.com", "password": PASSWORD},
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Login successful!"
        assert api_client.get(reverse("auth:session")).json()["data"]["name"] == "Jane Doe"

    def test_login_wrong_password(self, api_client, shopper_user):
        """Test bad credentials."""
        response = api_client.post(
            reverse("auth:login"),
            {"email": "shopper@example.com", "password": "nope"},
            format="json",
        )

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid email or password"

    def test_logout(self, shopper_client):
        """Test logging out clears the session."""
        response = shopper_client.post(reverse("auth:logout"))

        assert response.status_code == 200
        assert shopper_client.get(reverse("auth:session")).json()["data"] is None

    def test_anonymous_session(self, api_client):
        """Test anonymous requests have no session user."""
        response = api_client.get(reverse("auth:session"))

        assert response.status_code == 200
        assert response.json()["data"] is None
