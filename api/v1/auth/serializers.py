"""
Serializers for authentication endpoints.
"""

from rest_framework import serializers


class RegisterRequestSerializer(serializers.Serializer):
    """Serializer for register request."""

    first_name = serializers.CharField(required=True, max_length=150)
    last_name = serializers.CharField(required=True, max_length=150)
    email = serializers.EmailField(required=True)
    password = serializers.CharField(required=True, write_only=True, trim_whitespace=False)


class LoginRequestSerializer(serializers.Serializer):
    """Serializer for login request."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(required=True, write_only=True, trim_whitespace=False)


class UserSerializer(serializers.Serializer):
    """Serializer for UserDTO."""

    id = serializers.UUIDField()
    email = serializers.EmailField()
    first_name = serializers.CharField()
    last_name = serializers.CharField()
    name = serializers.CharField()
    role = serializers.CharField()
    created_at = serializers.DateTimeField()
