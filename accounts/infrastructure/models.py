"""
User model.
"""

import uuid

from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.contrib.auth.models import PermissionsMixin
from django.db import models
from django.utils import timezone

from core.domain.value_objects import UserRole

ROLE_CHOICES = [(role.value, role.value.title()) for role in UserRole]


class UserManager(BaseUserManager):
    """Manager creating users keyed by email."""

    use_in_migrations = True

    def create_user(self, email, password=None, **extra_fields):
        """
        Create and save a user.

        Args:
            email: Login email (normalized to lower case)
            password: Raw password (None for an unusable password)
            **extra_fields: Other model fields

        Returns:
            Saved User instance
        """
        if not email:
            raise ValueError("Email is required")
        email = self.normalize_email(email).lower()
        extra_fields.setdefault("role", UserRole.USER.value)
        if not extra_fields.get("name"):
            first = extra_fields.get("first_name", "")
            last = extra_fields.get("last_name", "")
            extra_fields["name"] = f"{first} {last}".strip()
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """Create an administrator with Django admin access."""
        extra_fields["role"] = UserRole.ADMIN.value
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """
    Store account. Administrators (role ADMIN) manage the catalog;
    everyone else is a shopper.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True)
    first_name = models.CharField(max_length=150, blank=True)
    last_name = models.CharField(max_length=150, blank=True)
    name = models.CharField(max_length=255, blank=True)
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default=UserRole.USER.value)
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    date_joined = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = []

    class Meta:
        db_table = "users"
        ordering = ["-date_joined"]
        indexes = [
            models.Index(fields=["role"], name="users_role_idx"),
        ]

    def __str__(self):
        return self.email

    @property
    def is_admin(self) -> bool:
        """Whether the user may use the dashboard."""
        return self.role == UserRole.ADMIN.value
