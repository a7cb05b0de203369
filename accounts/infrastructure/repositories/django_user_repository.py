"""
Django implementation of UserRepository port.

Password hashing, validation and checking go through django.contrib.auth.
"""

import uuid
from typing import Optional

from asgiref.sync import sync_to_async
from django.contrib.auth import authenticate
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.db import IntegrityError

from accounts.domain.user import User
from accounts.infrastructure.models import User as UserModel
from accounts.ports.user_repository import UserRepository
from core.domain.exceptions import InvalidPasswordError, UserAlreadyExistsError
from core.domain.value_objects import Email, UserRole


class DjangoUserRepository(UserRepository):
    """Django ORM implementation of UserRepository."""

    def _to_domain(self, model: UserModel) -> User:
        """
        Convert Django model to domain entity.

        Args:
            model: Django User model

        Returns:
            User domain entity
        """
        return User(
            id=model.id,
            email=Email(model.email),
            first_name=model.first_name,
            last_name=model.last_name,
            name=model.name,
            role=UserRole(model.role),
            created_at=model.date_joined,
        )

    async def find_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        """Find a user by ID."""
        # pylint: disable=no-member
        model = await sync_to_async(UserModel.objects.filter(id=user_id).first)()
        return self._to_domain(model) if model else None

    async def exists_by_email(self, email: str) -> bool:
        """Check whether an email is already registered."""
        # pylint: disable=no-member
        qs = UserModel.objects.filter(email__iexact=email)
        return await sync_to_async(qs.exists)()

    @sync_to_async
    def create(
        self, email: str, password: str, first_name: str, last_name: str, name: str
    ) -> User:
        """Create a shopper account."""
        try:
            # pylint: disable=no-member
            model = UserModel.objects.create_user(
                email=email,
                password=password,
                first_name=first_name,
                last_name=last_name,
                name=name,
                role=UserRole.USER.value,
            )
        except IntegrityError as e:
            raise UserAlreadyExistsError() from e
        return self._to_domain(model)

    @sync_to_async
    def validate_password(self, password: str, email: str, name: str) -> None:
        """Check a password against AUTH_PASSWORD_VALIDATORS."""
        # Unsaved instance so the similarity validator can compare attributes
        candidate = UserModel(email=email, name=name)
        try:
            validate_password(password, user=candidate)
        except ValidationError as e:
            raise InvalidPasswordError(" ".join(e.messages)) from e

    @sync_to_async
    def authenticate(self, email: str, password: str) -> Optional[User]:
        """Check credentials with the configured authentication backends."""
        model = authenticate(email=email, password=password)
        return self._to_domain(model) if model else None
