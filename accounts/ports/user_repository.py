"""
User repository port (interface).

This defines the contract for account persistence and credential checks.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Optional

from accounts.domain.user import User


class UserRepository(ABC):
    """Abstract repository for User entities."""

    @abstractmethod
    async def find_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        """
        Find a user by ID.

        Args:
            user_id: User UUID

        Returns:
            User entity or None if not found
        """
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """
        Check whether an email is already registered.

        Args:
            email: Normalized email

        Returns:
            True if a user uses the email
        """
        pass

    @abstractmethod
    async def create(
        self, email: str, password: str, first_name: str, last_name: str, name: str
    ) -> User:
        """
        Create a shopper account.

        Args:
            email: Normalized email
            password: Raw password (hashed by the implementation)
            first_name: Given name
            last_name: Family name
            name: Display name

        Returns:
            Created user

        Raises:
            UserAlreadyExistsError: If the email was taken concurrently
        """
        pass

    @abstractmethod
    async def validate_password(self, password: str, email: str, name: str) -> None:
        """
        Check a password against the configured password rules.

        Raises:
            InvalidPasswordError: If the password is rejected
        """
        pass

    @abstractmethod
    async def authenticate(self, email: str, password: str) -> Optional[User]:
        """
        Check credentials.

        Returns:
            The user when the credentials match an active account, else None
        """
        pass
