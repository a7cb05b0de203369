"""
User domain entity.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime

from core.domain.value_objects import Email, UserRole


@dataclass(frozen=True)
class User:
    """
    Store account.

    Only the fields the application needs; credentials never leave
    the repository.
    """

    id: uuid.UUID
    email: Email
    first_name: str
    last_name: str
    name: str
    role: UserRole
    created_at: datetime

    def __post_init__(self):
        """Validate user entity."""
        if len(self.name) > 255:
            raise ValueError("User name too long")

    @property
    def is_admin(self) -> bool:
        """Whether the user may use the dashboard."""
        return self.role is UserRole.ADMIN

    @staticmethod
    def display_name(first_name: str, last_name: str) -> str:
        """
        Build the display name stored for new accounts.

        Args:
            first_name: Given name
            last_name: Family name

        Returns:
            "first last" with surrounding whitespace removed
        """
        return f"{first_name.strip()} {last_name.strip()}".strip()
