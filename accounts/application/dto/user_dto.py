"""
User DTOs for API responses.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime

from accounts.domain.user import User


@dataclass
class UserDTO:
    """DTO for the signed-in user."""

    id: uuid.UUID
    email: str
    first_name: str
    last_name: str
    name: str
    role: str
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        """Build the DTO from a domain user."""
        return cls(
            id=user.id,
            email=str(user.email),
            first_name=user.first_name,
            last_name=user.last_name,
            name=user.name,
            role=user.role.value,
            created_at=user.created_at,
        )
