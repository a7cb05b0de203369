"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass
from enum import Enum

from django.utils.text import slugify


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class Email(ValueObject):
    """Email value object with validation."""

    value: str

    def __post_init__(self):
        """Validate and normalize email."""
        if not self.value or "@" not in self.value:
            raise ValueError(f"Invalid email address: {self.value}")
        object.__setattr__(self, "value", self.value.strip().lower())

    def __str__(self) -> str:
        """Return email as string."""
        return self.value


@dataclass(frozen=True)
class Slug(ValueObject):
    """URL-safe identifier shared by brands, categories and products."""

    value: str

    def __post_init__(self):
        """Validate slug format."""
        if not self.value:
            raise ValueError("Slug cannot be empty")
        if len(self.value) > 255:
            raise ValueError("Slug too long")
        if not self.value.replace("-", "").replace("_", "").isalnum():
            raise ValueError(f"Invalid slug format: {self.value}")
        if self.value != self.value.lower():
            raise ValueError(f"Slug must be lower case: {self.value}")

    @classmethod
    def from_name(cls, name: str) -> "Slug":
        """
        Build a slug from a display name.

        Args:
            name: Display name (e.g. "Apple iPhone 15")

        Returns:
            Slug such as "apple-iphone-15"

        Raises:
            ValueError: If the name has no usable characters
        """
        return cls(slugify(name or "", allow_unicode=False))

    def __str__(self) -> str:
        """Return slug as string."""
        return self.value


class ProductType(Enum):
    """Kind of device or accessory a product is."""

    MOBILE_PHONE = "MOBILE_PHONE"
    TABLET = "TABLET"
    LAPTOP = "LAPTOP"
    DESKTOP = "DESKTOP"
    MONITOR = "MONITOR"
    TV = "TV"
    TV_BOX = "TV_BOX"
    SMARTWATCH = "SMARTWATCH"
    ROUTER = "ROUTER"
    CHARGER = "CHARGER"
    MOUSE = "MOUSE"
    KEYBOARD = "KEYBOARD"
    HEADPHONES = "HEADPHONES"
    SPEAKERS = "SPEAKERS"
    CAMERA = "CAMERA"
    GAMING_CONSOLE = "GAMING_CONSOLE"
    ACCESSORY = "ACCESSORY"
    OTHER = "OTHER"

    def __str__(self) -> str:
        """Return type as string."""
        return self.value


class ProductCondition(Enum):
    """Physical condition of a product."""

    NEW = "NEW"
    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    FAIR = "FAIR"
    POOR = "POOR"

    def __str__(self) -> str:
        """Return condition as string."""
        return self.value


class UserRole(Enum):
    """Role of an account."""

    ADMIN = "ADMIN"
    USER = "USER"

    def __str__(self) -> str:
        """Return role as string."""
        return self.value
