"""
Cache port.

The catalog services only ever read a listing, store a listing or drop
a group of listings, so that is all a backend has to offer.
"""
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional


class CachePort(ABC):
    """Key/value cache used for catalog listings."""

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None on a miss."""
        pass

    @abstractmethod
    async def set(self, key: str, value: Any, timeout: Optional[int] = None) -> None:
        """
        Store a value.

        Args:
            key: Cache key
            value: Picklable value
            timeout: Seconds to keep it; None uses the backend default
        """
        pass

    @abstractmethod
    async def delete_many(self, keys: Iterable[str]) -> None:
        """Drop every key given; unknown keys are ignored."""
        pass
