"""
Django cache framework adapter for CachePort.

A broken cache backend must never fail a request: errors are logged and
reads degrade to misses, so the database answers instead.
"""

import logging
from typing import Any, Iterable, Optional

from asgiref.sync import sync_to_async
from django.core.cache import cache

from core.infrastructure.cache import CachePort
from core.metrics import cache_hits_total, cache_misses_total

logger = logging.getLogger(__name__)


def section_of(key: str) -> str:
    """Metric label for a key: ``catalog:brands:list`` -> ``catalog:brands``."""
    return ":".join(key.split(":")[:2])


class DjangoCacheAdapter(CachePort):
    """CachePort over ``django.core.cache`` (Redis deployed, LocMem in tests)."""

    async def get(self, key: str) -> Optional[Any]:
        try:
            value = await sync_to_async(cache.get)(key)
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("Cache read failed for %s", key)
            value = None

        counter = cache_misses_total if value is None else cache_hits_total
        counter.labels(cache_key=section_of(key)).inc()
        return value

    async def set(self, key: str, value: Any, timeout: Optional[int] = None) -> None:
        kwargs = {} if timeout is None else {"timeout": timeout}
        try:
            await sync_to_async(cache.set)(key, value, **kwargs)
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("Cache write failed for %s", key)

    async def delete_many(self, keys: Iterable[str]) -> None:
        keys = list(keys)
        try:
            await sync_to_async(cache.delete_many)(keys)
        except Exception:  # pylint: disable=broad-exception-caught
            # Stale listings expire with CATALOG_CACHE_TTL
            logger.exception("Cache invalidation failed for %s", ", ".join(keys))


cache_adapter = DjangoCacheAdapter()
