"""
Catalog cache service.

Caches the dashboard listings (brands, categories, products) and drops
them after writes so the next read sees fresh data.
"""
import logging
import uuid
from typing import Any, Awaitable, Callable, Iterable, List, Optional

from django.conf import settings

from core.infrastructure.cache_adapters import cache_adapter

logger = logging.getLogger(__name__)

BRANDS = "brands"
CATEGORIES = "categories"
PRODUCTS = "products"
SECTIONS = (BRANDS, CATEGORIES, PRODUCTS)

# Listings that embed data owned by another section.
# Brand and category rows carry product counts; product rows carry
# brand and category names.
DEPENDENT_SECTIONS = {
    BRANDS: (BRANDS, PRODUCTS),
    CATEGORIES: (CATEGORIES, PRODUCTS),
    PRODUCTS: (PRODUCTS, BRANDS, CATEGORIES),
}


class CatalogCacheService:
    """
    Service for caching catalog listings.

    Listings are stored under a per-section version token. Invalidation
    replaces the token, so a listing read from the database before a
    write and stored after it lands under a key nobody reads any more.
    """

    @staticmethod
    def _version_key(section: str) -> str:
        return f"catalog:{section}:version"

    @staticmethod
    def _listing_key(section: str, version: str) -> str:
        """Generate cache key for a section listing."""
        return f"catalog:{section}:list:{version}"

    @staticmethod
    async def _new_version(section: str) -> str:
        version = uuid.uuid4().hex
        await cache_adapter.set(CatalogCacheService._version_key(section), version)
        return version

    @staticmethod
    async def _version(section: str) -> str:
        version = await cache_adapter.get(CatalogCacheService._version_key(section))
        return version or await CatalogCacheService._new_version(section)

    @staticmethod
    async def get_listing(section: str) -> Optional[List[Any]]:
        """
        Get the cached listing for the current version.

        Args:
            section: One of SECTIONS

        Returns:
            Cached rows or None
        """
        version = await CatalogCacheService._version(section)
        return await cache_adapter.get(CatalogCacheService._listing_key(section, version))

    @staticmethod
    async def set_listing(
        section: str,
        rows: List[Any],
        ttl: Optional[int] = None,
        version: Optional[str] = None,
    ) -> None:
        """
        Cache a listing.

        Args:
            section: One of SECTIONS
            rows: Rows to cache
            ttl: Time to live in seconds
            version: Version the rows were read under; defaults to the current one
        """
        version = version or await CatalogCacheService._version(section)
        await cache_adapter.set(
            CatalogCacheService._listing_key(section, version),
            rows,
            timeout=ttl or settings.CATALOG_CACHE_TTL,
        )

    @staticmethod
    async def load_listing(section: str, load: Callable[[], Awaitable[List[Any]]]) -> List[Any]:
        """
        Return the cached listing, loading and caching it on a miss.

        The version is taken before ``load`` runs, so rows loaded across
        an invalidation are cached under the superseded version.

        Args:
            section: One of SECTIONS
            load: Coroutine function reading the rows from the database
        """
        version = await CatalogCacheService._version(section)
        cached = await cache_adapter.get(CatalogCacheService._listing_key(section, version))
        if cached is not None:
            return cached

        rows = await load()
        await CatalogCacheService.set_listing(section, rows, version=version)
        return rows

    @staticmethod
    async def invalidate(sections: Iterable[str]) -> None:
        """
        Drop cached listings for the given sections.

        Args:
            sections: Sections to drop
        """
        sections = sorted(set(sections))
        stale_keys = []
        for section in sections:
            old = await cache_adapter.get(CatalogCacheService._version_key(section))
            await CatalogCacheService._new_version(section)
            if old:
                stale_keys.append(CatalogCacheService._listing_key(section, old))
        await cache_adapter.delete_many(stale_keys)
        logger.info("Invalidated catalog cache: %s", ", ".join(sections))

    @staticmethod
    async def invalidate_for(section: str) -> None:
        """
        Drop the listing of a section and of every listing that embeds it.

        Args:
            section: Section that was written to
        """
        await CatalogCacheService.invalidate(DEPENDENT_SECTIONS[section])
