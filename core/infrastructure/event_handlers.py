"""
Event handlers for domain events.

These handlers process catalog events for side effects: audit logging,
listing cache invalidation and storage cleanup.
"""

import logging
from typing import Dict, Iterable, Tuple, Type

from asgiref.sync import sync_to_async
from django.conf import settings

from brands.domain.events import BrandCreated, BrandDeleted, BrandUpdated
from categories.domain.events import CategoryCreated, CategoryDeleted, CategoryUpdated
from core.application.services.catalog_cache_service import (
    BRANDS,
    CATEGORIES,
    PRODUCTS,
    CatalogCacheService,
)
from core.domain.events import DomainEvent, EventHandler
from products.domain.events import ProductCreated, ProductDeleted, ProductUpdated

logger = logging.getLogger(__name__)

BRAND_EVENTS = (BrandCreated, BrandUpdated, BrandDeleted)
CATEGORY_EVENTS = (CategoryCreated, CategoryUpdated, CategoryDeleted)
PRODUCT_EVENTS = (ProductCreated, ProductUpdated, ProductDeleted)

# Catalog section written to by each event
EVENT_SECTIONS: Dict[Type[DomainEvent], str] = {
    **{event: BRANDS for event in BRAND_EVENTS},
    **{event: CATEGORIES for event in CATEGORY_EVENTS},
    **{event: PRODUCTS for event in PRODUCT_EVENTS},
}


class AuditLogEventHandler(EventHandler):
    """
    Event handler for audit logging.

    Writes every catalog event to the structured log.
    """

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        logger.info(
            "Audit log: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra={"audit": event.to_dict()},
        )


class CatalogCacheInvalidationHandler(EventHandler):
    """
    Event handler for cache invalidation.

    Drops the cached listings a catalog write made stale.
    """

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for cache invalidation.

        Args:
            event: Catalog domain event
        """
        section = EVENT_SECTIONS.get(type(event))
        if section is None:
            logger.warning("No catalog section for %s", event.event_type)
            return
        await CatalogCacheService.invalidate_for(section)


class ProductMediaCleanupHandler(EventHandler):
    """
    Event handler for storage cleanup.

    Queues deletion of images a product no longer references: all of
    them when the product is deleted, the dropped ones when it is edited.
    Disabled unless ``CATALOG_MEDIA_CLEANUP`` is set.
    """

    @staticmethod
    def _orphaned_urls(event: DomainEvent) -> Tuple[str, ...]:
        if isinstance(event, ProductDeleted):
            return event.image_urls
        if isinstance(event, ProductUpdated):
            return event.removed_image_urls
        return ()

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for storage cleanup.

        Args:
            event: ProductUpdated or ProductDeleted
        """
        if not getattr(settings, "CATALOG_MEDIA_CLEANUP", False):
            return

        urls = list(self._orphaned_urls(event))
        if not urls:
            return

        from uploads.tasks import delete_stored_files_task

        await sync_to_async(delete_stored_files_task.delay)(urls)
        logger.info(
            "Queued storage cleanup for %s",
            event.aggregate_id,
            extra={"event_type": event.event_type, "file_count": len(urls)},
        )


def _subscribe_all(events: Iterable[Type[DomainEvent]], handler: EventHandler) -> None:
    from core.infrastructure.events import event_bus

    for event_type in events:
        event_bus.subscribe(event_type, handler)


# Register event handlers
def register_event_handlers():
    """Register all event handlers with the event bus."""
    catalog_events = BRAND_EVENTS + CATEGORY_EVENTS + PRODUCT_EVENTS

    _subscribe_all(catalog_events, AuditLogEventHandler())
    _subscribe_all(catalog_events, CatalogCacheInvalidationHandler())
    _subscribe_all((ProductUpdated, ProductDeleted), ProductMediaCleanupHandler())

    logger.info("Event handlers registered")
