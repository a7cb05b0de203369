"""
Unit tests for the event bus and catalog event handlers.
"""
import uuid
from unittest.mock import MagicMock, patch

import pytest
from django.test import override_settings

from brands.domain.events import BrandCreated
from core.application.services.catalog_cache_service import (
    BRANDS,
    CATEGORIES,
    PRODUCTS,
    CatalogCacheService,
)
from core.domain.events import EventHandler
from core.infrastructure.event_handlers import (
    CatalogCacheInvalidationHandler,
    ProductMediaCleanupHandler,
)
from core.infrastructure.events import InMemoryEventBus, event_bus
from products.domain.events import ProductCreated, ProductDeleted, ProductUpdated


class RecordingHandler(EventHandler):
    """Handler remembering the events it saw."""

    def __init__(self):
        self.events = []

    async def handle(self, event):
        self.events.append(event)


class FailingHandler(EventHandler):
    """Handler that always fails."""

    async def handle(self, event):
        raise RuntimeError("boom")


async def _warm_cache():
    for section in (BRANDS, CATEGORIES, PRODUCTS):
        await CatalogCacheService.set_listing(section, [section])


@pytest.mark.asyncio
class TestInMemoryEventBus:
    """Tests for InMemoryEventBus."""

    async def test_publish_reaches_subscribers(self):
        """Test handlers receive published events."""
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(BrandCreated, handler)

        event = BrandCreated(uuid.uuid4(), "Apple", "apple")
        await bus.publish(event)

        assert handler.events == [event]

    async def test_subscribe_is_idempotent_per_handler_class(self):
        """Test the same handler class is only subscribed once."""
        bus = InMemoryEventBus()
        bus.subscribe(BrandCreated, RecordingHandler())
        bus.subscribe(BrandCreated, RecordingHandler())

        assert len(bus.handlers_for(BrandCreated)) == 1

    async def test_failing_handler_does_not_reach_publisher(self):
        """Test a broken side effect does not fail the write."""
        bus = InMemoryEventBus()
        recorder = RecordingHandler()
        bus.subscribe(ProductCreated, FailingHandler())
        bus.subscribe(ProductCreated, recorder)

        await bus.publish(ProductCreated(uuid.uuid4(), "Phone", "phone"))

        assert len(recorder.events) == 1

    async def test_clear(self):
        """Test clearing subscriptions."""
        bus = InMemoryEventBus()
        bus.subscribe(BrandCreated, RecordingHandler())
        bus.clear()
        assert bus.handlers_for(BrandCreated) == []


def test_event_to_dict():
    """Test event serialization for the audit log."""
    product_id = uuid.uuid4()
    data = ProductUpdated(product_id, "Phone", "phone", removed_image_urls=["a", "b"]).to_dict()

    assert data["aggregate_id"] == str(product_id)
    assert data["event_type"] == "ProductUpdated"
    assert data["slug"] == "phone"
    assert data["removed_images"] == 2


def test_catalog_handlers_are_registered():
    """Test app start-up wires cache invalidation for every catalog event."""
    for event_type in (BrandCreated, ProductCreated, ProductDeleted):
        names = {type(h).__name__ for h in event_bus.handlers_for(event_type)}
        assert "CatalogCacheInvalidationHandler" in names
        assert "AuditLogEventHandler" in names


@pytest.mark.asyncio
class TestCatalogCacheInvalidationHandler:
    """Tests for listing cache invalidation."""

    async def test_product_write_drops_every_listing(self):
        """Test product writes drop brand and category counts too."""
        await _warm_cache()

        await CatalogCacheInvalidationHandler().handle(
            ProductCreated(uuid.uuid4(), "Phone", "phone")
        )

        for section in (BRANDS, CATEGORIES, PRODUCTS):
            assert await CatalogCacheService.get_listing(section) is None

    async def test_brand_write_keeps_categories(self):
        """Test brand writes leave the category listing alone."""
        await _warm_cache()

        await CatalogCacheInvalidationHandler().handle(BrandCreated(uuid.uuid4(), "Apple", "apple"))

        assert await CatalogCacheService.get_listing(BRANDS) is None
        assert await CatalogCacheService.get_listing(PRODUCTS) is None
        assert await CatalogCacheService.get_listing(CATEGORIES) == [CATEGORIES]


@pytest.mark.asyncio
class TestProductMediaCleanupHandler:
    """Tests for storage cleanup after product writes."""

    async def test_disabled_by_setting(self):
        """Test nothing is queued while cleanup is off."""
        task = MagicMock()
        with override_settings(CATALOG_MEDIA_CLEANUP=False), patch(
            "uploads.tasks.delete_stored_files_task", task
        ):
            await ProductMediaCleanupHandler().handle(
                ProductDeleted(uuid.uuid4(), "Phone", "phone", ["https://utfs.io/f/a.png"])
            )

        task.delay.assert_not_called()

    async def test_deleted_product_queues_all_images(self):
        """Test every image of a deleted product is queued."""
        task = MagicMock()
        urls = ["https://utfs.io/f/a.png", "https://utfs.io/f/b.png"]
        with override_settings(CATALOG_MEDIA_CLEANUP=True), patch(
            "uploads.tasks.delete_stored_files_task", task
        ):
            await ProductMediaCleanupHandler().handle(
                ProductDeleted(uuid.uuid4(), "Phone", "phone", urls)
            )

        task.delay.assert_called_once_with(urls)

    async def test_updated_product_queues_removed_images_only(self):
        """Test only dropped images are queued after an edit."""
        task = MagicMock()
        with override_settings(CATALOG_MEDIA_CLEANUP=True), patch(
            "uploads.tasks.delete_stored_files_task", task
        ):
            await ProductMediaCleanupHandler().handle(
                ProductUpdated(
                    uuid.uuid4(),
                    "Phone",
                    "phone",
                    image_urls=["https://utfs.io/f/keep.png"],
                    removed_image_urls=["https://utfs.io/f/old.png"],
                )
            )

        task.delay.assert_called_once_with(["https://utfs.io/f/old.png"])


@pytest.mark.asyncio
class TestCatalogCacheService:
    """Tests for versioned listing caching."""

    async def test_load_listing_caches_rows(self):
        """Test the loader only runs on a miss."""
        await CatalogCacheService.invalidate([BRANDS])
        calls = []

        async def load():
            calls.append(1)
            return ["Apple"]

        assert await CatalogCacheService.load_listing(BRANDS, load) == ["Apple"]
        assert await CatalogCacheService.load_listing(BRANDS, load) == ["Apple"]
        assert len(calls) == 1

    async def test_rows_loaded_across_invalidation_are_not_served(self):
        """Test a write landing mid-load does not leave the old rows cached."""
        await CatalogCacheService.invalidate([BRANDS])

        async def load_then_write():
            await CatalogCacheService.invalidate_for(BRANDS)
            return ["stale"]

        async def load_fresh():
            return ["fresh"]

        assert await CatalogCacheService.load_listing(BRANDS, load_then_write) == ["stale"]
        assert await CatalogCacheService.get_listing(BRANDS) is None
        assert await CatalogCacheService.load_listing(BRANDS, load_fresh) == ["fresh"]
