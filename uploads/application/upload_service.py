"""
Upload service.

Validates image uploads, names them and hands them to the configured
storage adapter. Deletes are routed to the provider that serves the URL.
"""
import logging
from typing import Any, Callable, Optional

from asgiref.sync import sync_to_async
from django.conf import settings

from core.domain.exceptions import (
    DomainException,
    MissingFileKeyError,
    MissingFileUrlError,
)
from core.metrics import upload_size_bytes, uploads_total
from uploads.domain.files import (
    UPLOADTHING,
    ImageUploadValidator,
    StoredFile,
    build_object_name,
    detect_provider,
)
from uploads.infrastructure.storages import get_storage
from uploads.ports.file_storage import FileStorage

logger = logging.getLogger(__name__)

StorageFactory = Callable[[Optional[str]], FileStorage]


def delete_stored_file(file_url: str, storage_factory: StorageFactory = get_storage) -> bool:
    """
    Delete a file from whichever provider serves its URL.

    Args:
        file_url: Public file URL
        storage_factory: Builds the adapter for a provider name

    Returns:
        True if a file was deleted, False if it did not exist

    Raises:
        MissingFileUrlError: If no URL is given
        InvalidFileUrlError: If the URL cannot be mapped to a stored object
        StorageError: If the provider rejects the delete
    """
    if not file_url:
        raise MissingFileUrlError()

    provider = detect_provider(file_url, settings.MEDIA_URL)
    storage = storage_factory(provider)
    try:
        existed = storage.delete(file_url)
    except DomainException:
        uploads_total.labels(provider=provider, operation="delete", outcome="error").inc()
        raise

    outcome = "success" if existed else "missing"
    uploads_total.labels(provider=provider, operation="delete", outcome=outcome).inc()
    logger.info(
        "Stored file deleted" if existed else "Stored file did not exist",
        extra={"provider": provider, "file_url": file_url},
    )
    return existed


class UploadService:
    """Application service behind the upload endpoints."""

    def __init__(self, storage_factory: StorageFactory = get_storage):
        """
        Args:
            storage_factory: Builds the adapter for a provider name; ``None``
                selects the configured upload backend
        """
        self.storage_factory = storage_factory
        config = settings.UPLOADS
        self.validator = ImageUploadValidator(config["MAX_FILE_SIZE"])
        self.path_prefix = config.get("PATH_PREFIX", "items")

    async def upload_image(self, upload: Any) -> StoredFile:
        """
        Validate and store an uploaded image.

        Args:
            upload: Django UploadedFile (or None when the form had no file)

        Returns:
            StoredFile with the public URL

        Raises:
            FileValidationError: If the file is missing, not an image or too large
            StorageError: If the provider rejects the upload
        """
        self.validator.validate(upload)
        file_name, path = build_object_name(upload.name, self.path_prefix)
        storage = self.storage_factory(None)

        try:
            url = await sync_to_async(self._store)(storage, upload, path)
        except DomainException:
            uploads_total.labels(
                provider=storage.provider, operation="upload", outcome="error"
            ).inc()
            raise

        uploads_total.labels(provider=storage.provider, operation="upload", outcome="success").inc()
        upload_size_bytes.labels(provider=storage.provider).observe(upload.size)
        logger.info(
            "File uploaded",
            extra={"provider": storage.provider, "path": path, "size": upload.size},
        )
        return StoredFile(
            url=url,
            file_name=file_name,
            path=path,
            size=upload.size,
            content_type=upload.content_type,
        )

    @staticmethod
    def _store(storage: FileStorage, upload: Any, path: str) -> str:
        upload.seek(0)
        return storage.upload(path, upload.read(), upload.content_type)

    async def delete_by_url(self, file_url: Optional[str]) -> bool:
        """
        Delete a stored file by URL.

        Returns:
            True if a file was deleted, False if it did not exist
        """
        return await sync_to_async(delete_stored_file)(file_url, self.storage_factory)

    async def delete_uploadthing_file(self, file_key: Optional[str]) -> int:
        """
        Delete an UploadThing file by key.

        Raises:
            MissingFileKeyError: If no key is given
            StorageError: ``"Failed to delete file: <reason>"``
        """
        if not file_key:
            raise MissingFileKeyError()

        storage = self.storage_factory(UPLOADTHING)
        try:
            deleted = await sync_to_async(storage.delete_files)([file_key])
        except DomainException:
            uploads_total.labels(provider=UPLOADTHING, operation="delete", outcome="error").inc()
            raise

        uploads_total.labels(provider=UPLOADTHING, operation="delete", outcome="success").inc()
        logger.info("UploadThing file deleted", extra={"file_key": file_key})
        return deleted
