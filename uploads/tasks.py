"""
Celery tasks for storage cleanup.
"""
import logging
from typing import List

from StoreAdminService.celery import app

from core.domain.exceptions import DomainException, StorageError
from uploads.application.upload_service import delete_stored_file

logger = logging.getLogger(__name__)


@app.task(bind=True, max_retries=3)
def delete_stored_files_task(self, file_urls: List[str]):
    """
    Delete images a catalog change left unreferenced.

    URLs that cannot be mapped to a provider are skipped. A vendor failure
    retries the whole batch with exponential backoff; deletes are idempotent.

    Args:
        file_urls: Public file URLs

    Returns:
        Number of files deleted
    """
    deleted = 0
    for file_url in file_urls:
        try:
            if delete_stored_file(file_url):
                deleted += 1
        except StorageError as exc:
            logger.warning("Storage cleanup failed for %s: %s", file_url, exc.message)
            raise self.retry(exc=exc, countdown=2**self.request.retries)
        except DomainException as exc:
            logger.info("Skipping %s: %s", file_url, exc.message)

    logger.info("Storage cleanup finished", extra={"deleted": deleted, "requested": len(file_urls)})
    return deleted
