"""
Storage vendor adapters.

Each adapter talks to one vendor's REST API with ``requests``. Vendor
failures are logged and raised as StorageError.
"""
import logging
from typing import Dict, Iterable, List, Optional
from urllib.parse import quote

import requests
from django.conf import settings
from django.core.exceptions import SuspiciousFileOperation
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage

from core.domain.exceptions import InvalidFileUrlError, StorageError
from uploads.domain.files import (
    FIREBASE,
    LOCAL,
    UPLOADTHING,
    VERCEL_BLOB,
    extract_firebase_object_path,
    extract_object_key,
)
from uploads.ports.file_storage import FileStorage

logger = logging.getLogger(__name__)

FIREBASE_API = "https://firebasestorage.googleapis.com/v0/b"
VERCEL_BLOB_API = "https://blob.vercel-storage.com"
UPLOADTHING_API = "https://api.uploadthing.com/v6"


def _vendor_error(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason or f"HTTP {response.status_code}"
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        return error.get("message") or str(error)
    return str(error or body)


class FirebaseStorage(FileStorage):
    """Firebase Cloud Storage through its REST API."""

    provider = FIREBASE

    def __init__(self, bucket: str, token: str = "", timeout: int = 15):
        """
        Args:
            bucket: Storage bucket, e.g. ``project.appspot.com``
            token: Optional OAuth bearer token
            timeout: Request timeout in seconds
        """
        self.bucket = bucket
        self.token = token
        self.timeout = timeout

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = dict(extra or {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _object_url(self, path: str) -> str:
        return f"{FIREBASE_API}/{self.bucket}/o/{quote(path, safe='')}"

    def upload(self, path: str, content: bytes, content_type: str) -> str:
        """Upload bytes and return the tokenized download URL."""
        if not self.bucket:
            raise StorageError("Firebase storage bucket is not configured")
        try:
            response = requests.post(
                f"{FIREBASE_API}/{self.bucket}/o",
                params={"uploadType": "media", "name": path},
                data=content,
                headers=self._headers({"Content-Type": content_type}),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error("Firebase upload failed: %s", e)
            raise StorageError(str(e)) from e

        if not response.ok:
            message = _vendor_error(response)
            logger.error("Firebase upload rejected: %s", message)
            raise StorageError(message)

        download_token = (response.json().get("downloadTokens") or "").split(",")[0]
        url = f"{self._object_url(path)}?alt=media"
        if download_token:
            url = f"{url}&token={download_token}"
        return url

    def delete(self, file_url: str) -> bool:
        """Delete the object a download URL points at."""
        path = extract_firebase_object_path(file_url)
        try:
            response = requests.delete(
                self._object_url(path), headers=self._headers(), timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.error("Firebase delete failed: %s", e)
            raise StorageError(str(e)) from e

        if response.status_code == 404:
            logger.info("Firebase object already gone: %s", path)
            return False
        if not response.ok:
            message = _vendor_error(response)
            logger.error("Firebase delete rejected: %s", message)
            raise StorageError(message)
        return True


class VercelBlobStorage(FileStorage):
    """Vercel Blob through its REST API."""

    provider = VERCEL_BLOB

    def __init__(self, token: str, timeout: int = 15):
        """
        Args:
            token: Blob read-write token
            timeout: Request timeout in seconds
        """
        self.token = token
        self.timeout = timeout

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        if not self.token:
            raise StorageError("Vercel Blob token is not configured")
        headers = {"Authorization": f"Bearer {self.token}"}
        headers.update(extra or {})
        return headers

    def upload(self, path: str, content: bytes, content_type: str) -> str:
        """Upload bytes and return the blob URL."""
        headers = self._headers({"x-content-type": content_type, "x-add-random-suffix": "0"})
        try:
            response = requests.put(
                f"{VERCEL_BLOB_API}/{path}",
                data=content,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error("Vercel Blob upload failed: %s", e)
            raise StorageError(str(e)) from e

        if not response.ok:
            message = _vendor_error(response)
            logger.error("Vercel Blob upload rejected: %s", message)
            raise StorageError(message)
        return response.json()["url"]

    def delete(self, file_url: str) -> bool:
        """Delete a blob. Vercel reports success for missing blobs too."""
        headers = self._headers({"Content-Type": "application/json"})
        try:
            response = requests.post(
                f"{VERCEL_BLOB_API}/delete",
                json={"urls": [file_url]},
                headers=headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error("Vercel Blob delete failed: %s", e)
            raise StorageError(str(e)) from e

        if not response.ok:
            message = _vendor_error(response)
            logger.error("Vercel Blob delete rejected: %s", message)
            raise StorageError(message)
        return True


class UploadThingStorage(FileStorage):
    """
    UploadThing file API.

    Uploads go straight from the browser to UploadThing, so this adapter
    only deletes.
    """

    provider = UPLOADTHING

    def __init__(self, secret: str, timeout: int = 15):
        """
        Args:
            secret: UploadThing API key
            timeout: Request timeout in seconds
        """
        self.secret = secret
        self.timeout = timeout

    def upload(self, path: str, content: bytes, content_type: str) -> str:
        raise StorageError("UploadThing uploads are made by the client")

    def delete_files(self, file_keys: Iterable[str]) -> int:
        """
        Delete files by key.

        Args:
            file_keys: UploadThing file keys

        Returns:
            Number of files UploadThing deleted

        Raises:
            StorageError: ``"Failed to delete file: <reason>"`` on any failure
        """
        keys: List[str] = list(file_keys)
        if not self.secret:
            raise StorageError("Failed to delete file: UploadThing secret is not configured")
        try:
            response = requests.post(
                f"{UPLOADTHING_API}/deleteFiles",
                json={"fileKeys": keys},
                headers={"x-uploadthing-api-key": self.secret},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error("UploadThing delete failed: %s", e)
            raise StorageError(f"Failed to delete file: {e}") from e

        if not response.ok:
            message = _vendor_error(response)
            logger.error("UploadThing delete rejected: %s", message)
            raise StorageError(f"Failed to delete file: {message}")
        return int(response.json().get("deletedCount", len(keys)))

    def delete(self, file_url: str) -> bool:
        """Delete the file a ``utfs.io`` URL points at."""
        return self.delete_files([extract_object_key(file_url)]) > 0


class LocalStorage(FileStorage):
    """Django's default storage, used in development and tests."""

    provider = LOCAL

    def upload(self, path: str, content: bytes, content_type: str) -> str:
        name = default_storage.save(path, ContentFile(content))
        return default_storage.url(name)

    def delete(self, file_url: str) -> bool:
        media_url = settings.MEDIA_URL
        name = file_url.split(media_url, 1)[-1] if media_url in file_url else file_url
        try:
            exists = default_storage.exists(name)
        except SuspiciousFileOperation as e:
            logger.warning("Rejected local delete outside media root: %s", file_url)
            raise InvalidFileUrlError() from e
        if not exists:
            return False
        default_storage.delete(name)
        return True


def get_storage(provider: Optional[str] = None) -> FileStorage:
    """
    Build the storage adapter for a provider.

    Args:
        provider: Provider name; defaults to ``UPLOADS["BACKEND"]``

    Returns:
        FileStorage configured from ``settings.UPLOADS``
    """
    config = settings.UPLOADS
    provider = provider or config["BACKEND"]
    timeout = config.get("HTTP_TIMEOUT", 15)

    if provider == FIREBASE:
        return FirebaseStorage(
            bucket=config.get("FIREBASE_BUCKET", ""),
            token=config.get("FIREBASE_TOKEN", ""),
            timeout=timeout,
        )
    if provider == VERCEL_BLOB:
        return VercelBlobStorage(token=config.get("VERCEL_BLOB_TOKEN", ""), timeout=timeout)
    if provider == UPLOADTHING:
        return UploadThingStorage(secret=config.get("UPLOADTHING_SECRET", ""), timeout=timeout)
    if provider == LOCAL:
        return LocalStorage()
    raise StorageError(f"Unknown storage backend: {provider}")
