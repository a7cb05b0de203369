"""
Unit tests for storage vendor adapters.

Vendor HTTP calls are mocked at the ``requests`` boundary.
"""
from unittest.mock import MagicMock, patch

import pytest
import requests
from django.test import override_settings

from core.domain.exceptions import InvalidFileUrlError, StorageError
from uploads.infrastructure.storages import (
    FirebaseStorage,
    LocalStorage,
    UploadThingStorage,
    VercelBlobStorage,
    get_storage,
)

FIREBASE_URL = (
    "https://firebasestorage.googleapis.com/v0/b/shop.appspot.com/o/items%2Fa.png?alt=media"
)


def _response(status_code=200, payload=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.json.return_value = payload or {}
    response.text = ""
    response.reason = "Error"
    return response


class TestFirebaseStorage:
    """Tests for FirebaseStorage."""

    def test_upload_returns_download_url(self):
        """Test the returned URL carries the download token."""
        storage = FirebaseStorage(bucket="shop.appspot.com")
        with patch("uploads.infrastructure.storages.requests.post") as post:
            post.return_value = _response(payload={"downloadTokens": "tok1,tok2"})
            url = storage.upload("items/a.png", b"data", "image/png")

        assert url == (
            "https://firebasestorage.googleapis.com/v0/b/shop.appspot.com/o/"
            "items%2Fa.png?alt=media&token=tok1"
        )
        assert post.call_args.kwargs["params"] == {"uploadType": "media", "name": "items/a.png"}

    def test_upload_without_bucket(self):
        """Test a missing bucket configuration."""
        with pytest.raises(StorageError, match="bucket"):
            FirebaseStorage(bucket="").upload("items/a.png", b"data", "image/png")

    def test_delete(self):
        """Test deleting the object behind a download URL."""
        storage = FirebaseStorage(bucket="shop.appspot.com")
        with patch("uploads.infrastructure.storages.requests.delete") as delete:
            delete.return_value = _response(204)
            assert storage.delete(FIREBASE_URL) is True

        assert delete.call_args.args[0].endswith("/o/items%2Fa.png")

    def test_delete_missing_object(self):
        """Test a 404 reports the object as already gone."""
        storage = FirebaseStorage(bucket="shop.appspot.com")
        with patch("uploads.infrastructure.storages.requests.delete") as delete:
            delete.return_value = _response(404)
            assert storage.delete(FIREBASE_URL) is False

    def test_delete_bad_url(self):
        """Test URLs without an object path."""
        with pytest.raises(InvalidFileUrlError):
            FirebaseStorage(bucket="b").delete("https://firebasestorage.googleapis.com/v0/b/b")

    def test_network_error(self):
        """Test transport failures become StorageError."""
        storage = FirebaseStorage(bucket="shop.appspot.com")
        with patch(
            "uploads.infrastructure.storages.requests.delete",
            side_effect=requests.exceptions.ConnectionError("down"),
        ):
            with pytest.raises(StorageError, match="down"):
                storage.delete(FIREBASE_URL)


class TestVercelBlobStorage:
    """Tests for VercelBlobStorage."""

    def test_upload(self):
        """Test uploading returns the blob URL."""
        storage = VercelBlobStorage(token="secret")
        with patch("uploads.infrastructure.storages.requests.put") as put:
            put.return_value = _response(payload={"url": "https://x.blob.vercel-storage.com/a"})
            url = storage.upload("items/a.png", b"data", "image/png")

        assert url == "https://x.blob.vercel-storage.com/a"
        assert put.call_args.kwargs["headers"]["Authorization"] == "Bearer secret"

    def test_delete_rejected(self):
        """Test vendor errors carry the vendor message."""
        storage = VercelBlobStorage(token="secret")
        with patch("uploads.infrastructure.storages.requests.post") as post:
            post.return_value = _response(403, {"error": {"message": "Forbidden token"}})
            with pytest.raises(StorageError, match="Forbidden token"):
                storage.delete("https://x.blob.vercel-storage.com/a")

    def test_missing_token(self):
        """Test a missing token configuration."""
        with pytest.raises(StorageError, match="token"):
            VercelBlobStorage(token="").delete("https://x.blob.vercel-storage.com/a")


class TestUploadThingStorage:
    """Tests for UploadThingStorage."""

    def test_delete_files(self):
        """Test deleting by key."""
        storage = UploadThingStorage(secret="sk_live")
        with patch("uploads.infrastructure.storages.requests.post") as post:
            post.return_value = _response(payload={"success": True, "deletedCount": 1})
            assert storage.delete_files(["abc"]) == 1

        assert post.call_args.kwargs["json"] == {"fileKeys": ["abc"]}
        assert post.call_args.kwargs["headers"] == {"x-uploadthing-api-key": "sk_live"}

    def test_delete_files_rejected(self):
        """Test vendor errors are prefixed."""
        storage = UploadThingStorage(secret="sk_live")
        with patch("uploads.infrastructure.storages.requests.post") as post:
            post.return_value = _response(400, {"error": "Invalid file key"})
            with pytest.raises(StorageError, match="Failed to delete file: Invalid file key"):
                storage.delete_files(["abc"])

    def test_delete_by_url(self):
        """Test deleting through a utfs.io URL uses its key."""
        storage = UploadThingStorage(secret="sk_live")
        with patch.object(storage, "delete_files", return_value=1) as delete_files:
            assert storage.delete("https://utfs.io/f/abc") is True

        delete_files.assert_called_once_with(["abc"])

    def test_upload_not_supported(self):
        """Test server-side uploads are refused."""
        with pytest.raises(StorageError):
            UploadThingStorage(secret="s").upload("items/a.png", b"", "image/png")


class TestLocalStorage:
    """Tests for LocalStorage."""

    def test_round_trip_delete(self):
        """Test a stored file can be deleted once."""
        storage = LocalStorage()
        url = storage.upload("items/test.png", b"png", "image/png")

        assert storage.delete(url) is True
        assert storage.delete(url) is False


class TestGetStorage:
    """Tests for get_storage."""

    def test_configured_backend(self):
        """Test the default backend comes from settings."""
        with override_settings(UPLOADS={"BACKEND": "vercel_blob", "VERCEL_BLOB_TOKEN": "t"}):
            assert isinstance(get_storage(), VercelBlobStorage)

    def test_explicit_provider(self):
        """Test asking for a provider by name."""
        assert isinstance(get_storage("uploadthing"), UploadThingStorage)

    def test_unknown_backend(self):
        """Test unknown backend names."""
        with pytest.raises(StorageError, match="Unknown storage backend"):
            get_storage("s3")
