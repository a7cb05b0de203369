"""
Unit tests for upload validation and provider URL parsing.
"""
from types import SimpleNamespace

import pytest

from core.domain.exceptions import (
    FileTooLargeError,
    InvalidFileTypeError,
    InvalidFileUrlError,
    NoFileProvidedError,
)
from uploads.domain.files import (
    FIREBASE,
    LOCAL,
    UPLOADTHING,
    VERCEL_BLOB,
    ImageUploadValidator,
    build_object_name,
    detect_provider,
    extract_firebase_object_path,
    extract_object_key,
)

ONE_MB = 1024 * 1024


class TestImageUploadValidator:
    """Tests for ImageUploadValidator."""

    def test_accepts_image(self):
        """Test a small image passes."""
        ImageUploadValidator(ONE_MB).validate(SimpleNamespace(content_type="image/png", size=10))

    def test_exactly_at_limit(self):
        """Test the size limit is inclusive."""
        ImageUploadValidator(ONE_MB).validate(
            SimpleNamespace(content_type="image/jpeg", size=ONE_MB)
        )

    def test_no_file(self):
        """Test a missing file."""
        with pytest.raises(NoFileProvidedError, match="No file provided"):
            ImageUploadValidator(ONE_MB).validate(None)

    def test_not_an_image(self):
        """Test non-image content types."""
        with pytest.raises(InvalidFileTypeError, match="Only image files are allowed"):
            ImageUploadValidator(ONE_MB).validate(
                SimpleNamespace(content_type="application/pdf", size=10)
            )

    def test_too_large(self):
        """Test files over the limit."""
        with pytest.raises(FileTooLargeError, match="File size exceeds 1MB limit"):
            ImageUploadValidator(ONE_MB).validate(
                SimpleNamespace(content_type="image/png", size=ONE_MB + 1)
            )


class TestBuildObjectName:
    """Tests for build_object_name."""

    def test_keeps_extension(self):
        """Test the stored name keeps the original extension."""
        file_name, path = build_object_name("holiday.photo.JPG")

        assert file_name.endswith(".JPG")
        assert path == f"items/{file_name}"

    def test_names_are_unique(self):
        """Test two uploads of one file get different names."""
        assert build_object_name("a.png")[0] != build_object_name("a.png")[0]


class TestProviderUrls:
    """Tests for provider URL parsing."""

    def test_firebase_object_path(self):
        """Test the object path is the decoded segment after /o/."""
        url = (
            "https://firebasestorage.googleapis.com/v0/b/shop.appspot.com/o/"
            "items%2Fabc.png?alt=media&token=t"
        )
        assert extract_firebase_object_path(url) == "items/abc.png"

    def test_firebase_url_without_object(self):
        """Test URLs without an /o/ segment."""
        with pytest.raises(InvalidFileUrlError, match="Invalid file URL format"):
            extract_firebase_object_path("https://firebasestorage.googleapis.com/v0/b/x")

    def test_object_key(self):
        """Test the key is the last path segment."""
        assert extract_object_key("https://utfs.io/f/abc123-photo.png") == "abc123-photo.png"

    @pytest.mark.parametrize(
        "url,provider",
        [
            ("https://firebasestorage.googleapis.com/v0/b/x/o/a.png", FIREBASE),
            ("https://abc.public.blob.vercel-storage.com/items/a.png", VERCEL_BLOB),
            ("https://utfs.io/f/key", UPLOADTHING),
            ("https://app123.ufs.sh/f/key", UPLOADTHING),
            ("/media/items/a.png", LOCAL),
            ("http://testserver/media/items/a.png", LOCAL),
        ],
    )
    def test_detect_provider(self, url, provider):
        """Test hosts map to their provider."""
        assert detect_provider(url) == provider

    def test_unknown_host(self):
        """Test URLs from unknown hosts."""
        with pytest.raises(InvalidFileUrlError):
            detect_provider("https://example.com/a.png")
