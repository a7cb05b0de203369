"""
Upload domain rules.

Validation of incoming image files, object naming and the parsing of
provider URLs. Nothing here talks to a storage vendor.
"""

import fnmatch
import uuid
from dataclasses import dataclass
from typing import Any, Tuple
from urllib.parse import unquote, urlparse

from core.domain.exceptions import (
    FileTooLargeError,
    InvalidFileTypeError,
    InvalidFileUrlError,
    NoFileProvidedError,
)

FIREBASE = "firebase"
VERCEL_BLOB = "vercel_blob"
UPLOADTHING = "uploadthing"
LOCAL = "local"

# Host patterns per provider
PROVIDER_HOSTS = {
    FIREBASE: ("firebasestorage.googleapis.com",),
    VERCEL_BLOB: ("*.blob.vercel-storage.com", "blob.vercel-storage.com"),
    UPLOADTHING: ("utfs.io", "*.ufs.sh"),
}


@dataclass(frozen=True)
class StoredFile:
    """A file written to storage."""

    url: str
    file_name: str
    path: str
    size: int
    content_type: str


class ImageUploadValidator:
    """
    Checks an uploaded file before it is sent to storage.

    The file only needs ``content_type`` and ``size`` attributes, which
    Django's ``UploadedFile`` provides.
    """

    def __init__(self, max_size: int):
        """
        Args:
            max_size: Largest accepted size in bytes
        """
        self.max_size = max_size

    def validate(self, upload: Any) -> None:
        """
        Raises:
            NoFileProvidedError: If no file was sent
            InvalidFileTypeError: If the file is not an image
            FileTooLargeError: If the file is over the size limit
        """
        if upload is None:
            raise NoFileProvidedError()
        content_type = getattr(upload, "content_type", None) or ""
        if not content_type.startswith("image/"):
            raise InvalidFileTypeError()
        if upload.size > self.max_size:
            raise FileTooLargeError()


def build_object_name(original_name: str, prefix: str = "items") -> Tuple[str, str]:
    """
    Pick a unique storage name that keeps the original extension.

    Args:
        original_name: Name of the uploaded file
        prefix: Folder the object is stored under

    Returns:
        (file name, full object path), e.g. ("<uuid>.png", "items/<uuid>.png")
    """
    extension = original_name.rsplit(".", 1)[-1] if original_name else ""
    file_name = f"{uuid.uuid4()}.{extension}"
    path = f"{prefix.strip('/')}/{file_name}" if prefix else file_name
    return file_name, path


def extract_firebase_object_path(file_url: str) -> str:
    """
    Read the object path out of a Firebase download URL.

    ``https://firebasestorage.googleapis.com/v0/b/<bucket>/o/items%2Fa.jpg?alt=media``
    yields ``items/a.jpg``.

    Raises:
        InvalidFileUrlError: If the URL has no ``/o/`` segment
    """
    path = urlparse(file_url).path
    if "/o/" not in path:
        raise InvalidFileUrlError()
    object_path = unquote(path.split("/o/", 1)[1])
    if not object_path:
        raise InvalidFileUrlError()
    return object_path


def extract_object_key(file_url: str) -> str:
    """
    Last path segment of a file URL, which UploadThing uses as the file key.

    Raises:
        InvalidFileUrlError: If the URL has no path
    """
    path = urlparse(file_url).path.rstrip("/")
    key = unquote(path.rsplit("/", 1)[-1]) if path else ""
    if not key:
        raise InvalidFileUrlError()
    return key


def detect_provider(file_url: str, media_url: str = "/media/") -> str:
    """
    Work out which storage provider serves a URL.

    Args:
        file_url: Public file URL
        media_url: URL prefix of locally stored media

    Returns:
        One of FIREBASE, VERCEL_BLOB, UPLOADTHING, LOCAL

    Raises:
        InvalidFileUrlError: If the URL belongs to no known provider
    """
    parsed = urlparse(file_url)
    host = (parsed.hostname or "").lower()
    for provider, patterns in PROVIDER_HOSTS.items():
        if any(fnmatch.fnmatch(host, pattern) for pattern in patterns):
            return provider
    if media_url and parsed.path.startswith(media_url):
        return LOCAL
    raise InvalidFileUrlError()
