"""
File storage port (interface).

One implementation per storage vendor lives in the infrastructure layer.
"""

from abc import ABC, abstractmethod


class FileStorage(ABC):
    """Abstract storage for uploaded files."""

    provider: str = ""

    @abstractmethod
    def upload(self, path: str, content: bytes, content_type: str) -> str:
        """
        Store a file.

        Args:
            path: Object path, e.g. ``items/<uuid>.png``
            content: File bytes
            content_type: MIME type

        Returns:
            Public URL of the stored file

        Raises:
            StorageError: If the vendor rejects the upload
        """
        pass

    @abstractmethod
    def delete(self, file_url: str) -> bool:
        """
        Delete a stored file by its public URL.

        Args:
            file_url: URL returned by ``upload``

        Returns:
            True if a file was deleted, False if it did not exist

        Raises:
            InvalidFileUrlError: If the URL cannot be mapped to an object
            StorageError: If the vendor rejects the delete
        """
        pass
