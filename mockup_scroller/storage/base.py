"""
Abstract storage backend interface for mockup-scroller.

Output files (GIFs and segment PNGs) are published through a backend that
returns a public URL per stored file.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class StorageBackend(ABC):
    """Abstract base class for storage backends."""

    @abstractmethod
    def save_file(self, local_path: Path, remote_path: str) -> str:
        """
        Save file to storage.

        Args:
            local_path: Path to local file
            remote_path: Destination key in storage (``<folder>/<filename>``)

        Returns:
            Public URL of the stored file

        Raises:
            StorageError: If the file could not be stored
        """
        pass

    @abstractmethod
    def file_exists(self, remote_path: str) -> bool:
        """Check if file exists in storage."""
        pass

    @abstractmethod
    def get_file_url(self, remote_path: str) -> str:
        """Public URL for a stored key."""
        pass
