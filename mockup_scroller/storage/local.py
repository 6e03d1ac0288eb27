"""
Local filesystem storage backend for mockup-scroller.

Publishes outputs by copying them under a base directory; useful for
dry runs of upload mode and for serving files from a mounted share.
"""

import shutil
from pathlib import Path
from .base import StorageBackend
from .exceptions import StorageError, StorageNotFoundError


class LocalStorage(StorageBackend):
    """Local filesystem storage backend."""

    def __init__(self, base_path: Path):
        """
        Initialize LocalStorage backend.

        Args:
            base_path: Base directory for stored files
        """
        self.base_path = Path(base_path).resolve()
        self.base_path.mkdir(parents=True, exist_ok=True)

    def save_file(self, local_path: Path, remote_path: str) -> str:
        """Copy file under the base directory and return its ``file://`` URL."""
        local_path = Path(local_path)
        if not local_path.is_file():
            raise StorageNotFoundError(f"Local file does not exist: {local_path}")

        dest_path = self.base_path / remote_path
        try:
            dest_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(local_path, dest_path)
        except OSError as e:
            raise StorageError(f"Failed to save file {local_path} to {remote_path}: {e}") from e
        return self.get_file_url(remote_path)

    def file_exists(self, remote_path: str) -> bool:
        return (self.base_path / remote_path).exists()

    def get_file_url(self, remote_path: str) -> str:
        return (self.base_path / remote_path).as_uri()
