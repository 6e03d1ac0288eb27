import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from mockup_scroller.storage import StorageBackend, StorageError, UploadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadResult:
    local: Path
    url: str


class UploadService:
    """Publish output files under a logical folder; the first failure aborts the rest."""

    def __init__(self, backend: Optional[StorageBackend] = None):
        self._backend = backend

    @property
    def backend(self) -> StorageBackend:
        if self._backend is None:
            from mockup_scroller.storage import create_storage_backend
            self._backend = create_storage_backend()
        return self._backend

    def upload_output_files(self, output_files: Sequence[Path], folder_name: str) -> List[UploadResult]:
        """
        Upload each file as ``<folder_name>/<filename>``.

        Returns:
            One result per file, in input order

        Raises:
            UploadError: On the first file that fails; later files are not attempted
        """
        results: List[UploadResult] = []
        folder = folder_name.strip('/')

        for file_path in output_files:
            file_path = Path(file_path)
            key = f"{folder}/{file_path.name}" if folder else file_path.name

            logger.info(f"Uploading {file_path.name}...")
            try:
                url = self.backend.save_file(file_path, key)
            except StorageError as e:
                logger.error(f"❌ Failed to upload {file_path}: {e}")
                raise UploadError(f"Upload failed: {e}", file_path=str(file_path)) from e

            logger.info(f"✅ Uploaded: {url}")
            results.append(UploadResult(local=file_path, url=url))

        return results
