"""
Storage-related exceptions for mockup-scroller.

Any storage failure during an upload run is fatal for the whole batch.
"""


class StorageError(Exception):
    """Base storage error."""
    pass


class StorageNotFoundError(StorageError):
    """Local file or remote bucket not found."""
    pass


class StoragePermissionError(StorageError):
    """Permission denied or credentials missing."""
    pass


class StorageBackendError(StorageError):
    """Storage backend misconfigured or unknown."""
    pass


class UploadError(StorageError):
    """An output file failed to upload; remaining uploads were aborted."""

    def __init__(self, message: str, file_path: str = None):
        self.file_path = file_path
        self.message = message
        if file_path:
            super().__init__(f"{message} (File: {file_path})")
        else:
            super().__init__(message)
