"""
Storage module for mockup-scroller.

This module provides storage abstraction for publishing output files,
supporting multiple backends (local filesystem and AWS S3 behind a CDN).
"""

from .base import StorageBackend
from .local import LocalStorage
from .s3 import S3Storage
from .factory import create_storage_backend, create_storage_backend_with_config
from .exceptions import (
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
    StorageBackendError,
    UploadError
)

__all__ = [
    'StorageBackend',
    'LocalStorage',
    'S3Storage',
    'create_storage_backend',
    'create_storage_backend_with_config',
    'StorageError',
    'StorageNotFoundError',
    'StoragePermissionError',
    'StorageBackendError',
    'UploadError'
]
