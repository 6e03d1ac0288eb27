"""
Storage backend factory for mockup-scroller.

This module provides factory functions for creating storage backends
based on configuration or explicit parameters.
"""

from pathlib import Path
from .base import StorageBackend
from .local import LocalStorage
from .s3 import S3Storage, DEFAULT_CACHE_CONTROL
from .exceptions import StorageBackendError


def create_storage_backend() -> StorageBackend:
    """
    Create storage backend based on configuration.

    Raises:
        StorageBackendError: If backend type is unknown or configuration is invalid
    """
    from mockup_scroller import settings

    backend_type = settings.get_storage_backend()

    if backend_type == "local":
        return LocalStorage(Path(settings.get_storage_local_path()))

    elif backend_type == "s3":
        s3_cfg = settings.get_storage_s3_config()
        return create_storage_backend_with_config(
            "s3",
            bucket=s3_cfg.get('bucket'),
            region=s3_cfg.get('region', 'us-east-1'),
            profile=s3_cfg.get('profile'),
            cdn_base_url=s3_cfg.get('cdn_base_url'),
            cache_control=s3_cfg.get('cache_control', DEFAULT_CACHE_CONTROL),
        )

    else:
        raise StorageBackendError(f"Unknown storage backend: {backend_type}")


def create_storage_backend_with_config(backend_type: str, **kwargs) -> StorageBackend:
    """
    Create storage backend with explicit configuration.

    Args:
        backend_type: Type of storage backend ("local" or "s3")
        **kwargs: Backend-specific configuration parameters

    Raises:
        StorageBackendError: If backend type is unknown or configuration is invalid
    """
    if backend_type == "local":
        base_path = kwargs.get('base_path', 'uploads')
        return LocalStorage(Path(base_path))

    elif backend_type == "s3":
        bucket = kwargs.get('bucket')
        if not bucket:
            raise StorageBackendError("bucket is required for S3 backend")
        return S3Storage(
            bucket,
            region=kwargs.get('region') or 'us-east-1',
            profile=kwargs.get('profile'),
            cdn_base_url=kwargs.get('cdn_base_url'),
            cache_control=kwargs.get('cache_control') or DEFAULT_CACHE_CONTROL,
        )

    else:
        raise StorageBackendError(f"Unknown storage backend: {backend_type}")
