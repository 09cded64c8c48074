"""
Selects the backend for saved profiles (and a storage-hosted catalog).
"""

import logging
from typing import Callable, Dict

from finance_planner.config import Settings

from .base import StorageConfigurationError, StorageService
from .local import LocalStorageService
from .s3 import S3StorageService

logger = logging.getLogger(__name__)


def _local_backend(settings: Settings) -> StorageService:
    return LocalStorageService(base_path=settings.storage_base_path, create_dirs=True)


def _s3_backend(settings: Settings) -> StorageService:
    if not settings.s3_bucket_name:
        raise StorageConfigurationError("S3_BUCKET_NAME is required when STORAGE_TYPE=s3")
    return S3StorageService(
        bucket_name=settings.s3_bucket_name,
        region_name=settings.s3_region_name,
        aws_access_key_id=settings.s3_access_key_id,
        aws_secret_access_key=settings.s3_secret_access_key,
        prefix=settings.s3_prefix,
    )


STORAGE_BACKENDS: Dict[str, Callable[[Settings], StorageService]] = {
    "local": _local_backend,
    "s3": _s3_backend,
}


def create_storage_service(settings: Settings) -> StorageService:
    """Build the backend named by ``STORAGE_TYPE``.

    Raises:
        StorageConfigurationError: Unknown backend or missing S3 bucket
        StorageError: If the S3 bucket cannot be reached
    """
    build = STORAGE_BACKENDS.get(settings.storage_type)
    if build is None:
        raise StorageConfigurationError(
            f"No storage backend named {settings.storage_type!r}; "
            f"expected one of {sorted(STORAGE_BACKENDS)}"
        )
    storage = build(settings)
    logger.info(f"Saved profiles use {settings.storage_type} storage")
    return storage
