"""
Storage module for persisted planner documents.

Provides a unified interface for storing and retrieving JSON documents on
the local filesystem or in S3.
"""

from .base import (
    StorageConfigurationError,
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
    StorageService,
)
from .factory import create_storage_service
from .local import LocalStorageService
from .s3 import S3StorageService

__all__ = [
    "StorageService",
    "StorageError",
    "StorageNotFoundError",
    "StoragePermissionError",
    "StorageConfigurationError",
    "LocalStorageService",
    "S3StorageService",
    "create_storage_service",
]
