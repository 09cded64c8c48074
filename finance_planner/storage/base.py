"""
Base storage service interface and exceptions.

Saved household profiles (and optionally the product catalog) are kept as
JSON documents behind this interface, so the planner never touches a
particular backend directly.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List


class StorageError(Exception):
    """Base exception for storage-related errors."""


class StorageNotFoundError(StorageError):
    """Raised when a requested document is not found in storage."""


class StoragePermissionError(StorageError):
    """Raised when there are permission issues with storage operations."""


class StorageConfigurationError(StorageError):
    """Raised when the configured backend cannot be built."""


class StorageService(ABC):
    """Abstract base class for document storage backends."""

    @abstractmethod
    def store_file(self, file_path: str, content: bytes) -> str:
        """
        Store raw bytes under a storage key.

        Args:
            file_path: The path/key where the content should be stored
            content: The content as bytes

        Returns:
            str: The storage key the content was stored under

        Raises:
            StorageError: If the content cannot be stored
        """

    @abstractmethod
    def retrieve_file(self, file_path: str) -> bytes:
        """
        Retrieve raw bytes for a storage key.

        Raises:
            StorageNotFoundError: If the key does not exist
            StorageError: If the content cannot be retrieved
        """

    @abstractmethod
    def delete_file(self, file_path: str) -> bool:
        """
        Delete a storage key.

        Returns:
            bool: True if something was deleted, False if it didn't exist
        """

    @abstractmethod
    def file_exists(self, file_path: str) -> bool:
        """Check whether a storage key exists."""

    @abstractmethod
    def list_files(self, prefix: str = "") -> List[str]:
        """List storage keys, optionally filtered by prefix, sorted."""

    def store_json(self, file_path: str, document: Dict[str, Any]) -> str:
        """Serialize a JSON document and store it.

        Raises:
            StorageError: If the document is not JSON-serializable or cannot be stored
        """
        try:
            content = json.dumps(document, indent=2, sort_keys=True).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise StorageError(f"Document for {file_path} is not serializable: {e}")
        return self.store_file(file_path, content)

    def retrieve_json(self, file_path: str) -> Dict[str, Any]:
        """Retrieve and parse a JSON document.

        Raises:
            StorageNotFoundError: If the document does not exist
            StorageError: If the stored content is not a JSON object
        """
        content = self.retrieve_file(file_path)
        try:
            document = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StorageError(f"Document {file_path} is not valid JSON: {e}")
        if not isinstance(document, dict):
            raise StorageError(f"Document {file_path} is not a JSON object")
        return document
