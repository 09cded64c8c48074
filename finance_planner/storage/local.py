"""
Local filesystem storage service implementation.

Suitable for development and single-instance deployments.
"""

from pathlib import Path
from typing import List

from .base import (
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
    StorageService,
)


class LocalStorageService(StorageService):
    """Stores documents as files under a base directory."""

    def __init__(self, base_path: str = "storage", create_dirs: bool = True):
        """
        Initialize the local storage service.

        Args:
            base_path: Base directory for stored documents
            create_dirs: Whether to create directories if they don't exist
        """
        self.base_path = Path(base_path)
        self.create_dirs = create_dirs

        if self.create_dirs:
            self.base_path.mkdir(parents=True, exist_ok=True)

    def _get_file_path(self, file_path: str) -> Path:
        """Map a storage key to a path that cannot escape ``base_path``."""
        parts: List[str] = []
        for part in file_path.replace("\\", "/").split("/"):
            if part == "..":
                if parts:
                    parts.pop()
            elif part and part != ".":
                parts.append(part)
        return self.base_path.joinpath(*parts)

    def store_file(self, file_path: str, content: bytes) -> str:
        try:
            local_path = self._get_file_path(file_path)
            if self.create_dirs:
                local_path.parent.mkdir(parents=True, exist_ok=True)
            local_path.write_bytes(content)
            return file_path
        except PermissionError as e:
            raise StoragePermissionError(
                f"Permission denied storing file {file_path}: {e}"
            )
        except OSError as e:
            raise StorageError(f"Failed to store file {file_path}: {e}")

    def retrieve_file(self, file_path: str) -> bytes:
        local_path = self._get_file_path(file_path)
        if not local_path.is_file():
            raise StorageNotFoundError(f"File not found: {file_path}")
        try:
            return local_path.read_bytes()
        except PermissionError as e:
            raise StoragePermissionError(
                f"Permission denied retrieving file {file_path}: {e}"
            )
        except OSError as e:
            raise StorageError(f"Failed to retrieve file {file_path}: {e}")

    def delete_file(self, file_path: str) -> bool:
        local_path = self._get_file_path(file_path)
        if not local_path.is_file():
            return False
        try:
            local_path.unlink()
            return True
        except PermissionError as e:
            raise StoragePermissionError(
                f"Permission denied deleting file {file_path}: {e}"
            )
        except OSError as e:
            raise StorageError(f"Failed to delete file {file_path}: {e}")

    def file_exists(self, file_path: str) -> bool:
        return self._get_file_path(file_path).is_file()

    def list_files(self, prefix: str = "") -> List[str]:
        if not self.base_path.exists():
            return []
        files = []
        for path in self.base_path.rglob("*"):
            if path.is_file():
                key = path.relative_to(self.base_path).as_posix()
                if key.startswith(prefix):
                    files.append(key)
        return sorted(files)
