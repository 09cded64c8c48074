"""
Product catalog loading.

Reads the versioned product JSON (from a file or from storage), validates it
into a ProductCatalog and caches it. A catalog that cannot be read or parsed
is replaced by an empty one so product selection degrades to "nothing
eligible" instead of failing the plan.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from finance_planner.models.products import ProductCatalog
from finance_planner.storage.base import StorageError, StorageService

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "products.json"


class CatalogLoadError(Exception):
    """Raised when a catalog document cannot be read or validated."""


def parse_catalog(document: Dict[str, Any]) -> ProductCatalog:
    """Validate a raw catalog document.

    Raises:
        CatalogLoadError: If the document does not match the catalog schema
    """
    try:
        return ProductCatalog.model_validate(document)
    except ValidationError as e:
        raise CatalogLoadError(f"Invalid product catalog: {e}")


class CatalogService:
    """Loads and caches the product catalog snapshot."""

    def __init__(
        self,
        catalog_path: Optional[str] = None,
        storage: Optional[StorageService] = None,
        storage_key: str = "catalog/products.json",
    ) -> None:
        """Initialize the catalog service.

        Args:
            catalog_path: JSON file to read; defaults to the bundled snapshot
            storage: Storage backend to read from instead of a file
            storage_key: Key of the catalog document in ``storage``
        """
        self.catalog_path = Path(catalog_path) if catalog_path else DEFAULT_CATALOG_PATH
        self.storage = storage
        self.storage_key = storage_key
        self._catalog: Optional[ProductCatalog] = None

    def _read_document(self) -> Dict[str, Any]:
        if self.storage is not None:
            try:
                return self.storage.retrieve_json(self.storage_key)
            except StorageError as e:
                raise CatalogLoadError(f"Cannot read catalog {self.storage_key}: {e}")

        try:
            with open(self.catalog_path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogLoadError(f"Cannot read catalog {self.catalog_path}: {e}")
        if not isinstance(document, dict):
            raise CatalogLoadError(f"Catalog {self.catalog_path} is not a JSON object")
        return document

    def load(self) -> ProductCatalog:
        """Return the cached catalog, loading it on first use."""
        if self._catalog is None:
            try:
                self._catalog = parse_catalog(self._read_document())
                logger.info(
                    f"Loaded product catalog {self._catalog.data_version or 'unversioned'} "
                    f"as of {self._catalog.as_of or 'unknown'}: {self._catalog.counts}"
                )
            except CatalogLoadError as e:
                logger.error(f"Product catalog unavailable, using empty catalog: {e}")
                self._catalog = ProductCatalog.empty()
        return self._catalog

    def reload(self) -> ProductCatalog:
        """Drop the cached catalog and load it again."""
        self._catalog = None
        return self.load()
