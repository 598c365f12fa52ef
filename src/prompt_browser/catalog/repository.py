"""
Catalog loading and read-only access.

The catalog is loaded once at start-up and never mutated afterwards.
Items keep their source order; the first item is the default selection.
"""

import json
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union
from pydantic import ValidationError

from prompt_browser.catalog.models import CatalogItem


class CatalogLoadError(Exception):
    """Raised when the catalog source is missing or malformed."""
    pass


def parse_catalog(records: Iterable[Mapping[str, Any]]) -> Tuple[CatalogItem, ...]:
    """
    Validate raw records into an ordered, immutable catalog.

    Args:
        records: Item dicts in catalog order

    Returns:
        Tuple of CatalogItem in the same order

    Raises:
        CatalogLoadError: If a record is invalid, ids repeat, or the catalog is empty
    """
    items: List[CatalogItem] = []
    seen_ids = set()

    for index, record in enumerate(records):
        try:
            item = CatalogItem.model_validate(record)
        except ValidationError as e:
            raise CatalogLoadError(f"Invalid catalog item at index {index}: {e}") from e

        if item.id in seen_ids:
            raise CatalogLoadError(f"Duplicate catalog item id: {item.id}")
        seen_ids.add(item.id)
        items.append(item)

    if not items:
        raise CatalogLoadError("Catalog is empty")

    return tuple(items)


def load_catalog(path: Union[str, Path]) -> Tuple[CatalogItem, ...]:
    """
    Load a catalog from a JSON file.

    Accepts either a top-level array of items or an object with an
    "items" array.

    Raises:
        CatalogLoadError: If the file cannot be read or parsed
    """
    catalog_path = Path(path)
    try:
        raw = json.loads(catalog_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise CatalogLoadError(f"Catalog file not found: {catalog_path}") from e
    except OSError as e:
        raise CatalogLoadError(f"Catalog file cannot be read: {catalog_path} ({e})") from e
    except UnicodeDecodeError as e:
        raise CatalogLoadError(f"Catalog file is not valid UTF-8: {catalog_path} ({e})") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Catalog file is not valid JSON: {catalog_path} ({e})") from e

    if isinstance(raw, dict):
        raw = raw.get("items")
    if not isinstance(raw, list):
        raise CatalogLoadError("Catalog JSON must be an array of items or {\"items\": [...]}")

    items = parse_catalog(raw)
    print(f"[CATALOG] Loaded {len(items)} items from {catalog_path}")
    return items


class CatalogRepository:
    """Read-only repository over a loaded catalog."""

    def __init__(self, items: Tuple[CatalogItem, ...]):
        self.items = items

    @classmethod
    def from_source(cls, path: Optional[str] = None) -> "CatalogRepository":
        """Load from a JSON file, or the built-in sample catalog when no path is given."""
        if path:
            return cls(load_catalog(path))

        from prompt_browser.catalog.seeds.sample_catalog import SAMPLE_CATALOG

        items = parse_catalog(SAMPLE_CATALOG)
        print(f"[CATALOG] Loaded {len(items)} items from built-in sample catalog")
        return cls(items)

    def get_all(self) -> Tuple[CatalogItem, ...]:
        """Get all items in catalog order."""
        return self.items

    def get_by_id(self, item_id: str) -> Optional[CatalogItem]:
        """Get an item by id."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def count(self) -> int:
        return len(self.items)
