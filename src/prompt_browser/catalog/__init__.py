"""Catalog package for the Prompt Browser."""

from .models import (
    CatalogItem,
    NavigationTree,
    SelectionEvent,
    SelectionLevel,
    SelectionState,
    ViewEnum,
)
from .repository import CatalogLoadError, CatalogRepository, load_catalog, parse_catalog

__all__ = [
    "CatalogItem",
    "NavigationTree",
    "SelectionEvent",
    "SelectionLevel",
    "SelectionState",
    "ViewEnum",
    "CatalogLoadError",
    "CatalogRepository",
    "load_catalog",
    "parse_catalog",
]
