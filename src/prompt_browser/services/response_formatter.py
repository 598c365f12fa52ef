"""
Response Formatter for the content pane.

Converts resolved catalog items into the view payload rendered by the UI.
"""

from typing import Any, Dict, Optional

from prompt_browser.catalog.models import CatalogItem
from prompt_browser.config import Settings, settings as default_settings


def is_resource_item(item: CatalogItem, config: Optional[Settings] = None) -> bool:
    """Whether an item is a downloadable resource rather than a copyable prompt."""
    config = config or default_settings
    return config.RESOURCE_CATEGORY_MARKER in item.large_category


def format_item_for_view(
    item: CatalogItem,
    config: Optional[Settings] = None
) -> Dict[str, Any]:
    """
    Format a resolved item for the content pane.

    Args:
        item: Resolved catalog item
        config: Settings override (defaults to global settings)

    Returns:
        Dict containing:
            - id, large_category, medium_category, small_category
            - content: Item content, or the placeholder when empty
            - prompt: Prompt text
            - is_resource: True for items under the resource category
            - copyable: True when the prompt can be copied
            - hint: Action hint text
    """
    config = config or default_settings
    resource = is_resource_item(item, config)

    return {
        "id": item.id,
        "large_category": item.large_category,
        "medium_category": item.medium_category,
        "small_category": item.small_category,
        "content": item.content or config.EMPTY_CONTENT_PLACEHOLDER,
        "prompt": item.prompt,
        "is_resource": resource,
        "copyable": not resource,
        "hint": config.RESOURCE_HINT if resource else config.PROMPT_HINT,
    }


def format_empty_view(config: Optional[Settings] = None) -> Dict[str, Any]:
    """Format the placeholder state shown when nothing resolves."""
    config = config or default_settings
    return {
        "item": None,
        "message": config.EMPTY_SELECTION_MESSAGE,
    }


def format_resolution(
    item: Optional[CatalogItem],
    config: Optional[Settings] = None
) -> Dict[str, Any]:
    """Format a resolution result, item or placeholder."""
    if item is None:
        return format_empty_view(config)
    return {
        "item": format_item_for_view(item, config),
        "message": None,
    }
