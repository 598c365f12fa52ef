"""
Selection Resolver for category navigation.

Resolves a (large, medium, small) selection to the single catalog item to
display, and computes selection transitions for navigation events.

Resolution runs two ordered scans over the catalog:
1. Exact match - large, medium and small all match; an item with no
   medium/small only matches an unset medium/small.
2. Fallback - the first item whose large category matches.
If neither scan finds an item the result is None.
"""

from typing import List, Optional, Sequence

from prompt_browser.catalog.models import (
    CatalogItem,
    SelectionEvent,
    SelectionLevel,
    SelectionState,
)


def _level_matches(item_value: Optional[str], selected: Optional[str]) -> bool:
    return item_value == selected or (not item_value and not selected)


def _is_exact_match(item: CatalogItem, selection: SelectionState) -> bool:
    return (
        item.large_category == selection.selected_large
        and _level_matches(item.medium_category, selection.selected_medium)
        and _level_matches(item.small_category, selection.selected_small)
    )


def resolve(
    items: Sequence[CatalogItem],
    selection: SelectionState
) -> Optional[CatalogItem]:
    """
    Resolve a selection to the item to display.

    Args:
        items: Catalog items in catalog order
        selection: Current selection state

    Returns:
        The matching CatalogItem, or None when the large category is unset
        or not present in the catalog
    """
    if not selection.selected_large:
        return None

    exact = next((item for item in items if _is_exact_match(item, selection)), None)
    if exact is not None:
        return exact

    return next(
        (item for item in items if item.large_category == selection.selected_large),
        None
    )


def initial_selection(items: Sequence[CatalogItem]) -> SelectionState:
    """Selection for first entry into the browsing view (the first catalog item)."""
    if not items:
        return SelectionState()

    first = items[0]
    return SelectionState(
        selected_large=first.large_category,
        selected_medium=first.medium_category or None,
        selected_small=first.small_category or None,
    )


def select_large(state: SelectionState, value: str) -> SelectionState:
    """Select a large category; medium and small are cleared."""
    return SelectionState(selected_large=value)


def select_medium(state: SelectionState, value: str) -> SelectionState:
    """Select a medium category under the current large; small is cleared."""
    return SelectionState(selected_large=state.selected_large, selected_medium=value)


def select_small(state: SelectionState, value: str) -> SelectionState:
    """Select a small category; large and medium are kept."""
    return state.model_copy(update={"selected_small": value})


def apply_event(state: SelectionState, event: SelectionEvent) -> SelectionState:
    """
    Apply a navigation event to a selection.

    Args:
        state: Current selection (not modified)
        event: Level and value picked by the user

    Returns:
        New SelectionState with dependent deeper levels cleared
    """
    if event.level == SelectionLevel.LARGE:
        return select_large(state, event.value)
    if event.level == SelectionLevel.MEDIUM:
        return select_medium(state, event.value)
    return select_small(state, event.value)


def breadcrumb(selection: SelectionState, default: str = "Select Category") -> List[str]:
    """Header path for a selection: large (or `default`), then medium and small when set."""
    path = [selection.selected_large or default]
    if selection.selected_medium:
        path.append(selection.selected_medium)
    if selection.selected_small:
        path.append(selection.selected_small)
    return path
