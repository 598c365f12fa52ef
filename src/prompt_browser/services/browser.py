"""
Browsing session adapter.

Owns the selection state and current view for one browsing session and
delegates to the pure tree builder and selection resolver.
"""

from typing import Any, Dict, List, Optional, Sequence

from prompt_browser.catalog.models import (
    CatalogItem,
    NavigationTree,
    SelectionEvent,
    SelectionState,
    ViewEnum,
)
from prompt_browser.services.selection import apply_event, initial_selection, resolve
from prompt_browser.services.tree_builder import CategoryTreeCache, has_children


def annotate_tree(tree: NavigationTree, selection: SelectionState) -> List[Dict[str, Any]]:
    """
    Annotate the navigation tree with display flags for a selection.

    A large node is expanded when it is selected and has medium categories;
    a medium node is expanded when it is selected under the expanded large
    node and has small categories.

    Returns:
        List of large nodes, each with nested "children" medium nodes
    """
    nodes = []
    for large, mediums in tree.items():
        large_selected = selection.selected_large == large
        large_expanded = large_selected and has_children(tree, large)

        children = []
        for medium, smalls in mediums.items():
            medium_selected = large_selected and selection.selected_medium == medium
            medium_expanded = large_expanded and medium_selected and has_children(tree, large, medium)
            children.append({
                "name": medium,
                "selected": medium_selected,
                "has_children": has_children(tree, large, medium),
                "expanded": medium_expanded,
                "children": [
                    {
                        "name": small,
                        "selected": medium_selected and selection.selected_small == small,
                    }
                    for small in smalls
                ],
            })

        nodes.append({
            "name": large,
            "selected": large_selected,
            "has_children": has_children(tree, large),
            "expanded": large_expanded,
            "children": children,
        })

    return nodes


class BrowsingSession:
    """
    Selection and view state for a single browsing session.

    The catalog and tree are shared read-only; the session only replaces
    its own SelectionState in response to events.
    """

    def __init__(
        self,
        items: Sequence[CatalogItem],
        tree_cache: Optional[CategoryTreeCache] = None
    ):
        self.items = items
        self.tree_cache = tree_cache or CategoryTreeCache()
        self.selection = SelectionState()
        self.view = ViewEnum.INTRO

    @property
    def tree(self) -> NavigationTree:
        return self.tree_cache.get(self.items)

    @property
    def current_item(self) -> Optional[CatalogItem]:
        return resolve(self.items, self.selection)

    def enter(self) -> Optional[CatalogItem]:
        """Enter the browsing view and select the first catalog item."""
        self.view = ViewEnum.MAIN
        self.selection = initial_selection(self.items)
        return self.current_item

    def go_home(self):
        """Return to the intro view; the selection is kept."""
        self.view = ViewEnum.INTRO

    def apply(self, event: SelectionEvent) -> Optional[CatalogItem]:
        """Apply a navigation event and return the resolved item."""
        self.selection = apply_event(self.selection, event)
        return self.current_item

    def navigation(self) -> List[Dict[str, Any]]:
        """Annotated navigation tree for the current selection."""
        return annotate_tree(self.tree, self.selection)
