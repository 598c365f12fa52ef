"""
Services for the Prompt Browser.

- tree_builder: Derives the large -> medium -> small navigation tree
- selection: Resolves selections to catalog items, navigation transitions
- browser: Per-session selection/view adapter
- response_formatter: Content pane payloads
"""

from prompt_browser.services.tree_builder import build_tree, has_children, CategoryTreeCache
from prompt_browser.services.selection import (
    resolve,
    initial_selection,
    select_large,
    select_medium,
    select_small,
    apply_event,
    breadcrumb,
)
from prompt_browser.services.browser import BrowsingSession, annotate_tree

__all__ = [
    "build_tree",
    "has_children",
    "CategoryTreeCache",
    "resolve",
    "initial_selection",
    "select_large",
    "select_medium",
    "select_small",
    "apply_event",
    "breadcrumb",
    "BrowsingSession",
    "annotate_tree",
]
