"""
Tree Builder for category navigation.

Derives the three-level navigation tree (large -> medium -> [small]) from
the flat catalog. Key order at every level is first-seen catalog order,
which is also the display order.
"""

from typing import Optional, Sequence

from prompt_browser.catalog.models import CatalogItem, NavigationTree


def build_tree(items: Sequence[CatalogItem]) -> NavigationTree:
    """
    Build the navigation tree from catalog items.

    Large categories without any medium category map to an empty dict,
    and medium categories without any small category map to an empty list.
    Small categories are appended as encountered, duplicates included.

    Args:
        items: Catalog items in catalog order

    Returns:
        NavigationTree mapping large -> medium -> list of small names
    """
    tree: NavigationTree = {}

    for item in items:
        mediums = tree.setdefault(item.large_category, {})
        if item.medium_category is None:
            continue

        smalls = mediums.setdefault(item.medium_category, [])
        if item.small_category is not None:
            smalls.append(item.small_category)

    return tree


def has_children(tree: NavigationTree, large: str, medium: Optional[str] = None) -> bool:
    """
    Check whether a tree node has a deeper level to expand.

    With only `large`, checks for medium categories under it; with
    `medium` too, checks for small categories under the pair.
    """
    mediums = tree.get(large, {})
    if medium is None:
        return len(mediums) > 0
    return len(mediums.get(medium, [])) > 0


class CategoryTreeCache:
    """
    Memoizes build_tree against the catalog reference.

    The tree is rebuilt only when a different catalog object is passed in.
    Callers must treat the returned tree as read-only.
    """

    def __init__(self):
        self._source: Optional[Sequence[CatalogItem]] = None
        self._tree: Optional[NavigationTree] = None
        self.build_count = 0

    def get(self, items: Sequence[CatalogItem]) -> NavigationTree:
        """Return the tree for `items`, building it on first use."""
        if self._tree is None or self._source is not items:
            self._tree = build_tree(items)
            self._source = items
            self.build_count += 1
        return self._tree

    def clear(self):
        """Drop the cached tree."""
        self._source = None
        self._tree = None
