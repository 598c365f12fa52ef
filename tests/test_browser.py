"""
Unit tests for BrowsingSession and navigation annotation.
"""

import pytest

from prompt_browser.catalog.models import (
    CatalogItem,
    SelectionEvent,
    SelectionLevel,
    SelectionState,
    ViewEnum,
)
from prompt_browser.services.browser import BrowsingSession, annotate_tree
from prompt_browser.services.tree_builder import CategoryTreeCache, build_tree


@pytest.fixture
def catalog():
    return (
        CatalogItem(id="a", largeCategory="Intro", mediumCategory="Basics", smallCategory="Step1"),
        CatalogItem(id="b", largeCategory="Intro", mediumCategory="Basics", smallCategory="Step2"),
        CatalogItem(id="c", largeCategory="Intro", mediumCategory="Extras"),
        CatalogItem(id="d", largeCategory="Report"),
    )


@pytest.fixture
def session(catalog):
    return BrowsingSession(catalog)


class TestBrowsingSession:
    """Test session lifecycle and event handling."""

    def test_starts_on_intro_with_no_selection(self, session):
        """A new session should show the intro view with nothing selected."""
        assert session.view == ViewEnum.INTRO
        assert session.selection == SelectionState()
        assert session.current_item is None

    def test_enter_selects_first_item(self, session):
        """enter() should switch to main and resolve the first catalog item."""
        item = session.enter()

        assert session.view == ViewEnum.MAIN
        assert item.id == "a"
        assert session.selection.selected_small == "Step1"

    def test_large_event_falls_back(self, session):
        """Picking a large category with sub-levels should fall back to its first item."""
        session.enter()
        item = session.apply(SelectionEvent(level=SelectionLevel.LARGE, value="Intro"))

        assert session.selection == SelectionState(selected_large="Intro")
        assert item.id == "a"

    def test_medium_then_small(self, session):
        """Narrowing to medium and small should resolve the exact item."""
        session.enter()
        session.apply(SelectionEvent(level=SelectionLevel.LARGE, value="Intro"))
        assert session.apply(SelectionEvent(level=SelectionLevel.MEDIUM, value="Extras")).id == "c"

        session.apply(SelectionEvent(level=SelectionLevel.MEDIUM, value="Basics"))
        assert session.apply(SelectionEvent(level=SelectionLevel.SMALL, value="Step2")).id == "b"

    def test_enter_empty_catalog_clears_selection(self):
        """enter() on an empty catalog should leave the selection all-unset."""
        session = BrowsingSession(())
        session.selection = SelectionState(selected_large="Stale", selected_medium="Old")

        assert session.enter() is None
        assert session.selection == SelectionState()

    def test_go_home_keeps_selection(self, session):
        session.enter()
        session.apply(SelectionEvent(level=SelectionLevel.LARGE, value="Report"))
        session.go_home()

        assert session.view == ViewEnum.INTRO
        assert session.current_item.id == "d"

    def test_tree_is_cached(self, catalog):
        """Selection changes should not rebuild the tree."""
        cache = CategoryTreeCache()
        session = BrowsingSession(catalog, tree_cache=cache)
        session.enter()
        session.tree
        session.apply(SelectionEvent(level=SelectionLevel.LARGE, value="Report"))
        session.navigation()

        assert cache.build_count == 1


class TestAnnotateTree:
    """Test node flags for the sidebar."""

    def test_selected_large_expands(self, catalog):
        """The selected large node with mediums should be expanded; others collapsed."""
        nodes = annotate_tree(build_tree(catalog), SelectionState(selected_large="Intro"))

        intro, report = nodes
        assert intro["name"] == "Intro"
        assert intro["selected"] is True
        assert intro["expanded"] is True
        assert report["expanded"] is False
        assert report["has_children"] is False

    def test_leaf_large_never_expands(self, catalog):
        nodes = annotate_tree(build_tree(catalog), SelectionState(selected_large="Report"))
        assert nodes[1]["selected"] is True
        assert nodes[1]["expanded"] is False

    def test_selected_medium_expands_smalls(self, catalog):
        """A selected medium with smalls should expand and mark the selected small."""
        state = SelectionState(selected_large="Intro", selected_medium="Basics", selected_small="Step2")
        basics, extras = annotate_tree(build_tree(catalog), state)[0]["children"]

        assert basics["expanded"] is True
        assert [s["selected"] for s in basics["children"]] == [False, True]
        assert extras["has_children"] is False
        assert extras["expanded"] is False

    def test_medium_not_selected_under_other_large(self, catalog):
        """A medium name should only be selected under the selected large category."""
        state = SelectionState(selected_large="Report", selected_medium="Basics")
        basics = annotate_tree(build_tree(catalog), state)[0]["children"][0]
        assert basics["selected"] is False
