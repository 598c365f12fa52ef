"""
Unit tests for content pane formatting.
"""

from prompt_browser.catalog.models import CatalogItem
from prompt_browser.config import Settings
from prompt_browser.services.response_formatter import (
    format_item_for_view,
    format_empty_view,
    format_resolution,
    is_resource_item,
)


def make_settings():
    return Settings(
        RESOURCE_CATEGORY_MARKER="0. Files",
        EMPTY_CONTENT_PLACEHOLDER="(none)",
        EMPTY_SELECTION_MESSAGE="Pick a category",
    )


class TestFormatItemForView:
    """Test item payloads."""

    def test_prompt_item(self):
        """A regular item should be copyable with its content and prompt."""
        item = CatalogItem(id="p", large_category="1. Basics", content="About", prompt="Do it")
        view = format_item_for_view(item, make_settings())

        assert view["id"] == "p"
        assert view["content"] == "About"
        assert view["prompt"] == "Do it"
        assert view["is_resource"] is False
        assert view["copyable"] is True

    def test_resource_item(self):
        """Items under the resource category should not be copyable."""
        config = make_settings()
        item = CatalogItem(id="r", large_category="0. Files", medium_category="Data")

        view = format_item_for_view(item, config)
        assert is_resource_item(item, config) is True
        assert view["is_resource"] is True
        assert view["copyable"] is False
        assert view["hint"] == config.RESOURCE_HINT

    def test_empty_content_placeholder(self):
        item = CatalogItem(id="e", large_category="1. Basics")
        assert format_item_for_view(item, make_settings())["content"] == "(none)"


class TestFormatResolution:
    """Test resolution payloads."""

    def test_no_item(self):
        """None should produce the placeholder state."""
        config = make_settings()
        assert format_resolution(None, config) == format_empty_view(config)
        assert format_empty_view(config) == {"item": None, "message": "Pick a category"}

    def test_item(self):
        item = CatalogItem(id="p", large_category="1. Basics")
        payload = format_resolution(item, make_settings())
        assert payload["item"]["id"] == "p"
        assert payload["message"] is None
