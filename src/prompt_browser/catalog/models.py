"""
Data models for the prompt catalog and category navigation.

Catalog items are immutable records supplied by the catalog loader.
Selection state is an explicit value that navigation transitions replace
rather than mutate.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
import enum


# large -> medium -> [small, ...], insertion-ordered at every level
NavigationTree = Dict[str, Dict[str, List[str]]]


class SelectionLevel(str, enum.Enum):
    """Depth of a category in the navigation tree."""
    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"


class ViewEnum(str, enum.Enum):
    """Screens of the browsing UI."""
    INTRO = "intro"
    MAIN = "main"


class CatalogItem(BaseModel):
    """
    A single catalog entry (prompt or downloadable resource).

    Categories are accepted under both snake_case and the camelCase keys
    used by exported front-end data. Empty medium/small categories are
    treated as absent.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    large_category: str = Field(alias="largeCategory", min_length=1)
    medium_category: Optional[str] = Field(default=None, alias="mediumCategory")
    small_category: Optional[str] = Field(default=None, alias="smallCategory")
    content: str = ""
    prompt: str = ""

    @field_validator("medium_category", "small_category", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value:
            return None
        return value


class SelectionState(BaseModel):
    """Current (large, medium, small) selection; None means unset."""
    model_config = ConfigDict(frozen=True)

    selected_large: Optional[str] = None
    selected_medium: Optional[str] = None
    selected_small: Optional[str] = None


class SelectionEvent(BaseModel):
    """A user pick at one level of the navigation tree."""
    model_config = ConfigDict(frozen=True)

    level: SelectionLevel
    value: str
