"""Query, tag and facet data models."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from petitsplats.models.recipe import Recipe


class FacetCategory(str, Enum):
    """The three filterable recipe attributes."""

    INGREDIENTS = "ingredients"
    APPLIANCES = "appliances"
    USTENSILS = "ustensils"

    @classmethod
    def parse(cls, value: object) -> Optional["FacetCategory"]:
        """Resolve a raw category name, accepting the singular UI aliases."""

        if isinstance(value, FacetCategory):
            return value
        if not isinstance(value, str):
            return None
        normalized = _CATEGORY_ALIASES.get(value, value)
        try:
            return cls(normalized)
        except ValueError:
            return None


_CATEGORY_ALIASES = {
    "ingredient": "ingredients",
    "appliance": "appliances",
    "ustensil": "ustensils",
}


class SelectedTag(BaseModel):
    """A facet value committed to the active filter.

    The category is kept as the raw string so that tags with an unknown
    category can be carried around and ignored by the filter.
    """

    item: str
    category: str

    model_config = ConfigDict(frozen=True)

    @property
    def facet(self) -> Optional[FacetCategory]:
        return FacetCategory.parse(self.category)


class FacetOptionSet(BaseModel):
    """Distinct sorted facet values available within a recipe collection."""

    ingredients: list[str] = Field(default_factory=list)
    appliances: list[str] = Field(default_factory=list)
    ustensils: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def values(self, category: FacetCategory) -> list[str]:
        return getattr(self, category.value)


class Query(BaseModel):
    """Current search state: free-text keyword plus selected tags."""

    keyword: str = Field(default="")
    tags: list[SelectedTag] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class QueryResult(BaseModel):
    """Recipes matching a query and the facet options left within them."""

    results: list[Recipe] = Field(default_factory=list)
    facet_options: FacetOptionSet = Field(default_factory=FacetOptionSet)
