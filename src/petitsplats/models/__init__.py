"""Pydantic models defining shared data contracts."""

from petitsplats.models.query import (
    FacetCategory,
    FacetOptionSet,
    Query,
    QueryResult,
    SelectedTag,
)
from petitsplats.models.recipe import Ingredient, Recipe

__all__ = [
    "FacetCategory",
    "FacetOptionSet",
    "Ingredient",
    "Query",
    "QueryResult",
    "Recipe",
    "SelectedTag",
]
