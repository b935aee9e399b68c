"""Recipe search engine: keyword matching, tag filtering and query coordination."""

from __future__ import annotations

from .facets import (
    compute_facet_options,
    copy_facet_options,
    filter_by_tags,
    group_tags,
    narrow_facet_options,
)
from .keyword import MIN_KEYWORD_LENGTH, apply_keyword, matches
from .query import CacheInfo, RecipeSearchEngine, run_query
from .selection import TagSelection

__all__ = [
    "MIN_KEYWORD_LENGTH",
    "CacheInfo",
    "RecipeSearchEngine",
    "TagSelection",
    "apply_keyword",
    "compute_facet_options",
    "copy_facet_options",
    "filter_by_tags",
    "group_tags",
    "matches",
    "narrow_facet_options",
    "run_query",
]
