"""Dependency definitions for the Petits Plats API server."""

from __future__ import annotations

from functools import lru_cache

from petitsplats.catalog import load_recipes
from petitsplats.config import get_settings
from petitsplats.search import RecipeSearchEngine


@lru_cache
def get_search_engine() -> RecipeSearchEngine:
    """Return the process-wide engine built from the configured catalog."""

    settings = get_settings()
    return RecipeSearchEngine(
        load_recipes(settings.recipes_path),
        cache_size=settings.query_cache_size,
        min_keyword_length=settings.min_keyword_length,
    )


def reset_search_engine() -> None:
    """Drop the cached engine so the next request reloads the catalog."""

    get_search_engine.cache_clear()
