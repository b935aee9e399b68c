"""Loading recipe catalogs from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from pydantic import ValidationError

from petitsplats import metrics
from petitsplats.errors import CatalogError
from petitsplats.models.recipe import Recipe

logger = logging.getLogger(__name__)


def parse_recipes(payload: Any) -> List[Recipe]:
    """Validate a decoded catalog, skipping entries that are not usable recipes.

    Both ``{"recipes": [...]}`` documents and bare lists are accepted.
    """

    if isinstance(payload, dict):
        payload = payload.get("recipes")
    if not isinstance(payload, list):
        raise CatalogError("catalog must be a list of recipes or an object with a 'recipes' list")

    recipes: List[Recipe] = []
    for index, entry in enumerate(payload):
        if isinstance(entry, Recipe):
            recipes.append(entry)
            continue
        if not isinstance(entry, dict):
            logger.warning("Skipping catalog entry %d: expected an object, got %s", index, type(entry).__name__)
            continue
        try:
            recipes.append(Recipe.model_validate(entry))
        except ValidationError as exc:
            logger.warning("Skipping catalog entry %d (id=%s): %s", index, entry.get("id"), exc.errors())
    return recipes


def load_recipes(path: Path) -> List[Recipe]:
    """Read and validate the recipe catalog stored at ``path``."""

    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except FileNotFoundError as exc:
        raise CatalogError(f"recipe catalog not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"recipe catalog {path} is not valid JSON: {exc}") from exc

    recipes = parse_recipes(payload)
    metrics.CATALOG_RECIPES.set(len(recipes))
    logger.info("Loaded %d recipes from %s", len(recipes), path)
    return recipes
