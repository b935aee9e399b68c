"""Free-text keyword matching over recipe fields."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from petitsplats.errors import require
from petitsplats.models.recipe import Recipe

logger = logging.getLogger(__name__)

MIN_KEYWORD_LENGTH = 3


def _contains(text: Optional[str], needle: str) -> bool:
    return bool(text) and needle in text.lower()


def _matched_field(recipe: Recipe, needle: str) -> Optional[str]:
    """Return the first field containing ``needle``, probing in a fixed order."""

    if _contains(recipe.name, needle):
        return "name"
    if _contains(recipe.description, needle):
        return "description"
    if any(_contains(line.ingredient, needle) for line in recipe.ingredients):
        return "ingredients"
    if _contains(recipe.appliance, needle):
        return "appliance"
    if any(_contains(ustensil, needle) for ustensil in recipe.ustensils):
        return "ustensils"
    return None


def matches(recipe: Recipe, keyword: str, *, min_length: int = MIN_KEYWORD_LENGTH) -> bool:
    """Return True when ``recipe`` textually matches ``keyword``.

    Keywords shorter than ``min_length`` never filter anything. Longer keywords are
    matched as case-insensitive substrings of the name, description, ingredient
    names, appliance and utensils.
    """

    require(keyword, "keyword")
    if len(keyword) < min_length:
        return True

    field = _matched_field(recipe, keyword.lower())
    if field is None:
        return False
    logger.debug("Keyword %r matched %s of recipe id=%s", keyword, field, recipe.id)
    return True


def apply_keyword(
    recipes: Iterable[Recipe],
    keyword: str,
    *,
    min_length: int = MIN_KEYWORD_LENGTH,
) -> List[Recipe]:
    """Return the recipes matching ``keyword``, preserving input order."""

    require(recipes, "recipes")
    require(keyword, "keyword")
    if len(keyword) < min_length:
        return list(recipes)
    return [recipe for recipe in recipes if matches(recipe, keyword, min_length=min_length)]
