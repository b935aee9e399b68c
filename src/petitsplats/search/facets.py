"""Tag filtering and facet option computation."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Union

from petitsplats.errors import PreconditionError, require
from petitsplats.models.query import FacetCategory, FacetOptionSet, SelectedTag
from petitsplats.models.recipe import Recipe

logger = logging.getLogger(__name__)

TagLike = Union[SelectedTag, Mapping[str, str]]


def coerce_tag(tag: TagLike) -> Optional[SelectedTag]:
    """Build a SelectedTag, returning None for mappings without string fields."""

    if isinstance(tag, SelectedTag):
        return tag
    if isinstance(tag, Mapping):
        item, category = tag.get("item"), tag.get("category")
        if not isinstance(item, str) or not isinstance(category, str):
            logger.debug("Ignoring malformed tag %r", dict(tag))
            return None
        return SelectedTag(item=item, category=category)
    raise PreconditionError(f"unsupported tag value: {tag!r}")


def group_tags(selected_tags: Iterable[TagLike]) -> Dict[FacetCategory, List[str]]:
    """Bucket tag items by facet category, dropping tags with unknown categories."""

    require(selected_tags, "selected_tags")
    buckets: Dict[FacetCategory, List[str]] = {category: [] for category in FacetCategory}
    for raw in selected_tags:
        tag = coerce_tag(raw)
        if tag is None:
            continue
        category = tag.facet
        if category is None:
            logger.debug("Ignoring tag %r with unknown category %r", tag.item, tag.category)
            continue
        buckets[category].append(tag.item)
    return buckets


def _passes(recipe: Recipe, buckets: Dict[FacetCategory, List[str]]) -> bool:
    wanted = buckets[FacetCategory.INGREDIENTS]
    if wanted:
        names = set(recipe.ingredient_names())
        if not all(item in names for item in wanted):
            return False

    # One appliance per recipe: two distinct appliance tags can never both match.
    if not all(item == recipe.appliance for item in buckets[FacetCategory.APPLIANCES]):
        return False

    wanted = buckets[FacetCategory.USTENSILS]
    if wanted and not all(item in recipe.ustensils for item in wanted):
        return False
    return True


def filter_by_tags(recipes: Iterable[Recipe], selected_tags: Iterable[TagLike]) -> List[Recipe]:
    """Keep the recipes carrying every selected tag, preserving input order."""

    require(recipes, "recipes")
    buckets = group_tags(selected_tags)
    if not any(buckets.values()):
        return list(recipes)
    return [recipe for recipe in recipes if _passes(recipe, buckets)]


def compute_facet_options(recipes: Iterable[Recipe]) -> FacetOptionSet:
    """Collect the distinct values of each facet, sorted ascending."""

    require(recipes, "recipes")
    ingredients: set[str] = set()
    appliances: set[str] = set()
    ustensils: set[str] = set()
    for recipe in recipes:
        ingredients.update(recipe.ingredient_names())
        if recipe.appliance:
            appliances.add(recipe.appliance)
        ustensils.update(recipe.ustensils)
    return FacetOptionSet(
        ingredients=sorted(ingredients),
        appliances=sorted(appliances),
        ustensils=sorted(ustensils),
    )


def copy_facet_options(options: FacetOptionSet) -> FacetOptionSet:
    """Return options backed by new lists, safe to hand to a caller."""

    return FacetOptionSet(
        ingredients=list(options.ingredients),
        appliances=list(options.appliances),
        ustensils=list(options.ustensils),
    )


def narrow_facet_options(options: FacetOptionSet, text: str) -> FacetOptionSet:
    """Keep the options containing ``text`` (case-insensitive), as typed in a dropdown."""

    require(options, "options")
    needle = (text or "").lower()
    if not needle:
        return copy_facet_options(options)
    return FacetOptionSet(
        **{
            category.value: [value for value in options.values(category) if needle in value.lower()]
            for category in FacetCategory
        }
    )
