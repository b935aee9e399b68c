"""Tests for the recipe and query data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from petitsplats.models import FacetCategory, Ingredient, Recipe, SelectedTag


def test_recipe_tolerates_missing_fields():
    recipe = Recipe.model_validate({"id": 7})

    assert recipe.name == ""
    assert recipe.description == ""
    assert recipe.appliance is None
    assert recipe.ingredients == []
    assert recipe.ustensils == []


def test_recipe_drops_unnamed_ingredients_and_utensils():
    recipe = Recipe.model_validate(
        {
            "name": "Soupe",
            "ingredients": [{"ingredient": "Carotte", "quantity": 3}, {"unit": "g"}, None],
            "ustensils": ["louche", "", 3],
        }
    )

    assert recipe.ingredients == [Ingredient(ingredient="Carotte", quantity=3)]
    assert recipe.ustensils == ["louche"]
    assert recipe.ingredient_names() == ["Carotte"]


def test_recipe_is_read_only():
    recipe = Recipe(name="Soupe")

    with pytest.raises(ValidationError):
        recipe.name = "Potage"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("ingredients", FacetCategory.INGREDIENTS),
        ("ingredient", FacetCategory.INGREDIENTS),
        ("appliance", FacetCategory.APPLIANCES),
        ("ustensils", FacetCategory.USTENSILS),
        (FacetCategory.USTENSILS, FacetCategory.USTENSILS),
        ("Ingredients", None),
        ("tools", None),
        (None, None),
    ],
)
def test_facet_category_parse(raw, expected):
    assert FacetCategory.parse(raw) is expected


def test_selected_tags_compare_by_item_and_category():
    first = SelectedTag(item="four", category="appliances")

    assert first == SelectedTag(item="four", category="appliances")
    assert first != SelectedTag(item="four", category="ustensils")
    assert len({first, SelectedTag(item="four", category="appliances")}) == 1
    assert SelectedTag(item="x", category="colours").facet is None


@pytest.mark.parametrize(
    "raw, expected",
    [(2, 2.0), ("1,5", 1.5), (" 3 ", 3.0), ("une pincée", None), (True, None), ("nan", None), ([1], None)],
)
def test_ingredient_quantity_is_parsed_leniently(raw, expected):
    assert Ingredient(ingredient="sel", quantity=raw, unit=3).quantity == expected
    assert Ingredient(ingredient="sel", quantity=raw, unit=3).unit is None


def test_recipe_integer_fields_are_parsed_leniently():
    recipe = Recipe.model_validate({"id": "12", "time": 30.0, "servings": "2.5"})

    assert (recipe.id, recipe.time, recipe.servings) == (12, 30, None)
