"""Shared pytest fixtures for the Petits Plats test suite."""

from __future__ import annotations

import json
from typing import Dict, Generator, List

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from petitsplats.config import get_settings
from petitsplats.models.recipe import Recipe
from petitsplats.server.app import create_app
from petitsplats.server.deps import reset_search_engine


def _recipe_payloads() -> List[Dict[str, object]]:
    return [
        {
            "id": 1,
            "name": "Tarte aux pommes",
            "description": "Une tarte dorée au four.",
            "time": 50,
            "servings": 6,
            "ingredients": [
                {"ingredient": "pomme", "quantity": 3},
                {"ingredient": "Pâte brisée", "quantity": 1},
                {"ingredient": "sucre", "quantity": 100, "unit": "grammes"},
            ],
            "appliance": "four",
            "ustensils": ["moule", "couteau"],
        },
        {
            "id": 2,
            "name": "Poisson grillé",
            "description": "Poisson frais grillé au citron.",
            "time": 20,
            "servings": 2,
            "ingredients": [
                {"ingredient": "poisson", "quantity": 2},
                {"ingredient": "citron", "quantity": 1},
            ],
            "appliance": "grill",
            "ustensils": ["pince"],
        },
        {
            "id": 3,
            "name": "Limonade de Coco",
            "description": "Mixer les glaçons avec le lait de coco.",
            "time": 10,
            "servings": 1,
            "ingredients": [
                {"ingredient": "Lait de coco", "quantity": 400, "unit": "ml"},
                {"ingredient": "citron", "quantity": 2},
                {"ingredient": "sucre", "quantity": 30, "unit": "grammes"},
            ],
            "appliance": "Blender",
            "ustensils": ["verres", "presse citron"],
        },
        {
            "id": 4,
            "name": "Crumble",
            "description": "Dessert croustillant.",
            "time": 40,
            "servings": 4,
            "ingredients": [
                {"ingredient": "pomme", "quantity": 4},
                {"ingredient": "sucre", "quantity": 80, "unit": "grammes"},
            ],
            "appliance": "four",
            "ustensils": ["saladier", "couteau"],
        },
    ]


@pytest.fixture()
def recipe_payloads() -> List[Dict[str, object]]:
    """Raw catalog entries as they appear in the JSON file."""

    return _recipe_payloads()


@pytest.fixture()
def recipes(recipe_payloads) -> List[Recipe]:
    """Validated sample catalog."""

    return [Recipe.model_validate(entry) for entry in recipe_payloads]


@pytest.fixture()
def two_recipes() -> List[Recipe]:
    """Minimal two-recipe catalog."""

    return [
        Recipe(
            name="Tarte aux pommes",
            ingredients=[{"ingredient": "pomme"}],
            appliance="four",
            ustensils=["moule"],
        ),
        Recipe(
            name="Poisson grillé",
            ingredients=[{"ingredient": "poisson"}],
            appliance="grill",
            ustensils=["pince"],
        ),
    ]


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point every test at a temporary copy of the sample catalog."""

    catalog_path = tmp_path / "recipes.json"
    catalog_path.write_text(
        json.dumps({"recipes": _recipe_payloads()}, ensure_ascii=False),
        encoding="utf-8",
    )
    monkeypatch.setenv("PETITSPLATS_RECIPES_PATH", str(catalog_path))
    get_settings.cache_clear()
    reset_search_engine()
    yield catalog_path
    reset_search_engine()
    get_settings.cache_clear()


@pytest.fixture()
def catalog_path(isolated_settings):
    return isolated_settings


@pytest.fixture()
def app() -> Generator[FastAPI, None, None]:
    """Create a new FastAPI app instance for each test and reset overrides."""

    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app) -> TestClient:
    """Return a test client bound to the FastAPI app."""

    return TestClient(app)
