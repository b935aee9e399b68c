"""Recipe catalog data models."""

from __future__ import annotations

import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _optional_number(value: Any) -> Optional[float]:
    """Parse a numeric field, returning None for values that are not numbers."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
    elif not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def _optional_int(value: Any) -> Optional[int]:
    number = _optional_number(value)
    if number is None or number != int(number):
        return None
    return int(number)


def _optional_text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


class Ingredient(BaseModel):
    """A single ingredient line of a recipe."""

    ingredient: str
    quantity: Optional[float] = Field(default=None)
    unit: Optional[str] = Field(default=None)

    model_config = ConfigDict(frozen=True)

    @field_validator("quantity", mode="before")
    @classmethod
    def _lenient_quantity(cls, value: Any) -> Optional[float]:
        return _optional_number(value)

    @field_validator("unit", mode="before")
    @classmethod
    def _lenient_unit(cls, value: Any) -> Optional[str]:
        return _optional_text(value)


class Recipe(BaseModel):
    """Read-only recipe record searched by the engine.

    Records coming from the catalog are not always complete or well typed. A
    field that is missing or cannot be parsed is treated as absent (empty text,
    empty list or None) so a single malformed record never breaks a whole query
    and stays searchable through its valid fields.
    """

    id: Optional[int] = Field(default=None)
    name: str = Field(default="")
    description: str = Field(default="")
    time: Optional[int] = Field(default=None, description="Preparation time in minutes.")
    servings: Optional[int] = Field(default=None)
    appliance: Optional[str] = Field(default=None)
    ustensils: list[str] = Field(default_factory=list)
    ingredients: list[Ingredient] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @field_validator("id", "time", "servings", mode="before")
    @classmethod
    def _lenient_int(cls, value: Any) -> Optional[int]:
        return _optional_int(value)

    @field_validator("name", "description", mode="before")
    @classmethod
    def _blank_text(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("appliance", mode="before")
    @classmethod
    def _blank_appliance(cls, value: Any) -> Optional[str]:
        return _optional_text(value)

    @field_validator("ustensils", mode="before")
    @classmethod
    def _keep_named_ustensils(cls, value: Any) -> Any:
        if not isinstance(value, (list, tuple)):
            return []
        return [entry for entry in value if isinstance(entry, str) and entry]

    @field_validator("ingredients", mode="before")
    @classmethod
    def _keep_named_ingredients(cls, value: Any) -> Any:
        if not isinstance(value, (list, tuple)):
            return []
        kept: list[Any] = []
        for entry in value:
            if isinstance(entry, Ingredient):
                kept.append(entry)
            elif isinstance(entry, dict) and isinstance(entry.get("ingredient"), str) and entry["ingredient"]:
                kept.append(entry)
        return kept

    def ingredient_names(self) -> list[str]:
        return [line.ingredient for line in self.ingredients]
