"""Exception types raised by the search engine."""

from __future__ import annotations


class PetitsPlatsError(Exception):
    """Base class for package errors."""


class PreconditionError(PetitsPlatsError, ValueError):
    """Raised when a caller violates an input contract (e.g. passes ``None`` recipes)."""


class CatalogError(PetitsPlatsError):
    """Raised when a recipe catalog cannot be read or has an unexpected shape."""


def require(value, name: str):
    """Return ``value`` unchanged, failing fast when it is ``None``."""

    if value is None:
        raise PreconditionError(f"{name} must not be None")
    return value
