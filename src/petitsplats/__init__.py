"""
Petits Plats recipe search package.

The package exposes the keyword matcher, tag filter and query coordinator used to
narrow a recipe catalog, together with the CLI and HTTP surfaces built on top of them.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
