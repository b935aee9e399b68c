"""Command-line interface for Petits Plats."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer

from petitsplats.catalog import load_recipes
from petitsplats.config import get_settings
from petitsplats.errors import CatalogError
from petitsplats.models.query import SelectedTag
from petitsplats.models.recipe import Recipe
from petitsplats.search import RecipeSearchEngine, narrow_facet_options

app = typer.Typer(help="Petits Plats recipe search commands.")


def _parse_tag(raw: str) -> SelectedTag:
    category, sep, item = raw.partition(":")
    if not sep or not category.strip() or not item:
        raise typer.BadParameter(f"expected CATEGORY:ITEM, got {raw!r}", param_hint="--tag")
    return SelectedTag(item=item, category=category.strip())


def _load(recipes_path: Optional[Path]) -> List[Recipe]:
    path = recipes_path or get_settings().recipes_path
    try:
        return load_recipes(path)
    except CatalogError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def _echo_json(payload: object, pretty: bool) -> None:
    if pretty:
        typer.echo(json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False))
    else:
        typer.echo(json.dumps(payload, ensure_ascii=False))


@app.command()
def search(
    keyword: str = typer.Argument("", help="Free-text keyword (ignored below the minimum length)."),
    tag: List[str] = typer.Option(
        [],
        "--tag",
        "-t",
        help="Selected tag as CATEGORY:ITEM, e.g. ingredients:Coco. Repeatable.",
    ),
    recipes_path: Optional[Path] = typer.Option(None, "--recipes", help="Recipe catalog JSON file."),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print output JSON."),
) -> None:
    """
    Search the catalog and print matching recipes with the remaining facet options.
    """
    tags = [_parse_tag(raw) for raw in tag]
    settings = get_settings()
    engine = RecipeSearchEngine(
        _load(recipes_path),
        cache_size=0,
        min_keyword_length=settings.min_keyword_length,
    )
    result = engine.search(keyword, tags)
    _echo_json(result.model_dump(mode="json"), pretty)


@app.command()
def facets(
    recipes_path: Optional[Path] = typer.Option(None, "--recipes", help="Recipe catalog JSON file."),
    filter_text: str = typer.Option("", "--filter", help="Only list options containing this text."),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print output JSON."),
) -> None:
    """List the ingredient, appliance and utensil options of the whole catalog."""

    engine = RecipeSearchEngine(_load(recipes_path), cache_size=0)
    options = narrow_facet_options(engine.facet_options, filter_text)
    _echo_json(options.model_dump(mode="json"), pretty)


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for `python -m petitsplats`."""
    app(prog_name="petitsplats", args=argv)


if __name__ == "__main__":
    main()
