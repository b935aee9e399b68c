"""Tests for the Typer command-line interface."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from petitsplats.cli import app

runner = CliRunner()


def test_search_command_prints_query_result(catalog_path):
    result = runner.invoke(app, ["search", "pom", "--tag", "ustensils:couteau", "--recipes", str(catalog_path)])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert [recipe["id"] for recipe in payload["results"]] == [1, 4]
    assert payload["facet_options"]["appliances"] == ["four"]


def test_search_command_uses_configured_catalog():
    result = runner.invoke(app, ["search", "--pretty"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert len(payload["results"]) == 4


def test_search_command_rejects_malformed_tags(catalog_path):
    result = runner.invoke(app, ["search", "tarte", "--tag", "four", "--recipes", str(catalog_path)])

    assert result.exit_code == 2


def test_missing_catalog_exits_with_error(tmp_path):
    result = runner.invoke(app, ["facets", "--recipes", str(tmp_path / "absent.json")])

    assert result.exit_code == 1


def test_facets_command_narrows_options(catalog_path):
    result = runner.invoke(app, ["facets", "--recipes", str(catalog_path), "--filter", "citron"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "ingredients": ["citron"],
        "appliances": [],
        "ustensils": ["presse citron"],
    }
