"""Tag selection tests."""

from __future__ import annotations

from petitsplats.models.query import SelectedTag
from petitsplats.search import TagSelection


def test_duplicate_tags_are_no_ops():
    selection = TagSelection()

    assert selection.add("pomme", "ingredients") is True
    assert selection.add("pomme", "ingredients") is False
    assert selection.add("pomme", "ustensils") is True
    assert len(selection) == 2


def test_remove_and_order():
    selection = TagSelection(
        [
            {"item": "four", "category": "appliances"},
            SelectedTag(item="sucre", category="ingredients"),
            {"item": "couteau", "category": "ustensils"},
        ]
    )

    assert selection.remove("sucre", "ingredients") is True
    assert selection.remove("sucre", "ingredients") is False
    assert [tag.item for tag in selection] == ["four", "couteau"]
    assert SelectedTag(item="four", category="appliances") in selection


def test_to_query_snapshots_the_selection():
    selection = TagSelection()
    selection.add("four", "appliances")

    query = selection.to_query("tarte")
    selection.clear()

    assert query.keyword == "tarte"
    assert query.tags == [SelectedTag(item="four", category="appliances")]
    assert selection.tags == ()
