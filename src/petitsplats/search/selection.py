"""Ordered set of the tags a user has selected."""

from __future__ import annotations

from typing import Iterator, List, Tuple

from petitsplats.models.query import Query, SelectedTag


class TagSelection:
    """Active tag filter; uniqueness is by (item, category), insertion order is kept."""

    def __init__(self, tags=()) -> None:
        self._tags: List[SelectedTag] = []
        for tag in tags:
            if isinstance(tag, SelectedTag):
                self.add(tag.item, tag.category)
            else:
                self.add(tag["item"], tag["category"])

    def add(self, item: str, category: str) -> bool:
        """Select a tag. Returns False when it was already selected."""

        tag = SelectedTag(item=item, category=category)
        if tag in self._tags:
            return False
        self._tags.append(tag)
        return True

    def remove(self, item: str, category: str) -> bool:
        """Deselect a tag. Returns False when it was not selected."""

        tag = SelectedTag(item=item, category=category)
        try:
            self._tags.remove(tag)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        self._tags.clear()

    @property
    def tags(self) -> Tuple[SelectedTag, ...]:
        return tuple(self._tags)

    def to_query(self, keyword: str = "") -> Query:
        return Query(keyword=keyword, tags=list(self._tags))

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __iter__(self) -> Iterator[SelectedTag]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)
