"""Query coordination: keyword filtering, tag filtering and facet reduction."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from time import perf_counter
from typing import Iterable, List, Optional, Sequence, Tuple

from petitsplats import metrics
from petitsplats.errors import require
from petitsplats.models.query import FacetOptionSet, Query, QueryResult, SelectedTag
from petitsplats.models.recipe import Recipe

from .facets import (
    TagLike,
    coerce_tag,
    compute_facet_options,
    copy_facet_options,
    filter_by_tags,
)
from .keyword import MIN_KEYWORD_LENGTH, apply_keyword

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, Tuple[Tuple[str, str], ...]]


def run_query(
    recipes: Sequence[Recipe],
    keyword: str,
    selected_tags: Iterable[TagLike],
    *,
    min_length: int = MIN_KEYWORD_LENGTH,
) -> QueryResult:
    """Evaluate one search event against ``recipes``.

    The keyword narrows the full collection first and the tags narrow what is left,
    so the returned facet options only list values of recipes that already match
    the keyword.
    """

    require(recipes, "recipes")
    keyword_matches = apply_keyword(recipes, keyword, min_length=min_length)
    results = filter_by_tags(keyword_matches, selected_tags)
    return QueryResult(results=results, facet_options=compute_facet_options(results))


@dataclass(frozen=True)
class CacheInfo:
    """Snapshot of the query cache counters."""

    hits: int
    misses: int
    size: int
    maxsize: int


class RecipeSearchEngine:
    """Query coordinator bound to one catalog snapshot, with a bounded LRU of results."""

    def __init__(
        self,
        recipes: Iterable[Recipe],
        *,
        cache_size: int = 128,
        min_keyword_length: int = MIN_KEYWORD_LENGTH,
    ) -> None:
        self._recipes: Tuple[Recipe, ...] = tuple(require(recipes, "recipes"))
        self._min_keyword_length = min_keyword_length
        self._cache_size = max(cache_size, 0)
        self._cache: "OrderedDict[CacheKey, QueryResult]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._facet_options: Optional[FacetOptionSet] = None

    @property
    def recipes(self) -> List[Recipe]:
        return list(self._recipes)

    @property
    def facet_options(self) -> FacetOptionSet:
        """Facet options of the whole catalog, as a fresh copy on every access."""

        if self._facet_options is None:
            self._facet_options = compute_facet_options(self._recipes)
        return copy_facet_options(self._facet_options)

    def __len__(self) -> int:
        return len(self._recipes)

    def _cache_key(self, keyword: str, tags: Sequence[SelectedTag]) -> CacheKey:
        effective = keyword if len(keyword) >= self._min_keyword_length else ""
        unique = sorted({(tag.category, tag.item) for tag in tags})
        return effective, tuple(unique)

    def search(self, keyword: str = "", tags: Iterable[TagLike] = ()) -> QueryResult:
        """Run a query, serving repeated (keyword, tags) pairs from the cache."""

        require(keyword, "keyword")
        selected = [
            tag for tag in (coerce_tag(raw) for raw in require(tags, "tags")) if tag is not None
        ]
        key = self._cache_key(keyword, selected)

        if self._cache_size:
            with self._lock:
                cached = self._cache.get(key)
                if cached is not None:
                    self._cache.move_to_end(key)
                    self._hits += 1
            if cached is not None:
                metrics.QUERY_COUNT.labels(cache="hit").inc()
                return _fresh_copy(cached)

        start = perf_counter()
        result = run_query(
            self._recipes,
            keyword,
            selected,
            min_length=self._min_keyword_length,
        )
        elapsed = perf_counter() - start
        metrics.QUERY_LATENCY.observe(elapsed)
        metrics.QUERY_COUNT.labels(cache="miss" if self._cache_size else "disabled").inc()
        logger.debug(
            "Query keyword=%r tags=%d matched %d/%d recipes in %.2f ms",
            keyword,
            len(selected),
            len(result.results),
            len(self._recipes),
            elapsed * 1000,
        )

        if self._cache_size:
            with self._lock:
                self._misses += 1
                self._cache[key] = result
                self._cache.move_to_end(key)
                while len(self._cache) > self._cache_size:
                    self._cache.popitem(last=False)
            return _fresh_copy(result)
        return result

    def run(self, query: Query) -> QueryResult:
        return self.search(query.keyword, query.tags)

    def cache_info(self) -> CacheInfo:
        with self._lock:
            return CacheInfo(
                hits=self._hits,
                misses=self._misses,
                size=len(self._cache),
                maxsize=self._cache_size,
            )

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0


def _fresh_copy(result: QueryResult) -> QueryResult:
    return QueryResult(
        results=list(result.results),
        facet_options=copy_facet_options(result.facet_options),
    )
