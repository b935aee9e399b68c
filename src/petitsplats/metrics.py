"""Prometheus metrics definitions for Petits Plats."""

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram

REQUEST_COUNT = Counter(
    "petitsplats_http_requests_total",
    "Total number of HTTP requests processed by the Petits Plats API",
    ["method", "path", "status"],
)

REQUEST_LATENCY = Histogram(
    "petitsplats_http_request_duration_seconds",
    "Latency of HTTP requests processed by the Petits Plats API",
    ["method", "path"],
)

QUERY_COUNT = Counter(
    "petitsplats_queries_total",
    "Number of recipe queries evaluated by cache outcome",
    ["cache"],
)

QUERY_LATENCY = Histogram(
    "petitsplats_query_duration_seconds",
    "Time spent evaluating uncached recipe queries",
)

CATALOG_RECIPES = Gauge(
    "petitsplats_catalog_recipes",
    "Number of recipes in the most recently loaded catalog",
)

__all__ = [
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "QUERY_COUNT",
    "QUERY_LATENCY",
    "CATALOG_RECIPES",
]
