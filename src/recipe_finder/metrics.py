"""Prometheus metrics definitions for Recipe Finder."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "recipe_finder_http_requests_total",
    "Total number of HTTP requests processed by the Recipe Finder API",
    ["method", "path", "status"],
)

REQUEST_LATENCY = Histogram(
    "recipe_finder_http_request_duration_seconds",
    "Latency of HTTP requests processed by the Recipe Finder API",
    ["method", "path"],
)

UPSTREAM_REQUESTS = Counter(
    "recipe_finder_upstream_requests_total",
    "Number of calls made to the upstream recipe API by outcome",
    ["endpoint", "outcome"],
)

__all__ = [
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "UPSTREAM_REQUESTS",
]
