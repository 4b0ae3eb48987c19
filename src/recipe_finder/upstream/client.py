"""Client for the third-party recipe API the proxy endpoints forward to."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from recipe_finder import metrics
from recipe_finder.config import DEFAULT_API_BASE_URL

logger = logging.getLogger(__name__)

SEARCH_PATH = "/recipes/complexSearch"
DETAILS_PATH_TEMPLATE = "/recipes/{recipe_id}/information"


class UpstreamError(RuntimeError):
    """Raised when the upstream recipe API cannot produce a usable response."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RecipeApiClient:
    """Minimal wrapper around the upstream recipe HTTP API.

    Each call is a single best-effort request: no retries and no caching. The API
    key is supplied at construction and only ever travels as a query parameter to
    the upstream host.
    """

    def __init__(
        self,
        *,
        api_key: Optional[str],
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._api_key = api_key or ""
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def search(self, query: str) -> Dict[str, Any]:
        """Return the raw upstream search payload for ``query``."""

        return self._get_json(
            "search",
            SEARCH_PATH,
            {"query": query, "apiKey": self._api_key},
        )

    def details(self, recipe_id: int) -> Dict[str, Any]:
        """Return the raw upstream recipe record for ``recipe_id``."""

        return self._get_json(
            "details",
            DETAILS_PATH_TEMPLATE.format(recipe_id=recipe_id),
            {"includeNutrition": "false", "apiKey": self._api_key},
        )

    def _get_json(self, endpoint: str, path: str, params: Dict[str, str]) -> Dict[str, Any]:
        url = f"{self._base_url}{path}"
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.get(url, params=params)
        except httpx.HTTPError as exc:
            metrics.UPSTREAM_REQUESTS.labels(endpoint=endpoint, outcome="transport_error").inc()
            logger.warning("Upstream %s request failed: %s", endpoint, exc.__class__.__name__)
            raise UpstreamError(f"Upstream {endpoint} request failed") from exc

        if not response.is_success:
            metrics.UPSTREAM_REQUESTS.labels(endpoint=endpoint, outcome="http_error").inc()
            logger.warning(
                "Upstream %s returned status=%s", endpoint, response.status_code
            )
            raise UpstreamError(
                f"Upstream {endpoint} returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            metrics.UPSTREAM_REQUESTS.labels(endpoint=endpoint, outcome="invalid_json").inc()
            logger.warning("Upstream %s returned a non-JSON body", endpoint)
            raise UpstreamError(
                f"Upstream {endpoint} returned invalid JSON",
                status_code=response.status_code,
            ) from exc

        metrics.UPSTREAM_REQUESTS.labels(endpoint=endpoint, outcome="ok").inc()
        logger.debug("Upstream %s succeeded status=%s", endpoint, response.status_code)
        return payload
