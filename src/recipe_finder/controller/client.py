"""Async HTTP client for the Recipe Finder proxy endpoints."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Protocol

import httpx
from pydantic import ValidationError

from recipe_finder.models.recipe import RecipeDetail, RecipeSummary

logger = logging.getLogger(__name__)

SEARCH_FAILED_MESSAGE = "Failed to fetch recipes"
DETAILS_FAILED_MESSAGE = "Failed to fetch recipe details"


class ProxyError(RuntimeError):
    """A proxy call failed; the message is fit to show the user."""


class RecipeSource(Protocol):
    async def search(self, query: str) -> List[RecipeSummary]: ...

    async def details(self, recipe_id: int) -> RecipeDetail: ...


def _parse_results(payload: Any) -> List[RecipeSummary]:
    raw_results = payload.get("results") if isinstance(payload, dict) else None
    if not isinstance(raw_results, list):
        return []
    results: List[RecipeSummary] = []
    for entry in raw_results:
        try:
            results.append(RecipeSummary.model_validate(entry))
        except ValidationError:
            logger.debug("Skipping malformed search result: %r", entry)
    return results


class ProxyClient:
    """Talk to ``GET /api`` and ``GET /api/details`` the way the browser page does."""

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        *,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def search(self, query: str) -> List[RecipeSummary]:
        payload = await self._get_json("/api", {"q": query}, SEARCH_FAILED_MESSAGE)
        return _parse_results(payload)

    async def details(self, recipe_id: int) -> RecipeDetail:
        payload = await self._get_json(
            "/api/details", {"id": str(recipe_id)}, DETAILS_FAILED_MESSAGE
        )
        try:
            return RecipeDetail.model_validate(payload)
        except ValidationError as exc:
            logger.warning("Recipe %s details had an unexpected shape", recipe_id)
            raise ProxyError(DETAILS_FAILED_MESSAGE) from exc

    async def _get_json(self, path: str, params: dict[str, str], fallback: str) -> Any:
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(path, params=params)
        except httpx.HTTPError as exc:
            logger.warning("Proxy request %s failed: %s", path, exc.__class__.__name__)
            raise ProxyError(fallback) from exc

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, dict) and isinstance(payload.get("error"), str):
            raise ProxyError(payload["error"])
        if not response.is_success or payload is None:
            raise ProxyError(fallback)
        return payload
