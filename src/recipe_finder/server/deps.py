"""Dependency definitions for the Recipe Finder API server."""

from __future__ import annotations

from fastapi import Request

from recipe_finder.config import Settings
from recipe_finder.upstream import RecipeApiClient


def build_recipe_client(settings: Settings) -> RecipeApiClient:
    """Construct the upstream client with the configured credential injected."""

    return RecipeApiClient(
        api_key=settings.recipe_api_key,
        base_url=settings.recipe_api_base_url,
        timeout=settings.upstream_timeout,
    )


def get_settings_for_request(request: Request) -> Settings:
    return request.app.state.settings


def get_recipe_client(request: Request) -> RecipeApiClient:
    """Return the upstream client bound to the running application."""

    return request.app.state.recipe_client
