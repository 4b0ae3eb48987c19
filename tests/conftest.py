"""Shared pytest fixtures for the Recipe Finder test suite."""

from __future__ import annotations

from typing import Generator

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from recipe_finder.config import Settings, get_settings
from recipe_finder.server import deps
from recipe_finder.server.app import create_app
from recipe_finder.upstream import RecipeApiClient
from tests.support import (
    DETAIL_PAYLOAD,
    DETAILS_PATH,
    SEARCH_PATH,
    SEARCH_PAYLOAD,
    TEST_API_KEY,
    UPSTREAM_BASE_URL,
    FakeUpstream,
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep developer environment variables out of the settings cache."""

    for key in (
        "RECIPE_FINDER_API_KEY",
        "RECIPE_API_KEY",
        "RECIPE_FINDER_API_BASE_URL",
        "RECIPE_FINDER_UPSTREAM_TIMEOUT",
        "RECIPE_FINDER_DEBOUNCE_MS",
        "RECIPE_FINDER_LOG_LEVEL",
        "RECIPE_FINDER_LOG_FORMAT",
        "RECIPE_FINDER_LOG_REQUESTS",
    ):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def fake_upstream() -> FakeUpstream:
    upstream = FakeUpstream()
    upstream.respond(SEARCH_PATH, json=SEARCH_PAYLOAD)
    upstream.respond(DETAILS_PATH, json=DETAIL_PAYLOAD)
    return upstream


@pytest.fixture()
def settings() -> Settings:
    return Settings(recipe_api_key=TEST_API_KEY, recipe_api_base_url=UPSTREAM_BASE_URL)


@pytest.fixture()
def app(settings, fake_upstream) -> Generator[FastAPI, None, None]:
    """Create a new FastAPI app whose upstream client talks to ``fake_upstream``."""

    application = create_app(settings)
    upstream_client = RecipeApiClient(
        api_key=settings.recipe_api_key,
        base_url=settings.recipe_api_base_url,
        transport=httpx.MockTransport(fake_upstream.handler),
    )
    application.dependency_overrides[deps.get_recipe_client] = lambda: upstream_client
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app) -> TestClient:
    """Return a test client bound to the FastAPI app."""

    return TestClient(app)
