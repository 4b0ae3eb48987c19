"""End-to-end tests: controller -> proxy client -> ASGI app -> fake upstream."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from recipe_finder.controller import Mode, ProxyClient, ProxyError, SearchController
from tests.support import DETAIL_PAYLOAD, DETAILS_PATH, SEARCH_PATH, SEARCH_PAYLOAD


@pytest.fixture()
def proxy(app) -> ProxyClient:
    return ProxyClient("http://testserver", transport=httpx.ASGITransport(app=app))


def test_search_parses_summaries(proxy):
    results = asyncio.run(proxy.search("pasta"))

    assert [recipe.id for recipe in results] == [715538, 654959]
    assert results[0].title == SEARCH_PAYLOAD["results"][0]["title"]


def test_search_skips_malformed_entries(proxy, fake_upstream):
    fake_upstream.respond(
        SEARCH_PATH,
        json={"results": [{"title": "no id"}, {"id": 7, "title": "Ok", "image": "x.jpg"}, "junk"]},
    )

    results = asyncio.run(proxy.search("pasta"))

    assert [recipe.id for recipe in results] == [7]


@pytest.mark.parametrize("payload", [{}, {"results": None}, {"results": "nope"}])
def test_search_without_result_list_is_empty(proxy, fake_upstream, payload):
    fake_upstream.respond(SEARCH_PATH, json=payload)

    assert asyncio.run(proxy.search("pasta")) == []


def test_search_error_payload_raises_with_proxy_message(proxy, fake_upstream):
    fake_upstream.respond(SEARCH_PATH, status_code=500, json={})

    with pytest.raises(ProxyError, match="Failed to fetch recipes"):
        asyncio.run(proxy.search("pasta"))


def test_details_parses_recipe(proxy):
    detail = asyncio.run(proxy.details(715538))

    assert detail.id == 715538
    assert [ingredient.original for ingredient in detail.ingredients] == [
        "1 pound penne pasta",
        "1 pound pork tenderloin",
    ]


def test_details_tolerate_missing_ingredient_list(proxy, fake_upstream):
    fake_upstream.respond(DETAILS_PATH, json={**DETAIL_PAYLOAD, "extendedIngredients": None})

    detail = asyncio.run(proxy.details(715538))

    assert detail.id == 715538
    assert detail.ingredients == []


def test_details_tolerate_ingredient_without_text(proxy, fake_upstream):
    fake_upstream.respond(
        DETAILS_PATH,
        json={**DETAIL_PAYLOAD, "extendedIngredients": [{"id": 1, "original": None}]},
    )

    async def scenario() -> SearchController:
        controller = SearchController(proxy, debounce_seconds=0.02)
        await controller.select(715538)
        return controller

    controller = asyncio.run(scenario())

    assert controller.state.error is None
    assert controller.state.mode is Mode.DETAIL
    assert controller.view().detail.ingredients == [""]


def test_details_error_payload_raises(proxy, fake_upstream):
    fake_upstream.unreachable(DETAILS_PATH)

    with pytest.raises(ProxyError, match="Failed to fetch recipe details"):
        asyncio.run(proxy.details(715538))


def test_unreachable_proxy_raises_generic_error():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = ProxyClient("http://testserver", transport=httpx.MockTransport(refuse))

    with pytest.raises(ProxyError, match="Failed to fetch recipes"):
        asyncio.run(client.search("pasta"))


def test_full_flow_through_the_app(proxy, fake_upstream):
    async def scenario() -> SearchController:
        controller = SearchController(proxy, debounce_seconds=0.02)
        for text in ("pa", "pas", "pasta"):
            controller.set_query(text)
        await controller.wait_until_idle()
        await controller.select(controller.state.results[0].id)
        return controller

    controller = asyncio.run(scenario())

    assert controller.state.mode is Mode.DETAIL
    assert controller.view().detail.steps == [
        "1. Boil water.",
        "2. Add pasta.",
        "3. Stir occasionally!",
    ]
    search_requests = [r for r in fake_upstream.requests if r.url.path == SEARCH_PATH]
    assert [r.url.params["query"] for r in search_requests] == ["pasta"]
