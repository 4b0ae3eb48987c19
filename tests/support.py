"""Canned upstream payloads and a scriptable fake of the recipe API."""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional, Tuple

import httpx

TEST_API_KEY = "test-upstream-key-123"
UPSTREAM_BASE_URL = "https://upstream.test"

SEARCH_PATH = "/recipes/complexSearch"
DETAILS_PATH = "/recipes/715538/information"

SEARCH_PAYLOAD: Dict[str, Any] = {
    "results": [
        {
            "id": 715538,
            "title": "Bruschetta Style Pork & Pasta",
            "image": "https://img.spoonacular.com/recipes/715538-312x231.jpg",
            "imageType": "jpg",
        },
        {
            "id": 654959,
            "title": "Pasta With Tuna",
            "image": "https://img.spoonacular.com/recipes/654959-312x231.jpg",
            "imageType": "jpg",
        },
    ],
    "offset": 0,
    "number": 10,
    "totalResults": 2,
}

DETAIL_PAYLOAD: Dict[str, Any] = {
    "id": 715538,
    "title": "Bruschetta Style Pork & Pasta",
    "image": "https://img.spoonacular.com/recipes/715538-556x370.jpg",
    "servings": 5,
    "readyInMinutes": 35,
    "extendedIngredients": [
        {"id": 20420, "name": "pasta", "original": "1 pound penne pasta"},
        {"id": 10010219, "name": "pork", "original": "1 pound pork tenderloin"},
    ],
    "instructions": "<ol><li>Boil water.</li><li>Add pasta.</li><li>Stir occasionally!</li></ol>",
}


class FakeUpstream:
    """Scriptable stand-in for the third-party recipe API."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._routes: Dict[str, Tuple[int, Optional[Any], Optional[str]]] = {}

    def respond(self, path: str, status_code: int = 200, json: Any = None) -> None:
        self._routes[path] = (status_code, copy.deepcopy(json), None)

    def respond_text(self, path: str, text: str, status_code: int = 200) -> None:
        self._routes[path] = (status_code, None, text)

    def unreachable(self, path: str) -> None:
        self._routes[path] = (0, None, None)

    def times_out(self, path: str) -> None:
        self._routes[path] = (-1, None, None)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"status": "failure", "code": 404})
        status_code, payload, text = route
        if status_code == 0:
            raise httpx.ConnectError("upstream unreachable", request=request)
        if status_code == -1:
            raise httpx.ReadTimeout("upstream timed out", request=request)
        if text is not None:
            return httpx.Response(status_code, text=text)
        return httpx.Response(status_code, json=payload)
