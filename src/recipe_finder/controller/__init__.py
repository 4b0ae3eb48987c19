"""Headless implementation of the search page: debounce, search, select, back."""

from __future__ import annotations

from .client import ProxyClient, ProxyError, RecipeSource
from .debounce import Debouncer
from .search import SearchController
from .state import DetailView, Mode, SearchView, UIState

__all__ = [
    "Debouncer",
    "DetailView",
    "Mode",
    "ProxyClient",
    "ProxyError",
    "RecipeSource",
    "SearchController",
    "SearchView",
    "UIState",
]
