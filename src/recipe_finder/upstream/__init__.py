"""Upstream recipe API integration."""

from __future__ import annotations

from .client import RecipeApiClient, UpstreamError

__all__ = ["RecipeApiClient", "UpstreamError"]
