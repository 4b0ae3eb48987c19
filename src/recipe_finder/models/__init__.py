"""Pydantic models defining shared data contracts."""

from recipe_finder.models.recipe import (
    ErrorResponse,
    Ingredient,
    RecipeDetail,
    RecipeSummary,
    SearchResponse,
)

__all__ = [
    "ErrorResponse",
    "Ingredient",
    "RecipeDetail",
    "RecipeSummary",
    "SearchResponse",
]
