"""Recipe models shared by the proxy endpoints and the search controller."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class RecipeSummary(BaseModel):
    """Single search hit rendered as a result card."""

    id: int
    title: str
    image: Optional[str] = Field(default=None)

    model_config = ConfigDict(frozen=True, extra="ignore")


class Ingredient(BaseModel):
    """Ingredient line as written in the source recipe."""

    id: Optional[int] = Field(default=None)
    original: str = Field(default="")

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("original", mode="before")
    @classmethod
    def coerce_original(cls, value: Any) -> Any:
        """Render missing ingredient text as an empty line."""
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)


class RecipeDetail(BaseModel):
    """Full recipe record shown in the detail view."""

    id: int
    title: str
    image: Optional[str] = Field(default=None)
    ingredients: List[Ingredient] = Field(
        default_factory=list,
        validation_alias=AliasChoices("extendedIngredients", "ingredients"),
    )
    instructions: Optional[str] = Field(default=None)

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @field_validator("ingredients", mode="before")
    @classmethod
    def coerce_ingredients(cls, value: Any) -> Any:
        if value is None:
            return []
        return value


class SearchResponse(BaseModel):
    """Shape returned by the search proxy; upstream extras pass through untouched."""

    results: List[RecipeSummary] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class ErrorResponse(BaseModel):
    """Error payload emitted by both proxy endpoints."""

    error: str


__all__ = [
    "ErrorResponse",
    "Ingredient",
    "RecipeDetail",
    "RecipeSummary",
    "SearchResponse",
]
