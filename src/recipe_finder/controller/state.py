"""Client-side search state and the view derived from it."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from recipe_finder.instructions import number_steps
from recipe_finder.models.recipe import RecipeDetail, RecipeSummary

LOADING_RECIPES_MESSAGE = "Loading recipes..."
LOADING_DETAILS_MESSAGE = "Loading recipe details..."
NO_INSTRUCTIONS_MESSAGE = "No instructions available."


class Mode(str, Enum):
    GRID = "grid"
    DETAIL = "detail"


@dataclass
class UIState:
    """Everything the search page tracks for one session."""

    query: str = ""
    debounced_query: str = ""
    results: List[RecipeSummary] = field(default_factory=list)
    selected: Optional[RecipeDetail] = None
    loading: bool = False
    details_loading: bool = False
    error: Optional[str] = None

    @property
    def mode(self) -> Mode:
        return Mode.DETAIL if self.selected is not None else Mode.GRID

    @property
    def grid_visible(self) -> bool:
        """The grid is hidden while a recipe is open or being fetched."""

        return self.mode is Mode.GRID and not self.details_loading


@dataclass(frozen=True)
class DetailView:
    title: str
    image: Optional[str]
    ingredients: List[str]
    steps: List[str]
    placeholder: Optional[str] = None


@dataclass(frozen=True)
class SearchView:
    mode: Mode
    status: Optional[str]
    error: Optional[str]
    cards: List[RecipeSummary]
    detail: Optional[DetailView] = None


def no_results_message(query: str) -> str:
    return f'No recipes found for "{query}".'


def build_detail_view(recipe: RecipeDetail) -> DetailView:
    steps = number_steps(recipe.instructions)
    return DetailView(
        title=recipe.title,
        image=recipe.image,
        ingredients=[ingredient.original for ingredient in recipe.ingredients],
        steps=steps,
        placeholder=None if steps else NO_INSTRUCTIONS_MESSAGE,
    )


def build_view(state: UIState) -> SearchView:
    """Render ``state`` into what the page shows."""

    status: Optional[str] = None
    if state.details_loading:
        status = LOADING_DETAILS_MESSAGE
    elif state.loading:
        status = LOADING_RECIPES_MESSAGE
    elif (
        state.error is None
        and state.grid_visible
        and not state.results
        and state.query.strip()
    ):
        status = no_results_message(state.query)

    return SearchView(
        mode=state.mode,
        status=status,
        error=state.error,
        cards=list(state.results) if state.grid_visible else [],
        detail=build_detail_view(state.selected) if state.selected is not None else None,
    )
