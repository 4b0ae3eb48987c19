"""Browser search page for the Recipe Finder proxy."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from recipe_finder.config import Settings
from recipe_finder.server.deps import get_settings_for_request
from recipe_finder.server.templates import load as load_template

PAGE_TEMPLATE = load_template("index.html")

router = APIRouter(include_in_schema=False)


def render_page(debounce_ms: int) -> str:
    return PAGE_TEMPLATE.replace("__DEBOUNCE_MS__", str(int(debounce_ms)))


@router.get("/", response_class=HTMLResponse)
def ui_home(settings: Settings = Depends(get_settings_for_request)) -> str:
    """Serve the recipe search page."""

    return render_page(settings.debounce_ms)
