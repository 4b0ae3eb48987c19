"""Headless search controller mirroring the browser page's search flow."""

from __future__ import annotations

import asyncio
import logging
from typing import Coroutine, Set

from recipe_finder.controller.client import ProxyError, RecipeSource
from recipe_finder.controller.debounce import Debouncer
from recipe_finder.controller.state import SearchView, UIState, build_view

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.5


class SearchController:
    """Drive debounced searches and recipe selection against a :class:`RecipeSource`.

    Search and detail fetches each carry a generation number. A fetch that
    completes after a newer one has started leaves the state untouched.
    """

    def __init__(
        self,
        source: RecipeSource,
        *,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> None:
        self.state = UIState()
        self._source = source
        self._debouncer: Debouncer[str] = Debouncer(debounce_seconds, self._commit)
        self._search_generation = 0
        self._detail_generation = 0
        self._tasks: Set[asyncio.Task] = set()

    def set_query(self, text: str) -> None:
        """Record a keystroke and restart the debounce window."""

        self.state.query = text
        self._debouncer.push(text)

    def _commit(self, value: str) -> None:
        if value == self.state.debounced_query:
            return
        self.state.debounced_query = value
        self._spawn(self.search(value))

    async def search(self, query: str) -> None:
        self._search_generation += 1
        generation = self._search_generation

        if not query.strip():
            self.state.results = []
            self.state.loading = False
            return

        self.state.loading = True
        self.state.selected = None
        self.state.error = None
        self._detail_generation += 1
        self.state.details_loading = False
        try:
            results = await self._source.search(query)
        except ProxyError as exc:
            if generation == self._search_generation:
                logger.info("Search for %r failed: %s", query, exc)
                self.state.results = []
                self.state.error = str(exc)
        else:
            if generation == self._search_generation:
                self.state.results = results
            else:
                logger.debug("Discarding stale results for %r", query)
        finally:
            if generation == self._search_generation:
                self.state.loading = False

    async def select(self, recipe_id: int) -> None:
        """Open a recipe: the grid and any prior error clear before the fetch starts."""

        self._detail_generation += 1
        generation = self._detail_generation

        self.state.details_loading = True
        self.state.error = None
        self.state.selected = None
        try:
            detail = await self._source.details(recipe_id)
        except ProxyError as exc:
            if generation == self._detail_generation:
                logger.info("Details for recipe %s failed: %s", recipe_id, exc)
                self.state.error = str(exc)
        else:
            if generation == self._detail_generation:
                self.state.selected = detail
            else:
                logger.debug("Discarding stale details for recipe %s", recipe_id)
        finally:
            if generation == self._detail_generation:
                self.state.details_loading = False

    def back(self) -> None:
        """Return to the result grid; the result list is left intact."""

        self._detail_generation += 1
        self.state.selected = None
        self.state.details_loading = False

    def view(self) -> SearchView:
        return build_view(self.state)

    @property
    def idle(self) -> bool:
        return not self._debouncer.pending and not self._tasks

    async def wait_until_idle(self, poll_interval: float = 0.01) -> None:
        """Wait for the debounce window and any fetch it started to finish."""

        while not self.idle:
            if self._tasks:
                await asyncio.wait(set(self._tasks))
            else:
                await asyncio.sleep(poll_interval)

    async def aclose(self) -> None:
        self._debouncer.cancel()
        for task in list(self._tasks):
            task.cancel()
        if self._tasks:
            await asyncio.wait(set(self._tasks))

    def _spawn(self, coro: Coroutine[None, None, None]) -> None:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Search task failed", exc_info=exc)
