"""Single-shot debounce timer bound to the running asyncio loop."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Debouncer(Generic[T]):
    """Commit only the latest pushed value once ``delay`` seconds pass without a new push.

    Every push cancels the pending fire, so at most one callback is ever scheduled.
    """

    def __init__(self, delay: float, callback: Callable[[T], None]) -> None:
        if delay < 0:
            raise ValueError("delay must be non-negative")
        self._delay = delay
        self._callback = callback
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def push(self, value: T) -> None:
        """Restart the quiet period with ``value`` as the candidate to commit."""

        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self._delay, self._fire, value)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, value: T) -> None:
        self._handle = None
        logger.debug("Debounce window elapsed; committing %r", value)
        self._callback(value)
