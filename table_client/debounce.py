from __future__ import annotations

import asyncio
from typing import Any, Callable, Optional


class Debouncer:
    """
    Delays `callback` until `delay` seconds pass without another trigger.

    Each trigger replaces the pending timer, so at most one call is pending and
    only the most recent arguments are ever delivered. Must be used from a
    running event loop.
    """

    def __init__(self, callback: Callable[..., Any], delay: float = 0.3):
        self.callback = callback
        self.delay = delay
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def trigger(self, *args: Any) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, args)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, args: tuple) -> None:
        self._handle = None
        self.callback(*args)
