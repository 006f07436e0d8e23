"""Single-slot cancellable timer: the latest armed call wins."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything with ``call_later``, such as an asyncio event loop."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle: ...


class DebounceTimer:
    """Delay a callback until no new call has been armed for ``delay`` seconds.

    Arming cancels the previously pending call, so only the most recent
    request can ever fire.
    """

    def __init__(self, delay: float, scheduler: Scheduler | None = None) -> None:
        if delay < 0:
            raise ValueError("delay must be non-negative")
        self.delay = delay
        self._scheduler = scheduler
        self._handle: TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def arm(self, callback: Callable[..., Any], *args: Any) -> None:
        self.cancel()
        scheduler = self._scheduler or asyncio.get_running_loop()
        self._handle = scheduler.call_later(self.delay, self._fire, callback, args)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, callback: Callable[..., Any], args: tuple[Any, ...]) -> None:
        self._handle = None
        callback(*args)
