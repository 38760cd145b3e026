"""Timer backends for the stream engine.

Every piece of scheduled work in the engine goes through a :class:`TimerPort`
so the same code runs on a real asyncio loop or on :class:`ManualTimers`,
a virtual clock that tests advance explicitly.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
import time
from collections.abc import Callable
from typing import Protocol

from sunstream.core.errors import EngineContractError

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class TimerPort(Protocol):
    def now(self) -> float: ...

    def call_later(self, delay: float, callback: Callback) -> TimerHandle: ...


class AsyncioTimers:
    """Schedule callbacks on an asyncio event loop.

    ``now()`` is wall-clock epoch seconds; delays use the loop's own clock.
    Must be used from the loop's thread.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now(self) -> float:
        return time.time()

    def call_later(self, delay: float, callback: Callback) -> asyncio.TimerHandle:
        return self.loop.call_later(max(0.0, delay), callback)


class _ManualHandle:
    __slots__ = ("cancelled",)

    def __init__(self) -> None:
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualTimers:
    """Virtual clock: callbacks fire only when :meth:`advance` passes their deadline.

    Callbacks run in deadline order (ties in scheduling order), with
    ``now()`` set to each callback's deadline while it runs, so work
    scheduled from inside a callback is timed relative to that moment.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)
        self._queue: list[tuple[float, int, _ManualHandle, Callback]] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callback) -> _ManualHandle:
        handle = _ManualHandle()
        due = self._now + max(0.0, delay)
        heapq.heappush(self._queue, (due, next(self._seq), handle, callback))
        return handle

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing due callbacks. Returns how many fired."""
        if seconds < 0:
            raise ValueError("cannot advance a clock backwards")
        target = self._now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle, callback = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now = due
            callback()
            fired += 1
        self._now = target
        return fired

    def pending(self) -> int:
        return sum(1 for _, _, handle, _ in self._queue if not handle.cancelled)


class RepeatingTimer:
    """Re-arming timer with a single cancellation flag.

    ``interval`` is either a fixed number of seconds or a callable drawn
    again before every arming. The flag is checked when a firing arrives,
    before the callback runs, and again before re-arming, so a fire already
    in flight when :meth:`cancel` is called does nothing.
    """

    def __init__(
        self,
        timers: TimerPort,
        interval: float | Callable[[], float],
        callback: Callback,
        *,
        name: str = "timer",
    ) -> None:
        self._timers = timers
        self._interval = interval
        self._callback = callback
        self.name = name
        self.cancelled = False
        self.started = False
        self._handle: TimerHandle | None = None

    def _next_delay(self) -> float:
        if callable(self._interval):
            return float(self._interval())
        return float(self._interval)

    def _arm(self) -> None:
        self._handle = self._timers.call_later(self._next_delay(), self._fire)

    def _fire(self) -> None:
        self._handle = None
        if self.cancelled:
            return
        self._callback()
        if self.cancelled:
            return
        self._arm()

    def start(self) -> "RepeatingTimer":
        if self.started:
            raise EngineContractError(f"{self.name} already started")
        self.started = True
        self._arm()
        return self

    def cancel(self) -> None:
        if self.cancelled:
            return
        self.cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        logger.debug("%s cancelled", self.name)
