"""Ticking wall clock and elapsed-time helpers."""

from __future__ import annotations

import math
from datetime import datetime

from sunstream.defaults.config import CLOCK_TICK_MS
from sunstream.infra.timers import RepeatingTimer, TimerPort


def elapsed_seconds(now: float, created_at: float) -> int:
    return max(0, math.floor(now - created_at))


def elapsed_label(seconds: int) -> str:
    if seconds < 10:
        return "maintenant"
    if seconds < 60:
        return f"{seconds}s"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes} min"
    return f"{minutes // 60}h"


class Clock:
    """Process clock whose value only moves when it ticks."""

    def __init__(self, timers: TimerPort, tick: float = CLOCK_TICK_MS / 1000.0) -> None:
        self._timers = timers
        self.tick = float(tick)
        self._now = timers.now()
        self._timer: RepeatingTimer | None = None

    def _on_tick(self) -> None:
        self._now = self._timers.now()

    def now(self) -> float:
        return self._now

    def elapsed(self, created_at: float) -> int:
        """Whole seconds between ``created_at`` and the last tick, never negative."""
        return elapsed_seconds(self._now, created_at)

    def time_label(self) -> str:
        return datetime.fromtimestamp(self._now).strftime("%H:%M:%S")

    def start(self) -> None:
        self._on_tick()
        self._timer = RepeatingTimer(self._timers, self.tick, self._on_tick, name="clock").start()

    def stop(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
