"""Sliding-window arrival rate."""

from __future__ import annotations

import logging

from sunstream.defaults.config import RATE_INTERVAL_MS, RATE_WINDOW_MS
from sunstream.infra.timers import RepeatingTimer, TimerPort

logger = logging.getLogger(__name__)


class RateMeter:
    """Events per second over a trailing window, refreshed on a fixed cadence.

    Arrivals are only appended between refreshes; pruning and the reported
    rate change at the refresh boundary, so the figure lags by up to one
    interval.
    """

    def __init__(
        self,
        timers: TimerPort,
        *,
        window: float = RATE_WINDOW_MS / 1000.0,
        interval: float = RATE_INTERVAL_MS / 1000.0,
    ) -> None:
        self._timers = timers
        self.window = float(window)
        self.interval = float(interval)
        self._arrivals: list[float] = []
        self._rate = 0.0
        self._timer: RepeatingTimer | None = None

    def record_arrival(self, timestamp: float) -> None:
        self._arrivals.append(timestamp)

    def recompute(self, now: float | None = None) -> float:
        now = self._timers.now() if now is None else now
        self._arrivals = [ts for ts in self._arrivals if now - ts < self.window]
        self._rate = round(len(self._arrivals) / self.window, 1)
        return self._rate

    def current_rate(self) -> float:
        return self._rate

    def start(self) -> None:
        self._timer = RepeatingTimer(self._timers, self.interval, self.recompute, name="rate-meter").start()

    def stop(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
