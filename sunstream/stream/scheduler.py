"""Randomised re-arming trigger for request generation."""

from __future__ import annotations

import logging
from collections.abc import Callable

from sunstream.core.errors import EngineContractError
from sunstream.defaults.config import MAX_DELAY_MS, MIN_DELAY_MS
from sunstream.infra.timers import RepeatingTimer, TimerPort
from sunstream.stream.generator import RandomSource

logger = logging.getLogger(__name__)


class Scheduler:
    """Fires ``on_fire`` after a fresh uniform delay each time, until cancelled."""

    def __init__(
        self,
        timers: TimerPort,
        rng: RandomSource,
        on_fire: Callable[[], None],
        *,
        min_delay_ms: int = MIN_DELAY_MS,
        max_delay_ms: int = MAX_DELAY_MS,
    ) -> None:
        if min_delay_ms > max_delay_ms:
            raise ValueError("min_delay_ms must not exceed max_delay_ms")
        self._timers = timers
        self._rng = rng
        self._on_fire = on_fire
        self.min_delay_ms = int(min_delay_ms)
        self.max_delay_ms = int(max_delay_ms)
        self._handle: RepeatingTimer | None = None

    def next_delay(self) -> float:
        delay_ms = self._rng.randint(self.min_delay_ms, self.max_delay_ms)
        logger.debug("next request in %sms", delay_ms)
        return delay_ms / 1000.0

    def start(self) -> RepeatingTimer:
        if self._handle is not None:
            raise EngineContractError("scheduler already started")
        self._handle = RepeatingTimer(self._timers, self.next_delay, self._on_fire, name="scheduler").start()
        return self._handle

    def cancel(self, handle: RepeatingTimer | None = None) -> None:
        target = handle or self._handle
        if target is not None:
            target.cancel()
