"""Live request stream engine.

Owns every piece of mutable state (history, freshness markers, arrival
timestamps, id counter) and exposes only ``start``/``stop``/``get_snapshot``.
All mutation happens inside timer callbacks on one loop, so nothing here
is locked.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from sunstream.core.entities import Event
from sunstream.core.errors import EngineContractError
from sunstream.defaults.config import DEFAULT_ENGINE_CONFIG
from sunstream.infra.timers import AsyncioTimers, TimerPort
from sunstream.stream.clock import Clock, elapsed_label, elapsed_seconds
from sunstream.stream.freshness import FreshnessTracker
from sunstream.stream.generator import EventGenerator, RandomSource
from sunstream.stream.history import HistoryBuffer
from sunstream.stream.metrics import aggregate
from sunstream.stream.rate_meter import RateMeter
from sunstream.stream.scheduler import Scheduler

logger = logging.getLogger(__name__)

_IDLE = "idle"
_RUNNING = "running"
_STOPPED = "stopped"


@dataclass(frozen=True)
class Snapshot:
    events: tuple[Event, ...]
    fresh_ids: frozenset[int]
    rate: float
    category_counts: Mapping[str, int]
    average_score: int
    now: float
    total: int
    active: int
    time_label: str

    def to_dict(self) -> dict[str, Any]:
        events: list[dict[str, Any]] = []
        for event in self.events:
            row = event.to_dict()
            elapsed = elapsed_seconds(self.now, event.created_at)
            row["elapsed_seconds"] = elapsed
            row["elapsed_label"] = elapsed_label(elapsed)
            row["fresh"] = event.id in self.fresh_ids
            events.append(row)
        return {
            "events": events,
            "fresh_ids": sorted(self.fresh_ids),
            "rate": self.rate,
            "category_counts": dict(self.category_counts),
            "average_score": self.average_score,
            "now": self.now,
            "time": self.time_label,
            "total": self.total,
            "active": self.active,
        }


class LiveRequestsEngine:
    """Synthetic request feed with rolling metrics."""

    def __init__(
        self,
        timers: TimerPort | None = None,
        rng: RandomSource | None = None,
        **config_overrides: Any,
    ) -> None:
        self.config: dict[str, Any] = {**DEFAULT_ENGINE_CONFIG, **config_overrides}
        self.timers: TimerPort = timers or AsyncioTimers()
        self.rng: RandomSource = rng or random.Random()

        self.generator = EventGenerator(self.rng, now=self.timers.now, **self.config)
        self.history = HistoryBuffer(capacity=int(self.config["history_capacity"]))
        self.freshness = FreshnessTracker(self.timers, window=self.config["freshness_ms"] / 1000.0)
        self.rate_meter = RateMeter(
            self.timers,
            window=self.config["rate_window_ms"] / 1000.0,
            interval=self.config["rate_interval_ms"] / 1000.0,
        )
        self.clock = Clock(self.timers, tick=self.config["clock_tick_ms"] / 1000.0)
        self.scheduler = Scheduler(
            self.timers,
            self.rng,
            self._on_fire,
            min_delay_ms=int(self.config["min_delay_ms"]),
            max_delay_ms=int(self.config["max_delay_ms"]),
        )

        self.on_event: Callable[[Event], None] = self._default_event_handler
        self._next_id = 1
        self._total = 0
        self._state = _IDLE
        self._seed()

    @property
    def running(self) -> bool:
        return self._state == _RUNNING

    def _allocate_id(self) -> int:
        event_id = self._next_id
        self._next_id += 1
        return event_id

    def _seed(self) -> None:
        seeds = self.generator.seed_events(self.timers.now(), first_id=self._next_id)
        for event in seeds:
            self.history.push(event)
        self._next_id += len(seeds)
        self._total += len(seeds)

    def _on_fire(self) -> None:
        event = self.generator.generate(self._allocate_id())
        self.history.push(event)
        self.freshness.mark_fresh(event.id)
        self.rate_meter.record_arrival(event.created_at)
        self._total += 1
        try:
            self.on_event(event)
        except Exception:
            logger.exception("on_event handler failed for request %s", event.id, extra={"event_id": event.id})

    def start(self) -> None:
        if self._state != _IDLE:
            raise EngineContractError(f"cannot start an engine that is {self._state}")
        self.clock.start()
        self.rate_meter.start()
        self.scheduler.start()
        self._state = _RUNNING
        logger.info("request stream started with %d seeded events", len(self.history))

    def stop(self) -> None:
        if self._state == _STOPPED:
            logger.debug("stop called on an already stopped engine")
            return
        self.scheduler.cancel()
        self.clock.stop()
        self.rate_meter.stop()
        self.freshness.clear()
        self._state = _STOPPED
        logger.info("request stream stopped after %d events", self._total)

    def get_snapshot(self) -> Snapshot:
        events = self.history.snapshot()
        metrics = aggregate(events, self.generator.categories)
        return Snapshot(
            events=events,
            fresh_ids=self.freshness.fresh_ids(),
            rate=self.rate_meter.current_rate(),
            category_counts=metrics.category_counts,
            average_score=metrics.average_score,
            now=self.clock.now(),
            total=self._total,
            active=len(events),
            time_label=self.clock.time_label(),
        )

    def _default_event_handler(self, event: Event) -> None:
        logger.debug(
            "request %s %s at %s (score %s)",
            event.id,
            event.category,
            event.location_label,
            event.score,
            extra={"event_id": event.id, "category": event.category, "score": event.score},
        )
