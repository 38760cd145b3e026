import random

import pytest

from sunstream.core.errors import EngineContractError
from sunstream.infra.timers import ManualTimers
from sunstream.stream.scheduler import Scheduler

from tests.helpers import FixedDelayRandom


class _StuckHandle:
    def cancel(self) -> None:
        return None


class _RecordingTimers:
    """Timer port whose callbacks are fired by hand, and whose handles ignore cancel."""

    def __init__(self) -> None:
        self.calls = []

    def now(self) -> float:
        return 0.0

    def call_later(self, delay, callback):
        self.calls.append((delay, callback))
        return _StuckHandle()


def test_scheduler_fires_after_each_drawn_delay() -> None:
    timers = ManualTimers()
    fired = []
    scheduler = Scheduler(timers, FixedDelayRandom(), lambda: fired.append(timers.now()))
    scheduler.start()

    timers.advance(1.5)
    assert fired == []
    timers.advance(0.5)
    assert fired == [2.0]
    timers.advance(4.0)
    assert fired == [2.0, 4.0, 6.0]


def test_delays_stay_within_range() -> None:
    timers = _RecordingTimers()
    scheduler = Scheduler(timers, random.Random(3), lambda: None)
    scheduler.start()
    for idx in range(200):
        timers.calls[idx][1]()
    delays = [delay for delay, _ in timers.calls]
    assert len(delays) == 201
    assert all(1.8 <= delay <= 5.0 for delay in delays)


def test_cancel_stops_further_firings() -> None:
    timers = ManualTimers()
    fired = []
    scheduler = Scheduler(timers, FixedDelayRandom(), lambda: fired.append(1))
    handle = scheduler.start()
    timers.advance(2.0)
    scheduler.cancel(handle)
    timers.advance(10.0)
    assert fired == [1]
    assert timers.pending() == 0


def test_in_flight_fire_after_cancel_does_nothing() -> None:
    timers = _RecordingTimers()
    fired = []
    scheduler = Scheduler(timers, FixedDelayRandom(), lambda: fired.append(1))
    scheduler.start()
    scheduler.cancel()

    timers.calls[0][1]()
    assert fired == []
    assert len(timers.calls) == 1


def test_cancel_from_inside_callback_prevents_rearm() -> None:
    timers = ManualTimers()
    holder = {}
    scheduler = Scheduler(timers, FixedDelayRandom(), lambda: holder["scheduler"].cancel())
    holder["scheduler"] = scheduler
    scheduler.start()
    timers.advance(2.0)
    assert timers.pending() == 0


def test_scheduler_cannot_start_twice() -> None:
    scheduler = Scheduler(ManualTimers(), FixedDelayRandom(), lambda: None)
    scheduler.start()
    with pytest.raises(EngineContractError):
        scheduler.start()


def test_scheduler_rejects_inverted_range() -> None:
    with pytest.raises(ValueError):
        Scheduler(ManualTimers(), FixedDelayRandom(), lambda: None, min_delay_ms=5000, max_delay_ms=1800)
