"""Bounded newest-first request history."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from sunstream.core.entities import Event
from sunstream.core.errors import EngineContractError
from sunstream.defaults.config import HISTORY_CAPACITY


class HistoryBuffer:
    def __init__(self, capacity: int = HISTORY_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = int(capacity)
        self._events: deque[Event] = deque(maxlen=self.capacity)

    def push(self, event: Event) -> None:
        # Prepending to a full deque drops the oldest entry from the tail.
        if self._events and event.id <= self._events[0].id:
            raise EngineContractError(
                f"event id {event.id} does not follow newest id {self._events[0].id}"
            )
        self._events.appendleft(event)

    def snapshot(self) -> tuple[Event, ...]:
        return tuple(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(tuple(self._events))
