"""Self-expiring "just arrived" markers."""

from __future__ import annotations

import itertools
import logging
from functools import partial

from sunstream.defaults.config import FRESHNESS_MS
from sunstream.infra.timers import TimerHandle, TimerPort

logger = logging.getLogger(__name__)

FRESHNESS_SECONDS = FRESHNESS_MS / 1000.0


class FreshnessTracker:
    """Set of event ids flagged as new, each removed after its own fixed delay.

    Expiry is independent of history membership: an id evicted from the
    history before its window elapses simply expires later as a no-op.
    """

    def __init__(self, timers: TimerPort, window: float = FRESHNESS_SECONDS) -> None:
        self._timers = timers
        self.window = float(window)
        self._fresh: set[int] = set()
        self._pending: dict[int, TimerHandle] = {}
        self._tokens = itertools.count()

    def mark_fresh(self, event_id: int) -> None:
        self._fresh.add(event_id)
        token = next(self._tokens)
        self._pending[token] = self._timers.call_later(self.window, partial(self._expire, token, event_id))

    def _expire(self, token: int, event_id: int) -> None:
        self._pending.pop(token, None)
        self._fresh.discard(event_id)
        logger.debug("event %s no longer fresh", event_id)

    def is_fresh(self, event_id: int) -> bool:
        return event_id in self._fresh

    def fresh_ids(self) -> frozenset[int]:
        return frozenset(self._fresh)

    def clear(self) -> None:
        """Cancel every pending expiry and forget all markers."""
        for handle in self._pending.values():
            handle.cancel()
        self._pending.clear()
        self._fresh.clear()
