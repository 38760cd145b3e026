"""Synthetic request generation."""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import Any, Protocol, TypeVar

from sunstream.core.entities import Coordinates, Event
from sunstream.defaults.config import DEFAULT_ENGINE_CONFIG
from sunstream.defaults.vocabulary import DETAIL_CATEGORY, PARIS_ZONES, QUERY_TYPES, TERRASSES

T = TypeVar("T")

_FOUR_PLACES = Decimal("0.0001")


class RandomSource(Protocol):
    def random(self) -> float: ...

    def randint(self, a: int, b: int) -> int: ...

    def choice(self, seq: Sequence[T]) -> T: ...


def _fixed(value: float) -> Decimal:
    return Decimal(f"{value:.4f}").quantize(_FOUR_PLACES)


class EventGenerator:
    """Builds one synthetic request per call; ids are supplied by the caller."""

    def __init__(
        self,
        rng: RandomSource | None = None,
        *,
        categories: Sequence[str] = QUERY_TYPES,
        zones: Sequence[str] = PARIS_ZONES,
        venues: Sequence[str] = TERRASSES,
        detail_category: str = DETAIL_CATEGORY,
        now: Callable[[], float] = time.time,
        **config_overrides: Any,
    ) -> None:
        self.rng: RandomSource = rng or random.Random()
        self.categories = tuple(categories)
        self.zones = tuple(zones)
        self.venues = tuple(venues)
        self.detail_category = detail_category
        self.now = now
        self.config: dict[str, Any] = {**DEFAULT_ENGINE_CONFIG, **config_overrides}

    def _coordinates(self) -> Coordinates:
        center_lat, center_lng = self.config["center"]
        span_lat, span_lng = self.config["span"]
        lat = center_lat + (self.rng.random() - 0.5) * span_lat
        lng = center_lng + (self.rng.random() - 0.5) * span_lng
        return Coordinates(latitude=_fixed(lat), longitude=_fixed(lng))

    def generate(self, event_id: int, created_at: float | None = None) -> Event:
        """Build request ``event_id``, stamped with the current time unless ``created_at`` is given."""
        category = self.rng.choice(self.categories)
        zone = self.rng.choice(self.zones)
        venue = self.rng.choice(self.venues) if category == self.detail_category else None
        score = self.rng.randint(int(self.config["min_score"]), int(self.config["max_score"]))
        return Event(
            id=event_id,
            category=category,
            zone=zone,
            venue=venue,
            score=score,
            created_at=self.now() if created_at is None else created_at,
            coordinates=self._coordinates(),
        )

    def seed_events(self, now: float, first_id: int = 1) -> list[Event]:
        """Initial backlog, oldest first, spaced ``seed_spacing_ms`` apart and ending one spacing before ``now``."""
        count = int(self.config["seed_size"])
        spacing = float(self.config["seed_spacing_ms"]) / 1000.0
        return [
            self.generate(first_id + idx, created_at=now - (count - idx) * spacing)
            for idx in range(count)
        ]
