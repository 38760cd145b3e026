"""Derived metrics over a history snapshot."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from sunstream.core.entities import Event
from sunstream.core.errors import EngineContractError
from sunstream.defaults.vocabulary import QUERY_TYPES


@dataclass(frozen=True)
class Aggregate:
    category_counts: Mapping[str, int]
    average_score: int


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def aggregate(events: Sequence[Event], categories: Sequence[str] = QUERY_TYPES) -> Aggregate:
    """Per-category counts (zero included) and the mean score rounded half-up.

    Recomputed from scratch on every call; nothing is carried between calls.
    """
    if not events:
        raise EngineContractError("cannot aggregate an empty history")
    counts = {category: 0 for category in categories}
    for event in events:
        if event.category in counts:
            counts[event.category] += 1
    average = round_half_up(sum(event.score for event in events) / len(events))
    return Aggregate(category_counts=MappingProxyType(counts), average_score=average)
