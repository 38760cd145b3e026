import random
from decimal import Decimal

from sunstream.core.entities import Coordinates, Event

START_TS = 1_700_000_000.0


class FixedDelayRandom(random.Random):
    """Seeded random source whose scheduler delay is always ``delay_ms``."""

    def __init__(self, seed: int = 7, *, delay_ms: int = 2000) -> None:
        super().__init__(seed)
        self.delay_ms = delay_ms

    def randint(self, a: int, b: int) -> int:
        if (a, b) == (1800, 5000):
            return self.delay_ms
        return super().randint(a, b)


def make_event(event_id: int, category: str = "TOP 20", score: int = 80, created_at: float | None = None) -> Event:
    return Event(
        id=event_id,
        category=category,
        zone="Marais",
        score=score,
        created_at=float(event_id) if created_at is None else created_at,
        coordinates=Coordinates(latitude=Decimal("48.8500"), longitude=Decimal("2.3500")),
    )
