"""Default engine constants.

Durations are in milliseconds, matching the cadence figures the dashboard
was designed around.
"""

HISTORY_CAPACITY = 50
SEED_SIZE = 9

MIN_DELAY_MS = 1800
MAX_DELAY_MS = 5000
FRESHNESS_MS = 2200
RATE_WINDOW_MS = 60_000
RATE_INTERVAL_MS = 2000
CLOCK_TICK_MS = 1000

DEFAULT_ENGINE_CONFIG = {
    "history_capacity": HISTORY_CAPACITY,
    "min_delay_ms": MIN_DELAY_MS,
    "max_delay_ms": MAX_DELAY_MS,
    "freshness_ms": FRESHNESS_MS,
    "rate_window_ms": RATE_WINDOW_MS,
    "rate_interval_ms": RATE_INTERVAL_MS,
    "clock_tick_ms": CLOCK_TICK_MS,
    "min_score": 62,
    "max_score": 98,
    "seed_size": SEED_SIZE,
    "seed_spacing_ms": 14_000,
    "center": (48.85, 2.35),
    "span": (0.12, 0.15),
}
