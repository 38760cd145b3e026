# ruff: noqa: E402
"""Print the live request stream to the terminal.

Usage:
    python examples/live_feed.py

Optional env:
    SUNSTREAM_FEED_SECONDS=30
    SUNSTREAM_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from sunstream.engine import LiveRequestsEngine, Snapshot
from sunstream.infra.logger import configure_logging


def _print_snapshot(snap: Snapshot) -> None:
    counts = " ".join(f"{name}={count}" for name, count in snap.category_counts.items())
    print(
        f"[{snap.time_label}] total={snap.total} active={snap.active} "
        f"rate={snap.rate}/s soleil={snap.average_score}% {counts}"
    )
    newest = snap.events[0]
    marker = "*" if newest.id in snap.fresh_ids else " "
    print(f"  {marker} #{newest.id} {newest.category:<9} {newest.location_label} ({newest.score}%)")


async def main() -> None:
    configure_logging(os.getenv("SUNSTREAM_LOG_LEVEL", "INFO"), names=("sunstream",))
    seconds = int(os.getenv("SUNSTREAM_FEED_SECONDS", "30"))

    engine = LiveRequestsEngine()
    engine.start()
    try:
        for _ in range(seconds):
            _print_snapshot(engine.get_snapshot())
            await asyncio.sleep(1.0)
    finally:
        engine.stop()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
