from __future__ import annotations

import asyncio
import atexit
import contextlib
import logging
import threading
from collections.abc import Callable
from typing import Any, TypeVar

from sunstream.engine import LiveRequestsEngine
from sunstream.infra.timers import AsyncioTimers
from sunstream.stream.generator import RandomSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DashboardRuntime:
    """Runs the request engine on a private asyncio loop thread.

    Flask request threads never touch the engine directly: every call is
    marshalled onto the loop so engine state is only read or mutated there.
    """

    def __init__(self, rng: RandomSource | None = None, *, call_timeout: float = 5.0, **config_overrides: Any) -> None:
        self.call_timeout = call_timeout
        self._loop = asyncio.new_event_loop()
        self._started = threading.Event()
        self._thread = threading.Thread(target=self._run_loop, name="sunstream-dashboard-loop", daemon=True)
        self._thread.start()
        self._started.wait(timeout=2.0)

        self.engine = LiveRequestsEngine(timers=AsyncioTimers(self._loop), rng=rng, **config_overrides)
        self._closed = False

        atexit.register(self.close)

    def _run_loop(self) -> None:
        asyncio.set_event_loop(self._loop)
        self._started.set()
        self._loop.run_forever()

    def _run_sync(self, func: Callable[[], T]) -> T:
        async def _call() -> T:
            return func()

        fut = asyncio.run_coroutine_threadsafe(_call(), self._loop)
        return fut.result(timeout=self.call_timeout)

    def start(self) -> None:
        self._run_sync(self.engine.start)

    def is_running(self) -> bool:
        return self._run_sync(lambda: self.engine.running)

    def snapshot(self) -> dict[str, Any]:
        return self._run_sync(lambda: self.engine.get_snapshot().to_dict())

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if not self._loop.is_running():
            return
        with contextlib.suppress(Exception):
            self._run_sync(self.engine.stop)
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=2.0)
        logger.debug("dashboard loop closed")
