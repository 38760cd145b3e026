"""Live synthetic request stream with rolling metrics."""

__version__ = "0.1.0"

__all__ = [
    "LiveRequestsEngine",
    "Snapshot",
    "Event",
    "Coordinates",
    "SunstreamError",
    "EngineContractError",
    "AsyncioTimers",
    "ManualTimers",
]


def __getattr__(name: str) -> object:
    """Lazy exports so `import sunstream` stays cheap."""
    if name in {"LiveRequestsEngine", "Snapshot"}:
        from .engine import LiveRequestsEngine, Snapshot

        return {"LiveRequestsEngine": LiveRequestsEngine, "Snapshot": Snapshot}[name]

    if name in {"Event", "Coordinates"}:
        from .core.entities import Coordinates, Event

        return {"Event": Event, "Coordinates": Coordinates}[name]

    if name in {"SunstreamError", "EngineContractError"}:
        from .core.errors import EngineContractError, SunstreamError

        return {
            "SunstreamError": SunstreamError,
            "EngineContractError": EngineContractError,
        }[name]

    if name in {"AsyncioTimers", "ManualTimers"}:
        from .infra.timers import AsyncioTimers, ManualTimers

        return {"AsyncioTimers": AsyncioTimers, "ManualTimers": ManualTimers}[name]

    raise AttributeError(f"module 'sunstream' has no attribute {name!r}")
