"""Core entities and exceptions."""

from .entities import Coordinates, Event
from .errors import EngineContractError, SunstreamError

__all__ = ["Coordinates", "Event", "EngineContractError", "SunstreamError"]
