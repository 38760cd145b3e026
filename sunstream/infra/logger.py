"""JSON log output for the stream engine and its dashboard."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

# Attributes lifted from ``extra=`` into the JSON record when present.
STREAM_FIELDS = ("event_id", "category", "score", "rate", "total")

DEFAULT_LOGGERS = ("sunstream", "tools")


class JsonFormatter(logging.Formatter):
    """One JSON object per line, with request fields as top-level keys."""

    def __init__(self, fields: Iterable[str] = STREAM_FIELDS) -> None:
        super().__init__()
        self.fields = tuple(fields)

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in self.fields:
            value = getattr(record, name, None)
            if value is not None:
                payload[name] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        # Zone and venue names carry accents; keep them readable.
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)


def get_logger(name: str, level: int | str = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
    return logger


def configure_logging(level: int | str = logging.INFO, names: Iterable[str] = DEFAULT_LOGGERS) -> list[logging.Logger]:
    """Route the engine and dashboard loggers through :class:`JsonFormatter`."""
    return [get_logger(name, level) for name in names]
