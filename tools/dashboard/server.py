from __future__ import annotations

import argparse
import logging
import os
from typing import Any, Protocol

from flask import Flask, jsonify, request

from sunstream.infra.logger import configure_logging

from .runtime import DashboardRuntime

logger = logging.getLogger(__name__)

_METRIC_KEYS = ("rate", "category_counts", "average_score", "total", "active", "time")


class DashboardRuntimeLike(Protocol):
    def is_running(self) -> bool: ...

    def snapshot(self) -> dict[str, Any]: ...


def _parse_limit(raw: str | None) -> int | None:
    if raw is None or raw == "":
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError("`limit` must be an integer.") from None
    if limit < 1:
        raise ValueError("`limit` must be positive.")
    return limit


def create_app(*, testing: bool = False, runtime: DashboardRuntimeLike | None = None) -> Flask:
    app = Flask(__name__)
    app.config["TESTING"] = testing
    if runtime is None:
        runtime = DashboardRuntime()
        runtime.start()
    dashboard_runtime = runtime
    app.config["DASHBOARD_RUNTIME"] = dashboard_runtime

    def _snapshot() -> dict[str, Any]:
        return dashboard_runtime.snapshot()

    @app.get("/api/health")
    def health():
        return jsonify({"status": "ok", "running": dashboard_runtime.is_running()})

    @app.get("/api/snapshot")
    def snapshot():
        try:
            body = _snapshot()
        except Exception as exc:
            logger.exception("snapshot failed")
            return jsonify({"error": f"Snapshot failed: {exc}"}), 500
        return jsonify(body)

    @app.get("/api/events")
    def events():
        try:
            limit = _parse_limit(request.args.get("limit"))
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400
        try:
            body = _snapshot()
        except Exception as exc:
            logger.exception("snapshot failed")
            return jsonify({"error": f"Snapshot failed: {exc}"}), 500
        items = body["events"] if limit is None else body["events"][:limit]
        return jsonify({"events": items, "fresh_ids": body["fresh_ids"]})

    @app.get("/api/metrics")
    def metrics():
        try:
            body = _snapshot()
        except Exception as exc:
            logger.exception("snapshot failed")
            return jsonify({"error": f"Snapshot failed: {exc}"}), 500
        return jsonify({key: body[key] for key in _METRIC_KEYS})

    return app


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the live request stream as JSON.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", default=8080, type=int)
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--log-level", default=os.getenv("SUNSTREAM_LOG_LEVEL", "INFO"))
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    configure_logging(args.log_level)
    app = create_app()
    app.run(host=args.host, port=args.port, debug=args.debug, use_reloader=False)


if __name__ == "__main__":
    main()
