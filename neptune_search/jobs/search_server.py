"""HTTP entrypoint that answers free-text provider searches."""

from __future__ import annotations

import logging
from typing import Any, Dict

from flask import Flask, jsonify, request

from neptune_search.core.catalog import get_catalog
from neptune_search.core.config import get_settings
from neptune_search.pipeline import run_search

# ---------- Logging ----------
logger = logging.getLogger(__name__)

# ---------- App ----------
app = Flask(__name__)

# ---------- Routes ----------


@app.get("/")
def root() -> Any:
    """Simple root to avoid 404 on GET /"""
    return "ok", 200


@app.get("/healthz")
def healthcheck() -> Any:
    """Lightweight health endpoint; reads settings and the in-memory catalog only."""
    settings = get_settings()
    return (
        jsonify(
            {
                "status": "ok",
                "providers": len(get_catalog()),
                "ai_summary": bool(settings.gemini_api_key),
            }
        ),
        200,
    )


@app.post("/search")
def search() -> Any:
    """
    Rank providers for a free-text query.
    Required JSON field: query (non-empty string)
    """
    payload: Dict[str, Any] = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        return jsonify({"error": "Query is required"}), 400

    query = payload.get("query")
    if not query or not isinstance(query, str) or not query.strip():
        return jsonify({"error": "Query is required"}), 400

    try:
        response = run_search(query)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Search failed for query=%s: %s", query, exc)
        return jsonify({"error": "Internal server error"}), 500

    return jsonify(response.to_dict()), 200


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    logger.info("[BOOT] Binding on 0.0.0.0:%d", settings.port)
    app.run(host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
