"""Liveness and readiness checks."""

from typing import Any

from flask import Blueprint, current_app, jsonify

health_bp = Blueprint("health", __name__)


@health_bp.route("/healthz")
def health_check() -> Any:
    """Liveness: the process is up and serving requests."""
    return jsonify({"status": "ok"})


@health_bp.route("/readyz")
def readiness_check() -> Any:
    """Readiness: a product catalog with at least one product is loaded.

    Plans can still be computed without one, but every product shortlist
    would be empty, so the instance reports 503 until a catalog is available.
    """
    catalog = current_app.extensions["catalog_service"].load()
    ready = any(catalog.counts.values())
    body = {
        "status": "ok" if ready else "degraded",
        "catalog_version": catalog.data_version,
        "catalog_as_of": catalog.as_of,
    }
    return jsonify(body), 200 if ready else 503
