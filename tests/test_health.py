"""Tests for the health and readiness endpoints and app wiring."""

import json

from finance_planner import create_app


def test_healthz_ok(client):
    """Test that the health endpoint returns 200 with correct JSON."""
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.content_type == "application/json"

    data = json.loads(response.data)
    assert data == {"status": "ok"}


def test_app_config(app):
    """Test that the factory applies the settings it is given."""
    assert app.config["TESTING"] is True
    assert app.config["DEBUG"] is False
    assert app.config["SECRET_KEY"] == "test-secret-key"


def test_readyz_with_catalog(client):
    """Test that readiness reports the loaded catalog."""
    response = client.get("/readyz")

    assert response.status_code == 200
    assert json.loads(response.data) == {
        "status": "ok",
        "catalog_version": "2025.01",
        "catalog_as_of": "2025-01-01",
    }


def test_readyz_without_catalog(test_settings, tmp_path):
    """Test that a missing catalog makes the instance not ready."""
    settings = test_settings.model_copy(
        update={"catalog_path": str(tmp_path / "missing.json")}
    )
    client = create_app(settings).test_client()

    response = client.get("/readyz")

    assert response.status_code == 503
    assert json.loads(response.data)["status"] == "degraded"


def test_catalog_from_storage(test_settings):
    """Test that CATALOG_STORAGE_KEY reads the catalog from profile storage."""
    settings = test_settings.model_copy(
        update={"catalog_storage_key": "catalog/products.json"}
    )
    app = create_app(settings)
    repository = app.extensions["profile_repository"]
    repository.storage.store_json(
        "catalog/products.json", {"data_version": "remote-7", "as_of": "2025-03-01"}
    )

    response = app.test_client().get("/api/catalog")

    assert json.loads(response.data)["data_version"] == "remote-7"
