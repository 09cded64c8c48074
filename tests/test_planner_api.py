"""Tests for the planner HTTP API."""

import json


def post_json(client, url, payload, method="post"):
    return getattr(client, method)(
        url, data=json.dumps(payload), content_type="application/json"
    )


class TestPlanEndpoint:
    """Test cases for POST /api/plan."""

    def test_plan_for_defaults(self, client):
        """Test that an empty body plans for the default household."""
        response = post_json(client, "/api/plan", {})

        assert response.status_code == 200
        assert response.content_type == "application/json"
        data = json.loads(response.data)
        assert data["inputs"]["age"] == 30
        assert data["budget"]["savings_rate"] == 15
        assert data["emergency_fund"]["gap"] == 426000
        assert data["health_score"]["grade"] == "D"
        assert data["recommendations"]["catalog_version"] == "2025.01"
        assert len(data["recommendations"]["sip_basket"]) == 4
        assert len(data["recommendations"]["term_insurance"]) == 3

    def test_plan_normalizes_metro_tier(self, client):
        """Test that metro spellings map to Tier 1."""
        response = post_json(client, "/api/plan", {"city_tier": "Tier 1 (Metro)"})

        assert response.status_code == 200
        assert json.loads(response.data)["inputs"]["city_tier"] == "Tier 1"

    def test_invalid_inputs(self, client):
        """Test that invalid inputs are rejected with details."""
        response = post_json(client, "/api/plan", {"monthly_income": 0})

        assert response.status_code == 400
        data = json.loads(response.data)
        assert data["error"] == "Invalid inputs"
        assert data["details"][0]["loc"] == ["monthly_income"]

    def test_retirement_age_must_follow_age(self, client):
        """Test the cross-field age check."""
        response = post_json(client, "/api/plan", {"age": 45, "retirement_age": 45})

        assert response.status_code == 400
        assert "Retirement age" in response.get_data(as_text=True)


class TestCatalogEndpoint:
    """Test cases for GET /api/catalog."""

    def test_catalog_info(self, client):
        """Test that catalog metadata and counts are reported."""
        response = client.get("/api/catalog")

        assert response.status_code == 200
        assert json.loads(response.data) == {
            "data_version": "2025.01",
            "as_of": "2025-01-01",
            "counts": {
                "mutual_funds": 17,
                "fd_rates": 5,
                "term_insurance": 5,
                "health_insurance": 5,
            },
        }


class TestProfileEndpoints:
    """Test cases for the saved profile endpoints."""

    profile = {
        "inputs": {"age": 35, "monthly_income": 150000, "risk_tolerance": "Aggressive"},
        "tracked_sips": [
            {"id": "s1", "name": "Index", "category": "Equity", "monthly": 10000}
        ],
        "assets": [
            {"id": "a1", "bucket": "Equity", "amount": 750000},
            {"id": "a2", "bucket": "Debt", "amount": 250000},
        ],
    }

    def test_profile_lifecycle(self, client):
        """Test save, list, load and delete of a profile."""
        response = post_json(client, "/api/profiles/family", self.profile, method="put")
        assert response.status_code == 200
        assert json.loads(response.data)["saved_at"] is not None

        response = client.get("/api/profiles")
        assert json.loads(response.data) == {"profiles": ["family"]}

        response = client.get("/api/profiles/family")
        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["inputs"]["risk_tolerance"] == "Aggressive"
        assert data["tracked_sips"][0]["monthly"] == 10000

        response = client.delete("/api/profiles/family")
        assert response.status_code == 204

        response = client.get("/api/profiles/family")
        assert response.status_code == 404

    def test_profile_plan(self, client):
        """Test computing a plan from saved inputs."""
        post_json(client, "/api/profiles/family", self.profile, method="put")

        response = client.get("/api/profiles/family/plan")

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["inputs"]["age"] == 35
        assert data["investment"]["final_equity_pct"] == 75

    def test_profile_holdings(self, client):
        """Test summarizing saved holdings."""
        post_json(client, "/api/profiles/family", self.profile, method="put")

        response = client.get("/api/profiles/family/holdings")

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["total_monthly_sip"] == 10000
        assert data["total_assets"] == 1000000
        assert data["asset_allocation_pct"]["Equity"] == 75

    def test_missing_profile(self, client):
        """Test 404s for unknown profiles."""
        assert client.get("/api/profiles/nobody").status_code == 404
        assert client.get("/api/profiles/nobody/plan").status_code == 404
        assert client.get("/api/profiles/nobody/holdings").status_code == 404
        assert client.delete("/api/profiles/nobody").status_code == 404

    def test_invalid_profile_body(self, client):
        """Test that invalid profile documents are rejected."""
        body = {"assets": [{"id": "a1", "bucket": "Crypto", "amount": 1}]}

        response = post_json(client, "/api/profiles/family", body, method="put")

        assert response.status_code == 400
        assert json.loads(response.data)["error"] == "Invalid profile"

    def test_invalid_profile_id(self, client):
        """Test that profile ids must be slugs."""
        response = post_json(client, "/api/profiles/bad.id", self.profile, method="put")

        assert response.status_code == 400
        assert "Invalid profile id" in json.loads(response.data)["error"]
