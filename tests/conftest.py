"""
Pytest configuration and shared fixtures for the finance planner tests.
"""

import pytest

from finance_planner import create_app
from finance_planner.config import Settings
from finance_planner.models.inputs import UserInputs
from finance_planner.models.products import (
    FDRate,
    HealthInsurance,
    MutualFund,
    ProductCatalog,
    TermInsurance,
)


@pytest.fixture
def reference_inputs():
    """Reference household: age 30, income 1L, expenses 70k, EMI 15k."""
    return UserInputs(
        name="Test Household",
        age=30,
        monthly_income=100000,
        city_tier="Tier 1",
        dependents=2,
        marital_status="Married",
        risk_tolerance="Moderate",
        current_expenses=70000,
        existing_emergency_fund=150000,
        existing_term_insurance=5000000,
        existing_health_insurance=1000000,
        loan_emi=15000,
        current_investments=500000,
        retirement_age=60,
        epf_balance=200000,
    )


@pytest.fixture
def make_fund():
    """Factory for mutual funds with sensible defaults."""

    def _make_fund(fund_id, category, expense_ratio=0.5, **overrides):
        data = {
            "id": fund_id,
            "name": f"{fund_id} fund",
            "amc": "Test AMC",
            "category": category,
            "expense_ratio": expense_ratio,
        }
        data.update(overrides)
        return MutualFund(**data)

    return _make_fund


@pytest.fixture
def make_fd():
    """Factory for FD rate cards."""

    def _make_fd(fd_id, rating_band="AAA", rate_general=7.0, tenure_min_m=12, **overrides):
        data = {
            "id": fd_id,
            "institution": f"{fd_id} Bank",
            "rating_band": rating_band,
            "tenure_min_m": tenure_min_m,
            "tenure_max_m": 60,
            "rate_general": rate_general,
        }
        data.update(overrides)
        return FDRate(**data)

    return _make_fd


@pytest.fixture
def make_term_policy():
    """Factory for term insurance policies."""

    def _make_term_policy(policy_id, csr, solvency, max_sum_insured=100000000):
        return TermInsurance(
            id=policy_id,
            insurer=f"{policy_id} Life",
            claim_settlement_ratio=csr,
            solvency_ratio=solvency,
            max_sum_insured=max_sum_insured,
        )

    return _make_term_policy


@pytest.fixture
def make_health_policy():
    """Factory for health insurance policies."""

    def _make_health_policy(policy_id, bands, premium, copay="No copay", restoration=True):
        return HealthInsurance(
            id=policy_id,
            insurer=f"{policy_id} Health",
            sum_insured_bands=bands,
            copay=copay,
            restoration=restoration,
            sample_premium_family_float=premium,
        )

    return _make_health_policy


@pytest.fixture
def sample_funds(make_fund):
    """One or more funds in every category the selectors use."""
    return [
        make_fund("largecap-active", "Large Cap", 1.0, returns_3y=16.0),
        make_fund("largecap-index", "Large Cap", 0.18, returns_3y=12.0),
        make_fund("largecap-cheapest", "Large Cap", 0.05, returns_3y=12.1),
        make_fund("midcap-a", "Mid Cap", 0.6, returns_3y=25.0, returns_5y=20.0),
        make_fund("midcap-b", "Mid Cap", 0.4, returns_3y=30.0, returns_5y=22.0),
        make_fund("smallcap-a", "Small Cap", 0.7, returns_3y=28.0),
        make_fund("smallcap-b", "Small Cap", 0.6, returns_3y=21.0),
        make_fund("flexi-a", "Flexi Cap", 0.6, returns_3y=20.0, returns_5y=24.0),
        make_fund("flexi-b", "Flexi Cap", 0.8, returns_3y=22.0, returns_5y=23.0),
        make_fund("liquid-a", "Liquid", 0.2),
        make_fund("liquid-b", "Liquid", 0.15),
        make_fund("overnight-a", "Overnight", 0.1),
        make_fund("shortdur-a", "Short Duration", 0.3),
        make_fund("corpbond-a", "Corporate Bond", 0.35),
        make_fund("corpbond-b", "Corporate Bond", 0.32),
    ]


@pytest.fixture
def sample_catalog(sample_funds, make_fd, make_term_policy, make_health_policy):
    """Small deterministic catalog covering every selector."""
    return ProductCatalog(
        data_version="test-1",
        as_of="2025-01-01",
        mutual_funds=sample_funds,
        fd_rates=[
            make_fd("govt", "Government", 6.9),
            make_fd("aaa-short", "AAA", 7.25, tenure_min_m=6),
            make_fd("aaa-long", "AAA", 8.25, tenure_min_m=15),
            make_fd("aa-plus", "AA+", 8.8),
        ],
        term_insurance=[
            make_term_policy("alpha", 99.5, 1.9),
            make_term_policy("beta", 99.65, 1.95),
            make_term_policy("gamma", 97.8, 2.1),
            make_term_policy("delta", 99.1, 1.8),
            make_term_policy("small", 99.9, 2.5, max_sum_insured=10000000),
        ],
        health_insurance=[
            make_health_policy("h-mid", [500000, 2500000], 28500),
            make_health_policy("h-cheap", [300000, 1000000], 18000),
            make_health_policy("h-low", [500000, 1500000], 24800, restoration=False),
            make_health_policy("h-star", [500000, 2500000], 22100, copay="20% copay"),
            make_health_policy("h-top", [1000000, 5000000], 35600),
        ],
    )


@pytest.fixture
def test_settings(tmp_path):
    """Settings for an isolated test app."""
    return Settings(
        SECRET_KEY="test-secret-key",
        APP_ENV="testing",
        STORAGE_TYPE="local",
        STORAGE_BASE_PATH=str(tmp_path / "storage"),
    )


@pytest.fixture
def app(test_settings):
    """Flask app wired to temporary storage and the bundled catalog."""
    return create_app(test_settings)


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()
