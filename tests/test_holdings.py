"""
Tests for tracked SIP and asset summaries.
"""

import pytest
from pydantic import ValidationError

from finance_planner.models.holdings import (
    AssetItem,
    SavedProfile,
    SipItem,
    summarize_holdings,
)


class TestSummarizeHoldings:
    """Test cases for summarize_holdings."""

    def test_totals_by_category_and_bucket(self):
        """Test SIP and asset totals with allocation percentages."""
        sips = [
            SipItem(id="s1", name="Index", category="Equity", monthly=5000),
            SipItem(id="s2", name="Flexi", category="Equity", monthly=3000),
            SipItem(id="s3", name="Gilt", category="Debt", monthly=2000),
        ]
        assets = [
            AssetItem(id="a1", bucket="Equity", amount=300000),
            AssetItem(id="a2", bucket="EPF/PPF", amount=200000),
            AssetItem(id="a3", bucket="Equity", amount=100000),
            AssetItem(id="a4", bucket="Cash/Liquid", amount=400000),
        ]

        summary = summarize_holdings(sips, assets)

        assert summary.monthly_sip_by_category == {"Equity": 8000, "Debt": 2000, "Gold": 0}
        assert summary.total_monthly_sip == 10000
        assert summary.assets_by_bucket["Equity"] == 400000
        assert summary.assets_by_bucket["Gold"] == 0
        assert summary.total_assets == 1000000
        assert summary.asset_allocation_pct == pytest.approx(
            {"Equity": 40, "Debt": 0, "Gold": 0, "EPF/PPF": 20, "Cash/Liquid": 40}
        )

    def test_nothing_tracked(self):
        """Test that empty holdings give zero totals instead of dividing by zero."""
        summary = summarize_holdings([], [])

        assert summary.total_monthly_sip == 0
        assert summary.total_assets == 0
        assert set(summary.asset_allocation_pct.values()) == {0}


class TestSavedProfile:
    """Test cases for SavedProfile validation."""

    def test_defaults(self):
        """Test that an empty profile uses the default household."""
        profile = SavedProfile()

        assert profile.inputs.age == 30
        assert profile.tracked_sips == []
        assert profile.saved_at is None

    def test_rejects_unknown_bucket(self):
        """Test that asset buckets are restricted."""
        with pytest.raises(ValidationError):
            AssetItem(id="a1", bucket="Crypto", amount=1000)

    def test_rejects_negative_amounts(self):
        """Test that SIP amounts cannot be negative."""
        with pytest.raises(ValidationError):
            SipItem(id="s1", name="Index", category="Equity", monthly=-1)
