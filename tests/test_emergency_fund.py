"""
Tests for the emergency fund calculator.
"""

import numpy as np
import pytest

from finance_planner.models.emergency_fund import (
    calculate_emergency_fund,
    completion_status,
)
from finance_planner.models.inputs import UserInputs


class TestCalculateEmergencyFund:
    """Test cases for calculate_emergency_fund."""

    def test_reference_household(self, reference_inputs):
        """Test targets for 70k expenses and 15k EMI."""
        ef = calculate_emergency_fund(reference_inputs)

        # 0.7 * 70,000 + 15,000
        assert ef.essential_expenses == 64000
        assert ef.minimum_target == 384000
        assert ef.recommended_target == 576000
        assert ef.conservative_target == 768000
        assert ef.existing == 150000
        assert ef.gap == 426000
        assert np.isclose(ef.completion_pct, 150000 / 576000 * 100)
        assert ef.monthly_contribution_12 == 35500
        assert ef.monthly_contribution_24 == 17750
        assert ef.status == "Priority Action Needed"

    def test_gap_is_zero_when_fully_funded(self):
        """Test that an existing fund at the target leaves no gap."""
        inputs = UserInputs(
            current_expenses=70000, loan_emi=15000, existing_emergency_fund=576000
        )
        ef = calculate_emergency_fund(inputs)

        assert ef.gap == 0
        assert ef.monthly_contribution_12 == 0
        assert ef.monthly_contribution_24 == 0
        assert ef.completion_pct == 100
        assert ef.status == "Excellent"

    def test_completion_is_not_capped(self):
        """Test that completion can exceed 100% while the gap stays at 0."""
        inputs = UserInputs(
            current_expenses=70000, loan_emi=15000, existing_emergency_fund=1152000
        )
        ef = calculate_emergency_fund(inputs)

        assert ef.gap == 0
        assert np.isclose(ef.completion_pct, 200.0)

    @pytest.mark.parametrize("existing", [0, 100000, 575999, 576000, 2000000])
    def test_gap_never_negative(self, existing):
        """Test that the gap is zero exactly when existing covers the target."""
        inputs = UserInputs(
            current_expenses=70000, loan_emi=15000, existing_emergency_fund=existing
        )
        ef = calculate_emergency_fund(inputs)

        assert ef.gap >= 0
        assert (ef.gap == 0) == (existing >= ef.recommended_target)

    def test_zero_expenses_does_not_raise(self):
        """Test that a zero target gives a non-finite completion percentage."""
        inputs = UserInputs(current_expenses=0, loan_emi=0, existing_emergency_fund=1000)
        ef = calculate_emergency_fund(inputs)

        assert ef.recommended_target == 0
        assert ef.gap == 0
        assert np.isinf(ef.completion_pct)
        assert ef.status == "Excellent"


class TestCompletionStatus:
    """Test emergency fund status thresholds."""

    @pytest.mark.parametrize(
        "pct,expected",
        [
            (150, "Excellent"),
            (100, "Excellent"),
            (99.9, "Good"),
            (75, "Good"),
            (74.9, "Priority Action Needed"),
            (0, "Priority Action Needed"),
        ],
    )
    def test_thresholds(self, pct, expected):
        """Test the 100% and 75% breakpoints."""
        assert completion_status(pct) == expected
