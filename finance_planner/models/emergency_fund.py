"""
Emergency fund targets and contribution plans.

Targets are expressed in months of essential expenses (70% of living
expenses plus the full EMI, which cannot be skipped in a crisis).
"""

from pydantic import BaseModel, ConfigDict, Field

from .inputs import UserInputs
from .numeric import divide, floor_at

ESSENTIAL_EXPENSE_SHARE = 0.7
MINIMUM_MONTHS = 6
RECOMMENDED_MONTHS = 9
CONSERVATIVE_MONTHS = 12


class EmergencyFund(BaseModel):
    """Emergency fund targets, gap and monthly plans to close it."""

    model_config = ConfigDict(frozen=True)

    essential_expenses: float = Field(..., description="Monthly essential expenses")
    minimum_target: float = Field(..., description="6 months of essentials")
    recommended_target: float = Field(..., description="9 months of essentials")
    conservative_target: float = Field(..., description="12 months of essentials")
    existing: float = Field(..., description="Existing emergency fund")
    gap: float = Field(..., description="Shortfall against the recommended target")
    completion_pct: float = Field(
        ..., description="Existing fund as % of recommended target (not capped)"
    )
    monthly_contribution_12: float = Field(
        ..., description="Monthly saving to close the gap in 12 months"
    )
    monthly_contribution_24: float = Field(
        ..., description="Monthly saving to close the gap in 24 months"
    )
    status: str = Field(..., description="Qualitative completion label")


def completion_status(completion_pct: float) -> str:
    if completion_pct >= 100:
        return "Excellent"
    if completion_pct >= 75:
        return "Good"
    return "Priority Action Needed"


def calculate_emergency_fund(inputs: UserInputs) -> EmergencyFund:
    """Compute emergency fund targets against the existing corpus."""
    essential_expenses = inputs.current_expenses * ESSENTIAL_EXPENSE_SHARE + inputs.loan_emi
    recommended_target = essential_expenses * RECOMMENDED_MONTHS

    gap = floor_at(recommended_target - inputs.existing_emergency_fund)
    completion_pct = divide(inputs.existing_emergency_fund, recommended_target) * 100

    return EmergencyFund(
        essential_expenses=essential_expenses,
        minimum_target=essential_expenses * MINIMUM_MONTHS,
        recommended_target=recommended_target,
        conservative_target=essential_expenses * CONSERVATIVE_MONTHS,
        existing=inputs.existing_emergency_fund,
        gap=gap,
        completion_pct=completion_pct,
        monthly_contribution_12=gap / 12 if gap > 0 else 0.0,
        monthly_contribution_24=gap / 24 if gap > 0 else 0.0,
        status=completion_status(completion_pct),
    )
