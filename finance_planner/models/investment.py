"""
Equity/debt allocation and the investable monthly SIP.

Equity starts from the "100 minus age" rule, shifts by risk tolerance and is
clamped to [30, 90]. Savings are first diverted towards any emergency fund
gap (spread over 24 months) before the remainder is invested.
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from .inputs import RiskTolerance, UserInputs
from .numeric import clamp

RISK_ADJUSTMENT: Dict[RiskTolerance, int] = {
    "Aggressive": 10,
    "Moderate": 0,
    "Conservative": -10,
}
MIN_EQUITY_PCT = 30
MAX_EQUITY_PCT = 90
RECOMMENDED_SAVINGS_SHARE = 0.20
EMERGENCY_FUND_HORIZON_MONTHS = 24


class Investment(BaseModel):
    """Asset allocation and monthly SIP split."""

    model_config = ConfigDict(frozen=True)

    base_equity_pct: float = Field(..., description="100 minus age")
    risk_adjustment: float = Field(..., description="Risk tolerance shift")
    final_equity_pct: float = Field(..., description="Equity % clamped to [30, 90]")
    final_debt_pct: float = Field(..., description="100 minus equity")
    recommended_savings: float = Field(..., description="20% of income")
    emergency_fund_contribution: float = Field(
        ..., description="Savings diverted to the emergency fund"
    )
    available_for_investment: float = Field(..., description="Savings left to invest")
    monthly_sip: float = Field(..., description="Monthly SIP amount")
    equity_portion: float = Field(..., description="Equity part of the SIP")
    debt_portion: float = Field(..., description="Debt part of the SIP")


def calculate_investment(inputs: UserInputs, ef_gap: float) -> Investment:
    """Derive the allocation and the SIP left after emergency fund top-ups.

    Args:
        inputs: Household profile
        ef_gap: Emergency fund gap from ``calculate_emergency_fund``

    Returns:
        Investment allocation
    """
    base_equity_pct = 100 - inputs.age
    risk_adjustment = RISK_ADJUSTMENT.get(inputs.risk_tolerance, 0)
    final_equity_pct = clamp(
        base_equity_pct + risk_adjustment, MIN_EQUITY_PCT, MAX_EQUITY_PCT
    )
    final_debt_pct = 100 - final_equity_pct

    recommended_savings = inputs.monthly_income * RECOMMENDED_SAVINGS_SHARE
    if ef_gap > 0:
        emergency_fund_contribution = min(
            recommended_savings, ef_gap / EMERGENCY_FUND_HORIZON_MONTHS
        )
    else:
        emergency_fund_contribution = 0.0
    available_for_investment = recommended_savings - emergency_fund_contribution

    monthly_sip = available_for_investment
    return Investment(
        base_equity_pct=base_equity_pct,
        risk_adjustment=risk_adjustment,
        final_equity_pct=final_equity_pct,
        final_debt_pct=final_debt_pct,
        recommended_savings=recommended_savings,
        emergency_fund_contribution=emergency_fund_contribution,
        available_for_investment=available_for_investment,
        monthly_sip=monthly_sip,
        equity_portion=monthly_sip * final_equity_pct / 100,
        debt_portion=monthly_sip * final_debt_pct / 100,
    )
