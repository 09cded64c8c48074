"""
Budget allocation using the 50/30/20 rule.

Income is split into needs, wants and savings; the household's actual
savings rate (after expenses and EMI) is graded against that target.
"""

from pydantic import BaseModel, ConfigDict, Field

from .inputs import UserInputs
from .numeric import divide

NEEDS_SHARE = 0.50
WANTS_SHARE = 0.30
SAVINGS_SHARE = 0.20


class BudgetAllocation(BaseModel):
    """50/30/20 split of income plus the current savings picture."""

    model_config = ConfigDict(frozen=True)

    needs: float = Field(..., description="50% of income for needs")
    wants: float = Field(..., description="30% of income for wants")
    savings: float = Field(..., description="20% of income for savings")
    total_income: float = Field(..., description="Monthly income")
    current_expenses: float = Field(..., description="Expenses including EMI")
    current_savings: float = Field(..., description="Income minus expenses")
    savings_rate: float = Field(..., description="Savings as % of income")
    status: str = Field(..., description="Qualitative savings label")


def savings_status(savings_rate: float) -> str:
    if savings_rate >= 30:
        return "Excellent"
    if savings_rate >= 20:
        return "Good"
    return "Needs Improvement"


def calculate_budget(inputs: UserInputs) -> BudgetAllocation:
    """Split income 50/30/20 and grade the actual savings rate.

    A negative savings rate (expenses above income) is reported as is.
    """
    current_expenses = inputs.current_expenses + inputs.loan_emi
    current_savings = inputs.monthly_income - current_expenses
    savings_rate = divide(current_savings, inputs.monthly_income) * 100

    return BudgetAllocation(
        needs=inputs.monthly_income * NEEDS_SHARE,
        wants=inputs.monthly_income * WANTS_SHARE,
        savings=inputs.monthly_income * SAVINGS_SHARE,
        total_income=inputs.monthly_income,
        current_expenses=current_expenses,
        current_savings=current_savings,
        savings_rate=savings_rate,
        status=savings_status(savings_rate),
    )
