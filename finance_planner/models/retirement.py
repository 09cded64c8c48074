"""
Retirement corpus projection.

Today's expenses are inflated to the retirement date, the corpus needed to
fund them until the planning horizon is valued with an inflation-adjusted
(real) return, and existing investments and EPF are compounded forward.
Any shortfall is converted into the monthly SIP that closes it.
"""

from pydantic import BaseModel, ConfigDict, Field

from .inputs import UserInputs
from .numeric import divide, floor_at, power


class RetirementAssumptions(BaseModel):
    """Fixed market and lifestyle assumptions for the projection."""

    model_config = ConfigDict(frozen=True)

    inflation_rate: float = Field(default=0.06, ge=0, le=0.5)
    expected_return: float = Field(default=0.12, ge=0, le=0.5)
    epf_return: float = Field(default=0.08, ge=0, le=0.5)
    life_expectancy: int = Field(default=85, ge=1, le=120)
    expense_ratio: float = Field(
        default=0.70, gt=0, le=2, description="Share of today's expenses needed"
    )


DEFAULT_ASSUMPTIONS = RetirementAssumptions()


class Retirement(BaseModel):
    """Retirement corpus requirement, projected savings and SIP needed."""

    model_config = ConfigDict(frozen=True)

    current_age: int
    retirement_age: int
    years_to_retirement: int
    current_expenses: float
    retirement_need: float = Field(..., description="Monthly need in today's money")
    inflation_rate: float
    future_monthly_expense: float
    future_annual_expense: float
    post_retirement_years: int
    expected_return: float
    real_return: float
    corpus_needed: float
    current_investments_fv: float
    epf_fv: float
    total_fv: float
    gap: float
    monthly_sip_needed: float
    sip_pct_of_income: float
    status: str


def corpus_for_withdrawals(annual_expense: float, real_return: float, years: int) -> float:
    """Present value of ``years`` inflation-indexed annual withdrawals."""
    if real_return == 0:
        return annual_expense * years
    return annual_expense * divide(1 - power(1 + real_return, -years), real_return)


def sip_to_reach(target: float, monthly_return: float, months: int) -> float:
    """Monthly contribution whose future value after ``months`` equals ``target``."""
    if target <= 0:
        return 0.0
    if monthly_return == 0:
        return divide(target, months)
    return divide(target * monthly_return, power(1 + monthly_return, months) - 1)


def calculate_retirement(
    inputs: UserInputs, assumptions: RetirementAssumptions = DEFAULT_ASSUMPTIONS
) -> Retirement:
    """Project the retirement corpus and the SIP needed to fund any gap."""
    inflation = assumptions.inflation_rate
    expected_return = assumptions.expected_return

    years_to_retirement = inputs.retirement_age - inputs.age
    retirement_need = inputs.current_expenses * assumptions.expense_ratio

    future_monthly_expense = retirement_need * power(1 + inflation, years_to_retirement)
    future_annual_expense = future_monthly_expense * 12

    post_retirement_years = assumptions.life_expectancy - inputs.retirement_age
    real_return = (expected_return - inflation) / (1 + inflation)
    corpus_needed = corpus_for_withdrawals(
        future_annual_expense, real_return, post_retirement_years
    )

    current_investments_fv = inputs.current_investments * power(
        1 + expected_return, years_to_retirement
    )
    epf_fv = inputs.epf_balance * power(1 + assumptions.epf_return, years_to_retirement)
    total_fv = current_investments_fv + epf_fv

    gap = floor_at(corpus_needed - total_fv)
    monthly_sip_needed = sip_to_reach(gap, expected_return / 12, years_to_retirement * 12)

    return Retirement(
        current_age=inputs.age,
        retirement_age=inputs.retirement_age,
        years_to_retirement=years_to_retirement,
        current_expenses=inputs.current_expenses,
        retirement_need=retirement_need,
        inflation_rate=inflation,
        future_monthly_expense=future_monthly_expense,
        future_annual_expense=future_annual_expense,
        post_retirement_years=post_retirement_years,
        expected_return=expected_return,
        real_return=real_return,
        corpus_needed=corpus_needed,
        current_investments_fv=current_investments_fv,
        epf_fv=epf_fv,
        total_fv=total_fv,
        gap=gap,
        monthly_sip_needed=monthly_sip_needed,
        sip_pct_of_income=divide(monthly_sip_needed, inputs.monthly_income) * 100,
        status="On Track" if gap == 0 else "Action Needed",
    )
