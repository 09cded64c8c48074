"""
Composite financial health score.

Five component scores on a 0-100 scale are combined with fixed weights:
savings 25%, emergency fund 20%, insurance 25%, debt 15%, investments 15%.
"""

from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .budget import BudgetAllocation
from .emergency_fund import EmergencyFund
from .inputs import UserInputs
from .insurance import Insurance
from .numeric import cap, clamp, divide

SCORE_WEIGHTS: Dict[str, float] = {
    "savings": 0.25,
    "emergency_fund": 0.20,
    "insurance": 0.25,
    "debt": 0.15,
    "investment": 0.15,
}
TARGET_SAVINGS_RATE = 30
MAX_HEALTHY_EMI_PCT = 40
EXPECTED_INVESTMENT_YEARS_OF_INCOME = 2

# (minimum overall score, grade, rating)
GRADE_BANDS: List[Tuple[float, str, str]] = [
    (80, "A", "Excellent"),
    (60, "B", "Good Financial Health"),
    (40, "C", "Needs Attention"),
]
LOWEST_GRADE = ("D", "Needs Attention")


class HealthScore(BaseModel):
    """Component scores, weighted overall score and grade."""

    model_config = ConfigDict(frozen=True)

    savings_rate: float
    savings_score: float = Field(..., description="Savings rate against 30%")
    ef_completion: float
    ef_score: float = Field(..., description="Emergency fund completion")
    term_coverage: float
    health_coverage: float
    term_score: float
    health_score: float
    insurance_score: float = Field(..., description="Average of term and health")
    emi_pct: float
    debt_score: float = Field(..., description="Inverse of EMI burden against 40%")
    current_investments: float
    expected_investments: float
    investment_score: float = Field(..., description="Investments against 2x income")
    overall_score: float
    grade: str
    rating: str


def grade_for(overall_score: float) -> Tuple[str, str]:
    """Map an overall score to its (grade, rating) band."""
    for minimum, grade, rating in GRADE_BANDS:
        if overall_score >= minimum:
            return grade, rating
    return LOWEST_GRADE


def calculate_health_score(
    inputs: UserInputs,
    budget: BudgetAllocation,
    ef: EmergencyFund,
    insurance: Insurance,
) -> HealthScore:
    """Score savings, safety nets, debt and investments into one grade."""
    # every component score stays within [0, 100]
    savings_score = clamp(budget.savings_rate / TARGET_SAVINGS_RATE * 100, 0, 100)
    ef_score = cap(ef.completion_pct)

    term_coverage = divide(inputs.existing_term_insurance, insurance.term.recommended) * 100
    health_coverage = (
        divide(inputs.existing_health_insurance, insurance.health.recommended) * 100
    )
    term_score = cap(term_coverage)
    health_score = cap(health_coverage)
    insurance_score = (term_score + health_score) / 2

    emi_pct = divide(inputs.loan_emi, inputs.monthly_income) * 100
    debt_score = clamp((1 - emi_pct / MAX_HEALTHY_EMI_PCT) * 100, 0, 100)

    expected_investments = inputs.monthly_income * 12 * EXPECTED_INVESTMENT_YEARS_OF_INCOME
    investment_score = cap(divide(inputs.current_investments, expected_investments) * 100)

    overall_score = (
        savings_score * SCORE_WEIGHTS["savings"]
        + ef_score * SCORE_WEIGHTS["emergency_fund"]
        + insurance_score * SCORE_WEIGHTS["insurance"]
        + debt_score * SCORE_WEIGHTS["debt"]
        + investment_score * SCORE_WEIGHTS["investment"]
    )
    grade, rating = grade_for(overall_score)

    return HealthScore(
        savings_rate=budget.savings_rate,
        savings_score=savings_score,
        ef_completion=ef.completion_pct,
        ef_score=ef_score,
        term_coverage=term_coverage,
        health_coverage=health_coverage,
        term_score=term_score,
        health_score=health_score,
        insurance_score=insurance_score,
        emi_pct=emi_pct,
        debt_score=debt_score,
        current_investments=inputs.current_investments,
        expected_investments=expected_investments,
        investment_score=investment_score,
        overall_score=overall_score,
        grade=grade,
        rating=rating,
    )
