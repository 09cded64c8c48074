"""
Term life and health insurance cover recommendations.

Term cover averages an age-banded income multiple with a human-life-value
estimate. Health cover scales a city-tier base cover by family size, capped
at a tier-specific number of cover units.
"""

from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .inputs import CityTier, UserInputs
from .numeric import divide, floor_at

# (lower age bound inclusive, multiplier); first match from the top wins
TERM_MULTIPLIER_BANDS: List[Tuple[int, int]] = [(40, 12), (35, 15), (30, 18)]
DEFAULT_TERM_MULTIPLIER = 20
HUMAN_LIFE_VALUE_FACTOR = 0.6
TERM_PREMIUM_PER_THOUSAND = 0.5

# city tier -> (base cover, family multiplier cap)
HEALTH_COVER_BY_TIER: Dict[CityTier, Tuple[float, float]] = {
    "Tier 1": (1000000, 2.5),
    "Tier 2": (750000, 2.0),
    "Tier 3": (500000, 1.5),
}
HEALTH_PREMIUM_RATE = 0.015


class TermCover(BaseModel):
    """Term life insurance recommendation."""

    model_config = ConfigDict(frozen=True)

    multiplier: int = Field(..., description="Age-banded income multiple")
    annual_income: float = Field(..., description="Annual income")
    method1: float = Field(..., description="Income-multiple estimate")
    years_to_retirement: int = Field(..., description="Working years remaining")
    method2: float = Field(..., description="Human-life-value estimate")
    recommended: float = Field(..., description="Average of both methods")
    existing: float = Field(..., description="Existing term cover")
    gap: float = Field(..., description="Additional cover needed")
    annual_premium: float = Field(..., description="Approximate annual premium")
    status: str = Field(..., description="Adequate / Increase Cover")


class HealthCover(BaseModel):
    """Health insurance recommendation."""

    model_config = ConfigDict(frozen=True)

    base_cover: float = Field(..., description="City-tier base cover")
    family_size: int = Field(..., description="Dependents plus self")
    multiplier: float = Field(..., description="Cap on cover units for the tier")
    recommended: float = Field(..., description="Recommended family floater cover")
    existing: float = Field(..., description="Existing health cover")
    gap: float = Field(..., description="Additional cover needed")
    annual_premium: float = Field(..., description="Approximate annual premium")
    status: str = Field(..., description="Adequate / Increase Cover")


class Insurance(BaseModel):
    """Combined insurance picture and its premium impact."""

    model_config = ConfigDict(frozen=True)

    term: TermCover
    health: HealthCover
    total_annual_premium: float = Field(..., description="Term plus health premium")
    monthly_impact: float = Field(..., description="Premium per month")
    pct_of_income: float = Field(..., description="Monthly premium as % of income")


def term_multiplier(age: int) -> int:
    """Income multiple for term cover; bands are inclusive-lower, exclusive-upper."""
    for lower_bound, multiplier in TERM_MULTIPLIER_BANDS:
        if age >= lower_bound:
            return multiplier
    return DEFAULT_TERM_MULTIPLIER


def cover_status(gap: float) -> str:
    return "Adequate" if gap == 0 else "Increase Cover"


def calculate_term_cover(inputs: UserInputs) -> TermCover:
    multiplier = term_multiplier(inputs.age)
    annual_income = inputs.monthly_income * 12
    method1 = annual_income * multiplier

    years_to_retirement = inputs.retirement_age - inputs.age
    method2 = annual_income * years_to_retirement * HUMAN_LIFE_VALUE_FACTOR

    recommended = (method1 + method2) / 2
    gap = floor_at(recommended - inputs.existing_term_insurance)

    return TermCover(
        multiplier=multiplier,
        annual_income=annual_income,
        method1=method1,
        years_to_retirement=years_to_retirement,
        method2=method2,
        recommended=recommended,
        existing=inputs.existing_term_insurance,
        gap=gap,
        # flat-rate approximation, not actuarial
        annual_premium=recommended / 1000 * TERM_PREMIUM_PER_THOUSAND,
        status=cover_status(gap),
    )


def calculate_health_cover(inputs: UserInputs) -> HealthCover:
    base_cover, multiplier = HEALTH_COVER_BY_TIER.get(
        inputs.city_tier, HEALTH_COVER_BY_TIER["Tier 1"]
    )
    family_size = inputs.dependents + 1
    recommended = base_cover * min(family_size, multiplier)
    gap = floor_at(recommended - inputs.existing_health_insurance)

    return HealthCover(
        base_cover=base_cover,
        family_size=family_size,
        multiplier=multiplier,
        recommended=recommended,
        existing=inputs.existing_health_insurance,
        gap=gap,
        annual_premium=recommended * HEALTH_PREMIUM_RATE,
        status=cover_status(gap),
    )


def calculate_insurance(inputs: UserInputs) -> Insurance:
    """Recommend term and health cover and estimate the premium burden."""
    term = calculate_term_cover(inputs)
    health = calculate_health_cover(inputs)

    total_annual_premium = term.annual_premium + health.annual_premium
    monthly_impact = total_annual_premium / 12

    return Insurance(
        term=term,
        health=health,
        total_annual_premium=total_annual_premium,
        monthly_impact=monthly_impact,
        pct_of_income=divide(monthly_impact, inputs.monthly_income) * 100,
    )
