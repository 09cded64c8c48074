"""
Pydantic model for the household profile that drives every calculation.

The profile is validated once at the boundary; the calculators themselves
trust whatever record they are handed.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

CityTier = Literal["Tier 1", "Tier 2", "Tier 3"]
RiskTolerance = Literal["Conservative", "Moderate", "Aggressive"]

_METRO_ALIASES = {"tier 1 (metro)", "tier 1 metro", "tier1", "metro"}


class UserInputs(BaseModel):
    """Household profile: income, expenses and existing holdings."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Household name")
    age: int = Field(default=30, ge=1, le=100, description="Current age")
    monthly_income: float = Field(
        default=100000, gt=0, description="Monthly take-home income"
    )
    city_tier: CityTier = Field(default="Tier 1", description="City tier")
    dependents: int = Field(default=2, ge=0, le=20, description="Number of dependents")
    marital_status: str = Field(default="Married", description="Marital status")
    risk_tolerance: RiskTolerance = Field(
        default="Moderate", description="Investment risk tolerance"
    )
    current_expenses: float = Field(
        default=70000, ge=0, description="Monthly living expenses excluding EMI"
    )
    existing_emergency_fund: float = Field(
        default=150000, ge=0, description="Emergency fund already set aside"
    )
    existing_term_insurance: float = Field(
        default=5000000, ge=0, description="Existing term life cover"
    )
    existing_health_insurance: float = Field(
        default=1000000, ge=0, description="Existing health insurance cover"
    )
    loan_emi: float = Field(default=15000, ge=0, description="Total monthly loan EMI")
    current_investments: float = Field(
        default=500000, ge=0, description="Current market investments"
    )
    retirement_age: int = Field(
        default=60, ge=1, le=100, description="Planned retirement age"
    )
    epf_balance: float = Field(default=200000, ge=0, description="EPF balance")

    @field_validator("city_tier", mode="before")
    @classmethod
    def normalize_city_tier(cls, v):
        """Map metro spellings such as "Tier 1 (Metro)" to "Tier 1"."""
        if isinstance(v, str) and v.strip().lower() in _METRO_ALIASES:
            return "Tier 1"
        return v

    @model_validator(mode="after")
    def validate_retirement_age(self):
        """Ensure retirement lies after the current age."""
        if self.retirement_age <= self.age:
            raise ValueError(
                f"Retirement age ({self.retirement_age}) must be greater than "
                f"current age ({self.age})"
            )
        return self
