"""
Pydantic models for the financial product catalog.

The catalog is a versioned, read-only snapshot of mutual funds, fixed
deposit rates and insurance policies. Records are frozen: the planner only
filters, sorts and references them.
"""

from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

FundCategory = Literal[
    "Large Cap",
    "Mid Cap",
    "Small Cap",
    "Flexi Cap",
    "ELSS",
    "Liquid",
    "Overnight",
    "Short Duration",
    "Corporate Bond",
    "Gilt",
]


class MutualFund(BaseModel):
    """Direct-growth mutual fund scheme."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    amc: str = Field(..., description="Asset management company")
    category: FundCategory
    plan_type: str = Field(default="Direct Growth")
    aum_cr: float = Field(default=0, ge=0, description="AUM in crore")
    expense_ratio: float = Field(..., ge=0, description="Expense ratio in %")
    exit_load: str = Field(default="")
    min_sip: float = Field(default=0, ge=0)
    returns_1y: Optional[float] = None
    returns_3y: Optional[float] = None
    returns_5y: Optional[float] = None
    risk_band: Literal["Low", "Medium", "High"] = "Medium"
    benchmark: str = Field(default="")


class FDRate(BaseModel):
    """Fixed deposit rate card for one institution and tenure range."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1)
    institution: str = Field(..., min_length=1)
    rating_band: Literal["AAA", "AA+", "Government"]
    tenure_min_m: int = Field(..., ge=0, description="Minimum tenure in months")
    tenure_max_m: int = Field(..., ge=0, description="Maximum tenure in months")
    rate_general: float = Field(..., ge=0, description="Rate for general public (%)")
    rate_senior: float = Field(default=0, ge=0, description="Rate for seniors (%)")
    compounding: Literal["Quarterly", "Annual"] = "Quarterly"
    premature_penalty_notes: str = Field(default="")
    min_amount: float = Field(default=0, ge=0)


class TermInsurance(BaseModel):
    """Term life insurance product."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1)
    insurer: str = Field(..., min_length=1)
    product: str = Field(default="")
    claim_settlement_ratio: float = Field(..., ge=0, le=100)
    solvency_ratio: float = Field(..., ge=0)
    min_sum_insured: float = Field(default=0, ge=0)
    max_sum_insured: float = Field(..., ge=0)
    sample_premium_age_30_1cr: float = Field(default=0, ge=0)
    riders: List[str] = Field(default_factory=list)


class HealthInsurance(BaseModel):
    """Family floater health insurance plan."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1)
    insurer: str = Field(..., min_length=1)
    plan: str = Field(default="")
    sum_insured_bands: List[float] = Field(default_factory=list)
    room_rules: str = Field(default="")
    copay: str = Field(default="No copay")
    waiting_periods: str = Field(default="")
    restoration: bool = False
    no_claim_bonus: str = Field(default="")
    portability_notes: str = Field(default="")
    sample_premium_family_float: float = Field(..., ge=0)


class ProductCatalog(BaseModel):
    """One catalog snapshot; ``as_of`` is display metadata only."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    data_version: str = Field(default="")
    as_of: str = Field(default="", validation_alias=AliasChoices("as_of", "as_of_date"))
    mutual_funds: List[MutualFund] = Field(default_factory=list)
    fd_rates: List[FDRate] = Field(default_factory=list)
    term_insurance: List[TermInsurance] = Field(default_factory=list)
    health_insurance: List[HealthInsurance] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "ProductCatalog":
        """Catalog with no products, used when loading fails."""
        return cls()

    @property
    def counts(self) -> dict:
        return {
            "mutual_funds": len(self.mutual_funds),
            "fd_rates": len(self.fd_rates),
            "term_insurance": len(self.term_insurance),
            "health_insurance": len(self.health_insurance),
        }
