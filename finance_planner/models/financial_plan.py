"""Aggregate records returned by the planning service."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .budget import BudgetAllocation
from .emergency_fund import EmergencyFund
from .health_score import HealthScore
from .inputs import UserInputs
from .insurance import Insurance
from .investment import Investment
from .product_selector import (
    SuggestedHealth,
    SuggestedParking,
    SuggestedSIP,
    SuggestedTerm,
)
from .retirement import Retirement


class PlanRecommendations(BaseModel):
    """Product shortlists for one plan and the catalog they came from."""

    model_config = ConfigDict(frozen=True)

    sip_basket: List[SuggestedSIP] = Field(default_factory=list)
    parking_options: List[SuggestedParking] = Field(default_factory=list)
    term_insurance: List[SuggestedTerm] = Field(default_factory=list)
    health_insurance: List[SuggestedHealth] = Field(default_factory=list)
    catalog_version: str = Field(default="", description="Catalog data_version")
    data_as_of: str = Field(default="", description="Catalog as-of date")


class FinancialPlan(BaseModel):
    """Snapshot plan computed from one input set and one catalog."""

    model_config = ConfigDict(frozen=True)

    inputs: UserInputs
    budget: BudgetAllocation
    emergency_fund: EmergencyFund
    insurance: Insurance
    investment: Investment
    retirement: Retirement
    health_score: HealthScore
    recommendations: PlanRecommendations
