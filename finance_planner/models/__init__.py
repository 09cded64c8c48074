"""Calculators, product catalog models and selectors for financial planning."""

from .inputs import CityTier, RiskTolerance, UserInputs
from .budget import BudgetAllocation, calculate_budget
from .emergency_fund import EmergencyFund, calculate_emergency_fund
from .insurance import HealthCover, Insurance, TermCover, calculate_insurance
from .investment import Investment, calculate_investment
from .retirement import Retirement, RetirementAssumptions, calculate_retirement
from .health_score import HealthScore, calculate_health_score
from .products import (
    FDRate,
    HealthInsurance,
    MutualFund,
    ProductCatalog,
    TermInsurance,
)
from .product_selector import (
    SuggestedHealth,
    SuggestedParking,
    SuggestedSIP,
    SuggestedTerm,
    select_health_insurance,
    select_parking_options,
    select_sip_basket,
    select_term_insurance,
)
from .holdings import (
    AssetItem,
    HoldingsSummary,
    SavedProfile,
    SipItem,
    summarize_holdings,
)
from .financial_plan import FinancialPlan, PlanRecommendations

__all__ = [
    "CityTier",
    "RiskTolerance",
    "UserInputs",
    "BudgetAllocation",
    "calculate_budget",
    "EmergencyFund",
    "calculate_emergency_fund",
    "HealthCover",
    "Insurance",
    "TermCover",
    "calculate_insurance",
    "Investment",
    "calculate_investment",
    "Retirement",
    "RetirementAssumptions",
    "calculate_retirement",
    "HealthScore",
    "calculate_health_score",
    "FDRate",
    "HealthInsurance",
    "MutualFund",
    "ProductCatalog",
    "TermInsurance",
    "SuggestedHealth",
    "SuggestedParking",
    "SuggestedSIP",
    "SuggestedTerm",
    "select_health_insurance",
    "select_parking_options",
    "select_sip_basket",
    "select_term_insurance",
    "AssetItem",
    "HoldingsSummary",
    "SavedProfile",
    "SipItem",
    "summarize_holdings",
    "FinancialPlan",
    "PlanRecommendations",
]
