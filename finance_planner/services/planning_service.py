"""
Planning service that runs the calculators and product selectors.

Calculators run in dependency order (budget, emergency fund, insurance,
investment, retirement, health score); the selectors then turn the computed
targets into product shortlists from the catalog snapshot.
"""

import logging
from typing import Optional

from finance_planner.models.budget import calculate_budget
from finance_planner.models.emergency_fund import (
    EmergencyFund,
    calculate_emergency_fund,
)
from finance_planner.models.financial_plan import FinancialPlan, PlanRecommendations
from finance_planner.models.health_score import calculate_health_score
from finance_planner.models.inputs import UserInputs
from finance_planner.models.insurance import Insurance, calculate_insurance
from finance_planner.models.investment import Investment, calculate_investment
from finance_planner.models.product_selector import (
    select_health_insurance,
    select_parking_options,
    select_sip_basket,
    select_term_insurance,
)
from finance_planner.models.products import ProductCatalog
from finance_planner.models.retirement import (
    DEFAULT_ASSUMPTIONS,
    RetirementAssumptions,
    calculate_retirement,
)

logger = logging.getLogger(__name__)

# Horizon used to pick the emergency fund parking instruments
PARKING_HORIZON_MONTHS = 12


class PlanningService:
    """Builds a complete financial plan from inputs and a catalog."""

    def __init__(self, assumptions: Optional[RetirementAssumptions] = None) -> None:
        """Initialize the planning service.

        Args:
            assumptions: Retirement assumptions; defaults to the standard rates
        """
        self.assumptions = assumptions or DEFAULT_ASSUMPTIONS

    def recommend_products(
        self,
        inputs: UserInputs,
        emergency_fund: EmergencyFund,
        insurance: Insurance,
        investment: Investment,
        catalog: ProductCatalog,
    ) -> PlanRecommendations:
        """Shortlist products for the computed targets."""
        return PlanRecommendations(
            sip_basket=select_sip_basket(
                catalog.mutual_funds,
                investment.final_equity_pct,
                investment.final_debt_pct,
                inputs.risk_tolerance,
                investment.monthly_sip,
            ),
            parking_options=select_parking_options(
                catalog.mutual_funds,
                catalog.fd_rates,
                PARKING_HORIZON_MONTHS,
                emergency_fund.gap,
            ),
            term_insurance=select_term_insurance(
                catalog.term_insurance, insurance.term.gap
            ),
            health_insurance=select_health_insurance(
                catalog.health_insurance, insurance.health.gap
            ),
            catalog_version=catalog.data_version,
            data_as_of=catalog.as_of,
        )

    def build_plan(
        self, inputs: UserInputs, catalog: Optional[ProductCatalog] = None
    ) -> FinancialPlan:
        """Compute every calculator result and the product shortlists.

        Args:
            inputs: Validated household profile
            catalog: Product catalog snapshot; no catalog means no suggestions

        Returns:
            FinancialPlan snapshot
        """
        logger.info(
            f"Building plan for age {inputs.age}, risk {inputs.risk_tolerance}, "
            f"{inputs.city_tier}"
        )
        if catalog is None:
            catalog = ProductCatalog.empty()

        budget = calculate_budget(inputs)
        emergency_fund = calculate_emergency_fund(inputs)
        insurance = calculate_insurance(inputs)
        investment = calculate_investment(inputs, emergency_fund.gap)
        retirement = calculate_retirement(inputs, self.assumptions)
        health_score = calculate_health_score(inputs, budget, emergency_fund, insurance)

        plan = FinancialPlan(
            inputs=inputs,
            budget=budget,
            emergency_fund=emergency_fund,
            insurance=insurance,
            investment=investment,
            retirement=retirement,
            health_score=health_score,
            recommendations=self.recommend_products(
                inputs, emergency_fund, insurance, investment, catalog
            ),
        )

        logger.info(
            f"Plan ready: score {health_score.overall_score:.1f} ({health_score.grade}), "
            f"{len(plan.recommendations.sip_basket)} SIP suggestions"
        )
        return plan
