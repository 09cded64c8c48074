"""
Product selection: maps computed targets onto the product catalog.

Every selector is pure. It filters and ranks catalog records and returns a
bounded list of suggestions that reference (never copy or modify) the
selected records. An empty list means nothing in the catalog was eligible.
"""

from functools import cmp_to_key
from typing import Dict, List, Literal, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .inputs import RiskTolerance
from .numeric import round_half_up
from .products import FDRate, FundCategory, HealthInsurance, MutualFund, TermInsurance

SHORTLIST_SIZE = 3
CORE_EXPENSE_RATIO_LIMIT = 0.2
CORE_EQUITY_SHARE = 0.5
CSR_TIE_THRESHOLD = 0.5
SHORT_HORIZON_MONTHS = 6
PARKING_SHARE = 0.5
SAFE_FD_RATINGS = ("Government", "AAA")
MAX_FD_MIN_TENURE_M = 12


class SuggestedSIP(BaseModel):
    """One fund in the SIP basket."""

    model_config = ConfigDict(frozen=True)

    fund: MutualFund
    allocation_pct: float = Field(..., description="Share of the whole basket (%)")
    monthly_amount: float = Field(..., description="Rounded monthly SIP")
    reason: str


class SuggestedParking(BaseModel):
    """One instrument for parking the emergency fund."""

    model_config = ConfigDict(frozen=True)

    option: Union[MutualFund, FDRate]
    type: Literal["liquid_fund", "fd"]
    allocation_pct: float
    amount: float
    reason: str


class SuggestedTerm(BaseModel):
    """Shortlisted term insurance policy."""

    model_config = ConfigDict(frozen=True)

    policy: TermInsurance
    reason: str


class SuggestedHealth(BaseModel):
    """Shortlisted health insurance policy."""

    model_config = ConfigDict(frozen=True)

    policy: HealthInsurance
    reason: str


class EquitySleeve(BaseModel):
    """Satellite slot in the equity bucket."""

    model_config = ConfigDict(frozen=True)

    categories: Tuple[FundCategory, ...] = Field(
        ..., description="Eligible categories, in order of preference on ties"
    )
    share: float = Field(..., description="Share of the equity bucket")
    rank_by: Literal["returns_3y", "returns_5y"]
    reason: str
    takes_remainder: bool = Field(
        default=False, description="Amount is the equity bucket minus the core"
    )


EQUITY_SLEEVES: Dict[RiskTolerance, List[EquitySleeve]] = {
    "Aggressive": [
        EquitySleeve(
            categories=("Mid Cap",),
            share=0.3,
            rank_by="returns_3y",
            reason="Satellite - Mid cap for growth",
        ),
        EquitySleeve(
            categories=("Small Cap",),
            share=0.2,
            rank_by="returns_3y",
            reason="Satellite - Small cap for higher growth",
        ),
    ],
    "Moderate": [
        EquitySleeve(
            categories=("Flexi Cap", "Mid Cap"),
            share=0.4,
            rank_by="returns_3y",
            reason="Satellite - Balanced growth",
        ),
        EquitySleeve(
            categories=("Small Cap",),
            share=0.1,
            rank_by="returns_3y",
            reason="Satellite - Small allocation to small cap",
        ),
    ],
    "Conservative": [
        EquitySleeve(
            categories=("Flexi Cap",),
            share=0.5,
            rank_by="returns_5y",
            reason="Satellite - Flexi cap for conservative equity",
            takes_remainder=True,
        ),
    ],
}


def _format_number(value: float) -> str:
    """Shortest round-trip text for a ratio, without a trailing ".0"."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _cheapest_core_fund(mutual_funds: Sequence[MutualFund]) -> Optional[MutualFund]:
    eligible = [
        f
        for f in mutual_funds
        if f.category == "Large Cap" and f.expense_ratio < CORE_EXPENSE_RATIO_LIMIT
    ]
    eligible.sort(key=lambda f: f.expense_ratio)
    return eligible[0] if eligible else None


def _best_performer(
    mutual_funds: Sequence[MutualFund], sleeve: EquitySleeve
) -> Optional[MutualFund]:
    """Highest trailing return in the sleeve; missing returns count as 0."""
    eligible = [f for f in mutual_funds if f.category in sleeve.categories]
    eligible.sort(
        key=lambda f: (
            -(getattr(f, sleeve.rank_by) or 0),
            sleeve.categories.index(f.category),
        )
    )
    return eligible[0] if eligible else None


def _debt_fund(
    mutual_funds: Sequence[MutualFund], risk_tolerance: RiskTolerance
) -> Optional[MutualFund]:
    preferred = "Short Duration" if risk_tolerance == "Conservative" else "Corporate Bond"
    eligible = [
        f for f in mutual_funds if f.category in (preferred, "Corporate Bond")
    ]
    eligible.sort(key=lambda f: f.expense_ratio)
    return eligible[0] if eligible else None


def select_sip_basket(
    mutual_funds: Sequence[MutualFund],
    target_equity_pct: float,
    target_debt_pct: float,
    risk_tolerance: RiskTolerance,
    monthly_amount: float,
) -> List[SuggestedSIP]:
    """Build a core-satellite SIP basket for the monthly investable amount.

    The amount is split into equity and debt buckets by the target
    percentages. Half of the equity bucket goes to the cheapest low-cost
    large cap fund; the rest follows the risk tolerance's satellite table.
    The debt bucket goes to a single low-cost bond fund. A slot whose
    categories have no fund in the catalog is left out.

    Args:
        mutual_funds: Catalog of mutual funds
        target_equity_pct: Equity share of the basket (%)
        target_debt_pct: Debt share of the basket (%)
        risk_tolerance: Conservative, Moderate or Aggressive
        monthly_amount: Monthly amount to invest

    Returns:
        Basket entries; allocation_pct is relative to the whole basket
    """
    basket: List[SuggestedSIP] = []

    if monthly_amount <= 0 or (target_equity_pct == 0 and target_debt_pct == 0):
        return basket

    if target_equity_pct > 0:
        equity_amount = round_half_up(monthly_amount * target_equity_pct / 100)
        core_amount = round_half_up(equity_amount * CORE_EQUITY_SHARE)

        core = _cheapest_core_fund(mutual_funds)
        if core is not None:
            basket.append(
                SuggestedSIP(
                    fund=core,
                    allocation_pct=target_equity_pct * CORE_EQUITY_SHARE,
                    monthly_amount=core_amount,
                    reason="Core equity allocation - Low cost index fund",
                )
            )

        for sleeve in EQUITY_SLEEVES.get(risk_tolerance, EQUITY_SLEEVES["Moderate"]):
            fund = _best_performer(mutual_funds, sleeve)
            if fund is None:
                continue
            if sleeve.takes_remainder:
                amount = equity_amount - core_amount
            else:
                amount = round_half_up(equity_amount * sleeve.share)
            basket.append(
                SuggestedSIP(
                    fund=fund,
                    allocation_pct=target_equity_pct * sleeve.share,
                    monthly_amount=amount,
                    reason=sleeve.reason,
                )
            )

    if target_debt_pct > 0:
        debt_fund = _debt_fund(mutual_funds, risk_tolerance)
        if debt_fund is not None:
            basket.append(
                SuggestedSIP(
                    fund=debt_fund,
                    allocation_pct=target_debt_pct,
                    monthly_amount=round_half_up(monthly_amount * target_debt_pct / 100),
                    reason=f"Debt allocation - {debt_fund.category}",
                )
            )

    return basket


def select_parking_options(
    mutual_funds: Sequence[MutualFund],
    fd_rates: Sequence[FDRate],
    months_to_reach: int,
    target_amount: float,
) -> List[SuggestedParking]:
    """Split the emergency fund target 50/50 between a liquid fund and a safe FD.

    Horizons of six months or less use an overnight fund instead of a
    liquid fund. FDs must be Government or AAA rated and open at a tenure of
    twelve months or less; the highest general rate wins.
    """
    options: List[SuggestedParking] = []

    if target_amount <= 0:
        return options

    liquid_category = "Overnight" if months_to_reach <= SHORT_HORIZON_MONTHS else "Liquid"
    liquid_funds = sorted(
        (f for f in mutual_funds if f.category == liquid_category),
        key=lambda f: f.expense_ratio,
    )
    if liquid_funds:
        fund = liquid_funds[0]
        options.append(
            SuggestedParking(
                option=fund,
                type="liquid_fund",
                allocation_pct=PARKING_SHARE * 100,
                amount=round_half_up(target_amount * PARKING_SHARE),
                reason=f"High liquidity - {fund.category} fund",
            )
        )

    safe_fds = sorted(
        (
            fd
            for fd in fd_rates
            if fd.rating_band in SAFE_FD_RATINGS
            and fd.tenure_min_m <= MAX_FD_MIN_TENURE_M
        ),
        key=lambda fd: fd.rate_general,
        reverse=True,
    )
    if safe_fds:
        fd = safe_fds[0]
        options.append(
            SuggestedParking(
                option=fd,
                type="fd",
                allocation_pct=PARKING_SHARE * 100,
                amount=round_half_up(target_amount * PARKING_SHARE),
                reason=f"Safe returns - {fd.institution} FD",
            )
        )

    return options


def compare_term_policies(a: TermInsurance, b: TermInsurance) -> float:
    """Order by claim settlement ratio, falling back to solvency when close.

    Ratios within ``CSR_TIE_THRESHOLD`` points of each other are treated as
    equal and ranked by solvency ratio instead. This comparator is not
    transitive, so results depend on the (stable) sort seeing the catalog
    in its given order.
    """
    csr_diff = b.claim_settlement_ratio - a.claim_settlement_ratio
    if abs(csr_diff) > CSR_TIE_THRESHOLD:
        return csr_diff
    return b.solvency_ratio - a.solvency_ratio


def select_term_insurance(
    policies: Sequence[TermInsurance], recommended_cover: float
) -> List[SuggestedTerm]:
    """Shortlist up to three term policies able to carry the cover."""
    if recommended_cover <= 0:
        return []

    eligible = [p for p in policies if p.max_sum_insured >= recommended_cover]
    ranked = sorted(eligible, key=cmp_to_key(compare_term_policies))

    return [
        SuggestedTerm(
            policy=p,
            reason=(
                f"CSR: {_format_number(p.claim_settlement_ratio)}% | "
                f"Solvency: {_format_number(p.solvency_ratio)}"
            ),
        )
        for p in ranked[:SHORTLIST_SIZE]
    ]


def select_health_insurance(
    policies: Sequence[HealthInsurance], recommended_cover: float
) -> List[SuggestedHealth]:
    """Shortlist the three cheapest health plans offering enough sum insured."""
    if recommended_cover <= 0:
        return []

    eligible = [
        p
        for p in policies
        if any(band >= recommended_cover for band in p.sum_insured_bands)
    ]
    ranked = sorted(eligible, key=lambda p: p.sample_premium_family_float)

    return [
        SuggestedHealth(
            policy=p,
            reason=f"{p.copay} | Restoration: {'Yes' if p.restoration else 'No'}",
        )
        for p in ranked[:SHORTLIST_SIZE]
    ]
