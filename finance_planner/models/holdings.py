"""
Tracked SIPs and asset holdings saved alongside a household profile.
"""

from datetime import datetime
from typing import Dict, List, Literal, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .inputs import UserInputs

SipCategory = Literal["Equity", "Debt", "Gold"]
AssetBucket = Literal["Equity", "Debt", "Gold", "EPF/PPF", "Cash/Liquid"]

SIP_CATEGORIES: List[str] = ["Equity", "Debt", "Gold"]
ASSET_BUCKETS: List[str] = ["Equity", "Debt", "Gold", "EPF/PPF", "Cash/Liquid"]


class SipItem(BaseModel):
    """A SIP the household is already running."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category: SipCategory
    monthly: float = Field(..., ge=0, description="Monthly instalment")
    start: str = Field(default="", description="Start date (ISO format)")


class AssetItem(BaseModel):
    """An existing holding grouped by asset bucket."""

    id: str = Field(..., min_length=1)
    bucket: AssetBucket
    amount: float = Field(..., ge=0)


class SavedProfile(BaseModel):
    """Everything persisted for one household between sessions."""

    inputs: UserInputs = Field(default_factory=UserInputs)
    tracked_sips: List[SipItem] = Field(default_factory=list)
    assets: List[AssetItem] = Field(default_factory=list)
    saved_at: Optional[datetime] = None


class HoldingsSummary(BaseModel):
    """Totals of tracked SIPs and assets."""

    model_config = ConfigDict(frozen=True)

    monthly_sip_by_category: Dict[str, float]
    total_monthly_sip: float
    assets_by_bucket: Dict[str, float]
    total_assets: float
    asset_allocation_pct: Dict[str, float] = Field(
        ..., description="Bucket share of total assets (%), 0 when nothing is held"
    )


def summarize_holdings(
    sips: Sequence[SipItem], assets: Sequence[AssetItem]
) -> HoldingsSummary:
    """Total tracked SIPs per category and assets per bucket."""
    monthly_sip_by_category = {category: 0.0 for category in SIP_CATEGORIES}
    for sip in sips:
        monthly_sip_by_category[sip.category] += sip.monthly

    assets_by_bucket = {bucket: 0.0 for bucket in ASSET_BUCKETS}
    for asset in assets:
        assets_by_bucket[asset.bucket] += asset.amount

    total_assets = sum(assets_by_bucket.values())
    if total_assets > 0:
        allocation = {
            bucket: amount / total_assets * 100
            for bucket, amount in assets_by_bucket.items()
        }
    else:
        allocation = {bucket: 0.0 for bucket in ASSET_BUCKETS}

    return HoldingsSummary(
        monthly_sip_by_category=monthly_sip_by_category,
        total_monthly_sip=sum(monthly_sip_by_category.values()),
        assets_by_bucket=assets_by_bucket,
        total_assets=total_assets,
        asset_allocation_pct=allocation,
    )
