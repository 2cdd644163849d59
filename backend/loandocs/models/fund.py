from typing import Optional

from pydantic import BaseModel


class FundTerms(BaseModel):
    """Economic terms of a private fund offering."""
    fund_name: str = "[Fund Name]"
    target_raise: float
    gp_commitment: float = 0.0
    preferred_return: float = 0.08
    carried_interest: float = 0.20
    catch_up_percentage: Optional[float] = None  # None: catch-up splits at the carry rate
    management_fee: Optional[float] = None


class WaterfallTier(BaseModel):
    tier: int
    name: str
    description: str
    gp_percent: float
    lp_percent: float


class Waterfall(BaseModel):
    fund_name: str
    tiers: list[WaterfallTier]
    gp_commitment_percent: float
    gp_commitment_display: str


class DistributionStep(BaseModel):
    tier: int
    name: str
    amount: float
    to_gp: float
    to_lp: float


class DistributionIllustration(BaseModel):
    """Dollar walk of a single distribution through the tiers."""
    distributable_cash: float
    contributed_capital: float
    years: float
    steps: list[DistributionStep]
    total_to_gp: float
    total_to_lp: float
