from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from loandocs.errors import InvalidFundTermsError
from loandocs.finance.waterfall import build_waterfall, illustrate_distribution
from loandocs.models.fund import DistributionIllustration, Waterfall
from loandocs.models.requests import FundRequest

router = APIRouter(tags=["funds"])


class WaterfallResponse(BaseModel):
    waterfall: Waterfall
    illustration: Optional[DistributionIllustration] = None


@router.post("/funds/waterfall", response_model=WaterfallResponse)
def fund_waterfall(request: FundRequest):
    """Tier table, plus a dollar illustration when a scenario is supplied."""
    try:
        waterfall = build_waterfall(request.fund_terms)
        illustration = None
        if request.illustration is not None:
            illustration = illustrate_distribution(
                request.fund_terms,
                request.illustration.distributable_cash,
                request.illustration.contributed_capital,
                request.illustration.years,
            )
    except InvalidFundTermsError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return WaterfallResponse(waterfall=waterfall, illustration=illustration)
