"""Private-fund distribution waterfall, for display in offering documents.

Four tiers, applied in order to distributable cash:

1. Return of capital, pro rata, until contributions are returned.
2. Preferred return, compounding annually on unreturned capital.
3. GP catch-up until the GP holds its carry share of tiers 2-3 combined.
4. Residual split at the carried-interest rate.

This is presentational arithmetic (percentages and a dollar illustration),
not a distribution ledger.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from loandocs.errors import InvalidFundTermsError
from loandocs.models.fund import (
    DistributionIllustration,
    DistributionStep,
    FundTerms,
    Waterfall,
    WaterfallTier,
)

_HUNDRED = Decimal("100")
_ONE_DECIMAL = Decimal("0.1")


def _check_fraction(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise InvalidFundTermsError(f"{name} must be between 0 and 1, got {value}")


def split_percentages(gp_fraction: float) -> tuple[Decimal, Decimal]:
    """Display (GP %, LP %) for a split, one decimal, summing to exactly 100."""
    _check_fraction("gp_fraction", gp_fraction)
    gp = (Decimal(str(gp_fraction)) * _HUNDRED).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    return gp, _HUNDRED - gp


def gp_commitment_percent(gp_commitment: float, target_raise: float) -> float:
    """GP commitment as a fraction of the target raise; 0 when there is no target."""
    if target_raise <= 0:
        return 0.0
    return gp_commitment / target_raise


def format_gp_commitment_percent(gp_commitment: float, target_raise: float) -> str:
    if target_raise <= 0:
        return "0%"
    return f"{gp_commitment_percent(gp_commitment, target_raise) * 100:.1f}%"


def _catch_up_fraction(terms: FundTerms) -> float:
    if terms.catch_up_percentage is None:
        return terms.carried_interest
    return terms.catch_up_percentage


def _validate(terms: FundTerms) -> None:
    _check_fraction("carried_interest", terms.carried_interest)
    _check_fraction("catch_up_percentage", _catch_up_fraction(terms))
    if terms.preferred_return < 0:
        raise InvalidFundTermsError(
            f"preferred_return must be non-negative, got {terms.preferred_return}"
        )
    if terms.target_raise < 0 or terms.gp_commitment < 0:
        raise InvalidFundTermsError("target_raise and gp_commitment must be non-negative")


def build_waterfall(terms: FundTerms) -> Waterfall:
    """Tier table for the offering documents.

    Catch-up and carry tiers only appear when the fund charges carried
    interest; otherwise everything past the preferred return is pro rata.
    """
    _validate(terms)
    pref = f"{terms.preferred_return * 100:.1f}%"
    tiers = [
        WaterfallTier(
            tier=1,
            name="Return of Capital",
            description="100% to all Partners, pro rata, until each Partner has received "
                        "distributions equal to its unreturned capital contributions.",
            gp_percent=0.0,
            lp_percent=100.0,
        ),
        WaterfallTier(
            tier=2,
            name="Preferred Return",
            description=f"100% to all Partners, pro rata, until each Partner has received a "
                        f"cumulative compounded annual return of {pref} on unreturned capital "
                        f"contributions.",
            gp_percent=0.0,
            lp_percent=100.0,
        ),
    ]

    carry = terms.carried_interest
    if carry > 0:
        carry_gp, carry_lp = split_percentages(carry)
        cu_gp, cu_lp = split_percentages(_catch_up_fraction(terms))
        tiers.append(WaterfallTier(
            tier=3,
            name="GP Catch-Up",
            description=f"{cu_gp}% to the General Partner and {cu_lp}% to the Limited Partners "
                        f"until the General Partner has received {carry_gp}% of the aggregate "
                        f"amounts distributed under Tiers 2 and 3.",
            gp_percent=float(cu_gp),
            lp_percent=float(cu_lp),
        ))
        tiers.append(WaterfallTier(
            tier=4,
            name="Carried Interest Split",
            description=f"{carry_lp}% to the Limited Partners, pro rata, and {carry_gp}% to the "
                        f"General Partner as carried interest.",
            gp_percent=float(carry_gp),
            lp_percent=float(carry_lp),
        ))
    else:
        tiers.append(WaterfallTier(
            tier=3,
            name="Remaining Distributions",
            description="100% to all Partners, pro rata.",
            gp_percent=0.0,
            lp_percent=100.0,
        ))

    return Waterfall(
        fund_name=terms.fund_name,
        tiers=tiers,
        gp_commitment_percent=gp_commitment_percent(terms.gp_commitment, terms.target_raise),
        gp_commitment_display=format_gp_commitment_percent(terms.gp_commitment, terms.target_raise),
    )


def illustrate_distribution(
    terms: FundTerms,
    distributable_cash: float,
    contributed_capital: float,
    years: float,
) -> DistributionIllustration:
    """Walk one distribution through the tiers to show who receives what.

    Tiers 1-2 are paid to the partners as a class (shown on the LP side). A
    catch-up at or below the carry rate can never close the gap, so in that
    case tier 3 receives nothing and the residual split applies directly.
    """
    _validate(terms)
    if distributable_cash < 0 or contributed_capital < 0 or years < 0:
        raise InvalidFundTermsError(
            "distributable_cash, contributed_capital and years must be non-negative"
        )

    remaining = distributable_cash
    steps: list[DistributionStep] = []

    returned = min(remaining, contributed_capital)
    remaining -= returned
    steps.append(DistributionStep(tier=1, name="Return of Capital", amount=returned,
                                  to_gp=0.0, to_lp=returned))

    pref_due = contributed_capital * ((1.0 + terms.preferred_return) ** years - 1.0)
    pref_paid = min(remaining, pref_due)
    remaining -= pref_paid
    steps.append(DistributionStep(tier=2, name="Preferred Return", amount=pref_paid,
                                  to_gp=0.0, to_lp=pref_paid))

    carry = terms.carried_interest
    if carry > 0:
        catch_up = _catch_up_fraction(terms)
        target = carry * pref_paid / (catch_up - carry) if catch_up > carry else 0.0
        caught_up = min(remaining, target)
        remaining -= caught_up
        steps.append(DistributionStep(tier=3, name="GP Catch-Up", amount=caught_up,
                                      to_gp=caught_up * catch_up,
                                      to_lp=caught_up * (1.0 - catch_up)))
        steps.append(DistributionStep(tier=4, name="Carried Interest Split", amount=remaining,
                                      to_gp=remaining * carry,
                                      to_lp=remaining * (1.0 - carry)))
    else:
        steps.append(DistributionStep(tier=3, name="Remaining Distributions", amount=remaining,
                                      to_gp=0.0, to_lp=remaining))

    return DistributionIllustration(
        distributable_cash=distributable_cash,
        contributed_capital=contributed_capital,
        years=years,
        steps=steps,
        total_to_gp=sum(s.to_gp for s in steps),
        total_to_lp=sum(s.to_lp for s in steps),
    )
