"""Level monthly payment for priced terms that arrive without one."""
from __future__ import annotations


def level_monthly_payment(
    principal: float,
    annual_rate: float,
    amortization_months: int,
    interest_only: bool = False,
) -> float:
    """Standard annuity payment over the amortization period.

    PMT = P * r(1+r)^n / ((1+r)^n - 1), r = annual_rate / 12

    Interest-only loans pay P * r. Kept to 4 decimals so the schedule does not
    compound display rounding.
    """
    if principal <= 0:
        return 0.0
    monthly_rate = annual_rate / 12.0
    if interest_only or amortization_months <= 0:
        return round(principal * monthly_rate, 4)
    if monthly_rate == 0:
        return round(principal / amortization_months, 4)
    factor = (1.0 + monthly_rate) ** amortization_months
    return round(principal * monthly_rate * factor / (factor - 1.0), 4)
