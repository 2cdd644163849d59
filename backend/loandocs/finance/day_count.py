"""Per-diem interest under Actual/360 and Actual/365.

Commercial settlement statements accrue on Actual/360; consumer disclosures
accrue on Actual/365. A document uses one convention throughout.
"""
from __future__ import annotations

import logging
from datetime import date, datetime

from loandocs.finance.dates import days_between
from loandocs.models.disclosure import DayCount, ProratedInterest

logger = logging.getLogger(__name__)


def per_diem_interest(principal: float, annual_rate: float, convention: DayCount | str) -> float:
    """One day of interest: principal * rate / (360 or 365)."""
    convention = DayCount(convention)
    return principal * annual_rate / convention.denominator


def prorated_interest(
    principal: float,
    annual_rate: float,
    start: date | datetime,
    end: date | datetime,
    convention: DayCount | str,
) -> ProratedInterest:
    """Interest accrued from ``start`` to ``end`` (e.g. closing to first payment)."""
    convention = DayCount(convention)
    days = days_between(start, end)
    if days < 0:
        logger.warning("Proration end %s precedes start %s, accruing zero days", end, start)
        days = 0
    daily = per_diem_interest(principal, annual_rate, convention)
    return ProratedInterest(
        convention=convention,
        start_date=start.date() if isinstance(start, datetime) else start,
        end_date=end.date() if isinstance(end, datetime) else end,
        days=days,
        per_diem=daily,
        amount=daily * days,
    )
