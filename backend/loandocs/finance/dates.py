"""Calendar arithmetic for note dates.

All functions work on ``datetime.date``; a ``datetime`` is reduced to its
calendar date first so time-of-day and timezone never shift a count.
"""
from __future__ import annotations

import calendar
from datetime import date, datetime

from loandocs.errors import InvalidLoanParametersError
from loandocs.models.schedule import PaymentDateRule

_PAYMENT_DAY_CAP = 28


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def add_months(start: date | datetime, months: int) -> date:
    """Add calendar months, clamping the day to the target month's length."""
    start = _as_date(start)
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(start.day, last_day))


def compute_maturity_date(start: date | datetime, term_months: int) -> date:
    """Maturity date ``term_months`` after ``start``.

    Month-end overflow rolls back to the last day of the intended month:
    Jan 31 + 1 month is Feb 28 (Feb 29 in a leap year), never Mar 3.
    """
    if term_months < 0:
        raise InvalidLoanParametersError(
            f"term_months must be non-negative, got {term_months}"
        )
    return add_months(start, term_months)


def compute_first_payment_date(closing_date: date | datetime) -> date:
    """First day of the month following closing."""
    closing_date = _as_date(closing_date)
    return add_months(closing_date.replace(day=1), 1)


def days_between(a: date | datetime, b: date | datetime) -> int:
    """Whole days from ``a`` to ``b`` counted at midnight boundaries.

    Negative when ``b`` precedes ``a``.
    """
    return (_as_date(b) - _as_date(a)).days


def payment_date(
    first_payment_date: date | datetime,
    payment_number: int,
    rule: PaymentDateRule | str = PaymentDateRule.clamp_28,
) -> date:
    """Due date of the ``payment_number``-th payment (1-based)."""
    first = _as_date(first_payment_date)
    rule = PaymentDateRule(rule)
    if rule is PaymentDateRule.clamp_28:
        first = first.replace(day=min(first.day, _PAYMENT_DAY_CAP))
    return add_months(first, payment_number - 1)
