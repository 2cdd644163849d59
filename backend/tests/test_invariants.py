"""Invariant tests: properties that must hold regardless of parameters.

Covers schedule completeness, balloon and interest-only structure, month-end
date handling, APR monotonicity and bounds, day-count ordering, and waterfall
split closure.
"""
from datetime import date
from decimal import Decimal

import pytest

from loandocs.finance.amortization import build_amortization_schedule, schedule_from_terms
from loandocs.finance.apr import solve_apr
from loandocs.finance.dates import compute_maturity_date
from loandocs.finance.day_count import per_diem_interest
from loandocs.finance.payment import level_monthly_payment
from loandocs.finance.waterfall import build_waterfall, split_percentages
from loandocs.models.disclosure import DayCount
from loandocs.models.fund import FundTerms
from loandocs.models.loan import LoanTerms
from loandocs.services.disclosure_service import build_finance_disclosure

FIRST_PAYMENT = date(2024, 5, 1)

LOAN_GRID = [
    (50_000.0, 0.045, 60),
    (250_000.0, 0.0725, 120),
    (1_500_000.0, 0.0899, 240),
    (400_000.0, 0.06, 360),
    (10_000.0, 0.18, 12),
]


def _make_terms(**overrides) -> LoanTerms:
    defaults = dict(
        principal=750_000.0,
        interest_rate=0.0675,
        term_months=120,
        amortization_months=300,
    )
    defaults.update(overrides)
    return LoanTerms(**defaults)


# ---------------------------------------------------------------------------
# Amortization completeness
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("principal,rate,months", LOAN_GRID)
def test_principal_portions_sum_to_loan(principal, rate, months):
    schedule = build_amortization_schedule(
        principal, rate, months, months, level_monthly_payment(principal, rate, months),
        False, FIRST_PAYMENT,
    )
    assert sum(r.principal for r in schedule.rows) == pytest.approx(principal, abs=0.01)
    assert schedule.balloon_row is None


@pytest.mark.parametrize("principal,rate,months", LOAN_GRID)
def test_balance_non_increasing_and_reaches_zero(principal, rate, months):
    schedule = build_amortization_schedule(
        principal, rate, months, months, level_monthly_payment(principal, rate, months),
        False, FIRST_PAYMENT,
    )
    balances = [r.balance for r in schedule.rows]
    for prev, cur in zip(balances, balances[1:]):
        assert cur <= prev
    assert balances[-1] <= 0.01


# ---------------------------------------------------------------------------
# Balloon correctness
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("term,amortization", [(12, 360), (60, 300), (84, 240), (119, 120)])
def test_single_balloon_equals_prior_balance(term, amortization):
    schedule = schedule_from_terms(
        _make_terms(term_months=term, amortization_months=amortization), FIRST_PAYMENT,
    )
    balloons = [r for r in schedule.rows if r.is_balloon]
    assert len(balloons) == 1
    assert schedule.rows[-1] is balloons[0]
    assert balloons[0].payment == pytest.approx(schedule.rows[-2].balance)
    assert len(schedule.regular_rows) == term


# ---------------------------------------------------------------------------
# Interest-only invariant
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("term", [1, 12, 36, 120])
def test_interest_only_never_amortizes(term):
    schedule = schedule_from_terms(
        _make_terms(term_months=term, interest_only=True), FIRST_PAYMENT,
    )
    for row in schedule.regular_rows:
        assert row.principal == 0.0
        assert row.balance == 750_000.0
        assert row.payment == pytest.approx(750_000.0 * 0.0675 / 12)


# ---------------------------------------------------------------------------
# Maturity date month-end correctness
# ---------------------------------------------------------------------------


def test_maturity_month_end_leap_year():
    assert compute_maturity_date(date(2024, 1, 31), 1) == date(2024, 2, 29)


def test_maturity_month_end_common_year():
    assert compute_maturity_date(date(2023, 1, 31), 1) == date(2023, 2, 28)


@pytest.mark.parametrize("start", [date(2023, 1, 31), date(2024, 8, 31), date(2024, 12, 30)])
@pytest.mark.parametrize("months", [0, 1, 2, 5, 13, 59, 120])
def test_maturity_month_is_exact(start, months):
    result = compute_maturity_date(start, months)
    expected_index = start.year * 12 + start.month - 1 + months
    assert (result.year, result.month - 1) == divmod(expected_index, 12)
    assert result.day <= start.day


# ---------------------------------------------------------------------------
# APR monotonicity and sanity bound
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("term", [12, 60, 360])
def test_apr_increases_with_finance_charge(term):
    aprs = [
        solve_apr(100_000.0, charge, None, term).apr
        for charge in (1_000.0, 5_000.0, 20_000.0, 80_000.0)
    ]
    for lower, higher in zip(aprs, aprs[1:]):
        assert higher > lower


@pytest.mark.parametrize("principal,rate,months", LOAN_GRID)
def test_apr_exceeds_note_rate_with_prepaid_charges(principal, rate, months):
    terms = LoanTerms(principal=principal, interest_rate=rate, term_months=months,
                      amortization_months=months)
    disclosure = build_finance_disclosure(terms, date(2024, 3, 12), date(2024, 4, 1))
    assert disclosure.prepaid_finance_charges > 0
    assert disclosure.apr_converged
    assert disclosure.apr > rate * 100


# ---------------------------------------------------------------------------
# Day-count consistency
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("principal", [1.0, 99_999.99, 2_500_000.0])
@pytest.mark.parametrize("rate", [0.0, 0.0001, 0.065, 0.24])
def test_actual_360_per_diem_at_least_actual_365(principal, rate):
    assert per_diem_interest(principal, rate, DayCount.actual_360) >= per_diem_interest(
        principal, rate, DayCount.actual_365
    )


# ---------------------------------------------------------------------------
# Waterfall split closure
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("carry", [i / 200 for i in range(201)] + [0.123456, 0.333333, 0.6667])
def test_split_sums_to_exactly_100(carry):
    gp, lp = split_percentages(carry)
    assert gp + lp == Decimal("100")


@pytest.mark.parametrize("carry", [0.05, 0.15, 0.175, 0.2, 0.25, 0.3])
@pytest.mark.parametrize("catch_up", [None, 0.5, 0.8, 1.0])
def test_tier_percentages_sum_to_100(carry, catch_up):
    waterfall = build_waterfall(FundTerms(target_raise=10_000_000.0, carried_interest=carry,
                                          catch_up_percentage=catch_up))
    for tier in waterfall.tiers:
        assert tier.gp_percent + tier.lp_percent == 100.0
