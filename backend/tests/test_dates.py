"""Tests for calendar arithmetic on note dates."""
from datetime import date, datetime

import pytest

from loandocs.errors import InvalidLoanParametersError
from loandocs.finance.dates import (
    add_months,
    compute_first_payment_date,
    compute_maturity_date,
    days_between,
    payment_date,
)
from loandocs.models.schedule import PaymentDateRule


class TestAddMonths:
    def test_simple(self):
        assert add_months(date(2024, 3, 15), 2) == date(2024, 5, 15)

    def test_year_carry(self):
        assert add_months(date(2024, 11, 15), 3) == date(2025, 2, 15)

    def test_month_end_clamped(self):
        assert add_months(date(2024, 3, 31), 1) == date(2024, 4, 30)

    def test_datetime_reduced_to_date(self):
        assert add_months(datetime(2024, 1, 10, 23, 30), 1) == date(2024, 2, 10)


class TestMaturityDate:
    def test_leap_year_february(self):
        assert compute_maturity_date(date(2024, 1, 31), 1) == date(2024, 2, 29)

    def test_non_leap_february(self):
        assert compute_maturity_date(date(2023, 1, 31), 1) == date(2023, 2, 28)

    def test_zero_months(self):
        assert compute_maturity_date(date(2024, 6, 1), 0) == date(2024, 6, 1)

    def test_long_term(self):
        assert compute_maturity_date(date(2024, 2, 29), 120) == date(2034, 2, 28)

    def test_negative_term_raises(self):
        with pytest.raises(InvalidLoanParametersError):
            compute_maturity_date(date(2024, 1, 1), -1)

    def test_negative_term_is_value_error(self):
        with pytest.raises(ValueError):
            compute_maturity_date(date(2024, 1, 1), -12)


class TestFirstPaymentDate:
    def test_mid_month(self):
        assert compute_first_payment_date(date(2024, 3, 15)) == date(2024, 4, 1)

    def test_first_of_month(self):
        assert compute_first_payment_date(date(2024, 3, 1)) == date(2024, 4, 1)

    def test_december_rolls_year(self):
        assert compute_first_payment_date(date(2024, 12, 31)) == date(2025, 1, 1)


class TestDaysBetween:
    def test_whole_days(self):
        assert days_between(date(2024, 3, 15), date(2024, 4, 1)) == 17

    def test_ignores_time_of_day(self):
        assert days_between(datetime(2024, 3, 1, 23, 59), datetime(2024, 3, 2, 0, 1)) == 1

    def test_negative_when_reversed(self):
        assert days_between(date(2024, 4, 1), date(2024, 3, 15)) == -17

    def test_across_leap_day(self):
        assert days_between(date(2024, 2, 28), date(2024, 3, 1)) == 2


class TestPaymentDate:
    def test_first_payment(self):
        assert payment_date(date(2024, 4, 1), 1) == date(2024, 4, 1)

    def test_clamp_28_caps_day(self):
        assert payment_date(date(2024, 1, 31), 1) == date(2024, 1, 28)
        assert payment_date(date(2024, 1, 31), 2) == date(2024, 2, 28)
        assert payment_date(date(2024, 1, 31), 3) == date(2024, 3, 28)

    def test_month_end_follows_calendar(self):
        first = date(2024, 1, 31)
        assert payment_date(first, 2, PaymentDateRule.month_end) == date(2024, 2, 29)
        assert payment_date(first, 3, PaymentDateRule.month_end) == date(2024, 3, 31)
        assert payment_date(first, 4, "month_end") == date(2024, 4, 30)

    def test_unknown_rule_rejected(self):
        with pytest.raises(ValueError):
            payment_date(date(2024, 1, 1), 2, "weekly")
