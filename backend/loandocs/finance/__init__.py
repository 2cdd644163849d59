"""Deterministic loan and fund math: dates, day counts, schedules, APR, waterfalls."""
from loandocs.finance.dates import (
    add_months,
    compute_first_payment_date,
    compute_maturity_date,
    days_between,
    payment_date,
)
from loandocs.finance.day_count import per_diem_interest, prorated_interest
from loandocs.finance.payment import level_monthly_payment
from loandocs.finance.amortization import build_amortization_schedule, schedule_from_terms
from loandocs.finance.apr import solve_apr, total_interest_percentage
from loandocs.finance.waterfall import build_waterfall, illustrate_distribution, split_percentages

__all__ = [
    "add_months",
    "compute_first_payment_date",
    "compute_maturity_date",
    "days_between",
    "payment_date",
    "per_diem_interest",
    "prorated_interest",
    "level_monthly_payment",
    "build_amortization_schedule",
    "schedule_from_terms",
    "solve_apr",
    "total_interest_percentage",
    "build_waterfall",
    "illustrate_distribution",
    "split_percentages",
]
