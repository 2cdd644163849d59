"""Truth-in-lending figures for the Loan Estimate / Closing Disclosure.

Prepaid interest is accrued Actual/365 from the document date to the first
payment date, the consumer-disclosure convention. Everything else comes off
the amortization schedule so the total of payments always matches the table
printed beside it.
"""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from loandocs.config import settings
from loandocs.finance.amortization import schedule_from_terms
from loandocs.finance.apr import solve_apr, total_interest_percentage
from loandocs.finance.day_count import prorated_interest
from loandocs.models.disclosure import DayCount, FinanceDisclosure
from loandocs.models.loan import Fee, LoanTerms
from loandocs.models.schedule import AmortizationSchedule, PaymentDateRule

logger = logging.getLogger(__name__)

_ORIGINATION_KEYWORDS = (
    "origination", "discount", "underwriting", "processing", "application", "commitment",
)


def is_origination_fee(fee: Fee) -> bool:
    """Lender charges that count as prepaid finance charges."""
    lower = fee.name.lower()
    return any(keyword in lower for keyword in _ORIGINATION_KEYWORDS)


def build_finance_disclosure(
    terms: LoanTerms,
    generated_at: date | datetime,
    first_payment_date: date | datetime,
    maturity_date: Optional[date | datetime] = None,
    payment_date_rule: PaymentDateRule | str | None = None,
    include_origination_fees: bool = False,
    schedule: Optional[AmortizationSchedule] = None,
) -> FinanceDisclosure:
    """Compute total of payments, finance charge, amount financed, APR and TIP.

    Prepaid finance charges are the prepaid interest, plus origination-type
    fees when ``include_origination_fees`` is set. A precomputed ``schedule``
    for the same terms may be passed to avoid rebuilding it.
    """
    if schedule is None:
        schedule = schedule_from_terms(
            terms, first_payment_date, maturity_date,
            payment_date_rule or settings.PAYMENT_DATE_RULE,
        )

    prepaid = prorated_interest(
        terms.principal, terms.interest_rate, generated_at, first_payment_date, DayCount.actual_365,
    )
    prepaid_finance_charges = prepaid.amount
    if include_origination_fees:
        prepaid_finance_charges += sum(f.amount for f in terms.fees if is_origination_fee(f))

    total_of_payments = schedule.total_payments
    finance_charge = total_of_payments - terms.principal + prepaid_finance_charges
    amount_financed = terms.principal - prepaid_finance_charges

    regular = schedule.regular_rows
    apr = solve_apr(
        amount_financed,
        finance_charge,
        regular[0].payment,
        len(regular),
        balloon=schedule.balloon_amount,
        max_iterations=settings.APR_MAX_ITERATIONS,
        tolerance=settings.APR_TOLERANCE,
    )
    logger.info(
        "Disclosure computed: principal=%.2f apr=%.3f%% converged=%s",
        terms.principal, apr.apr, apr.converged,
    )

    return FinanceDisclosure(
        total_of_payments=total_of_payments,
        finance_charge=finance_charge,
        amount_financed=amount_financed,
        apr=apr.apr,
        apr_converged=apr.converged,
        apr_iterations=apr.iterations,
        total_interest_percentage=total_interest_percentage(total_of_payments, terms.principal),
        prepaid_interest=prepaid,
        prepaid_finance_charges=prepaid_finance_charges,
        balloon_amount=schedule.balloon_amount,
    )
