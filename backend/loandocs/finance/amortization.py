"""Amortization schedule builder.

Walks the note month by month at the nominal monthly rate (annual / 12),
applying the priced level payment. When the amortization period outruns the
term, whatever principal remains at the end of the term is due as a balloon
at maturity.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from loandocs.errors import InvalidLoanParametersError
from loandocs.finance.dates import compute_maturity_date, payment_date
from loandocs.finance.payment import level_monthly_payment
from loandocs.models.loan import LoanTerms
from loandocs.models.schedule import AmortizationRow, AmortizationSchedule, PaymentDateRule

BALANCE_EPSILON = 0.01


def validate_loan_parameters(
    principal: float,
    annual_rate: float,
    term_months: int,
    amortization_months: int,
    monthly_payment: Optional[float],
    interest_only: bool,
) -> None:
    """Raise InvalidLoanParametersError for terms that cannot produce a schedule."""
    if principal <= 0:
        raise InvalidLoanParametersError(f"principal must be positive, got {principal}")
    if term_months < 1:
        raise InvalidLoanParametersError(f"term_months must be at least 1, got {term_months}")
    if amortization_months < 1:
        raise InvalidLoanParametersError(
            f"amortization_months must be at least 1, got {amortization_months}"
        )
    if annual_rate < 0:
        raise InvalidLoanParametersError(f"interest_rate must be non-negative, got {annual_rate}")
    if interest_only:
        return
    if monthly_payment is None or monthly_payment <= 0:
        raise InvalidLoanParametersError(
            f"monthly_payment must be positive for an amortizing loan, got {monthly_payment}"
        )
    first_interest = principal * annual_rate / 12.0
    if monthly_payment <= first_interest:
        raise InvalidLoanParametersError(
            f"monthly_payment {monthly_payment:.2f} does not cover first-month "
            f"interest {first_interest:.2f}"
        )


def build_amortization_schedule(
    principal: float,
    annual_rate: float,
    term_months: int,
    amortization_months: int,
    monthly_payment: Optional[float],
    interest_only: bool,
    first_payment_date: date | datetime,
    maturity_date: Optional[date | datetime] = None,
    payment_date_rule: PaymentDateRule | str = PaymentDateRule.clamp_28,
) -> AmortizationSchedule:
    """Build the payment-by-payment schedule for a single note.

    Args:
        principal: Original loan amount.
        annual_rate: Nominal annual rate as a decimal fraction.
        term_months: Months until maturity.
        amortization_months: Months over which principal notionally pays down.
        monthly_payment: Priced level payment; ignored for interest-only loans.
        interest_only: Pay interest only for the whole term.
        first_payment_date: Due date of payment 1.
        maturity_date: Date of the balloon row. Defaults to the date of the
            last scheduled payment.
        payment_date_rule: How later payment dates are derived.

    Raises:
        InvalidLoanParametersError: when the inputs cannot produce a schedule.
    """
    validate_loan_parameters(principal, annual_rate, term_months, amortization_months,
                             monthly_payment, interest_only)

    if isinstance(first_payment_date, datetime):
        first_payment_date = first_payment_date.date()
    if maturity_date is None:
        maturity_date = compute_maturity_date(first_payment_date, term_months - 1)
    elif isinstance(maturity_date, datetime):
        maturity_date = maturity_date.date()

    monthly_rate = annual_rate / 12.0
    # Only a fully amortizing note is forced to zero on its final payment;
    # otherwise the remainder is carried to the balloon.
    pays_off_in_term = not interest_only and amortization_months <= term_months

    balance = principal
    total_interest = 0.0
    total_principal = 0.0
    total_payments = 0.0
    rows: list[AmortizationRow] = []

    for month in range(1, term_months + 1):
        interest = balance * monthly_rate
        if interest_only:
            principal_paid = 0.0
            payment = interest
        else:
            payment = monthly_payment
            principal_paid = payment - interest
            if (month == term_months and pays_off_in_term) or principal_paid > balance:
                principal_paid = balance
                payment = principal_paid + interest

        balance = max(0.0, balance - principal_paid)
        total_interest += interest
        total_principal += principal_paid
        total_payments += payment

        rows.append(AmortizationRow(
            month=month,
            payment_date=payment_date(first_payment_date, month, payment_date_rule),
            payment=payment,
            principal=principal_paid,
            interest=interest,
            balance=balance,
        ))

        if not interest_only and balance <= BALANCE_EPSILON:
            break

    balloon_amount = 0.0
    if balance > BALANCE_EPSILON:
        balloon_amount = balance
        total_principal += balance
        total_payments += balance
        rows.append(AmortizationRow(
            month=len(rows) + 1,
            payment_date=maturity_date,
            payment=balance,
            principal=balance,
            interest=0.0,
            balance=0.0,
            is_balloon=True,
        ))

    return AmortizationSchedule(
        rows=rows,
        total_interest=total_interest,
        total_principal=total_principal,
        total_payments=total_payments,
        balloon_amount=balloon_amount,
        first_payment_date=first_payment_date,
        maturity_date=maturity_date,
    )


def resolve_monthly_payment(terms: LoanTerms) -> float:
    """Priced payment if supplied, else the level payment implied by the terms."""
    if terms.monthly_payment is not None:
        return terms.monthly_payment
    return level_monthly_payment(
        terms.principal, terms.interest_rate, terms.amortization_months, terms.interest_only,
    )


def schedule_from_terms(
    terms: LoanTerms,
    first_payment_date: date | datetime,
    maturity_date: Optional[date | datetime] = None,
    payment_date_rule: PaymentDateRule | str = PaymentDateRule.clamp_28,
) -> AmortizationSchedule:
    """Build a schedule straight from a LoanTerms snapshot."""
    return build_amortization_schedule(
        principal=terms.principal,
        annual_rate=terms.interest_rate,
        term_months=terms.term_months,
        amortization_months=terms.amortization_months,
        monthly_payment=resolve_monthly_payment(terms),
        interest_only=terms.interest_only,
        first_payment_date=first_payment_date,
        maturity_date=maturity_date,
        payment_date_rule=payment_date_rule,
    )


def validate_terms(terms: LoanTerms) -> None:
    """Apply the schedule checks to a LoanTerms snapshot."""
    validate_loan_parameters(
        terms.principal,
        terms.interest_rate,
        terms.term_months,
        terms.amortization_months,
        resolve_monthly_payment(terms),
        terms.interest_only,
    )
