"""Borrower charges for the commercial Settlement Statement (Actual/360)."""
from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from loandocs.config import settings
from loandocs.finance.amortization import validate_terms
from loandocs.finance.day_count import prorated_interest
from loandocs.models.disclosure import DayCount, SettlementCharge, SettlementStatement
from loandocs.models.loan import LoanTerms


def build_settlement_statement(
    terms: LoanTerms,
    generated_at: date | datetime,
    first_payment_date: date | datetime,
    recording_fee: Optional[float] = None,
) -> SettlementStatement:
    """Fees in term-sheet order, then prorated interest, recording and title.

    Raises:
        InvalidLoanParametersError: terms that could not back a note.
    """
    validate_terms(terms)
    if recording_fee is None:
        recording_fee = settings.RECORDING_FEE_ESTIMATE

    charges = [
        SettlementCharge(label=fee.name, amount=fee.amount, description=fee.description)
        for fee in terms.fees
    ]

    interest = prorated_interest(
        terms.principal, terms.interest_rate, generated_at, first_payment_date, DayCount.actual_360,
    )
    charges.append(SettlementCharge(
        label=f"Prorated Interest ({interest.days} days)",
        amount=interest.amount,
        description="Actual/360 day count basis",
    ))
    charges.append(SettlementCharge(label="Recording Fees (Estimated)", amount=recording_fee))
    charges.append(SettlementCharge(label="Title Search / Insurance (TBD)", amount=0.0))

    total = sum(c.amount for c in charges)
    return SettlementStatement(
        principal=terms.principal,
        charges=charges,
        total_charges=total,
        net_proceeds=terms.principal - total,
        prorated_interest=interest,
    )
