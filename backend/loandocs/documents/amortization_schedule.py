"""Amortization Schedule exhibit: pure math, no generated prose."""
from __future__ import annotations

import logging

from loandocs.documents.helpers import (
    body_text,
    create_table,
    document_title,
    key_terms_table,
    new_legal_document,
    section_heading,
    spacer,
)
from loandocs.finance.amortization import resolve_monthly_payment
from loandocs.finance.formatting import (
    format_currency,
    format_currency_in_words,
    format_currency_detailed,
    format_date,
    format_percent,
)
from loandocs.models.loan import LoanTerms
from loandocs.models.schedule import AmortizationSchedule

logger = logging.getLogger(__name__)


def schedule_table_rows(schedule: AmortizationSchedule) -> list[list[str]]:
    return [
        [
            "Balloon" if row.is_balloon else str(row.month),
            format_date(row.payment_date),
            format_currency_detailed(row.payment),
            format_currency_detailed(row.principal),
            format_currency_detailed(row.interest),
            format_currency_detailed(row.balance),
        ]
        for row in schedule.rows
    ]


def build_amortization_schedule_document(
    terms: LoanTerms,
    schedule: AmortizationSchedule,
    borrower_name: str,
    lender_name: str,
):
    """Render the schedule as a Word exhibit to the note."""
    doc = new_legal_document(f"Amortization Schedule - {borrower_name}")

    document_title(doc, "Amortization Schedule")
    body_text(
        doc,
        "This Amortization Schedule is attached as an exhibit to and incorporated by reference "
        "in the Promissory Note and Loan Agreement of even date herewith.",
        italic=True,
    )
    spacer(doc)

    key_terms_table(doc, [
        ("Borrower", borrower_name),
        ("Lender", lender_name),
        ("Loan Amount", format_currency_in_words(terms.principal)),
        ("Interest Rate", format_percent(terms.interest_rate)),
        ("Term", f"{terms.term_months} months"),
        ("Amortization", f"{terms.amortization_months} months"),
        ("Monthly Payment", format_currency_detailed(resolve_monthly_payment(terms))),
        ("First Payment Date", format_date(schedule.first_payment_date)),
        ("Maturity Date", format_date(schedule.maturity_date)),
        ("Interest Only", "Yes" if terms.interest_only else "No"),
    ])
    spacer(doc)

    section_heading(doc, "Payment Schedule")
    create_table(
        doc,
        ["#", "Payment Date", "Payment", "Principal", "Interest", "Balance"],
        schedule_table_rows(schedule),
        column_widths=[8, 18, 18, 18, 18, 20],
    )
    spacer(doc)

    section_heading(doc, "Summary")
    summary = [
        ["Original Principal", format_currency(terms.principal)],
        ["Total Interest Paid", format_currency(schedule.total_interest)],
        ["Total Principal Paid", format_currency(schedule.total_principal)],
        ["Total of All Payments", format_currency(schedule.total_payments)],
    ]
    if schedule.balloon_amount > 0:
        summary.append(["Balloon Payment at Maturity", format_currency(schedule.balloon_amount)])
    create_table(doc, ["Description", "Amount"], summary, column_widths=[50, 50])
    spacer(doc)

    section_heading(doc, "Important Notes")
    body_text(doc, "This amortization schedule is based on the terms set forth in the "
                   "Promissory Note and Loan Agreement.")
    body_text(doc, "Monthly interest is calculated as the annual rate divided by 12. Prorated "
                   "interest on the Settlement Statement uses an Actual/360 day count basis and "
                   "may differ from the monthly amounts shown here.")
    body_text(doc, "Actual payment amounts may vary slightly due to rounding.")
    body_text(doc, "This schedule assumes no prepayments are made during the term of the Loan. "
                   "Actual outstanding balances may differ if prepayments are made.")
    if terms.prepayment_penalty:
        body_text(doc, "Prepayment may be subject to penalties as set forth in the Promissory Note.")
    if terms.is_indexed:
        body_text(doc, "For variable rate loans, this schedule reflects the initial interest rate. "
                       "Actual payments will adjust based on index rate changes.")
    spacer(doc)
    body_text(doc, "This schedule is provided for informational purposes only and does not "
                   "modify the terms of the Loan Documents.", italic=True)

    logger.info("Rendered amortization schedule: %d rows for %s", len(schedule.rows), borrower_name)
    return doc
