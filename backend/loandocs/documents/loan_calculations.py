"""Loan Calculations and Prepaids pages of the Closing Disclosure.

This custom output is not the CFPB model form H-25 and carries no TRID safe
harbor; the lender verifies form compliance before use.
"""
from __future__ import annotations

from loandocs.documents.helpers import (
    body_text,
    bullet,
    create_table,
    document_title,
    key_terms_table,
    new_legal_document,
    section_heading,
    spacer,
)
from loandocs.finance.formatting import (
    format_currency,
    format_currency_detailed,
    format_date,
    format_percent,
)
from loandocs.models.disclosure import FinanceDisclosure
from loandocs.models.loan import LoanTerms
from loandocs.models.schedule import AmortizationSchedule


def format_apr(disclosure: FinanceDisclosure) -> str:
    if not disclosure.apr_converged:
        return f"{disclosure.apr:.3f}% (estimate, verify before delivery)"
    return f"{disclosure.apr:.3f}%"


def build_loan_calculations_document(
    terms: LoanTerms,
    schedule: AmortizationSchedule,
    disclosure: FinanceDisclosure,
    borrower_name: str,
    lender_name: str,
):
    doc = new_legal_document(f"Closing Disclosure - {borrower_name}")

    document_title(doc, "Closing Disclosure")
    body_text(doc, "Loan Calculations and Prepaids", bold=True)
    spacer(doc)

    key_terms_table(doc, [
        ("Borrower", borrower_name),
        ("Lender", lender_name),
        ("Loan Amount", format_currency(terms.principal)),
        ("Interest Rate", format_percent(terms.interest_rate)),
        ("Loan Term", f"{terms.term_months} months"),
        ("First Payment Date", format_date(schedule.first_payment_date)),
        ("Maturity Date", format_date(schedule.maturity_date)),
        ("Balloon Payment", format_currency(disclosure.balloon_amount)
            if disclosure.balloon_amount > 0 else "No"),
    ])
    spacer(doc)

    prepaid = disclosure.prepaid_interest
    section_heading(doc, "Prepaids")
    create_table(
        doc,
        ["Item", "Amount"],
        [
            [f"Prepaid Interest ({format_currency_detailed(prepaid.per_diem)}/day x {prepaid.days} days)",
             format_currency_detailed(prepaid.amount)],
            ["Prepaid Finance Charges", format_currency_detailed(disclosure.prepaid_finance_charges)],
        ],
        column_widths=[55, 45],
    )
    body_text(doc, f"Prepaid interest is calculated on an {prepaid.convention.label} day count "
                   f"basis from {format_date(prepaid.start_date)} to {format_date(prepaid.end_date)}.",
              italic=True)
    spacer(doc)

    section_heading(doc, "Loan Calculations")
    create_table(
        doc,
        ["Calculation", "Amount"],
        [
            ["Total of Payments", format_currency_detailed(disclosure.total_of_payments)],
            ["Finance Charge", format_currency_detailed(disclosure.finance_charge)],
            ["Amount Financed", format_currency_detailed(disclosure.amount_financed)],
            ["Annual Percentage Rate (APR)", format_apr(disclosure)],
            ["Total Interest Percentage (TIP)", f"{disclosure.total_interest_percentage:.3f}%"],
        ],
        column_widths=[50, 50],
    )
    spacer(doc)

    bullet(doc, "The total you will have paid after you make all payments of principal, "
                "interest, mortgage insurance, and loan costs, as scheduled.", "Total of Payments.")
    bullet(doc, "The dollar amount the credit will cost you.", "Finance Charge.")
    bullet(doc, "The loan amount available after paying your upfront finance charge.",
           "Amount Financed.")
    bullet(doc, "Your costs over the loan term expressed as a rate. This is not your interest rate.",
           "Annual Percentage Rate (APR).")
    bullet(doc, "The total amount of interest that you will pay over the loan term as a "
                "percentage of your loan amount.", "Total Interest Percentage (TIP).")
    spacer(doc)

    body_text(doc, "This document is not the CFPB model Closing Disclosure form (H-25). The "
                   "lender must verify compliance with 12 CFR 1026.38 before use.", italic=True)
    return doc
