"""Commercial Settlement Statement."""
from __future__ import annotations

from datetime import date

from loandocs.documents.helpers import (
    body_text,
    create_table,
    document_title,
    key_terms_table,
    new_legal_document,
    section_heading,
    signature_block,
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
from loandocs.models.disclosure import SettlementStatement
from loandocs.models.loan import LoanTerms
from loandocs.models.schedule import AmortizationSchedule


def build_settlement_statement_document(
    terms: LoanTerms,
    schedule: AmortizationSchedule,
    statement: SettlementStatement,
    generated_at: date,
    borrower_name: str,
    lender_name: str,
):
    doc = new_legal_document(f"Settlement Statement - {borrower_name}")

    document_title(doc, "Settlement Statement")
    body_text(doc, "This Settlement Statement sets forth all charges, adjustments, and "
                   "disbursements in connection with the loan described herein.")
    spacer(doc)

    key_terms_table(doc, [
        ("Effective Date", format_date(generated_at)),
        ("Borrower", borrower_name),
        ("Lender", lender_name),
        ("Loan Amount", format_currency_in_words(terms.principal)),
    ])
    spacer(doc)

    section_heading(doc, "Loan Summary")
    create_table(
        doc,
        ["Term", "Value"],
        [
            ["Principal Amount", format_currency(terms.principal)],
            ["Interest Rate", format_percent(terms.interest_rate)],
            ["Term", f"{terms.term_months} months"],
            ["Amortization", f"{terms.amortization_months} months"],
            ["Monthly Payment", format_currency_detailed(resolve_monthly_payment(terms))],
            ["Maturity Date", format_date(schedule.maturity_date)],
            ["First Payment Date", format_date(schedule.first_payment_date)],
            ["Interest Only", "Yes" if terms.interest_only else "No"],
        ],
        column_widths=[40, 60],
    )
    spacer(doc)

    section_heading(doc, "Borrower Charges")
    rows = [[c.label, format_currency_detailed(c.amount)] for c in statement.charges]
    rows.append(["Total Borrower Charges", format_currency_detailed(statement.total_charges)])
    create_table(doc, ["Description", "Amount"], rows, column_widths=[60, 40])
    spacer(doc)

    section_heading(doc, "Disbursement Summary")
    create_table(
        doc,
        ["Description", "Amount"],
        [
            ["Loan Amount", format_currency_detailed(statement.principal)],
            ["Less: Total Borrower Charges", format_currency_detailed(statement.total_charges)],
            ["Net Loan Proceeds", format_currency_detailed(statement.net_proceeds)],
        ],
        column_widths=[60, 40],
    )
    spacer(doc)

    body_text(doc, "Prorated interest calculated on an Actual/360 day count basis.", italic=True)
    body_text(doc, "Recording fees are estimated and subject to change based on actual county "
                   "recording charges.", italic=True)

    signature_block(doc, borrower_name, "Borrower")
    signature_block(doc, lender_name, "Lender")
    return doc
