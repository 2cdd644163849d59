"""Assemble a loan document from a request: schedule, figures, then rendering."""
from __future__ import annotations

import logging
from typing import Callable

from docx.document import Document

from loandocs.documents import (
    build_amortization_schedule_document,
    build_loan_calculations_document,
    build_settlement_statement_document,
    build_waterfall_document,
)
from loandocs.documents.helpers import document_to_bytes
from loandocs.finance.amortization import schedule_from_terms
from loandocs.finance.waterfall import build_waterfall, illustrate_distribution
from loandocs.models.requests import FundRequest, LoanDocumentRequest
from loandocs.models.schedule import AmortizationSchedule
from loandocs.services.disclosure_service import build_finance_disclosure
from loandocs.services.settlement_service import build_settlement_statement

logger = logging.getLogger(__name__)


def build_schedule(request: LoanDocumentRequest) -> AmortizationSchedule:
    return schedule_from_terms(
        request.terms,
        request.resolved_first_payment_date(),
        request.maturity_date,
        request.resolved_payment_date_rule(),
    )


def _amortization_schedule(request: LoanDocumentRequest) -> Document:
    return build_amortization_schedule_document(
        request.terms, build_schedule(request),
        request.borrower_name, request.resolved_lender_name(),
    )


def _loan_calculations(request: LoanDocumentRequest) -> Document:
    schedule = build_schedule(request)
    disclosure = build_finance_disclosure(
        request.terms,
        request.generated_at,
        request.resolved_first_payment_date(),
        include_origination_fees=request.include_origination_fees,
        schedule=schedule,
    )
    return build_loan_calculations_document(
        request.terms, schedule, disclosure,
        request.borrower_name, request.resolved_lender_name(),
    )


def _settlement_statement(request: LoanDocumentRequest) -> Document:
    statement = build_settlement_statement(
        request.terms, request.generated_at, request.resolved_first_payment_date(),
        request.recording_fee,
    )
    return build_settlement_statement_document(
        request.terms, build_schedule(request), statement, request.generated_at,
        request.borrower_name, request.resolved_lender_name(),
    )


DOCUMENT_BUILDERS: dict[str, Callable[[LoanDocumentRequest], Document]] = {
    "amortization-schedule": _amortization_schedule,
    "loan-calculations": _loan_calculations,
    "settlement-statement": _settlement_statement,
}


def generate_loan_document(doc_type: str, request: LoanDocumentRequest) -> bytes:
    """Render ``doc_type`` to .docx bytes.

    Raises:
        KeyError: unknown document type.
        InvalidLoanParametersError: terms that cannot produce a schedule.
    """
    if doc_type not in DOCUMENT_BUILDERS:
        raise KeyError(doc_type)
    doc = DOCUMENT_BUILDERS[doc_type](request)
    logger.info("Generated %s for %s", doc_type, request.borrower_name)
    return document_to_bytes(doc)


def generate_waterfall_document(request: FundRequest) -> bytes:
    waterfall = build_waterfall(request.fund_terms)
    illustration = None
    if request.illustration is not None:
        illustration = illustrate_distribution(
            request.fund_terms,
            request.illustration.distributable_cash,
            request.illustration.contributed_capital,
            request.illustration.years,
        )
    doc = build_waterfall_document(request.fund_terms, waterfall, illustration)
    logger.info("Generated waterfall exhibit for %s", request.fund_terms.fund_name)
    return document_to_bytes(doc)
