"""Word document builders for the deterministic loan and fund exhibits."""
from loandocs.documents.amortization_schedule import build_amortization_schedule_document
from loandocs.documents.loan_calculations import build_loan_calculations_document
from loandocs.documents.settlement_statement import build_settlement_statement_document
from loandocs.documents.waterfall_exhibit import build_waterfall_document

__all__ = [
    "build_amortization_schedule_document",
    "build_loan_calculations_document",
    "build_settlement_statement_document",
    "build_waterfall_document",
]
