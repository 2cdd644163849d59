"""Tests for the Excel term sheet parser."""
import io

import pytest
from openpyxl import Workbook

from loandocs.errors import TermsSheetError
from loandocs.models.loan import BaseRateType
from loandocs.services.terms_parser import parse_terms_sheet

DEFAULT_COLUMNS = [
    "Loan Amount", "Interest Rate", "Term (Months)", "Amortization (Months)",
    "Monthly Payment", "Prepayment Penalty", "Origination Fee", "Index", "Spread",
]


def _make_excel(rows, columns=None):
    """Create an in-memory Excel file with given rows and return a BytesIO."""
    wb = Workbook()
    ws = wb.active
    ws.append(columns or DEFAULT_COLUMNS)
    for row in rows:
        ws.append(row)
    buf = io.BytesIO()
    wb.save(buf)
    buf.seek(0)
    return buf


class TestParseTermsSheet:
    def test_basic_parse(self):
        sheet = _make_excel([
            [500000, 7.0, 60, 300, 3322.72, "Yes", 5000, "SOFR", 2.5],
            [250000, 0.065, 120, None, None, "No", 0, "Fixed", 0],
        ])
        loans = parse_terms_sheet(sheet, "terms.xlsx")
        assert len(loans) == 2

        first = loans[0]
        assert first.principal == 500_000.0
        assert first.interest_rate == pytest.approx(0.07)
        assert first.term_months == 60
        assert first.amortization_months == 300
        assert first.monthly_payment == pytest.approx(3322.72)
        assert first.prepayment_penalty is True
        assert first.base_rate_type == BaseRateType.sofr
        assert first.spread == pytest.approx(0.025)
        assert [(f.name, f.amount) for f in first.fees] == [("Origination Fee", 5000.0)]

    def test_defaults_for_blank_cells(self):
        sheet = _make_excel([
            [250000, 0.065, 120, None, None, "No", 0, "Fixed", 0],
        ])
        loan = parse_terms_sheet(sheet, "terms.xlsx")[0]
        assert loan.interest_rate == pytest.approx(0.065)
        assert loan.amortization_months == 120
        assert loan.monthly_payment is None
        assert loan.fees == []
        assert loan.prepayment_penalty is False
        assert loan.base_rate_type == BaseRateType.fixed

    def test_minimal_columns(self):
        sheet = _make_excel([[100000, 6.5]], columns=["Principal", "Rate"])
        loan = parse_terms_sheet(sheet, "terms.xlsx")[0]
        assert loan.term_months == 120
        assert loan.amortization_months == 120
        assert loan.interest_only is False

    def test_interest_only_column(self):
        sheet = _make_excel(
            [[100000, 8.0, 24, "Y"]],
            columns=["Approved Amount", "Note Rate", "Term", "Interest Only"],
        )
        loan = parse_terms_sheet(sheet, "terms.xlsx")[0]
        assert loan.interest_only is True
        assert loan.term_months == 24

    def test_filters_bad_rows(self):
        sheet = _make_excel([
            [500000, 7.0, 60, 300, 3322.72, "Yes", 5000, "SOFR", 2.5],
            [0, 7.0, 60, 300, None, "No", 0, "Fixed", 0],
            [None, 7.0, 60, 300, None, "No", 0, "Fixed", 0],
        ])
        assert len(parse_terms_sheet(sheet, "terms.xlsx")) == 1

    def test_missing_rate_column(self):
        sheet = _make_excel([[100000, 60]], columns=["Loan Amount", "Term"])
        with pytest.raises(TermsSheetError, match="interest rate"):
            parse_terms_sheet(sheet, "terms.xlsx")

    def test_empty_file(self):
        with pytest.raises(TermsSheetError, match="empty"):
            parse_terms_sheet(io.BytesIO(b""), "terms.xlsx")

    def test_no_rows(self):
        with pytest.raises(TermsSheetError):
            parse_terms_sheet(_make_excel([]), "terms.xlsx")

    def test_not_a_workbook(self):
        with pytest.raises(TermsSheetError):
            parse_terms_sheet(io.BytesIO(b"not a spreadsheet"), "terms.xlsx")

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_terms_sheet(io.BytesIO(b""), "terms.xlsx")
