from datetime import date
from typing import Optional, get_type_hints

import pytest
from pydantic import ValidationError

from loandocs.models.fund import FundTerms
from loandocs.models.loan import BaseRateType, Fee, LoanTerms
from loandocs.models.requests import FundRequest, LoanDocumentRequest
from loandocs.models.schedule import AmortizationRow, AmortizationSchedule, PaymentDateRule


def test_loan_terms_minimal():
    terms = LoanTerms(principal=250_000.0, interest_rate=0.0725, term_months=120,
                      amortization_months=300)
    assert terms.monthly_payment is None
    assert terms.fees == []
    assert terms.base_rate_type == BaseRateType.fixed
    assert not terms.is_indexed
    assert terms.has_balloon


def test_loan_terms_indexed():
    terms = LoanTerms(principal=1_000_000.0, interest_rate=0.0825, term_months=60,
                      amortization_months=60, base_rate_type="sofr", spread=0.03,
                      fees=[Fee(name="Origination Fee", amount=10_000.0)])
    assert terms.is_indexed
    assert not terms.has_balloon
    assert terms.fees[0].description is None


def test_interest_only_has_balloon():
    terms = LoanTerms(principal=100_000.0, interest_rate=0.09, term_months=24,
                      amortization_months=24, interest_only=True)
    assert terms.has_balloon


def test_loan_terms_rejects_unknown_index():
    with pytest.raises(ValidationError):
        LoanTerms(principal=1.0, interest_rate=0.05, term_months=12,
                  amortization_months=12, base_rate_type="libor")


def test_schedule_balloon_helpers():
    rows = [
        AmortizationRow(month=1, payment_date=date(2024, 4, 1), payment=100.0,
                        principal=60.0, interest=40.0, balance=940.0),
        AmortizationRow(month=2, payment_date=date(2024, 5, 1), payment=940.0,
                        principal=940.0, interest=0.0, balance=0.0, is_balloon=True),
    ]
    schedule = AmortizationSchedule(rows=rows, total_interest=40.0, total_principal=1000.0,
                                    total_payments=1040.0, balloon_amount=940.0,
                                    first_payment_date=date(2024, 4, 1),
                                    maturity_date=date(2024, 5, 1))
    assert schedule.regular_rows == rows[:1]
    assert schedule.balloon_row == rows[1]


def test_balloon_row_is_optional_row():
    hints = get_type_hints(AmortizationSchedule.balloon_row.fget)
    assert hints["return"] == Optional[AmortizationRow]
    schedule = AmortizationSchedule(rows=[], total_interest=0.0, total_principal=0.0,
                                    total_payments=0.0, balloon_amount=0.0,
                                    first_payment_date=date(2024, 4, 1),
                                    maturity_date=date(2024, 4, 1))
    assert schedule.balloon_row is None


def test_fund_terms_defaults():
    fund = FundTerms(target_raise=25_000_000.0)
    assert fund.fund_name == "[Fund Name]"
    assert fund.preferred_return == 0.08
    assert fund.carried_interest == 0.20
    assert fund.catch_up_percentage is None


def test_document_request_defaults():
    request = LoanDocumentRequest(
        terms=LoanTerms(principal=100_000.0, interest_rate=0.07, term_months=12,
                        amortization_months=12),
        generated_at=date(2024, 3, 15),
    )
    assert request.resolved_first_payment_date() == date(2024, 4, 1)
    assert request.resolved_lender_name() == "[Lender Name]"
    assert request.resolved_payment_date_rule() == PaymentDateRule.clamp_28
    assert request.borrower_name == "[Borrower Name]"


def test_document_request_explicit_values():
    request = LoanDocumentRequest(
        terms=LoanTerms(principal=100_000.0, interest_rate=0.07, term_months=12,
                        amortization_months=12),
        first_payment_date=date(2024, 5, 15),
        lender_name="First Harbor Bank",
        payment_date_rule="month_end",
    )
    assert request.resolved_first_payment_date() == date(2024, 5, 15)
    assert request.resolved_lender_name() == "First Harbor Bank"
    assert request.resolved_payment_date_rule() == PaymentDateRule.month_end


def test_fund_request_without_illustration():
    request = FundRequest(fund_terms=FundTerms(target_raise=1.0))
    assert request.illustration is None
