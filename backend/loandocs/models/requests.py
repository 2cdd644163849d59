from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from loandocs.config import settings
from loandocs.finance.dates import compute_first_payment_date
from loandocs.models.disclosure import FinanceDisclosure, SettlementStatement
from loandocs.models.fund import FundTerms
from loandocs.models.loan import LoanTerms
from loandocs.models.schedule import PaymentDateRule


class LoanDocumentRequest(BaseModel):
    """Terms snapshot plus the dates and parties a document is generated for."""
    terms: LoanTerms
    generated_at: date = Field(default_factory=date.today)
    first_payment_date: Optional[date] = None
    maturity_date: Optional[date] = None
    borrower_name: str = "[Borrower Name]"
    lender_name: Optional[str] = None
    payment_date_rule: Optional[PaymentDateRule] = None
    recording_fee: Optional[float] = None
    include_origination_fees: bool = False

    def resolved_first_payment_date(self) -> date:
        if self.first_payment_date is not None:
            return self.first_payment_date
        return compute_first_payment_date(self.generated_at)

    def resolved_lender_name(self) -> str:
        return self.lender_name or settings.LENDER_NAME

    def resolved_payment_date_rule(self) -> PaymentDateRule:
        return self.payment_date_rule or PaymentDateRule(settings.PAYMENT_DATE_RULE)


class DistributionScenario(BaseModel):
    distributable_cash: float
    contributed_capital: float
    years: float = 5.0


class FundRequest(BaseModel):
    fund_terms: FundTerms
    illustration: Optional[DistributionScenario] = None


class ConsistencyRequest(LoanDocumentRequest):
    """Figures already printed on the two documents; missing ones are generated from the terms."""
    settlement_statement: Optional[SettlementStatement] = None
    finance_disclosure: Optional[FinanceDisclosure] = None
