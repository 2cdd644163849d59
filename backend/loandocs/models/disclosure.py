from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class DayCount(str, Enum):
    """Day-count basis used to turn an annual rate into a daily rate."""
    actual_360 = "actual_360"
    actual_365 = "actual_365"

    @property
    def denominator(self) -> int:
        return 360 if self is DayCount.actual_360 else 365

    @property
    def label(self) -> str:
        return "Actual/360" if self is DayCount.actual_360 else "Actual/365"


class ProratedInterest(BaseModel):
    convention: DayCount
    start_date: date
    end_date: date
    days: int
    per_diem: float
    amount: float


class AprResult(BaseModel):
    """Outcome of the actuarial APR solve."""
    apr: float              # Annual percentage, e.g. 7.125
    periodic_rate: float    # Monthly rate the solver settled on
    iterations: int
    converged: bool


class FinanceDisclosure(BaseModel):
    """Truth-in-lending figures for the Loan Calculations section."""
    total_of_payments: float
    finance_charge: float
    amount_financed: float
    apr: float
    apr_converged: bool
    apr_iterations: int
    total_interest_percentage: float
    prepaid_interest: ProratedInterest
    prepaid_finance_charges: float
    balloon_amount: float = 0.0


class SettlementCharge(BaseModel):
    label: str
    amount: float
    description: Optional[str] = None


class SettlementStatement(BaseModel):
    """Borrower charges and net proceeds for a commercial closing."""
    principal: float
    charges: list[SettlementCharge]
    total_charges: float
    net_proceeds: float
    prorated_interest: ProratedInterest


class CheckStatus(str, Enum):
    passed = "pass"
    warning = "warning"
    failed = "fail"


class ConsistencyCheck(BaseModel):
    """Comparison of the same figure as it appears in two documents."""
    description: str
    doc1_type: str
    doc1_field: str
    doc1_value: float
    doc2_type: str
    doc2_field: str
    doc2_value: float
    expected_difference: float
    difference: float
    percent_diff: float
    status: CheckStatus
