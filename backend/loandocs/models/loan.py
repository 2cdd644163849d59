from enum import Enum
from typing import Optional

from pydantic import BaseModel


class BaseRateType(str, Enum):
    """Index the note rate is quoted against."""
    fixed = "fixed"
    prime = "prime"
    sofr = "sofr"
    treasury = "treasury"


class Fee(BaseModel):
    name: str
    amount: float
    description: Optional[str] = None


class LoanTerms(BaseModel):
    """Priced loan terms as produced by the structuring step."""
    principal: float
    interest_rate: float
    term_months: int
    amortization_months: int
    interest_only: bool = False
    base_rate_type: BaseRateType = BaseRateType.fixed
    base_rate_value: float = 0.0
    spread: float = 0.0
    monthly_payment: Optional[float] = None
    fees: list[Fee] = []
    covenants: list[str] = []
    conditions: list[str] = []
    prepayment_penalty: bool = False

    @property
    def is_indexed(self) -> bool:
        return self.base_rate_type != BaseRateType.fixed

    @property
    def has_balloon(self) -> bool:
        return self.interest_only or self.amortization_months > self.term_months
