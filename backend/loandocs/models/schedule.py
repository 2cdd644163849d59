from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class PaymentDateRule(str, Enum):
    """How payment dates after the first are derived."""
    clamp_28 = "clamp_28"      # Day of month capped at 28 for every payment
    month_end = "month_end"    # Same day each month, clamped to month length


class AmortizationRow(BaseModel):
    """A single scheduled payment."""
    month: int
    payment_date: date
    payment: float
    principal: float
    interest: float
    balance: float
    is_balloon: bool = False


class AmortizationSchedule(BaseModel):
    """Full schedule plus running totals (unrounded)."""
    rows: list[AmortizationRow]
    total_interest: float
    total_principal: float
    total_payments: float
    balloon_amount: float = 0.0
    first_payment_date: date
    maturity_date: date

    @property
    def regular_rows(self) -> list[AmortizationRow]:
        return [r for r in self.rows if not r.is_balloon]

    @property
    def balloon_row(self) -> Optional[AmortizationRow]:
        return next((r for r in self.rows if r.is_balloon), None)
