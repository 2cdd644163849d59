"""Cross-document checks on figures that appear in more than one document.

The Settlement Statement prorates interest Actual/360 and the Closing
Disclosure Actual/365, so the two figures legitimately differ. A check passes
when the gap is the one the conventions explain, and flags anything else.
"""
from __future__ import annotations

import logging

from loandocs.models.disclosure import (
    CheckStatus,
    ConsistencyCheck,
    FinanceDisclosure,
    ProratedInterest,
    SettlementStatement,
)

logger = logging.getLogger(__name__)

ABSOLUTE_TOLERANCE = 1.0    # $1
PERCENT_TOLERANCE = 0.02    # 2%
WARNING_THRESHOLD = 0.05    # 5%, warn but do not fail


def _percent_diff(a: float, b: float) -> float:
    largest = max(abs(a), abs(b))
    if largest == 0:
        return 0.0
    return abs(a - b) / largest


def _status(difference: float, percent_diff: float) -> CheckStatus:
    if difference <= ABSOLUTE_TOLERANCE or percent_diff <= PERCENT_TOLERANCE:
        return CheckStatus.passed
    if percent_diff <= WARNING_THRESHOLD:
        return CheckStatus.warning
    return CheckStatus.failed


def check_prorated_interest(
    settlement: ProratedInterest,
    disclosure: ProratedInterest,
) -> ConsistencyCheck:
    """Compare prorated interest on the Settlement Statement and the Closing Disclosure.

    The disclosure figure is restated on the settlement statement's basis over
    the disclosure's accrual period, so a mismatch in the loan figures or the
    accrual period on either document shows up as a difference.
    """
    annual_interest = disclosure.per_diem * disclosure.convention.denominator
    expected_settlement = annual_interest / settlement.convention.denominator * disclosure.days
    expected_difference = expected_settlement - disclosure.amount

    difference = abs(settlement.amount - expected_settlement)
    percent_diff = _percent_diff(settlement.amount, expected_settlement)
    status = _status(difference, percent_diff)
    if status is CheckStatus.failed:
        logger.warning(
            "Prorated interest mismatch: settlement %.2f vs expected %.2f (%s vs %s)",
            settlement.amount, expected_settlement,
            settlement.convention.label, disclosure.convention.label,
        )

    return ConsistencyCheck(
        description="Prorated interest consistent across day-count conventions",
        doc1_type="settlement_statement",
        doc1_field=f"prorated_interest ({settlement.convention.label})",
        doc1_value=round(settlement.amount, 2),
        doc2_type="closing_disclosure",
        doc2_field=f"prepaid_interest ({disclosure.convention.label})",
        doc2_value=round(disclosure.amount, 2),
        expected_difference=round(expected_difference, 2),
        difference=round(difference, 2),
        percent_diff=round(percent_diff, 4),
        status=status,
    )


def check_documents(
    settlement: SettlementStatement,
    disclosure: FinanceDisclosure,
) -> list[ConsistencyCheck]:
    """Run every cross-document check on a rendered statement and disclosure."""
    return [check_prorated_interest(settlement.prorated_interest, disclosure.prepaid_interest)]
