"""Parse an uploaded Excel term sheet into LoanTerms, one loan per row.

Column matching is flexible (partial, case-insensitive). Rates and spreads
keyed in as percentages (7.25 rather than 0.0725) are converted. Any column
whose header ends in "fee" becomes a one-time Fee on that loan.
"""
from __future__ import annotations

import logging
import re
from io import BytesIO
from typing import BinaryIO
from zipfile import BadZipFile

import pandas as pd

from loandocs.errors import TermsSheetError
from loandocs.models.loan import BaseRateType, Fee, LoanTerms

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Column matching helpers
# ---------------------------------------------------------------------------
_COLUMN_PATTERNS: dict[str, list[str]] = {
    "principal": ["approved amount", "loan amount", "principal", "amount"],
    "rate": ["interest rate", "note rate", "all-in rate", "rate"],
    "amortization": ["amortization", "amort"],
    "term": ["term"],
    "interest_only": ["interest only", "^io$", "i/o"],
    "payment": ["monthly payment", "payment"],
    "base_rate_type": ["base rate type", "index", "base rate"],
    "spread": ["spread", "margin"],
    "prepayment_penalty": ["prepayment penalty", "prepay"],
}

# Claimed in this order so broader patterns ("term", "rate") cannot steal the
# columns that more specific keys match first.
_MATCH_ORDER = [
    "principal", "amortization", "interest_only", "prepayment_penalty", "payment",
    "base_rate_type", "spread", "rate", "term",
]

_TRUE_STRINGS = {"y", "yes", "true", "1", "x"}
_MAX_PRINCIPAL = 1_000_000_000


def _find_column(columns: list[str], key: str, claimed: set[str]) -> str | None:
    """Find an unclaimed column by partial case-insensitive match.

    Patterns are tried in order (most specific first). A pattern containing
    regex metacharacters is treated as a regex; otherwise plain substring
    matching is used.
    """
    patterns = _COLUMN_PATTERNS.get(key, [key])
    col_lower = {c: c.lower().strip() for c in columns if c not in claimed}
    for pattern in patterns:
        pat = pattern.lower()
        if any(ch in pat for ch in ("*", "+", "?", "\\", "^", "$", "|")):
            rx = re.compile(pat)
            for orig, low in col_lower.items():
                if rx.search(low):
                    return orig
        else:
            for orig, low in col_lower.items():
                if pat in low and not low.endswith("fee"):
                    return orig
    return None


def _map_columns(columns: list[str]) -> dict[str, str | None]:
    claimed: set[str] = set()
    col_map: dict[str, str | None] = {}
    for key in _MATCH_ORDER:
        found = _find_column(columns, key, claimed)
        col_map[key] = found
        if found is not None:
            claimed.add(found)
    return col_map


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def parse_terms_sheet(file: BinaryIO, filename: str) -> list[LoanTerms]:
    """Parse an Excel term sheet into a list of LoanTerms.

    Raises TermsSheetError on invalid / empty data.
    """
    data = file.read()
    if not data:
        raise TermsSheetError("Uploaded file is empty")

    try:
        df = pd.read_excel(BytesIO(data))
    except (ValueError, BadZipFile) as e:
        raise TermsSheetError(f"Could not read {filename}: {e}") from e
    df.columns = [str(c).strip() for c in df.columns]

    if df.empty:
        raise TermsSheetError("Spreadsheet contains no data rows")

    col_map = _map_columns(list(df.columns))
    fee_cols = [c for c in df.columns if c.lower().endswith("fee")]

    logger.info("Term sheet columns: %s", list(df.columns))
    logger.info("Column mapping: %s (fees: %s)", col_map, fee_cols)

    principal_col = col_map.get("principal")
    rate_col = col_map.get("rate")
    if not principal_col or not rate_col:
        raise TermsSheetError(
            f"Term sheet needs a loan amount and an interest rate column. "
            f"Available columns: {list(df.columns)}"
        )

    # Filter bad rows (missing/zero/extreme principal, missing rate)
    df = df[
        df[principal_col].notna()
        & (pd.to_numeric(df[principal_col], errors="coerce") > 0)
        & (pd.to_numeric(df[principal_col], errors="coerce") < _MAX_PRINCIPAL)
        & df[rate_col].notna()
    ].copy()

    if df.empty:
        raise TermsSheetError("No valid loan rows after filtering")

    loans: list[LoanTerms] = []
    for _, row in df.iterrows():
        rate = _safe_float(row, rate_col, 0.0)
        if rate > 1:
            rate = rate / 100.0

        spread = _safe_float(row, col_map.get("spread"), 0.0)
        if spread > 0.2:
            spread = spread / 100.0

        term = _safe_int(row, col_map.get("term"), 120)
        amortization = _safe_int(row, col_map.get("amortization"), term)
        payment = _safe_float(row, col_map.get("payment"), 0.0)

        fees = []
        for col in fee_cols:
            amount = _safe_float(row, col, 0.0)
            if amount > 0:
                fees.append(Fee(name=col, amount=amount))

        loans.append(LoanTerms(
            principal=float(row[principal_col]),
            interest_rate=rate,
            term_months=term,
            amortization_months=amortization,
            interest_only=_safe_bool(row, col_map.get("interest_only")),
            base_rate_type=_safe_rate_type(row, col_map.get("base_rate_type")),
            spread=spread,
            monthly_payment=payment if payment > 0 else None,
            fees=fees,
            prepayment_penalty=_safe_bool(row, col_map.get("prepayment_penalty")),
        ))

    logger.info("Parsed %d loans from %s", len(loans), filename)
    return loans


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _safe_float(row, col: str | None, default: float) -> float:
    if col is None:
        return default
    try:
        val = float(row[col])
        if val != val:  # NaN check
            return default
        return val
    except (ValueError, TypeError, KeyError):
        return default


def _safe_int(row, col: str | None, default: int) -> int:
    if col is None:
        return default
    try:
        val = row[col]
        if val != val:  # NaN check
            return default
        return int(float(val))
    except (ValueError, TypeError, KeyError):
        return default


def _safe_bool(row, col: str | None) -> bool:
    if col is None:
        return False
    val = row.get(col)
    if isinstance(val, str):
        return val.strip().lower() in _TRUE_STRINGS
    if val is None or val != val:  # NaN check
        return False
    try:
        return bool(val)
    except (TypeError, ValueError):
        return False


def _safe_rate_type(row, col: str | None) -> BaseRateType:
    if col is None:
        return BaseRateType.fixed
    val = row.get(col)
    if not isinstance(val, str):
        return BaseRateType.fixed
    try:
        return BaseRateType(val.strip().lower())
    except ValueError:
        return BaseRateType.fixed
