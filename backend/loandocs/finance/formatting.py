"""Display formatting for figures embedded in legal documents.

Money is carried at full precision everywhere else; rounding happens here
and nowhere earlier. Non-finite inputs render as bracketed placeholders.
"""
from __future__ import annotations

import math
from datetime import date, datetime
from typing import Optional

AMOUNT_PLACEHOLDER = "[Amount TBD]"
RATE_PLACEHOLDER = "[Rate TBD]"
DATE_PLACEHOLDER = "[Date TBD]"

_ONES = [
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
]
_TENS = ["", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"]
_SCALES = [(1_000_000_000, "billion"), (1_000_000, "million"), (1_000, "thousand")]


def _is_missing(value: Optional[float]) -> bool:
    return value is None or not math.isfinite(value)


def format_currency(amount: Optional[float]) -> str:
    """$1,234 in whole dollars."""
    if _is_missing(amount):
        return AMOUNT_PLACEHOLDER
    sign = "-" if round(amount) < 0 else ""
    return f"{sign}${abs(amount):,.0f}"


def format_currency_detailed(amount: Optional[float]) -> str:
    """$1,234.56"""
    if _is_missing(amount):
        return AMOUNT_PLACEHOLDER
    sign = "-" if round(amount, 2) < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_percent(fraction: Optional[float]) -> str:
    """0.07125 -> '7.125%'"""
    if _is_missing(fraction):
        return RATE_PLACEHOLDER
    return f"{fraction * 100:.3f}%"


def format_currency_in_words(amount: Optional[float]) -> str:
    """$500,000 (FIVE HUNDRED THOUSAND DOLLARS), for principal amounts in legal text."""
    if _is_missing(amount):
        return AMOUNT_PLACEHOLDER
    return f"{format_currency(amount)} ({number_to_words(round(amount)).upper()} DOLLARS)"


def format_date(value: Optional[date | datetime]) -> str:
    """January 5, 2024"""
    if value is None:
        return DATE_PLACEHOLDER
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def _chunk(num: int) -> str:
    if num == 0:
        return ""
    if num < 20:
        return _ONES[num]
    if num < 100:
        return _TENS[num // 10] + ("-" + _ONES[num % 10] if num % 10 else "")
    return _ONES[num // 100] + " hundred" + (" " + _chunk(num % 100) if num % 100 else "")


def number_to_words(n: float) -> str:
    """Spell out the whole-number part of ``n``: 1250 -> 'one thousand two hundred fifty'."""
    n = int(n)
    if n == 0:
        return "zero"
    if n < 0:
        return "negative " + number_to_words(-n)

    parts: list[str] = []
    remainder = n
    for scale, label in _SCALES:
        count, remainder = divmod(remainder, scale)
        if count:
            # Counts above 999 billion fall back to nested scale words.
            words = _chunk(count) if count < 1000 else number_to_words(count)
            parts.append(f"{words} {label}")
    if remainder:
        parts.append(_chunk(remainder))
    return " ".join(parts)
