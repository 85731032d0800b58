"""Parsing and display formatting for the calculator window.

Raw field text is turned into numbers here before validation, and computed
results are turned back into display text. Unparseable text becomes NaN so
that validation reports the matching field error.
"""
import math
import re
from typing import Tuple

from mortgage_calc.config import CURRENCY_SYMBOL, CURRENCY_DECIMALS, RATE_DECIMALS

_NON_NUMERIC = re.compile(r"[^\d.]")
_THOUSANDS = re.compile(r"\B(?=(\d{3})+(?!\d))")


def parse_number(text, grouped: bool = False) -> float:
    """Parse field text into a float.
    
    Args:
        text: Raw field text.
        grouped: Whether the text may contain comma thousands separators.
        
    Returns:
        The parsed value, or NaN if the text is not a number.
    """
    cleaned = (text or "").strip()
    # float() also accepts "1_000"; typed amounts only group with commas
    if "_" in cleaned:
        return math.nan
    if grouped:
        cleaned = cleaned.replace(",", "")
    try:
        return float(cleaned)
    except ValueError:
        return math.nan


def parse_raw_inputs(rate_text, principal_text, term_text, fees_text) -> Tuple[float, float, float, float]:
    """Parse the four calculator fields.
    
    Loan amount and fees may be comma-grouped; an empty fees field means no fees.
    
    Returns:
        Tuple of (interest_rate, principal, term_years, fees).
    """
    interest_rate = parse_number(rate_text)
    principal = parse_number(principal_text, grouped=True)
    term_years = parse_number(term_text)
    fees_text = (fees_text or "").strip()
    fees = 0.0 if fees_text == "" else parse_number(fees_text, grouped=True)
    return interest_rate, principal, term_years, fees


def format_number_with_commas(value: str) -> str:
    """Group the integer part of a typed number with commas.
    
    Everything except digits and the decimal point is dropped first, so
    "1234567.5" becomes "1,234,567.5".
    """
    cleaned = _NON_NUMERIC.sub("", value or "")
    parts = cleaned.split(".")
    parts[0] = _THOUSANDS.sub(",", parts[0])
    return ".".join(parts)


def adjust_cursor(old_text: str, new_text: str, cursor: int) -> int:
    """Cursor position after reformatting, shifted by the change in length."""
    position = cursor + (len(new_text) - len(old_text))
    return max(0, min(position, len(new_text)))


def format_currency(amount) -> str:
    """Format an amount as USD, e.g. $1,896.20."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(amount):,.{CURRENCY_DECIMALS}f}"


def format_rate(rate) -> str:
    return f"{rate:.{RATE_DECIMALS}f}%"


def format_years(years) -> str:
    return f"{years} {'year' if years == 1 else 'years'}"


def format_comparison_count(count: int) -> str:
    return f"{count} mortgage{'' if count == 1 else 's'}"
