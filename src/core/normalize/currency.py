# src/core/normalize/currency.py

"""
Lenient number readers for calculator form fields (typed text → float).

Nothing here raises on bad input: unreadable text degrades to 0 (currency)
or None (plain numbers) so callers decide how to report it.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

# Anything that can't be part of a plain decimal literal
_NON_NUMERIC_RE = re.compile(r"[^0-9.\-]+")
# Longest leading decimal after stripping: "-12.5", "12.", ".5"
_LEADING_DECIMAL_RE = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)")
# Leading number in free text: whitespace, sign, exponent allowed
_LEADING_NUMBER_RE = re.compile(r"^\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")

_INPUT_QUANTUM = Decimal("0.001")


def parse_currency(text: str) -> float:
    """
    Parse a user-facing currency string into a float.

    Every character other than digits, '.' and '-' is dropped, then the longest
    leading decimal is read from what is left.

    Example:
        "$1,000,000" -> 1000000.0
        "1.2.3"      -> 1.2
        "abc"        -> 0.0
    """
    stripped = _NON_NUMERIC_RE.sub("", text or "")
    m = _LEADING_DECIMAL_RE.match(stripped)
    if not m:
        return 0.0
    # `or 0.0` also folds "-0" into 0.0
    return float(m.group(0)) or 0.0


def parse_number(text: str) -> float | None:
    """
    Read the number leading a free-text field ("9", " 7.5 %", "1e2").
    Returns None when the text does not start with a number.
    """
    m = _LEADING_NUMBER_RE.match(text or "")
    if not m:
        return None
    return float(m.group(0))


def format_currency_input(text: str) -> str:
    """
    Re-render a typed amount with US digit grouping for display in an input box.

    Up to 3 fraction digits are kept (half away from zero), trailing zeros
    dropped. Values that parse to 0 render as an empty string.

    Example:
        "60000"     -> "60,000"
        "$1234.5"   -> "1,234.5"
        "abc"       -> ""
    """
    num = parse_currency(text)
    if num == 0:
        return ""
    try:
        q = Decimal(repr(num)).quantize(_INPUT_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # quantize overflow on absurdly long inputs; plain grouping is still fine
        return f"{num:,.0f}"
    out = f"{q:,f}"
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    return out
