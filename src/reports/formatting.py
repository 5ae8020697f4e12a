# src/reports/formatting.py
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_CENT = Decimal("0.01")


def format_currency(amount: float) -> str:
    """
    Format a float as USD currency: "$" prefix, thousands separators, two decimals.
    Negative values put the minus sign before the "$".

    Cents are rounded half away from zero on the shortest decimal form of the
    float, so 1.005 renders as $1.01.

    Example:
        1234.56 -> $1,234.56
        -500    -> -$500.00
    """
    if math.isnan(amount):
        return "$NaN"
    sign = "-" if amount < 0 else ""
    if math.isinf(amount):
        return f"{sign}$∞"
    try:
        cents = Decimal(repr(abs(float(amount)))).quantize(_CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # past Decimal's default precision; float formatting is exact enough there
        return f"{sign}${abs(amount):,.2f}"
    return f"{sign}${cents:,.2f}"


def format_percent(value: float, decimals: int = 2) -> str:
    """
    Format a percentage value (already in percent, not a fraction).

    Example:
        9 -> 9.00%
    """
    return f"{value:.{decimals}f}%"
