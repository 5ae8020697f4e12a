from __future__ import annotations

from .currency import format_currency_input, parse_currency, parse_number

__all__ = [
    "parse_currency",
    "parse_number",
    "format_currency_input",
]
