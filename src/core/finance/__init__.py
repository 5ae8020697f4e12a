# src/core/finance/__init__.py

from .amortization import (
    calculate_loan,
    monthly_payment,
    round_cents,
)

__all__ = [
    "calculate_loan",
    "monthly_payment",
    "round_cents",
]
