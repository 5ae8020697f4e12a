# tests/utils.py
"""
Single source of truth for test data, factories, and canonical payloads.
Update values here to cascade across the test suite.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from src.schemas.models import DownPaymentMode, LoanForm, LoanInputs

# -----------------------------
# Global defaults (edit once)
# -----------------------------

# The calculator's built-in example: $60,000 home, 10% down, 9% APR, 20 years
DEFAULT_HOME_PRICE = 60_000.0
DEFAULT_DOWN_PAYMENT = 6_000.0
DEFAULT_RATE_PCT = 9.0
DEFAULT_TERM_YEARS = 20.0

EXAMPLE_PRINCIPAL = 54_000.0
EXAMPLE_MONTHLY = 485.85
EXAMPLE_TOTAL_PAID = 116_604.0
EXAMPLE_TOTAL_INTEREST = 62_604.0

# Same example as a bare-form JSON config (numbers allowed)
BARE_EXAMPLE_CONFIG = {
    "home_price": 60000,
    "down_payment": 10,
    "down_payment_mode": "percent",
    "interest_rate": 9,
    "loan_term": 20,
}

# -----------------------------
# Factories
# -----------------------------


def make_loan_inputs(
    home_price: float = DEFAULT_HOME_PRICE,
    down_payment: float = DEFAULT_DOWN_PAYMENT,
    annual_interest_rate: float = DEFAULT_RATE_PCT,
    loan_term_years: float = DEFAULT_TERM_YEARS,
) -> LoanInputs:
    return LoanInputs(
        home_price=home_price,
        down_payment=down_payment,
        annual_interest_rate=annual_interest_rate,
        loan_term_years=loan_term_years,
    )


def make_form(
    home_price: str = "60000",
    down_payment: str = "10",
    down_payment_mode: DownPaymentMode = "percent",
    interest_rate: str = "9",
    loan_term: str = "20",
) -> LoanForm:
    return LoanForm(
        home_price=home_price,
        down_payment=down_payment,
        down_payment_mode=down_payment_mode,
        interest_rate=interest_rate,
        loan_term=loan_term,
    )


def write_json(path: Path, payload: Any) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
