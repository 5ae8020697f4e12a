# src/core/finance/amortization.py

from __future__ import annotations

import math

from src.schemas.models import LoanInputs, LoanResults

_MONTHS_PER_YEAR = 12

_ZERO_RESULTS = LoanResults(monthly_payment=0.0, total_paid=0.0, total_interest=0.0, principal=0.0)


def round_cents(value: float) -> float:
    """
    Round to 2 decimals, half away from zero, on the cent value.

    Example:
        416.6666 -> 416.67
        -0.005   -> -0.01
    """
    if not math.isfinite(value):
        return value
    cents = math.floor(abs(value) * 100 + 0.5)
    # + 0.0 folds -0.0 into 0.0
    return math.copysign(cents, value) / 100 + 0.0


def monthly_payment(principal: float, annual_rate_pct: float, years: float) -> float:
    """
    Unrounded monthly P&I payment for a fully-amortizing fixed-rate loan.

    Formula (standard annuity):
        PMT = P * r(1+r)^n / ((1+r)^n - 1)

    Where:
        P = principal
        r = annual_rate_pct / 100 / 12
        n = years * 12

    Notes:
        - If r == 0, the formula reduces to P / n.
        - Callers guarantee principal > 0 and years > 0.
        - When (1+r)^n overflows, the payment converges to interest only (P * r).
        - A rate at or below -1200% has no real payment and yields NaN.
    """
    r = annual_rate_pct / 100 / _MONTHS_PER_YEAR
    n = years * _MONTHS_PER_YEAR

    if r == 0:
        return principal / n

    try:
        power = math.pow(1 + r, n)
    except OverflowError:
        return principal * r
    except ValueError:
        return math.nan

    # r too small to move (1 + r) off 1.0
    if power == 1:
        return principal / n
    return principal * (r * power) / (power - 1)


def calculate_loan(inputs: LoanInputs) -> LoanResults:
    """
    Compute monthly payment, total paid, total interest and principal.

    Total over its inputs: a fully covered price (down payment >= price) yields
    all zeros, and a non-positive term yields zeros except for the principal.
    Each output is rounded to cents on its own; total_paid is not rebuilt from
    the rounded payment.
    """
    principal = inputs.home_price - inputs.down_payment

    if principal <= 0:
        return _ZERO_RESULTS

    if inputs.loan_term_years <= 0:
        return LoanResults(
            monthly_payment=0.0,
            total_paid=0.0,
            total_interest=0.0,
            principal=round_cents(principal),
        )

    n = inputs.loan_term_years * _MONTHS_PER_YEAR
    payment = monthly_payment(principal, inputs.annual_interest_rate, inputs.loan_term_years)
    total_paid = payment * n
    total_interest = total_paid - principal

    return LoanResults(
        monthly_payment=round_cents(payment),
        total_paid=round_cents(total_paid),
        total_interest=round_cents(total_interest),
        principal=round_cents(principal),
    )
