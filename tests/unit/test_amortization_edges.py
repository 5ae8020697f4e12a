import math

import pytest

from src.core.finance import calculate_loan, monthly_payment, round_cents
from tests.utils import make_loan_inputs


def test_round_cents_half_away_from_zero():
    assert round_cents(0.125) == 0.13
    assert round_cents(-0.125) == -0.13
    assert round_cents(416.666666) == 416.67
    assert round_cents(12.0) == 12.0


def test_round_cents_folds_negative_zero():
    out = round_cents(-0.001)
    assert out == 0.0
    assert math.copysign(1.0, out) == 1.0


def test_round_cents_passes_non_finite_through():
    assert math.isnan(round_cents(math.nan))
    assert round_cents(math.inf) == math.inf


def test_fractional_term_zero_rate():
    # 30,000 over 2.5 years → 30 payments of 1,000
    res = calculate_loan(make_loan_inputs(home_price=30_000, down_payment=0, annual_interest_rate=0, loan_term_years=2.5))
    assert res.monthly_payment == 1_000.0
    assert res.total_paid == 30_000.0
    assert res.total_interest == 0.0


def test_fractional_principal_is_rounded():
    res = calculate_loan(make_loan_inputs(home_price=1_000.004, down_payment=0, loan_term_years=0))
    assert res.principal == 1_000.0


def test_negative_rate_yields_negative_interest():
    res = calculate_loan(make_loan_inputs(home_price=10_000, down_payment=0, annual_interest_rate=-6, loan_term_years=10))
    assert res.monthly_payment > 0
    assert res.total_paid < res.principal
    assert res.total_interest < 0


def test_overflowing_growth_factor_converges_to_interest_only():
    # (1 + r)^n overflows a float; payment → P * r
    pmt = monthly_payment(10_000, 1_000_000, 30)
    assert pmt == pytest.approx(10_000 * (1_000_000 / 100 / 12))


def test_tiny_rate_does_not_divide_by_zero():
    pmt = monthly_payment(12_000, 1e-18, 1)
    assert pmt == pytest.approx(1_000.0)


def test_monthly_payment_matches_standard_mortgage():
    # 300k @ 6% for 30 years ≈ 1,798.65
    assert monthly_payment(300_000, 6, 30) == pytest.approx(1_798.65, abs=0.01)
