import math

import pytest

from src.reports.formatting import format_currency, format_percent


@pytest.mark.parametrize(
    "amount, expected",
    [
        (1234.56, "$1,234.56"),
        (1_000_000, "$1,000,000.00"),
        (0.99, "$0.99"),
        (0, "$0.00"),
        (485.85, "$485.85"),
        (116_604.48, "$116,604.48"),
    ],
)
def test_format_currency_usd(amount, expected):
    assert format_currency(amount) == expected


def test_negative_sign_goes_before_dollar():
    assert format_currency(-500) == "-$500.00"
    assert format_currency(-1234.5) == "-$1,234.50"


def test_negative_zero_renders_unsigned():
    assert format_currency(-0.0) == "$0.00"


def test_half_cent_rounds_away_from_zero():
    # 1.005 is stored just below 1.005 but its shortest form rounds up
    assert format_currency(1.005) == "$1.01"
    assert format_currency(0.125) == "$0.13"
    assert format_currency(-0.125) == "-$0.13"


def test_non_finite_values_do_not_raise():
    assert format_currency(math.nan) == "$NaN"
    assert format_currency(math.inf) == "$∞"
    assert format_currency(-math.inf) == "-$∞"


def test_format_percent():
    assert format_percent(9) == "9.00%"
    assert format_percent(8.888) == "8.89%"
    assert format_percent(7.5, decimals=1) == "7.5%"
