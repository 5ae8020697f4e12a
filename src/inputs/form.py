# src/inputs/form.py
"""
Calculator form handling: validate raw field text, then resolve it into LoanInputs.

Rules (checked before the engine is ever called)
------------------------------------------------
- home_price      must parse to a value > 0
- down_payment    is required; 0 to 100 in percent mode, 0 to home price in amount mode
- interest_rate   must be numeric and >= 0
- loan_term       must be numeric and > 0

Public API
----------
- validate_form(form) -> dict[str, str]   (empty when valid)
- resolve_inputs(form) -> LoanInputs      (raises LoanFormError)
- example_form() -> LoanForm
"""

from __future__ import annotations

from typing import cast

from src.core.normalize import parse_currency, parse_number
from src.inputs.errors import LoanFormError
from src.schemas.models import LoanForm, LoanInputs

HOME_PRICE_MSG = "Home price must be greater than $0"
DOWN_PAYMENT_REQUIRED_MSG = "Down payment is required"
DOWN_PAYMENT_PERCENT_MSG = "Percentage must be between 0 and 100"
DOWN_PAYMENT_AMOUNT_MSG = "Down payment cannot exceed home price"
INTEREST_RATE_MSG = "Interest rate must be 0 or greater"
LOAN_TERM_MSG = "Loan term must be greater than 0"


def example_form() -> LoanForm:
    """Built-in example: $60,000 home, 10% down, 9% APR, 20 years."""
    return LoanForm(
        home_price="60000",
        down_payment="10",
        down_payment_mode="percent",
        interest_rate="9",
        loan_term="20",
    )


def validate_form(form: LoanForm) -> dict[str, str]:
    """Return field → message for every invalid field (empty dict when the form is valid)."""
    errors: dict[str, str] = {}
    price = parse_currency(form.home_price)
    dp_value = parse_currency(form.down_payment)
    rate = parse_number(form.interest_rate)
    term = parse_number(form.loan_term)

    if not form.home_price or price <= 0:
        errors["home_price"] = HOME_PRICE_MSG

    if not form.down_payment:
        errors["down_payment"] = DOWN_PAYMENT_REQUIRED_MSG
    elif form.down_payment_mode == "percent":
        if dp_value < 0 or dp_value > 100:
            errors["down_payment"] = DOWN_PAYMENT_PERCENT_MSG
    elif dp_value < 0 or dp_value > price:
        errors["down_payment"] = DOWN_PAYMENT_AMOUNT_MSG

    if not form.interest_rate or rate is None or rate < 0:
        errors["interest_rate"] = INTEREST_RATE_MSG

    if not form.loan_term or term is None or term <= 0:
        errors["loan_term"] = LOAN_TERM_MSG

    return errors


def down_payment_amount(form: LoanForm) -> float:
    """Down payment in currency units (percent mode: pct / 100 × home price)."""
    price = parse_currency(form.home_price)
    dp_value = parse_currency(form.down_payment)
    if form.down_payment_mode == "percent":
        return (dp_value / 100) * price
    return dp_value


def resolve_inputs(form: LoanForm) -> LoanInputs:
    """
    Validate the form and convert it to numeric LoanInputs.

    Raises:
        LoanFormError: if any field is invalid (see validate_form).
    """
    errors = validate_form(form)
    if errors:
        raise LoanFormError(errors)

    # validate_form guarantees both parse
    rate = cast(float, parse_number(form.interest_rate))
    term = cast(float, parse_number(form.loan_term))

    return LoanInputs(
        home_price=parse_currency(form.home_price),
        down_payment=down_payment_amount(form),
        annual_interest_rate=rate,
        loan_term_years=term,
    )
