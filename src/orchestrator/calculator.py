# src/orchestrator/calculator.py
"""
Calculator pipeline (form → inputs → results).

Purpose
-------
Compose the independent pieces the way the form does:
  1) Validate and parse the raw form text -> LoanInputs
  2) Amortization engine -> LoanResults
  3) Bundle both (plus the form) into a LoanSummary for display/export

Public API
----------
run_calculation(form) -> LoanSummary      (raises LoanFormError)
run_example() -> LoanSummary
"""

from __future__ import annotations

import logging

from src.core.finance import calculate_loan
from src.core.normalize import parse_currency
from src.inputs.form import example_form, resolve_inputs
from src.schemas.models import LoanForm, LoanSummary

logger = logging.getLogger(__name__)


def run_calculation(form: LoanForm) -> LoanSummary:
    """
    Validate the form, compute the loan and return the bundled summary.

    Raises:
        LoanFormError: if the form does not validate.
    """
    inputs = resolve_inputs(form)
    logger.debug("Resolved loan inputs: %s", inputs.model_dump())

    results = calculate_loan(inputs)
    logger.info(
        "Loan computed: principal=%.2f monthly=%.2f total=%.2f interest=%.2f",
        results.principal,
        results.monthly_payment,
        results.total_paid,
        results.total_interest,
    )

    pct = parse_currency(form.down_payment) if form.down_payment_mode == "percent" else None
    return LoanSummary(form=form, inputs=inputs, results=results, down_payment_percent=pct)


def run_example() -> LoanSummary:
    """Compute the built-in example ($60,000, 10% down, 9%, 20 years)."""
    return run_calculation(example_form())
