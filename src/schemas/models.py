# src/schemas/models.py

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DownPaymentMode = Literal["percent", "amount"]

# =========================
# Core inputs
# =========================


class LoanInputs(BaseModel):
    """
    Numeric loan parameters consumed by the amortization engine.
    No range checks here: the engine maps degenerate values to zero-filled results.
    """

    model_config = ConfigDict(frozen=True)

    home_price: float = Field(..., description="Purchase price of the home (currency units).")
    down_payment: float = Field(0.0, description="Down payment as a currency amount. May equal or exceed home_price.")
    annual_interest_rate: float = Field(..., description="Annual interest rate in percent (e.g., 9 = 9%).")
    loan_term_years: float = Field(..., description="Loan term in years. May be 0 or fractional.")


# =========================
# Computed outputs
# =========================


class LoanResults(BaseModel):
    """Amortized payment figures, each rounded to cents independently."""

    model_config = ConfigDict(frozen=True)

    monthly_payment: float = Field(..., description="Fixed monthly principal and interest payment.")
    total_paid: float = Field(..., description="monthly_payment × number of payments (rounded on its own).")
    total_interest: float = Field(..., description="total_paid − principal (rounded on its own).")
    principal: float = Field(..., description="Loan amount after the down payment; 0 when fully covered.")


# =========================
# Form (raw user input)
# =========================


class LoanForm(BaseModel):
    """
    Raw strings as typed into the calculator form.
    The down payment is a percentage of the home price unless down_payment_mode is "amount".
    """

    model_config = ConfigDict(frozen=True)

    home_price: str = Field("", description='Home price as typed, e.g. "$60,000".')
    down_payment: str = Field("", description='Down payment as typed: a percent ("10") or an amount ("6,000").')
    down_payment_mode: DownPaymentMode = Field("percent", description='"percent" of home price or a currency "amount".')
    interest_rate: str = Field("", description='Annual interest rate in percent, e.g. "9".')
    loan_term: str = Field("", description='Loan term in years, e.g. "20".')


class LoanSummary(BaseModel):
    """Everything needed to display or export one calculation."""

    model_config = ConfigDict(frozen=True)

    form: LoanForm
    inputs: LoanInputs
    results: LoanResults
    down_payment_percent: float | None = Field(
        None, description="Percent entered when the form used percent mode; None in amount mode."
    )
