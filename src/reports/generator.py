# src/reports/generator.py
from __future__ import annotations

import os
from datetime import date

from src.reports.formatting import format_currency
from src.schemas.models import LoanSummary

REPORT_TITLE = "Loan Payment Summary"
ORGANIZATION = "Bedrock Communities"
DISCLAIMER = "This is an estimate only. Actual payments may vary."


def _section(title: str) -> str:
    """
    Render a level-2 heading for Markdown sections.
    """
    return f"\n## {title}\n"


def _fmt_plain(x: float) -> str:
    """
    Render a number the way it was typed: no trailing .0 on whole values.

    Example:
        10.0 -> 10
        12.5 -> 12.5
    """
    return str(int(x)) if float(x).is_integer() else repr(float(x))


def _fmt_date(d: date) -> str:
    """US short date, e.g. 10/18/2026."""
    return f"{d.month}/{d.day}/{d.year}"


# -----------------------
# Sections
# -----------------------


def _render_header(generated_on: date) -> str:
    """
    Render the report header with organization and generation date.
    """
    body = [
        f"# {ORGANIZATION}",
        "",
        f"**{REPORT_TITLE}**",
        "",
        f"Generated: {_fmt_date(generated_on)}",
    ]
    return "\n".join(body) + "\n"


def _render_loan_details(summary: LoanSummary) -> str:
    """
    Render the inputs side: price, down payment, loan amount, rate, term.
    Percent-mode down payments show both the percent and the resolved amount.
    """
    inputs = summary.inputs
    dp_amount = format_currency(inputs.down_payment)
    if summary.down_payment_percent is not None:
        dp_text = f"{_fmt_plain(summary.down_payment_percent)}% ({dp_amount})"
    else:
        dp_text = dp_amount

    lines = [
        _section("Loan Details"),
        f"- **Home Price:** {format_currency(inputs.home_price)}",
        f"- **Down Payment:** {dp_text}",
        f"- **Loan Amount:** {format_currency(summary.results.principal)}",
        f"- **Interest Rate:** {_fmt_plain(inputs.annual_interest_rate)}% per year",
        f"- **Loan Term:** {_fmt_plain(inputs.loan_term_years)} years",
    ]
    return "\n".join(lines) + "\n"


def _render_payment_summary(summary: LoanSummary) -> str:
    """
    Render the computed figures with the monthly payment emphasized.
    """
    results = summary.results
    lines = [
        _section("Payment Summary"),
        f"- **Monthly Payment:** **{format_currency(results.monthly_payment)}**",
        f"- **Total Amount Paid:** {format_currency(results.total_paid)}",
        f"- **Total Interest:** {format_currency(results.total_interest)}",
    ]
    return "\n".join(lines) + "\n"


def _render_footer() -> str:
    return f"\n---\n\n_{DISCLAIMER}_\n"


# -----------------------
# Orchestration
# -----------------------


def generate_summary(summary: LoanSummary, generated_on: date | None = None) -> str:
    """
    Generate a Markdown loan payment summary.

    Sections:
      - Header: organization, title, generation date
      - Loan Details: home price, down payment, loan amount, rate, term
      - Payment Summary: monthly payment, total paid, total interest
      - Footer: estimate disclaimer
    """
    parts = [
        _render_header(generated_on or date.today()),
        _render_loan_details(summary),
        _render_payment_summary(summary),
        _render_footer(),
    ]
    return "\n".join(part for part in parts if part).strip() + "\n"


def write_summary(path: str, summary: LoanSummary, generated_on: date | None = None) -> None:
    """
    Convenience helper to write the generated summary to disk (parent dirs created).
    """
    md = generate_summary(summary, generated_on=generated_on)
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(md)
