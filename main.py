# main.py
"""
Entry Point: Chattel Loan Calculator

Purpose
-------
Compute a mobile-home chattel loan from the command line:
  1) Collect the form (flags, --example, or --config JSON).
  2) Validate and compute (monthly payment, total paid, total interest).
  3) Print the results; optionally write a Markdown loan summary.

Usage
-----
    python main.py --example
    python main.py --home-price '$60,000' --down-payment 10 --rate 9 --term 20
    python main.py --home-price 60000 --down-payment 6000 --amount --rate 9 --term 20 --out summary.md
    python main.py --config loan.json --log-level INFO

Exit status is 2 when the form does not validate (messages on stderr).
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from src.core.logging_setup import configure_logging
from src.inputs.errors import LoanFormError
from src.inputs.form import example_form
from src.inputs.inputs import AppInputs, InputsLoader
from src.orchestrator.calculator import run_calculation
from src.reports.formatting import format_currency
from src.reports.generator import write_summary
from src.schemas.models import LoanForm

logger = logging.getLogger("src.cli")

EXIT_INVALID_FORM = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for configurable runs."""
    p = argparse.ArgumentParser(description="Mobile Home Chattel Loan Calculator")
    p.add_argument("--config", type=str, default=None, help="Path to JSON config (bare form or {form, run}).")
    p.add_argument("--example", action="store_true", help="Start from the built-in example ($60,000, 10%% down, 9%%, 20 years).")
    p.add_argument("--home-price", type=str, default=None, help='Home price, e.g. "$60,000".')
    p.add_argument("--down-payment", type=str, default=None, help="Down payment: percent of price (default) or amount with --amount.")
    p.add_argument("--amount", action="store_true", help="Treat --down-payment as a dollar amount instead of a percent.")
    p.add_argument("--rate", type=str, default=None, help="Annual interest rate in percent, e.g. 9.")
    p.add_argument("--term", type=str, default=None, help="Loan term in years, e.g. 20.")
    p.add_argument("--out", type=str, default=None, help="Write a Markdown loan summary to this path (overrides config).")
    p.add_argument(
        "--log-level",
        type=str.upper,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level (overrides config).",
    )
    return p.parse_args(argv)


def build_config(args: argparse.Namespace, loader: InputsLoader | None = None) -> AppInputs:
    """Resolve the run configuration: config file or example/blank form, then CLI overrides."""
    loader = loader or InputsLoader()

    if args.config:
        cfg = loader.load(args.config)
    else:
        cfg = loader.from_form(example_form() if args.example else LoanForm())

    return loader.with_overrides(
        cfg,
        out=args.out,
        log_level=args.log_level,
        home_price=args.home_price,
        down_payment=args.down_payment,
        down_payment_mode="amount" if args.amount else None,
        interest_rate=args.rate,
        loan_term=args.term,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run one calculation; returns the process exit status."""
    args = parse_args(argv)
    cfg = build_config(args)
    configure_logging(cfg.run.log_level)

    try:
        summary = run_calculation(cfg.form)
    except LoanFormError as e:
        logger.info("Form rejected: %s", e)
        for field, msg in e.errors.items():
            print(f"{field}: {msg}", file=sys.stderr)
        return EXIT_INVALID_FORM

    results = summary.results
    print(f"Loan Amount:       {format_currency(results.principal)}")
    print(f"Monthly Payment:   {format_currency(results.monthly_payment)}")
    print(f"Total Amount Paid: {format_currency(results.total_paid)}")
    print(f"Total Interest:    {format_currency(results.total_interest)}")

    if cfg.run.out:
        write_summary(cfg.run.out, summary)
        print(f"Summary written to {cfg.run.out}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
