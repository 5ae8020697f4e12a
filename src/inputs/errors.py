"""
Typed errors for the calculator form layer.

Exports
-------
- LoanFormError
"""

from __future__ import annotations

from collections.abc import Mapping


class LoanFormError(ValueError):
    """One or more form fields failed validation; `errors` maps field name → message."""

    def __init__(self, errors: Mapping[str, str]):
        self.errors: dict[str, str] = dict(errors)
        detail = "; ".join(f"{field}: {msg}" for field, msg in self.errors.items())
        super().__init__(f"Invalid loan form ({detail})" if detail else "Invalid loan form")


__all__ = ["LoanFormError"]
