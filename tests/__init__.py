# tests/__init__.py
"""
Expose common test utilities so tests can import directly:
    from tests import make_loan_inputs, make_form
"""

from .utils import make_form, make_loan_inputs

__all__ = ["make_loan_inputs", "make_form"]
