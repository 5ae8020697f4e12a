# tests/conftest.py
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from src.core.logging_setup import LOGGER_NAME
from tests.utils import make_form, make_loan_inputs, write_json

_ENV_VARS = ("LOANCALC_OUT", "LOANCALC_LOG_LEVEL", "LOANCALC_LOG_FILE")


# -------- Environment isolation --------
@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers a test installed so streams captured by pytest don't leak."""
    logger = logging.getLogger(LOGGER_NAME)
    before = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in before:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


# -------- Domain fixtures --------
@pytest.fixture
def loan_inputs():
    """Factory for LoanInputs (defaults to the built-in example)."""

    def _factory(**overrides):
        return make_loan_inputs(**overrides)

    return _factory


@pytest.fixture
def loan_form():
    """Factory for LoanForm (defaults to the built-in example, percent mode)."""

    def _factory(**overrides):
        return make_form(**overrides)

    return _factory


@pytest.fixture
def config_file(tmp_path: Path):
    """
    Callable factory writing a JSON config into the test's tmp path.

    Usage:
        path = config_file({"home_price": 60000, ...})
        path = config_file(payload, filename="loan.json")
    """

    def _factory(payload, *, filename: str = "inputs.json") -> Path:
        return write_json(tmp_path / filename, payload)

    return _factory


# -------- Pytest markers --------
def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks integration tests")
