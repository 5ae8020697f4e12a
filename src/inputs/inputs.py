# src/inputs/inputs.py
"""
Inputs loader for the loan calculator CLI.

Goals
-----
- File-first inputs with validation via Pydantic.
- Accept the bare form shape as well as a structured shape with run options.
- Minimal environment-variable overrides for CI/CLI convenience.

Supported JSON shapes
---------------------
1) Bare form (root = LoanForm)
   {
     "home_price": "60000",
     "down_payment": "10",
     "down_payment_mode": "percent",
     "interest_rate": "9",
     "loan_term": "20"
   }

2) Structured (root = AppInputs)
   {
     "form": { ... LoanForm ... },
     "run": {
       "out": "loan_summary.md",
       "log_level": "INFO"
     }
   }

Form values may be given as JSON numbers; they are read as the text a user
would have typed.

Environment overrides (optional)
--------------------------------
- LOANCALC_OUT        -> AppInputs.run.out
- LOANCALC_LOG_LEVEL  -> AppInputs.run.log_level (DEBUG/INFO/WARNING/ERROR/CRITICAL)

Public API
----------
- class InputsLoader:
    - load(path: str | Path | None) -> AppInputs
    - load_json(text: str) -> AppInputs
    - with_overrides(cfg, **kwargs) -> AppInputs (non-destructive copies)
- function load_inputs(path: str | Path | None) -> AppInputs  (convenience)
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, cast

from pydantic import BaseModel, Field, ValidationError

from src.schemas.models import LoanForm

logger = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_FORM_TEXT_FIELDS = ("home_price", "down_payment", "interest_rate", "loan_term")

# ----------------------------
# Pydantic models for structured inputs
# ----------------------------


class RunOptions(BaseModel):
    """Runtime (non-financial) options controlling the CLI run."""

    out: str | None = Field(None, description="Path to write the Markdown summary (None = print only).")
    log_level: LogLevel = Field("WARNING", description="Console log level.")


class AppInputs(BaseModel):
    """
    Full input payload.

    Attributes:
        form: The raw calculator form (validated later by the form layer).
        run:  Non-financial, runtime options for the current execution.
    """

    form: LoanForm
    run: RunOptions = RunOptions()


# ----------------------------
# Loader
# ----------------------------


@dataclass(frozen=True)
class InputsLoader:
    """
    File-first inputs loader with light env overrides.

    Responsibilities:
        - Read JSON from a file or string
        - Accept both the bare-form and structured shapes
        - Validate with Pydantic
        - Apply environment overrides for run options

    Default search (when path=None):
        1) ./loan.json
        2) ./config.json
    """

    env_prefix: str = "LOANCALC_"

    # ---------- Public API ----------

    def load(self, path: str | Path | None = None) -> AppInputs:
        """
        Load inputs from a JSON file (path). If path is None, try defaults.

        Raises:
            FileNotFoundError: no file at path (or no default found).
            ValueError: unreadable JSON or failed validation.
        """
        p = self._resolve_path(path)
        logger.debug("Loading inputs from %s", p)
        raw = self._read_json_file(p)
        return self._build(raw)

    def load_json(self, text: str) -> AppInputs:
        """
        Load inputs from a JSON string (either supported shape).
        """
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON payload: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError("Invalid JSON payload: root must be an object")
        return self._build(raw)

    def from_form(self, form: LoanForm) -> AppInputs:
        """Wrap an in-memory form (no file) with default run options plus env overrides."""
        return self._apply_env_overrides(AppInputs(form=form))

    def with_overrides(
        self,
        cfg: AppInputs,
        *,
        out: str | None = None,
        log_level: str | None = None,
        **form_fields: str | None,
    ) -> AppInputs:
        """
        Return a *new* AppInputs with provided non-null overrides applied.
        `out`/`log_level` update RunOptions; any other keyword updates the form.
        Does not mutate the original instance.
        """
        run_updates: dict[str, Any] = {}
        if out is not None:
            run_updates["out"] = out
        if log_level is not None:
            run_updates["log_level"] = log_level.strip().upper()

        form_updates = {k: v for k, v in form_fields.items() if v is not None}

        if not run_updates and not form_updates:
            return cfg

        # Re-validate through the models so overrides obey the same rules as files
        data = cfg.model_dump()
        data["run"].update(run_updates)
        data["form"].update(form_updates)
        return self._parse_root(data)

    # ---------- Internals ----------

    def _build(self, raw: dict[str, Any]) -> AppInputs:
        data = self._maybe_translate_bare_form(raw)
        cfg = self._parse_root(data)
        return self._apply_env_overrides(cfg)

    def _resolve_path(self, path: str | Path | None) -> Path:
        if path is not None:
            p = Path(path)
            if not p.exists():
                raise FileNotFoundError(f"Inputs file not found: {p}")
            return p

        # Default search order
        for candidate in (Path("loan.json"), Path("config.json")):
            if candidate.exists():
                return candidate
        raise FileNotFoundError("No inputs path provided and no default inputs found. Looked for ./loan.json and ./config.json.")

    def _read_json_file(self, p: Path) -> dict[str, Any]:
        if p.suffix.lower() != ".json":
            raise ValueError(f"Unsupported inputs format for {p.name}; only .json is supported.")
        try:
            json_file = json.loads(p.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {p}: {e}") from e
        if not isinstance(json_file, dict):
            raise ValueError(f"Invalid JSON in {p}: root must be an object")
        return cast(dict[str, Any], json_file)

    def _maybe_translate_bare_form(self, raw: dict[str, Any]) -> dict[str, Any]:
        """
        Accept a bare form (LoanForm at root) or the structured AppInputs shape,
        and turn numeric form values into the text a user would have typed.
        """
        data = dict(raw) if "form" in raw else {"form": dict(raw)}
        form = data.get("form")
        if isinstance(form, dict):
            form = dict(form)
            for key in _FORM_TEXT_FIELDS:
                value = form.get(key)
                # bool is an int subclass but never a sensible amount
                if isinstance(value, int | float) and not isinstance(value, bool):
                    form[key] = _number_to_text(value)
            data["form"] = form
        return data

    def _parse_root(self, data: dict[str, Any]) -> AppInputs:
        """
        Validate and return structured AppInputs.
        """
        try:
            return AppInputs.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Inputs validation failed:\n{e}") from e

    def _apply_env_overrides(self, cfg: AppInputs) -> AppInputs:
        """
        Apply light, optional overrides from environment variables to run options.
        """
        prefix = self.env_prefix
        updates: dict[str, Any] = {}

        out = os.getenv(f"{prefix}OUT")
        if out:
            updates["out"] = out

        level = os.getenv(f"{prefix}LOG_LEVEL")
        if level:
            normalized = level.strip().upper()
            if normalized in _LOG_LEVELS:
                updates["log_level"] = normalized
            else:
                # Ignore bad value; keep validated cfg.log_level
                logger.warning("Ignoring %sLOG_LEVEL=%r (expected one of %s)", prefix, level, ", ".join(_LOG_LEVELS))

        if not updates:
            return cfg

        run_new = cfg.run.model_copy(update=updates)
        return cfg.model_copy(update={"run": run_new})


def _number_to_text(value: int | float) -> str:
    """60000 -> "60000", 9.5 -> "9.5", 20.0 -> "20"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ----------------------------
# Convenience function
# ----------------------------


def load_inputs(path: str | Path | None = None) -> AppInputs:
    """Convenience wrapper for one-shot callers."""
    return InputsLoader().load(path)
