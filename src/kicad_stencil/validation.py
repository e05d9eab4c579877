"""Input validation for stencil tool parameters."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .config import Unit
from .schema import Side


@dataclass
class ValidationResult:
    """Result of a validation operation."""

    valid: bool
    value: Any = None
    error: str | None = None

    @classmethod
    def success(cls, value: Any = None) -> ValidationResult:
        return cls(valid=True, value=value)

    @classmethod
    def failure(cls, error: str) -> ValidationResult:
        return cls(valid=False, error=error)


def validate_unit(value: str) -> ValidationResult:
    """Validate an output unit name ('mm' or 'inch')."""
    if not isinstance(value, str):
        return ValidationResult.failure(f"unit must be a string, got {type(value).__name__}")
    try:
        return ValidationResult.success(Unit(value.strip().lower()))
    except ValueError:
        choices = ", ".join(u.value for u in Unit)
        return ValidationResult.failure(f"unit must be one of: {choices}; got {value!r}")


def validate_cut_times(value: int) -> ValidationResult:
    """Validate the number of passes over each pad edge (1 or 2)."""
    try:
        times = int(value)
    except (TypeError, ValueError):
        return ValidationResult.failure(f"cut_times must be an integer, got {value!r}")
    if times not in (1, 2):
        return ValidationResult.failure(f"cut_times must be 1 or 2, got {times}")
    return ValidationResult.success(times)


def validate_side(value: str) -> ValidationResult:
    """Validate a board side filter ('top', 'bottom', or 'both')."""
    normalized = value.strip().lower() if isinstance(value, str) else ""
    if normalized == "both":
        return ValidationResult.success(None)
    try:
        return ValidationResult.success(Side(normalized))
    except ValueError:
        return ValidationResult.failure(f"side must be 'top', 'bottom' or 'both', got {value!r}")


def validate_output_base(value: str) -> ValidationResult:
    """Validate the base path stencil documents are written next to.

    The parent directory must already exist.
    """
    if not value or not str(value).strip():
        return ValidationResult.failure("output_base must not be empty")
    base = Path(value).expanduser()
    if base.name in ("", ".", ".."):
        return ValidationResult.failure(f"output_base must name a file, got {value!r}")
    parent = base.parent
    if not parent.is_dir():
        return ValidationResult.failure(f"Directory does not exist: {parent}")
    return ValidationResult.success(base)
