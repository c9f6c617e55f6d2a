"""Validation functions for raw console input."""

import re
from typing import Optional

INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


class ValidationError(Exception):
    """Raised when a line of user input cannot be accepted."""
    pass


def parse_int_in_range(text: str, min_val: int, max_val: int) -> int:
    """
    Parse an integer and check it falls within [min_val, max_val].

    Leading/trailing whitespace is ignored. Raises ValidationError with the
    message shown to the user on failure.
    """
    if text is None or not INTEGER_PATTERN.fullmatch(text.strip()):
        raise ValidationError("Invalid number. Please enter an integer.")
    value = int(text.strip())

    if value < min_val or value > max_val:
        raise ValidationError(f"Please enter a value between {min_val} and {max_val}.")

    return value


def parse_float_min(text: str, min_val: float) -> float:
    """Parse a decimal number that must be at least min_val."""
    try:
        value = float(text.strip())
    except (ValueError, AttributeError):
        raise ValidationError("Invalid number. Please enter a decimal number.")

    # nan/inf parse as floats but are not usable quantities
    if value != value or value in (float("inf"), float("-inf")):
        raise ValidationError("Invalid number. Please enter a decimal number.")

    if value < min_val:
        raise ValidationError(f"Please enter a value that is at least {_format_number(min_val)}.")

    return value


def parse_non_empty(text: Optional[str]) -> str:
    """Accept any line with at least one non-blank character."""
    if text is None or not text.strip():
        raise ValidationError("Input cannot be empty. Please try again.")
    return text.strip()


def validate_completions(completions: int, attempts: int) -> None:
    """Completions must lie in 0..attempts."""
    if completions < 0 or completions > attempts:
        raise ValidationError(
            f"Completions ({completions}) must be between 0 and attempts ({attempts})"
        )


def _format_number(value: float) -> str:
    return f"{value:g}"
