"""Numeric formatting helpers for chemistry calculations."""

from __future__ import annotations

_DEFAULT_PRECISION = 6


def format_scientific(value: float, significant_digits: int) -> str:
    """Format value in scientific notation with the given significant digits.

    A digit count below one falls back to the default precision of six
    digits after the decimal point.
    """
    precision = significant_digits - 1
    if precision < 0:
        precision = _DEFAULT_PRECISION
    return f"{value:.{precision}e}"


def print_scientific(value: float, significant_digits: int) -> None:
    """Write value in scientific notation to standard output, without a newline."""
    print(format_scientific(value, significant_digits), end="")