"""
Rounding rules shared by the solvers and the unit converter.

Python's built-in round() uses banker's rounding; course counts and
displayed dimensions instead round half up, so these helpers are used
everywhere a value is discretised.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

_MAX_FRACTION_DIGITS: int = 5
_SIGNIFICANT_DIGITS: int = 8
# Enough digits to quantize any finite float to hundredths.
_QUANTIZE_CONTEXT = Context(prec=400)


def round_half_up(x: float) -> float:
    """Round to the nearest integer, ties toward positive infinity."""
    whole = math.floor(x)
    return float(whole + (x - whole >= 0.5))


def round_to_half(x: float) -> float:
    """Round to the nearest multiple of 0.5, ties upward."""
    return round_half_up(x * 2) / 2


def round_to_hundredths(x: float) -> float:
    """
    Round to 2 decimal places, ties away from zero.

    Works on the exact binary value of *x*, so 1.005 (stored just below
    1.005) rounds to 1.0 while 1007.125 (exact) rounds to 1007.13. Non-finite
    values pass through unchanged.
    """
    if not math.isfinite(x):
        return x
    hundredths = Decimal(x).quantize(
        Decimal("0.01"), rounding=ROUND_HALF_UP, context=_QUANTIZE_CONTEXT
    )
    return float(hundredths)


def fraction_digits(x: float) -> int:
    """Number of fractional digits in the shortest decimal form of *x*."""
    exponent = Decimal(repr(x)).as_tuple().exponent
    if not isinstance(exponent, int):
        return 0
    return max(0, -exponent)


def trim_precision(x: float) -> float:
    """
    Strip floating-point noise from a converted value.

    Values with more than five fractional digits are rounded to eight
    significant digits; anything shorter is returned untouched.
    """
    if fraction_digits(x) > _MAX_FRACTION_DIGITS:
        return float(f"{x:.{_SIGNIFICANT_DIGITS}g}")
    return x
