"""Exact rational arithmetic over integer numerator/denominator pairs.

This is the shared capability behind Fraction, Percent and TokenAmount. All
operations are plain functions over ``Ratio`` and work purely in the integer
domain by cross-multiplication:

- No GCD reduction is ever applied, so representations grow across chained
  operations but stay exact.
- Zero denominators are accepted everywhere. They only become observable in
  ``as_number`` (inf/-inf/nan) and in the integer ``quotient``/``remainder``
  (ZeroDivisionError).
- ``quotient`` truncates toward zero, and ``remainder`` takes the sign of the
  numerator, unlike Python's floor-based ``//`` and ``%``.
"""

import math
from typing import Literal, NamedTuple

from token_math.constants import Rounding, ZERO
from token_math.formatting import format_fixed
from token_math.logging import get_logger

logger = get_logger(__name__)

#: Decimal places used when a native float division overflows.
AS_NUMBER_FALLBACK_PLACES: int = 10


class Ratio(NamedTuple):
    """Integer numerator over integer denominator."""

    numerator: int
    denominator: int


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------


def add(a: Ratio, b: Ratio) -> Ratio:
    if a.denominator == b.denominator:
        return Ratio(a.numerator + b.numerator, a.denominator)
    return Ratio(
        a.numerator * b.denominator + b.numerator * a.denominator,
        a.denominator * b.denominator,
    )


def subtract(a: Ratio, b: Ratio) -> Ratio:
    if a.denominator == b.denominator:
        return Ratio(a.numerator - b.numerator, a.denominator)
    return Ratio(
        a.numerator * b.denominator - b.numerator * a.denominator,
        a.denominator * b.denominator,
    )


def multiply(a: Ratio, b: Ratio) -> Ratio:
    return Ratio(a.numerator * b.numerator, a.denominator * b.denominator)


def divide(a: Ratio, b: Ratio) -> Ratio:
    """Divide ``a`` by ``b``. A zero ``b`` yields a zero denominator, not an error."""
    return Ratio(a.numerator * b.denominator, a.denominator * b.numerator)


def invert(a: Ratio) -> Ratio:
    return Ratio(a.denominator, a.numerator)


# ---------------------------------------------------------------------------
# Comparison (cross-multiplication, never floating)
# ---------------------------------------------------------------------------


def _cross_difference(a: Ratio, b: Ratio) -> int:
    """Return ``(a - b) * |a.denominator * b.denominator|``, which has the sign of ``a - b``."""
    difference = a.numerator * b.denominator - b.numerator * a.denominator
    # a negative denominator product flips the inequality
    if (a.denominator < ZERO) != (b.denominator < ZERO):
        return -difference
    return difference


def less_than(a: Ratio, b: Ratio) -> bool:
    return _cross_difference(a, b) < ZERO


def equal_to(a: Ratio, b: Ratio) -> bool:
    return _cross_difference(a, b) == ZERO


def greater_than(a: Ratio, b: Ratio) -> bool:
    return _cross_difference(a, b) > ZERO


def compare(a: Ratio, b: Ratio) -> Literal[-1, 0, 1]:
    """Three-way comparison; equality is checked first."""
    if equal_to(a, b):
        return 0
    return 1 if greater_than(a, b) else -1


# ---------------------------------------------------------------------------
# Integer projections
# ---------------------------------------------------------------------------


def quotient(a: Ratio) -> int:
    """Integer division truncating toward zero.

    Raises:
        ZeroDivisionError: If the denominator is zero.
    """
    q = abs(a.numerator) // abs(a.denominator)
    return -q if (a.numerator < 0) != (a.denominator < 0) else q


def remainder(a: Ratio) -> Ratio:
    """Remainder consistent with ``quotient``, over the same denominator."""
    return Ratio(a.numerator - a.denominator * quotient(a), a.denominator)


def is_zero(a: Ratio) -> bool:
    """True only for a zero numerator over a non-zero denominator (0/0 is not zero)."""
    return a.numerator == ZERO and a.denominator != ZERO


# ---------------------------------------------------------------------------
# Lossy numeric projection
# ---------------------------------------------------------------------------


def as_number(a: Ratio) -> float:
    """Project to a native float.

    Zero denominators map to +inf, -inf or nan by the sign of the numerator.
    When the quotient is beyond float range, the 10-place decimal rendering is
    parsed instead (which yields a signed infinity).
    """
    if a.denominator == ZERO:
        if a.numerator > ZERO:
            return math.inf
        if a.numerator < ZERO:
            return -math.inf
        return math.nan
    try:
        return a.numerator / a.denominator
    except OverflowError:
        logger.debug(
            "as_number_overflow_fallback",
            numerator_bits=a.numerator.bit_length(),
            denominator_bits=a.denominator.bit_length(),
        )
        return float(
            format_fixed(
                a.numerator,
                a.denominator,
                AS_NUMBER_FALLBACK_PLACES,
                rounding=Rounding.ROUND_HALF_UP,
            )
        )


__all__ = [
    "Ratio",
    "AS_NUMBER_FALLBACK_PLACES",
    "add",
    "subtract",
    "multiply",
    "divide",
    "invert",
    "less_than",
    "equal_to",
    "greater_than",
    "compare",
    "quotient",
    "remainder",
    "is_zero",
    "as_number",
]
