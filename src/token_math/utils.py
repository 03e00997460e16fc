"""Exact integer parsing for bigint-like inputs.

Everything numeric that enters token-math passes through ``parse_bigint_ish``
first, so the arithmetic core only ever sees Python ints.
"""

import numbers
import re
from decimal import Decimal

from token_math.constants import TEN
from token_math.exceptions import InvalidArgument, ParseError

#: Any input losslessly convertible to an exact integer.
BigintIsh = int | str | Decimal | float | numbers.Integral

_INTEGER_LITERAL = re.compile(r"^\s*[+-]?[0-9]+\s*$")


def parse_bigint_ish(value: BigintIsh) -> int:
    """Convert a bigint-like value to an exact int.

    Args:
        value: An int (or other Integral), a decimal integer literal string,
            or an integral float/Decimal.

    Returns:
        The exact integer value.

    Raises:
        ParseError: If the string is not an integer literal, the number is
            non-integral or non-finite, or the type is unsupported.
    """
    if isinstance(value, bool):
        raise ParseError(f"cannot parse bool {value!r} as an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        if not _INTEGER_LITERAL.match(value):
            raise ParseError(f"{value!r} is not an integer literal")
        return int(value)
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, float):
        if not value.is_integer():
            raise ParseError(f"{value!r} is not an integral number")
        return int(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ParseError(f"{value!r} is not a finite number")
        if value != value.to_integral_value():
            raise ParseError(f"{value!r} is not an integral number")
        return int(value)
    raise ParseError(f"cannot parse {type(value).__name__} as an integer")


def make_decimal_multiplier(decimals: int) -> int:
    """Return the scale ``10**decimals`` for a token with ``decimals`` places.

    Raises:
        InvalidArgument: If ``decimals`` is not a non-negative int.
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise InvalidArgument(f"{decimals!r} is not an integer.")
    if decimals < 0:
        raise InvalidArgument(f"{decimals} is negative.")
    return TEN**decimals


__all__ = ["BigintIsh", "parse_bigint_ish", "make_decimal_multiplier"]
