"""Integer constants and rounding modes shared across token-math."""

import decimal
from enum import Enum


class Rounding(str, Enum):
    """Rounding mode applied when an exact rational is cut to finite digits.

    Values are the matching ``decimal`` module constants, so
    ``Rounding(decimal.ROUND_HALF_UP)`` works and ``mode.value`` can be handed
    straight to ``Decimal.quantize``.
    """

    ROUND_UP = decimal.ROUND_UP  # away from zero
    ROUND_DOWN = decimal.ROUND_DOWN  # toward zero
    ROUND_HALF_UP = decimal.ROUND_HALF_UP
    ROUND_HALF_DOWN = decimal.ROUND_HALF_DOWN
    ROUND_HALF_EVEN = decimal.ROUND_HALF_EVEN
    ROUND_CEIL = decimal.ROUND_CEILING
    ROUND_FLOOR = decimal.ROUND_FLOOR


ZERO: int = 0
ONE: int = 1
TEN: int = 10

#: Largest raw quantity representable as an unsigned 64-bit integer.
MAX_U64: int = 2**64 - 1

#: Largest raw quantity representable as an unsigned 256-bit integer.
MAX_U256: int = 2**256 - 1

#: Basis points per whole (1 bps = 0.01%).
BPS_DENOMINATOR: int = 10_000

__all__ = [
    "Rounding",
    "ZERO",
    "ONE",
    "TEN",
    "MAX_U64",
    "MAX_U256",
    "BPS_DENOMINATOR",
]
