"""Exact rational arithmetic for token balances, ratios and percentages.

Fraction is the exact core; Percent and TokenAmount wrap it with their own
rendering defaults and validation. Floating point only appears in the lossy
projections (``as_number``, ``to_significant``) and in ``compute_apy``.
"""

from token_math.apy import compute_apy
from token_math.constants import BPS_DENOMINATOR, MAX_U64, MAX_U256, ONE, TEN, ZERO, Rounding
from token_math.exceptions import (
    InvalidArgument,
    ParseError,
    RangeError,
    TokenMathError,
    TokenMismatch,
)
from token_math.formatting import DEFAULT_FORMAT, LocaleFormat, NumberFormat
from token_math.fraction import Fraction, FractionObject, fraction_from_object, try_parse_fraction
from token_math.percent import Percent
from token_math.token import Token
from token_math.token_amount import TokenAmount, Validator, validate_u64, validate_u256
from token_math.utils import BigintIsh, make_decimal_multiplier, parse_bigint_ish

__all__ = [
    "BPS_DENOMINATOR",
    "BigintIsh",
    "DEFAULT_FORMAT",
    "Fraction",
    "FractionObject",
    "InvalidArgument",
    "LocaleFormat",
    "MAX_U256",
    "MAX_U64",
    "NumberFormat",
    "ONE",
    "ParseError",
    "Percent",
    "RangeError",
    "Rounding",
    "TEN",
    "Token",
    "TokenAmount",
    "TokenMathError",
    "TokenMismatch",
    "Validator",
    "ZERO",
    "compute_apy",
    "fraction_from_object",
    "make_decimal_multiplier",
    "parse_bigint_ish",
    "try_parse_fraction",
    "validate_u256",
    "validate_u64",
]
