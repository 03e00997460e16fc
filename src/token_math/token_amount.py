"""Token amounts: raw base-unit integers bound to a token's decimal scale.

A TokenAmount is the fraction ``raw / 10**token.decimals``. It wraps a
Fraction rather than extending it:

- ``add``/``subtract`` require ``token.equals`` and return a TokenAmount.
- Rendering defaults round DOWN so balances are never overstated, and may
  not exceed the token's own decimal places.
- Ratio-style results (``divide_by_amount``, ``divide_by``) come back as
  Percent; ``multiply``/``divide`` with arbitrary values return a Fraction.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import Any, Generic, Literal, TypeVar

from token_math.constants import MAX_U64, MAX_U256, ONE, ZERO, Rounding
from token_math.exceptions import InvalidArgument, RangeError, TokenMismatch
from token_math.formatting import (
    LocaleFormat,
    NumberFormat,
    apply_number_format,
    divide_to_fixed,
    format_locale,
    scale_to_integer,
    strip_trailing_zeroes,
)
from token_math.fraction import Fraction, FractionObject, try_parse_fraction
from token_math.logging import get_logger
from token_math.percent import Percent
from token_math.token import Token
from token_math.utils import BigintIsh, make_decimal_multiplier, parse_bigint_ish

logger = get_logger(__name__)

T = TypeVar("T", bound=Token)

#: Construction-time check on the parsed raw quantity.
Validator = Callable[[int], None]


def _validate_range(value: int, maximum: int, bound: str) -> None:
    if value < ZERO:
        logger.debug("token_amount_range_violation", value=str(value), bound=bound)
        raise RangeError(f"{value} must be non-negative")
    if value > maximum:
        logger.debug("token_amount_range_violation", value=str(value), bound=bound)
        raise RangeError(f"{value} overflows {bound}")


def validate_u64(value: int) -> None:
    """Require ``0 <= value <= 2**64 - 1``."""
    _validate_range(value, MAX_U64, "u64")


def validate_u256(value: int) -> None:
    """Require ``0 <= value <= 2**256 - 1``."""
    _validate_range(value, MAX_U256, "u256")


class TokenAmount(Generic[T]):
    """An amount of ``token`` held as raw base units.

    Args:
        token: The token; shared by reference, never copied.
        amount: Raw base-unit quantity (not the human-scaled value).
        validate: Optional range check run on the parsed raw quantity,
            e.g. ``validate_u64``.

    Raises:
        ParseError: If ``amount`` is not an exact integer.
        RangeError: If ``validate`` rejects the quantity.
        InvalidArgument: If ``token.decimals`` is not a non-negative int.
    """

    __slots__ = ("_token", "_fraction")

    def __init__(self, token: T, amount: BigintIsh, validate: Validator | None = None) -> None:
        parsed = parse_bigint_ish(amount)
        if validate is not None:
            validate(parsed)
        self._token = token
        self._fraction = Fraction(parsed, make_decimal_multiplier(token.decimals))

    @classmethod
    def parse_from_string(cls, token: T, ui_amount: str) -> TokenAmount[T]:
        """Parse a human decimal string such as ``"1.5"``.

        Digits below the token's base unit are truncated.
        """
        return cls(token, scale_to_integer(ui_amount, token.decimals))

    # ------------- accessors -------------

    @property
    def token(self) -> T:
        return self._token

    @property
    def raw(self) -> int:
        """Raw base-unit quantity."""
        return self._fraction.numerator

    @property
    def numerator(self) -> int:
        return self._fraction.numerator

    @property
    def denominator(self) -> int:
        """Always ``10**token.decimals``."""
        return self._fraction.denominator

    @property
    def as_fraction(self) -> Fraction:
        return self._fraction

    @property
    def as_number(self) -> float:
        return self._fraction.as_number

    @property
    def quotient(self) -> int:
        return self._fraction.quotient

    @property
    def remainder(self) -> Fraction:
        return self._fraction.remainder

    def to_json(self) -> FractionObject:
        return self._fraction.to_json()

    # ------------- rendering -------------

    def to_significant(
        self,
        significant_digits: int = 6,
        fmt: NumberFormat | None = None,
        rounding: Rounding = Rounding.ROUND_DOWN,
    ) -> str:
        return self._fraction.to_significant(significant_digits, fmt, rounding)

    def to_fixed(
        self,
        decimal_places: int | None = None,
        fmt: NumberFormat | None = None,
        rounding: Rounding = Rounding.ROUND_DOWN,
    ) -> str:
        """Render with ``decimal_places`` digits (default: all token decimals).

        Raises:
            InvalidArgument: If ``decimal_places`` exceeds ``token.decimals``
                or is not a non-negative int.
        """
        if decimal_places is None:
            decimal_places = self._token.decimals
        if isinstance(decimal_places, int) and decimal_places > self._token.decimals:
            raise InvalidArgument(
                f"{decimal_places} decimal places exceeds token decimals "
                f"{self._token.decimals}"
            )
        return self._fraction.to_fixed(decimal_places, fmt, rounding)

    def to_exact(self, fmt: NumberFormat | None = None) -> str:
        """Exact value at token scale, without insignificant trailing zeros."""
        value = divide_to_fixed(self.raw, self.denominator, self._token.decimals)
        return apply_number_format(strip_trailing_zeroes(format(value, "f")), fmt)

    def format(self, options: LocaleFormat | None = None) -> str:
        """Human-readable amount.

        Without options, the full-precision value with trailing zeros
        stripped: 1.500000 becomes ``"1.5"`` and 2.000000 becomes ``"2"``.
        With options, locale-aware output from Babel.
        """
        exact = self.to_fixed(self._token.decimals)
        if options is None:
            return strip_trailing_zeroes(exact)
        return format_locale(Decimal(exact), options)

    # ------------- same-token arithmetic -------------

    def _require_same_token(self, other: TokenAmount[T], operation: str) -> None:
        if not isinstance(other, TokenAmount):
            raise TypeError(f"{operation} expects a TokenAmount, got {type(other).__name__}")
        if not self._token.equals(other.token):
            raise TokenMismatch(
                f"{operation} token mismatch: {self._token!r} != {other.token!r}"
            )

    def add(self, other: TokenAmount[T]) -> TokenAmount[T]:
        self._require_same_token(other, "add")
        return TokenAmount(self._token, self.raw + other.raw)

    def subtract(self, other: TokenAmount[T]) -> TokenAmount[T]:
        self._require_same_token(other, "subtract")
        return TokenAmount(self._token, self.raw - other.raw)

    def divide_by_amount(self, other: TokenAmount[T]) -> Percent:
        """This amount as a percentage of another amount of the same token."""
        self._require_same_token(other, "divide_by_amount")
        return Percent.from_fraction(self._fraction.divide(other.as_fraction))

    def divide_by(self, other: Any) -> Percent:
        """This amount divided by an arbitrary fraction, as a Percent."""
        return Percent.from_fraction(self._fraction.divide(other))

    def multiply_by(
        self, percent: Any, rounding: Rounding = Rounding.ROUND_DOWN
    ) -> TokenAmount[T]:
        """Scale the raw amount by a percent.

        WARNING: this loses precision. The scaled raw amount is cut to an
        integer with ``rounding`` (truncation by default).
        """
        scaled = try_parse_fraction(percent).multiply(self.raw)
        return TokenAmount(self._token, scaled.to_fixed(0, rounding=rounding))

    def reduce_by(
        self, percent: Any, rounding: Rounding = Rounding.ROUND_DOWN
    ) -> TokenAmount[T]:
        """Reduce by a percent, i.e. ``multiply_by(1 - percent)``. Loses precision."""
        return self.multiply_by(Percent(ONE).subtract(percent), rounding)

    def __add__(self, other: TokenAmount[T]) -> TokenAmount[T]:
        return self.add(other)

    def __sub__(self, other: TokenAmount[T]) -> TokenAmount[T]:
        return self.subtract(other)

    # ------------- fraction comparisons and projections -------------

    def less_than(self, other: Any) -> bool:
        return self._fraction.less_than(other)

    def equal_to(self, other: Any) -> bool:
        return self._fraction.equal_to(other)

    def greater_than(self, other: Any) -> bool:
        return self._fraction.greater_than(other)

    def compare_to(self, other: Any) -> Literal[-1, 0, 1]:
        return self._fraction.compare_to(other)

    def multiply(self, other: Any) -> Fraction:
        return self._fraction.multiply(other)

    def divide(self, other: Any) -> Fraction:
        return self._fraction.divide(other)

    def invert(self) -> Fraction:
        return self._fraction.invert()

    def is_zero(self) -> bool:
        return self._fraction.is_zero()

    def is_non_zero(self) -> bool:
        return not self.is_zero()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenAmount):
            return NotImplemented
        return self._token.equals(other.token) and self.raw == other.raw

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TokenAmount(token={self._token!r}, raw={self.raw})"


__all__ = ["TokenAmount", "Validator", "validate_u64", "validate_u256"]
