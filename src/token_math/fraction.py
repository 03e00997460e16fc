"""Arbitrary-precision fraction with exact arithmetic and controlled rendering.

A Fraction is an immutable integer numerator/denominator pair. Arithmetic and
comparison go through ``token_math.rational`` and never touch floating point.
Precision is only given up when rendering:

- ``to_fixed`` uses the decimal engine and is exact up to the rounding mode.
- ``to_significant`` and ``as_number`` go through a native float.

Fractions are never reduced, and a zero denominator is allowed (see
``as_number`` and ``is_zero``).
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from token_math import rational
from token_math.constants import ONE, Rounding
from token_math.exceptions import ParseError
from token_math.formatting import NumberFormat, format_fixed, format_significant
from token_math.utils import parse_bigint_ish

_INTEGER_STR = r"^-?[0-9]+$"


class FractionObject(BaseModel):
    """Wire record of a Fraction.

    Numerator and denominator travel as decimal integer strings so they cross
    JSON boundaries without precision loss. Serialize with ``to_dict()`` or
    ``model_dump_json(by_alias=True)`` to get the ``isFraction`` /
    ``numeratorStr`` / ``denominatorStr`` keys.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_fraction: Literal[True] = Field(default=True, alias="isFraction")
    numerator_str: str = Field(alias="numeratorStr", pattern=_INTEGER_STR)
    denominator_str: str = Field(alias="denominatorStr", pattern=_INTEGER_STR)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


def fraction_from_object(obj: FractionObject | Mapping[str, Any]) -> Fraction:
    """Create a Fraction from a FractionObject or a plain wire mapping.

    Raises:
        ParseError: If the record is malformed.
    """
    if isinstance(obj, FractionObject):
        record = obj
    else:
        try:
            record = FractionObject.model_validate(obj)
        except ValidationError as exc:
            raise ParseError(f"Invalid fraction record: {exc}") from exc
    return Fraction(record.numerator_str, record.denominator_str)


def try_parse_fraction(value: Any) -> Fraction:
    """Coerce a fraction-like object or a BigintIsh into a Fraction.

    Anything with ``numerator`` and ``denominator`` (Fraction, Percent,
    TokenAmount, ``fractions.Fraction``) keeps its exact ratio; other values
    are parsed as integers over 1.

    Raises:
        ParseError: If the value cannot be interpreted.
    """
    if isinstance(value, Fraction):
        return value
    if Fraction.is_fraction(value) or (
        isinstance(value, numbers.Rational) and not isinstance(value, numbers.Integral)
    ):
        return Fraction(value.numerator, value.denominator)
    try:
        return Fraction(parse_bigint_ish(value))
    except ParseError as exc:
        raise ParseError(f"Could not parse fraction: {exc}") from exc


@dataclass(frozen=True)
class Fraction:
    """Number with an integer numerator and denominator.

    Both fields accept any BigintIsh and are stored as ints. Dataclass
    equality (``==``) compares representations, so ``Fraction(1, 2)`` and
    ``Fraction(2, 4)`` differ under ``==`` but are ``equal_to`` each other.
    """

    numerator: int
    denominator: int = ONE

    ZERO: ClassVar[Fraction]
    ONE: ClassVar[Fraction]

    def __post_init__(self) -> None:
        object.__setattr__(self, "numerator", parse_bigint_ish(self.numerator))
        object.__setattr__(self, "denominator", parse_bigint_ish(self.denominator))

    # ------------- construction / serialization -------------

    @staticmethod
    def is_fraction(other: Any) -> bool:
        """True for Fraction and fraction-like objects (not plain numbers)."""
        if isinstance(other, Fraction):
            return True
        return (
            not isinstance(other, numbers.Number)
            and hasattr(other, "numerator")
            and hasattr(other, "denominator")
        )

    @classmethod
    def from_object(cls, other: Fraction | FractionObject | Mapping[str, Any]) -> Fraction:
        if isinstance(other, Fraction):
            return other
        return fraction_from_object(other)

    @classmethod
    def from_number(cls, number: float, decimals: int = 10) -> Fraction:
        """Parse a float, keeping ``decimals`` places (floored)."""
        if not math.isfinite(number):
            raise ParseError(f"{number!r} is not a finite number")
        multiplier = 10**decimals
        return cls(math.floor(number * multiplier), multiplier)

    def to_json(self) -> FractionObject:
        return FractionObject(
            numerator_str=self.numerator_str,
            denominator_str=self.denominator_str,
        )

    @property
    def numerator_str(self) -> str:
        return str(self.numerator)

    @property
    def denominator_str(self) -> str:
        return str(self.denominator)

    @property
    def as_fraction(self) -> Fraction:
        """Plain Fraction with the same representation."""
        return Fraction(self.numerator, self.denominator)

    @property
    def _ratio(self) -> rational.Ratio:
        return rational.Ratio(self.numerator, self.denominator)

    # ------------- arithmetic -------------

    def add(self, other: Any) -> Fraction:
        return Fraction(*rational.add(self._ratio, try_parse_fraction(other)._ratio))

    def subtract(self, other: Any) -> Fraction:
        return Fraction(*rational.subtract(self._ratio, try_parse_fraction(other)._ratio))

    def multiply(self, other: Any) -> Fraction:
        return Fraction(*rational.multiply(self._ratio, try_parse_fraction(other)._ratio))

    def divide(self, other: Any) -> Fraction:
        """Divide by another value. Dividing by zero yields a zero denominator."""
        return Fraction(*rational.divide(self._ratio, try_parse_fraction(other)._ratio))

    def invert(self) -> Fraction:
        """Swap numerator and denominator."""
        return Fraction(*rational.invert(self._ratio))

    def __add__(self, other: Any) -> Fraction:
        return self.add(other)

    def __sub__(self, other: Any) -> Fraction:
        return self.subtract(other)

    def __mul__(self, other: Any) -> Fraction:
        return self.multiply(other)

    def __truediv__(self, other: Any) -> Fraction:
        return self.divide(other)

    def __neg__(self) -> Fraction:
        return Fraction(-self.numerator, self.denominator)

    # ------------- comparison -------------

    def less_than(self, other: Any) -> bool:
        return rational.less_than(self._ratio, try_parse_fraction(other)._ratio)

    def equal_to(self, other: Any) -> bool:
        return rational.equal_to(self._ratio, try_parse_fraction(other)._ratio)

    def greater_than(self, other: Any) -> bool:
        return rational.greater_than(self._ratio, try_parse_fraction(other)._ratio)

    def compare_to(self, other: Any) -> Literal[-1, 0, 1]:
        return rational.compare(self._ratio, try_parse_fraction(other)._ratio)

    # ------------- integer projections -------------

    @property
    def quotient(self) -> int:
        """Integer quotient, truncated toward zero."""
        return rational.quotient(self._ratio)

    @property
    def remainder(self) -> Fraction:
        """Remainder after ``quotient``, over the same denominator."""
        return Fraction(*rational.remainder(self._ratio))

    def is_zero(self) -> bool:
        """True if the numerator is zero and the denominator is not."""
        return rational.is_zero(self._ratio)

    def is_non_zero(self) -> bool:
        return not self.is_zero()

    # ------------- rendering -------------

    @property
    def as_number(self) -> float:
        """Lossy float value; inf/-inf/nan for zero denominators."""
        return rational.as_number(self._ratio)

    def to_significant(
        self,
        significant_digits: int,
        fmt: NumberFormat | None = None,
        rounding: Rounding = Rounding.ROUND_HALF_UP,
    ) -> str:
        """Render ``as_number`` with exactly ``significant_digits`` digits.

        Goes through a float, so magnitudes past float precision lose digits.
        Use ``to_fixed`` for exact output.

        Raises:
            InvalidArgument: If ``significant_digits`` is not a positive int.
        """
        return format_significant(self.as_number, significant_digits, fmt, rounding)

    def to_fixed(
        self,
        decimal_places: int,
        fmt: NumberFormat | None = None,
        rounding: Rounding = Rounding.ROUND_HALF_UP,
    ) -> str:
        """Render with exactly ``decimal_places`` digits after the point.

        Raises:
            InvalidArgument: If ``decimal_places`` is not a non-negative int.
        """
        return format_fixed(self.numerator, self.denominator, decimal_places, fmt, rounding)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


Fraction.ZERO = Fraction(0)
Fraction.ONE = Fraction(1)


__all__ = ["Fraction", "FractionObject", "fraction_from_object", "try_parse_fraction"]
