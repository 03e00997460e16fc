"""Percent: an exact ratio rendered as parts per hundred.

A Percent stores the plain ratio (1/2 means 50%) and is never pre-multiplied.
The x100 scaling happens only at render time in ``to_fixed`` and
``to_significant``. Arithmetic delegates to Fraction and returns Percent.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Literal

from token_math.constants import BPS_DENOMINATOR, ONE, Rounding
from token_math.formatting import NumberFormat
from token_math.fraction import Fraction, FractionObject, try_parse_fraction
from token_math.utils import BigintIsh, parse_bigint_ish

_ONE_HUNDRED = Fraction(100)


@dataclass(frozen=True)
class Percent:
    """Exact ratio with percentage-style rendering defaults."""

    numerator: int
    denominator: int = ONE

    ZERO: ClassVar[Percent]
    ONE_HUNDRED: ClassVar[Percent]

    def __post_init__(self) -> None:
        object.__setattr__(self, "numerator", parse_bigint_ish(self.numerator))
        object.__setattr__(self, "denominator", parse_bigint_ish(self.denominator))

    @classmethod
    def from_bps(cls, bps: BigintIsh) -> Percent:
        """Percent from basis points: 25 bps is 25/10000."""
        return cls(bps, BPS_DENOMINATOR)

    @classmethod
    def from_fraction(cls, fraction: Any) -> Percent:
        parsed = try_parse_fraction(fraction)
        return cls(parsed.numerator, parsed.denominator)

    @classmethod
    def from_object(cls, other: Percent | FractionObject | Mapping[str, Any]) -> Percent:
        if isinstance(other, Percent):
            return other
        return cls.from_fraction(Fraction.from_object(other))

    @property
    def as_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def to_json(self) -> FractionObject:
        return self.as_fraction.to_json()

    # ------------- arithmetic (Percent in, Percent out) -------------

    def add(self, other: Any) -> Percent:
        return Percent.from_fraction(self.as_fraction.add(other))

    def subtract(self, other: Any) -> Percent:
        return Percent.from_fraction(self.as_fraction.subtract(other))

    def multiply(self, other: Any) -> Percent:
        return Percent.from_fraction(self.as_fraction.multiply(other))

    def divide(self, other: Any) -> Percent:
        return Percent.from_fraction(self.as_fraction.divide(other))

    def invert(self) -> Percent:
        return Percent(self.denominator, self.numerator)

    def __add__(self, other: Any) -> Percent:
        return self.add(other)

    def __sub__(self, other: Any) -> Percent:
        return self.subtract(other)

    def __mul__(self, other: Any) -> Percent:
        return self.multiply(other)

    def __truediv__(self, other: Any) -> Percent:
        return self.divide(other)

    # ------------- comparison and projections -------------

    def less_than(self, other: Any) -> bool:
        return self.as_fraction.less_than(other)

    def equal_to(self, other: Any) -> bool:
        return self.as_fraction.equal_to(other)

    def greater_than(self, other: Any) -> bool:
        return self.as_fraction.greater_than(other)

    def compare_to(self, other: Any) -> Literal[-1, 0, 1]:
        return self.as_fraction.compare_to(other)

    @property
    def quotient(self) -> int:
        return self.as_fraction.quotient

    @property
    def remainder(self) -> Fraction:
        return self.as_fraction.remainder

    def is_zero(self) -> bool:
        return self.as_fraction.is_zero()

    def is_non_zero(self) -> bool:
        return not self.is_zero()

    @property
    def as_number(self) -> float:
        """The underlying ratio as a float (0.5 for 50%)."""
        return self.as_fraction.as_number

    # ------------- rendering (x100) -------------

    def to_significant(
        self,
        significant_digits: int = 5,
        fmt: NumberFormat | None = None,
        rounding: Rounding = Rounding.ROUND_HALF_UP,
    ) -> str:
        return self.as_fraction.multiply(_ONE_HUNDRED).to_significant(
            significant_digits, fmt, rounding
        )

    def to_fixed(
        self,
        decimal_places: int = 2,
        fmt: NumberFormat | None = None,
        rounding: Rounding = Rounding.ROUND_HALF_UP,
    ) -> str:
        """Render as a percentage: ``Percent(1, 2).to_fixed()`` is ``"50.00"``.

        Pass ``NumberFormat(suffix="%")`` to get ``"50.00%"``.
        """
        return self.as_fraction.multiply(_ONE_HUNDRED).to_fixed(decimal_places, fmt, rounding)

    def __str__(self) -> str:
        return f"{self.to_fixed()}%"


Percent.ZERO = Percent(0)
Percent.ONE_HUNDRED = Percent(1)


__all__ = ["Percent"]
