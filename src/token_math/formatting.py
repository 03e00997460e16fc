"""Decimal rendering of exact rationals.

Rendering is the only point where precision may be given up, and only under an
explicit rounding mode. Two paths exist:

- ``format_fixed`` divides the exact integers with the ``decimal`` engine and
  is correctly rounded at any magnitude.
- ``format_significant`` formats an already-lossy float projection, so it is
  bounded by float precision.

Every call builds its own ``decimal.Context``. The thread's ambient decimal
context is never read or modified, so rendering is reentrant.
"""

import math
from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    ROUND_05UP,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)

from babel.core import UnknownLocaleError
from babel.numbers import format_decimal

from token_math.config import get_settings
from token_math.constants import Rounding
from token_math.exceptions import InvalidArgument, ParseError
from token_math.logging import get_logger

logger = get_logger(__name__)

# Two digits beyond the target place, pre-rounded with ROUND_05UP, make the
# final quantize a single correct rounding of the exact quotient.
_GUARD_DIGITS = 2

_INFINITY = Decimal("Infinity")
_NEG_INFINITY = Decimal("-Infinity")
_NAN = Decimal("NaN")


@dataclass(frozen=True)
class NumberFormat:
    """Digit grouping and decoration for rendered numbers.

    The defaults render a plain number with no grouping.
    """

    prefix: str = ""
    decimal_separator: str = "."
    group_separator: str = ""
    group_size: int = 3
    secondary_group_size: int = 0  # 0 means same as group_size
    fraction_group_separator: str = ""
    fraction_group_size: int = 0
    suffix: str = ""


DEFAULT_FORMAT = NumberFormat()


@dataclass(frozen=True)
class LocaleFormat:
    """Options for locale-aware rendering through Babel.

    Mirrors the subset of ``Intl.NumberFormat`` options callers need. A
    ``locale`` of None falls back to ``FormatSettings.locale``.
    """

    locale: str | None = None
    minimum_fraction_digits: int = 0
    maximum_fraction_digits: int = 3
    use_grouping: bool = True

    def pattern(self) -> str:
        """Build the CLDR number pattern for these options."""
        integer = "#,##0" if self.use_grouping else "0"
        if self.maximum_fraction_digits <= 0:
            return integer
        optional = self.maximum_fraction_digits - self.minimum_fraction_digits
        return f"{integer}.{'0' * self.minimum_fraction_digits}{'#' * optional}"


def _context(prec: int, rounding: str) -> Context:
    return Context(
        prec=prec,
        rounding=rounding,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[InvalidOperation, DivisionByZero, Overflow],
    )


def _require_int(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{value!r} is not an integer.")


def divide_to_fixed(
    numerator: int,
    denominator: int,
    decimal_places: int,
    rounding: Rounding = Rounding.ROUND_HALF_UP,
) -> Decimal:
    """Divide two exact integers to exactly ``decimal_places`` fractional digits.

    Args:
        numerator: Dividend.
        denominator: Divisor. Zero yields Infinity, -Infinity or NaN.
        decimal_places: Digits after the decimal point (>= 0).
        rounding: Rounding mode for the final digit.

    Returns:
        A Decimal with exponent ``-decimal_places``, or a non-finite sentinel.

    Raises:
        InvalidArgument: If ``decimal_places`` is not a non-negative int.
    """
    _require_int(decimal_places)
    if decimal_places < 0:
        raise InvalidArgument(f"{decimal_places} is negative.")
    mode = Rounding(rounding).value

    if denominator == 0:
        if numerator > 0:
            return _INFINITY
        if numerator < 0:
            return _NEG_INFINITY
        return _NAN

    integer_digits = Decimal(abs(numerator) // abs(denominator)).adjusted() + 1
    prec = integer_digits + decimal_places + _GUARD_DIGITS
    approx = _context(prec, ROUND_05UP).divide(Decimal(numerator), Decimal(denominator))

    quantum = Decimal((0, (1,), -decimal_places))
    result = approx.quantize(quantum, rounding=mode, context=_context(prec + 1, mode))
    if result.is_zero():
        # -1/3 rounded to 0 places renders as "0", not "-0"
        result = result.copy_abs()
    return result


def scale_to_integer(ui_amount: str, decimals: int) -> int:
    """Parse a human decimal string and scale it by ``10**decimals``.

    Any remainder below one base unit is truncated, never rounded:
    ``scale_to_integer("1.2345678", 6)`` is ``1234567``.

    Raises:
        ParseError: If ``ui_amount`` is not a finite decimal string.
    """
    if not isinstance(ui_amount, str):
        raise ParseError(f"expected a decimal string, got {type(ui_amount).__name__}")
    try:
        value = Decimal(ui_amount)
    except InvalidOperation as exc:
        raise ParseError(f"{ui_amount!r} is not a decimal number") from exc
    if not value.is_finite():
        raise ParseError(f"{ui_amount!r} is not a finite number")

    ctx = _context(len(value.as_tuple().digits) + decimals + 1, Rounding.ROUND_DOWN.value)
    scaled = ctx.scaleb(value, decimals)
    return int(scaled.to_integral_value(rounding=Rounding.ROUND_DOWN.value, context=ctx))


def apply_number_format(plain: str, fmt: NumberFormat | None = None) -> str:
    """Apply grouping, separators and affixes to a plain decimal string.

    Args:
        plain: Output of ``format(Decimal, "f")``, e.g. ``"-1234.5"``.
        fmt: Format to apply. Defaults to no grouping.

    Returns:
        The decorated string.
    """
    fmt = fmt or DEFAULT_FORMAT
    sign = ""
    if plain.startswith("-"):
        sign, plain = "-", plain[1:]
    integer, _, fraction = plain.partition(".")

    integer = _group_integer(integer, fmt)
    if fraction and fmt.fraction_group_separator and fmt.fraction_group_size > 0:
        size = fmt.fraction_group_size
        fraction = fmt.fraction_group_separator.join(
            fraction[i : i + size] for i in range(0, len(fraction), size)
        )

    body = f"{integer}{fmt.decimal_separator}{fraction}" if fraction else integer
    return f"{fmt.prefix}{sign}{body}{fmt.suffix}"


def _group_integer(digits: str, fmt: NumberFormat) -> str:
    size = fmt.group_size
    if not fmt.group_separator or size <= 0 or len(digits) <= size:
        return digits
    head, tail = digits[:-size], digits[-size:]
    secondary = fmt.secondary_group_size or size
    groups = [tail]
    while len(head) > secondary:
        groups.insert(0, head[-secondary:])
        head = head[:-secondary]
    return fmt.group_separator.join([head, *groups])


def format_fixed(
    numerator: int,
    denominator: int,
    decimal_places: int,
    fmt: NumberFormat | None = None,
    rounding: Rounding = Rounding.ROUND_HALF_UP,
) -> str:
    """Render ``numerator / denominator`` with exactly ``decimal_places`` digits."""
    value = divide_to_fixed(numerator, denominator, decimal_places, rounding)
    if not value.is_finite():
        return str(value)
    return apply_number_format(format(value, "f"), fmt)


def format_significant(
    value: float,
    significant_digits: int,
    fmt: NumberFormat | None = None,
    rounding: Rounding = Rounding.ROUND_HALF_UP,
) -> str:
    """Render a float with exactly ``significant_digits`` significant digits.

    The float is read through its shortest decimal representation (``repr``),
    rounded, then padded with trailing zeros. Exponent notation is never used,
    so ``1234.5`` at 2 digits renders as ``"1200"`` and ``0`` at 3 digits as
    ``"0.00"``.

    Raises:
        InvalidArgument: If ``significant_digits`` is not a positive int.
    """
    _require_int(significant_digits)
    if significant_digits <= 0:
        raise InvalidArgument(f"{significant_digits} is not positive.")
    if math.isnan(value):
        return str(_NAN)
    if math.isinf(value):
        return str(_INFINITY if value > 0 else _NEG_INFINITY)

    mode = Rounding(rounding).value
    rounded = _context(significant_digits, mode).plus(Decimal(repr(value)))
    if rounded.is_zero():
        rounded = Decimal(0)
    exponent = rounded.adjusted() - significant_digits + 1
    padded = rounded.quantize(
        Decimal((0, (1,), exponent)),
        context=_context(significant_digits + 1, mode),
    )
    return apply_number_format(format(padded, "f"), fmt)


def strip_trailing_zeroes(num: str) -> str:
    """Drop insignificant fractional zeros, and the dot when nothing remains.

    ``"1.500000"`` becomes ``"1.5"`` and ``"2.000000"`` becomes ``"2"``.
    Malformed input is logged and returned unchanged.
    """
    head, sep, tail = num.partition(".")
    if not head or "." in tail:
        logger.warning("strip_trailing_zeroes_invalid_input", value=num)
        return num
    if not sep:
        return num
    tail = tail.rstrip("0")
    return f"{head}.{tail}" if tail else head


def format_locale(value: Decimal, options: LocaleFormat) -> str:
    """Render a Decimal with Babel's locale-aware number formatting.

    Raises:
        InvalidArgument: If the fraction digit bounds are inconsistent or the
            locale is unknown.
    """
    if not 0 <= options.minimum_fraction_digits <= options.maximum_fraction_digits:
        raise InvalidArgument(
            f"invalid fraction digits: minimum={options.minimum_fraction_digits}, "
            f"maximum={options.maximum_fraction_digits}"
        )
    locale = options.locale or get_settings().format.locale
    try:
        return format_decimal(value, format=options.pattern(), locale=locale)
    except (UnknownLocaleError, ValueError) as exc:
        raise InvalidArgument(f"cannot format for locale {locale!r}: {exc}") from exc


__all__ = [
    "NumberFormat",
    "DEFAULT_FORMAT",
    "LocaleFormat",
    "divide_to_fixed",
    "scale_to_integer",
    "apply_number_format",
    "format_fixed",
    "format_significant",
    "strip_trailing_zeroes",
    "format_locale",
]
