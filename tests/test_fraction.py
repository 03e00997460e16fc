"""Tests for Fraction: exact arithmetic, comparison, rendering and serialization."""

import fractions
import math
from decimal import Decimal

import pytest

from token_math.constants import Rounding
from token_math.exceptions import InvalidArgument, ParseError
from token_math.formatting import NumberFormat
from token_math.fraction import Fraction, FractionObject, fraction_from_object, try_parse_fraction


class TestConstruction:
    def test_bigint_ish_fields_parsed(self) -> None:
        f = Fraction("12", Decimal("30"))
        assert f.numerator == 12
        assert f.denominator == 30

    def test_default_denominator(self) -> None:
        assert Fraction(7).denominator == 1

    def test_never_reduced(self) -> None:
        f = Fraction(2, 4)
        assert (f.numerator, f.denominator) == (2, 4)
        assert f != Fraction(1, 2)
        assert f.equal_to(Fraction(1, 2))

    def test_invalid_field_raises(self) -> None:
        with pytest.raises(ParseError):
            Fraction("1.5")

    def test_frozen(self) -> None:
        f = Fraction(1, 2)
        with pytest.raises(AttributeError):
            f.numerator = 3  # type: ignore[misc]

    def test_constants(self) -> None:
        assert Fraction.ZERO.is_zero()
        assert Fraction.ONE.equal_to(1)

    def test_from_number_floors(self) -> None:
        f = Fraction.from_number(0.5, 2)
        assert (f.numerator, f.denominator) == (50, 100)
        assert Fraction.from_number(-0.125, 2).numerator == -13

    def test_from_number_non_finite(self) -> None:
        with pytest.raises(ParseError):
            Fraction.from_number(float("nan"))


class TestTryParseFraction:
    def test_fraction_returned_as_is(self) -> None:
        f = Fraction(1, 3)
        assert try_parse_fraction(f) is f

    def test_stdlib_fraction(self) -> None:
        f = try_parse_fraction(fractions.Fraction(3, 4))
        assert (f.numerator, f.denominator) == (3, 4)

    def test_bigint_ish(self) -> None:
        assert try_parse_fraction("42") == Fraction(42, 1)

    def test_failure_message(self) -> None:
        with pytest.raises(ParseError, match="Could not parse fraction"):
            try_parse_fraction("nope")

    def test_is_fraction(self) -> None:
        assert Fraction.is_fraction(Fraction(1))
        assert Fraction.is_fraction(fractions.Fraction(1, 2)) is False
        assert Fraction.is_fraction(5) is False


class TestArithmetic:
    """Every result must match hand cross-multiplication exactly."""

    def test_add(self) -> None:
        result = Fraction(1, 3).add(Fraction(1, 6))
        assert (result.numerator, result.denominator) == (9, 18)

    def test_add_integer_operand(self) -> None:
        assert Fraction(1, 2).add(1).equal_to(Fraction(3, 2))

    def test_operators(self) -> None:
        a, b = Fraction(1, 2), Fraction(1, 3)
        assert (a + b).equal_to(Fraction(5, 6))
        assert (a - b).equal_to(Fraction(1, 6))
        assert (a * b).equal_to(Fraction(1, 6))
        assert (a / b).equal_to(Fraction(3, 2))
        assert (-a).equal_to(Fraction(-1, 2))

    def test_divide_by_zero_gives_zero_denominator(self) -> None:
        result = Fraction(1, 2).divide(0)
        assert result.denominator == 0
        assert result.as_number == math.inf

    def test_invert(self) -> None:
        assert Fraction(2, 5).invert() == Fraction(5, 2)

    @pytest.mark.parametrize(
        ("a", "b", "c", "d"),
        [
            (2**64 + 1, 3, 2**70 - 1, 7),
            (-(10**50), 10**30 + 1, 10**45, -(3**40)),
            (1, 2**128, 1, 2**128 - 1),
        ],
    )
    def test_exact_beyond_64_bits(self, a: int, b: int, c: int, d: int) -> None:
        expected = Fraction(a * d + c * b, b * d)
        assert Fraction(a, b).add(Fraction(c, d)).equal_to(expected)

    def test_input_unchanged(self) -> None:
        a = Fraction(1, 2)
        a.add(Fraction(1, 3))
        assert a == Fraction(1, 2)


class TestComparison:
    @pytest.mark.parametrize(
        ("x", "y"),
        [
            (Fraction(1, 2), Fraction(2, 4)),
            (Fraction(1, 3), Fraction(1, 2)),
            (Fraction(-5, 3), Fraction(2, -3)),
            (Fraction(2**100, 3), Fraction(2**100 - 1, 3)),
        ],
    )
    def test_exactly_one_relation_holds(self, x: Fraction, y: Fraction) -> None:
        relations = (x.less_than(y), x.equal_to(y), x.greater_than(y))
        assert sum(relations) == 1
        assert x.compare_to(y) == {0: -1, 1: 0, 2: 1}[relations.index(True)]

    def test_compare_to_integer(self) -> None:
        assert Fraction(3, 2).compare_to(1) == 1
        assert Fraction(3, 2).compare_to("2") == -1


class TestProjections:
    def test_quotient_and_remainder(self) -> None:
        assert Fraction(7, 2).quotient == 3
        assert Fraction(-7, 2).quotient == -3
        assert Fraction(-7, 2).remainder == Fraction(-1, 2)

    def test_quotient_zero_denominator(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Fraction(1, 0).quotient

    def test_as_number(self) -> None:
        assert Fraction(1, 4).as_number == 0.25
        assert Fraction(1, 0).as_number == math.inf
        assert Fraction(-1, 0).as_number == -math.inf
        assert math.isnan(Fraction(0, 0).as_number)

    def test_is_zero(self) -> None:
        assert Fraction(0, 5).is_zero()
        assert not Fraction(0, 0).is_zero()
        assert Fraction(0, 0).is_non_zero()

    def test_as_fraction_is_plain_copy(self) -> None:
        assert Fraction(3, 9).as_fraction == Fraction(3, 9)


class TestToFixed:
    def test_half_up_defaults(self) -> None:
        assert Fraction(1, 3).to_fixed(2, NumberFormat(), Rounding.ROUND_HALF_UP) == "0.33"
        assert Fraction(2, 3).to_fixed(2, NumberFormat(), Rounding.ROUND_HALF_UP) == "0.67"
        assert Fraction(5, 2).to_fixed(0, NumberFormat(), Rounding.ROUND_HALF_UP) == "3"

    def test_negative_places_rejected(self) -> None:
        with pytest.raises(InvalidArgument):
            Fraction(1, 3).to_fixed(-1)

    def test_exact_at_large_magnitude(self) -> None:
        f = Fraction(2**200 + 1, 2)
        assert f.to_fixed(1) == f"{2**199}.5"

    def test_zero_denominator_renders_sentinel(self) -> None:
        assert Fraction(1, 0).to_fixed(2) == "Infinity"


class TestToSignificant:
    def test_basic(self) -> None:
        assert Fraction(1, 3).to_significant(3) == "0.333"
        assert Fraction(12345, 10).to_significant(3) == "1230"

    def test_rounding_mode(self) -> None:
        assert Fraction(2, 3).to_significant(2, rounding=Rounding.ROUND_DOWN) == "0.66"

    def test_zero_digits_rejected(self) -> None:
        with pytest.raises(InvalidArgument):
            Fraction(1, 3).to_significant(0)


class TestSerialization:
    @pytest.mark.parametrize(
        "f",
        [Fraction(1, 3), Fraction(-17, 1000), Fraction(2**100, 3**50), Fraction(6, 4)],
    )
    def test_round_trip(self, f: Fraction) -> None:
        restored = Fraction.from_object(f.to_json())
        assert restored.equal_to(f)
        assert restored == f

    def test_wire_keys(self) -> None:
        assert Fraction(-3, 7).to_json().to_dict() == {
            "isFraction": True,
            "numeratorStr": "-3",
            "denominatorStr": "7",
        }

    def test_from_mapping(self) -> None:
        f = Fraction.from_object({"isFraction": True, "numeratorStr": "5", "denominatorStr": "8"})
        assert f == Fraction(5, 8)

    def test_json_round_trip(self) -> None:
        payload = Fraction(10**30, 7).to_json().model_dump_json(by_alias=True)
        restored = fraction_from_object(FractionObject.model_validate_json(payload))
        assert restored == Fraction(10**30, 7)

    @pytest.mark.parametrize(
        "record",
        [
            {"isFraction": True, "numeratorStr": "1.5", "denominatorStr": "2"},
            {"isFraction": False, "numeratorStr": "1", "denominatorStr": "2"},
            {"numeratorStr": "1"},
        ],
    )
    def test_invalid_record(self, record: dict) -> None:
        with pytest.raises(ParseError, match="Invalid fraction record"):
            Fraction.from_object(record)

    def test_numerator_and_denominator_strings_are_independent(self) -> None:
        f = Fraction(3, 8)
        assert f.numerator_str == "3"
        assert f.denominator_str == "8"
        assert f.numerator_str != f.denominator_str

    def test_str(self) -> None:
        assert str(Fraction(-1, 4)) == "-1/4"
