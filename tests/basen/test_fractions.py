"""Tests for the Fraction value type."""

import pytest

from basen.core.errors import (
    DivisionByZeroError,
    IncompatibleBaseError,
    MissingArgumentError,
    NotAnIntegerError,
)
from basen.fractions import Fraction, create_fraction
from basen.numbers import Number, create_infinity


class TestFractionCreation:
    """Test construction and normalization."""

    def test_default_denominator(self, number):
        """Test that the denominator defaults to one."""
        value = Fraction(number("5"))
        assert value.to_string() == "5/1"
        assert value.is_integer()

    def test_negative_denominator_is_normalized(self, fraction):
        """Test that the sign moves to the numerator."""
        value = fraction(3, -4)
        assert value.to_string() == "-3/4"
        assert value.denominator.is_positive()
        assert fraction(-3, -4).to_string() == "3/4"

    def test_zero_denominator_raises(self, fraction):
        """Test that x/0 is rejected."""
        with pytest.raises(DivisionByZeroError):
            fraction(1, 0)

    def test_non_integer_part_raises(self, number):
        """Test that numerator and denominator must be integers."""
        with pytest.raises(NotAnIntegerError):
            Fraction(number("1.5"), number("2"))
        with pytest.raises(NotAnIntegerError):
            Fraction(number("1"), create_infinity(10))

    def test_mixed_bases_raise(self, number):
        """Test that both parts must share a base."""
        with pytest.raises(IncompatibleBaseError):
            Fraction(number("1"), number("11", base=2))

    def test_missing_parts_raise(self):
        """Test the factory arguments."""
        with pytest.raises(MissingArgumentError):
            create_fraction(10, None)
        with pytest.raises(MissingArgumentError):
            create_fraction(10, 1, None)

    def test_repr(self, fraction):
        """Test the debug representation."""
        assert repr(fraction(1, 2, base=2)) == "Fraction('1/10', base=2)"


class TestFractionPredicates:
    """Test the predicates."""

    def test_zero_and_one(self, fraction):
        """Test zero and one detection."""
        assert fraction(0, 7).is_zero()
        assert fraction(3, 3).is_one()
        assert not fraction(-3, 3).is_one()

    def test_sign(self, fraction):
        """Test the sign predicates."""
        assert fraction(-1, 2).is_negative()
        assert fraction(1, 2).is_positive()
        assert not fraction(0, 2).is_positive()

    def test_is_integer(self, fraction):
        """Test that 6/3 is an integer and 7/3 is not."""
        assert fraction(6, 3).is_integer()
        assert not fraction(7, 3).is_integer()

    def test_is_reduced(self, fraction):
        """Test the lowest terms check."""
        assert fraction(3, 4).is_reduced()
        assert not fraction(6, 8).is_reduced()
        assert fraction(0, 1).is_reduced()
        assert not fraction(0, 5).is_reduced()

    def test_has_integer_part(self, fraction):
        """Test the magnitude check against one."""
        assert fraction(7, 2).has_integer_part()
        assert fraction(-7, 7).has_integer_part()
        assert not fraction(1, 2).has_integer_part()


class TestFractionArithmetic:
    """Test exact fraction arithmetic."""

    def test_add(self, fraction):
        """Test 1/2 + 1/3 = 5/6."""
        assert repr(fraction(1, 2).add(fraction(1, 3))) == "Fraction('5/6', base=10)"

    def test_add_common_denominator(self, fraction):
        """Test that equal denominators are kept and the result is not reduced."""
        assert (fraction(1, 4) + fraction(1, 4)).to_string() == "2/4"

    def test_subtract(self, fraction):
        """Test 1/2 - 3/4 = -2/8."""
        result = fraction(1, 2) - fraction(3, 4)
        assert result.to_string() == "-2/8"
        assert result == fraction(-1, 4)

    def test_multiply(self, fraction):
        """Test 2/3 * 3/4 = 6/12."""
        assert (fraction(2, 3) * fraction(3, 4)).to_string() == "6/12"

    def test_divide(self, fraction):
        """Test 2/3 / 4/5 = 10/12."""
        assert (fraction(2, 3) / fraction(4, 5)).to_string() == "10/12"

    def test_divide_by_negative(self, fraction):
        """Test that the denominator stays positive after division."""
        assert (fraction(1, 2) / fraction(-1, 3)).to_string() == "-3/2"

    def test_divide_by_zero_raises(self, fraction):
        """Test that division by a zero fraction is rejected."""
        with pytest.raises(DivisionByZeroError):
            fraction(1, 2) / fraction(0, 1)

    def test_with_numbers(self, number, fraction):
        """Test that finite numbers take part as fractions."""
        assert (fraction(1, 2) + number("0.5")) == number("1")
        assert (number("0.5") + fraction(1, 2)) == number("1")
        assert (fraction(1, 3) * 3).is_one()

    def test_with_infinity(self, fraction):
        """Test that infinity evaluates the fraction first."""
        result = fraction(1, 2) + create_infinity(10)
        assert isinstance(result, Number)
        assert result.is_infinity()

    def test_mixed_bases_raise(self, fraction):
        """Test that fractions of different bases are not combined."""
        with pytest.raises(IncompatibleBaseError):
            fraction(1, 2) + fraction(1, 2, base=2)


class TestFractionUnaryOperations:
    """Test the unary operations."""

    def test_negate_and_absolute_value(self, fraction):
        """Test the sign operations."""
        assert (-fraction(2, 3)).to_string() == "-2/3"
        assert abs(fraction(-2, 3)).to_string() == "2/3"

    def test_reciprocal(self, fraction):
        """Test that the sign stays on the numerator."""
        assert fraction(-2, 3).reciprocal().to_string() == "-3/2"

    def test_reciprocal_of_zero_raises(self, fraction):
        """Test that 0/1 has no reciprocal."""
        with pytest.raises(DivisionByZeroError):
            fraction(0, 1).reciprocal()

    def test_inc_and_dec(self, fraction):
        """Test adding and subtracting one."""
        assert fraction(1, 3).inc().to_string() == "4/3"
        assert fraction(1, 3).dec().to_string() == "-2/3"

    def test_doubling_and_halving(self, fraction):
        """Test doubling the numerator and halving by the denominator."""
        assert fraction(1, 3).doubling().to_string() == "2/3"
        assert fraction(1, 3).halving().to_string() == "1/6"

    def test_square(self, fraction):
        """Test squaring both parts."""
        assert fraction(-2, 3).square().to_string() == "4/9"


class TestFractionReduction:
    """Test reduction and splitting."""

    @pytest.mark.parametrize(
        "numerator,denominator,expected",
        [(6, 8, "3/4"), (-6, 8, "-3/4"), (0, 5, "0/1"), (3, 4, "3/4"), (12, 4, "3/1")],
    )
    def test_reduce(self, fraction, numerator, denominator, expected):
        """Test lowest terms."""
        assert fraction(numerator, denominator).reduce().to_string() == expected

    def test_integer_part(self, fraction):
        """Test truncation of the quotient."""
        assert fraction(7, 2).integer_part().to_string() == "3"
        assert fraction(-7, 2).integer_part().to_string() == "-3"

    def test_to_mixed(self, fraction):
        """Test that -7/2 is -3 and -1/2."""
        whole, rest = fraction(-7, 2).to_mixed()
        assert whole.to_string() == "-3"
        assert rest.to_string() == "-1/2"

    def test_common_divisors(self, fraction):
        """Test the divisors shared by numerator and denominator."""
        assert [str(d) for d in fraction(12, 18).common_divisors()] == ["1", "2", "3", "6"]
        assert [str(d) for d in fraction(8, 12).common_prime_factors()] == ["2", "2"]

    def test_is_common_divisor(self, number, fraction):
        """Test whether a number divides both parts."""
        assert fraction(12, 18).is_common_divisor(6)
        assert fraction(12, 18).is_common_divisor(number("-3"))
        assert not fraction(12, 18).is_common_divisor(4)
        assert not fraction(12, 18).is_common_divisor(0)

    def test_is_common_divisor_requires_integer(self, number, fraction):
        """Test that fraction digits are rejected."""
        with pytest.raises(NotAnIntegerError):
            fraction(12, 18).is_common_divisor(number("1.5"))


class TestFractionComparison:
    """Test ordering and equality."""

    def test_compare(self, fraction):
        """Test cross multiplied comparison."""
        assert fraction(1, 3) < fraction(1, 2)
        assert fraction(-1, 2) < fraction(-1, 3)
        assert fraction(2, 4).compare(fraction(1, 2)) == 0

    def test_equality_ignores_representation(self, fraction):
        """Test that 2/4 equals 1/2 and both hash alike."""
        assert fraction(2, 4) == fraction(1, 2)
        assert hash(fraction(2, 4)) == hash(fraction(1, 2))

    def test_equality_with_unparsable_values(self, fraction):
        """Test that strings which are not numbers compare unequal."""
        assert fraction(1, 2) == "0.5"
        assert fraction(1, 2) != "abc"
        assert fraction(1, 2, base=2) != "0.5"

    def test_compare_with_infinity(self, fraction):
        """Test that every fraction lies below infinity."""
        assert fraction(10 ** 6, 1) < create_infinity(10)
        assert fraction(-10 ** 6, 1) > create_infinity(10, "-")

    def test_max_and_min(self, fraction):
        """Test max and min."""
        assert fraction(1, 3).max(fraction(1, 2)) == fraction(1, 2)
        assert fraction(1, 3).min(fraction(1, 2)) == fraction(1, 3)


class TestFractionConversions:
    """Test evaluation and conversions."""

    def test_evaluate(self, fraction):
        """Test bounded evaluation."""
        assert fraction(1, 3).evaluate(decimal_places=5).to_string() == "0.33333"
        assert fraction(1, 8).evaluate().to_string() == "0.125"

    @pytest.mark.parametrize("algorithm", ["LONG_DIVISION", "DIVISION_BY_SUBTRACTION", "RUSSIAN_DIVISION"])
    def test_evaluate_algorithms(self, fraction, algorithm):
        """Test evaluation with each division algorithm."""
        assert fraction(2, 3).evaluate(decimal_places=3, algorithm=algorithm).to_string() == "0.666"

    def test_evaluate_in_base_2(self):
        """Test 1/3 in base 2."""
        assert create_fraction(2, "1", "11").evaluate(decimal_places=4).to_string() == "0.0101"

    def test_rebase(self, fraction):
        """Test that 1/3 is 1/11 in base 2."""
        assert fraction(1, 3).rebase(2).to_string() == "1/11"

    def test_to_float(self, fraction):
        """Test conversion to float."""
        assert fraction(1, 4).to_float() == 0.25
        assert float(fraction(-3, 2)) == -1.5

    def test_bool(self, fraction):
        """Test truthiness."""
        assert fraction(1, 7)
        assert not fraction(0, 7)
