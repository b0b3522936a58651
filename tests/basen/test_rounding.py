"""Tests for rounding and for removing the integer or fraction part."""

import pytest

from basen.core.errors import AlgorithmSelectionError, UndefinedOperationError
from basen.numbers import create_infinity


class TestRound:
    """Test rounding to nearest with the tie rules."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2.5", "2"),
            ("3.5", "4"),
            ("-2.5", "-2"),
            ("2.51", "3"),
            ("2.49", "2"),
            ("-2.6", "-3"),
        ],
    )
    def test_round_to_even(self, number, value, expected):
        """Test that ties go to the even neighbour."""
        assert number(value).round().to_string() == expected

    @pytest.mark.parametrize("value,expected", [("2.5", "3"), ("3.5", "3"), ("-2.5", "-3")])
    def test_round_to_odd(self, number, value, expected):
        """Test that ties go to the odd neighbour."""
        assert number(value).round(algorithm="ROUND_NUMBER_TO_ODD").to_string() == expected

    def test_decimal_places(self, number):
        """Test rounding to a number of fraction digits."""
        assert number("2.45").round(1).to_string() == "2.4"
        assert number("2.55").round(1).to_string() == "2.6"
        assert number("3.14159").round(3).to_string() == "3.142"

    def test_carry_into_integer_part(self, number):
        """Test that 9.96 rounds to 10."""
        assert number("9.96").round(1).to_string() == "10"

    def test_short_numbers_are_unchanged(self, number):
        """Test that rounding never adds digits."""
        assert number("1.5").round(3).to_string() == "1.5"

    def test_binary(self, number):
        """Test that 0.11 rounds to 1 in base 2."""
        assert number("0.11", base=2).round().to_string() == "1"
        assert number("0.1", base=2).round().to_string() == "0"

    def test_odd_base(self, number):
        """Test that in base 3 the tail 0.1 is below a half."""
        assert number("1.1", base=3).round().to_string() == "1"
        assert number("1.2", base=3).round().to_string() == "2"

    def test_infinity_is_unchanged(self):
        """Test that infinity is returned as is."""
        assert create_infinity(10).round(2).is_infinity()

    def test_multiplication_algorithm_raises(self, number):
        """Test that only rounding algorithms are accepted."""
        with pytest.raises(AlgorithmSelectionError):
            number("2.5").round(algorithm="LONG_MULTIPLICATION")


class TestDirectedRounding:
    """Test rounding towards positive and negative infinity."""

    def test_round_up(self, number):
        """Test ceiling."""
        assert number("2.1").round_up().to_string() == "3"
        assert number("-2.1").round_up().to_string() == "-2"
        assert number("1.234").round_up(2).to_string() == "1.24"

    def test_round_down(self, number):
        """Test floor."""
        assert number("2.9").round_down().to_string() == "2"
        assert number("-2.1").round_down().to_string() == "-3"
        assert number("-1.234").round_down(2).to_string() == "-1.24"

    def test_integers_are_unchanged(self, number):
        """Test that integers are returned as is."""
        assert number("-7").round_up().to_string() == "-7"
        assert number("-7").round_down().to_string() == "-7"


class TestPartRemoval:
    """Test removing the integer or the fraction part."""

    def test_remove_integer_part(self, number):
        """Test that -12.5 becomes -0.5."""
        assert number("-12.5").remove_integer_part().to_string() == "-0.5"
        assert number("12").remove_integer_part().is_zero()

    def test_remove_fraction_part(self, number):
        """Test that -12.5 becomes -12."""
        assert number("-12.5").remove_fraction_part().to_string() == "-12"
        assert number("-0.5").remove_fraction_part().is_zero()

    def test_infinity(self):
        """Test the parts of infinity."""
        assert create_infinity(10).remove_fraction_part().is_infinity()
        with pytest.raises(UndefinedOperationError):
            create_infinity(10).remove_integer_part()
