"""Tests for random numbers."""

import random

import pytest

from basen.core.errors import IncompatibleBaseError, InvalidArgumentError
from basen.numbers import create_infinity, create_random_number, create_random_number_between


class TestRandomNumber:
    """Test random numbers in [0, 1)."""

    @pytest.mark.parametrize("base", [2, 3, 10, 16, 65])
    def test_unit_interval(self, base):
        """Test that every random number lies in [0, 1)."""
        rng = random.Random(7)
        for _ in range(50):
            value = create_random_number(base, 3, rng=rng)
            assert value.base == base
            assert not value.is_negative()
            assert value.integer_part_length() == 1
            assert value.digit_at(0).is_zero()
            assert value.fraction_part_length() <= 3

    def test_default_digit_count(self):
        """Test that the configured fraction length bounds the digits."""
        assert create_random_number(10).fraction_part_length() <= 10

    def test_seeded_generator_is_reproducible(self):
        """Test that equal seeds give equal numbers."""
        first = create_random_number(16, 8, rng=random.Random(42))
        second = create_random_number(16, 8, rng=random.Random(42))
        assert first == second

    def test_every_digit_occurs(self):
        """Test that single digit draws cover the whole base."""
        rng = random.Random(1)
        seen = {create_random_number(3, 1, rng=rng).to_string() for _ in range(100)}
        assert seen == {"0", "0.1", "0.2"}

    @pytest.mark.parametrize("digits", [0, -1, 1.5, True])
    def test_invalid_digit_count_raises(self, digits):
        """Test that the digit count must be a positive int."""
        with pytest.raises(InvalidArgumentError):
            create_random_number(10, digits)


class TestRandomNumberBetween:
    """Test random numbers within an interval."""

    def test_integer_bounds_are_inclusive(self, number):
        """Test that integer bounds give every integer of the interval."""
        rng = random.Random(3)
        seen = {create_random_number_between(number("-2"), number("2"), rng=rng).to_int() for _ in range(200)}
        assert seen == {-2, -1, 0, 1, 2}

    def test_fraction_bounds(self, number):
        """Test that the upper bound is excluded for fraction bounds."""
        rng = random.Random(5)
        for _ in range(50):
            value = create_random_number_between(number("0.5"), number("1.5"), digits=4, rng=rng)
            assert number("0.5") <= value < number("1.5")

    def test_equal_bounds(self, number):
        """Test a single point interval."""
        assert create_random_number_between(number("7"), number("7")) == number("7")

    def test_python_bounds(self):
        """Test bounds given as ints in the default base."""
        value = create_random_number_between(1, 6, rng=random.Random(9))
        assert value.base == 10
        assert 1 <= value.to_int() <= 6

    def test_binary_bounds(self, number):
        """Test that Python bounds take the base of the Number bound."""
        value = create_random_number_between(number("0", base=2), 3, rng=random.Random(2))
        assert value.base == 2
        assert 0 <= value.to_int() <= 3

    def test_reversed_bounds_raise(self, number):
        """Test that minimum must not exceed maximum."""
        with pytest.raises(InvalidArgumentError):
            create_random_number_between(number("5"), number("1"))

    def test_infinite_bounds_raise(self, number):
        """Test that the interval must be finite."""
        with pytest.raises(InvalidArgumentError):
            create_random_number_between(number("0"), create_infinity(10))

    def test_mixed_bases_raise(self, number):
        """Test that both bounds share a base."""
        with pytest.raises(IncompatibleBaseError):
            create_random_number_between(number("0"), number("1", base=2))
