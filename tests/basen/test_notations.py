"""Tests for standard and scientific notation."""

import random

import pytest

from basen.core.errors import ArithmeticOverflowError, InvalidArgumentError, NumberParsingError
from basen.notations import exponent_sign_required, format_number, format_scientific, parse_number
from basen.numbers import create_infinity, create_number, create_number_from_digits
from basen.signs import Sign


class TestStandardParsing:
    """Test parsing of the standard notation."""

    def test_integer(self):
        """Test a plain integer."""
        parsed = parse_number(10, "123")
        assert parsed.sign is Sign.POSITIVE
        assert parsed.ordinals == (1, 2, 3)
        assert parsed.separator == 2

    def test_signed_fraction(self):
        """Test a negative number with fraction digits."""
        parsed = parse_number(10, "-12.5")
        assert parsed.sign is Sign.NEGATIVE
        assert parsed.ordinals == (1, 2, 5)
        assert parsed.separator == 1

    def test_missing_integer_part(self):
        """Test that '.5' is read as 0.5."""
        parsed = parse_number(10, ".5")
        assert parsed.ordinals == (0, 5)
        assert parsed.separator == 0

    def test_hexadecimal_lower_case(self):
        """Test lower case digits in base 16."""
        assert create_number(16, "ff").to_int() == 255

    def test_comma_separator(self):
        """Test an explicit comma separator."""
        parsed = parse_number(10, "3,25", separator=",")
        assert parsed.ordinals == (3, 2, 5)
        assert parsed.separator == 0

    def test_infinity(self):
        """Test the infinity representation with and without a sign."""
        assert parse_number(10, "Infinity").separator is None
        parsed = parse_number(10, "-Infinity")
        assert parsed.separator is None
        assert parsed.sign is Sign.NEGATIVE

    @pytest.mark.parametrize("text", ["", "-", "1.2.3", "12a", "1 2", "+-1"])
    def test_invalid_text_raises(self, text):
        """Test that malformed strings are rejected."""
        with pytest.raises(NumberParsingError):
            parse_number(10, text)

    def test_digit_outside_base_raises(self):
        """Test that '2' is not a binary digit."""
        with pytest.raises(NumberParsingError):
            parse_number(2, "102")

    def test_error_lists_every_notation(self):
        """Test that the parsing error carries the failure of each parser."""
        with pytest.raises(NumberParsingError) as exc_info:
            parse_number(10, "abc")
        assert len(exc_info.value.causes) == 2
        assert exc_info.value.details["base"] == 10

    def test_non_string_raises(self):
        """Test that only strings are parsed."""
        with pytest.raises(InvalidArgumentError):
            parse_number(10, 12)


class TestScientificParsing:
    """Test parsing of the scientific notation."""

    def test_positive_exponent(self):
        """Test that 1.23E2 is 123."""
        assert create_number(10, "1.23E2") == create_number(10, "123")

    def test_negative_exponent(self):
        """Test that 5e-3 is 0.005."""
        assert create_number(10, "5e-3") == create_number(10, "0.005")

    def test_exponent_in_same_base(self):
        """Test that the exponent is written in the base of the number."""
        assert create_number(2, "1E11") == create_number(2, "1000")

    def test_marker_is_a_digit(self):
        """Test that in base 16 an unsigned E is a digit."""
        assert create_number(16, "1E5").to_int() == 0x1E5
        assert create_number(16, "1E+2") == create_number(16, "100")

    def test_exponent_sign_requirement(self):
        """Test which bases need an exponent sign."""
        assert not exponent_sign_required(10)
        assert exponent_sign_required(15)
        assert exponent_sign_required(16)

    def test_huge_exponent_raises(self):
        """Test that an exponent beyond the index range is rejected."""
        with pytest.raises(NumberParsingError) as exc_info:
            parse_number(10, "1E99999999999999999999")
        assert any(isinstance(cause, ArithmeticOverflowError) for cause in exc_info.value.causes)


class TestFormatting:
    """Test the formatters."""

    def test_standard(self):
        """Test the standard notation."""
        assert format_number(create_number(10, "-12.50")) == "-12.5"
        assert create_number(16, 255).to_string() == "FF"

    def test_standard_separator(self):
        """Test a comma as separator."""
        assert create_number(10, "3.25").to_string(separator=",") == "3,25"

    def test_zero(self):
        """Test that zero is '0' without a sign."""
        assert create_number(10, "-0.000").to_string() == "0"

    def test_infinity(self):
        """Test the infinity representation."""
        assert str(create_infinity(10)) == "Infinity"
        assert str(create_infinity(10, Sign.NEGATIVE)) == "-Infinity"

    def test_scientific(self):
        """Test the scientific notation in base 10."""
        assert format_scientific(create_number(10, "123")) == "1.23E2"
        assert create_number(10, "-0.005").to_scientific_notation() == "-5E-3"
        assert create_number(10, "0").to_scientific_notation() == "0E0"

    def test_scientific_lower_case_marker(self):
        """Test the lower case exponent symbol."""
        assert create_number(10, "1500").to_scientific_notation(exponent_symbol="e") == "1.5e3"

    def test_scientific_with_required_sign(self):
        """Test the exponent sign in base 16."""
        assert create_number(16, "100").to_scientific_notation() == "1E+2"

    def test_scientific_exponent_in_base(self):
        """Test that the exponent is written in the base of the number."""
        assert create_number(2, "1000").to_scientific_notation() == "1E11"

    def test_scientific_round_trip(self):
        """Test that a formatted number parses back to itself."""
        value = create_number(16, "-A.BC")
        assert create_number(16, value.to_scientific_notation()) == value

    def test_repr(self):
        """Test the debug representation."""
        assert repr(create_number(10, "1.5")) == "Number('1.5', base=10)"


class TestRoundTrip:
    """Test that formatted numbers parse back to themselves."""

    @pytest.mark.parametrize("base", [2, 3, 8, 10, 15, 16, 35, 36, 37, 50, 64, 65])
    @pytest.mark.parametrize("seed", [1, 2, 3, 4])
    def test_standard_notation(self, base, seed):
        """Test parse(format(n)) == n in the standard notation."""
        rng = random.Random(seed * 1000 + base)
        ordinals = [rng.randrange(base) for _ in range(rng.randint(1, 8))]
        separator = rng.randrange(-2, len(ordinals) + 2)
        sign = Sign.NEGATIVE if seed % 2 else Sign.POSITIVE
        value = create_number_from_digits(base, ordinals, separator, sign)
        assert create_number(base, format_number(value)) == value

    @pytest.mark.parametrize("base", [2, 10, 16, 36, 65])
    def test_scientific_notation(self, base):
        """Test parse(format_scientific(n)) == n."""
        rng = random.Random(base)
        for _ in range(5):
            ordinals = [rng.randrange(base) for _ in range(rng.randint(1, 6))]
            value = create_number_from_digits(base, ordinals, rng.randrange(-3, 9))
            assert create_number(base, format_scientific(value)) == value

    @pytest.mark.parametrize("base", [2, 10, 16, 65])
    def test_infinity(self, base):
        """Test that infinity survives the round trip."""
        value = create_infinity(base, "-")
        assert create_number(base, format_number(value)) == value
