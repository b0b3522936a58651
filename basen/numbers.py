"""
Number value type.

A Number is an immutable signed base-N value: a Sign plus a canonical
DigitSequence. A sequence without a center digit is infinity. Every
operation returns a new Number (or Fraction); the arithmetic itself is
looked up in the operation repository so that several algorithms can
serve one logical operation.
"""

from __future__ import annotations

import math
import random
from typing import Any, ClassVar, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .core.errors import (
    ArithmeticOverflowError,
    InvalidArgumentError,
    MissingArgumentError,
    NotAnIntegerError,
    NumberError,
)
from .digits import Digit, check_base
from .nodes import DigitLike, DigitNode, DigitSequence
from .notations import parse_number
from .operations import magnitudes
from .operations.identifiers import OperationIdentifier as Op
from .operations.processing import DIVISION, EXPONENTIATION, MULTIPLICATION, PI, ROUNDING, ProcessingDetails
from .operations.repository import active_settings, get_operation
from .signs import Sign
from .value import NumericValue, TypePrecedence


class Number(BaseModel, NumericValue):
    """
    Signed number of arbitrary length in a base between 2 and 65.

    Examples:
        >>> create_number(10, "12.5").add(create_number(10, "0.5"))
        Number('13', base=10)
        >>> create_number(10, "255").rebase(16).to_string()
        'FF'
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    sign: Sign = Field(default=Sign.POSITIVE, description="The sign (zero is always positive)")
    sequence: DigitSequence = Field(description="The canonical digits of the magnitude")

    type_precedence: ClassVar[TypePrecedence] = TypePrecedence.NUMBER

    def __init__(self, sequence: DigitSequence, sign: Any = Sign.POSITIVE, **kwargs):
        """
        Create a Number.

        Args:
            sequence: The digits of the magnitude (None digits means infinity)
            sign: Sign, '+'/'-' or 1/-1
        """
        if sequence is None:
            raise MissingArgumentError("digit sequence")
        if not isinstance(sequence, DigitSequence):
            raise InvalidArgumentError(
                f"Expected a DigitSequence, got {type(sequence).__name__}!", "sequence"
            )
        sign = Sign.parse(sign)
        if sequence.is_zero():
            sign = Sign.POSITIVE
        super().__init__(sign=sign, sequence=sequence, **kwargs)

    @classmethod
    def of(cls, sign: Sign, sequence: DigitSequence) -> Number:
        """Build a Number from an already canonical sequence without validation."""
        if sequence.is_zero():
            sign = Sign.POSITIVE
        return cls.model_construct(sign=sign, sequence=sequence)

    @property
    def base(self) -> int:
        return self.sequence.base

    def _operand(self, value: Any, name: str = "operand") -> NumericValue:
        if value is None:
            raise MissingArgumentError(name)
        return self.from_python(value)

    def _integer_operand(self, value: Any, name: str) -> Number:
        if isinstance(value, int) and not isinstance(value, bool):
            return create_number(self.base, value)
        if value is None:
            raise MissingArgumentError(name)
        if not isinstance(value, Number):
            raise InvalidArgumentError(f"The {name} must be an integer!", name)
        return value

    # Structure

    def center_node(self) -> Optional[DigitNode]:
        """The node for base^0, None for infinity."""
        return self.sequence.center_node()

    def digit_at(self, position: int) -> Digit:
        """The digit for base^position (the zero digit outside the stored digits)."""
        return self.sequence.digit_at(position)

    def digit_count(self) -> int:
        """Total number of stored digits of the canonical form."""
        return len(self.sequence)

    def integer_part_length(self) -> int:
        return self.sequence.integer_length

    def fraction_part_length(self) -> int:
        return self.sequence.fraction_length

    def digit_sum(self) -> Number:
        """The sum of all digit values, as a number of the same base."""
        total = magnitudes.from_native(self.base, 0)
        for ordinal in self.sequence.ordinals:
            total = magnitudes.add_magnitudes(total, magnitudes.from_ordinal(self.base, ordinal))
        return Number.of(Sign.POSITIVE, total)

    def clone(self) -> Number:
        """A number with an independent copy of the digit sequence."""
        return Number.of(self.sign, self.sequence.clone())

    # Predicates

    def is_infinity(self) -> bool:
        return self.sequence.is_infinity()

    def is_zero(self) -> bool:
        return self.sequence.is_zero()

    def is_one(self) -> bool:
        return self.sign.is_positive() and self.sequence.ordinals == (1,) and self.sequence.separator == 0

    def is_integer(self) -> bool:
        return not self.is_infinity() and self.sequence.fraction_length == 0

    def is_fraction(self) -> bool:
        """Check if there are non-zero digits right of the separator."""
        return not self.is_infinity() and self.sequence.fraction_length > 0

    def is_positive(self) -> bool:
        """Greater than zero (zero is neither positive nor negative)."""
        return self.sign.is_positive() and not self.is_zero()

    def is_negative(self) -> bool:
        return self.sign.is_negative()

    def is_single_digit(self) -> bool:
        return self.is_integer() and self.sequence.integer_length == 1

    def is_even(self) -> bool:
        if not self.is_integer():
            raise NotAnIntegerError("is_even", self)
        return not magnitudes.is_odd_integer(self.sequence)

    def is_odd(self) -> bool:
        if not self.is_integer():
            raise NotAnIntegerError("is_odd", self)
        return magnitudes.is_odd_integer(self.sequence)

    def is_natural_number(self) -> bool:
        return self.is_integer() and self.is_positive()

    def is_natural_number_including_zero(self) -> bool:
        return self.is_integer() and not self.is_negative()

    def is_prime(self) -> bool:
        return get_operation(Op.IS_PRIME).calculate(self)

    def is_multiple_of(self, other: Any) -> bool:
        other = self._integer_operand(other, "divisor")
        if not self.is_integer():
            raise NotAnIntegerError("is_multiple_of", self)
        if not other.is_integer():
            raise NotAnIntegerError("is_multiple_of", other)
        if other.is_zero():
            return self.is_zero()
        return self.modulo(other).is_zero()

    # Comparison

    def promote(self, other: NumericValue) -> NumericValue:
        """Promote a Number to a Fraction."""
        from .fractions import Fraction

        if isinstance(other, Fraction):
            return self.to_fraction()
        return self

    def _promote_with(self, other: NumericValue) -> tuple[NumericValue, NumericValue]:
        # infinity has no fraction form, the fraction is evaluated instead
        if self.is_infinity():
            return self, other.evaluate()
        return self.promote_types(other)

    def compare(self, other: Any) -> int:
        """
        Three-way comparison.

        Orders by sign first, then by magnitude. Infinity is the extremal
        value of its sign.
        """
        other = self._operand(other)
        if not isinstance(other, Number):
            first, second = self._promote_with(other)
            return first.compare(second)
        return get_operation(Op.COMPARE_NUMBERS).calculate(self, other)

    def max(self, other: Any) -> NumericValue:
        other = self._operand(other)
        return self if self.compare(other) >= 0 else other

    def min(self, other: Any) -> NumericValue:
        other = self._operand(other)
        return self if self.compare(other) <= 0 else other

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Number):
            return self.sign is other.sign and self.sequence == other.sequence
        if isinstance(other, NumericValue):
            return other.base == self.base and self.compare(other) == 0
        if isinstance(other, (int, float, str)) and not isinstance(other, bool):
            try:
                other = create_number(self.base, other)
            except NumberError:
                return False
            return self == other
        return NotImplemented

    def __hash__(self) -> int:
        if self.is_infinity() or self.is_integer():
            return hash((self.sign, self.sequence, 1))
        reduced = self.to_fraction().reduce()
        return hash((self.sign, reduced.numerator.sequence, reduced.denominator.sequence))

    # Addition and friends

    def add(self, other: Any) -> NumericValue:
        other = self._operand(other)
        if not isinstance(other, Number):
            first, second = self._promote_with(other)
            return first.add(second)
        return get_operation(Op.ADD_NUMBERS).calculate(self, other)

    def subtract(self, other: Any) -> NumericValue:
        other = self._operand(other)
        if not isinstance(other, Number):
            first, second = self._promote_with(other)
            return first.subtract(second)
        return get_operation(Op.SUBTRACT_NUMBERS).calculate(self, other)

    def negate(self) -> Number:
        return get_operation(Op.NEGATE_NUMBER).calculate(self)

    def absolute_value(self) -> Number:
        return get_operation(Op.ABSOLUTE_VALUE).calculate(self)

    def complement(self) -> Number:
        """Replace every digit d by base-1-d; the result is positive."""
        return get_operation(Op.COMPLEMENT_NUMBER).calculate(self)

    def inc(self) -> Number:
        return get_operation(Op.INC_NUMBER).calculate(self)

    def dec(self) -> Number:
        return get_operation(Op.DEC_NUMBER).calculate(self)

    def doubling(self) -> Number:
        return get_operation(Op.DOUBLING_NUMBER).calculate(self)

    def halving(self, decimal_places: Optional[int] = None) -> Number:
        """
        Halve the number.

        Halving in an odd base may not terminate; the result is then cut
        off after decimal_places fraction digits (default
        MAXIMUM_FRACTION_LENGTH).
        """
        details = ProcessingDetails(decimal_places=decimal_places)
        return get_operation(Op.HALVING_NUMBER).calculate(self, decimal_places=details.decimal_places)

    # Multiplication

    def multiply(self, other: Any, algorithm: Any = None) -> NumericValue:
        """
        Multiply two numbers.

        Args:
            other: Number, Fraction or Python number
            algorithm: LONG_MULTIPLICATION (default), MULTIPLICATION_BY_ADDITION
                or RUSSIAN_PEASANT_MULTIPLICATION
        """
        other = self._operand(other)
        details = ProcessingDetails(algorithm=algorithm)
        identifier = details.select(MULTIPLICATION)
        if not isinstance(other, Number):
            first, second = self._promote_with(other)
            return first.multiply(second, algorithm=identifier)
        return get_operation(identifier).calculate(self, other)

    def square(self) -> Number:
        return get_operation(Op.SQUARE_NUMBER).calculate(self)

    def factorial(self) -> Number:
        return get_operation(Op.FACTORIAL).calculate(self)

    # Division

    def divide(
        self,
        other: Any,
        decimal_places: Optional[int] = None,
        algorithm: Any = None,
    ) -> NumericValue:
        """
        Divide two numbers.

        Without decimal_places or algorithm the quotient is exact and
        returned as a Fraction. Otherwise the quotient is a Number computed
        by the selected division algorithm and truncated after
        decimal_places fraction digits (default MAXIMUM_FRACTION_LENGTH).

        Args:
            other: The divisor
            decimal_places: Maximum number of fraction digits
            algorithm: LONG_DIVISION (default), DIVISION_BY_SUBTRACTION or
                RUSSIAN_DIVISION

        Raises:
            DivisionByZeroError: If the divisor is zero
        """
        other = self._operand(other, "divisor")
        details = ProcessingDetails(algorithm=algorithm, decimal_places=decimal_places)
        bounded = details.decimal_places is not None or details.algorithm is not None

        if not isinstance(other, Number):
            first, second = self._promote_with(other)
            quotient = first.divide(second)
            if bounded and not isinstance(quotient, Number):
                return quotient.evaluate(details.decimal_places, details.algorithm)
            return quotient

        if not bounded:
            return get_operation(Op.DIVIDE_NUMBERS_AS_FRACTION).calculate(self, other)

        identifier = details.select(DIVISION)
        return get_operation(identifier).calculate(self, other, decimal_places=details.decimal_places)

    def divide_with_remainder(self, other: Any) -> tuple[Number, Number]:
        """
        Truncated integer division.

        Returns:
            Tuple of (quotient, remainder); the remainder has the sign of
            the dividend
        """
        other = self._integer_operand(other, "divisor")
        return get_operation(Op.DIVISION_WITH_REMAINDER).calculate(self, other)

    def modulo(self, other: Any) -> Number:
        other = self._integer_operand(other, "divisor")
        return get_operation(Op.MODULO).calculate(self, other)

    def diviso(self, other: Any) -> Number:
        """The integer quotient (truncated towards zero)."""
        other = self._integer_operand(other, "divisor")
        return get_operation(Op.DIVISO).calculate(self, other)

    def reciprocal(self):
        """The exact reciprocal as a Fraction."""
        return self.to_fraction().reciprocal()

    # Exponentiation and roots

    def exponentiate(
        self,
        exponent: Any,
        algorithm: Any = None,
        decimal_places: Optional[int] = None,
        iterations: Optional[int] = None,
    ) -> Number:
        """
        Raise this number to a power.

        Integer exponents use EXPONENTIATION_BY_SQUARING (default) or
        EXPONENTIATION_BY_MULTIPLICATION; negative exponents yield a
        reciprocal cut off after decimal_places. Fraction (or non-integer)
        exponents are split into an integer part and a root.
        """
        from .fractions import Fraction

        exponent = self._operand(exponent, "exponent")
        details = ProcessingDetails(algorithm=algorithm, decimal_places=decimal_places, iterations=iterations)
        identifier = details.select(EXPONENTIATION)

        if isinstance(exponent, Fraction) or exponent.is_fraction():
            return get_operation(Op.FRACTIONAL_EXPONENTIATION).calculate(
                self, exponent, decimal_places=details.decimal_places, iterations=details.iterations
            )
        return get_operation(identifier).calculate(self, exponent, decimal_places=details.decimal_places)

    def square_root(self, decimal_places: Optional[int] = None, iterations: Optional[int] = None) -> Number:
        """Square root by Heron's method (default HERON_METHOD_ITERATIONS iterations)."""
        details = ProcessingDetails(decimal_places=decimal_places, iterations=iterations)
        return get_operation(Op.SQUARE_ROOT).calculate(
            self, decimal_places=details.decimal_places, iterations=details.iterations
        )

    def root(self, n: Any, decimal_places: Optional[int] = None, iterations: Optional[int] = None) -> Number:
        """
        The n-th root by Newton's method (default NTH_ROOT_ITERATIONS iterations).

        Newton's method doubles the correct digits per step once it is close,
        so a small iteration bound may leave fewer correct digits than
        decimal_places shows; raise iterations for long results.
        """
        n = self._integer_operand(n, "root exponent")
        details = ProcessingDetails(decimal_places=decimal_places, iterations=iterations)
        return get_operation(Op.NTH_ROOT).calculate(
            self, n, decimal_places=details.decimal_places, iterations=details.iterations
        )

    def sine(self, decimal_places: Optional[int] = None, iterations: Optional[int] = None) -> Number:
        """
        The sine of this number (in radians) from its Taylor series.

        At most iterations terms are summed (default SINE_APPROXIMATION_ITERATIONS);
        the series stops early once a term vanishes within decimal_places.
        """
        details = ProcessingDetails(decimal_places=decimal_places, iterations=iterations)
        return get_operation(Op.SINE_APPROXIMATION).calculate(
            self, decimal_places=details.decimal_places, iterations=details.iterations
        )

    # Structural transforms

    def shift_left(self, positions: int = 1) -> Number:
        """Move the separator to the right, i.e. multiply by base^positions."""
        return get_operation(Op.SHIFT_LEFT).calculate(self, positions)

    def shift_right(self, positions: int = 1) -> Number:
        """Move the separator to the left, i.e. divide by base^positions."""
        return get_operation(Op.SHIFT_RIGHT).calculate(self, positions)

    def rebase(self, base: int, decimal_places: Optional[int] = None) -> Number:
        """
        Express the same value in another base.

        Fraction digits of the new base may not terminate; at most
        decimal_places of them are produced (default MAXIMUM_FRACTION_LENGTH).
        """
        details = ProcessingDetails(decimal_places=decimal_places)
        return get_operation(Op.REBASE_NUMBER).calculate(self, base, decimal_places=details.decimal_places)

    def remove_integer_part(self) -> Number:
        return get_operation(Op.REMOVE_INTEGER_PART).calculate(self)

    def remove_fraction_part(self) -> Number:
        return get_operation(Op.REMOVE_FRACTION_PART).calculate(self)

    def round(self, decimal_places: int = 0, algorithm: Any = None) -> Number:
        """
        Round to decimal_places fraction digits.

        Args:
            decimal_places: Fraction digits to keep
            algorithm: ROUND_NUMBER_TO_EVEN (default) or ROUND_NUMBER_TO_ODD,
                the rule applied when the number lies exactly halfway
        """
        details = ProcessingDetails(algorithm=algorithm, decimal_places=decimal_places)
        identifier = details.select(ROUNDING)
        return get_operation(identifier).calculate(self, decimal_places=details.decimal_places)

    def round_up(self, decimal_places: int = 0) -> Number:
        """Round towards positive infinity."""
        details = ProcessingDetails(decimal_places=decimal_places)
        return get_operation(Op.ROUND_UP).calculate(self, decimal_places=details.decimal_places)

    def round_down(self, decimal_places: int = 0) -> Number:
        """Round towards negative infinity."""
        details = ProcessingDetails(decimal_places=decimal_places)
        return get_operation(Op.ROUND_DOWN).calculate(self, decimal_places=details.decimal_places)

    # Divisors and primes

    def divisors(self) -> list[Number]:
        """All positive divisors of an integer, ascending."""
        return get_operation(Op.DIVISORS).calculate(self)

    def prime_factors(self) -> list[Number]:
        """Prime factors with multiplicity, ascending."""
        return get_operation(Op.PRIME_FACTORS).calculate(self)

    def common_divisors(self, other: Any) -> list[Number]:
        other = self._integer_operand(other, "other")
        return get_operation(Op.COMMON_DIVISORS).calculate(self, other)

    def common_prime_factors(self, other: Any) -> list[Number]:
        other = self._integer_operand(other, "other")
        return get_operation(Op.COMMON_PRIME_FACTORS).calculate(self, other)

    def greatest_common_divisor(self, other: Any) -> Number:
        other = self._integer_operand(other, "other")
        return get_operation(Op.GREATEST_COMMON_DIVISOR).calculate(self, other)

    def next_prime(self) -> Number:
        """The smallest prime greater than this number."""
        return get_operation(Op.NEXT_PRIME).calculate(self)

    # Conversions

    def to_fraction(self):
        """
        The value as a Fraction (not reduced).

        Example:
            12.5 -> 125/10
        """
        from .fractions import Fraction

        if self.is_infinity():
            raise ArithmeticOverflowError("Infinity can not be expressed as a fraction!", self)
        numerator, positions = magnitudes.to_integer_scale(self.sequence)
        denominator = magnitudes.unit(self.base, positions)
        return Fraction(Number.of(self.sign, numerator), Number.of(Sign.POSITIVE, denominator))

    def to_int(self) -> int:
        """
        Convert an integer to a Python int.

        Raises:
            NotAnIntegerError: If there are fraction digits
            ArithmeticOverflowError: For infinity
        """
        if self.is_infinity():
            raise ArithmeticOverflowError("Infinity can not be represented as an int!", self)
        if not self.is_integer():
            raise NotAnIntegerError("to_int", self)
        value = magnitudes.to_native(self.sequence)
        return -value if self.sign.is_negative() else value

    def to_float(self) -> float:
        """
        Convert to the nearest Python float.

        Raises:
            ArithmeticOverflowError: If the value exceeds the float range
        """
        if self.is_infinity():
            return -math.inf if self.sign.is_negative() else math.inf
        scaled, positions = magnitudes.to_integer_scale(self.sequence)
        numerator = magnitudes.to_native(scaled)
        try:
            value = numerator / self.base ** positions
        except OverflowError as e:
            raise ArithmeticOverflowError(f"{self} exceeds the range of a float!", self) from e
        return -value if self.sign.is_negative() else value

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def to_string(self, separator: Optional[str] = None) -> str:
        """Standard notation, e.g. '-12.5'."""
        return get_operation(Op.STANDARD_NOTATION_FORMATTER).calculate(self, separator=separator)

    def to_scientific_notation(self, separator: Optional[str] = None, exponent_symbol: Optional[str] = None) -> str:
        """Scientific notation, e.g. '-1.25E1'."""
        return get_operation(Op.SCIENTIFIC_NOTATION_FORMATTER).calculate(
            self, separator=separator, exponent_symbol=exponent_symbol
        )

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Number({self.to_string()!r}, base={self.base})"

    # Python operators on top of NumericValue

    def __floordiv__(self, other: Any) -> Number:
        return self.diviso(other)

    def __mod__(self, other: Any) -> Number:
        return self.modulo(other)

    def __lshift__(self, positions: int) -> Number:
        return self.shift_left(positions)

    def __rshift__(self, positions: int) -> Number:
        return self.shift_right(positions)


# Factories

def create_number(base: int, value: Any, sign: Any = None) -> Number:
    """
    Create a number.

    Args:
        base: The base (2..65)
        value: str (standard or scientific notation), int, float, Digit or Number
        sign: Optional sign applied on top of the sign of the value

    Raises:
        UnsupportedBaseError: If the base is out of range
        NumberParsingError: If a string can not be parsed
        InvalidArgumentError: For NaN or unsupported value types

    Examples:
        >>> create_number(16, "ff").to_int()
        255
        >>> create_number(10, 0.1).to_string()
        '0.1'
    """
    check_base(base)
    if value is None:
        raise MissingArgumentError("value")

    if isinstance(value, Number):
        number = value if value.base == base else value.rebase(base)
    elif isinstance(value, Digit):
        if value.base != base:
            raise InvalidArgumentError(f"The digit {value!r} does not belong to base {base}!", "value")
        number = Number.of(Sign.POSITIVE, DigitSequence(base, [value], 0))
    elif isinstance(value, bool):
        raise InvalidArgumentError("A bool is not a number!", "value")
    elif isinstance(value, int):
        number = Number.of(Sign.NEGATIVE if value < 0 else Sign.POSITIVE, magnitudes.from_native(base, abs(value)))
    elif isinstance(value, float):
        number = _from_float(base, value)
    elif isinstance(value, str):
        number = parse_to_number(base, value)
    else:
        raise InvalidArgumentError(f"Cannot create a number from {type(value).__name__}!", "value")

    if sign is not None:
        number = Number.of(Sign.parse(sign).combine(number.sign), number.sequence)
    return number


def _from_float(base: int, value: float) -> Number:
    if math.isnan(value):
        raise InvalidArgumentError("NaN is not a number!", "value")
    if math.isinf(value):
        return create_infinity(base, Sign.NEGATIVE if value < 0 else Sign.POSITIVE)
    # repr always uses "." whatever the configured separator is
    decimal = parse_to_number(10, repr(value), separator=".")
    return decimal if base == 10 else decimal.rebase(base)


def parse_to_number(base: int, text: str, separator: Optional[str] = None) -> Number:
    """Parse a string in standard or scientific notation."""
    parsed = parse_number(base, text, separator)
    if parsed.separator is None:
        return create_infinity(base, parsed.sign)
    sequence = DigitSequence.from_ordinals(base, parsed.ordinals, parsed.separator)
    return Number.of(parsed.sign, sequence)


def create_number_from_digits(
    base: int,
    digits: Sequence[DigitLike],
    separator: Optional[int] = 0,
    sign: Any = Sign.POSITIVE,
) -> Number:
    """
    Create a number from digits (most significant first) and the index of the center digit.

    Example:
        >>> create_number_from_digits(10, [0, 0, 1, 2, 0], 2) == create_number(10, "1.2")
        True
    """
    if digits is None:
        raise MissingArgumentError("digits")
    return Number(DigitSequence(base, digits, separator), sign)


def create_infinity(base: int, sign: Any = Sign.POSITIVE) -> Number:
    return Number.of(Sign.parse(sign), DigitSequence.infinity(base))


def create_zero(base: int) -> Number:
    return Number.of(Sign.POSITIVE, DigitSequence.zero(base))


def create_one(base: int) -> Number:
    return Number.of(Sign.POSITIVE, magnitudes.one(check_base(base)))


def default_base() -> int:
    """The configured default base."""
    return active_settings().DEFAULT_BASE


def create_random_number(base: int, digits: Optional[int] = None, rng: Optional[random.Random] = None) -> Number:
    """
    A random number 0 <= n < 1 with `digits` fraction digits (default MAXIMUM_FRACTION_LENGTH).

    Args:
        base: The base (2..65)
        digits: Count of random fraction digits
        rng: Optional random.Random for reproducible results
    """
    return get_operation(Op.RANDOM_NUMBER).calculate(base, digits, rng)


def create_random_number_between(
    minimum: Any,
    maximum: Any,
    digits: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Number:
    """
    A random number within [minimum, maximum].

    Integer bounds give integers and include both bounds; otherwise the
    upper bound is excluded. Python values are read in the base of the
    Number bound (the default base if neither is a Number).
    """
    if minimum is None:
        raise MissingArgumentError("minimum")
    if maximum is None:
        raise MissingArgumentError("maximum")
    if isinstance(minimum, Number):
        base = minimum.base
    elif isinstance(maximum, Number):
        base = maximum.base
    else:
        base = default_base()
    if not isinstance(minimum, Number):
        minimum = create_number(base, minimum)
    if not isinstance(maximum, Number):
        maximum = create_number(base, maximum)
    return get_operation(Op.RANDOM_NUMBER_WITHIN_INTERVAL).calculate(minimum, maximum, digits, rng)


def euler_number(base: int, decimal_places: Optional[int] = None, iterations: Optional[int] = None) -> Number:
    """
    Euler's number as the sum of 1/k! over the first iterations terms.

    Args:
        base: The base (2..65)
        decimal_places: Fraction digits kept (default MAXIMUM_FRACTION_LENGTH)
        iterations: Terms of the series (default EULERS_NUMBER_ITERATIONS)

    Example:
        >>> euler_number(10, decimal_places=4, iterations=5)
        Number('2.7083', base=10)
    """
    check_base(base)
    details = ProcessingDetails(decimal_places=decimal_places, iterations=iterations)
    return get_operation(Op.EULERS_NUMBER).calculate(
        base, decimal_places=details.decimal_places, iterations=details.iterations
    )


def pi(
    base: int,
    decimal_places: Optional[int] = None,
    iterations: Optional[int] = None,
    algorithm: Any = None,
) -> Number:
    """
    An approximation of pi.

    Args:
        base: The base (2..65)
        decimal_places: Fraction digits kept (default MAXIMUM_FRACTION_LENGTH)
        iterations: Terms of the Leibniz series (default PI_APPROXIMATION_ITERATIONS)
        algorithm: LEIBNIZ_PI_APPROXIMATION (default) or ARCHIMEDES_PI_APPROXIMATION (22/7)

    Raises:
        AlgorithmSelectionError: For any other algorithm
    """
    check_base(base)
    details = ProcessingDetails(algorithm=algorithm, decimal_places=decimal_places, iterations=iterations)
    return get_operation(details.select(PI)).calculate(
        base, decimal_places=details.decimal_places, iterations=details.iterations
    )
