"""
Division algorithms.

Exact division yields a Fraction. Bounded division yields a Number whose
quotient is truncated towards zero after a number of fraction digits, so
that non-terminating expansions (1/3 in base 10) still finish. Three
interchangeable algorithms divide the integer magnitudes:
- long division (one quotient digit per dividend digit),
- division by repeated subtraction,
- Russian division (a doubling table of the divisor).
"""

from __future__ import annotations

from abc import abstractmethod

from ..core.errors import DivisionByZeroError, NotAnIntegerError, UndefinedOperationError
from ..core.logging import get_logger
from ..fractions import Fraction
from ..nodes import DigitSequence
from ..numbers import Number
from ..signs import Sign
from . import magnitudes
from .base import Operation, check_same_base
from .identifiers import OperationIdentifier
from .processing import DIVISION, default_algorithm
from .repository import get_operation

logger = get_logger(__name__)


def _check_divisor(dividend: Number, divisor: Number) -> None:
    if divisor.is_zero():
        logger.debug("Rejected division of %s by zero", dividend)
        raise DivisionByZeroError(dividend)


def _infinite_quotient(dividend: Number, divisor: Number) -> Number | None:
    """The quotient if an operand is infinite, otherwise None."""
    if dividend.is_infinity():
        if divisor.is_infinity():
            raise UndefinedOperationError("/", dividend, divisor)
        return Number.of(dividend.sign.combine(divisor.sign), DigitSequence.infinity(dividend.base))
    if divisor.is_infinity():
        return Number.of(Sign.POSITIVE, DigitSequence.zero(dividend.base))
    return None


class DivisionBase(Operation):
    """
    Bounded division of two numbers.

    Both operands are scaled to integers such that the integer quotient,
    shifted back by decimal_places positions, is the truncated quotient.
    """

    def calculate(self, dividend: Number, divisor: Number, decimal_places: int | None = None) -> Number:
        check_same_base(dividend, divisor)
        _check_divisor(dividend, divisor)
        infinite = _infinite_quotient(dividend, divisor)
        if infinite is not None:
            return infinite
        if dividend.is_zero():
            return dividend

        places = self.decimal_places(decimal_places)
        numerator, numerator_shift = magnitudes.to_integer_scale(dividend.sequence)
        denominator, denominator_shift = magnitudes.to_integer_scale(divisor.sequence)
        scale = places - numerator_shift + denominator_shift

        quotient, remainder = self.scaled_quotient(numerator, denominator, scale)
        if not remainder.is_zero():
            logger.debug("Quotient %s / %s truncated after %d fraction digits", dividend, divisor, places)
        return Number.of(dividend.sign.combine(divisor.sign), quotient.shifted(-places))

    def scaled_quotient(
        self, numerator: DigitSequence, denominator: DigitSequence, scale: int
    ) -> tuple[DigitSequence, DigitSequence]:
        """The integer quotient and remainder of numerator * base^scale / denominator."""
        if scale >= 0:
            numerator = numerator.shifted(scale)
        else:
            denominator = denominator.shifted(-scale)
        return self.divide_integers(numerator, denominator)

    @abstractmethod
    def divide_integers(
        self, numerator: DigitSequence, denominator: DigitSequence
    ) -> tuple[DigitSequence, DigitSequence]:
        """
        Divide two integer magnitudes (denominator non-zero).

        Returns:
            Tuple of (quotient, remainder)
        """


class LongDivision(DivisionBase):
    """Bring down one dividend digit at a time and subtract the divisor as often as it fits."""

    def divide_integers(self, numerator, denominator):
        base = numerator.base
        remainder = DigitSequence.zero(base)
        quotient = []
        for ordinal in numerator.ordinals[: numerator.separator + 1]:
            remainder = magnitudes.append_digit(remainder, ordinal)
            count = 0
            while remainder.compare_magnitude(denominator) >= 0:
                remainder = magnitudes.subtract_magnitudes(remainder, denominator)
                count += 1
            quotient.append(count)
        return DigitSequence.from_ordinals(base, quotient, len(quotient) - 1), remainder


class DivisionBySubtraction(DivisionBase):
    """
    Subtract the divisor until the remainder is smaller; count the subtractions.

    Only the integer part is found by plain repeated subtraction. Each
    fraction digit then multiplies the remainder by the base and subtracts
    the divisor at most base - 1 times.
    """

    def scaled_quotient(self, numerator, denominator, scale):
        if scale <= 0:
            return super().scaled_quotient(numerator, denominator, scale)
        quotient, remainder = self.divide_integers(numerator, denominator)
        ordinals = list(quotient.ordinals)
        for _ in range(scale):
            remainder = magnitudes.append_digit(remainder, 0)
            count = 0
            while remainder.compare_magnitude(denominator) >= 0:
                remainder = magnitudes.subtract_magnitudes(remainder, denominator)
                count += 1
            ordinals.append(count)
        return DigitSequence.from_ordinals(numerator.base, ordinals, len(ordinals) - 1), remainder

    def divide_integers(self, numerator, denominator):
        one = magnitudes.one(numerator.base)
        quotient = DigitSequence.zero(numerator.base)
        remainder = numerator
        while remainder.compare_magnitude(denominator) >= 0:
            remainder = magnitudes.subtract_magnitudes(remainder, denominator)
            quotient = magnitudes.add_magnitudes(quotient, one)
        return quotient, remainder


class RussianDivision(DivisionBase):
    """
    Build the table divisor * 2^k up to the dividend, then subtract the
    table entries from the largest down and add up their factors.
    """

    def divide_integers(self, numerator, denominator):
        table = [(denominator, magnitudes.one(numerator.base))]
        while True:
            value, factor = table[-1]
            doubled = magnitudes.double_magnitude(value)
            if doubled.compare_magnitude(numerator) > 0:
                break
            table.append((doubled, magnitudes.double_magnitude(factor)))

        quotient = DigitSequence.zero(numerator.base)
        remainder = numerator
        for value, factor in reversed(table):
            if remainder.compare_magnitude(value) >= 0:
                remainder = magnitudes.subtract_magnitudes(remainder, value)
                quotient = magnitudes.add_magnitudes(quotient, factor)
        return quotient, remainder


class DivisionWithRemainder(Operation):
    """
    Truncated division of integers.

    The quotient is truncated towards zero and the remainder has the sign
    of the dividend: -100 / 7 = -14 remainder -2.
    """

    def calculate(self, dividend: Number, divisor: Number) -> tuple[Number, Number]:
        check_same_base(dividend, divisor)
        _check_divisor(dividend, divisor)
        for operand in (dividend, divisor):
            if not operand.is_integer():
                raise NotAnIntegerError("division with remainder", operand)

        algorithm = get_operation(default_algorithm(DIVISION))
        quotient, remainder = algorithm.divide_integers(dividend.sequence, divisor.sequence)
        return (
            Number.of(dividend.sign.combine(divisor.sign), quotient),
            Number.of(dividend.sign, remainder),
        )


class Modulo(Operation):
    def calculate(self, dividend: Number, divisor: Number) -> Number:
        return get_operation(OperationIdentifier.DIVISION_WITH_REMAINDER).calculate(dividend, divisor)[1]


class Diviso(Operation):
    def calculate(self, dividend: Number, divisor: Number) -> Number:
        return get_operation(OperationIdentifier.DIVISION_WITH_REMAINDER).calculate(dividend, divisor)[0]


class DivideNumbersAsFraction(Operation):
    """
    Exact division.

    a / b with a = A * base^-fa and b = B * base^-fb equals
    (A * base^fb) / (B * base^fa). The fraction is not reduced. With an
    infinite operand there is no fraction; the quotient is then zero or
    infinity as a Number.
    """

    def calculate(self, dividend: Number, divisor: Number):
        check_same_base(dividend, divisor)
        _check_divisor(dividend, divisor)
        infinite = _infinite_quotient(dividend, divisor)
        if infinite is not None:
            return infinite

        numerator, numerator_shift = magnitudes.to_integer_scale(dividend.sequence)
        denominator, denominator_shift = magnitudes.to_integer_scale(divisor.sequence)
        return Fraction(
            Number.of(dividend.sign.combine(divisor.sign), numerator.shifted(denominator_shift)),
            Number.of(Sign.POSITIVE, denominator.shifted(numerator_shift)),
        )
