"""
Multiplication algorithms.

Three interchangeable algorithms compute the same product:
- long multiplication (one partial product per digit of the multiplier),
- repeated addition (linear in the magnitude of the smaller operand),
- Russian peasant multiplication (halving and doubling).

Signs, zero and infinity are handled once in MultiplicationBase.
"""

from __future__ import annotations

from abc import abstractmethod

from ..core.errors import NegativeArgumentError, NotAnIntegerError, UndefinedOperationError
from ..core.logging import get_logger
from ..nodes import DigitSequence
from ..numbers import Number
from ..signs import Sign
from . import magnitudes
from .base import Operation, check_same_base
from .identifiers import OperationIdentifier
from .processing import MULTIPLICATION, default_algorithm
from .repository import get_operation

logger = get_logger(__name__)


class MultiplicationBase(Operation):
    """Sign rules and infinity handling shared by all multiplication algorithms."""

    def calculate(self, first: Number, second: Number) -> Number:
        check_same_base(first, second)
        sign = first.sign.combine(second.sign)

        if first.is_infinity() or second.is_infinity():
            if first.is_zero() or second.is_zero():
                raise UndefinedOperationError("*", first, second)
            return Number.of(sign, DigitSequence.infinity(first.base))

        if first.is_zero() or second.is_zero():
            return Number.of(Sign.POSITIVE, DigitSequence.zero(first.base))

        return Number.of(sign, self.multiply_magnitudes(first.sequence, second.sequence))

    @abstractmethod
    def multiply_magnitudes(self, first: DigitSequence, second: DigitSequence) -> DigitSequence:
        """Multiply two non-zero finite magnitudes."""


class LongMultiplication(MultiplicationBase):
    """Schoolbook multiplication; each digit of the multiplier adds a shifted partial product."""

    def multiply_magnitudes(self, first: DigitSequence, second: DigitSequence) -> DigitSequence:
        base = first.base
        multiplicand = first.ordinals_low_first(first.lowest_power, first.highest_power)
        multiplier = second.ordinals_low_first(second.lowest_power, second.highest_power)

        result = [0] * (len(multiplicand) + len(multiplier))
        for shift, factor in enumerate(multiplier):
            if factor == 0:
                continue
            carry = 0
            for position, ordinal in enumerate(multiplicand, start=shift):
                total = result[position] + ordinal * factor + carry
                result[position] = total % base
                carry = total // base
            position = shift + len(multiplicand)
            while carry:
                total = result[position] + carry
                result[position] = total % base
                carry = total // base
                position += 1

        return DigitSequence.from_powers(base, first.lowest_power + second.lowest_power, result)


class MultiplicationByAddition(MultiplicationBase):
    """
    Add one operand to itself as often as the other operand says.

    Both operands are first shifted to integers; the smaller one serves as
    the counter. Only suited for small operands.
    """

    def multiply_magnitudes(self, first: DigitSequence, second: DigitSequence) -> DigitSequence:
        first, first_shift = magnitudes.to_integer_scale(first)
        second, second_shift = magnitudes.to_integer_scale(second)
        if first.compare_magnitude(second) < 0:
            counter, addend = first, second
        else:
            counter, addend = second, first

        one = magnitudes.one(first.base)
        total = DigitSequence.zero(first.base)
        while not counter.is_zero():
            total = magnitudes.add_magnitudes(total, addend)
            counter = magnitudes.subtract_magnitudes(counter, one)
        return total.shifted(-(first_shift + second_shift))


class RussianPeasantMultiplication(MultiplicationBase):
    """
    Halve the multiplier and double the multiplicand until the multiplier
    is zero; the multiplicands next to odd multipliers add up to the product.
    """

    def multiply_magnitudes(self, first: DigitSequence, second: DigitSequence) -> DigitSequence:
        multiplicand, first_shift = magnitudes.to_integer_scale(first)
        multiplier, second_shift = magnitudes.to_integer_scale(second)

        total = DigitSequence.zero(first.base)
        while not multiplier.is_zero():
            if magnitudes.is_odd_integer(multiplier):
                total = magnitudes.add_magnitudes(total, multiplicand)
            multiplicand = magnitudes.double_magnitude(multiplicand)
            multiplier = magnitudes.halve_integer(multiplier)
        return total.shifted(-(first_shift + second_shift))


class SquareNumber(Operation):
    def calculate(self, number: Number) -> Number:
        return get_operation(default_algorithm(MULTIPLICATION)).calculate(number, number)


class Factorial(Operation):
    """
    n! for natural numbers including zero (0! = 1).

    Raises:
        NotAnIntegerError: For fractions and infinity
        NegativeArgumentError: For negative integers
    """

    def calculate(self, number: Number) -> Number:
        if not number.is_integer():
            raise NotAnIntegerError("factorial", number)
        if number.is_negative():
            raise NegativeArgumentError("factorial", number)

        multiply = get_operation(default_algorithm(MULTIPLICATION))
        dec = get_operation(OperationIdentifier.DEC_NUMBER)

        result = Number.of(Sign.POSITIVE, magnitudes.one(number.base))
        counter = number
        while not counter.is_zero() and not counter.is_one():
            result = multiply.calculate(result, counter)
            counter = dec.calculate(counter)
        logger.debug("factorial of %s has %d digits", number, result.digit_count())
        return result
