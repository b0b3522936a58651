"""
Addition, subtraction and the unary operations built on them.

Magnitudes are added digit by digit from the lowest populated power
upwards. Subtraction negates the subtrahend and adds, so the carry logic
lives in one place.
"""

from __future__ import annotations

from ..core.errors import UndefinedOperationError
from ..numbers import Number
from ..signs import Sign
from . import magnitudes
from .base import Operation, check_same_base
from .identifiers import OperationIdentifier
from .repository import get_operation


class AddNumbers(Operation):
    """Signed addition with the infinity rules inf + x = inf and inf - inf undefined."""

    def calculate(self, first: Number, second: Number) -> Number:
        check_same_base(first, second)

        if first.is_infinity() or second.is_infinity():
            if first.is_infinity() and second.is_infinity() and first.sign is not second.sign:
                raise UndefinedOperationError("+", first, second)
            return first if first.is_infinity() else second

        if first.sign is second.sign:
            return Number.of(first.sign, magnitudes.add_magnitudes(first.sequence, second.sequence))

        magnitude, comparison = magnitudes.difference(first.sequence, second.sequence)
        sign = first.sign if comparison >= 0 else second.sign
        return Number.of(sign, magnitude)


class SubtractNumbers(Operation):
    """first - second, computed as first + (-second)."""

    def calculate(self, first: Number, second: Number) -> Number:
        check_same_base(first, second)
        if first.is_infinity() and second.is_infinity() and first.sign is second.sign:
            raise UndefinedOperationError("-", first, second)
        negated = get_operation(OperationIdentifier.NEGATE_NUMBER).calculate(second)
        return get_operation(OperationIdentifier.ADD_NUMBERS).calculate(first, negated)


class NegateNumber(Operation):
    def calculate(self, number: Number) -> Number:
        return Number.of(number.sign.negate(), number.sequence)


class AbsoluteValue(Operation):
    def calculate(self, number: Number) -> Number:
        if number.sign.is_positive():
            return number
        return Number.of(Sign.POSITIVE, number.sequence)


class ComplementNumber(Operation):
    """
    Digit complement: every digit d of the occupied positions becomes base-1-d.

    The result is always positive; the complement of infinity is undefined.
    """

    def calculate(self, number: Number) -> Number:
        if number.is_infinity():
            raise UndefinedOperationError("complement", number)
        return Number.of(Sign.POSITIVE, magnitudes.complement_magnitude(number.sequence))


class IncNumber(Operation):
    """Add one. Infinity stays infinity."""

    def calculate(self, number: Number) -> Number:
        if number.is_infinity():
            return number
        one = Number.of(Sign.POSITIVE, magnitudes.one(number.base))
        return get_operation(OperationIdentifier.ADD_NUMBERS).calculate(number, one)


class DecNumber(Operation):
    """Subtract one. Infinity stays infinity."""

    def calculate(self, number: Number) -> Number:
        if number.is_infinity():
            return number
        minus_one = Number.of(Sign.NEGATIVE, magnitudes.one(number.base))
        return get_operation(OperationIdentifier.ADD_NUMBERS).calculate(number, minus_one)


class DoublingNumber(Operation):
    def calculate(self, number: Number) -> Number:
        if number.is_infinity():
            return number
        return Number.of(number.sign, magnitudes.double_magnitude(number.sequence))


class HalvingNumber(Operation):
    """
    Halve digit by digit from the highest power down.

    Even bases need at most one additional fraction digit. In odd bases
    the result is cut off after decimal_places fraction digits.
    """

    def calculate(self, number: Number, decimal_places: int | None = None) -> Number:
        if number.is_infinity():
            return number
        if number.base % 2 == 0:
            places = number.sequence.fraction_length + 1
        else:
            places = self.decimal_places(decimal_places)
        halved, _ = magnitudes.halve_magnitude(number.sequence, places)
        return Number.of(number.sign, halved)
