"""Ordering of numbers and fractions."""

from __future__ import annotations

from ..numbers import Number
from .base import Operation, check_same_base
from .identifiers import OperationIdentifier
from .processing import MULTIPLICATION, default_algorithm
from .repository import get_operation


class CompareNumbers(Operation):
    """
    Three-way comparison of two numbers.

    The sign decides first (zero counts as positive), then the magnitudes
    are compared digit by digit from the highest power down. Infinity is
    the extremal value of its sign.
    """

    def calculate(self, first: Number, second: Number) -> int:
        check_same_base(first, second)
        if first.sign is not second.sign:
            return -1 if first.sign.is_negative() else 1
        comparison = first.sequence.compare_magnitude(second.sequence)
        return comparison if first.sign.is_positive() else -comparison


class CompareFractions(Operation):
    """a/b versus c/d with positive denominators compares a*d with c*b."""

    def calculate(self, first, second) -> int:
        check_same_base(first, second)
        multiply = get_operation(default_algorithm(MULTIPLICATION))
        left = multiply.calculate(first.numerator, second.denominator)
        right = multiply.calculate(second.numerator, first.denominator)
        return get_operation(OperationIdentifier.COMPARE_NUMBERS).calculate(left, right)
