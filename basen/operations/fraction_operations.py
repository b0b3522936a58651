"""
Fraction arithmetic.

All results are exact and not reduced, except for ReduceFraction.
Fractions with a common denominator are added without multiplying the
denominators.
"""

from __future__ import annotations

from ..core.errors import DivisionByZeroError
from ..core.logging import get_logger
from ..fractions import Fraction
from ..numbers import Number
from ..signs import Sign
from . import magnitudes
from .base import Operation, check_same_base
from .identifiers import OperationIdentifier
from .processing import DIVISION, MULTIPLICATION, default_algorithm
from .repository import get_operation

logger = get_logger(__name__)


def _multiply(first: Number, second: Number, algorithm: OperationIdentifier | None = None) -> Number:
    return get_operation(algorithm or default_algorithm(MULTIPLICATION)).calculate(first, second)


class AddFractions(Operation):
    """a/b + c/d = (a*d + c*b) / (b*d)"""

    def calculate(self, first: Fraction, second: Fraction) -> Fraction:
        check_same_base(first, second)
        add = get_operation(OperationIdentifier.ADD_NUMBERS)
        if first.denominator == second.denominator:
            return Fraction(add.calculate(first.numerator, second.numerator), first.denominator)
        numerator = add.calculate(
            _multiply(first.numerator, second.denominator),
            _multiply(second.numerator, first.denominator),
        )
        return Fraction(numerator, _multiply(first.denominator, second.denominator))


class SubtractFractions(Operation):
    def calculate(self, first: Fraction, second: Fraction) -> Fraction:
        return get_operation(OperationIdentifier.ADD_FRACTIONS).calculate(first, second.negate())


class MultiplyFractions(Operation):
    """a/b * c/d = (a*c) / (b*d), both products with the given multiplication algorithm"""

    def calculate(
        self, first: Fraction, second: Fraction, algorithm: OperationIdentifier | None = None
    ) -> Fraction:
        check_same_base(first, second)
        return Fraction(
            _multiply(first.numerator, second.numerator, algorithm),
            _multiply(first.denominator, second.denominator, algorithm),
        )


class DivideFractions(Operation):
    """
    a/b / c/d = (a*d) / (b*c)

    Raises:
        DivisionByZeroError: If c is zero
    """

    def calculate(self, first: Fraction, second: Fraction) -> Fraction:
        check_same_base(first, second)
        if second.is_zero():
            raise DivisionByZeroError(first)
        return Fraction(
            _multiply(first.numerator, second.denominator),
            _multiply(first.denominator, second.numerator),
        )


class ReduceFraction(Operation):
    """Divide both parts by their greatest common divisor; zero becomes 0/1."""

    def calculate(self, fraction: Fraction) -> Fraction:
        if fraction.is_zero():
            return Fraction(fraction.numerator, Number.of(Sign.POSITIVE, magnitudes.one(fraction.base)))
        divisor = get_operation(OperationIdentifier.GREATEST_COMMON_DIVISOR).calculate(
            fraction.numerator, fraction.denominator
        )
        if divisor.is_one():
            return fraction
        diviso = get_operation(OperationIdentifier.DIVISO)
        logger.debug("Reducing %s by %s", fraction, divisor)
        return Fraction(
            diviso.calculate(fraction.numerator, divisor),
            diviso.calculate(fraction.denominator, divisor),
        )


class EvaluateFraction(Operation):
    """The quotient of a fraction, truncated after decimal_places fraction digits."""

    def calculate(
        self,
        fraction: Fraction,
        decimal_places: int | None = None,
        algorithm: OperationIdentifier | None = None,
    ) -> Number:
        division = get_operation(algorithm or default_algorithm(DIVISION))
        return division.calculate(
            fraction.numerator, fraction.denominator, decimal_places=self.decimal_places(decimal_places)
        )
