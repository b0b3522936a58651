"""
Exponentiation.

Integer exponents use exponentiation by squaring (default) or repeated
multiplication. Negative exponents take the reciprocal with a bounded
division. Fraction exponents are split into an integer part and a proper
fraction p/q; the latter becomes the q-th root raised to the power p.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from ..core.errors import DivisionByZeroError, NotAnIntegerError, UndefinedOperationError
from ..core.logging import get_logger
from ..fractions import Fraction
from ..nodes import DigitSequence
from ..numbers import Number
from ..signs import Sign
from . import magnitudes
from .base import Operation, check_same_base
from .identifiers import OperationIdentifier
from .processing import DIVISION, EXPONENTIATION, MULTIPLICATION, ROUNDING, default_algorithm
from .repository import get_operation

logger = get_logger(__name__)


def _one(base: int) -> Number:
    return Number.of(Sign.POSITIVE, magnitudes.one(base))


def _power_of_infinity(number: Number, exponent: Number) -> Number:
    if exponent.is_zero():
        raise UndefinedOperationError("^", number, exponent)
    if exponent.is_negative():
        return Number.of(Sign.POSITIVE, DigitSequence.zero(number.base))
    negative = number.sign.is_negative() and exponent.is_integer() and exponent.is_odd()
    return Number.of(Sign.NEGATIVE if negative else Sign.POSITIVE, number.sequence)


class ExponentiationBase(Operation):
    """
    Integer exponents.

    0^0 is 1, 0 raised to a negative exponent is a division by zero.
    """

    def calculate(self, number: Number, exponent: Number, decimal_places: int | None = None) -> Number:
        check_same_base(number, exponent)
        if exponent.is_infinity():
            raise UndefinedOperationError("^", number, exponent)
        if not exponent.is_integer():
            raise NotAnIntegerError("integer exponentiation", exponent)
        if number.is_infinity():
            return _power_of_infinity(number, exponent)
        if exponent.is_zero():
            return _one(number.base)
        if number.is_zero():
            if exponent.is_negative():
                raise DivisionByZeroError(_one(number.base))
            return number

        power = self.power(number, Number.of(Sign.POSITIVE, exponent.sequence))
        if exponent.is_negative():
            divide = get_operation(default_algorithm(DIVISION))
            return divide.calculate(_one(number.base), power, decimal_places=self.decimal_places(decimal_places))
        return power

    @abstractmethod
    def power(self, number: Number, exponent: Number) -> Number:
        """number^exponent for a finite non-zero number and a natural exponent."""


class ExponentiationBySquaring(ExponentiationBase):
    """Square the factor for every binary digit of the exponent; multiply it in for the set ones."""

    def power(self, number: Number, exponent: Number) -> Number:
        multiply = get_operation(default_algorithm(MULTIPLICATION))
        result = _one(number.base)
        factor = number
        remaining = exponent.sequence
        while not remaining.is_zero():
            if magnitudes.is_odd_integer(remaining):
                result = multiply.calculate(result, factor)
            remaining = magnitudes.halve_integer(remaining)
            if not remaining.is_zero():
                factor = multiply.calculate(factor, factor)
        return result


class ExponentiationByMultiplication(ExponentiationBase):
    """Multiply the number with itself exponent times."""

    def power(self, number: Number, exponent: Number) -> Number:
        multiply = get_operation(default_algorithm(MULTIPLICATION))
        dec = get_operation(OperationIdentifier.DEC_NUMBER)
        result = _one(number.base)
        counter = exponent
        while not counter.is_zero():
            result = multiply.calculate(result, number)
            counter = dec.calculate(counter)
        return result


class FractionalExponentiation(Operation):
    """
    x^(a + p/q) = x^a * (q-th root of x)^p with a proper fraction p/q.

    The exponent is reduced first, so odd roots of negative numbers work
    for exponents such as 1/3 or 2/6.
    """

    def calculate(
        self,
        number: Number,
        exponent: Any,
        decimal_places: int | None = None,
        iterations: int | None = None,
    ) -> Number:
        if isinstance(exponent, Number):
            if exponent.is_infinity():
                raise UndefinedOperationError("^", number, exponent)
            exponent = exponent.to_fraction()
        if not isinstance(exponent, Fraction):
            raise NotAnIntegerError("fractional exponentiation", exponent)
        check_same_base(number, exponent)

        exponent = exponent.reduce()
        places = self.decimal_places(decimal_places)
        if number.is_infinity():
            return _power_of_infinity(number, exponent.numerator)

        whole, rest = get_operation(OperationIdentifier.DIVISION_WITH_REMAINDER).calculate(
            exponent.numerator, exponent.denominator
        )
        integer_power = get_operation(default_algorithm(EXPONENTIATION))
        result = integer_power.calculate(number, whole, decimal_places=places)
        if not rest.is_zero():
            root = get_operation(OperationIdentifier.NTH_ROOT).calculate(
                number, exponent.denominator, decimal_places=places, iterations=iterations
            )
            fraction_power = integer_power.calculate(root, rest, decimal_places=places)
            result = get_operation(default_algorithm(MULTIPLICATION)).calculate(result, fraction_power)
        logger.debug("Evaluated %s ^ %s with %d fraction digits", number, exponent, places)
        return get_operation(default_algorithm(ROUNDING)).calculate(result, decimal_places=places)


class ExponentiateFraction(Operation):
    """(p/q)^n = p^n / q^n for integer n; negative n flips the fraction."""

    def calculate(self, fraction: Fraction, exponent: Number) -> Fraction:
        check_same_base(fraction, exponent)
        if not exponent.is_integer():
            raise NotAnIntegerError("fraction exponentiation", exponent)
        power = get_operation(default_algorithm(EXPONENTIATION))
        positive = Number.of(Sign.POSITIVE, exponent.sequence)
        numerator = power.calculate(fraction.numerator, positive)
        denominator = power.calculate(fraction.denominator, positive)
        if exponent.is_negative():
            if numerator.is_zero():
                raise DivisionByZeroError(_one(fraction.base))
            return Fraction(denominator, numerator)
        return Fraction(numerator, denominator)
