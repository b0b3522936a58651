"""
Approximations of transcendental values.

Euler's number, two approximations of pi and the sine are computed from
bounded series. Every result is cut off after the requested number of
fraction digits; the series sums carry guard digits.
"""

from __future__ import annotations

from ..core.errors import UndefinedOperationError
from ..core.logging import get_context_logger
from ..numbers import Number
from ..signs import Sign
from . import magnitudes
from .base import Operation
from .identifiers import OperationIdentifier
from .processing import DIVISION, MULTIPLICATION, default_algorithm
from .repository import get_operation

logger = get_context_logger(__name__)

GUARD_DIGITS = 2


def _native(base: int, value: int) -> Number:
    return Number.of(Sign.POSITIVE, magnitudes.from_native(base, value))


def _truncate(number: Number, places: int) -> Number:
    return Number.of(number.sign, number.sequence.truncated(places))


class EulersNumber(Operation):
    """
    e as the partial sum of 1/k! for k below the iteration bound.

    The sum is formed exactly as N / n! with N the sum of n!/k!, so only
    the final division is bounded.
    """

    def calculate(self, base: int, decimal_places: int | None = None, iterations: int | None = None) -> Number:
        places = self.decimal_places(decimal_places)
        limit = iterations or self.settings.EULERS_NUMBER_ITERATIONS

        add = get_operation(OperationIdentifier.ADD_NUMBERS)
        multiply = get_operation(default_algorithm(MULTIPLICATION))

        term = _native(base, 1)
        total = term
        for k in range(limit - 1, 0, -1):
            term = multiply.calculate(term, _native(base, k))
            total = add.calculate(total, term)

        logger.debug("Euler's number from %d terms", limit, context={"base": base, "decimal_places": places})
        return get_operation(default_algorithm(DIVISION)).calculate(total, term, decimal_places=places)


class LeibnizPiApproximation(Operation):
    """
    pi = 4 * (1 - 1/3 + 1/5 - 1/7 + ...).

    The series converges slowly: after n terms the error is about 1/n.
    """

    def calculate(self, base: int, decimal_places: int | None = None, iterations: int | None = None) -> Number:
        places = self.decimal_places(decimal_places)
        limit = iterations or self.settings.PI_APPROXIMATION_ITERATIONS
        guard = places + GUARD_DIGITS

        add = get_operation(OperationIdentifier.ADD_NUMBERS)
        subtract = get_operation(OperationIdentifier.SUBTRACT_NUMBERS)
        divide = get_operation(default_algorithm(DIVISION))
        one = _native(base, 1)

        total = _native(base, 0)
        for k in range(limit):
            term = divide.calculate(one, _native(base, 2 * k + 1), decimal_places=guard)
            total = subtract.calculate(total, term) if k % 2 else add.calculate(total, term)

        pi = get_operation(default_algorithm(MULTIPLICATION)).calculate(total, _native(base, 4))
        logger.debug("Leibniz series for pi from %d terms", limit, context={"base": base, "decimal_places": places})
        return _truncate(pi, places)


class ArchimedesPiApproximation(Operation):
    """pi as 22/7. The iteration bound does not apply."""

    def calculate(self, base: int, decimal_places: int | None = None, iterations: int | None = None) -> Number:
        places = self.decimal_places(decimal_places)
        return get_operation(default_algorithm(DIVISION)).calculate(
            _native(base, 22), _native(base, 7), decimal_places=places
        )


class SineApproximation(Operation):
    """
    Taylor series sin(x) = x - x^3/3! + x^5/5! - ...

    Each term follows from the previous one as t * x^2 / ((2n)(2n + 1)).
    The series converges for every x but needs more iterations the
    larger |x| is.

    Raises:
        UndefinedOperationError: For infinity
    """

    def calculate(
        self,
        number: Number,
        decimal_places: int | None = None,
        iterations: int | None = None,
    ) -> Number:
        if number.is_infinity():
            raise UndefinedOperationError("sine of", number)
        if number.is_zero():
            return number

        places = self.decimal_places(decimal_places)
        limit = iterations or self.settings.SINE_APPROXIMATION_ITERATIONS
        guard = places + GUARD_DIGITS

        add = get_operation(OperationIdentifier.ADD_NUMBERS)
        subtract = get_operation(OperationIdentifier.SUBTRACT_NUMBERS)
        multiply = get_operation(default_algorithm(MULTIPLICATION))
        divide = get_operation(default_algorithm(DIVISION))

        square = multiply.calculate(number, number)
        term = number
        total = number
        n = 1
        while n < limit:
            term = divide.calculate(
                multiply.calculate(term, square), _native(number.base, 2 * n * (2 * n + 1)), decimal_places=guard
            )
            if term.is_zero():
                break
            total = subtract.calculate(total, term) if n % 2 else add.calculate(total, term)
            n += 1

        logger.debug("Sine of %s stopped", number, context={"iterations": n})
        return _truncate(total, places)
