"""
Root extraction.

Square roots use Heron's method, n-th roots Newton's method. Both start
above the root, at the smallest single digit multiple of a power of the
base that is not below it, so the iterates fall monotonically towards
the root. The number of iterations is bounded; intermediate quotients
carry two guard digits and the result is rounded to the requested number
of fraction digits.
"""

from __future__ import annotations

from ..core.errors import InvalidArgumentError, NegativeArgumentError, NotAnIntegerError
from ..core.logging import get_context_logger
from ..nodes import DigitSequence
from ..numbers import Number
from ..signs import Sign
from . import magnitudes
from .base import Operation
from .identifiers import OperationIdentifier
from .processing import DIVISION, EXPONENTIATION, MULTIPLICATION, ROUNDING, default_algorithm
from .repository import get_operation

logger = get_context_logger(__name__)

GUARD_DIGITS = 2


def initial_guess(number: Number, degree: int) -> Number:
    """
    The smallest power of the base that is not below the degree-th root.

    A magnitude whose highest non-zero digit sits at power h is below
    base^(h+1), so its root is below base^ceil((h+1)/degree).
    """
    highest = magnitudes.highest_nonzero_power(number.sequence)
    power = -((-(highest + 1)) // degree)
    return Number.of(Sign.POSITIVE, magnitudes.unit(number.base, power))


def starting_value(number: Number, degree: int) -> Number:
    """
    Narrow initial_guess down to one leading digit.

    With base^p the initial guess, this is the smallest d * base^(p-1)
    whose degree-th power is not below the number, so the root lies within
    one unit of the leading digit below the start.
    """
    guess = initial_guess(number, degree)
    power = get_operation(default_algorithm(EXPONENTIATION))
    exponent = Number.of(Sign.POSITIVE, magnitudes.from_native(number.base, degree))
    lower = magnitudes.highest_nonzero_power(guess.sequence) - 1
    for ordinal in range(1, number.base):
        candidate = Number.of(Sign.POSITIVE, DigitSequence.from_powers(number.base, lower, (ordinal,)))
        if power.calculate(candidate, exponent).compare(number) >= 0:
            return candidate
    return guess


def _round(number: Number, places: int) -> Number:
    return get_operation(default_algorithm(ROUNDING)).calculate(number, decimal_places=places)


class SquareRoot(Operation):
    """
    Heron's method: x' = (x + s / x) / 2.

    Raises:
        NegativeArgumentError: For negative numbers
    """

    def calculate(
        self,
        number: Number,
        decimal_places: int | None = None,
        iterations: int | None = None,
    ) -> Number:
        if number.is_negative():
            raise NegativeArgumentError("square root", number)
        if number.is_infinity() or number.is_zero():
            return number

        places = self.decimal_places(decimal_places)
        limit = iterations or self.settings.HERON_METHOD_ITERATIONS
        guard = places + GUARD_DIGITS

        add = get_operation(OperationIdentifier.ADD_NUMBERS)
        divide = get_operation(default_algorithm(DIVISION))
        halving = get_operation(OperationIdentifier.HALVING_NUMBER)

        x = starting_value(number, 2)
        iteration = 0
        while iteration < limit:
            iteration += 1
            total = add.calculate(x, divide.calculate(number, x, decimal_places=guard))
            halved = halving.calculate(total, decimal_places=guard)
            following = Number.of(Sign.POSITIVE, halved.sequence.truncated(guard))
            if following == x:
                break
            x = following
        logger.debug("Heron's method for %s stopped", number, context={"iterations": iteration})
        return _round(x, places)


class NthRoot(Operation):
    """
    Newton's method: x' = ((n - 1) * x + s / x^(n - 1)) / n.

    Odd roots of negative numbers are negative.

    Raises:
        NotAnIntegerError: If n is not an integer
        InvalidArgumentError: If n is not positive
        NegativeArgumentError: For even roots of negative numbers
    """

    def calculate(
        self,
        number: Number,
        n: Number,
        decimal_places: int | None = None,
        iterations: int | None = None,
    ) -> Number:
        if not n.is_integer():
            raise NotAnIntegerError("root", n)
        if not n.is_positive():
            raise InvalidArgumentError(f"The root exponent must be positive, got {n}!", "n")
        if number.is_negative() and n.is_even():
            raise NegativeArgumentError(f"root {n}", number)
        if n.is_one() or number.is_infinity() or number.is_zero():
            return number
        if n.to_int() == 2:
            return get_operation(OperationIdentifier.SQUARE_ROOT).calculate(
                number, decimal_places=decimal_places, iterations=iterations
            )

        places = self.decimal_places(decimal_places)
        limit = iterations or self.settings.NTH_ROOT_ITERATIONS
        guard = places + GUARD_DIGITS
        radicand = Number.of(Sign.POSITIVE, number.sequence)

        add = get_operation(OperationIdentifier.ADD_NUMBERS)
        multiply = get_operation(default_algorithm(MULTIPLICATION))
        divide = get_operation(default_algorithm(DIVISION))
        power = get_operation(default_algorithm(EXPONENTIATION))
        n_minus_one = get_operation(OperationIdentifier.DEC_NUMBER).calculate(n)

        x = starting_value(radicand, n.to_int())
        iteration = 0
        while iteration < limit:
            iteration += 1
            quotient = divide.calculate(radicand, power.calculate(x, n_minus_one), decimal_places=guard)
            following = divide.calculate(add.calculate(multiply.calculate(x, n_minus_one), quotient), n, decimal_places=guard)
            if following == x:
                break
            x = following
        logger.debug("Newton's method for root %s of %s stopped", n, number, context={"iterations": iteration})
        return Number.of(number.sign, _round(x, places).sequence)
