"""
Divisors and primes.

Everything here works on integers by trial division with the library's
own modulo, so the numbers never leave their base.
"""

from __future__ import annotations

from ..core.errors import InvalidArgumentError, NotAnIntegerError
from ..core.logging import get_logger
from ..numbers import Number
from ..signs import Sign
from . import magnitudes
from .base import Operation, check_same_base
from .identifiers import OperationIdentifier
from .processing import MULTIPLICATION, default_algorithm
from .repository import get_operation

logger = get_logger(__name__)


def _natural(number: Number, operation: str) -> Number:
    if not number.is_integer():
        raise NotAnIntegerError(operation, number)
    return Number.of(Sign.POSITIVE, number.sequence)


def _constant(base: int, value: int) -> Number:
    return Number.of(Sign.POSITIVE, magnitudes.from_native(base, value))


def _square_exceeds(candidate: Number, limit: Number) -> bool:
    square = get_operation(default_algorithm(MULTIPLICATION)).calculate(candidate, candidate)
    return square.compare(limit) > 0


def _divides(divisor: Number, number: Number) -> bool:
    return get_operation(OperationIdentifier.MODULO).calculate(number, divisor).is_zero()


class Divisors(Operation):
    """
    All positive divisors of an integer in ascending order.

    Divisors are found in pairs d and n/d while d*d <= n.

    Raises:
        NotAnIntegerError: For non-integers
        InvalidArgumentError: For zero (every number divides it)
    """

    def calculate(self, number: Number) -> list[Number]:
        number = _natural(number, "divisors")
        if number.is_zero():
            raise InvalidArgumentError("Zero has infinitely many divisors!", "number")
        diviso = get_operation(OperationIdentifier.DIVISO)
        inc = get_operation(OperationIdentifier.INC_NUMBER)

        small, large = [], []
        candidate = _constant(number.base, 1)
        while not _square_exceeds(candidate, number):
            if _divides(candidate, number):
                small.append(candidate)
                partner = diviso.calculate(number, candidate)
                if partner != candidate:
                    large.append(partner)
            candidate = inc.calculate(candidate)
        return small + large[::-1]


class PrimeFactors(Operation):
    """
    Prime factors with multiplicity in ascending order.

    Numbers below two have no prime factors.
    """

    def calculate(self, number: Number) -> list[Number]:
        remaining = _natural(number, "prime factors")
        diviso = get_operation(OperationIdentifier.DIVISO)
        inc = get_operation(OperationIdentifier.INC_NUMBER)

        factors = []
        candidate = _constant(number.base, 2)
        while not _square_exceeds(candidate, remaining):
            while _divides(candidate, remaining):
                factors.append(candidate)
                remaining = diviso.calculate(remaining, candidate)
            candidate = inc.calculate(candidate)
        if remaining.compare(_constant(number.base, 1)) > 0:
            factors.append(remaining)
        logger.debug("Prime factors of %s: %s", number, ", ".join(str(f) for f in factors))
        return factors


class CommonDivisors(Operation):
    def calculate(self, first: Number, second: Number) -> list[Number]:
        check_same_base(first, second)
        divisors = get_operation(OperationIdentifier.DIVISORS)
        others = set(divisors.calculate(second))
        return [divisor for divisor in divisors.calculate(first) if divisor in others]


class CommonPrimeFactors(Operation):
    """Prime factors shared by both numbers, counted as often as both contain them."""

    def calculate(self, first: Number, second: Number) -> list[Number]:
        check_same_base(first, second)
        factors = get_operation(OperationIdentifier.PRIME_FACTORS)
        others = factors.calculate(second)
        common = []
        for factor in factors.calculate(first):
            if factor in others:
                others.remove(factor)
                common.append(factor)
        return common


class GreatestCommonDivisor(Operation):
    """Euclid's algorithm; gcd(a, 0) is |a|."""

    def calculate(self, first: Number, second: Number) -> Number:
        check_same_base(first, second)
        first = _natural(first, "greatest common divisor")
        second = _natural(second, "greatest common divisor")
        modulo = get_operation(OperationIdentifier.MODULO)
        while not second.is_zero():
            first, second = second, modulo.calculate(first, second)
        return first


class IsPrime(Operation):
    """Trial division up to the square root; non-integers and numbers below two are not prime."""

    def calculate(self, number: Number) -> bool:
        if not number.is_integer() or number.compare(_constant(number.base, 2)) < 0:
            return False
        two = _constant(number.base, 2)
        if _divides(two, number):
            return number == two
        add = get_operation(OperationIdentifier.ADD_NUMBERS)
        candidate = _constant(number.base, 3)
        while not _square_exceeds(candidate, number):
            if _divides(candidate, number):
                return False
            candidate = add.calculate(candidate, two)
        return True


class NextPrime(Operation):
    """
    The smallest prime greater than a number.

    Raises:
        NotAnIntegerError: For non-integers
    """

    def calculate(self, number: Number) -> Number:
        if not number.is_integer():
            raise NotAnIntegerError("next prime", number)
        two = _constant(number.base, 2)
        if number.compare(two) < 0:
            return two
        is_prime = get_operation(OperationIdentifier.IS_PRIME)
        inc = get_operation(OperationIdentifier.INC_NUMBER)
        candidate = inc.calculate(number)
        while not is_prime.calculate(candidate):
            candidate = inc.calculate(candidate)
        return candidate
