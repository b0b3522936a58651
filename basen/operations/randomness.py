"""
Random numbers.

Fraction digits are drawn one at a time from the digits of the base, so a
random number is uniformly distributed over the numbers 0 <= n < 1 with
the requested count of fraction digits. Callers may pass their own
random.Random instance for reproducible sequences.
"""

from __future__ import annotations

import random
from typing import Optional

from ..core.errors import InvalidArgumentError
from ..core.logging import get_context_logger
from ..digits import check_base
from ..nodes import DigitSequence
from ..numbers import Number
from ..signs import Sign
from .base import Operation, check_same_base
from .identifiers import OperationIdentifier
from .processing import MULTIPLICATION, default_algorithm
from .repository import get_operation

logger = get_context_logger(__name__)


class RandomNumber(Operation):
    """
    A random number 0 <= n < 1.

    Raises:
        InvalidArgumentError: If digits is not a positive int
    """

    def calculate(self, base: int, digits: Optional[int] = None, rng: Optional[random.Random] = None) -> Number:
        check_base(base)
        places = self.decimal_places(digits)
        if isinstance(places, bool) or not isinstance(places, int) or places < 1:
            raise InvalidArgumentError(f"The number of random digits must be positive, got {digits!r}!", "digits")
        generator = rng or random
        ordinals = [0] + [generator.randrange(base) for _ in range(places)]
        return Number.of(Sign.POSITIVE, DigitSequence.from_ordinals(base, ordinals, 0))


class RandomNumberWithinInterval(Operation):
    """
    A random number between two bounds.

    With integer bounds the result is an integer in [minimum, maximum],
    otherwise a number in [minimum, maximum).

    Raises:
        InvalidArgumentError: If a bound is infinite or minimum > maximum
    """

    def calculate(
        self,
        minimum: Number,
        maximum: Number,
        digits: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> Number:
        base = check_same_base(minimum, maximum)
        if minimum.is_infinity() or maximum.is_infinity():
            raise InvalidArgumentError("Random numbers need finite interval boundaries!", "interval")
        if minimum.compare(maximum) > 0:
            raise InvalidArgumentError(f"Invalid interval boundaries [{minimum}, {maximum}]!", "interval")

        integer = minimum.is_integer() and maximum.is_integer()
        upper = get_operation(OperationIdentifier.INC_NUMBER).calculate(maximum) if integer else maximum
        delta = get_operation(OperationIdentifier.SUBTRACT_NUMBERS).calculate(upper, minimum)

        fraction = get_operation(OperationIdentifier.RANDOM_NUMBER).calculate(base, digits, rng)
        scaled = get_operation(default_algorithm(MULTIPLICATION)).calculate(fraction, delta)
        result = get_operation(OperationIdentifier.ADD_NUMBERS).calculate(scaled, minimum)
        if integer:
            result = get_operation(OperationIdentifier.ROUND_DOWN).calculate(result, decimal_places=0)
        logger.debug("Random number %s", result, context={"base": base, "interval": f"[{minimum}, {maximum}]"})
        return result
