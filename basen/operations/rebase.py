"""
Base conversion.

The integer part is converted by repeated division by the new base (the
remainders are the new digits, lowest first). The fraction part is
converted by repeated multiplication with the new base (the integer parts
are the new digits, highest first); it may not terminate and is cut off
after decimal_places digits.
"""

from __future__ import annotations

from ..core.logging import get_logger
from ..digits import check_base
from ..nodes import DigitSequence
from ..numbers import Number
from ..signs import Sign
from . import magnitudes
from .base import Operation
from .identifiers import OperationIdentifier
from .processing import MULTIPLICATION, default_algorithm
from .repository import get_operation

logger = get_logger(__name__)


class RebaseNumber(Operation):
    def calculate(self, number: Number, base: int, decimal_places: int | None = None) -> Number:
        check_base(base)
        if base == number.base:
            return number
        if number.is_infinity():
            return Number.of(number.sign, DigitSequence.infinity(base))

        places = self.decimal_places(decimal_places)
        divide = get_operation(OperationIdentifier.DIVISION_WITH_REMAINDER)
        multiply = get_operation(default_algorithm(MULTIPLICATION))
        target = Number.of(Sign.POSITIVE, magnitudes.from_native(number.base, base))

        integer_digits = []
        integer = Number.of(Sign.POSITIVE, number.sequence.integer_part())
        while not integer.is_zero():
            integer, remainder = divide.calculate(integer, target)
            integer_digits.append(remainder.to_int())

        fraction_digits = []
        fraction = Number.of(Sign.POSITIVE, number.sequence.fraction_part())
        while not fraction.is_zero() and len(fraction_digits) < places:
            fraction = multiply.calculate(fraction, target)
            fraction_digits.append(Number.of(Sign.POSITIVE, fraction.sequence.integer_part()).to_int())
            fraction = Number.of(Sign.POSITIVE, fraction.sequence.fraction_part())
        if not fraction.is_zero():
            logger.debug("Rebase of %s to base %d cut off after %d fraction digits", number, base, places)

        ordinals = list(reversed(fraction_digits)) + integer_digits
        sequence = DigitSequence.from_powers(base, -len(fraction_digits), ordinals)
        return Number.of(number.sign, sequence)
