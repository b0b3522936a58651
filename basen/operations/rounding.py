"""
Rounding.

The discarded tail decides the direction: below half rounds down, above
half rounds up, exactly half applies the tie rule of the algorithm.
Rounding is symmetric around zero (it acts on the magnitude).
"""

from __future__ import annotations

from abc import abstractmethod

from ..core.errors import UndefinedOperationError
from ..nodes import DigitSequence
from ..numbers import Number
from . import magnitudes
from .base import Operation


def _split(sequence: DigitSequence, places: int) -> tuple[DigitSequence, DigitSequence]:
    """Split a magnitude into the kept digits and the discarded tail."""
    kept = sequence.truncated(places)
    return kept, magnitudes.subtract_magnitudes(sequence, kept)


def _next_up(kept: DigitSequence, places: int) -> DigitSequence:
    return magnitudes.add_magnitudes(kept, magnitudes.unit(kept.base, -places))


class RoundingBase(Operation):
    def calculate(self, number: Number, decimal_places: int | None = None) -> Number:
        places = decimal_places or 0
        sequence = number.sequence
        if number.is_infinity() or sequence.fraction_length <= places:
            return number

        kept, tail = _split(sequence, places)
        half_comparison = magnitudes.double_magnitude(tail.shifted(places)).compare_magnitude(
            magnitudes.one(number.base)
        )
        if half_comparison > 0:
            up = True
        elif half_comparison < 0:
            up = False
        else:
            up = self.tie_rounds_up(kept.digit_at(-places).ordinal)
        return Number.of(number.sign, _next_up(kept, places) if up else kept)

    @abstractmethod
    def tie_rounds_up(self, last_ordinal: int) -> bool:
        """Decide a tie from the last kept digit."""


class RoundNumberToEven(RoundingBase):
    """Ties go to the neighbour whose last digit is even (banker's rounding)."""

    def tie_rounds_up(self, last_ordinal: int) -> bool:
        return last_ordinal % 2 == 1


class RoundNumberToOdd(RoundingBase):
    """Ties go to the neighbour whose last digit is odd."""

    def tie_rounds_up(self, last_ordinal: int) -> bool:
        return last_ordinal % 2 == 0


class RoundUp(Operation):
    """Round towards positive infinity (ceiling)."""

    def calculate(self, number: Number, decimal_places: int | None = None) -> Number:
        places = decimal_places or 0
        if number.is_infinity() or number.sequence.fraction_length <= places:
            return number
        kept, _ = _split(number.sequence, places)
        if number.sign.is_positive():
            kept = _next_up(kept, places)
        return Number.of(number.sign, kept)


class RoundDown(Operation):
    """Round towards negative infinity (floor)."""

    def calculate(self, number: Number, decimal_places: int | None = None) -> Number:
        places = decimal_places or 0
        if number.is_infinity() or number.sequence.fraction_length <= places:
            return number
        kept, _ = _split(number.sequence, places)
        if number.sign.is_negative():
            kept = _next_up(kept, places)
        return Number.of(number.sign, kept)


class RemoveIntegerPart(Operation):
    """Keep only the fraction digits (with the sign): -12.5 -> -0.5."""

    def calculate(self, number: Number) -> Number:
        if number.is_infinity():
            raise UndefinedOperationError("remove integer part of", number)
        return Number.of(number.sign, number.sequence.fraction_part())


class RemoveFractionPart(Operation):
    """Truncate towards zero: -12.5 -> -12."""

    def calculate(self, number: Number) -> Number:
        if number.is_infinity():
            return number
        return Number.of(number.sign, number.sequence.integer_part())

