"""
Digit-wise primitives on unsigned digit sequences.

All functions take finite sequences of one base and build fresh sequences;
operands are never modified. Signs and infinities are handled by the
operations that call these helpers.
"""

from __future__ import annotations

from typing import Optional

from ..digits import add_digits, complement_digit, halve_digit, numeral_system
from ..nodes import DigitSequence


def one(base: int) -> DigitSequence:
    return DigitSequence.from_ordinals(base, (1,), 0)


def unit(base: int, power: int) -> DigitSequence:
    """The sequence for base^power."""
    return DigitSequence.from_powers(base, power, (1,))


def from_ordinal(base: int, ordinal: int) -> DigitSequence:
    """A single digit integer."""
    return DigitSequence.from_ordinals(base, (ordinal,), 0)


def add_magnitudes(first: DigitSequence, second: DigitSequence) -> DigitSequence:
    """Add two magnitudes position by position, propagating the carry upwards."""
    lowest = min(first.lowest_power, second.lowest_power)
    highest = max(first.highest_power, second.highest_power)
    carry = 0
    result = []
    for power in range(lowest, highest + 1):
        digit, carry_digit = add_digits(first.digit_at(power), second.digit_at(power), carry)
        result.append(digit.ordinal)
        carry = carry_digit.ordinal
    result.append(carry)
    return DigitSequence.from_powers(first.base, lowest, result)


def subtract_magnitudes(larger: DigitSequence, smaller: DigitSequence) -> DigitSequence:
    """
    Subtract a magnitude from a larger or equal one.

    The subtrahend is replaced by its digit complement over the common
    width plus one unit in the lowest position; adding that to the minuend
    and dropping the final carry yields the difference.
    """
    lowest = min(larger.lowest_power, smaller.lowest_power)
    highest = max(larger.highest_power, smaller.highest_power)
    carry = 1
    result = []
    for power in range(lowest, highest + 1):
        complement = complement_digit(smaller.digit_at(power))
        digit, carry_digit = add_digits(larger.digit_at(power), complement, carry)
        result.append(digit.ordinal)
        carry = carry_digit.ordinal
    return DigitSequence.from_powers(larger.base, lowest, result)


def difference(first: DigitSequence, second: DigitSequence) -> tuple[DigitSequence, int]:
    """
    Absolute difference of two magnitudes.

    Returns:
        Tuple of (|first - second|, comparison of first with second)
    """
    comparison = first.compare_magnitude(second)
    if comparison >= 0:
        return subtract_magnitudes(first, second), comparison
    return subtract_magnitudes(second, first), comparison


def complement_magnitude(sequence: DigitSequence) -> DigitSequence:
    """Replace every digit d within the occupied positions by base-1-d."""
    system = numeral_system(sequence.base)
    ordinals = [complement_digit(system.digits[o]).ordinal for o in sequence.ordinals]
    return DigitSequence.from_ordinals(sequence.base, ordinals, sequence.separator)


def double_magnitude(sequence: DigitSequence) -> DigitSequence:
    return add_magnitudes(sequence, sequence)


def halve_magnitude(sequence: DigitSequence, decimal_places: int) -> tuple[DigitSequence, bool]:
    """
    Halve a magnitude digit by digit from the highest power down.

    In odd bases the remainder may never vanish; the result is cut off
    after `decimal_places` fraction digits.

    Returns:
        Tuple of (half, exact) where exact tells whether nothing was cut off
    """
    system = numeral_system(sequence.base)
    remainder = 0
    result = []
    power = sequence.highest_power
    while power >= sequence.lowest_power or (remainder and -power <= decimal_places):
        digit, remainder = halve_digit(sequence.digit_at(power) if power >= sequence.lowest_power else system.zero, remainder)
        result.append(digit.ordinal)
        power -= 1
    halved = DigitSequence.from_ordinals(sequence.base, result, sequence.highest_power)
    return halved, remainder == 0


def halve_integer(sequence: DigitSequence) -> DigitSequence:
    """Floor of half an integer magnitude."""
    halved, _ = halve_magnitude(sequence, 0)
    return halved.integer_part()


def is_odd_integer(sequence: DigitSequence) -> bool:
    """
    Parity of an integer magnitude.

    In even bases only the lowest digit decides; in odd bases every power
    of the base is odd, so the digit sum decides.
    """
    if sequence.base % 2 == 0:
        return sequence.ordinal_at(0) % 2 == 1
    return sum(sequence.ordinals) % 2 == 1


def highest_nonzero_power(sequence: DigitSequence) -> Optional[int]:
    """The power of the most significant non-zero digit (None for zero)."""
    for index, ordinal in enumerate(sequence.ordinals):
        if ordinal != 0:
            return sequence.separator - index
    return None


def to_integer_scale(sequence: DigitSequence) -> tuple[DigitSequence, int]:
    """
    Shift a magnitude until it is an integer.

    Returns:
        Tuple of (integer magnitude, number of positions shifted)
    """
    positions = sequence.fraction_length
    return sequence.shifted(positions), positions


def append_digit(sequence: DigitSequence, ordinal: int) -> DigitSequence:
    """Multiply an integer magnitude by the base and add a digit: the long division step."""
    ordinals = sequence.ordinals + (ordinal,)
    return DigitSequence.from_ordinals(sequence.base, ordinals, sequence.separator + 1)


def to_native(sequence: DigitSequence) -> int:
    """The integer value of an integer magnitude as a Python int."""
    value = 0
    for ordinal in sequence.ordinals[: sequence.separator + 1]:
        value = value * sequence.base + ordinal
    return value


def from_native(base: int, value: int) -> DigitSequence:
    """Digits of a non-negative Python int."""
    if value == 0:
        return DigitSequence.zero(base)
    ordinals = []
    while value:
        value, remainder = divmod(value, base)
        ordinals.append(remainder)
    return DigitSequence.from_powers(base, 0, ordinals)
