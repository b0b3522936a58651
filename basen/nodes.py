"""
Digit sequences.

A DigitSequence holds the digits of a number's magnitude, most significant
digit first, plus the index of the center digit (the digit for base^0).
Digits left of the center are positive powers, digits right of it are the
fractional part. The sequence is an immutable array; DigitNode is a
lightweight view on one position that offers the linked-list style
navigation (left towards higher powers, right towards lower powers).

A sequence without a separator has no digits at all and stands for
infinity.

Construction brings the sequence into canonical form:
- the center position always exists (missing positions are zero-filled),
- zeros left of the leading non-zero digit are trimmed down to the center,
- zeros right of the last non-zero digit are trimmed up to the center.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence, Union

from .digits import Digit, check_base, numeral_system
from .core.errors import IncompatibleBaseError, InvalidDigitError

DigitLike = Union[Digit, int]


def _to_ordinals(base: int, digits: Iterable[DigitLike]) -> list[int]:
    ordinals = []
    for digit in digits:
        if isinstance(digit, Digit):
            if digit.base != base:
                raise IncompatibleBaseError(base, digit.base)
            ordinals.append(digit.ordinal)
        elif isinstance(digit, int) and not isinstance(digit, bool) and 0 <= digit < base:
            ordinals.append(digit)
        else:
            raise InvalidDigitError(base, digit)
    return ordinals


def canonicalize(ordinals: list[int], separator: int) -> tuple[tuple[int, ...], int]:
    """
    Bring a raw digit list into canonical form.

    Args:
        ordinals: Digit ordinals, most significant first
        separator: Index of the center digit (may lie outside the list)

    Returns:
        Tuple of (ordinals, separator) with redundant zeros trimmed
    """
    if separator < 0:
        ordinals = [0] * (-separator) + ordinals
        separator = 0
    if separator >= len(ordinals):
        ordinals = ordinals + [0] * (separator - len(ordinals) + 1)

    start = 0
    while start < separator and ordinals[start] == 0:
        start += 1
    end = len(ordinals)
    while end - 1 > separator and ordinals[end - 1] == 0:
        end -= 1

    return tuple(ordinals[start:end]), separator - start


class DigitNode:
    """
    A view on one digit of a sequence.

    The left node holds the next higher power, the right node the next
    lower power. Nodes compare equal when they point to the same position
    of the same sequence.
    """

    __slots__ = ("_sequence", "_index")

    def __init__(self, sequence: DigitSequence, index: int):
        self._sequence = sequence
        self._index = index

    @property
    def digit(self) -> Digit:
        return numeral_system(self._sequence.base).digits[self._sequence.ordinals[self._index]]

    @property
    def power(self) -> int:
        """The exponent of base this digit is multiplied with."""
        return self._sequence.separator - self._index

    @property
    def left_node(self) -> Optional[DigitNode]:
        if self._index == 0:
            return None
        return DigitNode(self._sequence, self._index - 1)

    @property
    def right_node(self) -> Optional[DigitNode]:
        if self._index + 1 >= len(self._sequence.ordinals):
            return None
        return DigitNode(self._sequence, self._index + 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitNode):
            return NotImplemented
        return self._sequence is other._sequence and self._index == other._index

    def __hash__(self) -> int:
        return hash((id(self._sequence), self._index))

    def __repr__(self) -> str:
        return f"DigitNode({self.digit.symbol!r}, power={self.power})"


class DigitSequence:
    """
    Immutable canonical digit sequence of one base.

    Examples:
        >>> DigitSequence(10, [0, 0, 1, 2, 0], 2) == DigitSequence(10, [1, 2], 0)
        True
    """

    __slots__ = ("base", "ordinals", "separator", "_hash")

    def __init__(self, base: int, digits: Sequence[DigitLike] = (), separator: Optional[int] = 0):
        self.base = check_base(base)
        if separator is None:
            self.ordinals: tuple[int, ...] = ()
            self.separator: Optional[int] = None
        else:
            ordinals = _to_ordinals(base, digits)
            self.ordinals, self.separator = canonicalize(ordinals, separator)
        self._hash = None

    @classmethod
    def _from_canonical(cls, base: int, ordinals: tuple[int, ...], separator: Optional[int]) -> DigitSequence:
        sequence = cls.__new__(cls)
        sequence.base = base
        sequence.ordinals = ordinals
        sequence.separator = separator
        sequence._hash = None
        return sequence

    @classmethod
    def from_ordinals(cls, base: int, ordinals: Sequence[int], separator: int) -> DigitSequence:
        """Build a canonical sequence from trusted ordinals (no per-digit validation)."""
        canonical, separator = canonicalize(list(ordinals), separator)
        return cls._from_canonical(base, canonical, separator)

    @classmethod
    def from_powers(cls, base: int, lowest_power: int, ordinals_low_first: Sequence[int]) -> DigitSequence:
        """
        Build a sequence from digits ordered from the lowest power upwards.

        Args:
            base: The number base
            lowest_power: The power of the first entry
            ordinals_low_first: Digit ordinals, least significant first
        """
        ordinals = list(reversed(ordinals_low_first))
        highest_power = lowest_power + len(ordinals) - 1
        return cls.from_ordinals(base, ordinals, highest_power)

    @classmethod
    def zero(cls, base: int) -> DigitSequence:
        return cls._from_canonical(check_base(base), (0,), 0)

    @classmethod
    def infinity(cls, base: int) -> DigitSequence:
        return cls._from_canonical(check_base(base), (), None)

    # Structure

    def is_infinity(self) -> bool:
        return self.separator is None

    def is_zero(self) -> bool:
        return self.ordinals == (0,)

    def center_node(self) -> Optional[DigitNode]:
        if self.separator is None:
            return None
        return DigitNode(self, self.separator)

    def leftmost_node(self) -> Optional[DigitNode]:
        if self.separator is None:
            return None
        return DigitNode(self, 0)

    def rightmost_node(self) -> Optional[DigitNode]:
        if self.separator is None:
            return None
        return DigitNode(self, len(self.ordinals) - 1)

    def nodes(self) -> Iterator[DigitNode]:
        """Iterate over all nodes from the highest power to the lowest."""
        for index in range(len(self.ordinals)):
            yield DigitNode(self, index)

    @property
    def digits(self) -> tuple[Digit, ...]:
        table = numeral_system(self.base).digits
        return tuple(table[o] for o in self.ordinals)

    @property
    def integer_length(self) -> int:
        """Number of digits for the powers 0 and above."""
        return 0 if self.separator is None else self.separator + 1

    @property
    def fraction_length(self) -> int:
        """Number of digits for the negative powers."""
        return 0 if self.separator is None else len(self.ordinals) - self.separator - 1

    @property
    def highest_power(self) -> int:
        return self.integer_length - 1

    @property
    def lowest_power(self) -> int:
        return -self.fraction_length

    def __len__(self) -> int:
        return len(self.ordinals)

    def ordinal_at(self, power: int) -> int:
        """The ordinal for base^power (zero outside the stored range)."""
        if self.separator is None:
            return 0
        index = self.separator - power
        if 0 <= index < len(self.ordinals):
            return self.ordinals[index]
        return 0

    def digit_at(self, power: int) -> Digit:
        return numeral_system(self.base).digits[self.ordinal_at(power)]

    def ordinals_low_first(self, lowest_power: int, highest_power: int) -> list[int]:
        """Ordinals for the powers lowest..highest, least significant first."""
        return [self.ordinal_at(p) for p in range(lowest_power, highest_power + 1)]

    # Derived sequences

    def shifted(self, positions: int) -> DigitSequence:
        """
        Move the separator. Positive positions multiply by base^positions.

        Only the separator index changes; the digit array is shared.
        """
        if self.separator is None or positions == 0 or self.is_zero():
            return self
        separator = self.separator + positions
        ordinals = self.ordinals
        if 0 <= separator < len(ordinals) and ordinals[0] != 0 and ordinals[-1] != 0:
            return self._from_canonical(self.base, ordinals, separator)
        return self.from_ordinals(self.base, ordinals, separator)

    def integer_part(self) -> DigitSequence:
        if self.separator is None:
            return self
        return self.from_ordinals(self.base, self.ordinals[: self.separator + 1], self.separator)

    def fraction_part(self) -> DigitSequence:
        if self.separator is None:
            return self
        return self.from_ordinals(self.base, (0,) + self.ordinals[self.separator + 1:], 0)

    def truncated(self, decimal_places: int) -> DigitSequence:
        """Drop all digits below base^-decimal_places."""
        if self.separator is None or self.fraction_length <= decimal_places:
            return self
        return self.from_ordinals(self.base, self.ordinals[: self.separator + 1 + decimal_places], self.separator)

    def clone(self) -> DigitSequence:
        """An independent copy sharing no storage with this sequence."""
        return self._from_canonical(self.base, tuple(list(self.ordinals)), self.separator)

    def compare_magnitude(self, other: DigitSequence) -> int:
        """
        Three-way comparison of magnitudes, digit by digit from the highest power.

        Infinity is greater than every finite magnitude.
        """
        if self.base != other.base:
            raise IncompatibleBaseError(self.base, other.base)
        if self.separator is None or other.separator is None:
            if self.separator is None and other.separator is None:
                return 0
            return 1 if self.separator is None else -1
        if self.integer_length != other.integer_length:
            # canonical form: the longer integer part has a non-zero leading digit
            return 1 if self.integer_length > other.integer_length else -1
        highest = max(self.highest_power, other.highest_power)
        lowest = min(self.lowest_power, other.lowest_power)
        for power in range(highest, lowest - 1, -1):
            a = self.ordinal_at(power)
            b = other.ordinal_at(power)
            if a != b:
                return 1 if a > b else -1
        return 0

    # Value semantics

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitSequence):
            return NotImplemented
        return (self.base, self.separator, self.ordinals) == (other.base, other.separator, other.ordinals)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.base, self.separator, self.ordinals))
        return self._hash

    def __repr__(self) -> str:
        if self.separator is None:
            return f"DigitSequence(base={self.base}, infinity)"
        symbols = "".join(d.symbol for d in self.digits)
        return f"DigitSequence(base={self.base}, digits={symbols!r}, separator={self.separator})"
