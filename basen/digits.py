"""
Digits and positional numeral systems.

A Digit is one symbol of a base-B numeral system, identified by its
ordinal value. Digits are interned: every numeral system keeps a fixed
table of its digits and hands out the same instances on every lookup.

Symbols are 0-9, then A-Z, then a-z, then '{', '|' and '}' which gives
65 symbols for the largest supported base.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .core.config import BASE_MAX_LIMIT, BASE_MIN_LIMIT
from .core.errors import IncompatibleBaseError, InvalidDigitError, UnsupportedBaseError


def _ordinal_to_symbol(ordinal: int) -> str:
    if ordinal < 10:
        return chr(48 + ordinal)
    if ordinal < 36:
        return chr(55 + ordinal)
    return chr(61 + ordinal)


SYMBOLS: tuple[str, ...] = tuple(_ordinal_to_symbol(a) for a in range(BASE_MAX_LIMIT))


def check_base(base: Any) -> int:
    """
    Check that a base lies within the supported range.

    Raises:
        UnsupportedBaseError: If base is not an int in [2, 65]
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise UnsupportedBaseError(base, BASE_MIN_LIMIT, BASE_MAX_LIMIT)
    if base < BASE_MIN_LIMIT or base > BASE_MAX_LIMIT:
        raise UnsupportedBaseError(base, BASE_MIN_LIMIT, BASE_MAX_LIMIT)
    return base


class Digit(BaseModel):
    """
    One digit of a positional numeral system.

    Digits of the same base are ordered by their ordinal value. Comparing
    digits of different bases raises IncompatibleBaseError.

    Examples:
        >>> Digit(11, 16).symbol
        'B'
        >>> Digit(3, 10) < Digit(7, 10)
        True
    """

    model_config = ConfigDict(frozen=True)

    ordinal: int = Field(description="The ordinal value of the digit")
    base: int = Field(description="The base of the numeral system")

    def __init__(self, ordinal: int, base: int, **kwargs):
        check_base(base)
        if isinstance(ordinal, bool) or not isinstance(ordinal, int) or not 0 <= ordinal < base:
            raise InvalidDigitError(base, ordinal)
        super().__init__(ordinal=ordinal, base=base, **kwargs)

    @property
    def symbol(self) -> str:
        """The display symbol of this digit."""
        return SYMBOLS[self.ordinal]

    def is_zero(self) -> bool:
        return self.ordinal == 0

    def is_one(self) -> bool:
        return self.ordinal == 1

    def is_max(self) -> bool:
        """Check if this is the largest digit of its base."""
        return self.ordinal == self.base - 1

    def is_ordinal(self, n: int) -> bool:
        return self.ordinal == n

    def is_even(self) -> bool:
        return self.ordinal % 2 == 0

    def is_odd(self) -> bool:
        return self.ordinal % 2 == 1

    def compare(self, other: Digit) -> int:
        """
        Three-way comparison by ordinal value.

        Returns:
            -1, 0 or 1

        Raises:
            IncompatibleBaseError: If the digits belong to different bases
        """
        if not isinstance(other, Digit):
            raise TypeError(f"Cannot compare Digit with {type(other).__name__}")
        if self.base != other.base:
            raise IncompatibleBaseError(self.base, other.base)
        return (self.ordinal > other.ordinal) - (self.ordinal < other.ordinal)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Digit):
            return NotImplemented
        return self.base == other.base and self.ordinal == other.ordinal

    def __hash__(self) -> int:
        return hash((self.base, self.ordinal))

    def __lt__(self, other: Digit) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: Digit) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: Digit) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: Digit) -> bool:
        return self.compare(other) >= 0

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        return f"Digit({self.symbol!r}, base={self.base})"


class NumeralSystem:
    """
    The digit table of one base.

    Symbols map to digits case-sensitively. For bases up to 36 the lower
    case letters are accepted as synonyms of the upper case digits.
    """

    def __init__(self, base: int):
        self.base = check_base(base)
        self.digits: tuple[Digit, ...] = tuple(Digit(a, base) for a in range(base))
        self._by_symbol = {digit.symbol: digit for digit in self.digits}
        if base <= 36:
            for digit in self.digits[10:]:
                self._by_symbol[digit.symbol.lower()] = digit

    @property
    def zero(self) -> Digit:
        return self.digits[0]

    @property
    def one(self) -> Digit:
        return self.digits[1]

    @property
    def max_digit(self) -> Digit:
        return self.digits[-1]

    @property
    def symbols(self) -> str:
        """All accepted symbols, in ordinal order."""
        return "".join(SYMBOLS[: self.base])

    @property
    def accepted_symbols(self) -> tuple[str, ...]:
        """Every symbol the parser maps to a digit, lower case synonyms included."""
        return tuple(self._by_symbol)

    def ordinal_to_digit(self, ordinal: int) -> Digit:
        if isinstance(ordinal, bool) or not isinstance(ordinal, int) or not 0 <= ordinal < self.base:
            raise InvalidDigitError(self.base, ordinal)
        return self.digits[ordinal]

    def symbol_to_digit(self, symbol: str) -> Digit:
        try:
            return self._by_symbol[symbol]
        except KeyError:
            raise InvalidDigitError(self.base, symbol) from None

    def accepts(self, symbol: str) -> bool:
        return symbol in self._by_symbol

    def __repr__(self) -> str:
        return f"NumeralSystem(base={self.base})"


@lru_cache(maxsize=None)
def numeral_system(base: int) -> NumeralSystem:
    """Get the (cached) numeral system of a base."""
    return NumeralSystem(base)


def ordinal_to_digit(base: int, ordinal: int) -> Digit:
    """Get the interned digit with the given ordinal."""
    return numeral_system(check_base(base)).ordinal_to_digit(ordinal)


def symbol_to_digit(base: int, symbol: str) -> Digit:
    """Get the interned digit for a display symbol."""
    return numeral_system(check_base(base)).symbol_to_digit(symbol)


# Digit level arithmetic. Results are (digit, carry) pairs of the same base.

def add_digits(first: Digit, second: Digit, carry: int = 0) -> tuple[Digit, Digit]:
    """Add two digits plus an incoming carry (0 or 1)."""
    if first.base != second.base:
        raise IncompatibleBaseError(first.base, second.base)
    system = numeral_system(first.base)
    total = first.ordinal + second.ordinal + carry
    return system.digits[total % first.base], system.digits[total // first.base]


def complement_digit(digit: Digit) -> Digit:
    """The digit complement (base - 1 - d)."""
    return numeral_system(digit.base).digits[digit.base - 1 - digit.ordinal]


def halve_digit(digit: Digit, remainder: int = 0) -> tuple[Digit, int]:
    """
    Halve a digit with an incoming remainder from the next higher position.

    Returns:
        Tuple of (halved digit, remainder 0 or 1)
    """
    system = numeral_system(digit.base)
    value = remainder * digit.base + digit.ordinal
    return system.digits[value // 2], value % 2
