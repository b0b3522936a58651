"""Signs of numbers and the sign rules of multiplication and division."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .core.errors import InvalidSignError


class Sign(Enum):
    """The sign of a number. Zero is always positive."""

    POSITIVE = "+"
    NEGATIVE = "-"

    @property
    def symbol(self) -> str:
        return self.value

    def is_positive(self) -> bool:
        return self is Sign.POSITIVE

    def is_negative(self) -> bool:
        return self is Sign.NEGATIVE

    def negate(self) -> Sign:
        return Sign.NEGATIVE if self is Sign.POSITIVE else Sign.POSITIVE

    def combine(self, other: Sign) -> Sign:
        """Sign of a product or quotient of two operands with these signs."""
        return Sign.POSITIVE if self is other else Sign.NEGATIVE

    @classmethod
    def parse(cls, value: Any) -> Sign:
        """
        Interpret a sign given as Sign, '+'/'-'/'' or a numeric sign (1/-1).

        Raises:
            InvalidSignError: If the value can not be interpreted
        """
        if isinstance(value, Sign):
            return value
        if isinstance(value, str):
            if value in ("", "+"):
                return cls.POSITIVE
            if value == "-":
                return cls.NEGATIVE
        elif isinstance(value, int) and not isinstance(value, bool):
            if value == 1:
                return cls.POSITIVE
            if value == -1:
                return cls.NEGATIVE
        raise InvalidSignError(value)

    def __str__(self) -> str:
        return self.value
