"""
Base class for the numeric value types.

This module provides the foundation shared by Number and Fraction:
- Type promotion hierarchy (a Number promotes to a Fraction)
- Operator overloading mapped onto the named arithmetic methods
- Conversion of Python primitives into values of the same base

Concrete subclasses inherit from both BaseModel and NumericValue,
e.g. `class Number(BaseModel, NumericValue):`. NumericValue itself does
not inherit from BaseModel to avoid MRO conflicts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, ClassVar


class TypePrecedence(IntEnum):
    """
    Type promotion precedence hierarchy.

    Lower values promote to higher values.
    """

    NUMBER = 0  # Signed base-N number (possibly infinite)
    FRACTION = 1  # Numerator / denominator pair of integer numbers


class NumericValue(ABC):
    """
    Base class for all numeric value objects.

    Subclasses must implement:
    - type_precedence: Class variable defining promotion order
    - the named arithmetic methods (add, subtract, multiply, divide,
      exponentiate, negate, absolute_value) and compare/promote
    """

    type_precedence: ClassVar[TypePrecedence]

    @property
    @abstractmethod
    def base(self) -> int:
        """The base of the numeral system."""

    @abstractmethod
    def promote(self, other: NumericValue) -> NumericValue:
        """
        Promote this value to be compatible with another type.

        Example:
            Number(3).promote(Fraction(1, 2)) -> Fraction(3, 1)
        """

    @abstractmethod
    def compare(self, other: Any) -> int:
        """Three-way comparison, returns -1, 0 or 1."""

    @abstractmethod
    def to_string(self) -> str:
        """Convert to a string in standard notation."""

    @abstractmethod
    def add(self, other: Any) -> NumericValue:
        pass

    @abstractmethod
    def subtract(self, other: Any) -> NumericValue:
        pass

    @abstractmethod
    def multiply(self, other: Any) -> NumericValue:
        pass

    @abstractmethod
    def divide(self, other: Any) -> NumericValue:
        pass

    @abstractmethod
    def exponentiate(self, exponent: Any) -> NumericValue:
        pass

    @abstractmethod
    def negate(self) -> NumericValue:
        pass

    @abstractmethod
    def absolute_value(self) -> NumericValue:
        pass

    # Helper methods for type promotion

    @classmethod
    def should_promote_to(cls, other_type: type[NumericValue]) -> bool:
        """Check if this type should promote to another type."""
        return cls.type_precedence < other_type.type_precedence

    def promote_types(self, other: NumericValue) -> tuple[NumericValue, NumericValue]:
        """
        Promote both values to a common type.

        Returns:
            Tuple of (promoted_self, promoted_other)
        """
        if self.type_precedence < other.type_precedence:
            return self.promote(other), other
        elif other.type_precedence < self.type_precedence:
            return self, other.promote(self)
        else:
            return self, other

    def from_python(self, value: Any) -> NumericValue:
        """
        Convert a Python value to a value of this base.

        Args:
            value: int, float or str (parsed in this base), or a NumericValue

        Raises:
            TypeError: If the value has no numeric interpretation
        """
        if isinstance(value, NumericValue):
            return value
        if isinstance(value, (bool, int, float, str)):
            from .numbers import create_number

            return create_number(self.base, value)
        raise TypeError(f"Cannot convert {type(value).__name__} to a number")

    def _coerce(self, other: Any) -> NumericValue | None:
        try:
            return self.from_python(other)
        except TypeError:
            return None

    # Operator overloading

    def __add__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.multiply(self)

    def __truediv__(self, other: Any) -> NumericValue:
        """Exact division: self / other"""
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __pow__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.exponentiate(other)

    def __rpow__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.exponentiate(self)

    def __neg__(self) -> NumericValue:
        return self.negate()

    def __pos__(self) -> NumericValue:
        return self

    def __abs__(self) -> NumericValue:
        return self.absolute_value()

    # Ordering (equality and hashing are defined by the concrete models)

    def __lt__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) >= 0
