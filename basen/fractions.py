"""
Fraction value type.

A Fraction is an exact quotient of two integer Numbers of the same base.
The denominator is never zero and always positive; the sign of the
fraction is carried by the numerator. Fractions are not reduced
automatically, call reduce() for the lowest terms.
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from .core.errors import (
    DivisionByZeroError,
    IncompatibleBaseError,
    MissingArgumentError,
    NotAnIntegerError,
    NumberError,
)
from .numbers import Number, create_number
from .operations.identifiers import OperationIdentifier as Op
from .operations.processing import DIVISION, MULTIPLICATION, ProcessingDetails
from .operations.repository import get_operation
from .signs import Sign
from .value import NumericValue, TypePrecedence


class Fraction(BaseModel, NumericValue):
    """
    Exact rational number.

    Examples:
        >>> half = create_fraction(10, 1, 2)
        >>> half.add(create_fraction(10, 1, 3))
        Fraction('5/6', base=10)
        >>> create_fraction(10, 6, 8).reduce()
        Fraction('3/4', base=10)
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    numerator: Number = Field(description="Integer numerator, carries the sign")
    denominator: Number = Field(description="Positive integer denominator")

    type_precedence: ClassVar[TypePrecedence] = TypePrecedence.FRACTION

    def __init__(self, numerator: Number, denominator: Optional[Number] = None, **kwargs):
        """
        Create a Fraction.

        Args:
            numerator: Integer number
            denominator: Integer number other than zero (default one)

        Raises:
            IncompatibleBaseError: If the bases differ
            NotAnIntegerError: If a part is not an integer (or infinite)
            DivisionByZeroError: If the denominator is zero
        """
        if numerator is None:
            raise MissingArgumentError("numerator")
        if denominator is None:
            denominator = create_number(numerator.base, 1)
        if numerator.base != denominator.base:
            raise IncompatibleBaseError(numerator.base, denominator.base)
        for part in (numerator, denominator):
            if not part.is_integer():
                raise NotAnIntegerError("fraction", part)
        if denominator.is_zero():
            raise DivisionByZeroError(numerator)
        if denominator.is_negative():
            numerator = numerator.negate()
            denominator = denominator.negate()
        super().__init__(numerator=numerator, denominator=denominator, **kwargs)

    @property
    def base(self) -> int:
        return self.numerator.base

    @property
    def sign(self) -> Sign:
        return self.numerator.sign

    def _operand(self, value: Any) -> NumericValue:
        if value is None:
            raise MissingArgumentError("operand")
        return self.from_python(value)

    def _mixed(self, other: NumericValue, method: str) -> Optional[NumericValue]:
        # a fraction combined with infinity is evaluated first
        if isinstance(other, Number) and other.is_infinity():
            return getattr(self.evaluate(), method)(other)
        return None

    def _fraction_operand(self, value: Any) -> NumericValue:
        other = self._operand(value)
        if isinstance(other, Number) and not other.is_infinity():
            return other.to_fraction()
        return other

    def promote(self, other: NumericValue) -> NumericValue:
        return self

    # Predicates

    def is_zero(self) -> bool:
        return self.numerator.is_zero()

    def is_one(self) -> bool:
        return self.numerator == self.denominator

    def is_negative(self) -> bool:
        return self.numerator.is_negative()

    def is_positive(self) -> bool:
        return self.numerator.is_positive()

    def is_integer(self) -> bool:
        """Check if the denominator divides the numerator."""
        return self.numerator.modulo(self.denominator).is_zero()

    def is_reduced(self) -> bool:
        """Check if numerator and denominator have no common divisor but one."""
        if self.is_zero():
            return self.denominator.is_one()
        return self.numerator.greatest_common_divisor(self.denominator).is_one()

    def has_integer_part(self) -> bool:
        """Check if the magnitude is at least one."""
        return self.numerator.absolute_value().compare(self.denominator) >= 0

    # Comparison

    def compare(self, other: Any) -> int:
        other = self._fraction_operand(other)
        if isinstance(other, Number):
            return self.evaluate().compare(other)
        return get_operation(Op.COMPARE_FRACTIONS).calculate(self, other)

    def max(self, other: Any) -> NumericValue:
        other = self._operand(other)
        return self if self.compare(other) >= 0 else other

    def min(self, other: Any) -> NumericValue:
        other = self._operand(other)
        return self if self.compare(other) <= 0 else other

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, NumericValue):
            return other.base == self.base and self.compare(other) == 0
        if isinstance(other, (int, float, str)) and not isinstance(other, bool):
            try:
                other = create_number(self.base, other)
            except NumberError:
                return False
            return self.compare(other) == 0
        return NotImplemented

    def __hash__(self) -> int:
        reduced = self.reduce()
        if reduced.denominator.is_one():
            return hash((reduced.sign, reduced.numerator.sequence, 1))
        return hash((reduced.sign, reduced.numerator.sequence, reduced.denominator.sequence))

    # Arithmetic

    def add(self, other: Any) -> NumericValue:
        other = self._fraction_operand(other)
        mixed = self._mixed(other, "add")
        if mixed is not None:
            return mixed
        return get_operation(Op.ADD_FRACTIONS).calculate(self, other)

    def subtract(self, other: Any) -> NumericValue:
        other = self._fraction_operand(other)
        mixed = self._mixed(other, "subtract")
        if mixed is not None:
            return mixed
        return get_operation(Op.SUBTRACT_FRACTIONS).calculate(self, other)

    def multiply(self, other: Any, algorithm: Any = None) -> NumericValue:
        """
        Multiply exactly.

        The algorithm (one of the multiplication algorithms) computes both
        the numerator and the denominator product.
        """
        other = self._fraction_operand(other)
        identifier = ProcessingDetails(algorithm=algorithm).select(MULTIPLICATION)
        if isinstance(other, Number) and other.is_infinity():
            return self.evaluate().multiply(other, algorithm=identifier)
        return get_operation(Op.MULTIPLY_FRACTIONS).calculate(self, other, algorithm=identifier)

    def divide(self, other: Any) -> NumericValue:
        other = self._fraction_operand(other)
        mixed = self._mixed(other, "divide")
        if mixed is not None:
            return mixed
        return get_operation(Op.DIVIDE_FRACTIONS).calculate(self, other)

    def exponentiate(self, exponent: Any) -> NumericValue:
        """
        Raise the fraction to a power.

        Integer exponents keep the result exact. Any other exponent
        evaluates the fraction first and returns a Number.
        """
        exponent = self._operand(exponent)
        if isinstance(exponent, Number) and exponent.is_integer():
            return get_operation(Op.EXPONENTIATE_FRACTION).calculate(self, exponent)
        return self.evaluate().exponentiate(exponent)

    def negate(self) -> Fraction:
        return Fraction.model_construct(numerator=self.numerator.negate(), denominator=self.denominator)

    def absolute_value(self) -> Fraction:
        return Fraction.model_construct(numerator=self.numerator.absolute_value(), denominator=self.denominator)

    def reciprocal(self) -> Fraction:
        """
        Swap numerator and denominator.

        Raises:
            DivisionByZeroError: If the fraction is zero
        """
        return Fraction(self.denominator, self.numerator)

    def inc(self) -> Fraction:
        return Fraction.model_construct(numerator=self.numerator.add(self.denominator), denominator=self.denominator)

    def dec(self) -> Fraction:
        return Fraction.model_construct(
            numerator=self.numerator.subtract(self.denominator), denominator=self.denominator
        )

    def doubling(self) -> Fraction:
        return Fraction.model_construct(numerator=self.numerator.doubling(), denominator=self.denominator)

    def halving(self) -> Fraction:
        return Fraction.model_construct(numerator=self.numerator, denominator=self.denominator.doubling())

    def square(self) -> Fraction:
        return Fraction.model_construct(numerator=self.numerator.square(), denominator=self.denominator.square())

    def reduce(self) -> Fraction:
        """Divide numerator and denominator by their greatest common divisor."""
        return get_operation(Op.REDUCE_FRACTION).calculate(self)

    def integer_part(self) -> Number:
        """The integer part of the quotient (truncated towards zero)."""
        return self.numerator.diviso(self.denominator)

    def to_mixed(self) -> tuple[Number, Fraction]:
        """
        Split into an integer part and a proper fraction.

        Example:
            7/2 -> (3, 1/2), -7/2 -> (-3, -1/2)
        """
        whole, rest = self.numerator.divide_with_remainder(self.denominator)
        return whole, Fraction.model_construct(numerator=rest, denominator=self.denominator)

    def common_divisors(self) -> list[Number]:
        """The common divisors of numerator and denominator."""
        return self.numerator.common_divisors(self.denominator)

    def common_prime_factors(self) -> list[Number]:
        return self.numerator.common_prime_factors(self.denominator)

    def is_common_divisor(self, number: Any) -> bool:
        """Check if an integer divides both numerator and denominator (zero never does)."""
        if number is None:
            raise MissingArgumentError("divisor")
        return self.numerator.is_multiple_of(number) and self.denominator.is_multiple_of(number)

    def rebase(self, base: int) -> Fraction:
        """Express numerator and denominator in another base; the value is unchanged."""
        return Fraction(self.numerator.rebase(base), self.denominator.rebase(base))

    def evaluate(self, decimal_places: Optional[int] = None, algorithm: Any = None) -> Number:
        """
        The quotient as a Number.

        Args:
            decimal_places: Maximum fraction digits (default MAXIMUM_FRACTION_LENGTH)
            algorithm: One of the division algorithms (default LONG_DIVISION)
        """
        details = ProcessingDetails(algorithm=algorithm, decimal_places=decimal_places)
        return get_operation(Op.EVALUATE_FRACTION).calculate(
            self, decimal_places=details.decimal_places, algorithm=details.select(DIVISION)
        )

    # Conversions

    def to_float(self) -> float:
        return self.numerator.to_float() / self.denominator.to_float()

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def to_string(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Fraction({self.to_string()!r}, base={self.base})"


def create_fraction(base: int, numerator: Any, denominator: Any = 1) -> Fraction:
    """
    Create a fraction from two integer values.

    Args:
        base: The base (2..65)
        numerator: int, str or Number
        denominator: int, str or Number (default one)

    Example:
        >>> create_fraction(2, "1", "11").evaluate(decimal_places=4)
        Number('0.0101', base=2)
    """
    if numerator is None:
        raise MissingArgumentError("numerator")
    if denominator is None:
        raise MissingArgumentError("denominator")
    return Fraction(create_number(base, numerator), create_number(base, denominator))
