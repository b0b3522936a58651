"""
Polynomial functions over base-N numbers.

f(x) = c0 + c1 * x + c2 * x^2 + ... + cn * x^n with the coefficients
stored lowest order first. All arithmetic goes through Number, so a
polynomial lives in exactly one base.
"""

from __future__ import annotations

from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .core.errors import IncompatibleBaseError, InvalidArgumentError, MissingArgumentError, NotAnIntegerError
from .numbers import Number, create_number, create_zero


class PolynomialFunction(BaseModel):
    """
    Polynomial with Number coefficients.

    Examples:
        >>> f = create_polynomial(10, [1, 2, 3])
        >>> str(f)
        '3 * x^2 + 2 * x + 1'
        >>> f.derivative().calculate(create_number(10, 1))
        Number('8', base=10)
    """

    model_config = ConfigDict(frozen=True)

    coefficients: tuple[Number, ...] = Field(description="Coefficients c0..cn, lowest order first")

    @field_validator("coefficients")
    @classmethod
    def _check_coefficients(cls, value: tuple[Number, ...]) -> tuple[Number, ...]:
        if not value:
            raise InvalidArgumentError("No coefficients (empty sequence) were specified!", "coefficients")
        base = value[0].base
        for coefficient in value[1:]:
            if coefficient.base != base:
                raise IncompatibleBaseError(base, coefficient.base)
        return value

    @property
    def base(self) -> int:
        return self.coefficients[0].base

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def calculate(self, x: Any) -> Number:
        """f(x) by Horner's scheme."""
        if not isinstance(x, Number):
            x = create_number(self.base, x)
        result = create_zero(self.base)
        for coefficient in reversed(self.coefficients):
            result = result.multiply(x).add(coefficient)
        return result

    def derivative(self) -> PolynomialFunction:
        """
        The derivative f'(x) = c1 + 2 * c2 * x + ... + n * cn * x^(n-1).

        The derivative of a constant is the zero polynomial.
        """
        if self.degree == 0:
            return PolynomialFunction(coefficients=(create_zero(self.base),))

        exponent = create_number(self.base, self.degree)
        derived = []
        for coefficient in reversed(self.coefficients[1:]):
            derived.append(coefficient.multiply(exponent))
            exponent = exponent.dec()
        return PolynomialFunction(coefficients=tuple(reversed(derived)))

    def to_number(self) -> Number:
        """Evaluate at x = base, i.e. read the coefficients as digits."""
        return self.calculate(create_number(self.base, self.base))

    def __str__(self) -> str:
        terms = []
        for index in range(self.degree, -1, -1):
            coefficient = self.coefficients[index]
            if coefficient.is_zero():
                continue
            if index == 0:
                terms.append(str(coefficient))
            elif index == 1:
                terms.append(f"{coefficient} * x")
            else:
                terms.append(f"{coefficient} * x^{index}")
        return " + ".join(terms) if terms else "0"

    def __repr__(self) -> str:
        return f"PolynomialFunction({str(self)!r}, base={self.base})"


def create_polynomial(base: int, coefficients: Sequence[Any]) -> PolynomialFunction:
    """Create a polynomial from coefficients (lowest order first) given as int, str or Number."""
    if coefficients is None:
        raise MissingArgumentError("coefficients")
    return PolynomialFunction(coefficients=tuple(create_number(base, c) for c in coefficients))


def polynomial_from_number(number: Number) -> PolynomialFunction:
    """
    Read the digits of a natural number as coefficients.

    Example:
        123 in base 10 -> 1 * x^2 + 2 * x + 3
    """
    if not number.is_natural_number():
        raise NotAnIntegerError("polynomial from number", number)
    base = number.base
    coefficients = [
        create_number(base, number.digit_at(power).ordinal)
        for power in range(number.integer_part_length())
    ]
    return PolynomialFunction(coefficients=tuple(coefficients))
