"""
Library exceptions.

Defines the exception taxonomy shared by all numeric types and operations.
Every error carries a human readable message plus a details dictionary
describing the rejected input.
"""

from typing import Any, Dict, List, Optional


class NumberError(Exception):
    """Base exception for all basen errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# Construction errors

class UnsupportedBaseError(NumberError):
    """Raised when a number base lies outside the supported range"""

    def __init__(self, base: Any, minimum: int = 2, maximum: int = 65):
        super().__init__(
            message=f"Unsupported base {base!r} (valid range is {minimum}..{maximum})!",
            details={"base": base, "minimum": minimum, "maximum": maximum},
        )


class InvalidDigitError(NumberError):
    """Raised when an ordinal or symbol does not denote a digit of a base"""

    def __init__(self, base: int, value: Any):
        super().__init__(
            message=f"No digit exists for {value!r} in base {base}!",
            details={"base": base, "value": value},
        )


class InvalidSignError(NumberError):
    """Raised when a sign can not be interpreted"""

    def __init__(self, sign: Any):
        super().__init__(
            message=f"Invalid sign {sign!r}!",
            details={"sign": sign},
        )


class MissingArgumentError(NumberError):
    """Raised when a required argument is None"""

    def __init__(self, name: str):
        super().__init__(
            message=f"No {name} (None) was specified!",
            details={"argument": name},
        )


class InvalidArgumentError(NumberError):
    """Raised when an argument has an illegal value"""

    def __init__(self, message: str, name: Optional[str] = None):
        details = {"argument": name} if name else {}
        super().__init__(message=message, details=details)


class NumberParsingError(NumberError):
    """Raised when no notation parser accepts a string"""

    def __init__(self, base: int, text: str, causes: Optional[List[Exception]] = None):
        self.causes = list(causes or [])
        reasons = "; ".join(str(cause) for cause in self.causes)
        message = f"Unable to parse {text!r} as a number in base {base}!"
        if reasons:
            message = f"{message} ({reasons})"
        super().__init__(
            message=message,
            details={"base": base, "text": text, "causes": [str(c) for c in self.causes]},
        )


# Domain errors

class DomainError(NumberError):
    """Raised when an operand lies outside the domain of an operation"""


class DivisionByZeroError(DomainError):
    """Raised for a division with a zero divisor"""

    def __init__(self, dividend: Any = None):
        super().__init__(
            message=f"Division of {dividend} by zero is undefined!",
            details={"dividend": str(dividend)},
        )


class NegativeArgumentError(DomainError):
    """Raised when an operation requires a non-negative operand"""

    def __init__(self, operation: str, value: Any):
        super().__init__(
            message=f"{operation} is not defined for the negative number {value}!",
            details={"operation": operation, "value": str(value)},
        )


class NotAnIntegerError(DomainError):
    """Raised when an operation requires an integer operand"""

    def __init__(self, operation: str, value: Any):
        super().__init__(
            message=f"{operation} requires an integer, but {value} is not an integer!",
            details={"operation": operation, "value": str(value)},
        )


class IncompatibleBaseError(DomainError):
    """Raised when operands of different bases are mixed"""

    def __init__(self, first: int, second: int):
        super().__init__(
            message=f"The operands have different bases ({first} and {second})!",
            details={"first": first, "second": second},
        )


class UndefinedOperationError(DomainError):
    """Raised when an operation has no defined result (e.g. infinity minus infinity)"""

    def __init__(self, operator: str, *operands: Any):
        if len(operands) == 1:
            rendered = f"{operator} {operands[0]}"
        else:
            rendered = f" {operator} ".join(str(operand) for operand in operands)
        super().__init__(
            message=f"The operation {rendered} is undefined!",
            details={"operator": operator, "operands": [str(o) for o in operands]},
        )


# Registry errors

class RegistryError(NumberError):
    """Base class for operation registry misuse"""


class DuplicateRegistrationError(RegistryError):
    """Raised when an operation identifier is registered twice"""

    def __init__(self, identifier: Any):
        super().__init__(
            message=f"An operation is already registered for {identifier}!",
            details={"identifier": str(identifier)},
        )


class UnknownOperationError(RegistryError):
    """Raised when an operation identifier is not registered"""

    def __init__(self, identifier: Any):
        super().__init__(
            message=f"No operation is registered for {identifier}!",
            details={"identifier": str(identifier)},
        )


class AlgorithmSelectionError(RegistryError):
    """Raised when an algorithm token is not allowed for an operation"""

    def __init__(self, operation: str, algorithm: Any, allowed: Any):
        super().__init__(
            message=f"The algorithm {algorithm} can not be used for {operation}!",
            details={
                "operation": operation,
                "algorithm": str(algorithm),
                "allowed": [str(a) for a in allowed],
            },
        )


class RepositoryInitializationError(RegistryError):
    """Raised when the process-wide repository is initialized twice"""

    def __init__(self):
        super().__init__(message="The operation repository has already been initialized!")


# Overflow errors

class ArithmeticOverflowError(NumberError):
    """Raised when an internal counter or a native conversion exceeds its range"""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message=message, details={"value": str(value)})
