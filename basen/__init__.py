"""basen - arbitrary precision numbers in bases 2 to 65.

Main namespace package:
- basen.digits: Digits and numeral systems
- basen.nodes: Canonical digit sequences
- basen.numbers: The Number value type
- basen.fractions: The Fraction value type
- basen.notations: Standard and scientific notation
- basen.operations: Operation registry and algorithms
- basen.functions: Polynomial functions
- basen.core: Configuration, logging and errors
"""

from typing import Optional

from .core.config import Settings, get_settings
from .core.errors import (
    AlgorithmSelectionError,
    ArithmeticOverflowError,
    DivisionByZeroError,
    DomainError,
    DuplicateRegistrationError,
    IncompatibleBaseError,
    InvalidArgumentError,
    InvalidDigitError,
    InvalidSignError,
    MissingArgumentError,
    NegativeArgumentError,
    NotAnIntegerError,
    NumberError,
    NumberParsingError,
    RegistryError,
    RepositoryInitializationError,
    UndefinedOperationError,
    UnknownOperationError,
    UnsupportedBaseError,
)
from .core.logging import setup_logging
from .digits import Digit, numeral_system
from .fractions import Fraction, create_fraction
from .functions import PolynomialFunction, create_polynomial, polynomial_from_number
from .nodes import DigitNode, DigitSequence
from .numbers import (
    Number,
    create_infinity,
    create_number,
    create_number_from_digits,
    create_one,
    create_random_number,
    create_random_number_between,
    create_zero,
    default_base,
    euler_number,
    pi,
)
from .operations import OperationIdentifier, OperationRepository, initialize_repository
from .signs import Sign

__version__ = "0.1.0"


def initialize(settings: Optional[Settings] = None) -> OperationRepository:
    """
    Configure logging and populate the operation registry.

    Call once at process start. Without a call the registry initializes
    itself with the default settings on first use.

    Raises:
        RepositoryInitializationError: If the registry is already initialized
    """
    settings = settings or get_settings()
    setup_logging(settings)
    return initialize_repository(settings)


__all__ = [
    "initialize",
    "Settings",
    "get_settings",
    "Digit",
    "numeral_system",
    "DigitNode",
    "DigitSequence",
    "Sign",
    "Number",
    "Fraction",
    "PolynomialFunction",
    "OperationIdentifier",
    "OperationRepository",
    "create_number",
    "create_number_from_digits",
    "create_infinity",
    "create_zero",
    "create_one",
    "create_random_number",
    "create_random_number_between",
    "create_fraction",
    "create_polynomial",
    "polynomial_from_number",
    "default_base",
    "euler_number",
    "pi",
    "NumberError",
    "UnsupportedBaseError",
    "InvalidDigitError",
    "InvalidSignError",
    "MissingArgumentError",
    "InvalidArgumentError",
    "NumberParsingError",
    "DomainError",
    "DivisionByZeroError",
    "NegativeArgumentError",
    "NotAnIntegerError",
    "IncompatibleBaseError",
    "UndefinedOperationError",
    "RegistryError",
    "DuplicateRegistrationError",
    "UnknownOperationError",
    "AlgorithmSelectionError",
    "RepositoryInitializationError",
    "ArithmeticOverflowError",
]
