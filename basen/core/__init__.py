"""Configuration, logging and error taxonomy shared by the whole library."""

from .config import BASE_MAX_LIMIT, BASE_MIN_LIMIT, Settings, get_settings
from .errors import (
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
from .logging import get_context_logger, get_logger, setup_logging

__all__ = [
    "BASE_MIN_LIMIT",
    "BASE_MAX_LIMIT",
    "Settings",
    "get_settings",
    "get_logger",
    "get_context_logger",
    "setup_logging",
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
