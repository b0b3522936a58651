"""Identifiers of all registered operations."""

from enum import Enum


class OperationIdentifier(str, Enum):
    """Registry keys. An identifier names one algorithm of a logical operation."""

    # Notations
    STANDARD_NOTATION_PARSER = "STANDARD_NOTATION_PARSER"
    SCIENTIFIC_NOTATION_PARSER = "SCIENTIFIC_NOTATION_PARSER"
    STANDARD_NOTATION_FORMATTER = "STANDARD_NOTATION_FORMATTER"
    SCIENTIFIC_NOTATION_FORMATTER = "SCIENTIFIC_NOTATION_FORMATTER"

    # Comparison
    COMPARE_NUMBERS = "COMPARE_NUMBERS"
    COMPARE_FRACTIONS = "COMPARE_FRACTIONS"

    # Addition and related unary operations
    ADD_NUMBERS = "ADD_NUMBERS"
    SUBTRACT_NUMBERS = "SUBTRACT_NUMBERS"
    NEGATE_NUMBER = "NEGATE_NUMBER"
    ABSOLUTE_VALUE = "ABSOLUTE_VALUE"
    COMPLEMENT_NUMBER = "COMPLEMENT_NUMBER"
    INC_NUMBER = "INC_NUMBER"
    DEC_NUMBER = "DEC_NUMBER"
    DOUBLING_NUMBER = "DOUBLING_NUMBER"
    HALVING_NUMBER = "HALVING_NUMBER"

    # Multiplication
    LONG_MULTIPLICATION = "LONG_MULTIPLICATION"
    MULTIPLICATION_BY_ADDITION = "MULTIPLICATION_BY_ADDITION"
    RUSSIAN_PEASANT_MULTIPLICATION = "RUSSIAN_PEASANT_MULTIPLICATION"
    SQUARE_NUMBER = "SQUARE_NUMBER"
    FACTORIAL = "FACTORIAL"

    # Division
    DIVIDE_NUMBERS_AS_FRACTION = "DIVIDE_NUMBERS_AS_FRACTION"
    LONG_DIVISION = "LONG_DIVISION"
    DIVISION_BY_SUBTRACTION = "DIVISION_BY_SUBTRACTION"
    RUSSIAN_DIVISION = "RUSSIAN_DIVISION"
    DIVISION_WITH_REMAINDER = "DIVISION_WITH_REMAINDER"
    MODULO = "MODULO"
    DIVISO = "DIVISO"

    # Rounding
    ROUND_NUMBER_TO_EVEN = "ROUND_NUMBER_TO_EVEN"
    ROUND_NUMBER_TO_ODD = "ROUND_NUMBER_TO_ODD"
    ROUND_UP = "ROUND_UP"
    ROUND_DOWN = "ROUND_DOWN"
    REMOVE_INTEGER_PART = "REMOVE_INTEGER_PART"
    REMOVE_FRACTION_PART = "REMOVE_FRACTION_PART"

    # Exponentiation and roots
    EXPONENTIATION_BY_SQUARING = "EXPONENTIATION_BY_SQUARING"
    EXPONENTIATION_BY_MULTIPLICATION = "EXPONENTIATION_BY_MULTIPLICATION"
    FRACTIONAL_EXPONENTIATION = "FRACTIONAL_EXPONENTIATION"
    SQUARE_ROOT = "SQUARE_ROOT"
    NTH_ROOT = "NTH_ROOT"

    # Structural transforms
    SHIFT_LEFT = "SHIFT_LEFT"
    SHIFT_RIGHT = "SHIFT_RIGHT"
    REBASE_NUMBER = "REBASE_NUMBER"

    # Divisors and primes
    DIVISORS = "DIVISORS"
    PRIME_FACTORS = "PRIME_FACTORS"
    COMMON_DIVISORS = "COMMON_DIVISORS"
    COMMON_PRIME_FACTORS = "COMMON_PRIME_FACTORS"
    IS_PRIME = "IS_PRIME"
    NEXT_PRIME = "NEXT_PRIME"
    GREATEST_COMMON_DIVISOR = "GREATEST_COMMON_DIVISOR"

    # Approximations
    EULERS_NUMBER = "EULERS_NUMBER"
    LEIBNIZ_PI_APPROXIMATION = "LEIBNIZ_PI_APPROXIMATION"
    ARCHIMEDES_PI_APPROXIMATION = "ARCHIMEDES_PI_APPROXIMATION"
    SINE_APPROXIMATION = "SINE_APPROXIMATION"

    # Random numbers
    RANDOM_NUMBER = "RANDOM_NUMBER"
    RANDOM_NUMBER_WITHIN_INTERVAL = "RANDOM_NUMBER_WITHIN_INTERVAL"

    # Fractions
    ADD_FRACTIONS = "ADD_FRACTIONS"
    SUBTRACT_FRACTIONS = "SUBTRACT_FRACTIONS"
    MULTIPLY_FRACTIONS = "MULTIPLY_FRACTIONS"
    DIVIDE_FRACTIONS = "DIVIDE_FRACTIONS"
    REDUCE_FRACTION = "REDUCE_FRACTION"
    EVALUATE_FRACTION = "EVALUATE_FRACTION"
    EXPONENTIATE_FRACTION = "EXPONENTIATE_FRACTION"

    def __str__(self) -> str:
        return self.value
