"""Default binding of every operation identifier to its implementation."""

from __future__ import annotations

from ..notations import (
    ScientificNotationFormatter,
    ScientificNotationParser,
    StandardNotationFormatter,
    StandardNotationParser,
)
from . import addition, approximations, comparison, division, divisors, exponentiation, fraction_operations
from . import multiplication, randomness, rebase, roots, rounding, shifting
from .identifiers import OperationIdentifier as Op

DEFAULT_OPERATIONS = {
    # Notations
    Op.STANDARD_NOTATION_PARSER: StandardNotationParser,
    Op.SCIENTIFIC_NOTATION_PARSER: ScientificNotationParser,
    Op.STANDARD_NOTATION_FORMATTER: StandardNotationFormatter,
    Op.SCIENTIFIC_NOTATION_FORMATTER: ScientificNotationFormatter,
    # Comparison
    Op.COMPARE_NUMBERS: comparison.CompareNumbers,
    Op.COMPARE_FRACTIONS: comparison.CompareFractions,
    # Addition and related unary operations
    Op.ADD_NUMBERS: addition.AddNumbers,
    Op.SUBTRACT_NUMBERS: addition.SubtractNumbers,
    Op.NEGATE_NUMBER: addition.NegateNumber,
    Op.ABSOLUTE_VALUE: addition.AbsoluteValue,
    Op.COMPLEMENT_NUMBER: addition.ComplementNumber,
    Op.INC_NUMBER: addition.IncNumber,
    Op.DEC_NUMBER: addition.DecNumber,
    Op.DOUBLING_NUMBER: addition.DoublingNumber,
    Op.HALVING_NUMBER: addition.HalvingNumber,
    # Multiplication
    Op.LONG_MULTIPLICATION: multiplication.LongMultiplication,
    Op.MULTIPLICATION_BY_ADDITION: multiplication.MultiplicationByAddition,
    Op.RUSSIAN_PEASANT_MULTIPLICATION: multiplication.RussianPeasantMultiplication,
    Op.SQUARE_NUMBER: multiplication.SquareNumber,
    Op.FACTORIAL: multiplication.Factorial,
    # Division
    Op.DIVIDE_NUMBERS_AS_FRACTION: division.DivideNumbersAsFraction,
    Op.LONG_DIVISION: division.LongDivision,
    Op.DIVISION_BY_SUBTRACTION: division.DivisionBySubtraction,
    Op.RUSSIAN_DIVISION: division.RussianDivision,
    Op.DIVISION_WITH_REMAINDER: division.DivisionWithRemainder,
    Op.MODULO: division.Modulo,
    Op.DIVISO: division.Diviso,
    # Rounding
    Op.ROUND_NUMBER_TO_EVEN: rounding.RoundNumberToEven,
    Op.ROUND_NUMBER_TO_ODD: rounding.RoundNumberToOdd,
    Op.ROUND_UP: rounding.RoundUp,
    Op.ROUND_DOWN: rounding.RoundDown,
    Op.REMOVE_INTEGER_PART: rounding.RemoveIntegerPart,
    Op.REMOVE_FRACTION_PART: rounding.RemoveFractionPart,
    # Exponentiation and roots
    Op.EXPONENTIATION_BY_SQUARING: exponentiation.ExponentiationBySquaring,
    Op.EXPONENTIATION_BY_MULTIPLICATION: exponentiation.ExponentiationByMultiplication,
    Op.FRACTIONAL_EXPONENTIATION: exponentiation.FractionalExponentiation,
    Op.SQUARE_ROOT: roots.SquareRoot,
    Op.NTH_ROOT: roots.NthRoot,
    # Structural transforms
    Op.SHIFT_LEFT: shifting.ShiftLeft,
    Op.SHIFT_RIGHT: shifting.ShiftRight,
    Op.REBASE_NUMBER: rebase.RebaseNumber,
    # Divisors and primes
    Op.DIVISORS: divisors.Divisors,
    Op.PRIME_FACTORS: divisors.PrimeFactors,
    Op.COMMON_DIVISORS: divisors.CommonDivisors,
    Op.COMMON_PRIME_FACTORS: divisors.CommonPrimeFactors,
    Op.IS_PRIME: divisors.IsPrime,
    Op.NEXT_PRIME: divisors.NextPrime,
    Op.GREATEST_COMMON_DIVISOR: divisors.GreatestCommonDivisor,
    # Approximations
    Op.EULERS_NUMBER: approximations.EulersNumber,
    Op.LEIBNIZ_PI_APPROXIMATION: approximations.LeibnizPiApproximation,
    Op.ARCHIMEDES_PI_APPROXIMATION: approximations.ArchimedesPiApproximation,
    Op.SINE_APPROXIMATION: approximations.SineApproximation,
    # Random numbers
    Op.RANDOM_NUMBER: randomness.RandomNumber,
    Op.RANDOM_NUMBER_WITHIN_INTERVAL: randomness.RandomNumberWithinInterval,
    # Fractions
    Op.ADD_FRACTIONS: fraction_operations.AddFractions,
    Op.SUBTRACT_FRACTIONS: fraction_operations.SubtractFractions,
    Op.MULTIPLY_FRACTIONS: fraction_operations.MultiplyFractions,
    Op.DIVIDE_FRACTIONS: fraction_operations.DivideFractions,
    Op.REDUCE_FRACTION: fraction_operations.ReduceFraction,
    Op.EVALUATE_FRACTION: fraction_operations.EvaluateFraction,
    Op.EXPONENTIATE_FRACTION: exponentiation.ExponentiateFraction,
}
