"""
Standard and scientific notation.

Parsers turn a string into a ParsedNumber (sign, digit ordinals, index of
the center digit); formatters turn a Number back into a string. Both are
registered operations. `parse_number` tries the standard notation first,
then the scientific notation, and reports all failures together.

Standard notation:   [sign] digits [separator digits]
Scientific notation: [sign] digits [separator digits] (E|e) [sign] digits

If the marker letter is itself a digit of the base (E from base 15 on,
e from base 41 on, and lower case e up to base 36), the exponent sign is
mandatory so that the marker can be told apart from a digit.
"""

from __future__ import annotations

import re
import sys
from functools import lru_cache
from typing import Any, NamedTuple, Optional

from .core.errors import (
    ArithmeticOverflowError,
    InvalidArgumentError,
    MissingArgumentError,
    NumberError,
    NumberParsingError,
)
from .core.logging import get_logger
from .digits import SYMBOLS, check_base, numeral_system
from .operations.base import Operation
from .operations.identifiers import OperationIdentifier
from .operations.repository import get_operation
from .signs import Sign

logger = get_logger(__name__)

EXPONENT_MARKERS = ("E", "e")


class ParsedNumber(NamedTuple):
    """Result of a notation parser. A separator of None stands for infinity."""

    sign: Sign
    ordinals: tuple[int, ...]
    separator: Optional[int]


def _digit_class(base: int) -> str:
    symbols = numeral_system(base).accepted_symbols
    return "[" + "".join(re.escape(symbol) for symbol in symbols) + "]"


def exponent_sign_required(base: int) -> bool:
    """Check if an exponent marker could be mistaken for a digit of this base."""
    system = numeral_system(base)
    return any(system.accepts(marker) for marker in EXPONENT_MARKERS)


@lru_cache(maxsize=None)
def _standard_pattern(base: int, separator: str) -> re.Pattern:
    digit = _digit_class(base)
    return re.compile(
        rf"(?P<sign>[+-])?(?P<integer>{digit}*)(?:{re.escape(separator)}(?P<fraction>{digit}*))?"
    )


@lru_cache(maxsize=None)
def _scientific_pattern(base: int, separator: str) -> re.Pattern:
    digit = _digit_class(base)
    exponent_sign = "[+-]" if exponent_sign_required(base) else "[+-]?"
    return re.compile(
        rf"(?P<sign>[+-])?(?P<integer>{digit}+)(?:{re.escape(separator)}(?P<fraction>{digit}+))?"
        rf"[Ee](?P<exponent_sign>{exponent_sign})(?P<exponent>{digit}+)"
    )


def _ordinals(base: int, symbols: str) -> tuple[int, ...]:
    system = numeral_system(base)
    return tuple(system.symbol_to_digit(symbol).ordinal for symbol in symbols)


def _resolve_separator(separator: Optional[str], settings: Any) -> str:
    if separator is None:
        return settings.DECIMAL_SEPARATOR
    if separator not in (".", ","):
        raise InvalidArgumentError(f"Unsupported decimal separator {separator!r}!", "separator")
    return separator


class StandardNotationParser(Operation):
    """Parses '[sign] digits [separator digits]' and the infinity representation."""

    def calculate(self, base: int, text: str, separator: Optional[str] = None) -> ParsedNumber:
        check_base(base)
        separator = _resolve_separator(separator, self.settings)
        stripped = text.strip()

        infinity = self.settings.INFINITY_REPRESENTATION
        if stripped.lstrip("+-") == infinity and len(stripped) - len(infinity) <= 1:
            sign = Sign.NEGATIVE if stripped.startswith("-") else Sign.POSITIVE
            return ParsedNumber(sign, (), None)

        match = _standard_pattern(base, separator).fullmatch(stripped)
        if match is None or not (match.group("integer") or match.group("fraction")):
            raise InvalidArgumentError(f"{text!r} is not in standard notation (base {base})!", "text")

        integer = match.group("integer") or SYMBOLS[0]
        fraction = match.group("fraction") or ""
        ordinals = _ordinals(base, integer + fraction)
        return ParsedNumber(Sign.parse(match.group("sign") or ""), ordinals, len(integer) - 1)


class ScientificNotationParser(Operation):
    """Parses '[sign] mantissa (E|e) [sign] exponent'; the exponent is written in the same base."""

    def calculate(self, base: int, text: str, separator: Optional[str] = None) -> ParsedNumber:
        check_base(base)
        separator = _resolve_separator(separator, self.settings)
        stripped = text.strip()

        match = _scientific_pattern(base, separator).fullmatch(stripped)
        if match is None:
            raise InvalidArgumentError(f"{text!r} is not in scientific notation (base {base})!", "text")

        exponent = 0
        for ordinal in _ordinals(base, match.group("exponent")):
            exponent = exponent * base + ordinal
            if exponent > sys.maxsize:
                raise ArithmeticOverflowError(f"The exponent of {text!r} is too large!", text)
        if match.group("exponent_sign") == "-":
            exponent = -exponent

        integer = match.group("integer")
        fraction = match.group("fraction") or ""
        ordinals = _ordinals(base, integer + fraction)
        return ParsedNumber(Sign.parse(match.group("sign") or ""), ordinals, len(integer) - 1 + exponent)


def parse_number(base: int, text: str, separator: Optional[str] = None) -> ParsedNumber:
    """
    Parse a string with the registered notation parsers.

    Raises:
        NumberParsingError: If no parser accepts the string (lists every failure)
    """
    check_base(base)
    if text is None:
        raise MissingArgumentError("text")
    if not isinstance(text, str):
        raise InvalidArgumentError(f"Expected a string, got {type(text).__name__}!", "text")

    causes: list[Exception] = []
    for identifier in (
        OperationIdentifier.STANDARD_NOTATION_PARSER,
        OperationIdentifier.SCIENTIFIC_NOTATION_PARSER,
    ):
        try:
            return get_operation(identifier).calculate(base, text, separator=separator)
        except NumberError as e:
            causes.append(e)

    logger.debug("No notation matched %r in base %d (%d failures)", text, base, len(causes))
    raise NumberParsingError(base, text, causes)


def _symbols(ordinals) -> str:
    return "".join(SYMBOLS[ordinal] for ordinal in ordinals)


class StandardNotationFormatter(Operation):
    """Formats a number as '[-] digits [separator digits]'."""

    def calculate(self, number: Any, separator: Optional[str] = None) -> str:
        separator = _resolve_separator(separator, self.settings)
        prefix = "-" if number.sign.is_negative() else ""
        if number.is_infinity():
            return prefix + self.settings.INFINITY_REPRESENTATION

        sequence = number.sequence
        integer = _symbols(sequence.ordinals[: sequence.separator + 1])
        fraction = _symbols(sequence.ordinals[sequence.separator + 1:])
        if fraction:
            return f"{prefix}{integer}{separator}{fraction}"
        return prefix + integer


class ScientificNotationFormatter(Operation):
    """
    Formats a number as '[-] d [separator digits] E [sign] exponent'.

    The mantissa has exactly one non-zero digit left of the separator and
    no trailing zeros. The exponent is written in the base of the number.
    """

    def calculate(
        self,
        number: Any,
        separator: Optional[str] = None,
        exponent_symbol: Optional[str] = None,
    ) -> str:
        separator = _resolve_separator(separator, self.settings)
        marker = exponent_symbol or self.settings.EXPONENT_SYMBOL
        if marker not in EXPONENT_MARKERS:
            raise InvalidArgumentError(f"Unsupported exponent symbol {marker!r}!", "exponent_symbol")

        prefix = "-" if number.sign.is_negative() else ""
        if number.is_infinity():
            return prefix + self.settings.INFINITY_REPRESENTATION

        sequence = number.sequence
        significant = [index for index, ordinal in enumerate(sequence.ordinals) if ordinal != 0]
        if significant:
            first, last = significant[0], significant[-1]
            exponent = sequence.separator - first
            mantissa = _symbols(sequence.ordinals[first:first + 1])
            if last > first:
                mantissa += separator + _symbols(sequence.ordinals[first + 1:last + 1])
        else:
            exponent = 0
            mantissa = SYMBOLS[0]

        if exponent < 0:
            exponent_sign = "-"
        elif exponent_sign_required(number.base):
            exponent_sign = "+"
        else:
            exponent_sign = ""

        exponent_digits = []
        value = abs(exponent)
        while True:
            value, remainder = divmod(value, number.base)
            exponent_digits.append(SYMBOLS[remainder])
            if value == 0:
                break
        return f"{prefix}{mantissa}{marker}{exponent_sign}{''.join(reversed(exponent_digits))}"


def format_number(number: Any, separator: Optional[str] = None) -> str:
    """Standard notation of a number."""
    return get_operation(OperationIdentifier.STANDARD_NOTATION_FORMATTER).calculate(number, separator=separator)


def format_scientific(number: Any, separator: Optional[str] = None, exponent_symbol: Optional[str] = None) -> str:
    """Scientific notation of a number."""
    return get_operation(OperationIdentifier.SCIENTIFIC_NOTATION_FORMATTER).calculate(
        number, separator=separator, exponent_symbol=exponent_symbol
    )
