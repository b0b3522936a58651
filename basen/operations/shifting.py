"""
Shifting the separator.

A shift only moves the index of the center digit; no digit is
recomputed. Shifting left by n multiplies by base^n, shifting right
divides by base^n.
"""

from __future__ import annotations

from ..core.errors import InvalidArgumentError
from ..numbers import Number
from .base import Operation


def _check_positions(positions: int) -> int:
    if isinstance(positions, bool) or not isinstance(positions, int):
        raise InvalidArgumentError(f"Shift positions must be an int, got {positions!r}!", "positions")
    return positions


class ShiftLeft(Operation):
    def calculate(self, number: Number, positions: int = 1) -> Number:
        return Number.of(number.sign, number.sequence.shifted(_check_positions(positions)))


class ShiftRight(Operation):
    def calculate(self, number: Number, positions: int = 1) -> Number:
        return Number.of(number.sign, number.sequence.shifted(-_check_positions(positions)))
