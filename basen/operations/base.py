"""
Base class for operation implementations.

Every algorithm is a stateless class with a single `calculate` method. The
repository creates one instance per identifier and hands it out to all
callers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..core.config import Settings
from ..core.errors import IncompatibleBaseError


class Operation(ABC):
    """
    Base class for all algorithms.

    Subclasses must implement `calculate`. Instances hold no state besides
    an optional reference to the active settings, which the repository
    sets when it instantiates the operation.
    """

    settings: Settings | None = None

    @abstractmethod
    def calculate(self, *operands: Any, **parameters: Any) -> Any:
        """
        Run the algorithm.

        Args:
            *operands: The operands (Numbers, Fractions or primitives)
            **parameters: Bounds such as decimal_places or iterations

        Returns:
            The result of the operation
        """

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def decimal_places(self, value: int | None) -> int:
        """The requested fraction digit bound or the configured default."""
        if value is None:
            return self.settings.MAXIMUM_FRACTION_LENGTH
        return value

    def __repr__(self) -> str:
        return f"{self.name}()"


def check_same_base(*operands: Any) -> int:
    """
    Check that all operands share one base.

    Raises:
        IncompatibleBaseError: On the first operand with a different base
    """
    base = operands[0].base
    for operand in operands[1:]:
        if operand.base != base:
            raise IncompatibleBaseError(base, operand.base)
    return base
