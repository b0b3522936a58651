"""
Processing details.

Bundles the caller supplied algorithm choice and bounds of one operation
call and checks the algorithm against the allow-list of the logical
operation.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from ..core.errors import AlgorithmSelectionError, InvalidArgumentError
from ..core.logging import get_logger
from .identifiers import OperationIdentifier

logger = get_logger(__name__)


MULTIPLICATION = "multiplication"
DIVISION = "division"
ROUNDING = "rounding"
EXPONENTIATION = "exponentiation"
PI = "pi"

# First entry is the default algorithm
ALLOWED_ALGORITHMS: dict[str, tuple[OperationIdentifier, ...]] = {
    MULTIPLICATION: (
        OperationIdentifier.LONG_MULTIPLICATION,
        OperationIdentifier.MULTIPLICATION_BY_ADDITION,
        OperationIdentifier.RUSSIAN_PEASANT_MULTIPLICATION,
    ),
    DIVISION: (
        OperationIdentifier.LONG_DIVISION,
        OperationIdentifier.DIVISION_BY_SUBTRACTION,
        OperationIdentifier.RUSSIAN_DIVISION,
    ),
    ROUNDING: (
        OperationIdentifier.ROUND_NUMBER_TO_EVEN,
        OperationIdentifier.ROUND_NUMBER_TO_ODD,
    ),
    EXPONENTIATION: (
        OperationIdentifier.EXPONENTIATION_BY_SQUARING,
        OperationIdentifier.EXPONENTIATION_BY_MULTIPLICATION,
    ),
    PI: (
        OperationIdentifier.LEIBNIZ_PI_APPROXIMATION,
        OperationIdentifier.ARCHIMEDES_PI_APPROXIMATION,
    ),
}


class ProcessingDetails(BaseModel):
    """
    Algorithm choice and bounds for one operation call.

    Examples:
        >>> ProcessingDetails(algorithm="RUSSIAN_DIVISION", decimal_places=5).select(DIVISION)
        <OperationIdentifier.RUSSIAN_DIVISION: 'RUSSIAN_DIVISION'>
    """

    model_config = ConfigDict(frozen=True)

    algorithm: Optional[OperationIdentifier] = Field(
        default=None, description="Requested algorithm (None selects the default)"
    )
    decimal_places: Optional[int] = Field(
        default=None, description="Maximum number of fraction digits of the result (at least 0)"
    )
    iterations: Optional[int] = Field(
        default=None, description="Maximum number of iterations of approximations (at least 1)"
    )

    @field_validator("decimal_places", "iterations", mode="before")
    @classmethod
    def _check_bound(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return value
        minimum = 0 if info.field_name == "decimal_places" else 1
        if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
            raise InvalidArgumentError(
                f"The {info.field_name} must be an integer of at least {minimum}, got {value!r}!", info.field_name
            )
        return value

    @field_validator("algorithm", mode="before")
    @classmethod
    def _check_algorithm(cls, value: Any) -> Any:
        if value is None or isinstance(value, OperationIdentifier):
            return value
        try:
            return OperationIdentifier(value)
        except ValueError:
            raise AlgorithmSelectionError("any operation", value, list(OperationIdentifier)) from None

    def select(self, operation: str) -> OperationIdentifier:
        """
        Resolve the algorithm for a logical operation.

        Args:
            operation: Key of ALLOWED_ALGORITHMS

        Raises:
            AlgorithmSelectionError: If the requested algorithm is not allowed
        """
        allowed = ALLOWED_ALGORITHMS[operation]
        if self.algorithm is None:
            return allowed[0]
        if self.algorithm not in allowed:
            logger.debug("Rejected algorithm %s for %s", self.algorithm, operation)
            raise AlgorithmSelectionError(operation, self.algorithm, allowed)
        logger.debug("Selected algorithm %s for %s", self.algorithm, operation)
        return self.algorithm


def default_algorithm(operation: str) -> OperationIdentifier:
    return ALLOWED_ALGORITHMS[operation][0]
