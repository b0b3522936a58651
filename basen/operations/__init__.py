"""
Operation registry and algorithms.

- identifiers: the registry keys
- repository: the process-wide registry with lazy, cached instances
- processing: algorithm selection and bounds of one call
- the algorithm modules (addition, multiplication, division, ...) are
  bound to their identifiers by `table` when the registry is populated
"""

from .base import Operation, check_same_base
from .identifiers import OperationIdentifier
from .processing import (
    ALLOWED_ALGORITHMS,
    DIVISION,
    EXPONENTIATION,
    MULTIPLICATION,
    PI,
    ROUNDING,
    ProcessingDetails,
    default_algorithm,
)
from .repository import (
    OperationRepository,
    active_settings,
    get_operation,
    get_repository,
    initialize_repository,
    is_initialized,
    reset_repository,
)

__all__ = [
    "Operation",
    "check_same_base",
    "OperationIdentifier",
    "ALLOWED_ALGORITHMS",
    "MULTIPLICATION",
    "DIVISION",
    "ROUNDING",
    "EXPONENTIATION",
    "PI",
    "ProcessingDetails",
    "default_algorithm",
    "OperationRepository",
    "active_settings",
    "get_operation",
    "get_repository",
    "initialize_repository",
    "is_initialized",
    "reset_repository",
]
