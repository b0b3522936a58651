"""
Operation repository.

Maps operation identifiers to operation classes and lazily instantiates one
shared, stateless instance per identifier. The process-wide repository is
created once (`initialize_repository`) and populated from the default
operation table; afterwards it is only read.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Union

from ..core.config import Settings, get_settings
from ..core.errors import (
    DuplicateRegistrationError,
    MissingArgumentError,
    RepositoryInitializationError,
    UnknownOperationError,
)
from ..core.logging import get_context_logger
from .base import Operation
from .identifiers import OperationIdentifier

logger = get_context_logger(__name__)

OperationFactory = Union[type[Operation], Callable[[], Operation]]


class OperationRepository:
    """
    Registry for operation implementations.

    Provides identifier based dispatch to algorithm instances.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self._factories: Dict[OperationIdentifier, OperationFactory] = {}
        self._instances: Dict[OperationIdentifier, Operation] = {}

    def register(self, identifier: OperationIdentifier, implementation: OperationFactory) -> None:
        """
        Register an implementation for an identifier.

        Args:
            identifier: The operation identifier
            implementation: Operation subclass or zero-argument factory

        Raises:
            DuplicateRegistrationError: If the identifier is already bound
        """
        if identifier is None:
            raise MissingArgumentError("operation identifier")
        if implementation is None:
            raise MissingArgumentError("operation implementation")
        if identifier in self._factories:
            logger.debug("Rejected second registration of %s", identifier)
            raise DuplicateRegistrationError(identifier)
        self._factories[identifier] = implementation
        logger.debug("Registered %s", identifier)

    def get(self, identifier: OperationIdentifier) -> Operation:
        """
        Get the (cached) operation instance for an identifier.

        Raises:
            UnknownOperationError: If no implementation is registered
        """
        instance = self._instances.get(identifier)
        if instance is not None:
            return instance

        factory = self._factories.get(identifier)
        if factory is None:
            logger.debug("Lookup of unregistered operation %s", identifier)
            raise UnknownOperationError(identifier)

        instance = factory()
        instance.settings = self.settings
        self._instances[identifier] = instance
        logger.debug("Instantiated %s", instance.name, context={"operation": getattr(identifier, "value", identifier)})
        return instance

    def remove(self, identifier: OperationIdentifier) -> None:
        """
        Remove a registration together with its cached instance.

        Raises:
            UnknownOperationError: If no implementation is registered
        """
        if identifier not in self._factories:
            raise UnknownOperationError(identifier)
        del self._factories[identifier]
        self._instances.pop(identifier, None)
        logger.debug("Removed %s", identifier)

    def is_registered(self, identifier: OperationIdentifier) -> bool:
        return identifier in self._factories

    def identifiers(self) -> list[OperationIdentifier]:
        """Get all registered identifiers."""
        return list(self._factories.keys())

    def __len__(self) -> int:
        return len(self._factories)


# Process-wide repository
_repository: Optional[OperationRepository] = None


def populate(repository: OperationRepository) -> OperationRepository:
    """Register the default operation table."""
    from .table import DEFAULT_OPERATIONS

    for identifier, implementation in DEFAULT_OPERATIONS.items():
        repository.register(identifier, implementation)
    return repository


def initialize_repository(settings: Optional[Settings] = None) -> OperationRepository:
    """
    Create and populate the process-wide repository.

    Raises:
        RepositoryInitializationError: If the repository already exists
    """
    global _repository

    if _repository is not None:
        raise RepositoryInitializationError()
    repository = populate(OperationRepository(settings))
    _repository = repository
    logger.debug("Operation repository initialized with %d operations", len(repository))
    return repository


def get_repository() -> OperationRepository:
    """Get the process-wide repository, initializing it with default settings on first use."""
    if _repository is None:
        return initialize_repository()
    return _repository


def is_initialized() -> bool:
    return _repository is not None


def reset_repository() -> None:
    """Discard the process-wide repository (used by tests)."""
    global _repository
    _repository = None


def get_operation(identifier: OperationIdentifier) -> Operation:
    """Get an operation from the process-wide repository."""
    return get_repository().get(identifier)


def active_settings() -> Settings:
    """The settings the process-wide repository was initialized with."""
    return get_repository().settings
