"""Tests for the operation repository and algorithm selection."""

import pytest

from basen.core.config import Settings
from basen.core.errors import (
    AlgorithmSelectionError,
    DuplicateRegistrationError,
    InvalidArgumentError,
    MissingArgumentError,
    RepositoryInitializationError,
    UnknownOperationError,
)
from basen.numbers import create_number
from basen.operations import (
    ALLOWED_ALGORITHMS,
    DIVISION,
    MULTIPLICATION,
    ROUNDING,
    Operation,
    OperationIdentifier,
    OperationRepository,
    ProcessingDetails,
    default_algorithm,
    get_operation,
    get_repository,
    initialize_repository,
    is_initialized,
)
from basen.operations.addition import AddNumbers
from basen.operations.table import DEFAULT_OPERATIONS


class Echo(Operation):
    def calculate(self, value):
        return value


class TestOperationRepository:
    """Test registration and lookup."""

    def test_register_and_get(self):
        """Test that a registered class is instantiated on lookup."""
        registry = OperationRepository(Settings())
        registry.register(OperationIdentifier.ADD_NUMBERS, Echo)
        operation = registry.get(OperationIdentifier.ADD_NUMBERS)
        assert isinstance(operation, Echo)
        assert operation.calculate(5) == 5

    def test_instances_are_cached(self):
        """Test that every lookup returns the same instance."""
        registry = OperationRepository(Settings())
        registry.register(OperationIdentifier.ADD_NUMBERS, Echo)
        assert registry.get(OperationIdentifier.ADD_NUMBERS) is registry.get(OperationIdentifier.ADD_NUMBERS)

    def test_instances_receive_settings(self):
        """Test that operations see the settings of their repository."""
        settings = Settings(MAXIMUM_FRACTION_LENGTH=4)
        registry = OperationRepository(settings)
        registry.register(OperationIdentifier.ADD_NUMBERS, Echo)
        operation = registry.get(OperationIdentifier.ADD_NUMBERS)
        assert operation.settings is settings
        assert operation.decimal_places(None) == 4
        assert operation.decimal_places(2) == 2

    def test_factory_callable(self):
        """Test registration of a zero-argument factory."""
        registry = OperationRepository(Settings())
        registry.register(OperationIdentifier.ADD_NUMBERS, lambda: Echo())
        assert isinstance(registry.get(OperationIdentifier.ADD_NUMBERS), Echo)

    def test_duplicate_registration_raises(self):
        """Test that an identifier is bound at most once."""
        registry = OperationRepository(Settings())
        registry.register(OperationIdentifier.ADD_NUMBERS, Echo)
        with pytest.raises(DuplicateRegistrationError):
            registry.register(OperationIdentifier.ADD_NUMBERS, AddNumbers)

    def test_missing_arguments_raise(self):
        """Test that identifier and implementation are required."""
        registry = OperationRepository(Settings())
        with pytest.raises(MissingArgumentError):
            registry.register(None, Echo)
        with pytest.raises(MissingArgumentError):
            registry.register(OperationIdentifier.ADD_NUMBERS, None)

    def test_unknown_operation_raises(self):
        """Test lookup of an unregistered identifier."""
        registry = OperationRepository(Settings())
        with pytest.raises(UnknownOperationError):
            registry.get(OperationIdentifier.ADD_NUMBERS)

    def test_remove(self):
        """Test that removal drops the registration and the cached instance."""
        registry = OperationRepository(Settings())
        registry.register(OperationIdentifier.ADD_NUMBERS, Echo)
        registry.get(OperationIdentifier.ADD_NUMBERS)
        registry.remove(OperationIdentifier.ADD_NUMBERS)
        assert not registry.is_registered(OperationIdentifier.ADD_NUMBERS)
        with pytest.raises(UnknownOperationError):
            registry.remove(OperationIdentifier.ADD_NUMBERS)

    def test_default_table_covers_every_identifier(self):
        """Test that every identifier has a default implementation."""
        assert set(DEFAULT_OPERATIONS) == set(OperationIdentifier)
        for implementation in DEFAULT_OPERATIONS.values():
            assert issubclass(implementation, Operation)


class TestProcessWideRepository:
    """Test initialization of the shared repository."""

    def test_lazy_initialization(self, fresh_repository):
        """Test that the first lookup initializes the repository."""
        assert not is_initialized()
        assert isinstance(get_operation(OperationIdentifier.ADD_NUMBERS), AddNumbers)
        assert is_initialized()
        assert len(get_repository()) == len(OperationIdentifier)

    def test_second_initialization_raises(self, fresh_repository):
        """Test that the repository is initialized once."""
        initialize_repository(Settings())
        with pytest.raises(RepositoryInitializationError):
            initialize_repository(Settings())

    def test_settings_bound_the_operations(self, fresh_repository):
        """Test that the configured fraction length bounds the division."""
        initialize_repository(Settings(MAXIMUM_FRACTION_LENGTH=3))
        quotient = create_number(10, 1).divide(create_number(10, 3), algorithm="LONG_DIVISION")
        assert quotient.to_string() == "0.333"

    def test_settings_bound_the_iterations(self, fresh_repository):
        """Test that one Heron iteration from 2 gives 1.5 for the root of 2."""
        initialize_repository(Settings(HERON_METHOD_ITERATIONS=1))
        assert create_number(10, 2).square_root(decimal_places=1).to_string() == "1.5"


class TestProcessingDetails:
    """Test algorithm selection."""

    def test_default_algorithms(self):
        """Test the first allowed algorithm of each operation."""
        assert default_algorithm(MULTIPLICATION) is OperationIdentifier.LONG_MULTIPLICATION
        assert default_algorithm(DIVISION) is OperationIdentifier.LONG_DIVISION
        assert default_algorithm(ROUNDING) is OperationIdentifier.ROUND_NUMBER_TO_EVEN
        assert ProcessingDetails().select(DIVISION) is OperationIdentifier.LONG_DIVISION

    def test_select_by_name(self):
        """Test that algorithm names are accepted as strings."""
        details = ProcessingDetails(algorithm="RUSSIAN_DIVISION", decimal_places=5)
        assert details.select(DIVISION) is OperationIdentifier.RUSSIAN_DIVISION
        assert details.decimal_places == 5

    def test_algorithm_of_other_operation_raises(self):
        """Test that the allow-list of the operation is enforced."""
        details = ProcessingDetails(algorithm=OperationIdentifier.LONG_MULTIPLICATION)
        with pytest.raises(AlgorithmSelectionError) as exc_info:
            details.select(DIVISION)
        assert exc_info.value.details["operation"] == DIVISION

    def test_unknown_algorithm_raises(self):
        """Test that unknown names are rejected on construction."""
        with pytest.raises(AlgorithmSelectionError):
            ProcessingDetails(algorithm="QUICK_DIVISION")

    def test_allow_lists_are_disjoint(self):
        """Test that no algorithm serves two operations."""
        algorithms = [a for allowed in ALLOWED_ALGORITHMS.values() for a in allowed]
        assert len(algorithms) == len(set(algorithms))

    @pytest.mark.parametrize(
        "field,value",
        [("decimal_places", -1), ("decimal_places", 1.5), ("decimal_places", True), ("iterations", 0)],
    )
    def test_invalid_bounds_raise(self, field, value):
        """Test that bounds outside their range are library errors."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            ProcessingDetails(**{field: value})
        assert exc_info.value.details["argument"] == field

    def test_invalid_bounds_of_number_methods(self):
        """Test that the number methods report invalid bounds as library errors."""
        value = create_number(10, "2.5")
        with pytest.raises(InvalidArgumentError):
            value.round(-1)
        with pytest.raises(InvalidArgumentError):
            value.divide(create_number(10, 3), decimal_places=-1)
        with pytest.raises(InvalidArgumentError):
            value.square_root(iterations=0)
