"""Tests for settings, logging, errors and package initialization."""

import json
import logging

import pytest
from pydantic import ValidationError

import basen
from basen.core.config import Settings, get_settings
from basen.core.errors import (
    DivisionByZeroError,
    DomainError,
    NumberError,
    RegistryError,
    RepositoryInitializationError,
    UndefinedOperationError,
    UnknownOperationError,
    UnsupportedBaseError,
)
from basen.core.logging import (
    LIBRARY_LOGGER,
    StructuredFormatter,
    TextFormatter,
    get_context_logger,
    setup_logging,
)
from basen.numbers import create_infinity, create_number, default_base
from basen.operations import initialize_repository, is_initialized


class TestSettings:
    """Test the settings model."""

    def test_defaults(self):
        """Test the default values."""
        settings = Settings()
        assert settings.DEFAULT_BASE == 10
        assert settings.DECIMAL_SEPARATOR == "."
        assert settings.INFINITY_REPRESENTATION == "Infinity"
        assert settings.MAXIMUM_FRACTION_LENGTH == 10

    def test_environment_overrides(self, monkeypatch, clear_settings_cache):
        """Test that BASEN_ variables are read."""
        monkeypatch.setenv("BASEN_DEFAULT_BASE", "16")
        monkeypatch.setenv("BASEN_LOG_FORMAT", "json")
        settings = get_settings()
        assert settings.DEFAULT_BASE == 16
        assert settings.LOG_FORMAT == "json"

    def test_settings_are_cached(self, clear_settings_cache):
        """Test that get_settings returns one instance."""
        assert get_settings() is get_settings()

    @pytest.mark.parametrize(
        "field,value",
        [
            ("DEFAULT_BASE", 1),
            ("DEFAULT_BASE", 66),
            ("DECIMAL_SEPARATOR", ";"),
            ("EXPONENT_SYMBOL", "x"),
            ("MAXIMUM_FRACTION_LENGTH", 0),
            ("LOG_FORMAT", "xml"),
        ],
    )
    def test_invalid_values_raise(self, field, value):
        """Test the field validators."""
        with pytest.raises(ValidationError):
            Settings(**{field: value})

    def test_default_base_of_repository(self, fresh_repository):
        """Test that default_base reads the active settings."""
        initialize_repository(Settings(DEFAULT_BASE=2))
        assert default_base() == 2

    def test_decimal_separator(self, fresh_repository):
        """Test a comma as the configured separator."""
        initialize_repository(Settings(DECIMAL_SEPARATOR=","))
        value = create_number(10, "3,25")
        assert value.to_string() == "3,25"
        assert create_number(10, 0.5).to_string() == "0,5"

    def test_infinity_representation(self, fresh_repository):
        """Test a custom infinity symbol for parsing and formatting."""
        initialize_repository(Settings(INFINITY_REPRESENTATION="inf"))
        assert str(create_infinity(10, "-")) == "-inf"
        assert create_number(10, "inf").is_infinity()

    def test_exponent_symbol(self, fresh_repository):
        """Test a lower case exponent symbol."""
        initialize_repository(Settings(EXPONENT_SYMBOL="e"))
        assert create_number(10, "1500").to_scientific_notation() == "1.5e3"


class TestLogging:
    """Test the logging setup."""

    def test_setup_logging(self, library_logger):
        """Test that setup_logging installs one handler with the configured level."""
        logger = setup_logging(Settings(LOG_LEVEL="DEBUG", LOG_FORMAT="json"))
        assert logger is library_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)
        assert not logger.propagate

    def test_setup_logging_twice_keeps_one_handler(self, library_logger):
        """Test that a second setup replaces the handler."""
        setup_logging(Settings())
        setup_logging(Settings(LOG_FORMAT="text"))
        assert len(library_logger.handlers) == 1
        assert isinstance(library_logger.handlers[0].formatter, TextFormatter)

    def test_structured_formatter(self):
        """Test the JSON fields of a record."""
        record = logging.LogRecord("basen.test", logging.INFO, __file__, 10, "hello %s", ("world",), None)
        record.context = {"base": 16}
        data = json.loads(StructuredFormatter().format(record))
        assert data["message"] == "hello world"
        assert data["level"] == "INFO"
        assert data["logger"] == "basen.test"
        assert data["location"].endswith(":10")
        assert data["base"] == 16

    def test_text_formatter_appends_context(self):
        """Test that the text line ends with the context pairs."""
        record = logging.LogRecord("basen.test", logging.DEBUG, __file__, 10, "converged", (), None)
        record.context = {"operation": "NTH_ROOT", "iterations": 7}
        assert TextFormatter().format(record).endswith("basen.test: converged [operation=NTH_ROOT iterations=7]")

    def test_context_logger(self):
        """Test that the adapter merges its context into the record."""
        adapter = get_context_logger("basen.test", base=2)
        msg, kwargs = adapter.process("message", {"context": {"places": 4}})
        assert msg == "message"
        assert kwargs["extra"]["context"] == {"base": 2, "places": 4}

    def test_bind(self):
        """Test that bind extends the context without changing the original."""
        adapter = get_context_logger("basen.test", base=2)
        bound = adapter.bind(operation="SQUARE_ROOT")
        assert bound.extra == {"base": 2, "operation": "SQUARE_ROOT"}
        assert adapter.extra == {"base": 2}

    def test_registry_logs_operation_context(self, caplog, fresh_repository):
        """Test that instantiation records name the operation."""
        caplog.set_level(logging.DEBUG, logger=LIBRARY_LOGGER)
        create_number(10, "1") + create_number(10, "2")
        contexts = [getattr(r, "context", {}) for r in caplog.records]
        assert {"operation": "ADD_NUMBERS"} in contexts

    def test_operations_log_at_debug(self, caplog):
        """Test that a cut off base conversion is logged."""
        caplog.set_level(logging.DEBUG, logger=LIBRARY_LOGGER)
        create_number(10, "0.1").rebase(2, decimal_places=8)
        assert any("cut off after 8 fraction digits" in r.getMessage() for r in caplog.records)


class TestErrors:
    """Test the exception hierarchy."""

    def test_hierarchy(self):
        """Test the error families."""
        assert issubclass(DivisionByZeroError, DomainError)
        assert issubclass(UndefinedOperationError, DomainError)
        assert issubclass(UnknownOperationError, RegistryError)
        assert issubclass(DomainError, NumberError)

    def test_details(self):
        """Test that errors carry their details."""
        with pytest.raises(UnsupportedBaseError) as exc_info:
            create_number(1, 5)
        assert exc_info.value.details == {"base": 1, "minimum": 2, "maximum": 65}
        assert "Unsupported base 1" in str(exc_info.value)

    def test_undefined_operation_message(self):
        """Test the message of an undefined operation."""
        with pytest.raises(UndefinedOperationError) as exc_info:
            create_infinity(10) - create_infinity(10)
        assert exc_info.value.details["operator"] == "-"
        assert str(exc_info.value) == "The operation Infinity - Infinity is undefined!"


class TestInitialize:
    """Test package initialization."""

    def test_initialize(self, fresh_repository, library_logger):
        """Test that initialize configures logging and the repository."""
        repository = basen.initialize(Settings(LOG_LEVEL="INFO"))
        assert is_initialized()
        assert repository.settings.LOG_LEVEL == "INFO"
        assert library_logger.level == logging.INFO

    def test_initialize_twice_raises(self, fresh_repository, library_logger):
        """Test that the package is initialized once."""
        basen.initialize(Settings())
        with pytest.raises(RepositoryInitializationError):
            basen.initialize(Settings())

    def test_public_api(self):
        """Test the exports of the package."""
        assert basen.__version__ == "0.1.0"
        for name in basen.__all__:
            assert hasattr(basen, name)
