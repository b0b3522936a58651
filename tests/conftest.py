"""
Shared pytest fixtures for the basen tests.

This module provides:
- A factory for numbers and fractions in any base
- A fresh operation repository per test that needs one
- Restoration of the library logger after logging tests
"""

import logging

import pytest

from basen.core.config import get_settings
from basen.core.logging import LIBRARY_LOGGER
from basen.fractions import create_fraction
from basen.numbers import create_number
from basen.operations import repository


@pytest.fixture
def number():
    """Factory for numbers; base 10 unless given."""
    def _factory(value, base: int = 10):
        return create_number(base, value)
    return _factory


@pytest.fixture
def fraction():
    """Factory for fractions; base 10 unless given."""
    def _factory(numerator, denominator=1, base: int = 10):
        return create_fraction(base, numerator, denominator)
    return _factory


@pytest.fixture
def fresh_repository():
    """Discard the process-wide repository before and after the test."""
    repository.reset_repository()
    yield
    repository.reset_repository()


@pytest.fixture
def library_logger():
    """Give the test the library logger and restore its configuration afterwards."""
    logger = logging.getLogger(LIBRARY_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def clear_settings_cache():
    """Re-read the settings from the environment in this test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
