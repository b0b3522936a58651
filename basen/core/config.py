"""
Library configuration.

Centralized configuration management with environment variables.
Values are read once and treated as constants afterwards.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_MIN_LIMIT = 2
BASE_MAX_LIMIT = 65


class Settings(BaseSettings):
    """Library settings"""

    model_config = SettingsConfigDict(
        env_prefix="BASEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    # Numbers
    DEFAULT_BASE: int = 10
    INFINITY_REPRESENTATION: str = "Infinity"

    # Notations
    DECIMAL_SEPARATOR: str = "."
    EXPONENT_SYMBOL: str = "E"

    # Bounds for non-terminating operations
    MAXIMUM_FRACTION_LENGTH: int = 10
    HERON_METHOD_ITERATIONS: int = 8
    NTH_ROOT_ITERATIONS: int = 7
    EULERS_NUMBER_ITERATIONS: int = 12
    PI_APPROXIMATION_ITERATIONS: int = 100
    SINE_APPROXIMATION_ITERATIONS: int = 25

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text

    @field_validator("DEFAULT_BASE")
    @classmethod
    def _check_base(cls, value: int) -> int:
        if not BASE_MIN_LIMIT <= value <= BASE_MAX_LIMIT:
            raise ValueError(f"DEFAULT_BASE must lie in [{BASE_MIN_LIMIT}, {BASE_MAX_LIMIT}]")
        return value

    @field_validator("DECIMAL_SEPARATOR")
    @classmethod
    def _check_separator(cls, value: str) -> str:
        if value not in (".", ","):
            raise ValueError("DECIMAL_SEPARATOR must be '.' or ','")
        return value

    @field_validator("EXPONENT_SYMBOL")
    @classmethod
    def _check_exponent_symbol(cls, value: str) -> str:
        if value not in ("E", "e"):
            raise ValueError("EXPONENT_SYMBOL must be 'E' or 'e'")
        return value

    @field_validator(
        "MAXIMUM_FRACTION_LENGTH",
        "HERON_METHOD_ITERATIONS",
        "NTH_ROOT_ITERATIONS",
        "EULERS_NUMBER_ITERATIONS",
        "PI_APPROXIMATION_ITERATIONS",
        "SINE_APPROXIMATION_ITERATIONS",
    )
    @classmethod
    def _check_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("bounds must be positive integers")
        return value

    @field_validator("LOG_FORMAT")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        if value not in ("json", "text"):
            raise ValueError("LOG_FORMAT must be 'json' or 'text'")
        return value


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
