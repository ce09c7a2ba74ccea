"""Configuration system for the Money Ladder engine.

This module provides Pydantic Settings-based configuration with environment
variable support and sensible defaults for the calculation engine.

Usage:
    from money_ladder.config import LadderConfig

    # Load from environment variables and .env file
    config = LadderConfig()

    # Access payoff settings
    print(config.payoff.max_months)

    # Access projection settings
    print(config.projection.nominal_return)
"""

from functools import lru_cache
from typing import Any

from pydantic import Field, ValidationError as PydanticValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class PayoffConfig(BaseSettings):
    """Debt payoff simulation settings.

    Environment Variables:
        MONEY_LADDER_PAYOFF_MAX_MONTHS: Simulation horizon in months
        MONEY_LADDER_PAYOFF_HIGH_INTEREST_THRESHOLD: APR above which a
            non-mortgage debt counts as high-interest
    """

    model_config = SettingsConfigDict(
        env_prefix="MONEY_LADDER_PAYOFF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_months: int = Field(
        default=360,
        gt=0,
        le=1200,
        description="Months simulated before a debt is reported as never paid off",
    )
    high_interest_threshold: float = Field(
        default=6.0,
        ge=0,
        le=100,
        description="APR percentage above which a debt is high-interest",
    )


class ProjectionConfig(BaseSettings):
    """Net-worth projection settings.

    Environment Variables:
        MONEY_LADDER_PROJECTION_NOMINAL_RETURN: Annual nominal return (0.08 = 8%)
        MONEY_LADDER_PROJECTION_INFLATION: Annual inflation used for discounting
        MONEY_LADDER_PROJECTION_RETIREMENT_AGE: Age the projection runs to
    """

    model_config = SettingsConfigDict(
        env_prefix="MONEY_LADDER_PROJECTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    nominal_return: float = Field(
        default=0.08,
        ge=-1.0,
        le=1.0,
        description="Annual nominal investment return",
    )
    inflation: float = Field(
        default=0.03,
        gt=-1.0,
        le=1.0,
        description="Annual inflation used to discount projections",
    )
    retirement_age: int = Field(
        default=65,
        ge=0,
        le=120,
        description="Target age for net-worth projections",
    )


class LadderConfig(BaseSettings):
    """Root configuration for the Money Ladder engine.

    Environment Variables:
        MONEY_LADDER_ENV: Environment name (development, staging, production, test)
        MONEY_LADDER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        MONEY_LADDER_LOG_JSON: Render logs as JSON instead of console output

    Example:
        config = LadderConfig(
            payoff=PayoffConfig(max_months=480),
            projection=ProjectionConfig(retirement_age=67),
        )
    """

    model_config = SettingsConfigDict(
        env_prefix="MONEY_LADDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env: str = Field(
        default="development",
        description="Environment name (development, staging, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Render structured logs as JSON",
    )

    payoff: PayoffConfig = Field(default_factory=PayoffConfig)
    projection: ProjectionConfig = Field(default_factory=ProjectionConfig)

    @field_validator("env")
    @classmethod
    def validate_env(cls, v: str) -> str:
        """Validate environment name."""
        valid_envs = {"development", "staging", "production", "test"}
        v_lower = v.lower().strip()
        if v_lower not in valid_envs:
            raise ValueError(f"Invalid environment: {v}. Must be one of: {valid_envs}")
        return v_lower

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper().strip()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {valid_levels}")
        return v_upper

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.env == "production"


def load_config(**overrides: Any) -> LadderConfig:
    """Build a LadderConfig, reporting invalid settings as ConfigurationError."""
    try:
        return LadderConfig(**overrides)
    except PydanticValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(
            f"Invalid Money Ladder configuration: {first.get('msg')}",
            config_key=key or None,
            actual=first.get("input"),
            details={"error_count": e.error_count()},
        ) from e


@lru_cache
def get_config() -> LadderConfig:
    """Return the process-wide configuration, loaded once."""
    return load_config()
