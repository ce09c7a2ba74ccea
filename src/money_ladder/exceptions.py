"""Custom exceptions for the Money Ladder engine.

The calculation functions never raise on out-of-range financial input: they
clamp values and report conditions such as stuck debts as data. Exceptions
are reserved for programming and configuration mistakes. All of them inherit
from LadderError, making it easy to catch every engine-specific error.

Example:
    try:
        outcome = simulate_strategy(debts, extra, "avalanche")
    except ValidationError as e:
        logger.warning("bad_strategy", field=e.field, value=e.value)
    except LadderError as e:
        logger.error(f"Calculation failed: {e}")
"""

from typing import Any, Optional


class LadderError(Exception):
    """Base exception for all Money Ladder errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
        recoverable: Whether the error is potentially recoverable.

    Example:
        >>> raise LadderError("Something went wrong", details={"step": 3})
        LadderError: Something went wrong
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        """Initialize LadderError.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context about the error.
            recoverable: Whether the caller can correct the input and retry.
                Defaults to False.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message

    def __repr__(self) -> str:
        """Return detailed representation of the error."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r}, "
            f"recoverable={self.recoverable!r})"
        )


class ValidationError(LadderError):
    """Error raised when an argument is outside what the engine understands.

    Raised for unknown payoff strategy names, ladder steps outside 1..9 and
    empty benchmark tables. Financial amounts are never validated this way;
    they are clamped instead.

    Attributes:
        field: The argument that failed validation.
        value: The invalid value.
        constraint: The rule that was violated.

    Example:
        >>> raise ValidationError(
        ...     "Unknown payoff strategy",
        ...     field="strategy",
        ...     value="tsunami",
        ...     constraint="Must be one of: avalanche, snowball",
        ... )
        ValidationError: Unknown payoff strategy
    """

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = True,
    ) -> None:
        """Initialize ValidationError.

        Args:
            message: Human-readable error description.
            field: The name of the argument that failed validation.
            value: The invalid value.
            constraint: Description of the validation rule violated.
            details: Optional dictionary with additional context.
            recoverable: Whether the error can be fixed by correcting the
                input. Defaults to True.
        """
        super().__init__(message, details=details, recoverable=recoverable)
        self.field = field
        self.value = value
        self.constraint = constraint

        if field:
            self.details["field"] = field
        if value is not None:
            self.details["value"] = value
        if constraint:
            self.details["constraint"] = constraint


class ConfigurationError(LadderError):
    """Error raised when engine configuration is invalid.

    Attributes:
        config_key: The configuration key that is problematic.
        expected: Description of the expected value or format.
        actual: The actual value found (if any).

    Example:
        >>> raise ConfigurationError(
        ...     "Invalid log level",
        ...     config_key="MONEY_LADDER_LOG_LEVEL",
        ...     expected="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        ... )
        ConfigurationError: Invalid log level
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        """Initialize ConfigurationError.

        Args:
            message: Human-readable error description.
            config_key: The name of the configuration key that is problematic.
            expected: Description of what value was expected.
            actual: The actual value found.
            details: Optional dictionary with additional context.
            recoverable: Whether the error can be fixed at runtime.
                Defaults to False since settings are read once at startup.
        """
        super().__init__(message, details=details, recoverable=recoverable)
        self.config_key = config_key
        self.expected = expected
        self.actual = actual

        if config_key:
            self.details["config_key"] = config_key
        if expected:
            self.details["expected"] = expected
        if actual is not None:
            self.details["actual"] = actual


__all__ = [
    "LadderError",
    "ValidationError",
    "ConfigurationError",
]
