"""Custom exceptions for xbquery.

All errors raised by the builder, condition nodes and backends derive from
`XbQueryError` so callers can catch them in one place.
"""

from typing import Any, Dict


# Base exception
class XbQueryError(Exception):
    """Base exception for all xbquery errors.

    Attributes:
        message: Error message
        details: Additional error context as key-value pairs
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        """Initialize exception with message and additional details.

        Args:
            message: Human-readable error message
            **kwargs: Additional context (e.g., field, value, backend)
        """
        self.message = message
        self.details: Dict[str, Any] = kwargs
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message with details."""
        if not self.details:
            return self.message

        details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        if self.message:
            return f"{self.message} ({details_str})"
        return details_str

    def __repr__(self) -> str:
        """Return detailed representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# Validation exceptions
class ValidationError(XbQueryError):
    """Raised when builder input is rejected.

    Example:
        >>> raise ValidationError("Invalid input", field="age")
    """


class UnsupportedValueError(ValidationError, TypeError):
    """Raised when a value cannot be represented as a query `Value`.

    Example:
        >>> raise UnsupportedValueError("Unsupported value type", value_type="list")
    """


class InvalidFieldError(ValidationError):
    """Raised when a condition node is structurally invalid.

    Example:
        >>> raise InvalidFieldError("Leaf condition requires a key", op="=")
    """


class InvalidDirectionError(ValidationError, ValueError):
    """Raised when a sort direction is neither ASC nor DESC.

    Example:
        >>> raise InvalidDirectionError("Invalid sort direction", direction="UP")
    """


# Configuration exceptions
class ConfigurationError(XbQueryError):
    """Raised when configuration is invalid or missing.

    Example:
        >>> raise ConfigurationError("Invalid configuration", setting="hnsw_ef", value=-1)
    """


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid.

    Example:
        >>> raise InvalidConfigError("Invalid config value", config_key="hnsw_ef", value=0, expected=">0")
    """


# Backend exceptions
class BackendError(XbQueryError):
    """Raised when a backend cannot produce the requested artifact.

    Example:
        >>> raise BackendError("Backend produces documents, not SQL", backend="qdrant")
    """
