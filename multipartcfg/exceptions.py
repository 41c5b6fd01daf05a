"""
Exception hierarchy for multipart configuration.

All errors derive from MultipartConfigError so callers can catch everything
raised by this package with a single except clause. Argument and format
errors also derive from ValueError.
"""

from typing import Any


class MultipartConfigError(Exception):
    """
    Base exception for all multipart configuration errors.

    Example:
        try:
            builder.with_max_file_size(user_value)
        except MultipartConfigError as e:
            logger.error(f"Bad upload limit: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class InvalidArgumentError(MultipartConfigError, ValueError):
    """
    Raised when an argument is missing or has the wrong type.

    Examples:
        - Empty or None size string
        - A bool or float passed where a byte count is expected
    """

    pass


class SizeFormatError(MultipartConfigError, ValueError):
    """
    Raised when a size string cannot be parsed into a byte count.

    Examples:
        - Non-numeric prefix ("abcMB")
        - Fractional or negative values ("1.5MB", "-5KB")
        - Unsupported unit suffix ("1GB")
    """

    pass


class ConfigError(MultipartConfigError):
    """
    Raised when a configuration mapping or YAML document is unusable.

    Examples:
        - Unknown key in the multipart section
        - Malformed YAML text
        - Section is not a mapping
    """

    pass


__all__ = [
    "MultipartConfigError",
    "InvalidArgumentError",
    "SizeFormatError",
    "ConfigError",
]
