"""Fluent builder for multipart upload configuration."""

from __future__ import annotations

import logging

from .config import MultipartConfig
from .exceptions import InvalidArgumentError
from .size import UNLIMITED, parse_size

logger = logging.getLogger("multipartcfg.builder")

_INT32_RANGE = 2**32
_INT32_MIN = -(2**31)


def _to_int32(value: int) -> int:
    """Narrow to a signed 32-bit integer, wrapping like a C-style int cast."""
    return (value - _INT32_MIN) % _INT32_RANGE + _INT32_MIN


def _size_value(value: int | str | None, name: str) -> int:
    """
    Resolve a size setter argument to a byte count.

    Integers are taken as-is. Strings (and None) go through parse_size().

    Raises:
        InvalidArgumentError: If value is empty, None, or of an unsupported type
        SizeFormatError: If a size string cannot be parsed
    """
    # bool is an int subclass but never a meaningful byte count
    if isinstance(value, bool):
        raise InvalidArgumentError(
            f"{name} must be an int or a size string, got bool", value=value
        )
    if isinstance(value, int):
        return value
    if value is None or isinstance(value, str):
        return parse_size(value)
    raise InvalidArgumentError(
        f"{name} must be an int or a size string, got {type(value).__name__}",
        value=value,
    )


class MultipartConfigBuilder:
    """
    Fluent builder for MultipartConfig.

    Size setters accept either a byte count or a size string with an
    optional "KB" or "MB" suffix (case-insensitive). A failed setter
    leaves the previous value in place.

    Example:
        config = (MultipartConfigBuilder()
            .with_location("/var/tmp/uploads")
            .with_max_file_size("10MB")
            .with_max_request_size("100MB")
            .with_file_size_threshold("512KB")
            .create_config())
    """

    def __init__(self) -> None:
        self._location: str | None = None
        self._max_file_size = UNLIMITED
        self._max_request_size = UNLIMITED
        self._file_size_threshold = 0

    @classmethod
    def from_config(cls, config: MultipartConfig) -> MultipartConfigBuilder:
        """Create a builder seeded from an existing configuration."""
        return cls().with_config(config)

    # Current state

    @property
    def location(self) -> str | None:
        return self._location

    @property
    def max_file_size(self) -> int:
        return self._max_file_size

    @property
    def max_request_size(self) -> int:
        return self._max_request_size

    @property
    def file_size_threshold(self) -> int:
        return self._file_size_threshold

    # Configuration methods

    def with_location(self, location: str | None) -> MultipartConfigBuilder:
        """Set the directory where overflowed upload parts are stored."""
        self._location = location
        return self

    def with_max_file_size(self, max_file_size: int | str) -> MultipartConfigBuilder:
        """
        Set the maximum size allowed for uploaded files.

        Args:
            max_file_size: Byte count (-1 = unlimited) or size string
                such as "10MB"
        """
        self._max_file_size = _size_value(max_file_size, "max_file_size")
        return self

    def with_max_request_size(
        self, max_request_size: int | str
    ) -> MultipartConfigBuilder:
        """
        Set the maximum size allowed for multipart/form-data requests.

        Args:
            max_request_size: Byte count (-1 = unlimited) or size string
                such as "100KB"
        """
        self._max_request_size = _size_value(max_request_size, "max_request_size")
        return self

    def with_file_size_threshold(
        self, file_size_threshold: int | str
    ) -> MultipartConfigBuilder:
        """
        Set the size threshold after which files are written to disk.

        Size strings are narrowed to a 32-bit int after parsing.

        Args:
            file_size_threshold: Byte count or size string such as "512KB"
        """
        threshold = _size_value(file_size_threshold, "file_size_threshold")
        if isinstance(file_size_threshold, str):
            threshold = _to_int32(threshold)
        self._file_size_threshold = threshold
        return self

    def with_config(self, config: MultipartConfig) -> MultipartConfigBuilder:
        """Set all four settings at once from an existing configuration."""
        self._location = config.location
        self._max_file_size = config.max_file_size
        self._max_request_size = config.max_request_size
        self._file_size_threshold = config.file_size_threshold
        return self

    def create_config(self) -> MultipartConfig:
        """
        Create an immutable snapshot of the current settings.

        The builder is left unchanged and can be reused.

        Returns:
            MultipartConfig instance
        """
        config = MultipartConfig(
            location=self._location,
            max_file_size=self._max_file_size,
            max_request_size=self._max_request_size,
            file_size_threshold=self._file_size_threshold,
        )
        logger.debug("created multipart config: %s", config)
        return config
