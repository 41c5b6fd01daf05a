"""
Size parsing and formatting for upload limits.

Converts human-friendly size strings into byte counts and back.

Example Usage:
    # Parse size strings into bytes
    >>> parse_size('10KB')
    10240

    >>> parse_size('100mb')
    104857600

    >>> parse_size('512')
    512

    # Format byte counts for display
    >>> size_str(1536)
    '1.5KB'
"""

import math
import re

from .exceptions import InvalidArgumentError, SizeFormatError

# Size conversion constants (binary, 1024-based)
BYTES_PER_KB = 1024
BYTES_PER_MB = 1024**2
BYTES_PER_GB = 1024**3

# Sentinel meaning "no maximum enforced"
UNLIMITED = -1

# Largest size parse_size accepts (signed 64-bit maximum)
MAX_PARSED_SIZE = 2**63 - 1

# Suffixes accepted by parse_size, checked against the uppercased input
_SUFFIXES = (
    ("KB", BYTES_PER_KB),
    ("MB", BYTES_PER_MB),
)

# Display units for size_str, largest first
_DISPLAY_UNITS = [
    (BYTES_PER_GB, "GB"),
    (BYTES_PER_MB, "MB"),
    (BYTES_PER_KB, "KB"),
    (1, "B"),
]

_DIGITS = re.compile(r"[0-9]+")


def parse_size(size: str | None) -> int:
    """
    Parse a size string into a byte count.

    The string is uppercased before matching, so suffixes are
    case-insensitive. Without a suffix the whole string is a byte count.

    Args:
        size: Size string such as "10MB", "100kb" or "4096"

    Returns:
        Size in bytes

    Raises:
        InvalidArgumentError: If size is None or empty
        SizeFormatError: If the numeric part is not a plain non-negative integer,
            or the result exceeds MAX_PARSED_SIZE

    Examples:
        >>> parse_size('10KB')
        10240
        >>> parse_size('5kb')
        5120
        >>> parse_size('1MB')
        1048576
    """
    if not size:
        raise InvalidArgumentError("Size must not be empty")
    if not isinstance(size, str):
        raise InvalidArgumentError(
            f"Size must be a string, got {type(size).__name__}"
        )

    upper = size.upper()
    number, multiplier = upper, 1
    for suffix, factor in _SUFFIXES:
        if upper.endswith(suffix):
            number, multiplier = upper[: -len(suffix)], factor
            break

    # int() alone would also accept signs, underscores and padding
    if not _DIGITS.fullmatch(number):
        raise SizeFormatError(f"Could not parse size string: '{size}'", size=size)

    # Leading zeros do not count towards the 64-bit digit limit
    significant = number.lstrip("0") or "0"
    if len(significant) > len(str(MAX_PARSED_SIZE)):
        raise SizeFormatError(f"Size out of range: '{size}'", size=size)

    value = int(significant)
    if value * multiplier > MAX_PARSED_SIZE:
        raise SizeFormatError(f"Size out of range: '{size}'", size=size)

    return value * multiplier


def _format_value(value: float, precise: bool) -> str:
    """Format the numeric part of a display size."""
    if precise:
        return f"{value:.3f}"

    if value == int(value):
        return str(int(value))

    return f"{value:.1f}".rstrip("0").rstrip(".")


def size_str(size: int | float | None, precise: bool = False) -> str:
    """
    Format a size in bytes as a compact human-readable string.

    Args:
        size: Size in bytes (can be None)
        precise: Whether to show fixed 3 decimal places (default: False)

    Returns:
        Formatted size string, or empty string if size is None

    Raises:
        InvalidArgumentError: If size is not a finite non-negative number

    Examples:
        >>> size_str(0)
        '0B'
        >>> size_str(10240)
        '10KB'
        >>> size_str(1536, precise=True)
        '1.500KB'
    """
    if size is None:
        return ""

    if isinstance(size, bool) or not isinstance(size, (int, float)):
        raise InvalidArgumentError(
            f"Size must be a number, got {type(size).__name__}"
        )
    if isinstance(size, float) and (math.isnan(size) or math.isinf(size)):
        raise InvalidArgumentError(f"Size must be finite, got {size}")
    if size < 0:
        raise InvalidArgumentError(f"Size must be non-negative, got {size}")

    for threshold, suffix in _DISPLAY_UNITS:
        if size >= threshold:
            return f"{_format_value(size / threshold, precise)}{suffix}"

    return f"{_format_value(size, precise)}B"


__all__ = [
    "BYTES_PER_KB",
    "BYTES_PER_MB",
    "MAX_PARSED_SIZE",
    "UNLIMITED",
    "parse_size",
    "size_str",
]
