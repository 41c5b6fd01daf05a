"""Immutable multipart upload configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from .size import UNLIMITED, size_str


def _bytes_str(value: int) -> str:
    # Byte counts beyond float range are shown as plain integers
    try:
        return size_str(value)
    except OverflowError:
        pass
    # int-to-str conversion is capped at sys.get_int_max_str_digits()
    try:
        return str(value)
    except ValueError:
        return f"<{value.bit_length()}-bit int>"


def _limit_str(value: int) -> str:
    return "unlimited" if value < 0 else _bytes_str(value)


@dataclass(frozen=True)
class MultipartConfig:
    """
    Multipart/form-data upload configuration.

    Snapshot produced by MultipartConfigBuilder.create_config() and handed
    to the web server's upload handling.

    Attributes:
        location: Directory where overflowed upload parts are stored
            (None = platform default)
        max_file_size: Maximum size of a single uploaded file in bytes
            (default: -1 = unlimited)
        max_request_size: Maximum size of a multipart/form-data request in
            bytes (default: -1 = unlimited)
        file_size_threshold: Size in bytes after which a part is written to
            disk (default: 0 = write to disk immediately)
    """

    location: str | None = None
    max_file_size: int = UNLIMITED
    max_request_size: int = UNLIMITED
    file_size_threshold: int = 0

    @property
    def is_file_size_unlimited(self) -> bool:
        """True if no per-file maximum is enforced."""
        return self.max_file_size < 0

    @property
    def is_request_size_unlimited(self) -> bool:
        """True if no per-request maximum is enforced."""
        return self.max_request_size < 0

    def to_dict(self) -> dict[str, Any]:
        """Return the four settings as a plain dictionary."""
        return asdict(self)

    def _threshold_str(self) -> str:
        if self.file_size_threshold < 0:
            return str(self.file_size_threshold)
        return _bytes_str(self.file_size_threshold)

    def __str__(self) -> str:
        location = self.location if self.location is not None else "<default>"
        return (
            f"MultipartConfig(location={location}, "
            f"max_file_size={_limit_str(self.max_file_size)}, "
            f"max_request_size={_limit_str(self.max_request_size)}, "
            f"file_size_threshold={self._threshold_str()})"
        )
