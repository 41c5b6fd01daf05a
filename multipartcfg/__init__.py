"""
Multipart/form-data upload configuration.

Accumulates upload settings in a fluent builder and produces an immutable
MultipartConfig for a web server's upload handling.

Example:
    from multipartcfg import MultipartConfigBuilder

    config = (MultipartConfigBuilder()
        .with_max_file_size("10MB")
        .with_max_request_size("100MB")
        .create_config())
"""

from importlib.metadata import PackageNotFoundError, version

from .builder import MultipartConfigBuilder
from .config import MultipartConfig
from .exceptions import (
    ConfigError,
    InvalidArgumentError,
    MultipartConfigError,
    SizeFormatError,
)
from .loader import builder_from_dict, load_config
from .size import BYTES_PER_KB, BYTES_PER_MB, UNLIMITED, parse_size, size_str

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("multipart-config")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

# Explicit public API
__all__ = [
    # Version
    "__version__",
    # Core classes
    "MultipartConfig",
    "MultipartConfigBuilder",
    # Loading
    "builder_from_dict",
    "load_config",
    # Sizes
    "BYTES_PER_KB",
    "BYTES_PER_MB",
    "UNLIMITED",
    "parse_size",
    "size_str",
    # Exceptions
    "MultipartConfigError",
    "InvalidArgumentError",
    "SizeFormatError",
    "ConfigError",
]
