"""
Build multipart configuration from config mappings and YAML text.

Keys may be written in snake_case or kebab-case. Size values accept the
same forms as the builder's setters:

    multipart:
      location: /var/tmp/uploads
      max-file-size: 10MB
      max-request-size: 100MB
      file-size-threshold: 512KB
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

import yaml

from .builder import MultipartConfigBuilder
from .config import MultipartConfig
from .exceptions import ConfigError

logger = logging.getLogger("multipartcfg.loader")

DEFAULT_SECTION = "multipart"

_Setter = Callable[[MultipartConfigBuilder, Any], MultipartConfigBuilder]

_SETTERS: dict[str, _Setter] = {
    "location": MultipartConfigBuilder.with_location,
    "max_file_size": MultipartConfigBuilder.with_max_file_size,
    "max_request_size": MultipartConfigBuilder.with_max_request_size,
    "file_size_threshold": MultipartConfigBuilder.with_file_size_threshold,
}


def builder_from_dict(data: Mapping[str, Any]) -> MultipartConfigBuilder:
    """
    Create a builder populated from a configuration mapping.

    Args:
        data: Mapping of setting names to values

    Returns:
        MultipartConfigBuilder with the given settings applied

    Raises:
        ConfigError: If data is not a mapping, contains an unknown key, or
            has a non-string location
        InvalidArgumentError: If a size value is empty or of the wrong type
        SizeFormatError: If a size string cannot be parsed
    """
    if not isinstance(data, Mapping):
        raise ConfigError(
            "Multipart config must be a mapping", type=type(data).__name__
        )

    builder = MultipartConfigBuilder()
    for key, value in data.items():
        name = str(key).replace("-", "_")
        setter = _SETTERS.get(name)
        if setter is None:
            raise ConfigError("Unknown multipart config key", key=key)
        if name == "location" and value is not None and not isinstance(value, str):
            raise ConfigError(
                "Multipart config location must be a string",
                key=key,
                type=type(value).__name__,
            )
        setter(builder, value)

    return builder


def _parse_yaml(text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in multipart config: {e}") from e


def load_config(
    source: str | Mapping[str, Any], section: str | None = DEFAULT_SECTION
) -> MultipartConfig:
    """
    Load a MultipartConfig from YAML text or an already-loaded mapping.

    Args:
        source: YAML document text or a mapping
        section: Top-level key holding the multipart settings, or None if
            source holds them directly (default: "multipart")

    Returns:
        MultipartConfig instance. Missing sections and empty documents
        yield the defaults.

    Raises:
        ConfigError: If the YAML is malformed or the settings are not a
            mapping of known keys
    """
    data = _parse_yaml(source) if isinstance(source, str) else source
    if data is None:
        data = {}

    if section is not None:
        if not isinstance(data, Mapping):
            raise ConfigError(
                "Config document must be a mapping", type=type(data).__name__
            )
        section_data = data.get(section)
        # Only an absent or empty (null) section means "use the defaults"
        if section_data is None:
            section_data = {}
    else:
        section_data = data

    builder = builder_from_dict(section_data)
    logger.debug(
        "loaded multipart config section=%s keys=%s", section, list(section_data)
    )
    return builder.create_config()
