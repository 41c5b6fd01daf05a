"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the multipartcfg test suite.
"""

import pytest

from multipartcfg import MultipartConfigBuilder

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line("markers", "property: Property-based (hypothesis) tests")


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def builder() -> MultipartConfigBuilder:
    """Provide a fresh builder with default settings."""
    return MultipartConfigBuilder()


@pytest.fixture
def sample_config_dict() -> dict:
    """
    Provide a sample multipart config section for testing.

    Returns:
        dict: Sample settings in kebab-case, as written in YAML files
    """
    return {
        "location": "/var/tmp/uploads",
        "max-file-size": "10MB",
        "max-request-size": "100MB",
        "file-size-threshold": "512KB",
    }
