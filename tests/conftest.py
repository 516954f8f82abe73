"""
Pytest fixtures and configuration for Janus Platform tests.

Provides registries, configurations, and a deterministic version provider
shared across the test suite.
"""

from __future__ import annotations

import pytest

from janus_platform.config import Config
from janus_platform.platforms.base import BaseVersionProvider
from janus_platform.plugin import VersionQueryHandler
from janus_platform.registry import PluginRegistry


class FixedVersionProvider(BaseVersionProvider):
    """Provider reporting a fixed version, for tests."""

    name = "fixed"
    os_name = "TestOS"
    description = "Fixed test version"

    def __init__(self, version: str = "1.2.3"):
        super().__init__()
        self._version = version

    def version(self) -> str:
        return self._version


@pytest.fixture
def fixed_provider():
    """Provider that always reports 'TestOS 1.2.3'."""
    return FixedVersionProvider()


@pytest.fixture
def registry():
    """Empty plugin registry."""
    return PluginRegistry()


@pytest.fixture
def sample_config():
    """Configuration pinned to the generic provider."""
    return Config(platform_override="generic", log_level="DEBUG")


@pytest.fixture
def handler(fixed_provider):
    """Handler backed by the fixed provider."""
    return VersionQueryHandler(provider=fixed_provider)


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary config file."""
    config_file = tmp_path / "test_config.yaml"
    config_file.write_text(
        """
channel:
  name: "test_channel"
platform:
  override: "generic"
logging:
  level: "WARNING"
"""
    )
    return config_file


@pytest.fixture
def clean_env(monkeypatch):
    """Remove JANUS_ environment variables for the duration of a test."""
    for var in (
        "JANUS_CHANNEL_NAME",
        "JANUS_PLATFORM_OVERRIDE",
        "JANUS_LOG_LEVEL",
        "JANUS_LOG_FILE",
    ):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "cli: marks CLI tests")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "e2e: marks tests as end-to-end tests")
