"""
Configuration management for Janus Platform.

Supports configuration via YAML files, environment variables, and programmatic access.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from janus_platform import CHANNEL_NAME

DEFAULT_CONFIG_PATHS = [
    Path("/etc/janus-platform/config.yaml"),
    Path.home() / ".config" / "janus-platform" / "config.yaml",
    Path("janus-config.yaml"),
]

# Nested YAML sections and the field each of their keys maps to
SECTION_FIELDS: dict[str, dict[str, str]] = {
    "channel": {"name": "channel_name"},
    "platform": {"override": "platform_override"},
    "logging": {"level": "log_level", "file": "log_file"},
}


@dataclass
class Config:
    """
    Configuration container for Janus Platform.

    Priority (highest to lowest):
    1. Programmatic values passed to __init__
    2. Environment variables (prefixed with JANUS_)
    3. Config file values
    4. Default values
    """

    # Channel shared with the host application shell
    channel_name: str = CHANNEL_NAME

    # Force a provider instead of detecting from platform.system()
    platform_override: str | None = None

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    @classmethod
    def from_file(cls, path: str | Path) -> Config:
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Create config from a dictionary."""
        # Flatten nested structure if present
        flat = {}
        for key, value in data.items():
            if isinstance(value, dict):
                section = SECTION_FIELDS.get(key, {})
                for subkey, subvalue in value.items():
                    flat[section.get(subkey, subkey)] = subvalue
            else:
                flat[key] = value

        # Filter to only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in flat.items() if k in known_fields}

        return cls(**filtered)

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> Config:
        """
        Load configuration with full resolution order.

        Args:
            config_path: Explicit path to config file. If None, searches
                        default locations.

        Returns:
            Fully resolved Config instance.
        """
        base_config: dict[str, Any] = {}

        if config_path:
            path = Path(config_path)
            if path.exists():
                with open(path) as f:
                    base_config = yaml.safe_load(f) or {}
        else:
            for path in DEFAULT_CONFIG_PATHS:
                if path.exists():
                    with open(path) as f:
                        base_config = yaml.safe_load(f) or {}
                    break

        config = cls.from_dict(base_config) if base_config else cls()

        config._apply_env_overrides()

        return config

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides."""
        env_mappings = {
            "JANUS_CHANNEL_NAME": "channel_name",
            "JANUS_PLATFORM_OVERRIDE": "platform_override",
            "JANUS_LOG_LEVEL": "log_level",
            "JANUS_LOG_FILE": "log_file",
        }

        for env_var, attr in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                setattr(self, attr, value)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "channel": {
                "name": self.channel_name,
            },
            "platform": {
                "override": self.platform_override,
            },
            "logging": {
                "level": self.log_level,
                "file": self.log_file,
            },
        }

    def save(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
