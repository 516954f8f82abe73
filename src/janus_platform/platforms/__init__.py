"""
Platform version providers for Janus Platform.

Each provider knows how to report the OS name and version for one
platform family. The running system picks its provider by
platform.system(), falling back to the generic provider.
"""

from __future__ import annotations

import logging
import platform

from janus_platform.platforms.base import BaseVersionProvider
from janus_platform.platforms.generic import GenericProvider
from janus_platform.platforms.ios import IOSProvider
from janus_platform.platforms.linux import LinuxProvider
from janus_platform.platforms.macos import MacOSProvider
from janus_platform.platforms.windows import WindowsProvider

logger = logging.getLogger(__name__)

# Registry of all available providers
PROVIDERS: dict[str, type[BaseVersionProvider]] = {
    "ios": IOSProvider,
    "macos": MacOSProvider,
    "windows": WindowsProvider,
    "linux": LinuxProvider,
    "generic": GenericProvider,
}

# platform.system() values mapped to provider names
SYSTEM_PROVIDERS: dict[str, str] = {
    "Darwin": "macos",
    "iOS": "ios",
    "iPadOS": "ios",
    "Windows": "windows",
    "Linux": "linux",
}


def get_all_providers() -> dict[str, type[BaseVersionProvider]]:
    """Return all registered providers."""
    return PROVIDERS.copy()


def get_provider_class(name: str) -> type[BaseVersionProvider] | None:
    """Get a specific provider by name."""
    return PROVIDERS.get(name)


def list_providers() -> list[str]:
    """List all available provider names."""
    return list(PROVIDERS.keys())


def detect_provider_name(system: str | None = None) -> str:
    """Map an OS name (default: the running system) to a provider name."""
    if system is None:
        system = platform.system()
    return SYSTEM_PROVIDERS.get(system, "generic")


def get_provider(system: str | None = None, override: str | None = None) -> BaseVersionProvider:
    """
    Instantiate the provider for a system.

    Args:
        system: OS name as reported by platform.system(). Defaults to the
                running system.
        override: Provider name that takes precedence over detection.

    Raises:
        ValueError: If `override` names no known provider.
    """
    if override:
        provider_cls = PROVIDERS.get(override)
        if provider_cls is None:
            raise ValueError(
                f"Unknown platform provider '{override}'. "
                f"Available: {', '.join(list_providers())}"
            )
    else:
        provider_cls = PROVIDERS[detect_provider_name(system)]

    logger.debug(f"Using platform provider '{provider_cls.name}'")
    return provider_cls()


__all__ = [
    "BaseVersionProvider",
    "IOSProvider",
    "MacOSProvider",
    "WindowsProvider",
    "LinuxProvider",
    "GenericProvider",
    "get_all_providers",
    "get_provider_class",
    "list_providers",
    "detect_provider_name",
    "get_provider",
    "PROVIDERS",
    "SYSTEM_PROVIDERS",
]
