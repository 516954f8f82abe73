"""
The version query plugin.

Binds a VersionQueryHandler to the configured channel and answers
method calls on it.
"""

from __future__ import annotations

import logging
from typing import Any

from janus_platform.channel import NOT_IMPLEMENTED, MethodCall, NotImplementedSentinel
from janus_platform.config import Config
from janus_platform.methods import Method
from janus_platform.platforms import BaseVersionProvider, get_provider
from janus_platform.registry import PluginRegistry

logger = logging.getLogger(__name__)


class VersionQueryHandler:
    """
    Answers ``getPlatformVersion`` with "<OS-name> <version>".

    Every other method name gets NOT_IMPLEMENTED. Calls are stateless and
    never raise for an unknown method.
    """

    def __init__(self, provider: BaseVersionProvider | None = None, config: Config | None = None):
        self.config = config or Config()
        self.provider = provider or get_provider(override=self.config.platform_override)

    @classmethod
    def register(
        cls, registry: PluginRegistry, config: Config | None = None
    ) -> VersionQueryHandler:
        """
        Create a handler and bind it as the receiver for the configured channel.

        Returns:
            The registered handler instance.
        """
        config = config or Config()
        instance = cls(config=config)
        registry.register_handler(config.channel_name, instance)
        return instance

    def handle(self, method_name: str | None, arguments: Any = None) -> str | NotImplementedSentinel:
        """
        Answer a single method call.

        Args:
            method_name: Wire name of the requested method.
            arguments: Call payload. Unused by every supported method.

        Returns:
            The platform version string, or NOT_IMPLEMENTED.
        """
        method = Method.parse(method_name)
        if method is Method.GET_PLATFORM_VERSION:
            return self.provider.platform_version()

        logger.debug(f"No implementation for method '{method_name}'")
        return NOT_IMPLEMENTED

    def handle_call(self, call: MethodCall) -> str | NotImplementedSentinel:
        """Answer a MethodCall delivered by the registry."""
        return self.handle(call.method, call.arguments)


def register_plugins(registry: PluginRegistry, config: Config | None = None) -> PluginRegistry:
    """
    Register every plugin in this package with a host registry.

    Called once per process during application start-up.
    """
    VersionQueryHandler.register(registry, config)
    return registry
