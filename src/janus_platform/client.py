"""
Caller-side API for the version plugin.
"""

from __future__ import annotations

from janus_platform.channel import NOT_IMPLEMENTED, MethodChannel
from janus_platform.config import Config
from janus_platform.errors import MissingPluginError
from janus_platform.methods import Method
from janus_platform.plugin import register_plugins
from janus_platform.registry import PluginRegistry


class JanusPlatform:
    """
    Typed access to the methods exposed on the plugin channel.

    When no registry is given, a private one is created and the bundled
    plugins are registered into it.
    """

    def __init__(self, registry: PluginRegistry | None = None, config: Config | None = None):
        self.config = config or Config()
        if registry is None:
            registry = register_plugins(PluginRegistry(), self.config)
        self.registry = registry
        self.channel = MethodChannel(self.config.channel_name, registry)

    def get_platform_version(self) -> str:
        """
        Return the host platform version.

        Raises:
            MissingPluginError: If the channel is unbound or the handler
                has no implementation for the method.
        """
        method = Method.GET_PLATFORM_VERSION.value
        result = self.channel.invoke_method(method)
        if result is NOT_IMPLEMENTED:
            raise MissingPluginError(self.channel.name, method)
        return result
