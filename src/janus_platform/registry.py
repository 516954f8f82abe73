"""
Host-side registry binding channel names to method-call handlers.

The registry is an explicit object handed to plugin initialisation, so
each application (and each test) owns its own bindings.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from janus_platform.channel import MethodCall
from janus_platform.errors import MissingPluginError

logger = logging.getLogger(__name__)


class MethodCallHandler(Protocol):
    """Anything able to answer a MethodCall."""

    def handle_call(self, call: MethodCall) -> Any: ...


class PluginRegistry:
    """Maps each channel name to exactly one handler."""

    def __init__(self) -> None:
        self._handlers: dict[str, MethodCallHandler] = {}

    def register_handler(self, channel_name: str, handler: MethodCallHandler) -> None:
        """
        Bind a handler as the sole receiver for a channel.

        A second registration on the same channel replaces the first.
        """
        if channel_name in self._handlers:
            logger.warning(f"Replacing existing handler on channel '{channel_name}'")
        self._handlers[channel_name] = handler
        logger.debug(f"Registered {type(handler).__name__} on channel '{channel_name}'")

    def unregister_handler(self, channel_name: str) -> bool:
        """Remove a channel binding. Returns True if one existed."""
        return self._handlers.pop(channel_name, None) is not None

    def get_handler(self, channel_name: str) -> MethodCallHandler | None:
        return self._handlers.get(channel_name)

    def channels(self) -> list[str]:
        """List all bound channel names."""
        return list(self._handlers.keys())

    def dispatch(self, channel_name: str, call: MethodCall) -> Any:
        """
        Deliver a method call to the handler bound on a channel.

        Raises:
            MissingPluginError: If nothing is bound to the channel.
        """
        handler = self._handlers.get(channel_name)
        if handler is None:
            raise MissingPluginError(
                channel_name, call.method, "channel has no registered handler"
            )
        return handler.handle_call(call)

    def __contains__(self, channel_name: object) -> bool:
        return channel_name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)
