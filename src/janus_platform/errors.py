"""
Exceptions raised on the calling side of a plugin channel.

The handler itself never raises for an unknown method; it answers with
the NOT_IMPLEMENTED sentinel instead.
"""

from __future__ import annotations


class JanusPlatformError(Exception):
    """Base class for all Janus Platform errors."""


class MissingPluginError(JanusPlatformError):
    """No handler answered a method call on a channel."""

    def __init__(self, channel: str, method: str | None, reason: str | None = None):
        self.channel = channel
        self.method = method
        message = f"No implementation found for method {method} on channel {channel}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
