"""
Method-call primitives shared by the host registry and plugin handlers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from janus_platform.registry import PluginRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MethodCall:
    """A single named request arriving on a channel."""

    method: str
    arguments: Any = None


class NotImplementedSentinel:
    """
    Marker returned when a handler has no logic for a method.

    There is exactly one instance, NOT_IMPLEMENTED. It is falsy so callers
    can write ``if not result``, but identity checks are preferred.
    """

    _instance: NotImplementedSentinel | None = None

    def __new__(cls) -> NotImplementedSentinel:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_IMPLEMENTED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "NOT_IMPLEMENTED"

    def __copy__(self) -> NotImplementedSentinel:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> NotImplementedSentinel:
        return self


NOT_IMPLEMENTED = NotImplementedSentinel()


class MethodChannel:
    """
    Caller-side view of a named channel.

    Sends method calls through a PluginRegistry to whatever handler is
    bound under the same name.
    """

    def __init__(self, name: str, registry: PluginRegistry):
        self.name = name
        self.registry = registry

    def invoke_method(self, method: str, arguments: Any = None) -> Any:
        """
        Invoke a method on the channel and return the handler's raw result.

        Raises:
            MissingPluginError: If no handler is bound to this channel.
        """
        call = MethodCall(method=method, arguments=arguments)
        logger.debug(f"Invoking '{method}' on channel '{self.name}'")
        return self.registry.dispatch(self.name, call)
