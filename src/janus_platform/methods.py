"""
Operations understood on the plugin channel.
"""

from __future__ import annotations

from enum import Enum


class Method(Enum):
    """Closed set of channel operations, with an explicit fallback."""

    GET_PLATFORM_VERSION = "getPlatformVersion"
    UNSUPPORTED = None

    @classmethod
    def parse(cls, name: str | None) -> Method:
        """
        Map a wire method name to a Method.

        Matching is exact and case-sensitive. Anything unrecognised,
        including None and the empty string, maps to UNSUPPORTED.
        """
        if not isinstance(name, str) or not name:
            return cls.UNSUPPORTED
        for method in cls:
            if method.value == name:
                return method
        return cls.UNSUPPORTED

    @property
    def supported(self) -> bool:
        return self is not Method.UNSUPPORTED


METHOD_DESCRIPTIONS: dict[Method, str] = {
    Method.GET_PLATFORM_VERSION: "Host OS name followed by its version",
}


def supported_methods() -> list[Method]:
    """List all methods with a handler implementation."""
    return [m for m in Method if m.supported]
