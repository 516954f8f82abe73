"""
Windows version provider.

Windows reports a coarse version bucket ("10+", "8" or "7") rather than
the full build number.
"""

from __future__ import annotations

import platform

from janus_platform.platforms.base import BaseVersionProvider

# (major, minor) lower bounds, newest first
VERSION_BUCKETS: list[tuple[tuple[int, int], str]] = [
    ((10, 0), "10+"),
    ((6, 2), "8"),
    ((6, 1), "7"),
]


class WindowsProvider(BaseVersionProvider):
    """Version provider for Windows hosts."""

    name = "windows"
    os_name = "Windows"
    description = "Windows version bucket (10+, 8, 7)"

    def version(self) -> str:
        parsed = self._parse_version(platform.version())
        if parsed is not None:
            for bound, label in VERSION_BUCKETS:
                if parsed >= bound:
                    return label
        return platform.release()

    def _parse_version(self, version: str) -> tuple[int, int] | None:
        """
        Parse "major.minor[.build]" into a (major, minor) tuple.

        Returns None when the string does not start with two numbers.
        """
        parts = version.split(".")
        if len(parts) < 2:
            return None
        try:
            return int(parts[0]), int(parts[1])
        except ValueError:
            return None
