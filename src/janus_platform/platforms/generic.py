"""
Fallback provider for systems without a dedicated provider.
"""

from __future__ import annotations

import platform

from janus_platform.platforms.base import BaseVersionProvider


class GenericProvider(BaseVersionProvider):
    """Reports platform.system() and platform.release() as-is."""

    name = "generic"
    description = "Operating system name and release from the platform module"

    def __init__(self):
        super().__init__()
        self.os_name = platform.system() or "Unknown"

    def version(self) -> str:
        return platform.release()
