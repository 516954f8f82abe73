"""
iOS version provider.
"""

from __future__ import annotations

import platform

from janus_platform.platforms.base import BaseVersionProvider


class IOSProvider(BaseVersionProvider):
    """Version provider for iOS and iPadOS devices."""

    name = "ios"
    os_name = "iOS"
    description = "iOS device system version"

    def version(self) -> str:
        # platform.ios_ver() is missing before 3.13 and reports an empty
        # release when not running on iOS
        ios_ver = getattr(platform, "ios_ver", None)
        if ios_ver is not None:
            return ios_ver().release or platform.release()
        return platform.release()
