"""
Linux version provider.

Reports the kernel version string from uname, with distribution details
available for display.
"""

from __future__ import annotations

import platform
from typing import Any

import distro

from janus_platform.platforms.base import BaseVersionProvider


class LinuxProvider(BaseVersionProvider):
    """Version provider for Linux hosts."""

    name = "linux"
    os_name = "Linux"
    description = "Linux kernel version from uname"

    def version(self) -> str:
        return platform.uname().version

    def describe(self) -> dict[str, Any]:
        details = super().describe()
        details.update(
            {
                "kernel_release": platform.uname().release,
                "distribution": distro.name(pretty=True),
                "distribution_id": distro.id(),
                "distribution_version": distro.version(),
                "codename": distro.codename(),
            }
        )
        return details
