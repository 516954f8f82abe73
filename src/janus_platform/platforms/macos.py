"""
macOS version provider.

Produces the same text as Foundation's operatingSystemVersionString,
e.g. "Version 14.1 (Build 23B74)".
"""

from __future__ import annotations

import platform

from janus_platform.platforms.base import BaseVersionProvider


class MacOSProvider(BaseVersionProvider):
    """Version provider for macOS hosts."""

    name = "macos"
    os_name = "macOS"
    description = "macOS product version and build"

    def version(self) -> str:
        release = platform.mac_ver()[0] or platform.release()
        build = self._get_build_version()
        if build:
            return f"Version {release} (Build {build})"
        return f"Version {release}"

    def _get_build_version(self) -> str:
        """Get the build identifier from sw_vers."""
        stdout, stderr, rc = self.run_command(["sw_vers", "-buildVersion"])
        if rc != 0:
            self.logger.warning(f"Could not read macOS build version: {stderr.strip()}")
            return ""
        return stdout.strip()
