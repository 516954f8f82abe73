"""
Base provider class that all platform version providers inherit from.
"""

from __future__ import annotations

import logging
import platform
import subprocess
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger(__name__)

UNKNOWN_VERSION = "unknown"


class BaseVersionProvider(ABC):
    """
    Abstract base class for all platform version providers.

    Subclasses set `os_name` to the fixed token reported for their
    platform and implement `version` to query the running system.
    """

    name: str = "base"
    os_name: str = "Unknown"
    description: str = "Base provider"

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.name}")

    @abstractmethod
    def version(self) -> str:
        """
        Query the running system for its version identifier.

        Returns:
            Version string in the platform's own reporting format.
        """
        pass

    def platform_version(self) -> str:
        """Return "<OS-name> <version>" for the running system."""
        version = (self.version() or "").strip() or UNKNOWN_VERSION
        result = f"{self.os_name} {version}"
        self.logger.debug(f"Platform version resolved to '{result}'")
        return result

    def describe(self) -> dict[str, Any]:
        """Return provider details for display."""
        return {
            "provider": self.name,
            "os_name": self.os_name,
            "platform_version": self.platform_version(),
            "architecture": platform.machine(),
            "python": platform.python_version(),
        }

    def run_command(
        self,
        cmd: list[str],
        timeout: int = 10,
    ) -> tuple[str, str, int]:
        """
        Run a command and return output.

        Args:
            cmd: Command and arguments as list.
            timeout: Timeout in seconds.

        Returns:
            Tuple of (stdout, stderr, returncode).
        """
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=timeout,
                check=False,
            )
            return result.stdout, result.stderr, result.returncode
        except subprocess.TimeoutExpired:
            self.logger.warning(f"Command timed out: {' '.join(cmd)}")
            return "", "Command timed out", -1
        except FileNotFoundError:
            self.logger.warning(f"Command not found: {cmd[0]}")
            return "", f"Command not found: {cmd[0]}", -1
