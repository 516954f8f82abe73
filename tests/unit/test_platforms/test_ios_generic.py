"""
Unit tests for IOSProvider and GenericProvider.
"""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import patch

from janus_platform.platforms.generic import GenericProvider
from janus_platform.platforms.ios import IOSProvider


class TestIOSProvider:
    """Test IOSProvider class."""

    def test_uses_ios_ver(self):
        ios_ver = lambda: SimpleNamespace(system="iOS", release="17.2", model="iPhone")  # noqa: E731
        with patch("janus_platform.platforms.ios.platform.ios_ver", ios_ver, create=True):
            assert IOSProvider().platform_version() == "iOS 17.2"

    def test_empty_ios_ver_release_falls_back(self):
        ios_ver = lambda: SimpleNamespace(system="", release="", model="")  # noqa: E731
        with patch(
            "janus_platform.platforms.ios.platform.ios_ver", ios_ver, create=True
        ), patch("janus_platform.platforms.ios.platform.release", return_value="6.8.0"):
            assert IOSProvider().platform_version() == "iOS 6.8.0"

    def test_falls_back_to_release(self):
        with patch("janus_platform.platforms.ios.platform.ios_ver", None, create=True), patch(
            "janus_platform.platforms.ios.platform.release", return_value="23.2.0"
        ):
            assert IOSProvider().platform_version() == "iOS 23.2.0"


class TestGenericProvider:
    """Test GenericProvider class."""

    @patch("janus_platform.platforms.generic.platform.release", return_value="14.0-RELEASE")
    @patch("janus_platform.platforms.generic.platform.system", return_value="FreeBSD")
    def test_reports_system_and_release(self, mock_system, mock_release):
        provider = GenericProvider()
        assert provider.os_name == "FreeBSD"
        assert provider.platform_version() == "FreeBSD 14.0-RELEASE"

    @patch("janus_platform.platforms.generic.platform.release", return_value="1.0")
    @patch("janus_platform.platforms.generic.platform.system", return_value="")
    def test_unknown_system_name(self, mock_system, mock_release):
        assert GenericProvider().platform_version() == "Unknown 1.0"
