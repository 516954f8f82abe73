"""
CLI tests for the 'janus invoke' command.
"""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from janus_platform.cli import EXIT_NOT_IMPLEMENTED, main


@pytest.fixture
def runner(clean_env):
    """CLI runner pinned to the generic provider with a fixed OS."""
    clean_env.setenv("JANUS_PLATFORM_OVERRIDE", "generic")
    with patch("janus_platform.platforms.generic.platform.system", return_value="FreeBSD"), patch(
        "janus_platform.platforms.generic.platform.release", return_value="14.0-RELEASE"
    ):
        yield CliRunner()


@pytest.mark.cli
class TestCliInvoke:
    """Test the 'janus invoke' command."""

    def test_get_platform_version(self, runner):
        result = runner.invoke(main, ["invoke", "getPlatformVersion"])

        assert result.exit_code == 0
        assert result.output.strip() == "FreeBSD 14.0-RELEASE"

    def test_long_version_printed_on_one_line(self, runner):
        long_release = "#58~22.04.1-Ubuntu SMP PREEMPT_DYNAMIC Thu Oct 30 10:56:53 UTC 2025 extra-build-tag-xyz"
        with patch(
            "janus_platform.platforms.generic.platform.release", return_value=long_release
        ):
            result = runner.invoke(main, ["invoke", "getPlatformVersion"])

        assert result.exit_code == 0
        assert len(f"FreeBSD {long_release}") > 80
        assert result.output == f"FreeBSD {long_release}\n"

    def test_get_platform_version_json(self, runner):
        result = runner.invoke(main, ["invoke", "getPlatformVersion", "--format", "json"])

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload == {
            "channel": "janus_flutter",
            "method": "getPlatformVersion",
            "implemented": True,
            "result": "FreeBSD 14.0-RELEASE",
        }

    def test_arguments_are_accepted(self, runner):
        result = runner.invoke(
            main, ["invoke", "getPlatformVersion", "--arguments", '{"verbose": true}']
        )
        assert result.exit_code == 0

    def test_unknown_method(self, runner):
        result = runner.invoke(main, ["invoke", "ping"])

        assert result.exit_code == EXIT_NOT_IMPLEMENTED
        assert "Method not implemented" in result.output
        assert "ping" in result.output

    def test_unknown_method_json(self, runner):
        result = runner.invoke(main, ["invoke", "getplatformversion", "-f", "json"])

        assert result.exit_code == EXIT_NOT_IMPLEMENTED
        payload = json.loads(result.output)
        assert payload["implemented"] is False
        assert payload["result"] is None

    def test_invalid_arguments_json(self, runner):
        result = runner.invoke(main, ["invoke", "getPlatformVersion", "--arguments", "{not json"])

        assert result.exit_code == 2
        assert "Invalid JSON" in result.output

    def test_invalid_platform_override(self, runner, clean_env):
        clean_env.setenv("JANUS_PLATFORM_OVERRIDE", "amiga")

        result = runner.invoke(main, ["invoke", "getPlatformVersion"])

        assert result.exit_code == 1
        assert "Unknown platform provider" in result.output

    def test_config_file_channel(self, runner, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("channel:\n  name: other_channel\n")

        result = runner.invoke(
            main, ["-c", str(config_file), "invoke", "getPlatformVersion", "-f", "json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.output)["channel"] == "other_channel"
