"""Unit tests for the floe-k8s-version root command group."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from floe_k8s_version.cli import cli, main


class TestCliGroup:
    """Tests for the root group."""

    def test_help_lists_check(self, cli_runner: CliRunner) -> None:
        """Test the check command is registered."""
        result = cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "check" in result.output

    def test_version_option(self, cli_runner: CliRunner) -> None:
        """Test --version prints the program name."""
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert result.output.startswith("floe-k8s-version ")


class TestMain:
    """Tests for the console script entry point."""

    def test_unknown_command_exits_with_usage_error(self) -> None:
        """Test click usage errors map to their exit code."""
        with pytest.raises(SystemExit) as exc_info:
            main(["no-such-command"])
        assert exc_info.value.code == 2

    def test_dispatches_to_check(self) -> None:
        """Test main dispatches to the check command."""
        with patch("floe_k8s_version.cli.check.load_kubernetes_versioner") as mock_load:
            mock_load.return_value.server_version.return_value.git_version = "v1.29.0"
            main(["check"])
        mock_load.assert_called_once()
