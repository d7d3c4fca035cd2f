"""Fixtures for CLI command tests."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner

from floe_k8s_version.checker import ServerVersionInfo


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_versioner() -> Callable[[str], MagicMock]:
    """Factory for mock KubernetesVersioner instances reporting a version."""

    def _make(git_version: str) -> MagicMock:
        versioner = MagicMock()
        versioner.server_version.return_value = ServerVersionInfo(git_version=git_version)
        return versioner

    return _make
