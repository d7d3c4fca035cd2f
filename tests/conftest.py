"""Shared test fixtures for floe-k8s-version tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
import structlog

from floe_k8s_version.checker import ServerVersionInfo
from floe_k8s_version.config import KUBERNETES_MIN_VERSION_KEY


class StaticVersioner:
    """Versioner returning a fixed server version."""

    def __init__(self, git_version: str) -> None:
        self.git_version = git_version
        self.calls = 0

    def server_version(self) -> ServerVersionInfo:
        self.calls += 1
        return ServerVersionInfo(git_version=self.git_version)


class FailingVersioner:
    """Versioner whose retrieval always fails."""

    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def server_version(self) -> ServerVersionInfo:
        raise self.exc


@pytest.fixture(autouse=True)
def clean_min_version_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure no KUBERNETES_MIN_VERSION override leaks into tests."""
    monkeypatch.delenv(KUBERNETES_MIN_VERSION_KEY, raising=False)


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after tests that configure logging."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def versioner() -> Callable[[str], StaticVersioner]:
    """Factory for versioners reporting a given git version."""
    return StaticVersioner


@pytest.fixture
def failing_versioner() -> Callable[[Exception], FailingVersioner]:
    """Factory for versioners raising a given exception."""
    return FailingVersioner
