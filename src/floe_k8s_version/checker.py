"""Minimum Kubernetes version check.

This module decides whether the Kubernetes version reported by a cluster
satisfies the minimum version required by floe. It is run once at startup by
floe components that talk to the Kubernetes API.

Check pipeline:
1. Resolve the minimum version (KUBERNETES_MIN_VERSION override or default)
2. Normalize and parse the server version and the minimum version
3. Inject a ``-0`` pre-release into a minimum without one, so pre-releases
   of the minimum MAJOR.MINOR.PATCH are accepted
4. Raise IncompatibleVersionError if the server version is lower

Example:
    >>> from kubernetes import client, config
    >>> from floe_k8s_version import KubernetesVersioner, check_minimum_version
    >>> config.load_kube_config()
    >>> check_minimum_version(KubernetesVersioner(client.VersionApi()))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import structlog
from pydantic import BaseModel, ConfigDict, Field

from floe_k8s_version.config import KUBERNETES_MIN_VERSION_KEY, VersionCheckConfig
from floe_k8s_version.errors import IncompatibleVersionError, VersionParseError
from floe_k8s_version.semver import SemanticVersion, parse_version
from floe_k8s_version.tracing import (
    ATTR_CURRENT_VERSION,
    ATTR_MINIMUM_VERSION,
    get_tracer,
    version_check_span,
)

if TYPE_CHECKING:
    from kubernetes.client import VersionInfo

logger = structlog.get_logger(__name__)


class ServerVersionInfo(BaseModel):
    """Version information reported by the Kubernetes API server.

    Mirrors the ``/version`` endpoint payload. Only git_version takes part
    in the check.

    Attributes:
        git_version: Server version, e.g. "v1.29.2" or "v1.20.4-gke.1801".
        major: Major version as reported (may carry a "+" suffix).
        minor: Minor version as reported (may carry a "+" suffix).
        git_commit: Commit the server was built from.
        platform: Server platform, e.g. "linux/amd64".
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    git_version: str = Field(..., description="Raw server version string")
    major: str | None = Field(default=None, description="Major version")
    minor: str | None = Field(default=None, description="Minor version")
    git_commit: str | None = Field(default=None, description="Source commit")
    platform: str | None = Field(default=None, description="Server platform")

    @classmethod
    def from_version_api(cls, info: VersionInfo) -> ServerVersionInfo:
        """Build from a kubernetes.client.VersionInfo response."""
        return cls(
            git_version=info.git_version,
            major=info.major,
            minor=info.minor,
            git_commit=info.git_commit,
            platform=info.platform,
        )


@runtime_checkable
class ServerVersionInterface(Protocol):
    """Anything able to report the Kubernetes server version.

    Implementations may raise any exception on retrieval failure; the check
    propagates it unchanged.

    Example:
        >>> class StaticVersioner:
        ...     def server_version(self) -> ServerVersionInfo:
        ...         return ServerVersionInfo(git_version="v1.29.0")
    """

    def server_version(self) -> ServerVersionInfo:
        """Return the server version information."""
        ...


def _parse(version: str, role: str) -> SemanticVersion:
    try:
        return parse_version(version)
    except ValueError as e:
        logger.warning("version_check.parse_failed", role=role, version=version, error=str(e))
        raise VersionParseError(version, role=role, reason=str(e)) from e


def compare_versions(
    current_version: str,
    minimum_version: str,
    *,
    override_key: str = KUBERNETES_MIN_VERSION_KEY,
) -> None:
    """Check a server version against a minimum version.

    When the minimum has no pre-release identifiers a ``-0`` is injected,
    making it a floor that also admits pre-releases of the same
    MAJOR.MINOR.PATCH. A minimum that already carries pre-release
    identifiers is used as given.

    Args:
        current_version: Raw server version, "v" prefix allowed.
        minimum_version: Raw minimum version, "v" prefix allowed.
        override_key: Override name reported in the diagnostic.

    Raises:
        VersionParseError: If either string is not a valid semantic version.
        IncompatibleVersionError: If the server version is lower than the
            effective minimum.

    Example:
        >>> compare_versions("v1.18.0-alpha", "v1.18.0")
    """
    current = _parse(current_version, role="current")
    minimum = _parse(minimum_version, role="minimum")

    if not minimum.is_prerelease:
        minimum = minimum.with_prerelease(0)

    if current < minimum:
        logger.error(
            "version_check.incompatible",
            current_version=str(current),
            minimum_version=str(minimum),
            prerelease=current.is_prerelease,
        )
        raise IncompatibleVersionError(
            str(current),
            str(minimum),
            override_key,
            is_prerelease=current.is_prerelease,
        )

    logger.debug(
        "version_check.passed",
        current_version=str(current),
        minimum_version=str(minimum),
    )


def check_minimum_version(
    versioner: ServerVersionInterface,
    config: VersionCheckConfig | None = None,
) -> None:
    """Check that the cluster's Kubernetes version meets the minimum.

    Args:
        versioner: Source of the server version, e.g. KubernetesVersioner.
        config: Minimum version configuration. When None, the
            KUBERNETES_MIN_VERSION environment variable is read at call time.

    Raises:
        VersionParseError: If either version string is malformed.
        IncompatibleVersionError: If the server version is too old.
        Exception: Any error raised by versioner.server_version(), unchanged.
    """
    if config is None:
        config = VersionCheckConfig.from_env()

    info = versioner.server_version()
    minimum_version = config.minimum_version

    logger.info(
        "version_check.started",
        git_version=info.git_version,
        minimum_version=minimum_version,
        override=config.is_override,
    )

    with version_check_span(get_tracer(), override=config.is_override) as span:
        span.set_attribute(ATTR_CURRENT_VERSION, info.git_version)
        span.set_attribute(ATTR_MINIMUM_VERSION, minimum_version)
        compare_versions(info.git_version, minimum_version)


class VersionChecker:
    """Minimum version check bound to a configuration.

    Attributes:
        config: Explicit configuration, or None to read the environment on
            every check.

    Example:
        >>> checker = VersionChecker(VersionCheckConfig(min_version="v1.25.0"))
        >>> checker.minimum_version
        'v1.25.0'
        >>> checker.check(versioner)
    """

    def __init__(self, config: VersionCheckConfig | None = None) -> None:
        self.config = config

    def _resolve_config(self) -> VersionCheckConfig:
        return self.config if self.config is not None else VersionCheckConfig.from_env()

    @property
    def minimum_version(self) -> str:
        """Raw minimum version this checker enforces."""
        return self._resolve_config().minimum_version

    def check(self, versioner: ServerVersionInterface) -> None:
        """Run the check against the given versioner.

        Raises:
            VersionParseError: If either version string is malformed.
            IncompatibleVersionError: If the server version is too old.
        """
        check_minimum_version(versioner, self._resolve_config())

    def __repr__(self) -> str:
        return f"VersionChecker(minimum_version={self.minimum_version!r})"


__all__ = [
    "ServerVersionInfo",
    "ServerVersionInterface",
    "VersionChecker",
    "check_minimum_version",
    "compare_versions",
]
