"""Minimum Kubernetes version configuration.

The minimum version enforced at startup defaults to DEFAULT_MINIMUM_VERSION
and can be overridden with the KUBERNETES_MIN_VERSION environment variable.
The override is used verbatim; malformed values surface as parse errors when
the check runs, not here.

Example:
    >>> from floe_k8s_version.config import VersionCheckConfig
    >>> VersionCheckConfig().minimum_version
    'v1.18.0'
    >>> VersionCheckConfig.from_env({"KUBERNETES_MIN_VERSION": "v1.25.0"}).minimum_version
    'v1.25.0'
"""

from __future__ import annotations

import os
from collections.abc import Mapping

import structlog
from pydantic import BaseModel, ConfigDict, Field

logger = structlog.get_logger(__name__)

KUBERNETES_MIN_VERSION_KEY = "KUBERNETES_MIN_VERSION"
"""Environment variable overriding the minimum Kubernetes version."""

# Keep in sync with the minimum version in the installation docs.
DEFAULT_MINIMUM_VERSION = "v1.18.0"
"""Minimum Kubernetes version used when no override is configured."""


class VersionCheckConfig(BaseModel):
    """Configuration for the minimum version check.

    Attributes:
        min_version: Override for the minimum version. None or empty string
            means the built-in default applies.

    Example:
        >>> config = VersionCheckConfig(min_version="1.20.0-0")
        >>> config.is_override
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_version: str | None = Field(
        default=None,
        description="Minimum Kubernetes version override (raw, may carry a 'v' prefix)",
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> VersionCheckConfig:
        """Build configuration from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            VersionCheckConfig with min_version taken from
            KUBERNETES_MIN_VERSION when set.
        """
        env = os.environ if environ is None else environ
        return cls(min_version=env.get(KUBERNETES_MIN_VERSION_KEY) or None)

    @property
    def is_override(self) -> bool:
        """Whether a non-empty override is configured."""
        return bool(self.min_version)

    @property
    def minimum_version(self) -> str:
        """Resolve the raw minimum version string to enforce."""
        if self.min_version:
            logger.debug(
                "version_check.override_used",
                key=KUBERNETES_MIN_VERSION_KEY,
                min_version=self.min_version,
            )
            return self.min_version
        return DEFAULT_MINIMUM_VERSION


def get_minimum_version(config: VersionCheckConfig | None = None) -> str:
    """Resolve the minimum version string.

    Args:
        config: Explicit configuration. When None the process environment
            is read at call time.

    Returns:
        The override when set and non-empty, else DEFAULT_MINIMUM_VERSION.
    """
    if config is None:
        config = VersionCheckConfig.from_env()
    return config.minimum_version


__all__ = [
    "DEFAULT_MINIMUM_VERSION",
    "KUBERNETES_MIN_VERSION_KEY",
    "VersionCheckConfig",
    "get_minimum_version",
]
