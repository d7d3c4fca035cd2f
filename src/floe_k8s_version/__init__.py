"""floe-k8s-version: Kubernetes minimum version check for floe.

Verifies at startup that the cluster's Kubernetes version satisfies the
minimum version floe requires. The minimum defaults to v1.18.0 and can be
overridden with the KUBERNETES_MIN_VERSION environment variable.

Example:
    >>> from floe_k8s_version import check_minimum_version, load_kubernetes_versioner
    >>> check_minimum_version(load_kubernetes_versioner())
"""

from __future__ import annotations

from typing import Any

from floe_k8s_version.checker import (
    ServerVersionInfo,
    ServerVersionInterface,
    VersionChecker,
    check_minimum_version,
    compare_versions,
)
from floe_k8s_version.config import (
    DEFAULT_MINIMUM_VERSION,
    KUBERNETES_MIN_VERSION_KEY,
    VersionCheckConfig,
    get_minimum_version,
)
from floe_k8s_version.errors import (
    IncompatibleVersionError,
    VersionCheckError,
    VersionParseError,
)
from floe_k8s_version.semver import SemanticVersion, normalize_version, parse_version

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_MINIMUM_VERSION",
    "IncompatibleVersionError",
    "KUBERNETES_MIN_VERSION_KEY",
    "KubernetesVersioner",
    "SemanticVersion",
    "ServerVersionInfo",
    "ServerVersionInterface",
    "VersionCheckConfig",
    "VersionCheckError",
    "VersionChecker",
    "VersionParseError",
    "check_minimum_version",
    "compare_versions",
    "get_minimum_version",
    "load_kubernetes_versioner",
    "normalize_version",
    "parse_version",
]


# Lazy imports so the kubernetes client is only loaded when needed
def __getattr__(name: str) -> Any:
    """Lazy import of Kubernetes adapter components."""
    if name in ("KubernetesVersioner", "load_kubernetes_versioner"):
        from floe_k8s_version import discovery

        return getattr(discovery, name)
    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
