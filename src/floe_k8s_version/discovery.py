"""Kubernetes API adapter for the version check.

KubernetesVersioner wraps ``kubernetes.client.VersionApi`` so it satisfies
ServerVersionInterface. API errors are not caught here.

Example:
    >>> from floe_k8s_version.discovery import load_kubernetes_versioner
    >>> versioner = load_kubernetes_versioner(context="prod-cluster")
    >>> versioner.server_version().git_version
    'v1.29.2'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from floe_k8s_version.checker import ServerVersionInfo

if TYPE_CHECKING:
    from pathlib import Path

    from kubernetes.client import VersionApi

logger = structlog.get_logger(__name__)


class KubernetesVersioner:
    """ServerVersionInterface backed by the Kubernetes ``/version`` endpoint.

    Attributes:
        version_api: Configured VersionApi client.
    """

    def __init__(self, version_api: VersionApi) -> None:
        self.version_api = version_api

    def server_version(self) -> ServerVersionInfo:
        """Query the API server for its version.

        Raises:
            kubernetes.client.exceptions.ApiException: On API failure.
        """
        info = self.version_api.get_code()
        logger.debug("version_check.server_version", git_version=info.git_version)
        return ServerVersionInfo.from_version_api(info)


def load_kubernetes_versioner(
    kubeconfig: Path | None = None,
    context: str | None = None,
) -> KubernetesVersioner:
    """Load Kubernetes configuration and build a KubernetesVersioner.

    With an explicit kubeconfig, that file is loaded. Otherwise in-cluster
    configuration is tried first, then the default kubeconfig.

    Args:
        kubeconfig: Path to kubeconfig file.
        context: Kubernetes context to use.

    Returns:
        KubernetesVersioner using the loaded configuration.

    Raises:
        kubernetes.config.ConfigException: If no configuration can be loaded.
    """
    from kubernetes import client
    from kubernetes import config as k8s_config

    if kubeconfig:
        k8s_config.load_kube_config(config_file=str(kubeconfig), context=context)
    else:
        try:
            k8s_config.load_incluster_config()
        except k8s_config.ConfigException:
            k8s_config.load_kube_config(context=context)

    return KubernetesVersioner(client.VersionApi())


__all__ = ["KubernetesVersioner", "load_kubernetes_versioner"]
