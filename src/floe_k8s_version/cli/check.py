"""Kubernetes minimum version check command.

This module implements the `floe-k8s-version check` command which:
- Connects to the cluster (kubeconfig or in-cluster)
- Reads the server version from the /version endpoint
- Checks it against the minimum version (default v1.18.0)

Example:
    $ floe-k8s-version check
    $ floe-k8s-version check --context prod-cluster --min-version v1.25.0
    $ KUBERNETES_MIN_VERSION=v1.28.0-0 floe-k8s-version check -o json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click
import structlog

from floe_k8s_version.checker import ServerVersionInfo, check_minimum_version
from floe_k8s_version.cli.utils import ExitCode, error, error_exit, info, success
from floe_k8s_version.config import KUBERNETES_MIN_VERSION_KEY, VersionCheckConfig
from floe_k8s_version.discovery import load_kubernetes_versioner
from floe_k8s_version.errors import IncompatibleVersionError, VersionParseError
from floe_k8s_version.logging import configure_logging

logger = structlog.get_logger(__name__)


class _ResolvedVersioner:
    """Serve an already retrieved server version to the checker."""

    def __init__(self, version_info: ServerVersionInfo) -> None:
        self._version_info = version_info

    def server_version(self) -> ServerVersionInfo:
        return self._version_info


def _format_text_output(result: dict[str, Any]) -> None:
    if result["compatible"]:
        success(
            f"✓ Kubernetes version {result['current_version']} "
            f"meets minimum {result['minimum_version']}"
        )
    else:
        error(f"✗ {result['error']}")


def _format_json_output(result: dict[str, Any]) -> None:
    click.echo(json.dumps(result, indent=2))


def _emit(result: dict[str, Any], output_format: str) -> None:
    if output_format.lower() == "json":
        _format_json_output(result)
    else:
        _format_text_output(result)


@click.command(
    name="check",
    help="Check the cluster's Kubernetes version against the minimum required.",
    epilog=f"""
The minimum version defaults to v1.18.0 and can be overridden with
--min-version or the {KUBERNETES_MIN_VERSION_KEY} environment variable.
A minimum without a pre-release part also admits pre-releases of the
same version (v1.18.0 behaves as v1.18.0-0).

Examples:
    $ floe-k8s-version check
    $ floe-k8s-version check --kubeconfig ~/.kube/config --context kind
    $ floe-k8s-version check --min-version v1.25.0 --output-format json
""",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "--kubeconfig",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True, path_type=Path),
    default=None,
    help="Path to kubeconfig file.",
    metavar="PATH",
)
@click.option(
    "--context",
    type=str,
    default=None,
    help="Kubernetes context to use.",
    metavar="TEXT",
)
@click.option(
    "--min-version",
    type=str,
    default=None,
    envvar=KUBERNETES_MIN_VERSION_KEY,
    help=f"Minimum Kubernetes version [env: {KUBERNETES_MIN_VERSION_KEY}].",
    metavar="VERSION",
)
@click.option(
    "--output-format",
    "-o",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format.",
    metavar="TEXT",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Show connection progress.",
)
def check_command(
    kubeconfig: Path | None,
    context: str | None,
    min_version: str | None,
    output_format: str,
    verbose: bool,
) -> None:
    """Check the cluster's Kubernetes version against the minimum.

    Args:
        kubeconfig: Path to kubeconfig file.
        context: Kubernetes context to use.
        min_version: Minimum version override.
        output_format: Output format (text or json).
        verbose: Show connection progress.
    """
    configure_logging(log_level="DEBUG" if verbose else "WARNING", json_output=False)

    config = VersionCheckConfig(min_version=min_version or None)
    result: dict[str, Any] = {
        "compatible": False,
        "current_version": None,
        "minimum_version": config.minimum_version,
        "error": None,
    }

    if verbose:
        info("Connecting to Kubernetes cluster...")

    try:
        versioner = load_kubernetes_versioner(kubeconfig, context)
        version_info = versioner.server_version()
    except Exception as e:
        logger.error("version_check.retrieval_failed", error_type=type(e).__name__)
        error_exit(
            f"Failed to retrieve Kubernetes version: {type(e).__name__}",
            exit_code=ExitCode.NETWORK_ERROR,
        )

    result["current_version"] = version_info.git_version
    if verbose:
        info(f"Server version: {version_info.git_version}")

    exit_code = ExitCode.SUCCESS
    try:
        check_minimum_version(_ResolvedVersioner(version_info), config)
        result["compatible"] = True
    except IncompatibleVersionError as e:
        result["error"] = str(e)
        exit_code = ExitCode.VALIDATION_ERROR
    except VersionParseError as e:
        result["error"] = str(e)
        exit_code = (
            ExitCode.USAGE_ERROR if e.role == "minimum" else ExitCode.VALIDATION_ERROR
        )

    _emit(result, output_format)

    if exit_code != ExitCode.SUCCESS:
        raise SystemExit(exit_code)


__all__: list[str] = ["check_command"]
