"""Command-line interface for floe-k8s-version.

Commands:
    floe-k8s-version check: Check the cluster version against the minimum

Exit Codes:
    0: Success
    1: General error
    2: Usage error (invalid arguments or malformed minimum version)
    5: Validation error (incompatible or unparseable server version)
    8: Network error (cluster unreachable)
"""

from __future__ import annotations

from floe_k8s_version.cli.main import cli, main
from floe_k8s_version.cli.utils import ExitCode, error, error_exit, info, success

__all__ = ["ExitCode", "cli", "error", "error_exit", "info", "main", "success"]
