"""CLI exit codes and output helpers.

Errors go to stderr as plain text, results to stdout, and every failure
exits with a non-zero code suitable for CI/CD gating.

Example:
    from floe_k8s_version.cli.utils import error_exit, ExitCode

    error_exit("Failed to connect", exit_code=ExitCode.NETWORK_ERROR)
"""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from typing import NoReturn


class ExitCode(IntEnum):
    """Exit codes for the version check CLI."""

    SUCCESS = 0
    """Cluster version is compatible."""

    GENERAL_ERROR = 1
    """Unexpected failure."""

    USAGE_ERROR = 2
    """Invalid usage, including a malformed minimum version."""

    VALIDATION_ERROR = 5
    """Cluster version is incompatible or unparseable."""

    NETWORK_ERROR = 8
    """Cluster could not be reached or queried."""


def error(message: str, **context: str | int | bool | None) -> None:
    """Print an error message to stderr.

    Example:
        error("Version check failed", context="prod")
        # Output: Error: Version check failed (context=prod)
    """
    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items() if v is not None)
        full_message = f"Error: {message} ({context_str})"
    else:
        full_message = f"Error: {message}"

    click.echo(full_message, err=True)


def error_exit(
    message: str,
    exit_code: ExitCode = ExitCode.GENERAL_ERROR,
    **context: str | int | bool | None,
) -> NoReturn:
    """Print an error message to stderr and exit with a code.

    Raises:
        SystemExit: Always exits with the specified code.
    """
    error(message, **context)
    sys.exit(exit_code)


def success(message: str) -> None:
    """Print a success message to stdout."""
    click.echo(message)


def info(message: str) -> None:
    """Print an informational message to stderr."""
    click.echo(message, err=True)


__all__ = ["ExitCode", "error", "error_exit", "info", "success"]
