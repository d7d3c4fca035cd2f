"""Main entry point for the floe-k8s-version CLI.

Example:
    $ floe-k8s-version --help
    $ floe-k8s-version check --context prod-cluster
"""

from __future__ import annotations

import sys
from importlib.metadata import version as get_version

import click

from floe_k8s_version.cli.check import check_command


def _get_version() -> str:
    """Get the floe-k8s-version package version.

    Returns:
        Version string from package metadata, or 'unknown' if not installed.
    """
    try:
        return get_version("floe-k8s-version")
    except Exception:
        return "unknown"


@click.group(
    name="floe-k8s-version",
    help="Kubernetes version compatibility checks for floe.",
    epilog="Use 'floe-k8s-version <command> --help' for command-specific help.",
    context_settings={
        "help_option_names": ["-h", "--help"],
    },
)
@click.version_option(
    version=_get_version(),
    prog_name="floe-k8s-version",
    message="%(prog)s %(version)s",
)
def cli() -> None:
    """Root command group for floe-k8s-version."""


cli.add_command(check_command)


def main(argv: list[str] | None = None) -> None:
    """Console script entry point.

    Args:
        argv: Command-line arguments (uses sys.argv if None).
    """
    try:
        cli(args=argv, standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)
