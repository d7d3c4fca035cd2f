"""Exception types for floe-k8s-version.

Exception Hierarchy:
    VersionCheckError (base)
    ├── VersionParseError - A version string is not valid semantic version syntax
    └── IncompatibleVersionError - Server version is below the required minimum

Errors raised by the version retrieval collaborator (for example
``kubernetes.client.exceptions.ApiException``) are not part of this hierarchy;
they propagate to the caller unchanged.

Example:
    >>> from floe_k8s_version.errors import IncompatibleVersionError
    >>> try:
    ...     check_minimum_version(versioner)
    ... except IncompatibleVersionError as e:
    ...     print(e.current_version, e.minimum_version)
"""

from __future__ import annotations

from typing import Any

PRERELEASE_NOTE = (
    "note pre-release version is smaller than the corresponding release version "
    "(e.g. 1.x.y-z < 1.x.y), using 1.x.y-0 as the minimum version is likely to "
    "help in this case"
)
"""Appended to the diagnostic when the server runs a pre-release version."""


class VersionCheckError(Exception):
    """Base exception for all floe-k8s-version errors.

    Attributes:
        message: Human-readable error description.
        details: Additional error context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize VersionCheckError.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return the diagnostic message."""
        return self.message


class VersionParseError(VersionCheckError):
    """A version string failed semantic version parsing.

    Attributes:
        version_string: The raw string that failed to parse.
        role: Which side failed, "current" or "minimum".

    Example:
        >>> raise VersionParseError("not-a-version", role="current", reason="...")
    """

    def __init__(self, version_string: str, role: str, reason: str) -> None:
        """Initialize VersionParseError.

        Args:
            version_string: The raw string that failed to parse.
            role: "current" for the server version, "minimum" for the requirement.
            reason: Parser error text.
        """
        super().__init__(
            f"invalid {role} kubernetes version {version_string!r}: {reason}",
            details={"version_string": version_string, "role": role},
        )
        self.version_string = version_string
        self.role = role


class IncompatibleVersionError(VersionCheckError):
    """Server version is lower than the effective minimum version.

    Attributes:
        current_version: Server version as parsed (without ``v`` prefix).
        minimum_version: Effective minimum, including an injected ``-0``.
        override_key: Environment variable that overrides the minimum.
        is_prerelease: Whether the server version is a pre-release.
    """

    def __init__(
        self,
        current_version: str,
        minimum_version: str,
        override_key: str,
        *,
        is_prerelease: bool = False,
    ) -> None:
        """Initialize IncompatibleVersionError.

        Args:
            current_version: Server version string.
            minimum_version: Effective minimum version string.
            override_key: Name of the override environment variable.
            is_prerelease: Add the pre-release ordering note to the message.
        """
        prefix = "pre-release kubernetes" if is_prerelease else "kubernetes"
        message = (
            f'{prefix} version "{current_version}" is not compatible, '
            f'need at least "{minimum_version}" '
            f'(this can be overridden with the env var "{override_key}")'
        )
        if is_prerelease:
            message = f"{message}; {PRERELEASE_NOTE}"

        super().__init__(
            message,
            details={
                "current_version": current_version,
                "minimum_version": minimum_version,
                "override_key": override_key,
                "is_prerelease": is_prerelease,
            },
        )
        self.current_version = current_version
        self.minimum_version = minimum_version
        self.override_key = override_key
        self.is_prerelease = is_prerelease


__all__ = [
    "IncompatibleVersionError",
    "PRERELEASE_NOTE",
    "VersionCheckError",
    "VersionParseError",
]
