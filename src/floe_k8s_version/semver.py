"""Semantic version parsing and precedence for Kubernetes server versions.

This module implements SemVer 2.0.0 parsing and ordering for the version
strings reported by a Kubernetes API server (``gitVersion``). Server versions
carry a leading ``v`` (``v1.18.0``) which is stripped by normalize_version()
before parsing.

Precedence rules:
- MAJOR, MINOR, PATCH compare numerically
- A version without pre-release identifiers ranks above one with them
- Numeric pre-release identifiers compare numerically and rank below
  alphanumeric identifiers, which compare in ASCII order
- A longer pre-release list ranks higher when all shared identifiers match
- Build metadata never affects precedence or equality

Example:
    >>> from floe_k8s_version.semver import parse_version
    >>> parse_version("v1.18.0-alpha") < parse_version("1.18.0")
    True
    >>> str(parse_version("v1.20.4-gke.1801"))
    '1.20.4-gke.1801'
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from functools import total_ordering

# SemVer 2.0.0 grammar. No leading zeros on numeric parts.
_NUMERIC = r"0|[1-9]\d*"
_PRERELEASE_PART = r"0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*"
_BUILD_PART = r"[0-9a-zA-Z-]+"

SEMVER_PATTERN = re.compile(
    rf"(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>(?:{_PRERELEASE_PART})(?:\.(?:{_PRERELEASE_PART}))*))?"
    rf"(?:\+(?P<build>{_BUILD_PART}(?:\.{_BUILD_PART})*))?",
    re.ASCII,
)


def normalize_version(version: str) -> str:
    """Strip a single leading lowercase ``v`` from a version string.

    No whitespace trimming and no other prefixes are handled.

    Args:
        version: Raw version string, e.g. "v1.18.0".

    Returns:
        The version without its ``v`` prefix.

    Example:
        >>> normalize_version("v1.18.0")
        '1.18.0'
        >>> normalize_version("V1.18.0")
        'V1.18.0'
    """
    if version.startswith("v"):
        return version[1:]
    return version


@total_ordering
@dataclass(frozen=True)
class PrereleaseIdentifier:
    """A single dot-separated pre-release identifier.

    Attributes:
        value: Integer for all-digit identifiers, string otherwise.
    """

    value: int | str

    @classmethod
    def parse(cls, identifier: str) -> PrereleaseIdentifier:
        """Build an identifier, converting all-digit input to an integer.

        Args:
            identifier: Identifier text (e.g. "alpha", "0", "1801").

        Returns:
            PrereleaseIdentifier instance.

        Raises:
            ValueError: If the identifier is empty, contains characters
                outside ``[0-9A-Za-z-]`` or is numeric with a leading zero.
        """
        if not identifier:
            raise ValueError("Pre-release identifier cannot be empty")
        if not re.fullmatch(r"[0-9a-zA-Z-]+", identifier, re.ASCII):
            raise ValueError(f"Invalid character(s) in pre-release identifier {identifier!r}")
        if identifier.isdigit():
            if len(identifier) > 1 and identifier.startswith("0"):
                raise ValueError(
                    f"Numeric pre-release identifier must not have leading zeroes {identifier!r}"
                )
            return cls(int(identifier))
        return cls(identifier)

    @property
    def is_numeric(self) -> bool:
        """Whether the identifier compares numerically."""
        return isinstance(self.value, int)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PrereleaseIdentifier):
            return NotImplemented
        if self.is_numeric and other.is_numeric:
            return self.value < other.value  # type: ignore[operator]
        if self.is_numeric != other.is_numeric:
            # Numeric identifiers always have lower precedence
            return self.is_numeric
        return str(self.value) < str(other.value)

    def __str__(self) -> str:
        return str(self.value)


@total_ordering
@dataclass(frozen=True)
class SemanticVersion:
    """Semantic version (MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]).

    Equality and ordering follow SemVer precedence, so build metadata is
    excluded from both.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        prerelease: Ordered pre-release identifiers (empty for a release).
        build: Build metadata identifiers, informational only.

    Example:
        >>> v = SemanticVersion.parse("1.18.0-rc.1")
        >>> v.prerelease
        (PrereleaseIdentifier(value='rc'), PrereleaseIdentifier(value=1))
        >>> v < SemanticVersion(1, 18, 0)
        True
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[PrereleaseIdentifier, ...] = ()
    build: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} version must be non-negative")

    @classmethod
    def parse(cls, version_str: str) -> SemanticVersion:
        """Parse a SemVer 2.0.0 string.

        The string must not carry a ``v`` prefix; use parse_version() for
        raw server versions.

        Args:
            version_str: Version string (e.g. "1.18.0", "1.21.2+k3s1").

        Returns:
            Parsed SemanticVersion.

        Raises:
            ValueError: If the string does not match SemVer grammar.
        """
        if not version_str:
            raise ValueError("Version string empty")

        match = SEMVER_PATTERN.fullmatch(version_str)
        if match is None:
            raise ValueError(f"Invalid semantic version {version_str!r}")

        prerelease_str = match.group("prerelease")
        build_str = match.group("build")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=tuple(
                PrereleaseIdentifier.parse(part) for part in prerelease_str.split(".")
            )
            if prerelease_str
            else (),
            build=tuple(build_str.split(".")) if build_str else (),
        )

    @property
    def is_prerelease(self) -> bool:
        """Whether the version carries pre-release identifiers."""
        return bool(self.prerelease)

    def with_prerelease(self, *identifiers: int | str) -> SemanticVersion:
        """Return a copy with the given pre-release identifiers.

        Example:
            >>> str(SemanticVersion(1, 18, 0).with_prerelease(0))
            '1.18.0-0'
        """
        return replace(
            self,
            prerelease=tuple(PrereleaseIdentifier.parse(str(i)) for i in identifiers),
        )

    def compare(self, other: SemanticVersion) -> int:
        """Compare by SemVer precedence.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other.
        """
        for mine, theirs in (
            (self.major, other.major),
            (self.minor, other.minor),
            (self.patch, other.patch),
        ):
            if mine != theirs:
                return 1 if mine > theirs else -1

        if not self.prerelease and not other.prerelease:
            return 0
        if not self.prerelease:
            return 1
        if not other.prerelease:
            return -1

        for mine_id, theirs_id in zip(self.prerelease, other.prerelease):
            if mine_id != theirs_id:
                return -1 if mine_id < theirs_id else 1

        if len(self.prerelease) == len(other.prerelease):
            return 0
        return -1 if len(self.prerelease) < len(other.prerelease) else 1

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) < 0

    def __str__(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += "-" + ".".join(str(p) for p in self.prerelease)
        if self.build:
            version += "+" + ".".join(self.build)
        return version


def parse_version(version: str) -> SemanticVersion:
    """Normalize and parse a raw version string.

    Args:
        version: Raw version, with or without a ``v`` prefix.

    Returns:
        Parsed SemanticVersion.

    Raises:
        ValueError: If the normalized string is not a valid semantic version.
    """
    return SemanticVersion.parse(normalize_version(version))


__all__ = [
    "PrereleaseIdentifier",
    "SEMVER_PATTERN",
    "SemanticVersion",
    "normalize_version",
    "parse_version",
]
