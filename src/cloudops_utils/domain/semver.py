#!/usr/bin/env python3
"""
Semantic version parsing and comparison.

Follows the semver-tool conventions: numeric major/minor/patch, and
prerelease labels compared by plain ASCII order.
"""

import re
from dataclasses import dataclass
from typing import Optional

__version__ = "0.1.0"
__author__ = "John Ayers"

SEMVER_PATTERN = re.compile(
    r"^v?(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)(?:-([^+]+))?(?:\+(.*))?$"
)


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "semver",
        "description": "Semantic version parsing and comparison",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


@dataclass(frozen=True)
class SemanticVersion:
    """Immutable semantic version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Prerelease label without the leading dash (optional)
        build: Build metadata without the leading plus (optional)
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build: Optional[str] = None

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        """Parse a version string such as ``v1.2.3-rc.1+build5``.

        Raises:
            ValueError: If text is not a valid semantic version
        """
        match = SEMVER_PATTERN.match(text or "")
        if not match:
            raise ValueError(f"Invalid semantic version: {text!r}")
        major, minor, patch, prerelease, build = match.groups()
        return cls(
            major=int(major),
            minor=int(minor),
            patch=int(patch),
            prerelease=prerelease or None,
            build=build or None,
        )

    def compare(self, other: "SemanticVersion") -> int:
        """Compare with another version.

        Build metadata is ignored. A version without a prerelease sorts
        before one that has a prerelease.

        Returns:
            -1, 0 or 1
        """
        for mine, theirs in (
            (self.major, other.major),
            (self.minor, other.minor),
            (self.patch, other.patch),
        ):
            if mine != theirs:
                return -1 if mine < theirs else 1

        if self.prerelease is None and other.prerelease is not None:
            return -1
        if self.prerelease is not None and other.prerelease is None:
            return 1
        if self.prerelease is not None and other.prerelease is not None:
            if self.prerelease > other.prerelease:
                return 1
            if self.prerelease < other.prerelease:
                return -1
        return 0

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += f"-{self.prerelease}"
        if self.build:
            text += f"+{self.build}"
        return text


def semver_validate(text: str) -> Optional[SemanticVersion]:
    """Parse a version, returning None instead of raising when invalid."""
    try:
        return SemanticVersion.parse(text)
    except ValueError:
        return None


def semver_compare(first: str, second: str) -> int:
    """Compare two version strings.

    Returns:
        -1 if first < second, 0 if equal, 1 if first > second

    Raises:
        ValueError: If either version is invalid
    """
    return SemanticVersion.parse(first).compare(SemanticVersion.parse(second))


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
