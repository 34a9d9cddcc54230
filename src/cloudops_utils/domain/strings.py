#!/usr/bin/env python3
"""
String helpers.

Joining, regex containment and secure random string generation.
"""

import re
import secrets
import string

__version__ = "0.1.0"
__author__ = "John Ayers"

ALPHANUMERIC = "alphanumeric"
COMPLEX = "complex"

# Characters that are awkward in shell and URL contexts
EXCLUDED_PUNCTUATION = '@"/+'

CHARSETS = {
    ALPHANUMERIC: string.ascii_letters + string.digits,
    COMPLEX: string.ascii_letters
    + string.digits
    + "".join(c for c in string.punctuation if c not in EXCLUDED_PUNCTUATION),
}


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "strings",
        "description": "String helpers",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def join(separator: str, *items: str) -> str:
    """Join items with a separator.

    Args:
        separator: Text placed between consecutive items
        *items: Items to join

    Returns:
        Joined string, empty when there are no items
    """
    return separator.join(str(item) for item in items)


def contains(haystack: str, pattern: str) -> bool:
    """Check whether a regular expression matches anywhere in a string.

    Args:
        haystack: String to search
        pattern: Regular expression

    Returns:
        True if pattern matches
    """
    return re.search(pattern, haystack) is not None


def generate_random_string(length: int, kind: str = ALPHANUMERIC) -> str:
    """Generate a random string from a cryptographically secure source.

    Args:
        length: Exact number of characters
        kind: ``alphanumeric`` or ``complex`` (alphanumeric plus punctuation)

    Returns:
        Random string of the requested length

    Raises:
        ValueError: If length is negative or kind is unknown
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    try:
        charset = CHARSETS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown charset kind {kind!r}; expected one of {sorted(CHARSETS)}"
        ) from None

    return "".join(secrets.choice(charset) for _ in range(length))


def generate_simple_string(length: int) -> str:
    """Random alphanumeric string."""
    return generate_random_string(length, ALPHANUMERIC)


def generate_complex_string(length: int) -> str:
    """Random string suitable for a password."""
    return generate_random_string(length, COMPLEX)


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
