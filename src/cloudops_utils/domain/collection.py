#!/usr/bin/env python3
"""
Collection helpers operating on lists in place.

Callers pass the list itself and observe the mutation after the call. All
operations on an empty list are no-ops.
"""

import re
from typing import Optional

from cloudops_utils.domain.strings import contains, join

__version__ = "0.1.0"
__author__ = "John Ayers"

DEFAULT_SEPARATORS = " ,"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "collection",
        "description": "In-place list helpers",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def array_from_list(text: str, separators: str = DEFAULT_SEPARATORS) -> list[str]:
    """Split text into items.

    Newlines are treated as separators, so multi-line input (one item per
    line) and single-line delimited input give the same result.

    Args:
        text: Text to split
        separators: Every character is a delimiter

    Returns:
        List of non-empty items in order
    """
    if not text:
        return []
    delimiters = re.escape(separators + "\r\n")
    return [item for item in re.split(f"[{delimiters}]+", text) if item]


def list_from_array(collection: list[str], separator: str = " ") -> str:
    """Join a collection back into a single string."""
    return join(separator, *collection)


def size(collection: list[str]) -> int:
    return len(collection)


def is_empty(collection: list[str]) -> bool:
    return len(collection) == 0


def in_array(collection: list[str], pattern: str) -> bool:
    """Check whether a regular expression matches the space-joined collection."""
    return contains(" ".join(collection), pattern)


def push(collection: list[str], *items: str) -> list[str]:
    """Append items to the end, skipping empty ones.

    Returns:
        The same list, for chaining
    """
    collection.extend(item for item in items if item)
    return collection


def push_front(collection: list[str], *items: str) -> list[str]:
    """Prepend items one at a time, skipping empty ones.

    Each item goes on the head in turn, so the last argument ends up first.

    Returns:
        The same list, for chaining
    """
    for item in items:
        if item:
            collection.insert(0, item)
    return collection


def pop(collection: list[str], count: int = 1) -> list[str]:
    """Remove up to ``count`` items from the end.

    Returns:
        Removed items in their original order
    """
    count = max(0, min(count, len(collection)))
    if count == 0:
        return []
    removed = collection[-count:]
    del collection[-count:]
    return removed


def pop_front(collection: list[str], count: int = 1) -> list[str]:
    """Remove up to ``count`` items from the front.

    Returns:
        Removed items in their original order
    """
    count = max(0, min(count, len(collection)))
    removed = collection[:count]
    del collection[:count]
    return removed


def reverse(collection: list[str], target: Optional[list[str]] = None) -> list[str]:
    """Reverse a collection.

    Args:
        collection: Source list
        target: Optional list to receive the reversed items. Its previous
            contents are replaced and ``collection`` is left untouched.

    Returns:
        The list holding the reversed items
    """
    if target is None:
        collection.reverse()
        return collection
    target[:] = collection[::-1]
    return target


# Stack aliases: the head of the list is the top of the stack
push_stack = push_front
pop_stack = pop_front


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
