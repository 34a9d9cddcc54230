#!/usr/bin/env python3
"""
File and path helpers.

Path helpers work on plain strings with ``/`` separators, the form used in
generated scripts and configuration.
"""

import glob
import os
from pathlib import Path
from typing import Iterable, Optional

from cloudops_utils.domain.strings import join

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "files",
        "description": "File and path helpers",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def format_path(*parts: str) -> str:
    return join("/", *parts)


def file_path(file: str) -> str:
    """Directory part of a path, empty if there is none."""
    return file.rsplit("/", 1)[0] if "/" in file else ""


def file_name(file: str) -> str:
    return file.rsplit("/", 1)[-1]


def file_base(file: str) -> str:
    """File name without its last extension."""
    name = file_name(file)
    return name.rsplit(".", 1)[0] if "." in name else name


def file_extension(file: str) -> str:
    """Last extension of the file name, or the whole name if it has none."""
    return file_name(file).rsplit(".", 1)[-1]


def file_contents(file: str | Path) -> Optional[str]:
    """Contents of a file, or None if it is not a regular file."""
    path = Path(file)
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8")


def first_file_contents(files: Iterable[str | Path]) -> Optional[str]:
    """Contents of the first file in ``files`` that exists."""
    for file in files:
        contents = file_contents(file)
        if contents is not None:
            return contents
    return None


def find_ancestor_dir(ancestor: str, current: Optional[str] = None) -> Optional[str]:
    """Walk up from ``current`` to a directory named ``ancestor`` or containing a marker file of that name.

    For absolute paths the filesystem root is checked last.

    Returns:
        Matching directory, or None
    """
    current = current if current is not None else os.getcwd()
    while current:
        if file_name(current) == ancestor or os.path.isfile(os.path.join(current, ancestor)):
            return current
        if current == "/":
            break
        parent = file_path(current)
        # file_path("/etc") is empty, so step to the root explicitly
        current = "/" if not parent and current.startswith("/") else parent
    return None


def _glob_all(patterns: Iterable[str]) -> list[str]:
    matches: list[str] = []
    for pattern in patterns:
        matches.extend(sorted(glob.glob(pattern, recursive=True)))
    return matches


def find_dir(root_dir: str, *patterns: str) -> Optional[str]:
    """Find the first directory below ``root_dir`` matching any pattern.

    A file match yields the directory containing the file.
    """
    for match in _glob_all(f"{root_dir}/**/{pattern}" for pattern in patterns):
        if os.path.isfile(match):
            return file_path(match)
        if os.path.isdir(match):
            return match
    return None


def find_file(*patterns: str) -> Optional[str]:
    """First regular file matching any of the glob patterns (``**`` allowed)."""
    for match in _glob_all(patterns):
        if os.path.isfile(match):
            return match
    return None


def find_files(*patterns: str) -> list[str]:
    """All regular files matching the glob patterns, in pattern order."""
    return [match for match in _glob_all(patterns) if os.path.isfile(match)]


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
