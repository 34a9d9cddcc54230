#!/usr/bin/env python3
"""
Domain layer for cloudops-utils.

Pure logic with no I/O: log levels, collections, versions, resource models and errors.
"""

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "domain.__init__",
        "description": "Domain layer initialization",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }
