#!/usr/bin/env python3
"""
cloudops-utils: helper library for devops automation scripts.

Provides logging, collection and string helpers, a scoped temp-directory stack,
JSON querying, and a thin typed client layer over AWS services.
"""

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "__init__",
        "description": "Package initialization for cloudops-utils",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }
