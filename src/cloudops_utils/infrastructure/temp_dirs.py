#!/usr/bin/env python3
"""
Temporary directory management.

A process-wide stack of scratch directories. New directories are created
beneath the current top so nested scopes share one tree. Use ``scoped()`` so
the stack stays balanced on error paths.
"""

import logging
import os
import platform
import shutil
import tempfile
from contextlib import contextmanager
from typing import Iterator, Optional

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)

TEMP_ROOT_ENV_VAR = "CLOUDOPS_TMP_ROOT"

# Fixed temp root used under Git Bash / MSYS on Windows
MINGW_TEMP_ROOT = "c:/tmp"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "temp_dirs",
        "description": "Temporary directory management",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def get_os_temp_root() -> str:
    """OS temporary directory root."""
    if "MINGW64" in platform.system().upper():
        return MINGW_TEMP_ROOT
    return tempfile.gettempdir()


def get_temp_root() -> str:
    """Root for scratch directories, honouring the CLOUDOPS_TMP_ROOT override."""
    return os.getenv(TEMP_ROOT_ENV_VAR) or get_os_temp_root()


def get_temp_dir(prefix: str = "", parent: Optional[str] = None) -> str:
    """Create a uniquely named directory.

    Args:
        prefix: Directory name prefix
        parent: Directory to create it in; defaults to the temp root

    Returns:
        Path of the new directory
    """
    return tempfile.mkdtemp(prefix=prefix, dir=parent or get_temp_root())


def get_temp_file(prefix: str = "", parent: Optional[str] = None, suffix: str = "") -> str:
    """Create a uniquely named empty file and return its path."""
    fd, path = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=parent or get_temp_root())
    os.close(fd)
    return path


class TempDirStack:
    """Stack of scratch directories; index 0 is the top."""

    def __init__(self) -> None:
        self._dirs: list[str] = []

    def __len__(self) -> int:
        return len(self._dirs)

    @property
    def depth(self) -> int:
        return len(self._dirs)

    def entries(self) -> list[str]:
        """Copy of the stack contents, top first."""
        return list(self._dirs)

    def push(self, prefix: str = "") -> str:
        """Create a directory under the current top and push it.

        Returns:
            Path of the new directory
        """
        tmp_dir = get_temp_dir(prefix, self.top() or None)
        self._dirs.insert(0, tmp_dir)
        logger.debug(f"Pushed temp dir {tmp_dir} (depth {len(self._dirs)})")
        return tmp_dir

    def pop(self, count: int = 1) -> list[str]:
        """Remove up to ``count`` entries from the top.

        The directories are left on disk.

        Returns:
            Removed paths, top first
        """
        count = max(0, min(count, len(self._dirs)))
        removed = self._dirs[:count]
        del self._dirs[:count]
        return removed

    def top(self) -> str:
        """Current top entry, or empty string when the stack is empty."""
        return self._dirs[0] if self._dirs else ""

    @contextmanager
    def scoped(self, prefix: str = "", cleanup: bool = True) -> Iterator[str]:
        """Push a directory for the duration of a ``with`` block.

        The entry is always popped on exit, including when the block raises.

        Args:
            prefix: Directory name prefix
            cleanup: Remove the directory tree on exit

        Yields:
            Path of the scratch directory
        """
        depth = len(self._dirs)
        tmp_dir = self.push(prefix)
        try:
            yield tmp_dir
        finally:
            self.pop(len(self._dirs) - depth)
            if cleanup:
                shutil.rmtree(tmp_dir, ignore_errors=True)


# Global singleton instance
_temp_dir_stack = TempDirStack()


def get_temp_dir_stack() -> TempDirStack:
    """Get the global temp directory stack.

    Returns:
        Global TempDirStack instance
    """
    return _temp_dir_stack


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
