#!/usr/bin/env python3
"""
Subprocess helpers.

Thin wrappers around ``subprocess`` for the external tools the library still
shells out to.
"""

import logging
import os
import shlex
import subprocess
from typing import Optional, Sequence

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "commands",
        "description": "Subprocess helpers",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def _as_argv(cmd: str | Sequence[str]) -> list[str]:
    return shlex.split(cmd) if isinstance(cmd, str) else list(cmd)


def run_cmd(
    cmd: str | Sequence[str],
    *,
    env: Optional[dict[str, str]] = None,
    cwd: Optional[str] = None,
    check: bool = True,
    quiet: bool = False,
) -> int:
    """Run a command, inheriting stdout/stderr.

    Args:
        cmd: Command as an argv list or a shell-style string
        env: Extra environment variables
        cwd: Working directory
        check: Raise CalledProcessError on a non-zero exit
        quiet: Discard the command's output

    Returns:
        Exit code
    """
    argv = _as_argv(cmd)
    logger.debug(f"$ {shlex.join(argv)}")
    merged = os.environ.copy()
    if env:
        merged.update(env)
    output = subprocess.DEVNULL if quiet else None
    p = subprocess.run(argv, env=merged, cwd=cwd, stdout=output, stderr=output)
    if check and p.returncode != 0:
        raise subprocess.CalledProcessError(p.returncode, argv)
    return p.returncode


def run_output(
    cmd: str | Sequence[str],
    *,
    env: Optional[dict[str, str]] = None,
    cwd: Optional[str] = None,
) -> str:
    """Run a command and return its standard output as text.

    Raises:
        subprocess.CalledProcessError: If the command exits non-zero
    """
    argv = _as_argv(cmd)
    logger.debug(f"$ {shlex.join(argv)}")
    merged = os.environ.copy()
    if env:
        merged.update(env)
    return subprocess.check_output(argv, env=merged, cwd=cwd, text=True)


def array_from_command(cmd: str | Sequence[str], cwd: Optional[str] = None) -> list[str]:
    """Run a command and return its output lines."""
    return run_output(cmd, cwd=cwd).splitlines()


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
