#!/usr/bin/env python3
"""
Configuration management for cloudops-utils.

Handles loading and validation of configuration from the environment.
"""

import os
from dataclasses import dataclass
from typing import Optional

from cloudops_utils.domain.log_level import LogLevel

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "config",
        "description": "Configuration management",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class UtilityConfig:
    """Runtime settings.

    Attributes:
        region: AWS region; None lets boto3 resolve it
        debug: Whether the debug toggle is set
        log_level: Log threshold
        temp_root: Override for the scratch directory root (optional)
        settle_delay: Seconds to wait before the first status check after a create/copy
        poll_interval: Seconds between availability checks
        max_poll_attempts: Availability checks before giving up
    """

    region: Optional[str] = None
    debug: bool = False
    log_level: LogLevel = LogLevel.INFO
    temp_root: Optional[str] = None
    settle_delay: int = 2
    poll_interval: int = 30
    max_poll_attempts: int = 60

    @classmethod
    def from_env(cls) -> "UtilityConfig":
        """Load configuration from environment variables.

        Returns:
            UtilityConfig instance

        Raises:
            ValueError: If a numeric variable is not an integer
        """
        debug = bool(os.getenv("CLOUDOPS_DEBUG"))
        if debug:
            log_level = LogLevel.DEBUG
        else:
            log_level = LogLevel.parse(os.getenv("CLOUDOPS_LOG_LEVEL")) or LogLevel.INFO

        return cls(
            region=os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION"),
            debug=debug,
            log_level=log_level,
            temp_root=os.getenv("CLOUDOPS_TMP_ROOT") or None,
            settle_delay=_int_from_env("CLOUDOPS_SETTLE_DELAY", 2),
            poll_interval=_int_from_env("CLOUDOPS_POLL_INTERVAL", 30),
            max_poll_attempts=_int_from_env("CLOUDOPS_MAX_POLL_ATTEMPTS", 60),
        )

    @staticmethod
    def git_credentials(provider: str) -> str:
        """Credentials for a git provider, read from ``<PROVIDER>_CREDENTIALS``.

        Returns:
            Credential string (``user:token``), empty if unset
        """
        return os.getenv(f"{provider.upper()}_CREDENTIALS", "")


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
