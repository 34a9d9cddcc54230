#!/usr/bin/env python3
"""
boto3 session management.

Caches one session per region and provides the base class every AWS
repository builds on.
"""

import logging
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

import boto3

from cloudops_utils.infrastructure.aws_errors import error_code, is_credential_error, is_transient_error

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Key used for the session whose region boto3 resolves itself
DEFAULT_REGION_KEY = "<default>"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "session_manager",
        "description": "boto3 session management",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class SessionManager:
    """Caches boto3 sessions per region.

    Not thread-safe; the library assumes a single call chain at a time.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, boto3.Session] = {}

    def clear_sessions(self) -> None:
        """Clear all cached sessions to force credential reload."""
        logger.info("Clearing cached AWS sessions to refresh credentials")
        self._sessions.clear()

    def get_session(self, region: Optional[str] = None) -> boto3.Session:
        """Get or create a boto3 session for a region.

        Args:
            region: AWS region; None uses boto3's own resolution chain

        Returns:
            boto3 Session
        """
        key = region or DEFAULT_REGION_KEY
        if key not in self._sessions:
            logger.debug(f"Creating new session for region {key}")
            self._sessions[key] = boto3.Session(region_name=region)
        return self._sessions[key]

    def client(self, service: str, region: Optional[str] = None) -> Any:
        """Create a boto3 client for a service in a region."""
        return self.get_session(region).client(service)


# Global singleton instance
_session_manager = SessionManager()


def get_session_manager() -> SessionManager:
    """Get the global session manager instance.

    Returns:
        Global SessionManager instance
    """
    return _session_manager


def aws_call(func: Callable[..., T]) -> Callable[..., T]:
    """Make a single AWS call, logging failures before they propagate.

    Nothing is re-sent: a timed-out create may already have been applied.
    On expired credentials the cached sessions are dropped so the next
    call picks up fresh ones.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return func(*args, **kwargs)
        except Exception as e:
            if is_credential_error(e):
                logger.warning(
                    f"Credential error in {func.__name__} ({error_code(e)}); "
                    "dropping cached sessions"
                )
                _session_manager.clear_sessions()
            elif is_transient_error(e):
                logger.warning(f"Transient error in {func.__name__}, not retried: {e}")
            raise

    return wrapper


class AWSRepository:
    """Base class for repositories wrapping a single AWS service."""

    service_name = ""

    def __init__(
        self, region: Optional[str] = None, session_manager: Optional[SessionManager] = None
    ) -> None:
        """Initialize the repository.

        Args:
            region: AWS region; None lets boto3 resolve it
            session_manager: Session cache; defaults to the global instance
        """
        self.region = region
        self._session_manager = session_manager or get_session_manager()

    def _client(self, service: Optional[str] = None) -> Any:
        """Get a boto3 client for this repository's service (or another one)."""
        return self._session_manager.client(service or self.service_name, self.region)


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
