#!/usr/bin/env python3
"""
Classification of AWS errors.

Calls are never repeated here. The helpers only tell callers which kind of
failure they are looking at so it can be logged and, for expired
credentials, the cached sessions dropped before the error propagates.
"""

import logging

from botocore.exceptions import (
    ClientError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "aws_errors",
        "description": "Classification of AWS errors",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


# AWS error codes for throttling and service-side hiccups
TRANSIENT_ERROR_CODES = {
    "Throttling",
    "ThrottlingException",
    "TooManyRequestsException",
    "RequestLimitExceeded",
    "ServiceUnavailable",
    "InternalError",
    "InternalFailure",
    "RequestTimeout",
    "RequestTimeoutException",
}

# AWS error codes that mean the current credentials are no longer valid
CREDENTIAL_ERROR_CODES = {
    "ExpiredToken",
    "ExpiredTokenException",
    "InvalidClientTokenId",
    "UnrecognizedClientException",
}

CONNECTION_ERRORS = (EndpointConnectionError, ConnectTimeoutError, ReadTimeoutError)


def error_code(error: Exception) -> str:
    """Extract the AWS error code from a ClientError, or empty string."""
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Code", "")
    return ""


def is_transient_error(error: Exception) -> bool:
    """Check if an error is a throttling, timeout or connection failure.

    A request that timed out may still have been applied on the server, so
    these are reported to the caller rather than re-sent.

    Args:
        error: The exception to check

    Returns:
        True if the error is transient
    """
    if isinstance(error, CONNECTION_ERRORS):
        return True
    return error_code(error) in TRANSIENT_ERROR_CODES


def is_credential_error(error: Exception) -> bool:
    """Check if an error is caused by expired or invalid credentials."""
    return error_code(error) in CREDENTIAL_ERROR_CODES


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
