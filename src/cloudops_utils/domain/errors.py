#!/usr/bin/env python3
"""
Error taxonomy for cloudops-utils.

Each error carries the sentinel exit code a calling script should return.
"""

__version__ = "0.1.0"
__author__ = "John Ayers"

EXIT_SUCCESS = 0
EXIT_MANDATORY = 1
EXIT_USERNAME_MISMATCH = 128
EXIT_FAILURE = 255


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "errors",
        "description": "Error taxonomy and exit code sentinels",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class CloudOpsError(Exception):
    """Base error for all failures raised by this package."""

    exit_code = EXIT_FAILURE


class MandatoryArgumentError(CloudOpsError, ValueError):
    """Raised before any external call when a required argument is missing."""

    exit_code = EXIT_MANDATORY

    def __init__(self, *names: str) -> None:
        self.names = names
        detail = f": {', '.join(names)}" if names else ""
        super().__init__(f"Mandatory arguments missing{detail}. Check usage via -h option.")


class GitOperationError(CloudOpsError):
    """A git command failed."""

    exit_code = EXIT_MANDATORY


class ResourceNotFoundError(CloudOpsError):
    """An AWS resource expected to exist was not found."""


class SnapshotNotFoundError(ResourceNotFoundError):
    """An RDS snapshot was not found."""


class SnapshotStateError(CloudOpsError):
    """An RDS snapshot is in a state that does not allow the operation."""


class SnapshotTimeoutError(CloudOpsError):
    """An RDS snapshot did not become available within the allowed number of status checks."""


class SnapshotUsernameMismatchError(CloudOpsError):
    """The master username recorded in a snapshot differs from the configured one."""

    exit_code = EXIT_USERNAME_MISMATCH

    def __init__(self, snapshot_username: str, expected_username: str) -> None:
        self.snapshot_username = snapshot_username
        self.expected_username = expected_username
        super().__init__(
            f"Snapshot username {snapshot_username!r} does not match "
            f"configured username {expected_username!r}"
        )


class DomainOwnershipError(CloudOpsError):
    """A Cognito domain is attached to a different user pool."""

    def __init__(self, domain: str, owner_pool_id: str) -> None:
        self.domain = domain
        self.owner_pool_id = owner_pool_id
        super().__init__(f"User Pool Domain {domain} is used by userpool {owner_pool_id}")


class AccessKeyError(CloudOpsError):
    """An IAM access key could not be generated."""


class PipelineError(CloudOpsError):
    """A Data Pipeline operation did not produce the expected result."""


class DeploymentError(CloudOpsError):
    """A create or update call returned no identifier for the resource."""


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
