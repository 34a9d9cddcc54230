#!/usr/bin/env python3
"""
Service for RDS snapshot workflows.

Creates snapshots with bounded polling, converts plaintext snapshots to
encrypted ones in place, and checks snapshot master usernames.
"""

import logging
import time
from typing import Any, Optional, Protocol

from cloudops_utils.domain.errors import (
    SnapshotNotFoundError,
    SnapshotStateError,
    SnapshotTimeoutError,
    SnapshotUsernameMismatchError,
)
from cloudops_utils.domain.snapshot import DBSnapshot

logger = logging.getLogger(__name__)

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "snapshot_service",
        "description": "Service for RDS snapshot workflows",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class SnapshotRepository(Protocol):
    """Protocol defining interface for snapshot operations.

    Infrastructure layer must implement this protocol.
    """

    def describe_instance(self, db_identifier: str) -> dict[str, Any]:
        ...

    def create_snapshot(self, db_identifier: str, snapshot_identifier: str) -> DBSnapshot:
        ...

    def describe_snapshot(
        self, snapshot_identifier: str, include_shared: bool = False
    ) -> Optional[DBSnapshot]:
        ...

    def copy_snapshot(
        self, source_identifier: str, target_identifier: str, kms_key_id: Optional[str] = None
    ) -> DBSnapshot:
        ...

    def delete_snapshot(self, snapshot_identifier: str) -> None:
        ...

    def wait_for_snapshot(self, snapshot_identifier: str, state: str = "available") -> None:
        """Block until the snapshot reaches ``available`` or ``deleted``."""
        ...


class SnapshotService:
    """Application service for RDS snapshot operations."""

    def __init__(
        self,
        snapshot_repo: SnapshotRepository,
        settle_delay: float = 2,
        poll_interval: float = 30,
        max_poll_attempts: int = 60,
    ) -> None:
        """Initialize the snapshot service.

        Args:
            snapshot_repo: Repository for snapshot operations
            settle_delay: Seconds to wait after a create/copy before polling
            poll_interval: Seconds between status checks while creating
            max_poll_attempts: Status checks before giving up
        """
        self.snapshot_repo = snapshot_repo
        self.settle_delay = settle_delay
        self.poll_interval = poll_interval
        self.max_poll_attempts = max_poll_attempts

    def _require_snapshot(self, snapshot_identifier: str, include_shared: bool = False) -> DBSnapshot:
        snapshot = self.snapshot_repo.describe_snapshot(snapshot_identifier, include_shared)
        if snapshot is None:
            logger.error(f"Snapshot {snapshot_identifier} - Not Found")
            raise SnapshotNotFoundError(f"Snapshot {snapshot_identifier} not found")
        return snapshot

    def create_snapshot(self, db_identifier: str, snapshot_identifier: str) -> DBSnapshot:
        """Snapshot a DB instance and wait until the snapshot is available.

        Args:
            db_identifier: DB instance identifier
            snapshot_identifier: Identifier for the new snapshot

        Returns:
            The available snapshot

        Raises:
            SnapshotStateError: If the snapshot enters a failed state
            SnapshotTimeoutError: If it is not available after max_poll_attempts checks
        """
        # Fails with DBInstanceNotFound before anything is created
        self.snapshot_repo.describe_instance(db_identifier)

        self.snapshot_repo.create_snapshot(db_identifier, snapshot_identifier)
        time.sleep(self.settle_delay)

        snapshot: Optional[DBSnapshot] = None
        for attempt in range(1, self.max_poll_attempts + 1):
            snapshot = self._require_snapshot(snapshot_identifier)
            logger.info(
                f"Snapshot id {snapshot_identifier} creation: state is {snapshot.status}, "
                f"{snapshot.percent_progress}%..."
            )

            if snapshot.is_available():
                logger.info(f"Snapshot Created - {snapshot.describe()}")
                return snapshot

            if snapshot.has_failed():
                raise SnapshotStateError(
                    f"Snapshot {snapshot_identifier} entered state {snapshot.status}"
                )

            if attempt < self.max_poll_attempts:
                time.sleep(self.poll_interval)

        last_status = snapshot.status if snapshot else "unknown"
        raise SnapshotTimeoutError(
            f"Snapshot {snapshot_identifier} not available after "
            f"{self.max_poll_attempts} checks (last state: {last_status})"
        )

    def encrypt_snapshot(self, snapshot_identifier: str, kms_key_id: str) -> DBSnapshot:
        """Replace a plaintext snapshot with an encrypted copy of the same name.

        The snapshot is copied to ``encrypted-<id>`` with the KMS key, the
        plaintext original is deleted, the encrypted copy is copied back to
        the original identifier, and the temporary copy is deleted.

        Args:
            snapshot_identifier: Snapshot to convert
            kms_key_id: KMS key for the encrypted copy

        Returns:
            The resulting snapshot (unchanged if already encrypted)

        Raises:
            SnapshotNotFoundError: If the snapshot does not exist
            SnapshotStateError: If the snapshot is not available
        """
        snapshot = self._require_snapshot(snapshot_identifier)

        if not snapshot.is_available():
            raise SnapshotStateError(
                f"Snapshot not in a usable state: {snapshot_identifier} is {snapshot.status}"
            )

        if snapshot.encrypted:
            logger.info(f"Snapshot {snapshot_identifier} already encrypted")
            return snapshot

        temp_identifier = snapshot.encrypted_copy_identifier()
        repo = self.snapshot_repo

        logger.info(f"Converting snapshot {snapshot_identifier} to an encrypted snapshot")
        repo.copy_snapshot(snapshot_identifier, temp_identifier, kms_key_id)

        logger.info("Waiting for temp encrypted snapshot to become available...")
        time.sleep(self.settle_delay)
        repo.wait_for_snapshot(temp_identifier, "available")

        logger.info("Removing plaintext snapshot...")
        repo.delete_snapshot(snapshot_identifier)
        repo.wait_for_snapshot(snapshot_identifier, "deleted")

        logger.info("Renaming encrypted snapshot...")
        repo.copy_snapshot(temp_identifier, snapshot_identifier)
        time.sleep(self.settle_delay)
        repo.wait_for_snapshot(snapshot_identifier, "available")

        repo.delete_snapshot(temp_identifier)
        repo.wait_for_snapshot(temp_identifier, "deleted")

        converted = self._require_snapshot(snapshot_identifier)
        logger.info(f"Snapshot Converted - {converted.describe()}")
        return converted

    def check_snapshot_username(self, snapshot_identifier: str, expected_username: str) -> None:
        """Check that a snapshot was taken with the configured master username.

        Shared and public snapshots are included in the lookup.

        Raises:
            SnapshotNotFoundError: If the snapshot does not exist
            SnapshotUsernameMismatchError: If the usernames differ
        """
        logger.info("Checking snapshot username matches expected username")

        snapshot = self._require_snapshot(snapshot_identifier, include_shared=True)

        if snapshot.master_username != expected_username:
            logger.error("Snapshot Username does not match the expected username")
            logger.error("Update the RDS username configuration to match the snapshot username")
            logger.error(f"    Snapshot username: {snapshot.master_username}")
            logger.error(f"    Configured username: {expected_username}")
            raise SnapshotUsernameMismatchError(snapshot.master_username, expected_username)

        logger.info("Snapshot Username is the same as the expected username")


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
