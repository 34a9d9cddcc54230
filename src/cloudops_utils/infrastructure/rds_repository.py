#!/usr/bin/env python3
"""
RDS repository.

Instances, snapshots and tags. Multi-step snapshot workflows live in
``application.snapshot_service``.
"""

import logging
from typing import Any, Optional

from botocore.exceptions import ClientError

from cloudops_utils.domain.errors import ResourceNotFoundError
from cloudops_utils.domain.snapshot import DBSnapshot
from cloudops_utils.infrastructure.session_manager import AWSRepository, aws_call

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)

SNAPSHOT_NOT_FOUND_CODES = {"DBSnapshotNotFound", "DBSnapshotNotFoundFault"}

WAITERS = {
    "available": "db_snapshot_available",
    "deleted": "db_snapshot_deleted",
}


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "rds_repository",
        "description": "RDS repository implementation",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class RDSRepository(AWSRepository):
    """Repository for RDS operations using boto3."""

    service_name = "rds"

    def __init__(
        self,
        region: Optional[str] = None,
        session_manager: Any = None,
        waiter_delay: int = 30,
        waiter_max_attempts: int = 60,
    ) -> None:
        """Initialize the RDS repository.

        Args:
            region: AWS region
            session_manager: Session cache
            waiter_delay: Seconds between waiter polls
            waiter_max_attempts: Polls before a waiter gives up
        """
        super().__init__(region, session_manager)
        self.waiter_delay = waiter_delay
        self.waiter_max_attempts = waiter_max_attempts

    @aws_call
    def add_tag(self, resource_arn: str, key: str, value: str) -> None:
        self._client().add_tags_to_resource(
            ResourceName=resource_arn, Tags=[{"Key": key, "Value": value}]
        )

    @aws_call
    def describe_instance(self, db_identifier: str) -> dict[str, Any]:
        """Describe a DB instance.

        Raises:
            ClientError: ``DBInstanceNotFound`` if it does not exist
        """
        response = self._client().describe_db_instances(DBInstanceIdentifier=db_identifier)
        return response["DBInstances"][0]

    def get_hostname(self, db_identifier: str) -> str:
        """Endpoint address of a DB instance.

        Raises:
            ResourceNotFoundError: If the instance has no endpoint yet
        """
        address = (self.describe_instance(db_identifier).get("Endpoint") or {}).get("Address")
        if not address:
            logger.critical(f"hostname not found for rds instance {db_identifier}")
            raise ResourceNotFoundError(f"hostname not found for rds instance {db_identifier}")
        return address

    @aws_call
    def set_master_password(self, db_identifier: str, password: str) -> None:
        logger.info(f"Resetting master password for RDS instance {db_identifier}")
        self._client().modify_db_instance(
            DBInstanceIdentifier=db_identifier, MasterUserPassword=password
        )

    @aws_call
    def create_snapshot(self, db_identifier: str, snapshot_identifier: str) -> DBSnapshot:
        response = self._client().create_db_snapshot(
            DBSnapshotIdentifier=snapshot_identifier, DBInstanceIdentifier=db_identifier
        )
        return DBSnapshot.from_api(response["DBSnapshot"])

    @aws_call
    def describe_snapshot(
        self, snapshot_identifier: str, include_shared: bool = False
    ) -> Optional[DBSnapshot]:
        """Describe a snapshot.

        Args:
            snapshot_identifier: Snapshot identifier or ARN
            include_shared: Also search shared and public snapshots

        Returns:
            The snapshot, or None if it does not exist
        """
        params: dict[str, Any] = {"DBSnapshotIdentifier": snapshot_identifier}
        if include_shared:
            params.update(IncludeShared=True, IncludePublic=True)
        try:
            response = self._client().describe_db_snapshots(**params)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in SNAPSHOT_NOT_FOUND_CODES:
                return None
            raise
        snapshots = response.get("DBSnapshots", [])
        return DBSnapshot.from_api(snapshots[0]) if snapshots else None

    @aws_call
    def copy_snapshot(
        self, source_identifier: str, target_identifier: str, kms_key_id: Optional[str] = None
    ) -> DBSnapshot:
        params = {
            "SourceDBSnapshotIdentifier": source_identifier,
            "TargetDBSnapshotIdentifier": target_identifier,
        }
        if kms_key_id:
            params["KmsKeyId"] = kms_key_id
        response = self._client().copy_db_snapshot(**params)
        return DBSnapshot.from_api(response["DBSnapshot"])

    @aws_call
    def delete_snapshot(self, snapshot_identifier: str) -> None:
        self._client().delete_db_snapshot(DBSnapshotIdentifier=snapshot_identifier)

    def wait_for_snapshot(self, snapshot_identifier: str, state: str = "available") -> None:
        """Block until a snapshot is available or deleted.

        Args:
            snapshot_identifier: Snapshot identifier
            state: ``available`` or ``deleted``

        Raises:
            ValueError: If state is not supported
            botocore.exceptions.WaiterError: If the waiter gives up
        """
        if state not in WAITERS:
            raise ValueError(f"Unsupported snapshot state {state!r}")
        waiter = self._client().get_waiter(WAITERS[state])
        waiter.wait(
            DBSnapshotIdentifier=snapshot_identifier,
            WaiterConfig={"Delay": self.waiter_delay, "MaxAttempts": self.waiter_max_attempts},
        )


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
