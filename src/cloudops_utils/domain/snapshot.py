#!/usr/bin/env python3
"""
Domain model for RDS database snapshots.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

__version__ = "0.1.0"
__author__ = "John Ayers"

STATUS_AVAILABLE = "available"

# Terminal statuses that will never turn into "available"
FAILED_STATUSES = {"failed", "incompatible-restore", "incompatible-parameters", "deleting"}

ENCRYPTED_PREFIX = "encrypted-"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "snapshot",
        "description": "Domain model for RDS snapshots",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


@dataclass(frozen=True)
class DBSnapshot:
    """Immutable domain model representing an RDS DB snapshot.

    Attributes:
        identifier: Snapshot identifier
        instance_identifier: Identifier of the source DB instance
        status: Snapshot status as reported by RDS (lowercase)
        encrypted: Whether the snapshot storage is encrypted
        master_username: Master username recorded in the snapshot
        create_time: When the snapshot was taken (optional)
        percent_progress: Copy/creation progress (0-100)
        kms_key_id: KMS key used for encryption (optional)
    """

    identifier: str
    instance_identifier: str = ""
    status: str = "unknown"
    encrypted: bool = False
    master_username: str = ""
    create_time: Optional[datetime] = None
    percent_progress: int = 0
    kms_key_id: Optional[str] = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "DBSnapshot":
        """Build a snapshot from a ``DescribeDBSnapshots`` entry."""
        return cls(
            identifier=data["DBSnapshotIdentifier"],
            instance_identifier=data.get("DBInstanceIdentifier", ""),
            status=str(data.get("Status", "unknown")).lower(),
            encrypted=bool(data.get("Encrypted", False)),
            master_username=data.get("MasterUsername", ""),
            create_time=data.get("SnapshotCreateTime"),
            percent_progress=int(data.get("PercentProgress", 0) or 0),
            kms_key_id=data.get("KmsKeyId"),
        )

    def is_available(self) -> bool:
        return self.status == STATUS_AVAILABLE

    def has_failed(self) -> bool:
        return self.status in FAILED_STATUSES

    def encrypted_copy_identifier(self) -> str:
        """Identifier used for the temporary encrypted copy."""
        return f"{ENCRYPTED_PREFIX}{self.identifier}"

    def describe(self) -> str:
        created = self.create_time.isoformat() if self.create_time else "pending"
        return f"{self.identifier} {created} Encrypted: {str(self.encrypted).lower()}"


def build_rds_url(
    engine: str,
    username: str,
    password: str,
    fqdn: str,
    port: int | str,
    database_name: str,
) -> str:
    """Build a database connection URL, e.g. ``postgres://u:p@host:5432/db``."""
    return f"{engine}://{username}:{password}@{fqdn}:{port}/{database_name}"


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
