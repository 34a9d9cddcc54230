#!/usr/bin/env python3
"""
Domain model for EC2 elastic network interfaces.
"""

from dataclasses import dataclass
from typing import Any, Optional

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "network_interface",
        "description": "Domain model for network interfaces",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


@dataclass(frozen=True)
class NetworkInterface:
    """Immutable domain model representing an ENI.

    Attributes:
        interface_id: Network interface ID (eni-...)
        status: Interface status (available, in-use, ...)
        attachment_id: Current attachment ID, if attached
        requester_id: ID of the service or principal that created it
    """

    interface_id: str
    status: str = "unknown"
    attachment_id: Optional[str] = None
    requester_id: Optional[str] = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "NetworkInterface":
        """Build from a ``DescribeNetworkInterfaces`` entry."""
        attachment = data.get("Attachment") or {}
        return cls(
            interface_id=data["NetworkInterfaceId"],
            status=data.get("Status", "unknown"),
            attachment_id=attachment.get("AttachmentId"),
            requester_id=data.get("RequesterId"),
        )

    def is_attached(self) -> bool:
        return bool(self.attachment_id)


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
