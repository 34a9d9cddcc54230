#!/usr/bin/env python3
"""
EC2 repository.

SSH key pairs and elastic network interfaces.
"""

import base64
import logging
from pathlib import Path
from typing import Any, Optional

from botocore.exceptions import ClientError

from cloudops_utils.domain.network_interface import NetworkInterface
from cloudops_utils.infrastructure.pki import public_key_material
from cloudops_utils.infrastructure.session_manager import AWSRepository, aws_call

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "ec2_repository",
        "description": "EC2 repository implementation",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class EC2Repository(AWSRepository):
    """Repository for EC2 key pairs and network interfaces."""

    service_name = "ec2"

    def __init__(
        self,
        region: Optional[str] = None,
        session_manager: Any = None,
        waiter_delay: int = 15,
        waiter_max_attempts: int = 40,
    ) -> None:
        super().__init__(region, session_manager)
        self.waiter_delay = waiter_delay
        self.waiter_max_attempts = waiter_max_attempts

    # Key pairs

    @aws_call
    def show_key_pair(self, name: str) -> Optional[dict[str, Any]]:
        """Describe a key pair.

        Returns:
            Key pair description, or None if it does not exist
        """
        try:
            response = self._client().describe_key_pairs(KeyNames=[name])
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "InvalidKeyPair.NotFound":
                return None
            raise
        pairs = response.get("KeyPairs", [])
        return pairs[0] if pairs else None

    def check_key_pair(self, name: str) -> bool:
        return self.show_key_pair(name) is not None

    @aws_call
    def import_key_pair(self, name: str, crt_file: str | Path) -> str:
        """Import the public key in a PEM file as a key pair.

        Returns:
            Key fingerprint
        """
        der = base64.b64decode(public_key_material(crt_file))
        response = self._client().import_key_pair(KeyName=name, PublicKeyMaterial=der)
        return response.get("KeyFingerprint", "")

    def delete_key_pair(self, name: str) -> bool:
        """Delete a key pair if it exists.

        Returns:
            True if a key pair was deleted
        """
        if not self.check_key_pair(name):
            return False
        self._delete_key_pair(name)
        return True

    @aws_call
    def _delete_key_pair(self, name: str) -> None:
        self._client().delete_key_pair(KeyName=name)

    # Network interfaces

    @aws_call
    def list_network_interfaces_by_requester(self, requester_id: str) -> list[NetworkInterface]:
        """Network interfaces whose requester ID ends with ``requester_id``."""
        interfaces = []
        paginator = self._client().get_paginator("describe_network_interfaces")
        for page in paginator.paginate(
            Filters=[{"Name": "requester-id", "Values": [f"*{requester_id}"]}]
        ):
            for data in page.get("NetworkInterfaces", []):
                interfaces.append(NetworkInterface.from_api(data))
        return interfaces

    @aws_call
    def detach_network_interface(self, attachment_id: str) -> None:
        self._client().detach_network_interface(AttachmentId=attachment_id)

    def wait_network_interface_available(self, interface_id: str) -> None:
        """Block until an interface reaches ``available``.

        Raises:
            botocore.exceptions.WaiterError: If the waiter gives up
        """
        waiter = self._client().get_waiter("network_interface_available")
        waiter.wait(
            NetworkInterfaceIds=[interface_id],
            WaiterConfig={"Delay": self.waiter_delay, "MaxAttempts": self.waiter_max_attempts},
        )

    @aws_call
    def delete_network_interface(self, interface_id: str) -> None:
        self._client().delete_network_interface(NetworkInterfaceId=interface_id)


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
