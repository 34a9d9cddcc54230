#!/usr/bin/env python3
"""
Service for releasing elastic network interfaces.

Used to clean up interfaces left behind by managed services (e.g. Lambda in
a VPC) before deleting subnets or security groups.
"""

import logging
from typing import Protocol

from cloudops_utils.domain.network_interface import NetworkInterface

logger = logging.getLogger(__name__)

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "network_interface_service",
        "description": "Service for releasing network interfaces",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class NetworkInterfaceRepository(Protocol):
    """Protocol defining interface for ENI operations.

    Infrastructure layer must implement this protocol.
    """

    def list_network_interfaces_by_requester(self, requester_id: str) -> list[NetworkInterface]:
        ...

    def detach_network_interface(self, attachment_id: str) -> None:
        ...

    def wait_network_interface_available(self, interface_id: str) -> None:
        ...

    def delete_network_interface(self, interface_id: str) -> None:
        ...


class NetworkInterfaceService:
    """Application service for ENI cleanup."""

    def __init__(self, eni_repo: NetworkInterfaceRepository) -> None:
        self.eni_repo = eni_repo

    def release_enis(self, requester_id: str) -> list[str]:
        """Detach and delete every interface created by a requester.

        All attachments are detached first, then each interface is waited on
        and deleted. The first failure propagates.

        Args:
            requester_id: Requester ID suffix to match

        Returns:
            IDs of deleted interfaces
        """
        interfaces = self.eni_repo.list_network_interfaces_by_requester(requester_id)

        for interface in interfaces:
            if interface.is_attached():
                logger.info(f"Detaching {interface.attachment_id} ...")
                self.eni_repo.detach_network_interface(interface.attachment_id)

        released = []
        for interface in interfaces:
            logger.info(f"Deleting {interface.interface_id} ...")
            self.eni_repo.wait_network_interface_available(interface.interface_id)
            self.eni_repo.delete_network_interface(interface.interface_id)
            released.append(interface.interface_id)

        return released


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
