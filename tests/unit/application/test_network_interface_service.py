"""Unit tests for NetworkInterfaceService."""

from unittest.mock import Mock, call

import pytest

from cloudops_utils.application.network_interface_service import NetworkInterfaceService
from cloudops_utils.domain.network_interface import NetworkInterface


def test_release_enis_detaches_then_deletes() -> None:
    """Test that attached interfaces are detached before any deletion."""
    # Arrange
    repo = Mock()
    repo.list_network_interfaces_by_requester.return_value = [
        NetworkInterface("eni-1", "in-use", attachment_id="attach-1"),
        NetworkInterface("eni-2", "available"),
    ]
    service = NetworkInterfaceService(repo)

    # Act
    released = service.release_enis("lambda")

    # Assert
    assert released == ["eni-1", "eni-2"]
    repo.list_network_interfaces_by_requester.assert_called_once_with("lambda")
    repo.detach_network_interface.assert_called_once_with("attach-1")
    assert repo.wait_network_interface_available.call_args_list == [call("eni-1"), call("eni-2")]
    assert repo.delete_network_interface.call_args_list == [call("eni-1"), call("eni-2")]


def test_release_enis_nothing_to_do() -> None:
    """Test that no interfaces means no calls."""
    repo = Mock()
    repo.list_network_interfaces_by_requester.return_value = []
    service = NetworkInterfaceService(repo)

    assert service.release_enis("lambda") == []
    repo.delete_network_interface.assert_not_called()


def test_release_enis_failure_propagates() -> None:
    """Test that a failed deletion stops the cleanup."""
    repo = Mock()
    repo.list_network_interfaces_by_requester.return_value = [
        NetworkInterface("eni-1", "available"),
        NetworkInterface("eni-2", "available"),
    ]
    repo.delete_network_interface.side_effect = RuntimeError("InvalidNetworkInterfaceID")
    service = NetworkInterfaceService(repo)

    with pytest.raises(RuntimeError):
        service.release_enis("lambda")

    assert repo.delete_network_interface.call_count == 1
