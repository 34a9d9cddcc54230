"""Unit tests for the network interface and origin access identity models."""

from cloudops_utils.domain.network_interface import NetworkInterface
from cloudops_utils.domain.origin_access_identity import OriginAccessIdentity


def test_network_interface_from_api_attached() -> None:
    """Test parsing an attached interface."""
    interface = NetworkInterface.from_api(
        {
            "NetworkInterfaceId": "eni-123",
            "Status": "in-use",
            "Attachment": {"AttachmentId": "eni-attach-1"},
            "RequesterId": "AROAEXAMPLE:lambda",
        }
    )

    assert interface.interface_id == "eni-123"
    assert interface.attachment_id == "eni-attach-1"
    assert interface.is_attached()


def test_network_interface_from_api_detached() -> None:
    """Test parsing an interface without an attachment."""
    interface = NetworkInterface.from_api({"NetworkInterfaceId": "eni-456", "Status": "available"})

    assert interface.attachment_id is None
    assert not interface.is_attached()


def test_origin_access_identity_from_summary() -> None:
    """Test parsing a list summary entry."""
    identity = OriginAccessIdentity.from_api(
        {"Id": "E123", "Comment": "site", "S3CanonicalUserId": "abc"}
    )

    assert identity.to_dict() == {"Id": "E123", "Comment": "site", "S3CanonicalUserId": "abc"}


def test_origin_access_identity_from_create_response() -> None:
    """Test parsing a create response body where the comment lives in the config."""
    identity = OriginAccessIdentity.from_api(
        {
            "Id": "E123",
            "S3CanonicalUserId": "abc",
            "CloudFrontOriginAccessIdentityConfig": {"CallerReference": "site", "Comment": "site"},
        },
        etag="ETAG1",
    )

    assert identity.comment == "site"
    assert identity.etag == "ETAG1"
