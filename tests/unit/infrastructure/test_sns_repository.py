"""Unit tests for SNSRepository."""

from unittest.mock import Mock, patch

import pytest

from cloudops_utils.domain.errors import DeploymentError
from cloudops_utils.infrastructure.sns_repository import SNSRepository

APP_ARN = "arn:aws:sns:us-east-1:123456789012:app/GCM/mobile"


def make_repo() -> tuple[SNSRepository, Mock, Mock]:
    kms = Mock()
    kms.decrypt_string.return_value = "plain-credential"
    repo = SNSRepository(region="us-east-1", session_manager=Mock(), kms=kms)
    return repo, kms, Mock()


def test_deploy_creates_with_decrypted_secrets() -> None:
    """Test that prefixed secrets are decrypted and other attributes set separately."""
    repo, kms, mock_client = make_repo()
    mock_client.create_platform_application.return_value = {"PlatformApplicationArn": APP_ARN}
    config = {"Attributes": {"PlatformCredential": "kms:abc", "SuccessFeedbackSampleRate": "100"}}

    with patch.object(repo, "_client", return_value=mock_client):
        arn = repo.deploy_platform_app("mobile", "GCM", config, encryption_scheme="kms:")

    assert arn == APP_ARN
    kms.decrypt_string.assert_called_once_with("abc")
    mock_client.create_platform_application.assert_called_once_with(
        Name="mobile", Platform="GCM", Attributes={"PlatformCredential": "plain-credential"}
    )
    mock_client.set_platform_application_attributes.assert_called_once_with(
        PlatformApplicationArn=APP_ARN, Attributes={"SuccessFeedbackSampleRate": "100"}
    )


def test_deploy_updates_existing() -> None:
    """Test updating an existing application without re-creating it."""
    repo, kms, mock_client = make_repo()
    config = {"Attributes": {"PlatformCredential": "plain"}}

    with patch.object(repo, "_client", return_value=mock_client):
        arn = repo.deploy_platform_app("mobile", "GCM", config, existing_arn=APP_ARN)

    assert arn == APP_ARN
    kms.decrypt_string.assert_not_called()
    mock_client.create_platform_application.assert_not_called()
    mock_client.set_platform_application_attributes.assert_called_once_with(
        PlatformApplicationArn=APP_ARN, Attributes={"PlatformCredential": "plain"}
    )


def test_deploy_without_arn_raises() -> None:
    """Test that an empty create response is reported."""
    repo, _, mock_client = make_repo()
    mock_client.create_platform_application.return_value = {}

    with patch.object(repo, "_client", return_value=mock_client):
        with pytest.raises(DeploymentError):
            repo.deploy_platform_app("mobile", "GCM", {"Attributes": {}})


def test_cleanup_deletes_unexpected_only() -> None:
    """Test that only applications not in the expected list are deleted."""
    repo, _, mock_client = make_repo()
    stale = "arn:aws:sns:us-east-1:123456789012:app/APNS/mobile"
    mock_paginator = Mock()
    mock_paginator.paginate.return_value = [
        {"PlatformApplications": [
            {"PlatformApplicationArn": APP_ARN},
            {"PlatformApplicationArn": stale},
            {"PlatformApplicationArn": "arn:aws:sns:us-east-1:123456789012:app/GCM/other"},
        ]}
    ]
    mock_client.get_paginator.return_value = mock_paginator

    with patch.object(repo, "_client", return_value=mock_client):
        deleted = repo.cleanup_platform_apps("mobile", [APP_ARN])

    assert deleted == [stale]
    mock_client.delete_platform_application.assert_called_once_with(PlatformApplicationArn=stale)
