#!/usr/bin/env python3
"""
IAM repository.

Access keys, console login profiles and SES SMTP password derivation.
"""

import base64
import hashlib
import hmac
import logging

from botocore.exceptions import ClientError

from cloudops_utils.domain.errors import AccessKeyError
from cloudops_utils.infrastructure.session_manager import AWSRepository, aws_call

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)

ACTION_CREATE = "create"
ACTION_UPDATE = "update"
ACTION_DELETE = "delete"

SMTP_PASSWORD_VERSION = b"\x02"
SMTP_PASSWORD_MESSAGE = b"SendRawEmail"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "iam_repository",
        "description": "IAM repository implementation",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def smtp_password(secret_access_key: str) -> str:
    """Derive an SES SMTP password from an IAM secret access key."""
    signature = hmac.new(
        secret_access_key.encode("utf-8"), SMTP_PASSWORD_MESSAGE, hashlib.sha256
    ).digest()
    return base64.b64encode(SMTP_PASSWORD_VERSION + signature).decode("ascii")


class IAMRepository(AWSRepository):
    """Repository for IAM user credential operations."""

    service_name = "iam"

    @aws_call
    def create_access_key(self, username: str) -> tuple[str, str]:
        """Create an access key for a user.

        Returns:
            Tuple of (access key ID, secret access key)

        Raises:
            AccessKeyError: If the response holds no key
        """
        response = self._client().create_access_key(UserName=username)
        access_key = response.get("AccessKey") or {}
        if not access_key.get("AccessKeyId"):
            logger.critical(f"Could not generate accesskey for {username}")
            raise AccessKeyError(f"Could not generate accesskey for {username}")
        return access_key["AccessKeyId"], access_key["SecretAccessKey"]

    @aws_call
    def get_login_profile_user(self, username: str) -> str | None:
        """User name on the user's login profile, or None when it has none."""
        try:
            response = self._client().get_login_profile(UserName=username)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "NoSuchEntity":
                return None
            raise
        return response["LoginProfile"]["UserName"]

    def manage_user_password(self, action: str, username: str, password: str = "") -> str:
        """Create, update or delete a user's console password.

        ``delete`` removes an existing login profile. Any other action creates
        the profile when missing and otherwise updates the password.

        Returns:
            The action performed (``create``, ``update``, ``delete`` or ``none``)
        """
        has_profile = self.get_login_profile_user(username) == username
        client = self._client()

        if action == ACTION_DELETE:
            if not has_profile:
                logger.info(f"No login profile for {username}. Nothing to do.")
                return "none"
            client.delete_login_profile(UserName=username)
            return ACTION_DELETE

        if not has_profile:
            client.create_login_profile(
                UserName=username, Password=password, PasswordResetRequired=False
            )
            return ACTION_CREATE

        client.update_login_profile(
            UserName=username, Password=password, PasswordResetRequired=False
        )
        return ACTION_UPDATE


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
