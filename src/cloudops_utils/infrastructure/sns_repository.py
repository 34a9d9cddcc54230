#!/usr/bin/env python3
"""
SNS repository.

Mobile push platform applications and account SMS settings.
"""

import logging
from typing import Any, Optional

from cloudops_utils.domain.errors import DeploymentError
from cloudops_utils.infrastructure.kms_repository import KMSRepository
from cloudops_utils.infrastructure.session_manager import AWSRepository, aws_call

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)

SECRET_ATTRIBUTES = ("PlatformPrincipal", "PlatformCredential")


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "sns_repository",
        "description": "SNS repository implementation",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class SNSRepository(AWSRepository):
    """Repository for SNS platform applications."""

    service_name = "sns"

    def __init__(
        self,
        region: Optional[str] = None,
        session_manager: Any = None,
        kms: Optional[KMSRepository] = None,
    ) -> None:
        super().__init__(region, session_manager)
        self._kms = kms or KMSRepository(region, self._session_manager)

    def _reveal(self, value: str, encryption_scheme: str) -> str:
        """Decrypt a value carrying the encryption scheme prefix; pass others through."""
        if encryption_scheme and value.startswith(encryption_scheme):
            return self._kms.decrypt_string(value[len(encryption_scheme):])
        return value

    def deploy_platform_app(
        self,
        name: str,
        engine: str,
        config: dict[str, Any],
        existing_arn: Optional[str] = None,
        encryption_scheme: str = "",
    ) -> str:
        """Create or update a platform application.

        The principal and credential in ``config["Attributes"]`` may be
        KMS-encrypted, marked by ``encryption_scheme`` as a prefix.

        Args:
            name: Application name (create only)
            engine: Platform, e.g. ``GCM`` or ``APNS``
            config: ``SetPlatformApplicationAttributes`` request document
            existing_arn: ARN of an existing application to update
            encryption_scheme: Prefix marking encrypted values

        Returns:
            Platform application ARN

        Raises:
            DeploymentError: If no ARN is available after the call
        """
        attributes = dict(config.get("Attributes", {}))
        secrets = {
            key: self._reveal(attributes.pop(key), encryption_scheme)
            for key in SECRET_ATTRIBUTES
            if attributes.get(key)
        }

        client = self._client()
        if existing_arn:
            platform_app_arn = existing_arn
            if secrets:
                self._set_attributes(platform_app_arn, secrets)
        else:
            response = client.create_platform_application(
                Name=name, Platform=engine, Attributes=secrets
            )
            platform_app_arn = response.get("PlatformApplicationArn", "")

        if not platform_app_arn:
            logger.critical("Platform app was not deployed")
            raise DeploymentError(f"Platform app {name} was not deployed")

        if attributes:
            self._set_attributes(platform_app_arn, attributes)

        return platform_app_arn

    @aws_call
    def _set_attributes(self, platform_app_arn: str, attributes: dict[str, str]) -> None:
        self._client().set_platform_application_attributes(
            PlatformApplicationArn=platform_app_arn, Attributes=attributes
        )

    @aws_call
    def delete_platform_app(self, platform_app_arn: str) -> None:
        self._client().delete_platform_application(PlatformApplicationArn=platform_app_arn)

    @aws_call
    def list_platform_app_arns(self, name: str) -> list[str]:
        """ARNs of platform applications whose name is ``name``."""
        arns = []
        paginator = self._client().get_paginator("list_platform_applications")
        for page in paginator.paginate():
            for app in page.get("PlatformApplications", []):
                arn = app["PlatformApplicationArn"]
                if arn.endswith(f"/{name}"):
                    arns.append(arn)
        return arns

    def cleanup_platform_apps(self, name: str, expected_arns: list[str]) -> list[str]:
        """Delete platform applications named ``name`` that are not expected.

        Returns:
            ARNs deleted
        """
        unexpected = [arn for arn in self.list_platform_app_arns(name) if arn not in expected_arns]
        if unexpected:
            logger.info(f"Found the following unexpected Platforms: {unexpected}")
        for arn in unexpected:
            self.delete_platform_app(arn)
        return unexpected

    @aws_call
    def update_sms_attributes(self, config: dict[str, Any]) -> None:
        """Apply a ``SetSMSAttributes`` request document."""
        self._client().set_sms_attributes(attributes=config.get("attributes", config))


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
