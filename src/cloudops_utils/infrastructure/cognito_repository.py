#!/usr/bin/env python3
"""
Cognito user pool repository.
"""

from typing import Any, Optional

from cloudops_utils.infrastructure.session_manager import AWSRepository, aws_call

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "cognito_repository",
        "description": "Cognito user pool repository implementation",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class CognitoRepository(AWSRepository):
    """Repository for Cognito user pools, clients and domains."""

    service_name = "cognito-idp"

    @aws_call
    def update_user_pool(self, user_pool_id: str, config: dict[str, Any]) -> None:
        """Apply an ``UpdateUserPool`` request document to a pool."""
        self._client().update_user_pool(**{**config, "UserPoolId": user_pool_id})

    @aws_call
    def update_user_pool_client(
        self, user_pool_id: str, client_id: str, config: dict[str, Any]
    ) -> None:
        """Apply an ``UpdateUserPoolClient`` request document to a client."""
        self._client().update_user_pool_client(
            **{**config, "UserPoolId": user_pool_id, "ClientId": client_id}
        )

    @aws_call
    def describe_domain_owner(self, domain: str) -> Optional[str]:
        """ID of the user pool a domain is attached to.

        Returns:
            User pool ID, or None if the domain is unassigned
        """
        response = self._client().describe_user_pool_domain(Domain=domain)
        return (response.get("DomainDescription") or {}).get("UserPoolId") or None

    @aws_call
    def create_domain(self, user_pool_id: str, config: dict[str, Any]) -> None:
        """Attach a domain described by a ``CreateUserPoolDomain`` request document."""
        self._client().create_user_pool_domain(**{**config, "UserPoolId": user_pool_id})

    @aws_call
    def delete_domain(self, user_pool_id: str, domain: str) -> None:
        self._client().delete_user_pool_domain(UserPoolId=user_pool_id, Domain=domain)


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
