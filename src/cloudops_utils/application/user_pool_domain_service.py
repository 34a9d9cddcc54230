#!/usr/bin/env python3
"""
Service for attaching and detaching Cognito user pool domains.
"""

import logging
from typing import Any, Optional, Protocol

from cloudops_utils.domain.errors import DomainOwnershipError, MandatoryArgumentError

logger = logging.getLogger(__name__)

__version__ = "0.1.0"
__author__ = "John Ayers"

ACTION_CREATE = "create"
ACTION_DELETE = "delete"

RESULT_CREATED = "created"
RESULT_DELETED = "deleted"
RESULT_UNCHANGED = "unchanged"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "user_pool_domain_service",
        "description": "Service for Cognito user pool domains",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class UserPoolDomainRepository(Protocol):
    """Protocol defining interface for user pool domain operations.

    Infrastructure layer must implement this protocol.
    """

    def describe_domain_owner(self, domain: str) -> Optional[str]:
        ...

    def create_domain(self, user_pool_id: str, config: dict[str, Any]) -> None:
        ...

    def delete_domain(self, user_pool_id: str, domain: str) -> None:
        ...


class UserPoolDomainService:
    """Application service for user pool domains."""

    def __init__(self, domain_repo: UserPoolDomainRepository) -> None:
        self.domain_repo = domain_repo

    def manage_domain(self, user_pool_id: str, config: dict[str, Any], action: str) -> str:
        """Make the domain in ``config`` attached to (create) or detached from (delete) a pool.

        Args:
            user_pool_id: User pool ID
            config: ``CreateUserPoolDomain`` request document with a ``Domain`` key
            action: ``create`` or ``delete``

        Returns:
            ``created``, ``deleted`` or ``unchanged``

        Raises:
            MandatoryArgumentError: If config has no domain
            ValueError: If action is not recognised
            DomainOwnershipError: If another pool owns the domain
        """
        if action not in (ACTION_CREATE, ACTION_DELETE):
            raise ValueError(f"Unknown action {action!r}; expected create or delete")

        domain = config.get("Domain")
        if not domain:
            raise MandatoryArgumentError("Domain")

        owner = self.domain_repo.describe_domain_owner(domain)

        if owner is None:
            if action == ACTION_CREATE:
                logger.info("Adding domain to userpool")
                self.domain_repo.create_domain(user_pool_id, config)
                return RESULT_CREATED
            logger.info("Domain not assigned to a userpool. Nothing to do")
            return RESULT_UNCHANGED

        if owner != user_pool_id:
            logger.error(f"User Pool Domain {domain} is used by userpool {owner}")
            raise DomainOwnershipError(domain, owner)

        if action == ACTION_CREATE:
            logger.info("User Pool domain already configured")
            return RESULT_UNCHANGED

        logger.info("Deleting domain from user pool")
        self.domain_repo.delete_domain(user_pool_id, domain)
        return RESULT_DELETED


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
