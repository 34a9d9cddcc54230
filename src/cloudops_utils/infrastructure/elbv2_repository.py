#!/usr/bin/env python3
"""
Elastic Load Balancing v2 repository.
"""

import logging
from typing import Any

from cloudops_utils.domain.errors import DeploymentError
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
        "name": "elbv2_repository",
        "description": "ELBv2 repository implementation",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class ELBv2Repository(AWSRepository):
    """Repository for load balancer listener rules."""

    service_name = "elbv2"

    @aws_call
    def create_rule(self, listener_arn: str, config: dict[str, Any]) -> str:
        """Create a listener rule from a ``CreateRule`` request document.

        Returns:
            Rule ARN

        Raises:
            DeploymentError: If no rule was returned
        """
        response = self._client().create_rule(**{**config, "ListenerArn": listener_arn})
        rules = response.get("Rules") or []
        if not rules or not rules[0].get("RuleArn"):
            logger.critical("Rule was not created")
            raise DeploymentError(f"Rule was not created on {listener_arn}")
        return rules[0]["RuleArn"]

    @aws_call
    def list_rule_arns(self, listener_arn: str, include_default: bool = False) -> list[str]:
        client = self._client()
        arns = []
        params = {"ListenerArn": listener_arn}
        while True:
            page = client.describe_rules(**params)
            for rule in page.get("Rules", []):
                if include_default or not rule.get("IsDefault", False):
                    arns.append(rule["RuleArn"])
            if not page.get("NextMarker"):
                return arns
            params["Marker"] = page["NextMarker"]

    def cleanup_rules(self, listener_arn: str) -> list[str]:
        """Delete every non-default rule from a listener.

        Stops at the first failed deletion.

        Returns:
            ARNs of deleted rules
        """
        logger.info(f"Removing all listener rules from {listener_arn}")
        deleted = []
        for rule_arn in self.list_rule_arns(listener_arn):
            self._delete_rule(rule_arn)
            deleted.append(rule_arn)
        return deleted

    @aws_call
    def _delete_rule(self, rule_arn: str) -> None:
        self._client().delete_rule(RuleArn=rule_arn)


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
