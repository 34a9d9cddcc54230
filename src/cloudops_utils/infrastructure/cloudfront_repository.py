#!/usr/bin/env python3
"""
CloudFront repository.

Origin access identities are looked up by comment, which acts as their name.
"""

import json
import logging
import time
from pathlib import Path
from typing import Optional, Sequence

from cloudops_utils.domain.origin_access_identity import OriginAccessIdentity
from cloudops_utils.infrastructure.session_manager import AWSRepository, aws_call

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)

DEFAULT_INVALIDATION_PATHS = ("/*",)


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "cloudfront_repository",
        "description": "CloudFront repository implementation",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class CloudFrontRepository(AWSRepository):
    """Repository for CloudFront OAIs and invalidations."""

    service_name = "cloudfront"

    @aws_call
    def find_origin_access_identity(self, name: str) -> Optional[OriginAccessIdentity]:
        """Find an OAI by comment.

        Returns:
            Matching identity, or None
        """
        paginator = self._client().get_paginator("list_cloud_front_origin_access_identities")
        for page in paginator.paginate():
            items = page.get("CloudFrontOriginAccessIdentityList", {}).get("Items", [])
            for item in items:
                if item.get("Comment") == name:
                    return OriginAccessIdentity.from_api(item)
        return None

    def ensure_origin_access_identity(
        self, name: str, result_file: Optional[str | Path] = None
    ) -> OriginAccessIdentity:
        """Return the OAI named ``name``, creating it if missing.

        Args:
            name: Comment/caller reference of the identity
            result_file: Optional file to write the identity JSON to

        Returns:
            The identity
        """
        identity = self.find_origin_access_identity(name)
        if identity is None:
            identity = self._create_origin_access_identity(name)
            logger.info(f"Created origin access identity {identity.identity_id} for {name}")

        if result_file:
            Path(result_file).write_text(json.dumps(identity.to_dict(), indent=2), encoding="utf-8")
        return identity

    @aws_call
    def _create_origin_access_identity(self, name: str) -> OriginAccessIdentity:
        response = self._client().create_cloud_front_origin_access_identity(
            CloudFrontOriginAccessIdentityConfig={"CallerReference": name, "Comment": name}
        )
        return OriginAccessIdentity.from_api(
            response["CloudFrontOriginAccessIdentity"], etag=response.get("ETag")
        )

    def delete_origin_access_identity(self, name: str) -> bool:
        """Delete the OAI named ``name`` if present.

        Returns:
            True if an identity was deleted
        """
        identity = self.find_origin_access_identity(name)
        if identity is None:
            return False
        self._delete_origin_access_identity(identity.identity_id)
        return True

    @aws_call
    def _delete_origin_access_identity(self, identity_id: str) -> None:
        client = self._client()
        etag = client.get_cloud_front_origin_access_identity(Id=identity_id)["ETag"]
        client.delete_cloud_front_origin_access_identity(Id=identity_id, IfMatch=etag)

    @aws_call
    def invalidate_distribution(
        self, distribution_id: str, paths: Sequence[str] = DEFAULT_INVALIDATION_PATHS
    ) -> str:
        """Invalidate paths in a distribution.

        Returns:
            Invalidation ID
        """
        paths = list(paths) or list(DEFAULT_INVALIDATION_PATHS)
        response = self._client().create_invalidation(
            DistributionId=distribution_id,
            InvalidationBatch={
                "Paths": {"Quantity": len(paths), "Items": paths},
                "CallerReference": f"{distribution_id}-{time.time_ns()}",
            },
        )
        return response["Invalidation"]["Id"]


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
