#!/usr/bin/env python3
"""
Domain model for CloudFront origin access identities.
"""

from dataclasses import dataclass
from typing import Any, Optional

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "origin_access_identity",
        "description": "Domain model for CloudFront origin access identities",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


@dataclass(frozen=True)
class OriginAccessIdentity:
    """Immutable domain model representing a CloudFront OAI.

    The comment doubles as the identity's logical name.

    Attributes:
        identity_id: OAI ID
        comment: Comment/name given at creation
        s3_canonical_user_id: Canonical user ID for bucket policies
        etag: ETag required for deletion (optional)
    """

    identity_id: str
    comment: str
    s3_canonical_user_id: str = ""
    etag: Optional[str] = None

    @classmethod
    def from_api(cls, data: dict[str, Any], etag: Optional[str] = None) -> "OriginAccessIdentity":
        """Build from a list summary or a ``CloudFrontOriginAccessIdentity`` body."""
        config = data.get("CloudFrontOriginAccessIdentityConfig", {})
        return cls(
            identity_id=data["Id"],
            comment=data.get("Comment", config.get("Comment", "")),
            s3_canonical_user_id=data.get("S3CanonicalUserId", ""),
            etag=etag,
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "Id": self.identity_id,
            "Comment": self.comment,
            "S3CanonicalUserId": self.s3_canonical_user_id,
        }


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
