#!/usr/bin/env python3
"""
SSM document repository.
"""

import hashlib
import logging
from pathlib import Path

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
        "name": "ssm_repository",
        "description": "SSM document repository implementation",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def content_hash(content_file: str | Path) -> str:
    """SHA-256 hex digest of a file, as reported by ``DescribeDocument``."""
    return hashlib.sha256(Path(content_file).read_bytes()).hexdigest()


class SSMRepository(AWSRepository):
    """Repository for SSM documents."""

    service_name = "ssm"

    @aws_call
    def get_document_hash(self, name: str, version: str) -> str:
        response = self._client().describe_document(Name=name, DocumentVersion=version)
        return response["Document"].get("Hash", "")

    def update_document(self, name: str, version: str, content_file: str | Path) -> bool:
        """Update a document when the file content differs from the deployed version.

        Returns:
            True if an update was made
        """
        if self.get_document_hash(name, version) == content_hash(content_file):
            logger.info("No changes required")
            return False
        self._update_document(name, version, Path(content_file).read_text(encoding="utf-8"))
        return True

    @aws_call
    def _update_document(self, name: str, version: str, content: str) -> None:
        self._client().update_document(Name=name, DocumentVersion=version, Content=content)


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
