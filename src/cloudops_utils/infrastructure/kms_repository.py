#!/usr/bin/env python3
"""
KMS repository.

Encrypts and decrypts short strings such as credentials embedded in
configuration.
"""

import base64
from typing import Optional

from cloudops_utils.infrastructure.session_manager import AWSRepository, aws_call

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "kms_repository",
        "description": "KMS repository implementation",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class KMSRepository(AWSRepository):
    """Repository for KMS encrypt/decrypt using boto3."""

    service_name = "kms"

    @aws_call
    def encrypt_string(self, value: str, key_id: str) -> str:
        """Encrypt a string.

        Args:
            value: Plaintext
            key_id: KMS key ID, ARN or alias

        Returns:
            Base64-encoded ciphertext blob
        """
        response = self._client().encrypt(KeyId=key_id, Plaintext=value.encode("utf-8"))
        return base64.b64encode(response["CiphertextBlob"]).decode("ascii")

    @aws_call
    def decrypt_string(self, ciphertext: str, key_id: Optional[str] = None) -> str:
        """Decrypt a base64-encoded ciphertext blob.

        Args:
            ciphertext: Base64 ciphertext as produced by ``encrypt_string``
            key_id: Optional key to pin decryption to

        Returns:
            Plaintext
        """
        params = {"CiphertextBlob": base64.b64decode(ciphertext)}
        if key_id:
            params["KeyId"] = key_id
        response = self._client().decrypt(**params)
        return response["Plaintext"].decode("utf-8")


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
