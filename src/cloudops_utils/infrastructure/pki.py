#!/usr/bin/env python3
"""
Local key material for EC2 SSH key pairs.

Keys are written next to the deployment configuration with a ``.gitignore``
that keeps plaintext private keys out of version control.
"""

import logging
from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)

KEY_SIZE = 2048

GITIGNORE_PATTERNS = ["*.plaintext", "*.decrypted", "*.ppk"]


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "pki",
        "description": "SSH key material generation",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def key_prefix(account: str, region: str) -> str:
    return f".aws-{account}-{region}-ssh"


def private_key_path(directory: str | Path, account: str, region: str) -> Path:
    return Path(directory) / f"{key_prefix(account, region)}-prv.pem.plaintext"


def public_key_path(directory: str | Path, account: str, region: str) -> Path:
    return Path(directory) / f"{key_prefix(account, region)}-crt.pem"


def existing_key_files(directory: str | Path, account: str, region: str) -> list[Path]:
    """Key files, legacy names included, already present in ``directory``."""
    directory = Path(directory)
    candidates = [
        "aws-ssh-crt.pem",
        "aws-ssh-prv.pem",
        ".aws-ssh-crt.pem",
        ".aws-ssh-prv.pem",
        f"{key_prefix(account, region)}-crt.pem",
        f"{key_prefix(account, region)}-prv.pem",
    ]
    return [directory / name for name in candidates if (directory / name).is_file()]


def create_pki_credentials(directory: str | Path, region: str, account: str) -> bool:
    """Generate an RSA key pair unless one already exists.

    Args:
        directory: Directory to write keys into
        region: AWS region the key pair is for
        account: AWS account ID the key pair is for

    Returns:
        True if a new key pair was generated
    """
    directory = Path(directory)
    generated = False

    if not existing_key_files(directory, account, region):
        key = rsa.generate_private_key(public_exponent=65537, key_size=KEY_SIZE)
        private_pem = key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption(),
        )
        public_pem = key.public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        private_key_path(directory, account, region).write_bytes(private_pem)
        public_key_path(directory, account, region).write_bytes(public_pem)
        logger.info(f"Generated SSH key pair for {account}/{region} in {directory}")
        generated = True

    gitignore = directory / ".gitignore"
    if not gitignore.exists():
        gitignore.write_text("\n".join(GITIGNORE_PATTERNS) + "\n", encoding="utf-8")

    return generated


def delete_pki_credentials(directory: str | Path, region: str, account: str) -> list[Path]:
    """Remove generated key files for an account/region.

    Returns:
        Paths that were deleted
    """
    directory = Path(directory)
    prefix = key_prefix(account, region)
    removed = []
    for path in sorted(directory.glob(f"{prefix}-crt*")) + sorted(directory.glob(f"{prefix}-prv*")):
        path.unlink()
        removed.append(path)
    return removed


def public_key_material(crt_file: str | Path) -> str:
    """Base64 body of a PEM public key, without header/footer lines or line breaks."""
    text = Path(crt_file).read_text(encoding="utf-8").replace("\r\n", "\n")
    return "".join(line.strip() for line in text.split("\n") if line and not line.startswith("-"))


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
