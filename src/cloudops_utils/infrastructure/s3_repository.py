#!/usr/bin/env python3
"""
S3 repository.

Bucket access checks, recursive copy and sync, and prefix/bucket deletion.
"""

import logging
import os
import shutil
import zipfile
from pathlib import Path
from typing import Any, Iterable, Optional

from botocore.exceptions import ClientError

from cloudops_utils.infrastructure.files import file_extension
from cloudops_utils.infrastructure.session_manager import AWSRepository, aws_call
from cloudops_utils.infrastructure.temp_dirs import TempDirStack, get_temp_dir_stack

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)

DELETE_BATCH_SIZE = 1000


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "s3_repository",
        "description": "S3 repository implementation",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def prefix_path(prefix: str) -> str:
    """Normalise a key prefix to end with ``/`` (empty stays empty)."""
    prefix = prefix.strip("/")
    return f"{prefix}/" if prefix else ""


def stage_files(files: Iterable[str | Path], staging_dir: str | Path) -> list[Path]:
    """Copy files into a staging directory, extracting zip archives.

    Missing files are skipped. Extracted files get the current time as their
    modification time so a sync always treats them as new.

    Returns:
        Files that were staged or extracted, relative to ``staging_dir``
    """
    staging_dir = Path(staging_dir)
    for file in files:
        path = Path(file)
        if not path.is_file():
            logger.debug(f"Skipping missing file {path}")
            continue
        if file_extension(str(path)).lower() == "zip":
            with zipfile.ZipFile(path) as archive:
                for member in archive.namelist():
                    extracted = Path(archive.extract(member, staging_dir))
                    if extracted.is_file():
                        os.utime(extracted)
        else:
            shutil.copy(path, staging_dir)

    return sorted(p.relative_to(staging_dir) for p in staging_dir.rglob("*") if p.is_file())


class S3Repository(AWSRepository):
    """Repository for S3 bucket operations."""

    service_name = "s3"

    def __init__(
        self,
        region: Optional[str] = None,
        session_manager: Any = None,
        temp_dirs: Optional[TempDirStack] = None,
    ) -> None:
        super().__init__(region, session_manager)
        self._temp_dirs = temp_dirs or get_temp_dir_stack()

    @aws_call
    def is_bucket_accessible(self, bucket: str, prefix: str = "") -> bool:
        """Check that a bucket (and prefix) can be listed with current credentials."""
        try:
            self._client().list_objects_v2(Bucket=bucket, Prefix=prefix_path(prefix), MaxKeys=1)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "")
            if code in ("AccessDenied", "NoSuchBucket", "AllAccessDisabled"):
                logger.debug(f"Bucket {bucket} not accessible: {code}")
                return False
            raise
        return True

    @aws_call
    def list_keys(self, bucket: str, prefix: str = "") -> list[str]:
        """All object keys under a prefix."""
        keys = []
        paginator = self._client().get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=bucket, Prefix=prefix_path(prefix)):
            keys.extend(obj["Key"] for obj in page.get("Contents", []))
        return keys

    def copy_files_from_bucket(self, bucket: str, prefix: str, directory: str | Path) -> list[Path]:
        """Download everything under a prefix into a local directory.

        Returns:
            Local paths written
        """
        client = self._client()
        base = prefix_path(prefix)
        directory = Path(directory)
        written = []
        for key in self.list_keys(bucket, prefix):
            if key.endswith("/"):
                continue
            target = directory / key[len(base):]
            target.parent.mkdir(parents=True, exist_ok=True)
            client.download_file(bucket, key, str(target))
            written.append(target)
        return written

    def sync_files_to_bucket(
        self,
        bucket: str,
        prefix: str,
        files: Iterable[str | Path],
        delete: bool = False,
    ) -> list[str]:
        """Upload files (zip archives extracted) under a prefix.

        Files are staged in a scratch directory that is removed afterwards,
        whether or not the upload succeeds.

        Args:
            bucket: Bucket name
            prefix: Key prefix
            files: Local files; missing ones are skipped
            delete: Remove objects under the prefix that were not uploaded

        Returns:
            Keys uploaded
        """
        base = prefix_path(prefix)
        client = self._client()

        with self._temp_dirs.scoped("sync_files_to_bucket_") as staging_dir:
            staged = stage_files(files, staging_dir)
            uploaded = []
            for relative in staged:
                key = f"{base}{relative.as_posix()}"
                client.upload_file(str(Path(staging_dir) / relative), bucket, key)
                uploaded.append(key)

        if delete:
            extras = sorted(set(self.list_keys(bucket, prefix)) - set(uploaded))
            self._delete_keys(bucket, extras)

        logger.info(f"Synchronised {len(uploaded)} files to s3://{bucket}/{base}")
        return uploaded

    def delete_tree(self, bucket: str, prefix: str) -> int:
        """Delete everything below a prefix.

        Returns:
            Number of objects deleted
        """
        keys = self.list_keys(bucket, prefix)
        self._delete_keys(bucket, keys)
        return len(keys)

    def delete_bucket(self, bucket: str) -> None:
        """Empty and delete a bucket."""
        self.delete_tree(bucket, "")
        self._delete_bucket(bucket)

    @aws_call
    def _delete_bucket(self, bucket: str) -> None:
        self._client().delete_bucket(Bucket=bucket)

    @aws_call
    def _delete_keys(self, bucket: str, keys: list[str]) -> None:
        client = self._client()
        for start in range(0, len(keys), DELETE_BATCH_SIZE):
            batch = keys[start:start + DELETE_BATCH_SIZE]
            client.delete_objects(
                Bucket=bucket,
                Delete={"Objects": [{"Key": key} for key in batch], "Quiet": True},
            )


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
