"""
Amazon S3 storage service implementation.

Suitable for production and multi-instance deployments where saved
profiles must survive a redeploy.
"""

from typing import List, Optional

import boto3
from botocore.exceptions import ClientError, NoCredentialsError

from .base import (
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
    StorageService,
)


class S3StorageService(StorageService):
    """Stores documents as objects in an S3 bucket."""

    def __init__(
        self,
        bucket_name: str,
        region_name: str = "ap-south-1",
        aws_access_key_id: Optional[str] = None,
        aws_secret_access_key: Optional[str] = None,
        prefix: str = "",
    ):
        """
        Initialize the S3 storage service.

        Args:
            bucket_name: Name of the S3 bucket
            region_name: AWS region name
            aws_access_key_id: AWS access key ID (optional, can use IAM roles)
            aws_secret_access_key: AWS secret access key (optional, can use IAM roles)
            prefix: Optional key prefix for all stored documents

        Raises:
            StorageError: If the bucket cannot be reached
        """
        self.bucket_name = bucket_name
        self.region_name = region_name
        self.prefix = prefix.strip("/")

        try:
            session_kwargs = {"region_name": region_name}
            if aws_access_key_id and aws_secret_access_key:
                session_kwargs.update(
                    {
                        "aws_access_key_id": aws_access_key_id,
                        "aws_secret_access_key": aws_secret_access_key,
                    }
                )
            self.s3_client = boto3.client("s3", **session_kwargs)
            self.s3_client.head_bucket(Bucket=bucket_name)
        except NoCredentialsError:
            raise StorageError("AWS credentials not found")
        except ClientError as e:
            error_code = e.response["Error"]["Code"]
            if error_code == "404":
                raise StorageError(f"S3 bucket '{bucket_name}' not found")
            elif error_code == "403":
                raise StoragePermissionError(
                    f"Access denied to S3 bucket '{bucket_name}'"
                )
            else:
                raise StorageError(f"Failed to connect to S3: {e}")

    def _get_s3_key(self, file_path: str) -> str:
        clean_path = file_path.lstrip("/")
        if self.prefix:
            return f"{self.prefix}/{clean_path}"
        return clean_path

    def _raise_for(self, action: str, file_path: str, e: ClientError) -> None:
        error_code = e.response["Error"]["Code"]
        if error_code in ("NoSuchKey", "404"):
            raise StorageNotFoundError(f"File not found: {file_path}")
        if error_code in ("403", "AccessDenied"):
            raise StoragePermissionError(
                f"Permission denied {action} file {file_path}: {e}"
            )
        raise StorageError(f"Failed {action} file {file_path}: {e}")

    def store_file(self, file_path: str, content: bytes) -> str:
        try:
            self.s3_client.put_object(
                Bucket=self.bucket_name,
                Key=self._get_s3_key(file_path),
                Body=content,
                ContentType="application/json",
            )
            return file_path
        except ClientError as e:
            self._raise_for("storing", file_path, e)

    def retrieve_file(self, file_path: str) -> bytes:
        try:
            response = self.s3_client.get_object(
                Bucket=self.bucket_name, Key=self._get_s3_key(file_path)
            )
            return response["Body"].read()
        except ClientError as e:
            self._raise_for("retrieving", file_path, e)

    def delete_file(self, file_path: str) -> bool:
        if not self.file_exists(file_path):
            return False
        try:
            self.s3_client.delete_object(
                Bucket=self.bucket_name, Key=self._get_s3_key(file_path)
            )
            return True
        except ClientError as e:
            self._raise_for("deleting", file_path, e)

    def file_exists(self, file_path: str) -> bool:
        try:
            self.s3_client.head_object(
                Bucket=self.bucket_name, Key=self._get_s3_key(file_path)
            )
            return True
        except ClientError as e:
            if e.response["Error"]["Code"] in ("404", "NoSuchKey"):
                return False
            self._raise_for("checking", file_path, e)

    def list_files(self, prefix: str = "") -> List[str]:
        files = []
        try:
            paginator = self.s3_client.get_paginator("list_objects_v2")
            for page in paginator.paginate(
                Bucket=self.bucket_name, Prefix=self._get_s3_key(prefix)
            ):
                for obj in page.get("Contents", []):
                    key = obj["Key"]
                    if self.prefix:
                        key = key[len(self.prefix) + 1 :]
                    files.append(key)
        except ClientError as e:
            self._raise_for("listing", prefix, e)
        return sorted(files)
