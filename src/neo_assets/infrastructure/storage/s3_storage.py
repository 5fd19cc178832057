"""S3 object storage.

ONLY binary storage - puts and deletes objects in a public or private bucket
and builds the URL the asset record points at. boto3 is blocking, so every
call runs in a worker thread.
"""

import asyncio
import logging
import re
import uuid
from typing import Any, Optional

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from ...config.settings import AssetSettings
from ...core.exceptions import ConfigurationError
from ...core.protocols import AssetCapabilities, ImageProcessor
from ...core.value_objects.storage_result import StorageResult

logger = logging.getLogger(__name__)

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def create_s3_client(settings: AssetSettings):
    """Create a boto3 S3 client from settings.

    endpoint_url stays None for AWS and is set for S3-compatible providers.
    """
    secret = settings.s3_secret_access_key.get_secret_value() if settings.s3_secret_access_key else None
    return boto3.client(
        "s3",
        endpoint_url=(settings.s3_endpoint_url or "").strip() or None,
        aws_access_key_id=settings.s3_access_key_id,
        aws_secret_access_key=secret,
        region_name=settings.s3_region,
        config=Config(
            signature_version="s3v4",
            retries={"max_attempts": 5, "mode": "standard"},
        ),
    )


def safe_key_name(filename: Optional[str]) -> str:
    """Reduce a display filename to characters safe in an object key."""
    cleaned = _UNSAFE_KEY_CHARS.sub("-", filename or "").strip("-.")
    return cleaned or "file"


class S3Storage:
    """Upload and delete capabilities backed by S3."""

    def __init__(
        self,
        client: Any,
        bucket: str,
        private_bucket: Optional[str] = None,
        region: Optional[str] = None,
        key_prefix: str = "assets",
        public_base_url: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        presign_expires_seconds: int = 3600
    ):
        if not bucket:
            raise ConfigurationError("S3 bucket is required", error_code="S3_BUCKET_MISSING")
        self._client = client
        self._bucket = bucket
        self._private_bucket = private_bucket or bucket
        self._region = region
        self._key_prefix = key_prefix.strip("/")
        self._public_base_url = public_base_url.rstrip("/") if public_base_url else None
        self._endpoint_url = endpoint_url.rstrip("/") if endpoint_url else None
        self._presign_expires_seconds = presign_expires_seconds

    @classmethod
    def from_settings(cls, settings: AssetSettings, client: Any = None) -> "S3Storage":
        return cls(
            client=client or create_s3_client(settings),
            bucket=settings.s3_bucket,
            private_bucket=settings.s3_private_bucket,
            region=settings.s3_region,
            key_prefix=settings.s3_key_prefix,
            public_base_url=settings.s3_public_base_url,
            endpoint_url=settings.s3_endpoint_url,
            presign_expires_seconds=settings.s3_presign_expires_seconds,
        )

    def bucket_for(self, is_private: bool) -> str:
        return self._private_bucket if is_private else self._bucket

    def build_key(self, filename: Optional[str]) -> str:
        name = f"{uuid.uuid4().hex}-{safe_key_name(filename)}"
        return f"{self._key_prefix}/{name}" if self._key_prefix else name

    def object_url(self, bucket: str, key: str, is_private: bool) -> str:
        """Stable URL for a stored object, saved on the asset record.

        Public objects use the configured base URL when set. Otherwise the
        custom endpoint or the AWS virtual host is used. Private objects are
        not readable at this URL; hosts sign a link with presigned_url.
        """
        if self._public_base_url and not is_private:
            return f"{self._public_base_url}/{key}"
        if self._endpoint_url:
            return f"{self._endpoint_url}/{bucket}/{key}"
        region = self._region or "us-east-1"
        return f"https://{bucket}.s3.{region}.amazonaws.com/{key}"

    def presigned_url(self, key: str, is_private: bool, expires_in: Optional[int] = None) -> str:
        """Time-limited GET URL for an object, signed when the asset is read."""
        return self._client.generate_presigned_url(
            "get_object",
            Params={"Bucket": self.bucket_for(is_private), "Key": key},
            ExpiresIn=expires_in or self._presign_expires_seconds,
        )

    async def upload(
        self,
        content: bytes,
        mimetype: str,
        filename: str,
        is_private: bool
    ) -> StorageResult:
        return await asyncio.to_thread(self._put, content, mimetype, filename, is_private)

    async def delete(self, key: str, is_private: bool) -> None:
        await asyncio.to_thread(self._remove, key, is_private)

    def _put(self, content: bytes, mimetype: str, filename: str, is_private: bool) -> StorageResult:
        bucket = self.bucket_for(is_private)
        key = self.build_key(filename)
        try:
            self._client.put_object(
                Bucket=bucket,
                Key=key,
                Body=content,
                ContentType=mimetype or "application/octet-stream",
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"S3 upload failed for {bucket}/{key}: {str(e)}")
            raise

        logger.debug(f"Stored {len(content)} bytes at {bucket}/{key}")
        return StorageResult(
            url=self.object_url(bucket, key, is_private),
            key=key,
            bucket=bucket,
            region=self._region,
        )

    def _remove(self, key: str, is_private: bool) -> None:
        bucket = self.bucket_for(is_private)
        try:
            self._client.delete_object(Bucket=bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"S3 delete failed for {bucket}/{key}: {str(e)}")
            raise
        logger.debug(f"Deleted {bucket}/{key}")

    def as_capabilities(self, image_processor: Optional[ImageProcessor] = None) -> AssetCapabilities:
        """Bundle this storage with an optional image processor."""
        return AssetCapabilities(
            upload=self.upload,
            delete=self.delete,
            image_processor=image_processor,
        )


def create_s3_storage(settings: AssetSettings, client: Any = None) -> S3Storage:
    """Create S3 storage."""
    return S3Storage.from_settings(settings, client=client)
