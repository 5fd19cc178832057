"""Object storage adapters."""

from .s3_storage import S3Storage, create_s3_client, create_s3_storage, safe_key_name

__all__ = [
    "S3Storage",
    "create_s3_client",
    "create_s3_storage",
    "safe_key_name",
]
