"""
Environment settings for neo-assets.

Values are read once at startup from the environment (or a .env file) and
turned into the immutable configuration objects the service is built from.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .service import AdminDeletePolicy, AssetServiceConfig


class AssetSettings(BaseSettings):
    """Settings for the asset service and its default adapters."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True
    )

    # Thumbnails
    preview_max_width: int = Field(default=512, gt=0, alias="PREVIEW_MAX_WIDTH")
    generate_preview: bool = Field(default=True, alias="GENERATE_PREVIEW")

    # Authorization
    admin_delete_policy: AdminDeletePolicy = Field(
        default=AdminDeletePolicy.OWNER, alias="ADMIN_DELETE_POLICY"
    )

    # Record store
    database_url: Optional[str] = Field(default=None, alias="DATABASE_URL")
    assets_schema: str = Field(default="public", alias="ASSETS_SCHEMA")
    assets_table: str = Field(default="assets", alias="ASSETS_TABLE")
    db_pool_min_size: int = Field(default=1, alias="DB_POOL_MIN_SIZE")
    db_pool_max_size: int = Field(default=10, alias="DB_POOL_MAX_SIZE")

    # Object storage
    s3_bucket: Optional[str] = Field(default=None, alias="S3_BUCKET")
    s3_private_bucket: Optional[str] = Field(default=None, alias="S3_PRIVATE_BUCKET")
    s3_region: str = Field(default="us-east-1", alias="S3_REGION")
    s3_endpoint_url: Optional[str] = Field(default=None, alias="S3_ENDPOINT_URL")
    s3_public_base_url: Optional[str] = Field(default=None, alias="S3_PUBLIC_BASE_URL")
    s3_key_prefix: str = Field(default="assets", alias="S3_KEY_PREFIX")
    s3_presign_expires_seconds: int = Field(default=3600, gt=0, alias="S3_PRESIGN_EXPIRES_SECONDS")
    s3_access_key_id: Optional[str] = Field(default=None, alias="S3_ACCESS_KEY_ID")
    s3_secret_access_key: Optional[SecretStr] = Field(default=None, alias="S3_SECRET_ACCESS_KEY")

    @property
    def storage_enabled(self) -> bool:
        return bool(self.s3_bucket)

    def to_service_config(self) -> AssetServiceConfig:
        """Build the orchestration configuration."""
        return AssetServiceConfig(
            preview_max_width=self.preview_max_width,
            generate_preview=self.generate_preview,
            admin_delete_policy=self.admin_delete_policy,
        )


@lru_cache()
def get_settings() -> AssetSettings:
    """Get cached settings instance."""
    return AssetSettings()
