"""Infrastructure adapters: S3 storage, Pillow imaging, asyncpg records, FastAPI."""

from .factory import create_asset_service_from_settings, create_capabilities, create_repository
from .imaging import PillowImageProcessor
from .repositories import AssetDatabaseRepository, AsyncpgDatabase, DatabaseRepository
from .storage import S3Storage

__all__ = [
    "create_asset_service_from_settings",
    "create_capabilities",
    "create_repository",
    "PillowImageProcessor",
    "AssetDatabaseRepository",
    "AsyncpgDatabase",
    "DatabaseRepository",
    "S3Storage",
]
