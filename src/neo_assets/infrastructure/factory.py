"""Default wiring.

ONLY composition - builds an AssetService from settings with the asyncpg
record store, S3 storage and Pillow image processing.
"""

import logging
from typing import Any, Optional

from ..application.notifier import AssetEventNotifier
from ..application.services.asset_service import AssetService
from ..config.settings import AssetSettings, get_settings
from ..core.exceptions import ConfigurationError
from ..core.protocols import AssetCapabilities, AssetRepository
from .imaging.pillow_processor import PillowImageProcessor
from .repositories.asset_repository import AssetDatabaseRepository
from .repositories.database import AsyncpgDatabase
from .storage.s3_storage import S3Storage

logger = logging.getLogger(__name__)


def create_capabilities(settings: AssetSettings, s3_client: Any = None) -> AssetCapabilities:
    """Storage capabilities when a bucket is configured, image processing always."""
    image_processor = PillowImageProcessor()
    if not settings.storage_enabled:
        logger.warning("S3_BUCKET not set; uploads of file content will fail")
        return AssetCapabilities(image_processor=image_processor)
    storage = S3Storage.from_settings(settings, client=s3_client)
    return storage.as_capabilities(image_processor=image_processor)


def create_repository(settings: AssetSettings) -> AssetDatabaseRepository:
    if not settings.database_url:
        raise ConfigurationError("DATABASE_URL is required", error_code="DATABASE_URL_MISSING")
    database = AsyncpgDatabase(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    return AssetDatabaseRepository(database, schema=settings.assets_schema, table=settings.assets_table)


def create_asset_service_from_settings(
    settings: Optional[AssetSettings] = None,
    asset_repository: Optional[AssetRepository] = None,
    capabilities: Optional[AssetCapabilities] = None,
    notifier: Optional[AssetEventNotifier] = None,
    s3_client: Any = None
) -> AssetService:
    """Create a fully wired asset service.

    Explicit arguments override the settings-derived defaults.
    """
    settings = settings or get_settings()
    service = AssetService(
        asset_repository=asset_repository or create_repository(settings),
        capabilities=capabilities or create_capabilities(settings, s3_client=s3_client),
        config=settings.to_service_config(),
        notifier=notifier,
    )
    logger.info(
        f"Asset service ready: preview_max_width={service.config.preview_max_width}, "
        f"generate_preview={service.config.generate_preview}, "
        f"admin_delete_policy={service.config.admin_delete_policy.value}"
    )
    return service
