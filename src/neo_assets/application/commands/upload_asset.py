"""Upload asset command.

ONLY single asset ingestion - stores the primary binary, derives image
metadata and thumbnail, persists the record once and announces it.

The record is written only after every derivation succeeded, so a failed
sequence never leaves a record behind.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ...config.service import AssetServiceConfig
from ...core.entities.asset import Asset, AssetType
from ...core.entities.scope import AssetScope
from ...core.entities.uploaded_file import UploadedFile
from ...core.events.asset_events import AssetUploaded
from ...core.exceptions import (
    CapabilityFailed,
    CapabilityMissing,
    NeoAssetsError,
    PersistenceError,
    UploadFailed,
)
from ...core.protocols import AssetCapabilities, AssetRepository
from ...core.value_objects.asset_id import AssetId
from ...core.value_objects.image_metadata import ImageMetadata
from ...core.value_objects.storage_result import StorageResult
from ...utils import resolve
from ..classifier import classify
from ..notifier import AssetEventNotifier

logger = logging.getLogger(__name__)

THUMBNAIL_SUFFIX = "-thumbnail"

# Vector sources are rasterized for their thumbnail
RASTERIZED_MIMETYPES = {
    "image/svg+xml": "image/png",
}


@dataclass
class UploadAssetData:
    """Data required to upload one asset."""

    scope: AssetScope
    file: UploadedFile
    is_private: bool = False
    name: Optional[str] = None


@dataclass
class UploadAssetResult:
    """Result of asset upload operation."""

    success: bool
    asset: Optional[Asset] = None
    filename: str = ""
    upload_duration_ms: int = 0

    # Error information
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    error_details: Optional[Dict[str, Any]] = None


def resolve_file_name(file: UploadedFile, name: Optional[str] = None) -> str:
    """Effective filename: explicit name, else the file's name, else its id."""
    return name or file.filename or file.id


def thumbnail_name_for(file_name: str) -> str:
    return f"{file_name}{THUMBNAIL_SUFFIX}"


def thumbnail_mimetype_for(mimetype: str) -> str:
    return RASTERIZED_MIMETYPES.get(mimetype, mimetype)


class UploadAssetCommand:
    """Command to ingest a single asset.

    Steps:
    - resolve the effective filename
    - store the primary binary, or register a pre-hosted URL as-is
    - build the draft record with the caller's ownership
    - for images, decode dimensions and upload a thumbnail
    - persist the record and publish AssetUploaded
    """

    def __init__(
        self,
        asset_repository: AssetRepository,
        capabilities: AssetCapabilities,
        config: Optional[AssetServiceConfig] = None,
        notifier: Optional[AssetEventNotifier] = None
    ):
        """Initialize upload asset command.

        Args:
            asset_repository: Record store for asset metadata
            capabilities: Host storage and image capabilities
            config: Thumbnail settings
            notifier: Optional observer registry for AssetUploaded
        """
        self._asset_repository = asset_repository
        self._capabilities = capabilities
        self._config = config or AssetServiceConfig()
        self._notifier = notifier

    async def execute(self, data: UploadAssetData) -> UploadAssetResult:
        """Execute asset upload operation.

        Never raises: every failure is logged and returned as a failed result.
        """
        start_time = datetime.now(timezone.utc)
        file = data.file
        file_name = resolve_file_name(file, data.name)
        uploaded_keys: List[str] = []

        try:
            storage_result = await self._store_primary(file, file_name, data.is_private)
            if not file.is_hosted and storage_result.key:
                uploaded_keys.append(storage_result.key)

            asset = self._build_draft(data, file_name, storage_result)

            if asset.type == AssetType.IMAGE:
                await self._attach_image_details(
                    asset, file, thumbnail_name_for(file_name), data.is_private, uploaded_keys
                )
            elif file.subtype:
                asset.format = file.subtype

            saved_asset = await self._persist(asset)

            await self._announce(file, data.is_private, storage_result, saved_asset)

            logger.info(f"Asset {saved_asset.id} uploaded: {file_name} ({saved_asset.type.value})")
            return UploadAssetResult(
                success=True,
                asset=saved_asset,
                filename=file_name,
                upload_duration_ms=self._elapsed_ms(start_time)
            )

        except NeoAssetsError as e:
            logger.error(f"Asset upload failed for {file_name}: {e.message}", exc_info=True)
            await self._cleanup(uploaded_keys, data.is_private)
            return UploadAssetResult(
                success=False,
                filename=file_name,
                upload_duration_ms=self._elapsed_ms(start_time),
                error_code=e.error_code,
                error_message=e.message,
                error_details=e.details
            )

        except Exception as e:
            logger.error(f"Unexpected error uploading {file_name}: {str(e)}", exc_info=True)
            await self._cleanup(uploaded_keys, data.is_private)
            return UploadAssetResult(
                success=False,
                filename=file_name,
                upload_duration_ms=self._elapsed_ms(start_time),
                error_code="UPLOAD_FAILED",
                error_message=f"Unexpected error during upload: {str(e)}"
            )

    async def _store_primary(self, file: UploadedFile, file_name: str, is_private: bool) -> StorageResult:
        """Upload the primary content, or synthesize the location of a hosted file."""
        if file.is_hosted:
            logger.info(f"Upload will be skipped as URL is provided: {file.url}")
            return StorageResult(
                url=file.url,
                key=file.id,
                bucket=file.bucket,
                region=file.region,
            )
        return await self._upload_binary(file.content, file.mimetype, file_name, is_private, "primary")

    async def _upload_binary(
        self,
        content: bytes,
        mimetype: str,
        file_name: str,
        is_private: bool,
        stage: str
    ) -> StorageResult:
        upload = self._capabilities.upload
        if upload is None:
            raise CapabilityMissing("upload", details={"upload_stage": stage})

        try:
            raw_result = await resolve(upload(content, mimetype, file_name, is_private))
        except Exception as e:
            raise CapabilityFailed(
                "upload", cause=e, details={"upload_stage": stage, "filename": file_name}
            ) from e

        result = StorageResult.coerce(raw_result)
        if result is None or not result.has_url:
            raise UploadFailed(
                message="Upload function did not return a URL, which is mandatory",
                filename=file_name,
                upload_stage=stage
            )
        return result

    def _build_draft(self, data: UploadAssetData, file_name: str, storage_result: StorageResult) -> Asset:
        file = data.file
        return Asset(
            id=AssetId.generate().to_string(),
            name=file_name,
            url=storage_result.url,
            type=classify(file.mimetype),
            key=storage_result.key or None,
            bucket=storage_result.bucket or None,
            region=storage_result.region or None,
            filesize=file.filesize or 0,
            mimetype=file.mimetype or None,
            is_private=data.is_private,
            **data.scope.ownership_fields()
        )

    async def _attach_image_details(
        self,
        asset: Asset,
        file: UploadedFile,
        thumbnail_name: str,
        is_private: bool,
        uploaded_keys: List[str]
    ) -> None:
        processor = self._capabilities.image_processor
        if processor is None:
            raise CapabilityMissing("image_processor")

        meta = await self._read_image_metadata(file.content)
        asset.width = meta.width
        asset.height = meta.height
        asset.format = meta.format

        if not self._config.generate_preview:
            return

        logger.info(f"Creating thumbnail for image: {asset.name}")
        thumbnail_content = await self._create_thumbnail(file.content, meta.width)
        thumbnail = await self._upload_binary(
            thumbnail_content, thumbnail_mimetype_for(file.mimetype), thumbnail_name, is_private, "thumbnail"
        )
        if thumbnail.key:
            uploaded_keys.append(thumbnail.key)

        asset.thumbnail_url = thumbnail.url
        asset.thumbnail_key = thumbnail.key

    async def _read_image_metadata(self, content: bytes) -> ImageMetadata:
        try:
            raw_meta = await resolve(self._capabilities.image_processor.get_image_metadata(content))
            return ImageMetadata.coerce(raw_meta)
        except Exception as e:
            raise CapabilityFailed("image_processor", cause=e, details={"operation": "metadata"}) from e

    async def _create_thumbnail(self, content: bytes, original_width: Optional[int]) -> bytes:
        """Resize to the preview width, capped at the original width."""
        target_width = self._config.preview_max_width
        if original_width:
            target_width = min(target_width, original_width)
        try:
            return await resolve(self._capabilities.image_processor.resize(content, target_width))
        except Exception as e:
            raise CapabilityFailed("image_processor", cause=e, details={"operation": "resize"}) from e

    async def _persist(self, asset: Asset) -> Asset:
        try:
            return await self._asset_repository.create(asset)
        except Exception as e:
            raise PersistenceError("create", cause=e) from e

    async def _announce(
        self,
        file: UploadedFile,
        is_private: bool,
        storage_result: StorageResult,
        asset: Asset
    ) -> None:
        if self._notifier is None:
            return
        try:
            await self._notifier.publish(AssetUploaded(
                file=file,
                is_private=is_private,
                storage_result=storage_result,
                asset=asset,
            ))
        except Exception as e:
            logger.error(f"Failed to publish upload event for asset {asset.id}: {str(e)}", exc_info=True)

    async def _cleanup(self, keys: List[str], is_private: bool) -> None:
        """Best-effort removal of binaries stored by a failed sequence."""
        if not keys:
            return
        delete = self._capabilities.delete
        if delete is None:
            logger.warning(f"Cannot clean up {len(keys)} orphaned object(s): no delete capability")
            return
        for key in keys:
            try:
                await resolve(delete(key, is_private))
            except Exception as e:
                logger.error(f"Failed to clean up orphaned object {key}: {str(e)}", exc_info=True)

    @staticmethod
    def _elapsed_ms(start_time: datetime) -> int:
        return int((datetime.now(timezone.utc) - start_time).total_seconds() * 1000)


# Factory function for dependency injection
def create_upload_asset_command(
    asset_repository: AssetRepository,
    capabilities: AssetCapabilities,
    config: Optional[AssetServiceConfig] = None,
    notifier: Optional[AssetEventNotifier] = None
) -> UploadAssetCommand:
    """Create upload asset command."""
    return UploadAssetCommand(
        asset_repository=asset_repository,
        capabilities=capabilities,
        config=config,
        notifier=notifier
    )
