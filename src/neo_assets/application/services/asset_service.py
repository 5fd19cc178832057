"""Asset service.

ONLY caller-facing asset operations - wires commands and queries together
and converts their typed results into plain values. Nothing raised inside
the orchestration escapes these methods: failure is signalled by None,
False or an empty list, with the cause in the logs.
"""

import logging
from typing import List, Optional, Sequence

from ...config.service import AssetServiceConfig
from ...core.entities.asset import Asset
from ...core.entities.scope import AssetScope
from ...core.entities.uploaded_file import UploadedFile
from ...core.protocols import AssetCapabilities, AssetRepository
from ..commands.delete_asset import DeleteAssetCommand, DeleteAssetData, DeleteAssetResult
from ..commands.upload_asset import UploadAssetCommand, UploadAssetData, UploadAssetResult
from ..commands.upload_assets import UploadAssetsCommand, UploadAssetsData, UploadAssetsResult
from ..notifier import AssetEventNotifier
from ..queries.get_asset import GetAssetQuery
from ..queries.list_assets import ListAssetsQuery

logger = logging.getLogger(__name__)


class AssetService:
    """Main asset management service.

    Configuration and capabilities are fixed at construction and read-only
    afterwards, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        asset_repository: AssetRepository,
        capabilities: Optional[AssetCapabilities] = None,
        config: Optional[AssetServiceConfig] = None,
        notifier: Optional[AssetEventNotifier] = None
    ):
        """Initialize asset service.

        Args:
            asset_repository: Record store for asset metadata
            capabilities: Host storage and image capabilities
            config: Thumbnail and authorization settings
            notifier: Observer registry; a private one is created if omitted
        """
        self._asset_repository = asset_repository
        self._capabilities = capabilities or AssetCapabilities()
        self._config = config or AssetServiceConfig()
        self._notifier = notifier or AssetEventNotifier()

        # Initialize commands
        self._upload_command = UploadAssetCommand(
            asset_repository=asset_repository,
            capabilities=self._capabilities,
            config=self._config,
            notifier=self._notifier
        )
        self._upload_many_command = UploadAssetsCommand(self._upload_command)
        self._delete_command = DeleteAssetCommand(
            asset_repository=asset_repository,
            capabilities=self._capabilities,
            config=self._config,
            notifier=self._notifier
        )

        # Initialize queries
        self._list_query = ListAssetsQuery(asset_repository)
        self._get_query = GetAssetQuery(asset_repository)

    @property
    def config(self) -> AssetServiceConfig:
        return self._config

    @property
    def capabilities(self) -> AssetCapabilities:
        return self._capabilities

    @property
    def notifier(self) -> AssetEventNotifier:
        """Observer registry for AssetUploaded and AssetDeleting."""
        return self._notifier

    # Queries

    async def get_by(self, scope: AssetScope) -> List[Asset]:
        """List the assets owned by a scope."""
        try:
            result = await self._list_query.execute(scope)
            return result.assets if result.success else []
        except Exception as e:
            logger.error(f"Unexpected error listing assets: {str(e)}", exc_info=True)
            return []

    async def get_by_id(self, asset_id: str, scope: AssetScope) -> Optional[Asset]:
        """Get one asset visible to the scope, or None."""
        try:
            result = await self._get_query.execute(asset_id, scope)
            return result.asset if result.success else None
        except Exception as e:
            logger.error(f"Unexpected error fetching asset {asset_id}: {str(e)}", exc_info=True)
            return None

    # Commands

    async def upload_file(
        self,
        scope: AssetScope,
        file: UploadedFile,
        is_private: bool = False,
        name: Optional[str] = None
    ) -> Optional[Asset]:
        """Ingest one file. Returns the persisted asset or None."""
        result = await self.upload_file_result(scope, file, is_private, name)
        return result.asset if result.success else None

    async def upload_file_result(
        self,
        scope: AssetScope,
        file: UploadedFile,
        is_private: bool = False,
        name: Optional[str] = None
    ) -> UploadAssetResult:
        """Ingest one file, returning the typed result with the failure reason."""
        try:
            return await self._upload_command.execute(
                UploadAssetData(scope=scope, file=file, is_private=is_private, name=name)
            )
        except Exception as e:
            logger.error(f"Unexpected error uploading file: {str(e)}", exc_info=True)
            return UploadAssetResult(
                success=False,
                error_code="UPLOAD_FAILED",
                error_message=f"Unexpected error during upload: {str(e)}"
            )

    async def upload_files(
        self,
        scope: AssetScope,
        files: Sequence[UploadedFile],
        is_private: bool = False
    ) -> List[Asset]:
        """Ingest files one at a time. Failed files are left out of the result."""
        result = await self.upload_files_result(scope, files, is_private)
        return result.assets

    async def upload_files_result(
        self,
        scope: AssetScope,
        files: Sequence[UploadedFile],
        is_private: bool = False
    ) -> UploadAssetsResult:
        try:
            return await self._upload_many_command.execute(
                UploadAssetsData(scope=scope, files=list(files), is_private=is_private)
            )
        except Exception as e:
            logger.error(f"Unexpected error uploading files: {str(e)}", exc_info=True)
            return UploadAssetsResult()

    async def delete_asset(self, scope: AssetScope, asset_id: str) -> bool:
        """Delete an asset the scope may delete. False when missing or denied."""
        result = await self.delete_asset_result(scope, asset_id)
        return result.success

    async def delete_asset_result(self, scope: AssetScope, asset_id: str) -> DeleteAssetResult:
        try:
            return await self._delete_command.execute(DeleteAssetData(scope=scope, asset_id=asset_id))
        except Exception as e:
            logger.error(f"Unexpected error deleting asset {asset_id}: {str(e)}", exc_info=True)
            return DeleteAssetResult(
                success=False,
                asset_id=asset_id,
                error_code="DELETE_FAILED",
                error_message=f"Unexpected error during asset deletion: {str(e)}"
            )


# Factory function for dependency injection
def create_asset_service(
    asset_repository: AssetRepository,
    capabilities: Optional[AssetCapabilities] = None,
    config: Optional[AssetServiceConfig] = None,
    notifier: Optional[AssetEventNotifier] = None
) -> AssetService:
    """Create asset service."""
    return AssetService(
        asset_repository=asset_repository,
        capabilities=capabilities,
        config=config,
        notifier=notifier
    )
