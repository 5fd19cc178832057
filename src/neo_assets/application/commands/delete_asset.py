"""Delete asset command.

ONLY asset deletion - verifies ownership, announces the deletion, removes
the backing binaries best-effort and deletes the metadata record.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ...config.service import AdminDeletePolicy, AssetServiceConfig
from ...core.entities.asset import Asset
from ...core.entities.scope import AssetScope
from ...core.events.asset_events import AssetDeleting
from ...core.exceptions import (
    AssetNotFound,
    NeoAssetsError,
    PermissionDenied,
    PersistenceError,
)
from ...core.protocols import AssetCapabilities, AssetRepository
from ...utils import resolve
from ..notifier import AssetEventNotifier

logger = logging.getLogger(__name__)


@dataclass
class DeleteAssetData:
    """Data required to delete an asset."""

    scope: AssetScope
    asset_id: str


@dataclass
class DeleteAssetResult:
    """Result of asset deletion operation."""

    success: bool
    asset_id: str

    # Binary cleanup outcome, informational only
    primary_deleted: bool = False
    thumbnail_deleted: bool = False

    # Error information
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    error_details: Optional[Dict[str, Any]] = None


def can_delete(asset: Asset, scope: AssetScope, policy: AdminDeletePolicy) -> bool:
    """Authorization rule for deletion.

    A user scope must own the asset. An admin scope must own it too under
    the OWNER policy; under ANY every admin identity may delete.
    """
    if scope.is_admin:
        if policy == AdminDeletePolicy.ANY:
            return True
        return asset.is_owned_by_admin(scope.admin_id)
    return asset.is_owned_by_user(scope.user_id)


class DeleteAssetCommand:
    """Command to delete an asset.

    Binary deletion failures are logged and never block the deletion of the
    record, which is the authoritative state.
    """

    def __init__(
        self,
        asset_repository: AssetRepository,
        capabilities: AssetCapabilities,
        config: Optional[AssetServiceConfig] = None,
        notifier: Optional[AssetEventNotifier] = None
    ):
        """Initialize delete asset command.

        Args:
            asset_repository: Record store for asset metadata
            capabilities: Host storage capabilities
            config: Authorization policy settings
            notifier: Optional observer registry for AssetDeleting
        """
        self._asset_repository = asset_repository
        self._capabilities = capabilities
        self._config = config or AssetServiceConfig()
        self._notifier = notifier

    async def execute(self, data: DeleteAssetData) -> DeleteAssetResult:
        """Execute asset deletion operation. Never raises."""
        try:
            asset = await self._load(data.asset_id)

            if not can_delete(asset, data.scope, self._config.admin_delete_policy):
                raise PermissionDenied(data.asset_id, scope=data.scope.as_filter())

            primary_deleted = False
            thumbnail_deleted = False

            if asset.key:
                await self._announce(asset)
                primary_deleted = await self._delete_binary(asset.key, asset.is_private)

            if asset.thumbnail_key:
                thumbnail_deleted = await self._delete_binary(asset.thumbnail_key, asset.is_private)

            try:
                await self._asset_repository.delete(asset.id)
            except Exception as e:
                raise PersistenceError("delete", cause=e) from e

            logger.info(f"Asset {asset.id} deleted")
            return DeleteAssetResult(
                success=True,
                asset_id=data.asset_id,
                primary_deleted=primary_deleted,
                thumbnail_deleted=thumbnail_deleted
            )

        except (AssetNotFound, PermissionDenied) as e:
            logger.info(f"Asset deletion refused: {e.message}")
            return self._failure(data.asset_id, e)

        except NeoAssetsError as e:
            logger.error(f"Asset deletion failed for {data.asset_id}: {e.message}", exc_info=True)
            return self._failure(data.asset_id, e)

        except Exception as e:
            logger.error(f"Unexpected error deleting asset {data.asset_id}: {str(e)}", exc_info=True)
            return DeleteAssetResult(
                success=False,
                asset_id=data.asset_id,
                error_code="DELETE_FAILED",
                error_message=f"Unexpected error during asset deletion: {str(e)}"
            )

    async def _load(self, asset_id: str) -> Asset:
        try:
            asset = await self._asset_repository.find_one(asset_id)
        except Exception as e:
            raise PersistenceError("find_one", cause=e) from e
        if asset is None:
            raise AssetNotFound(asset_id)
        return asset

    async def _announce(self, asset: Asset) -> None:
        if self._notifier is None:
            return
        try:
            await self._notifier.publish(AssetDeleting(asset_id=asset.id, is_private=asset.is_private))
        except Exception as e:
            logger.error(f"Failed to publish deleting event for asset {asset.id}: {str(e)}", exc_info=True)

    async def _delete_binary(self, key: str, is_private: bool) -> bool:
        delete = self._capabilities.delete
        if delete is None:
            logger.error(f"Cannot delete object {key}: no delete capability configured")
            return False
        try:
            await resolve(delete(key, is_private))
            return True
        except Exception as e:
            logger.error(f"Error deleting object {key}: {str(e)}", exc_info=True)
            return False

    @staticmethod
    def _failure(asset_id: str, error: NeoAssetsError) -> DeleteAssetResult:
        return DeleteAssetResult(
            success=False,
            asset_id=asset_id,
            error_code=error.error_code,
            error_message=error.message,
            error_details=error.details
        )


# Factory function for dependency injection
def create_delete_asset_command(
    asset_repository: AssetRepository,
    capabilities: AssetCapabilities,
    config: Optional[AssetServiceConfig] = None,
    notifier: Optional[AssetEventNotifier] = None
) -> DeleteAssetCommand:
    """Create delete asset command."""
    return DeleteAssetCommand(
        asset_repository=asset_repository,
        capabilities=capabilities,
        config=config,
        notifier=notifier
    )
