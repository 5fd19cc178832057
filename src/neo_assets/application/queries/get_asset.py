"""Get asset query.

ONLY single asset lookup - fetches by id and checks the record belongs to
the caller's scope. Out-of-scope records are reported exactly like missing
ones so that lookups cannot probe other tenants' ids.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ...core.entities.asset import Asset
from ...core.entities.scope import AssetScope
from ...core.exceptions import AssetNotFound
from ...core.protocols import AssetRepository

logger = logging.getLogger(__name__)


@dataclass
class GetAssetResult:
    """Result of get asset query."""

    success: bool
    asset: Optional[Asset] = None

    # Error information
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    error_details: Optional[Dict[str, Any]] = None


def is_visible_to(asset: Asset, scope: AssetScope) -> bool:
    """Visibility rule shared by listing and lookup."""
    if scope.is_admin:
        return asset.is_owned_by_admin(scope.admin_id)
    return asset.is_owned_by_user(scope.user_id)


class GetAssetQuery:
    """Query returning one asset visible to the caller."""

    def __init__(self, asset_repository: AssetRepository):
        self._asset_repository = asset_repository

    async def execute(self, asset_id: str, scope: AssetScope) -> GetAssetResult:
        try:
            asset = await self._asset_repository.find_one(asset_id)
        except Exception as e:
            logger.error(f"Error fetching asset {asset_id}: {str(e)}", exc_info=True)
            return GetAssetResult(
                success=False,
                error_code="PERSISTENCE_FAILED",
                error_message=f"Failed to fetch asset: {str(e)}",
                error_details={"asset_id": asset_id}
            )

        if asset is None or not is_visible_to(asset, scope):
            if asset is not None:
                logger.info(f"Asset {asset_id} requested outside its owner scope")
            not_found = AssetNotFound(asset_id)
            return GetAssetResult(
                success=False,
                error_code=not_found.error_code,
                error_message=not_found.message,
                error_details=not_found.details
            )

        return GetAssetResult(success=True, asset=asset)


def create_get_asset_query(asset_repository: AssetRepository) -> GetAssetQuery:
    """Create get asset query."""
    return GetAssetQuery(asset_repository)
