"""List assets query.

ONLY scoped listing - returns the assets owned by the caller's scope,
filtered at the record store.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ...core.entities.asset import Asset
from ...core.entities.scope import AssetScope
from ...core.protocols import AssetRepository

logger = logging.getLogger(__name__)


@dataclass
class ListAssetsResult:
    """Result of list assets query."""

    success: bool
    assets: List[Asset] = field(default_factory=list)

    # Error information
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    error_details: Optional[Dict[str, Any]] = None


class ListAssetsQuery:
    """Query listing the assets of one ownership scope.

    A scope owning nothing yields an empty list, never an error.
    """

    def __init__(self, asset_repository: AssetRepository):
        self._asset_repository = asset_repository

    async def execute(self, scope: AssetScope) -> ListAssetsResult:
        try:
            assets = await self._asset_repository.find_many(scope.as_filter())
            return ListAssetsResult(success=True, assets=list(assets))
        except Exception as e:
            logger.error(f"Error listing assets for scope {scope.as_filter()}: {str(e)}", exc_info=True)
            return ListAssetsResult(
                success=False,
                error_code="PERSISTENCE_FAILED",
                error_message=f"Failed to list assets: {str(e)}",
                error_details={"scope": scope.as_filter()}
            )


def create_list_assets_query(asset_repository: AssetRepository) -> ListAssetsQuery:
    """Create list assets query."""
    return ListAssetsQuery(asset_repository)
