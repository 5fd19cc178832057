"""Asset repository protocol.

ONLY asset metadata storage contract - the four record operations the core
needs. Single-record create/delete atomicity is the store's responsibility.
"""

from typing import Any, Dict, List, Optional
from typing_extensions import Protocol, runtime_checkable

from ..entities.asset import Asset


@runtime_checkable
class AssetRepository(Protocol):
    """Asset repository protocol."""

    async def create(self, asset: Asset) -> Asset:
        """Persist a new asset record and return the stored version."""
        ...

    async def find_many(self, filters: Dict[str, Any]) -> List[Asset]:
        """Return assets whose columns equal every filter value."""
        ...

    async def find_one(self, asset_id: str) -> Optional[Asset]:
        """Return the asset with this id, or None."""
        ...

    async def delete(self, asset_id: str) -> None:
        """Delete the asset record with this id."""
        ...
