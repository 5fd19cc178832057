"""Asset management application services."""

from .asset_service import AssetService, create_asset_service

__all__ = [
    "AssetService",
    "create_asset_service",
]
