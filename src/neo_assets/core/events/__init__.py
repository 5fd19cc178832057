"""Asset management core events."""

from .asset_events import AssetUploaded, AssetDeleting

__all__ = [
    "AssetUploaded",
    "AssetDeleting",
]
