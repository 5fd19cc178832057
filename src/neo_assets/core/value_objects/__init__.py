"""Asset management value objects."""

from .asset_id import AssetId
from .storage_result import StorageResult
from .image_metadata import ImageMetadata

__all__ = [
    "AssetId",
    "StorageResult",
    "ImageMetadata",
]
