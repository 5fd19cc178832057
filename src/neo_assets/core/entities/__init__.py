"""Asset management core entities."""

from .asset import Asset, AssetType
from .scope import AssetScope
from .uploaded_file import UploadedFile

__all__ = [
    "Asset",
    "AssetType",
    "AssetScope",
    "UploadedFile",
]
