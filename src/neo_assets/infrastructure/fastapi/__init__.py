"""FastAPI integration for neo-assets."""

from .models import AssetResponse, DeleteAssetResponse
from .router import create_assets_router, to_uploaded_file

__all__ = [
    "AssetResponse",
    "DeleteAssetResponse",
    "create_assets_router",
    "to_uploaded_file",
]
