"""Asset management commands."""

from .upload_asset import (
    UploadAssetCommand,
    UploadAssetData,
    UploadAssetResult,
    create_upload_asset_command,
    resolve_file_name,
    thumbnail_name_for,
)
from .upload_assets import (
    UploadAssetsCommand,
    UploadAssetsData,
    UploadAssetsResult,
    create_upload_assets_command,
)
from .delete_asset import (
    DeleteAssetCommand,
    DeleteAssetData,
    DeleteAssetResult,
    can_delete,
    create_delete_asset_command,
)

__all__ = [
    # Upload
    "UploadAssetCommand",
    "UploadAssetData",
    "UploadAssetResult",
    "create_upload_asset_command",
    "resolve_file_name",
    "thumbnail_name_for",

    # Batch upload
    "UploadAssetsCommand",
    "UploadAssetsData",
    "UploadAssetsResult",
    "create_upload_assets_command",

    # Delete
    "DeleteAssetCommand",
    "DeleteAssetData",
    "DeleteAssetResult",
    "can_delete",
    "create_delete_asset_command",
]
