"""Asset management application layer.

Commands (upload, batch upload, delete), queries (list, get), the event
notifier and the AssetService facade.
"""

from .classifier import classify
from .notifier import AssetEventNotifier, create_event_notifier
from .commands import *
from .queries import *
from .services import AssetService, create_asset_service

__all__ = [
    "classify",
    "AssetEventNotifier",
    "create_event_notifier",

    # Commands
    "UploadAssetCommand",
    "UploadAssetData",
    "UploadAssetResult",
    "UploadAssetsCommand",
    "UploadAssetsData",
    "UploadAssetsResult",
    "DeleteAssetCommand",
    "DeleteAssetData",
    "DeleteAssetResult",

    # Queries
    "ListAssetsQuery",
    "ListAssetsResult",
    "GetAssetQuery",
    "GetAssetResult",

    # Services
    "AssetService",
    "create_asset_service",
]
