"""Asset management queries."""

from .list_assets import ListAssetsQuery, ListAssetsResult, create_list_assets_query
from .get_asset import GetAssetQuery, GetAssetResult, create_get_asset_query, is_visible_to

__all__ = [
    "ListAssetsQuery",
    "ListAssetsResult",
    "create_list_assets_query",
    "GetAssetQuery",
    "GetAssetResult",
    "create_get_asset_query",
    "is_visible_to",
]
