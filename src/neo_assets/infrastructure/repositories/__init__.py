"""Asset record store adapters."""

from .database import DatabaseRepository, AsyncpgDatabase
from .asset_repository import AssetDatabaseRepository, FILTERABLE_COLUMNS, create_asset_repository

__all__ = [
    "DatabaseRepository",
    "AsyncpgDatabase",
    "AssetDatabaseRepository",
    "FILTERABLE_COLUMNS",
    "create_asset_repository",
]
