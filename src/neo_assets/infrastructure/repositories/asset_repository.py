"""PostgreSQL asset repository.

ONLY asset record persistence - maps Asset entities to rows of the assets
table through a DatabaseRepository.
"""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from ...core.entities.asset import Asset
from ...utils.uuid import is_valid_uuid
from .database import DatabaseRepository
from .queries import (
    ASSET_DELETE,
    ASSET_GET_BY_ID,
    ASSET_INSERT,
    ASSET_LIST,
    ASSETS_OWNER_INDEXES_CREATE,
    ASSETS_TABLE_CREATE,
)

logger = logging.getLogger(__name__)

# Columns find_many may filter on; anything else is rejected
FILTERABLE_COLUMNS = frozenset({"user_id", "admin_id", "type", "is_private", "mimetype"})


class AssetDatabaseRepository:
    """AssetRepository implementation over asyncpg."""

    def __init__(self, database: DatabaseRepository, schema: str = "public", table: str = "assets"):
        self._db = database
        self._schema = schema
        self._table = table

    def _sql(self, template: str, **extra: str) -> str:
        return template.format(schema=self._schema, table=self._table, **extra)

    async def ensure_schema(self) -> None:
        """Create the assets table and owner indexes if they do not exist."""
        await self._db.execute_command(self._sql(ASSETS_TABLE_CREATE))
        await self._db.execute_command(self._sql(ASSETS_OWNER_INDEXES_CREATE))
        logger.info(f"Ensured asset table {self._schema}.{self._table}")

    async def create(self, asset: Asset) -> Asset:
        try:
            row = await self._db.execute_fetchrow(
                self._sql(ASSET_INSERT),
                UUID(asset.id),
                asset.name,
                asset.url,
                asset.key,
                asset.bucket,
                asset.region,
                asset.filesize,
                asset.mimetype,
                asset.type.value,
                asset.is_private,
                asset.width,
                asset.height,
                asset.format,
                asset.thumbnail_url,
                asset.thumbnail_key,
                asset.user_id,
                asset.admin_id,
                asset.created_at,
            )
        except Exception as e:
            logger.error(f"Failed to insert asset {asset.id}: {e}")
            raise

        return self._row_to_asset(row) if row else asset

    async def find_many(self, filters: Dict[str, Any]) -> List[Asset]:
        unknown = set(filters) - FILTERABLE_COLUMNS
        if unknown:
            raise ValueError(f"Unsupported asset filter columns: {sorted(unknown)}")

        columns = sorted(filters)
        conditions = [f"{column} = ${index}" for index, column in enumerate(columns, start=1)]
        values = [self._filter_value(filters[column]) for column in columns]
        where = f"WHERE {' AND '.join(conditions)}" if conditions else ""

        rows = await self._db.execute_query(self._sql(ASSET_LIST, where=where), *values)
        return [self._row_to_asset(row) for row in rows]

    async def find_one(self, asset_id: str) -> Optional[Asset]:
        # A malformed id cannot match any row
        if not is_valid_uuid(asset_id):
            return None
        row = await self._db.execute_fetchrow(self._sql(ASSET_GET_BY_ID), UUID(asset_id))
        return self._row_to_asset(row) if row else None

    async def delete(self, asset_id: str) -> None:
        status = await self._db.execute_command(self._sql(ASSET_DELETE), UUID(asset_id))
        logger.debug(f"Deleted asset record {asset_id}: {status}")

    @staticmethod
    def _filter_value(value: Any) -> Any:
        return value.value if hasattr(value, "value") else value

    @staticmethod
    def _row_to_asset(row: Dict[str, Any]) -> Asset:
        data = dict(row)
        data["id"] = str(data["id"])
        return Asset.from_dict(data)


def create_asset_repository(
    database: DatabaseRepository,
    schema: str = "public",
    table: str = "assets"
) -> AssetDatabaseRepository:
    """Create asset database repository."""
    return AssetDatabaseRepository(database, schema=schema, table=table)
