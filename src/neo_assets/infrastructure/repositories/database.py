"""Database access for asset repositories.

ONLY query execution - a protocol for the three execute calls repositories
use, and an asyncpg pool implementation of it.
"""

import asyncio
import logging
from abc import abstractmethod
from typing import Any, Dict, List, Optional
from typing_extensions import Protocol, runtime_checkable

import asyncpg

from ...core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@runtime_checkable
class DatabaseRepository(Protocol):
    """Base protocol for database repositories."""

    @abstractmethod
    async def execute_query(self, query: str, *args: Any) -> List[Dict[str, Any]]:
        """Execute a query and return all rows."""
        ...

    @abstractmethod
    async def execute_fetchrow(self, query: str, *args: Any) -> Optional[Dict[str, Any]]:
        """Execute a query and return single row."""
        ...

    @abstractmethod
    async def execute_command(self, command: str, *args: Any) -> str:
        """Execute a command and return status."""
        ...


class AsyncpgDatabase:
    """DatabaseRepository over a lazily created asyncpg pool."""

    def __init__(self, dsn: str, min_size: int = 1, max_size: int = 10):
        if not dsn:
            raise ConfigurationError("Database URL is required", error_code="DATABASE_URL_MISSING")
        self._dsn = dsn
        self._min_size = min_size
        self._max_size = max_size
        self._pool: Optional[asyncpg.Pool] = None
        self._lock = asyncio.Lock()

    async def _ensure_pool(self) -> asyncpg.Pool:
        if self._pool is None:
            async with self._lock:
                if self._pool is None:
                    self._pool = await asyncpg.create_pool(
                        dsn=self._dsn,
                        min_size=self._min_size,
                        max_size=self._max_size,
                    )
                    logger.info(f"Created asset database pool: min={self._min_size}, max={self._max_size}")
        return self._pool

    async def execute_query(self, query: str, *args: Any) -> List[Dict[str, Any]]:
        pool = await self._ensure_pool()
        rows = await pool.fetch(query, *args)
        return [dict(row) for row in rows]

    async def execute_fetchrow(self, query: str, *args: Any) -> Optional[Dict[str, Any]]:
        pool = await self._ensure_pool()
        row = await pool.fetchrow(query, *args)
        return dict(row) if row is not None else None

    async def execute_command(self, command: str, *args: Any) -> str:
        pool = await self._ensure_pool()
        return await pool.execute(command, *args)

    async def close(self) -> None:
        if self._pool is not None:
            async with self._lock:
                if self._pool is not None:
                    await self._pool.close()
                    self._pool = None
                    logger.info("Closed asset database pool")
