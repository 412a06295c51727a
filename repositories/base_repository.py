"""
Base Repository
Generic repository pattern for database operations
"""

from abc import ABC
from typing import Any, Dict, List, Optional

import asyncpg

from bot.database import Database
from utils.logger import get_logger


class BaseRepository(ABC):
    """
    Base repository class for database operations.

    This is an abstract base class - do not instantiate directly.
    Subclasses should provide table_name and primary_key.
    """

    def __init__(
        self,
        database: Database,
        table_name: str,
        primary_key: str = "id"
    ):
        """
        Create a new repository instance.

        Args:
            database: Database owning the connection pool
            table_name: Database table name
            primary_key: Primary key column name
        """
        if self.__class__ == BaseRepository:
            raise TypeError("Cannot instantiate abstract BaseRepository directly")

        self.database = database
        self.table_name = table_name
        self.primary_key = primary_key
        self.logger = get_logger(self.__class__.__name__)

    @property
    def pool(self) -> Optional[asyncpg.Pool]:
        return self.database.pool

    def is_connected(self) -> bool:
        """Check if database is connected."""
        return self.pool is not None

    async def query(
        self,
        sql: str,
        params: Optional[List[Any]] = None
    ) -> Optional[asyncpg.Record]:
        """
        Execute a raw query returning at most one row.

        Args:
            sql: SQL query string
            params: Query parameters

        Returns:
            Query result or None when not connected
        """
        if not self.is_connected():
            self.logger.warning("Database not connected, query skipped")
            return None

        if params is None:
            params = []

        try:
            async with self.pool.acquire() as conn:
                return await conn.fetchrow(sql, *params)
        except asyncpg.PostgresError as e:
            self.logger.error(f"Query failed: {e}")
            raise

    async def find_by_id(self, id: Any) -> Optional[Dict[str, Any]]:
        """
        Find a single record by primary key.

        Args:
            id: Primary key value

        Returns:
            Record as dict or None
        """
        sql = f"""
            SELECT * FROM {self.table_name}
            WHERE {self.primary_key} = $1
        """
        row = await self.query(sql, [id])
        return dict(row) if row else None

    async def find_or_create(self, id: Any, defaults: Dict[str, Any]) -> Dict[str, Any]:
        """
        Return the record with this primary key, inserting it with defaults if missing.

        An existing record is returned unchanged. Without a database the
        defaults are returned as if they had been stored.

        Args:
            id: Primary key value
            defaults: Column values for a new record

        Returns:
            Record as dict
        """
        data = {self.primary_key: id, **defaults}

        if not self.is_connected():
            return data

        columns = list(data.keys())
        placeholders = ", ".join(f"${i + 1}" for i in range(len(columns)))

        # The no-op update makes RETURNING yield the existing row on conflict
        sql = f"""
            INSERT INTO {self.table_name} ({', '.join(columns)})
            VALUES ({placeholders})
            ON CONFLICT ({self.primary_key})
            DO UPDATE SET {self.primary_key} = EXCLUDED.{self.primary_key}
            RETURNING *
        """

        row = await self.query(sql, list(data.values()))
        return dict(row) if row else data

    async def upsert(self, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Insert a record or update the existing one.

        Args:
            data: Record data (must include primary key)

        Returns:
            Upserted record as dict or None when not connected
        """
        columns = list(data.keys())
        values = list(data.values())
        placeholders = ", ".join(f"${i + 1}" for i in range(len(values)))

        update_columns = [
            f"{column} = EXCLUDED.{column}"
            for column in columns
            if column != self.primary_key
        ]
        update_clause = ", ".join(update_columns + ["updated_at = CURRENT_TIMESTAMP"])

        sql = f"""
            INSERT INTO {self.table_name} ({', '.join(columns)})
            VALUES ({placeholders})
            ON CONFLICT ({self.primary_key})
            DO UPDATE SET {update_clause}
            RETURNING *
        """

        row = await self.query(sql, values)
        return dict(row) if row else None
