"""
Database connection management using asyncpg.
"""

from typing import Optional

import asyncpg

from utils.logger import get_logger

logger = get_logger("Database")


class Database:
    """Owns the asyncpg connection pool shared by the repositories."""

    def __init__(self, url: str):
        self.url = url
        self.pool: Optional[asyncpg.Pool] = None

    async def connect(self) -> None:
        """Create the connection pool and the tables."""
        if not self.url:
            logger.warning("DATABASE_URL not set - using default languages and no mod logs")
            return

        try:
            self.pool = await asyncpg.create_pool(
                self.url,
                min_size=1,
                max_size=10,
                command_timeout=60,
            )
        except (OSError, asyncpg.PostgresError) as e:
            logger.error(f"Failed to connect to database: {e}")
            raise

        logger.info("Database connected successfully")
        await self._init_tables()

    async def _init_tables(self) -> None:
        """Initialize database tables if they don't exist."""
        async with self.pool.acquire() as conn:
            await conn.execute("""
                CREATE TABLE IF NOT EXISTS languages (
                    user_id VARCHAR(255) PRIMARY KEY,
                    lang VARCHAR(16) NOT NULL,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            await conn.execute("""
                CREATE TABLE IF NOT EXISTS modlogs (
                    guild_id VARCHAR(255) PRIMARY KEY,
                    channel_id VARCHAR(255),
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

        logger.info("Database tables initialized")

    async def close(self) -> None:
        """Close the connection pool."""
        if self.pool:
            await self.pool.close()
            self.pool = None
            logger.info("Database connection closed")

    def is_connected(self) -> bool:
        return self.pool is not None
