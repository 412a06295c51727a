"""
Modlog Repository
Stores the moderation log channel of each guild
"""

from typing import Any, Optional

from bot.database import Database
from repositories.base_repository import BaseRepository


class ModlogRepository(BaseRepository):
    """Repository for modlogs table."""

    def __init__(self, database: Database):
        super().__init__(database, "modlogs", "guild_id")

    async def get_channel_id(self, guild_id: Any) -> Optional[int]:
        """
        Get the moderation log channel of a guild, creating an empty record.

        Args:
            guild_id: Discord guild ID

        Returns:
            Channel ID or None when logs are disabled
        """
        record = await self.find_or_create(str(guild_id), {"channel_id": None})
        channel_id = record.get("channel_id")
        return int(channel_id) if channel_id else None

    async def set_channel_id(self, guild_id: Any, channel_id: Optional[int]) -> bool:
        """
        Set or clear (None) the moderation log channel of a guild.

        Returns:
            True if stored, False without a database
        """
        row = await self.upsert({
            "guild_id": str(guild_id),
            "channel_id": str(channel_id) if channel_id is not None else None,
        })
        return row is not None
