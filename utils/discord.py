"""
Discord Utilities
Helper functions for Discord interactions
"""

from typing import Any, Optional

import discord

from utils.logger import get_logger

logger = get_logger("DiscordUtils")


class DiscordUtils:
    """Utility class for Discord-related helper functions."""

    @staticmethod
    async def safe_send(channel: Any, content: Optional[str] = None, **kwargs: Any) -> Optional[Any]:
        """
        Safely send a message to a channel (log and suppress HTTP errors).

        Args:
            channel: Discord channel
            content: Message content
            **kwargs: Extra send options (embed, ...)

        Returns:
            Sent message or None if failed
        """
        if not channel or not hasattr(channel, "send"):
            return None
        try:
            return await channel.send(content, **kwargs)
        except discord.HTTPException as e:
            logger.warning(f"Failed to send message to {getattr(channel, 'id', channel)}: {e}")
            return None

    @staticmethod
    def format_user(user: Any) -> str:
        """
        Format a user for log lines.

        Args:
            user: Discord user or member

        Returns:
            "name#discriminator", or just the name for accounts without one
        """
        discriminator = getattr(user, "discriminator", None)
        if discriminator and discriminator != "0":
            return f"{user.name}#{discriminator}"
        return str(user.name)

    @staticmethod
    def origin_name(message: Any) -> str:
        """Name of the guild a message came from, or "bot DM"."""
        guild = getattr(message, "guild", None)
        return guild.name if guild else "bot DM"
