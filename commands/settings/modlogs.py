"""
Modlogs Command
Shows or changes the channel moderation logs are sent to
"""

import random
from typing import Any, List

import discord

from utils.discord import DiscordUtils
from utils.validation import ValidationUtils

COMMAND = {
    "name": "modlogs",
    "group": "settings",
    "description": "modlogs_description",
    "usage": "modlogs_usage",
    "required_permissions": "manage_guild",
    "guild_only": True,
}

# Embed color of the "missing permissions" warning
WARNING_COLOR = 3066993


async def run(client: Any, message: Any, args: List[str], prefix: str, lang: Any) -> None:
    guild = message.guild

    if not args:
        channel_id = await client.modlog_repository.get_channel_id(guild.id)
        channel = client.get_channel(channel_id) if channel_id else None

        if channel is not None:
            description = lang.modlogs_enabled(channel.mention)
        else:
            description = lang.modlogs_disabled

        embed = discord.Embed(
            title=lang.modlogs,
            description=description,
            color=random.randint(0, 0xFFFFFF),
        )
        embed.set_footer(text=lang.modlogs_tip(prefix))
        await DiscordUtils.safe_send(message.channel, embed=embed)
        return

    if args[0].lower() == "disable":
        await client.modlog_repository.set_channel_id(guild.id, None)
        await DiscordUtils.safe_send(message.channel, lang.modlogs_disable_success)
        return

    validation = ValidationUtils.validate_channel_id(args[0])
    channel = client.get_channel(validation.value) if validation else None
    if not isinstance(channel, discord.TextChannel) or channel.guild.id != guild.id:
        await DiscordUtils.safe_send(message.channel, lang.invalid_channel)
        return

    permissions = channel.permissions_for(guild.me)
    if not permissions.send_messages or not permissions.embed_links:
        embed = discord.Embed(
            title=lang.modlogs_dont_have_perms,
            description=lang.modlogs_dont_have_perms_desc,
            color=WARNING_COLOR,
        )
        await DiscordUtils.safe_send(message.channel, embed=embed)
        return

    await client.modlog_repository.set_channel_id(guild.id, channel.id)
    await DiscordUtils.safe_send(message.channel, lang.modlogs_success(channel.name))
