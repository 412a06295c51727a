"""
Reload Command
Reloads a command module or every language file without a restart
"""

from typing import Any, List

from utils.discord import DiscordUtils
from utils.errors import CommandNotFoundError

COMMAND = {
    "name": "reload",
    "group": "owner",
    "description": "reload_description",
    "usage": "reload_usage",
    "owner_only": True,
}


async def run(client: Any, message: Any, args: List[str], prefix: str, lang: Any) -> None:
    if not args:
        await DiscordUtils.safe_send(message.channel, lang.reload_no_args)
        return

    target = args[0].lower()

    if target == "languages":
        client.reload_languages()
        await DiscordUtils.safe_send(
            message.channel,
            lang.reload_languages_success(len(client.languages)),
        )
        return

    try:
        client.reload_command(target)
    except CommandNotFoundError:
        await DiscordUtils.safe_send(message.channel, lang.reload_command_not_found(target))
        return

    await DiscordUtils.safe_send(message.channel, lang.reload_command_success(target))
